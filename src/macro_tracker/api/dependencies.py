"""Shared FastAPI dependencies."""

from datetime import date
from uuid import UUID

from fastapi import Depends, Header, Query, Request

from macro_tracker.containers import AppContainer
from macro_tracker.domain.errors import InvalidInputError
from macro_tracker.domain.models import UserRecord


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def _parse_user_id(raw: str) -> UUID:
    try:
        return UUID(raw.strip())
    except ValueError:
        raise InvalidInputError("x-user-id", "Invalid user ID") from None


async def require_user(
    x_user_id: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> UserRecord:
    """Resolve the caller from the X-User-Id header.

    There is no authentication: any known user id is trusted.
    """
    if not x_user_id:
        raise InvalidInputError("x-user-id", "User ID required")
    return container.user_service.require_user(_parse_user_id(x_user_id))


async def optional_user(
    x_user_id: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> UserRecord | None:
    """Resolve the caller when the X-User-Id header is present."""
    if not x_user_id:
        return None
    return container.user_service.require_user(_parse_user_id(x_user_id))


async def require_date(day: date | None = Query(default=None, alias="date")) -> date:
    """Return the ``date`` query parameter or raise when it is missing."""
    if day is None:
        raise InvalidInputError("date", "Date parameter required")
    return day
