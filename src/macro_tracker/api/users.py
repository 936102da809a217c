"""User listing endpoints."""

from fastapi import APIRouter, Depends

from macro_tracker.api.dependencies import get_container
from macro_tracker.api.serializers import serialize_user
from macro_tracker.containers import AppContainer

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
async def list_users(
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return every user for the user selector."""
    return [serialize_user(user) for user in container.user_service.list_users()]
