"""Food entry endpoints."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, status

from macro_tracker.api.dependencies import get_container, require_date, require_user
from macro_tracker.api.models import DuplicateEntryRequest, FoodEntryRequest
from macro_tracker.api.serializers import serialize_entry
from macro_tracker.containers import AppContainer
from macro_tracker.domain.models import UserRecord

router = APIRouter(prefix="/api/food-entries", tags=["food-entries"])


@router.get("")
async def list_entries(
    user: UserRecord = Depends(require_user),
    day: date = Depends(require_date),
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return the caller's entries for a date, newest first."""
    entries = container.food_entry_service.list_entries(user.id, day)
    return [serialize_entry(entry) for entry in entries]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_entry(
    body: FoodEntryRequest,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Log a food entry."""
    entry = container.food_entry_service.create_entry(user.id, body.model_dump())
    return serialize_entry(entry)


@router.post("/{entry_id}/duplicate", status_code=status.HTTP_201_CREATED)
async def duplicate_entry(
    entry_id: UUID,
    body: DuplicateEntryRequest | None = None,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Log an existing entry again."""
    entry = container.food_entry_service.duplicate_entry(
        user.id, entry_id, body.date if body else None
    )
    return serialize_entry(entry)


@router.delete("/{entry_id}")
async def delete_entry(
    entry_id: UUID,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Delete one of the caller's entries."""
    container.food_entry_service.delete_entry(user.id, entry_id)
    return {"message": "Food entry deleted"}
