"""Consumable food database endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from macro_tracker.api.dependencies import get_container, optional_user
from macro_tracker.api.models import ConsumableRequest
from macro_tracker.api.serializers import serialize_consumable
from macro_tracker.containers import AppContainer
from macro_tracker.domain.models import UserRecord

router = APIRouter(prefix="/api/consumables", tags=["consumables"])


@router.get("")
async def list_consumables(
    user: UserRecord | None = Depends(optional_user),
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return consumables, scoped to the caller's house when known."""
    house_id = user.house_id if user else None
    consumables = container.consumable_service.list_consumables(house_id)
    return [serialize_consumable(item) for item in consumables]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_consumable(
    body: ConsumableRequest,
    user: UserRecord | None = Depends(optional_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Add a consumable to the caller's house."""
    consumable = container.consumable_service.create_consumable(
        body.model_dump(), house_id=user.house_id if user else None
    )
    return serialize_consumable(consumable)


@router.put("/{consumable_id}")
async def update_consumable(
    consumable_id: UUID,
    body: ConsumableRequest,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Replace a consumable's values."""
    consumable = container.consumable_service.update_consumable(
        consumable_id, body.model_dump()
    )
    return serialize_consumable(consumable)


@router.delete("/{consumable_id}")
async def delete_consumable(
    consumable_id: UUID,
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Remove a consumable; logged entries keep their snapshot."""
    container.consumable_service.delete_consumable(consumable_id)
    return {"message": "Consumable deleted"}
