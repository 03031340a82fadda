"""
Generic item endpoints for API v1.

Bodies are read as raw JSON: ``name`` is taken from an object body
whatever its type, and any other body counts as carrying no name.
"""

from typing import Any, List

from fastapi import APIRouter, Body, HTTPException, status

from reading_tracker_api.app.schemas.item import ItemRead
from reading_tracker_api.app.services.exceptions import NotFoundError
from reading_tracker_api.app.services.item_service import ItemService

router = APIRouter()


def _name_from(payload: Any) -> Any:
    return payload.get("name") if isinstance(payload, dict) else None


@router.get("", response_model=List[ItemRead])
async def list_items() -> List[ItemRead]:
    return await ItemService.list_items()


@router.get("/{item_id}", response_model=ItemRead)
async def get_item(item_id: int) -> ItemRead:
    try:
        return await ItemService.get_item(item_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.post("", response_model=ItemRead, status_code=status.HTTP_201_CREATED)
async def create_item(payload: Any = Body(None)) -> ItemRead:
    return await ItemService.create_item(_name_from(payload))


@router.patch("/{item_id}", response_model=ItemRead)
async def update_item(item_id: int, payload: Any = Body(None)) -> ItemRead:
    """Rename an item; a missing or null ``name`` leaves it unchanged."""
    try:
        return await ItemService.update_item(item_id, _name_from(payload))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(item_id: int) -> None:
    """Delete an item.  Unknown ids are ignored and still return 204."""
    await ItemService.delete_item(item_id)
    return None
