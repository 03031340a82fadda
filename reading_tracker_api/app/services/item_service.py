"""
Service layer for generic items.

Items carry no domain rules: any JSON value (or none) is accepted as a
name, and deleting an unknown id is not an error.
"""

import logging
from typing import Any, List

from reading_tracker_api.app.core.store import ItemRecord, get_store
from reading_tracker_api.app.schemas.item import ItemRead
from reading_tracker_api.app.services.exceptions import NotFoundError

ITEM_NOT_FOUND = "Not found"


class ItemService:
    """Service class for generic items."""

    @classmethod
    async def list_items(cls) -> List[ItemRead]:
        return [cls._to_item_read(item) for item in get_store().list_items()]

    @classmethod
    async def get_item(cls, item_id: int) -> ItemRead:
        item = get_store().find_item_by_id(item_id)
        if item is None:
            raise NotFoundError(ITEM_NOT_FOUND)
        return cls._to_item_read(item)

    @classmethod
    async def create_item(cls, name: Any) -> ItemRead:
        store = get_store()
        item = ItemRecord(id=store.next_id("item"), name=name)
        store.insert_item(item)
        logging.getLogger(__name__).info("Created item %s", item.id)
        return cls._to_item_read(item)

    @classmethod
    async def update_item(cls, item_id: int, name: Any) -> ItemRead:
        """Rename an item.  ``None`` keeps the current name."""
        store = get_store()
        with store.lock:
            item = store.find_item_by_id(item_id)
            if item is None:
                raise NotFoundError(ITEM_NOT_FOUND)
            if name is not None:
                item.name = name
        return cls._to_item_read(item)

    @classmethod
    async def delete_item(cls, item_id: int) -> None:
        if get_store().delete_item(item_id):
            logging.getLogger(__name__).info("Deleted item %s", item_id)

    @staticmethod
    def _to_item_read(item: ItemRecord) -> ItemRead:
        return ItemRead(id=item.id, name=item.name)
