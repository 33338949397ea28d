from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from app.core.errors import MenuItemNotFoundError
from app.menu.models import MenuItem
from app.menu.seed import SEED_MENU_ITEMS
from app.menu.validation import parse_menu_item

logger = structlog.get_logger(__name__)


class MenuStore:
    """In-memory menu collection keyed by id.

    Ids come from a counter that only moves forward, so a deleted id is
    never handed out again.
    """

    def __init__(self, items: Iterable[Mapping[str, Any]] = ()) -> None:
        self._items: dict[int, MenuItem] = {}
        self._next_id = 1
        for fields in items:
            self.create(fields)

    @classmethod
    def seeded(cls) -> MenuStore:
        return cls(SEED_MENU_ITEMS)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def next_id(self) -> int:
        return self._next_id

    def list_all(self) -> list[MenuItem]:
        return list(self._items.values())

    def get(self, item_id: int) -> MenuItem:
        item = self._items.get(item_id)
        if item is None:
            raise MenuItemNotFoundError(item_id)
        return item

    def create(self, fields: Mapping[str, Any]) -> MenuItem:
        payload = parse_menu_item(fields, partial=False)

        item = MenuItem(id=self._next_id, **payload.model_dump())
        self._items[item.id] = item
        self._next_id += 1

        logger.info("menu_item_created", item_id=item.id)
        return item

    def update(self, item_id: int, fields: Mapping[str, Any]) -> MenuItem:
        current = self.get(item_id)
        payload = parse_menu_item(fields, partial=True)

        changes = payload.model_dump(include=payload.model_fields_set)
        if not changes:
            return current

        # The merged record goes through the model again so a stored item
        # always satisfies every field constraint.
        item = MenuItem.model_validate({**current.model_dump(), **changes, "id": item_id})
        self._items[item_id] = item

        logger.info("menu_item_updated", item_id=item_id, fields=sorted(changes))
        return item

    def delete(self, item_id: int) -> MenuItem:
        item = self._items.pop(item_id, None)
        if item is None:
            raise MenuItemNotFoundError(item_id)

        logger.info("menu_item_deleted", item_id=item_id)
        return item

