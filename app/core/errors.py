from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.menu.models import FieldError


class MenuError(RuntimeError):
    pass


class MenuItemNotFoundError(MenuError):
    def __init__(self, item_id: int | str) -> None:
        super().__init__(f"No menu item exists with id {item_id}")
        self.item_id = item_id


class MenuValidationError(MenuError):
    def __init__(self, errors: list[FieldError]) -> None:
        super().__init__("Validation failed")
        self.errors = errors
