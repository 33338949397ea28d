from app.menu.models import Category, FieldError, MenuItem
from app.menu.store import MenuStore
from app.menu.validation import parse_menu_item, validate_menu_item

__all__ = [
    "Category",
    "FieldError",
    "MenuItem",
    "MenuStore",
    "parse_menu_item",
    "validate_menu_item",
]
