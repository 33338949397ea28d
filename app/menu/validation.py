"""Field-level validation for menu item payloads.

The rules live on ``MenuItemCreate``; ``MenuItemUpdate`` inherits them with
every field optional, so an update only checks the keys it carries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from app.core.errors import MenuValidationError
from app.menu.models import (
    MENU_ITEM_FIELDS,
    REQUIRED_MESSAGES,
    FieldError,
    MenuItemCreate,
    MenuItemUpdate,
)


def _field_error(error: dict[str, Any]) -> FieldError:
    loc = error.get("loc") or ("body",)
    field = str(loc[0])
    if error.get("type") == "missing" and field in REQUIRED_MESSAGES:
        return FieldError(field=field, message=REQUIRED_MESSAGES[field])
    reason = (error.get("ctx") or {}).get("error")
    message = str(reason) if isinstance(reason, ValueError) else error.get("msg", "Invalid value")
    return FieldError(field=field, message=message)


def _field_order(error: FieldError) -> int:
    if error.field in MENU_ITEM_FIELDS:
        return MENU_ITEM_FIELDS.index(error.field)
    return len(MENU_ITEM_FIELDS)


def to_field_errors(exc: ValidationError) -> list[FieldError]:
    """One error per field, in menu field order."""
    errors: dict[str, FieldError] = {}
    for error in exc.errors():
        field_error = _field_error(error)
        errors.setdefault(field_error.field, field_error)
    return sorted(errors.values(), key=_field_order)


def parse_menu_item(
    fields: Mapping[str, Any], *, partial: bool = False
) -> MenuItemCreate | MenuItemUpdate:
    model = MenuItemUpdate if partial else MenuItemCreate
    try:
        return model.model_validate(dict(fields))
    except ValidationError as exc:
        raise MenuValidationError(to_field_errors(exc)) from exc


def validate_menu_item(fields: Mapping[str, Any], *, partial: bool = False) -> list[FieldError]:
    """Return every rule violation in ``fields``; empty when the payload is valid."""
    try:
        parse_menu_item(fields, partial=partial)
    except MenuValidationError as exc:
        return exc.errors
    return []
