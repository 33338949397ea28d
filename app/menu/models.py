from __future__ import annotations

import math
from enum import Enum
from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

MENU_ITEM_FIELDS = (
    "name",
    "description",
    "price",
    "category",
    "ingredients",
    "available",
)


class Category(str, Enum):
    appetizer = "appetizer"
    entree = "entree"
    dessert = "dessert"
    beverage = "beverage"


CATEGORY_VALUES = tuple(category.value for category in Category)

# Integers stay integers so a price is echoed the way it was sent.
Price = Union[PositiveInt, Annotated[float, Field(gt=0, allow_inf_nan=False)]]

REQUIRED_MESSAGES = {
    "name": "Name is required",
    "description": "Description is required",
    "price": "Price is required",
    "category": "Category is required",
    "ingredients": "Ingredients are required",
}


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _require(value: Any, field: str) -> None:
    if _is_blank(value):
        raise ValueError(REQUIRED_MESSAGES[field])


def _validate_text(value: Any, field: str, label: str, min_length: int) -> str:
    _require(value, field)
    if not isinstance(value, str):
        raise ValueError(f"{label} must be a string")
    if len(value) < min_length:
        raise ValueError(f"{label} must be at least {min_length} characters long")
    return value


def _validate_price(value: Any) -> int | float:
    _require(value, "price")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Price must be a number")
    try:
        as_float = float(value)
    except OverflowError:
        raise ValueError("Price must be a number") from None
    if not math.isfinite(as_float):
        raise ValueError("Price must be a number")
    if value <= 0:
        raise ValueError("Price must be greater than 0")
    return value


def _validate_category(value: Any) -> str:
    _require(value, "category")
    if not isinstance(value, str):
        raise ValueError("Category must be a string")
    if value not in CATEGORY_VALUES:
        raise ValueError(f"Category must be one of: {', '.join(CATEGORY_VALUES)}")
    return value


def _validate_ingredients(value: Any) -> list[str]:
    _require(value, "ingredients")
    if not isinstance(value, list) or not value:
        raise ValueError("Ingredients must be an array with at least 1 item")
    if not all(isinstance(item, str) and item.strip() for item in value):
        raise ValueError("Each ingredient must be a non-empty string")
    return value


class MenuItemCreate(BaseModel):
    """Payload for a new menu item. Keys outside the menu fields are ignored."""

    model_config = ConfigDict(extra="ignore")

    name: str
    description: str
    price: Price
    category: Category
    ingredients: list[str]
    available: bool = True

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, value: Any) -> str:
        return _validate_text(value, "name", "Name", 3)

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, value: Any) -> str:
        return _validate_text(value, "description", "Description", 10)

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, value: Any) -> int | float:
        return _validate_price(value)

    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, value: Any) -> str:
        return _validate_category(value)

    @field_validator("ingredients", mode="before")
    @classmethod
    def validate_ingredients(cls, value: Any) -> list[str]:
        return _validate_ingredients(value)

    @field_validator("available", mode="before")
    @classmethod
    def validate_available(cls, value: Any) -> bool:
        if not isinstance(value, bool):
            raise ValueError("Available must be a boolean")
        return value


class MenuItemUpdate(MenuItemCreate):
    """Partial payload. Only keys present in ``model_fields_set`` are applied."""

    name: str | None = None
    description: str | None = None
    price: Price | None = None
    category: Category | None = None
    ingredients: list[str] | None = None
    available: bool | None = None


class MenuItem(BaseModel):
    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=3)
    description: str = Field(..., min_length=10)
    price: Price
    category: Category
    ingredients: list[str] = Field(..., min_length=1)
    available: bool = True


class FieldError(BaseModel):
    field: str
    message: str


class MenuListResponse(BaseModel):
    count: int
    items: list[MenuItem]


class MenuItemResponse(BaseModel):
    message: str
    item: MenuItem


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None
    details: list[FieldError] | None = None
