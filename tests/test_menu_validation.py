"""
Tests for menu item field validation.

Verifies that:
- Create payloads require every field except `available`
- Update payloads only check the fields they carry
- Violations across fields are all reported, in field order
"""

from __future__ import annotations

from typing import Any

import pytest

from app.core.errors import MenuValidationError
from app.menu.validation import parse_menu_item, validate_menu_item


def _fields(errors) -> list[str]:
    return [error.field for error in errors]


def _messages(errors) -> dict[str, str]:
    return {error.field: error.message for error in errors}


class TestCreateValidation:
    """Full validation used when creating an item."""

    def test_valid_payload_has_no_errors(self, taco_payload: dict[str, Any]) -> None:
        assert validate_menu_item(taco_payload) == []

    def test_available_is_optional(self, taco_payload: dict[str, Any]) -> None:
        assert "available" not in taco_payload
        assert validate_menu_item(taco_payload, partial=False) == []

    def test_empty_payload_reports_every_required_field(self) -> None:
        errors = validate_menu_item({})

        assert _fields(errors) == ["name", "description", "price", "category", "ingredients"]
        assert _messages(errors) == {
            "name": "Name is required",
            "description": "Description is required",
            "price": "Price is required",
            "category": "Category is required",
            "ingredients": "Ingredients are required",
        }

    def test_short_name_and_missing_fields_reported_together(self) -> None:
        errors = validate_menu_item({"name": "Hi"})

        assert _fields(errors) == ["name", "description", "price", "category", "ingredients"]
        assert _messages(errors)["name"] == "Name must be at least 3 characters long"

    def test_short_name_and_non_positive_price_both_reported(
        self, taco_payload: dict[str, Any]
    ) -> None:
        errors = validate_menu_item({**taco_payload, "name": "Ta", "price": 0})

        assert _messages(errors) == {
            "name": "Name must be at least 3 characters long",
            "price": "Price must be greater than 0",
        }

    def test_null_and_empty_string_count_as_missing(self, taco_payload: dict[str, Any]) -> None:
        errors = validate_menu_item({**taco_payload, "name": "", "description": None})

        assert _messages(errors) == {
            "name": "Name is required",
            "description": "Description is required",
        }


class TestFieldRules:
    """Individual field rules."""

    @pytest.mark.parametrize(
        ("field", "value", "message"),
        [
            ("name", 123, "Name must be a string"),
            ("description", "Too short", "Description must be at least 10 characters long"),
            ("description", ["a", "list"], "Description must be a string"),
            ("price", "4.50", "Price must be a number"),
            ("price", True, "Price must be a number"),
            ("price", -1, "Price must be greater than 0"),
            ("price", float("inf"), "Price must be a number"),
            ("price", float("-inf"), "Price must be a number"),
            ("price", float("nan"), "Price must be a number"),
            ("price", 10**400, "Price must be a number"),
            ("category", "snack", "Category must be one of: appetizer, entree, dessert, beverage"),
            ("category", 7, "Category must be a string"),
            ("ingredients", [], "Ingredients must be an array with at least 1 item"),
            ("ingredients", "beef", "Ingredients must be an array with at least 1 item"),
            ("ingredients", ["beef", "   "], "Each ingredient must be a non-empty string"),
            ("ingredients", ["beef", 3], "Each ingredient must be a non-empty string"),
            ("available", "yes", "Available must be a boolean"),
            ("available", None, "Available must be a boolean"),
        ],
    )
    def test_invalid_value_rejected(
        self, taco_payload: dict[str, Any], field: str, value: Any, message: str
    ) -> None:
        errors = validate_menu_item({**taco_payload, field: value})

        assert _messages(errors) == {field: message}

    def test_integer_price_accepted(self, taco_payload: dict[str, Any]) -> None:
        assert validate_menu_item({**taco_payload, "price": 5}) == []

    def test_every_category_accepted(self, taco_payload: dict[str, Any]) -> None:
        for category in ("appetizer", "entree", "dessert", "beverage"):
            assert validate_menu_item({**taco_payload, "category": category}) == []

    def test_available_false_accepted(self, taco_payload: dict[str, Any]) -> None:
        assert validate_menu_item({**taco_payload, "available": False}) == []


class TestPartialValidation:
    """Validation used when updating an item."""

    def test_empty_payload_is_valid(self) -> None:
        assert validate_menu_item({}, partial=True) == []

    def test_only_present_fields_checked(self) -> None:
        assert validate_menu_item({"price": 10.5}, partial=True) == []

    def test_present_fields_still_validated(self) -> None:
        errors = validate_menu_item({"name": "Hi", "price": -3}, partial=True)

        assert _messages(errors) == {
            "name": "Name must be at least 3 characters long",
            "price": "Price must be greater than 0",
        }

    def test_present_but_null_field_is_required(self) -> None:
        errors = validate_menu_item({"category": None}, partial=True)

        assert _messages(errors) == {"category": "Category is required"}

    def test_unknown_keys_ignored(self) -> None:
        assert validate_menu_item({"id": 42, "spicy": True}, partial=True) == []


class TestParsedPayload:
    """Values handed on to the store after validation."""

    def test_integer_price_stays_integer(self, taco_payload: dict[str, Any]) -> None:
        payload = parse_menu_item({**taco_payload, "price": 5})

        assert payload.price == 5
        assert isinstance(payload.price, int)

    def test_float_price_stays_float(self, taco_payload: dict[str, Any]) -> None:
        payload = parse_menu_item(taco_payload)

        assert payload.price == 4.5
        assert isinstance(payload.price, float)

    def test_update_tracks_only_supplied_fields(self) -> None:
        payload = parse_menu_item({"price": 10.5, "id": 9}, partial=True)

        assert payload.model_fields_set == {"price"}

    def test_invalid_payload_raises_with_all_errors(self) -> None:
        with pytest.raises(MenuValidationError) as exc_info:
            parse_menu_item({"name": "Hi", "price": float("nan")})

        assert [error.field for error in exc_info.value.errors] == [
            "name",
            "description",
            "price",
            "category",
            "ingredients",
        ]
        assert exc_info.value.errors[2].message == "Price must be a number"
