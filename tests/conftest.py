from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.menu.store import MenuStore


@pytest.fixture()
def taco_payload() -> dict[str, Any]:
    return {
        "name": "Taco",
        "description": "A delicious taco with fresh salsa",
        "price": 4.5,
        "category": "entree",
        "ingredients": ["tortilla", "beef"],
    }


@pytest.fixture()
def menu_store() -> MenuStore:
    return MenuStore.seeded()


@pytest.fixture()
def client(menu_store: MenuStore):
    with TestClient(create_app(menu_store)) as test_client:
        yield test_client
