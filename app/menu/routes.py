from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Request

from app.core.errors import MenuItemNotFoundError, MenuValidationError
from app.menu.models import FieldError, MenuItem, MenuItemResponse, MenuListResponse
from app.menu.store import MenuStore

router = APIRouter(prefix="/api/menu", tags=["menu"])


def get_menu_store(request: Request) -> MenuStore:
    return request.app.state.menu_store


StoreDep = Annotated[MenuStore, Depends(get_menu_store)]
PayloadBody = Annotated[Any, Body()]


def _parse_item_id(raw: str) -> int:
    # int() would also take " 1" and "1_0"
    if not (raw.isascii() and raw.isdecimal()):
        raise MenuItemNotFoundError(raw)
    return int(raw)


def _payload_fields(payload: Any) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise MenuValidationError(
            [FieldError(field="body", message="Request body must be a JSON object")]
        )
    return payload


@router.get("", response_model=MenuListResponse)
async def list_menu_items(store: StoreDep) -> MenuListResponse:
    return MenuListResponse(count=len(store), items=store.list_all())


@router.get("/{item_id}", response_model=MenuItem)
async def get_menu_item(item_id: str, store: StoreDep) -> MenuItem:
    return store.get(_parse_item_id(item_id))


@router.post("", response_model=MenuItemResponse, status_code=201)
async def create_menu_item(store: StoreDep, payload: PayloadBody = None) -> MenuItemResponse:
    item = store.create(_payload_fields(payload))
    return MenuItemResponse(message="Menu item created successfully", item=item)


@router.put("/{item_id}", response_model=MenuItemResponse)
async def update_menu_item(
    item_id: str, store: StoreDep, payload: PayloadBody = None
) -> MenuItemResponse:
    resolved_id = _parse_item_id(item_id)
    store.get(resolved_id)
    item = store.update(resolved_id, _payload_fields(payload))
    return MenuItemResponse(message="Menu item updated successfully", item=item)


@router.delete("/{item_id}", response_model=MenuItemResponse)
async def delete_menu_item(item_id: str, store: StoreDep) -> MenuItemResponse:
    item = store.delete(_parse_item_id(item_id))
    return MenuItemResponse(message="Menu item deleted successfully", item=item)
