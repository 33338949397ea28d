from __future__ import annotations

import uuid
from contextlib import asynccontextmanager

import sentry_sdk
import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.errors import MenuItemNotFoundError, MenuValidationError
from app.core.logging import body_for_log, configure_logging, request_id_ctx
from app.core.sentry import init_sentry
from app.menu.models import ErrorResponse, FieldError
from app.menu.routes import router as menu_router
from app.menu.store import MenuStore

configure_logging(settings.log_level)
logger = structlog.get_logger(__name__)

BODY_METHODS = ("POST", "PUT")

ENDPOINTS = {
    "GET /api/menu": "Get all menu items",
    "GET /api/menu/:id": "Get a specific menu item",
    "POST /api/menu": "Add a new menu item",
    "PUT /api/menu/:id": "Update a menu item",
    "DELETE /api/menu/:id": "Delete a menu item",
}


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _initial_store() -> MenuStore:
    if settings.seed_menu:
        return MenuStore.seeded()
    return MenuStore()


@asynccontextmanager
async def lifespan(app: FastAPI):
    sentry_enabled = init_sentry()
    logger.info(
        "service_started",
        port=settings.port,
        items=len(app.state.menu_store),
        sentry_enabled=sentry_enabled,
    )
    try:
        yield
    finally:
        logger.info("service_stopped")


async def add_request_context(request: Request, call_next):
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    request_id_token = request_id_ctx.set(request_id)

    try:
        log_fields: dict[str, object] = {"method": request.method, "path": request.url.path}
        if request.method in BODY_METHODS:
            log_fields["body"] = body_for_log(await request.body())
        logger.info("request_received", **log_fields)

        try:
            response = await call_next(request)
        except Exception as exc:
            # Handled here so the 500 is logged and reported under this request id.
            response = await unhandled_exception_handler(request, exc)
        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
        )
    finally:
        request_id_ctx.reset(request_id_token)

    response.headers["x-request-id"] = request_id
    return response


async def menu_item_not_found_handler(request: Request, exc: MenuItemNotFoundError):
    logger.warning("menu_item_not_found", path=request.url.path, item_id=exc.item_id)
    return _error_response(
        404,
        ErrorResponse(error="Menu item not found", message=str(exc)),
    )


async def menu_validation_handler(request: Request, exc: MenuValidationError):
    logger.warning(
        "menu_validation_failed",
        path=request.url.path,
        fields=[error.field for error in exc.errors],
    )
    return _error_response(400, ErrorResponse(error="Validation failed", details=exc.errors))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning("request_validation_failed", path=request.url.path, error=str(exc))
    details = [
        FieldError(
            field="body",
            message="Request body must be valid JSON"
            if error.get("type") == "json_invalid"
            else error.get("msg", "Invalid request body"),
        )
        for error in exc.errors()
    ]
    return _error_response(400, ErrorResponse(error="Validation failed", details=details))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (404, 405):
        return _error_response(
            404,
            ErrorResponse(
                error="Endpoint not found",
                message=(
                    f"The requested endpoint {request.method} {request.url.path} "
                    "does not exist"
                ),
            ),
        )
    return _error_response(exc.status_code, ErrorResponse(error=str(exc.detail)))


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled_exception", path=request.url.path)
    sentry_sdk.capture_exception(exc)
    return _error_response(
        500,
        ErrorResponse(
            error="Internal server error",
            message="Something went wrong on the server",
        ),
    )


def create_app(menu_store: MenuStore | None = None) -> FastAPI:
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.menu_store = menu_store if menu_store is not None else _initial_store()

    app.middleware("http")(add_request_context)
    app.add_exception_handler(MenuItemNotFoundError, menu_item_not_found_handler)
    app.add_exception_handler(MenuValidationError, menu_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/")
    async def root() -> dict[str, object]:
        return {"message": f"Welcome to {settings.app_name}", "endpoints": ENDPOINTS}

    @app.get("/health")
    async def health() -> dict[str, str]:
        logger.info("health_check")
        return {"status": "ok"}

    app.include_router(menu_router)
    return app


app = create_app()


def run() -> None:
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
