# schema2api/main.py
from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse, Response

from . import config
from .runtime.errors import MethodNotAllowed, NoSchemaLoaded, Schema2ApiError
from .runtime.observability import configure_logging, request_logger
from .runtime.router import Router
from .runtime.schema_store import SchemaStore

LOG = logging.getLogger("schema2api.http")

ALL_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"]


def _json(payload: Any, status_code: int = 200) -> Response:
    try:
        return JSONResponse(payload, status_code=status_code)
    except (TypeError, ValueError) as e:
        LOG.error(f"Error encoding response: {e}")
        return Response(status_code=status_code, media_type="application/json")


def create_app(store: Optional[SchemaStore] = None) -> FastAPI:
    store = store if store is not None else SchemaStore()
    router = Router(store)

    app = FastAPI(title="Schema2API", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.store = store
    app.state.router = router

    # ----------------------------------------------------------------------------------
    # Observability middleware (correlation id + PII redaction)
    # ----------------------------------------------------------------------------------
    app.middleware("http")(request_logger())

    @app.exception_handler(Schema2ApiError)
    async def handle_runtime_error(request: Request, exc: Schema2ApiError):
        LOG.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
        return _json({"detail": exc.detail}, status_code=exc.status_code)

    # Verbs outside ALL_METHODS never reach a route; keep upload and no-schema precedence for them too.
    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code != 405:
            return await http_exception_handler(request, exc)
        if request.url.path == "/upload":
            return await handle_runtime_error(request, MethodNotAllowed("Only POST allowed"))
        if store.current() is None:
            return await handle_runtime_error(request, NoSchemaLoaded())
        return await handle_runtime_error(request, MethodNotAllowed())

    # ----------------------------------------------------------------------------------
    # Schema upload
    # ----------------------------------------------------------------------------------
    @app.api_route("/upload", methods=ALL_METHODS)
    async def upload(request: Request):
        if request.method != "POST":
            raise MethodNotAllowed("Only POST allowed")
        schema = store.upload(await request.body())
        return _json({"message": "Schema uploaded successfully", "title": schema.title})

    # ----------------------------------------------------------------------------------
    # Catch-all CRUD routes (must be registered last)
    # ----------------------------------------------------------------------------------
    @app.api_route("/{path:path}", methods=ALL_METHODS)
    def catch_all(request: Request, path: str):
        return _json(router.dispatch(request.method, path))

    return app


configure_logging(config.LOG_LEVEL)
app = create_app()
