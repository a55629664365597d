"""FastAPI application: GraphQL endpoint plus health/diagnostics."""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from strawberry.fastapi import GraphQLRouter

from space_trips.api.graphql_schema import schema
from space_trips.api.schemas import DiagnosticsResponse, HealthResponse
from space_trips.application.context import AppContext, make_app_context, make_request_context
from space_trips.infrastructure.cache import catalog_cache
from space_trips.infrastructure.config import get_env, is_enabled

_api_logger = logging.getLogger("space-trips.api")

load_dotenv()


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject security response headers."""
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"
        return response


_ctx_lock = threading.Lock()


def get_app_context(app: FastAPI) -> AppContext:
    """Build data-source handles on first use so importing the app stays side-effect free."""
    ctx = getattr(app.state, "app_ctx", None)
    if ctx is None:
        with _ctx_lock:
            ctx = getattr(app.state, "app_ctx", None)
            if ctx is None:
                ctx = make_app_context()
                app.state.app_ctx = ctx
    return ctx


async def get_context(request: Request) -> dict[str, Any]:
    app_ctx = get_app_context(request.app)
    return {
        "request_ctx": make_request_context(
            app_ctx,
            authorization=request.headers.get("authorization"),
            trace_id=request.headers.get("x-request-id"),
        ),
        "fanout": asyncio.Semaphore(app_ctx.settings.fanout_max_workers),
    }


def create_app(app_ctx: Optional[AppContext] = None) -> FastAPI:
    app = FastAPI(
        title="space-trips",
        version="1.0.0",
        docs_url="/docs" if is_enabled("ENABLE_DOCS") else None,
        redoc_url=None,
    )
    app.state.app_ctx = app_ctx

    app.add_middleware(SecurityHeadersMiddleware)
    # CORS: restrict origins in production
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in (get_env("CORS_ORIGINS", "*") or "*").split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(GraphQLRouter(schema, context_getter=get_context), prefix="/graphql")

    @app.get("/health", response_model=HealthResponse)
    def health():
        return HealthResponse(status="ok")

    @app.get("/diagnostics", response_model=DiagnosticsResponse)
    def diagnostics():
        """Internal diagnostics: data-source backends and catalog cache stats."""
        ctx = get_app_context(app)
        return DiagnosticsResponse(
            catalog_source=getattr(ctx.catalog, "source", "unknown"),
            store_backend=getattr(ctx.store, "backend", "unknown"),
            catalog_cache=catalog_cache.stats,
        )

    _api_logger.info("space-trips API initialized")
    return app


app = create_app()
