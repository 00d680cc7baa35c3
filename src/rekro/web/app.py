"""FastAPI application factory for the pricing and profile API."""

import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from rekro.config import Settings
from rekro.logging import bind_request_context, clear_request_context, configure_logging, get_logger

logger = get_logger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag every log event of a request with its id, method and path."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        clear_request_context()
        bind_request_context(request_id=request_id, method=request.method, path=request.url.path)
        try:
            response = await call_next(request)
        finally:
            clear_request_context()
        response.headers["X-Request-ID"] = request_id
        return response


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Application settings. Loaded from env if not provided.
    """
    if settings is None:
        settings = Settings()

    configure_logging(json_output=settings.log_json)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("web_server_started", host=settings.web_host, port=settings.web_port)
        yield
        logger.info("web_server_stopped")

    app = FastAPI(title="Rekro Pricing", lifespan=lifespan)
    app.state.settings = settings
    app.state.pricing_config = settings.get_pricing_config()

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestContextMiddleware)

    from rekro.web.routes import router

    app.include_router(router)

    return app
