"""FastAPI app factory: path redirects in front of a health endpoint and JSON 404s."""
from __future__ import annotations

import time
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from redirector.api.dispatcher import REDIRECT_STATE_KEY, RedirectDispatcher
from redirector.config import Settings
from redirector.domain.paths import MapResolver
from redirector.logging_conf import get_logger, setup_logging
from redirector.service.redirects import load_paths_file

logger = get_logger("app")


def _startup_resolver(settings: Settings) -> MapResolver:
    if settings.paths_file is None:
        logger.info("paths.none", extra={"event": "paths_none"})
        return MapResolver()
    return load_paths_file(settings.paths_file, strict=settings.strict_load)


def create_app(settings: Settings | None = None, resolver: MapResolver | None = None) -> FastAPI:
    """Build the application.

    An explicit `resolver` wins over ``settings.paths_file``. Malformed mapping
    files abort startup unless ``settings.strict_load`` is off.
    """
    settings = settings or Settings.from_env()
    # Configure logging before anything else.
    setup_logging(settings.log_level)
    if resolver is None:
        resolver = _startup_resolver(settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger.info("startup", extra={"event": "startup", "count": len(resolver)})
        yield
        logger.info("shutdown", extra={"event": "shutdown"})

    app = FastAPI(
        title="URL Redirector",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.resolver = resolver

    # Everything below the dispatcher is the fallback for unmapped paths.
    app.add_middleware(RedirectDispatcher, resolver=resolver)

    @app.middleware("http")
    async def request_logger(request: Request, call_next: Callable[[Request], Response]):
        """Log each answered request with where it went.

        ``outcome`` is ``redirect`` when the dispatcher answered (``location``
        is what it sent) and ``fallback`` when the app behind it did. The
        X-Request-ID header is propagated, or minted, and echoed back.
        """
        request_id = request.headers.get("X-Request-ID") or str(uuid4())
        fields = {"method": request.method, "path": request.url.path, "request_id": request_id}
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("request.error", extra={"event": "request_error", **fields})
            raise

        location = request.scope.get("state", {}).get(REDIRECT_STATE_KEY)
        response.headers["X-Request-ID"] = request_id
        logger.info(
            "request.end",
            extra={
                "event": "request_end",
                **fields,
                "status_code": response.status_code,
                "outcome": "redirect" if location else "fallback",
                "location": location,
                "elapsed_ms": round((time.perf_counter() - start) * 1000.0, 2),
            },
        )
        return response

    @app.get("/health", summary="Liveness/readiness check")
    async def health() -> JSONResponse:
        return JSONResponse(content={"ok": True, "redirects": len(resolver)})

    return app


# ASGI entrypoint: `uvicorn redirector.main:app --port 8000`
app = create_app()
