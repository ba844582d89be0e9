from __future__ import annotations

from fastapi import Response, status
from starlette.types import ASGIApp, Receive, Scope, Send

from ..domain.paths import MapResolver
from ..logging_conf import get_logger

__all__ = ["REDIRECT_STATE_KEY", "REDIRECT_STATUS_CODE", "RedirectDispatcher", "location_header"]

# Every redirect uses the same code; 307 keeps the client's method and body.
REDIRECT_STATUS_CODE = status.HTTP_307_TEMPORARY_REDIRECT

# Key under scope["state"] telling outer middleware where a request was sent.
REDIRECT_STATE_KEY = "redirect_location"

logger = get_logger("dispatch")


def location_header(url: str) -> str:
    """Return `url` as a Location value, hex-escaping only non-ASCII and control bytes.

    Printable ASCII passes through untouched, so ``|``, ``{}`` or an existing
    ``%7C`` reach the client exactly as stored.
    """
    if url.isascii() and url.isprintable():
        return url
    out: list[str] = []
    for ch in url:
        if " " <= ch <= "~":
            out.append(ch)
        else:
            out.extend(f"%{b:02X}" for b in ch.encode("utf-8"))
    return "".join(out)


class RedirectDispatcher:
    """ASGI app that redirects mapped paths and delegates everything else.

    `app` is the fallback handler. It receives the original scope, receive
    and send callables untouched whenever the path is unmapped or mapped to an
    empty destination. Works standalone or via ``FastAPI.add_middleware``.
    """

    def __init__(self, app: ASGIApp, resolver: MapResolver) -> None:
        self.app = app
        self.resolver = resolver

    async def handle(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        path = scope["path"]
        location = self.resolver.resolve(path)
        if not location:
            logger.debug(
                "redirect.miss",
                extra={"event": "redirect_miss", "path": path, "mapped": location is not None},
            )
            await self.app(scope, receive, send)
            return

        logger.info(
            "redirect.hit",
            extra={"event": "redirect_hit", "path": path, "location": location},
        )
        scope.setdefault("state", {})[REDIRECT_STATE_KEY] = location
        response = Response(
            status_code=REDIRECT_STATUS_CODE,
            headers={"location": location_header(location)},
        )
        await response(scope, receive, send)

    __call__ = handle
