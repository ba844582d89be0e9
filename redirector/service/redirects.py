from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from starlette.types import ASGIApp

from ..api.dispatcher import RedirectDispatcher
from ..domain.loader import MalformedInputError, load_resolver
from ..domain.paths import MapResolver
from ..logging_conf import get_logger

logger = get_logger("service.redirects")


# ------------------------
# Use-cases
# ------------------------

def map_handler(paths_to_urls: Mapping[str, str] | None, fallback: ASGIApp) -> RedirectDispatcher:
    """Wrap `fallback` with redirects taken from a literal path -> url mapping."""
    resolver = MapResolver(paths_to_urls)
    logger.info("paths.loaded", extra={"event": "paths_loaded", "source": "map", "count": len(resolver)})
    return RedirectDispatcher(fallback, resolver)


def yaml_handler(yml: bytes | str, fallback: ASGIApp) -> RedirectDispatcher:
    """Wrap `fallback` with redirects parsed from a YAML document.

    Raises:
        MalformedInputError: if the document cannot be parsed; nothing is built.
    """
    resolver = load_resolver(yml)
    logger.info("paths.loaded", extra={"event": "paths_loaded", "source": "yaml", "count": len(resolver)})
    return RedirectDispatcher(fallback, resolver)


def load_paths_file(path: Path, *, strict: bool = True) -> MapResolver:
    """Read a YAML mapping file into a resolver.

    With ``strict=False`` a malformed document is logged and an empty resolver
    is returned instead. I/O errors always propagate.
    """
    data = path.read_bytes()
    try:
        resolver = load_resolver(data)
    except MalformedInputError as e:
        if strict:
            logger.error(
                "paths.malformed",
                extra={"event": "paths_malformed", "file": str(path), "error": str(e)},
            )
            raise
        logger.warning(
            "paths.malformed",
            extra={"event": "paths_malformed", "file": str(path), "error": str(e), "fallback": "empty"},
        )
        return MapResolver()

    logger.info(
        "paths.loaded",
        extra={"event": "paths_loaded", "source": "file", "file": str(path), "count": len(resolver)},
    )
    return resolver
