"""Shared fixtures: sample mappings and a fallback app that records what it saw."""
from __future__ import annotations

import pytest
from starlette.responses import PlainTextResponse

from redirector.domain.paths import MapResolver

SAMPLE_YAML = b"""\
- path: /urlshort
  url: https://github.com/gophercises/urlshort
- path: /urlshort-final
  url: https://github.com/gophercises/urlshort/tree/solution
"""


class RecordingApp:
    """Fallback ASGI app: records each request and answers 404."""

    def __init__(self) -> None:
        self.calls: list[dict] = []

    async def __call__(self, scope, receive, send) -> None:
        body = b""
        while True:
            message = await receive()
            body += message.get("body", b"")
            if not message.get("more_body"):
                break
        self.calls.append(
            {
                "method": scope["method"],
                "path": scope["path"],
                "query_string": scope["query_string"],
                "headers": dict(scope["headers"]),
                "body": body,
            }
        )
        response = PlainTextResponse("fallback", status_code=404)
        await response(scope, receive, send)


@pytest.fixture
def fallback() -> RecordingApp:
    return RecordingApp()


@pytest.fixture
def paths_to_urls() -> dict[str, str]:
    return {
        "/google": "https://www.google.com",
        "/amazon": "",
    }


@pytest.fixture
def resolver(paths_to_urls) -> MapResolver:
    return MapResolver(paths_to_urls)


@pytest.fixture
def sample_yaml() -> bytes:
    return SAMPLE_YAML


@pytest.fixture
def paths_file(tmp_path, sample_yaml):
    path = tmp_path / "paths.yaml"
    path.write_bytes(sample_yaml)
    return path
