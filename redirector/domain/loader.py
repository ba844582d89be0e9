from __future__ import annotations

import yaml
from pydantic import TypeAdapter, ValidationError

from .paths import MapResolver, PathUrlPair

__all__ = [
    "MalformedInputError",
    "parse_pairs",
    "load_resolver",
]

_PAIRS = TypeAdapter(list[PathUrlPair])


class MalformedInputError(ValueError):
    """Raised when a mapping document is not valid YAML or has the wrong shape.

    The `code` attribute gives callers a stable machine-readable identifier.
    """

    code: str = "malformed_input"


def parse_pairs(yml: bytes | str) -> list[PathUrlPair]:
    """Parse a YAML sequence of ``{path, url}`` mappings.

    An empty document yields an empty list.

    Raises:
        MalformedInputError: on YAML syntax errors, when the top level is not a
            sequence, when nesting exceeds the recursion limit, or when an
            entry lacks a string ``path`` or ``url``.
    """
    try:
        data = yaml.safe_load(yml)
    except yaml.YAMLError as e:
        raise MalformedInputError(f"YAML could not be parsed: {e}") from e
    except RecursionError as e:
        # the composer recurses once per nesting level
        raise MalformedInputError("YAML could not be parsed: nesting too deep") from e

    if data is None:
        return []
    if not isinstance(data, list):
        raise MalformedInputError(
            f"expected a sequence of path/url mappings, got {type(data).__name__}"
        )

    try:
        return _PAIRS.validate_python(data)
    except ValidationError as e:
        raise MalformedInputError(f"invalid path/url entry: {e}") from e


def load_resolver(yml: bytes | str) -> MapResolver:
    """Build a MapResolver from a YAML mapping document (last path wins)."""
    return MapResolver.from_pairs(parse_pairs(yml))
