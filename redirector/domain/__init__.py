"""Pure domain pieces: path mapping and YAML loading.

Free of HTTP concerns so they can be unit-tested and reused by the
application and the CLI alike.
"""
from .loader import MalformedInputError, load_resolver
from .paths import MapResolver, PathUrlPair, build_path_map

__all__ = [
    "MalformedInputError",
    "MapResolver",
    "PathUrlPair",
    "build_path_map",
    "load_resolver",
]
