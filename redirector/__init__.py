"""URL redirector package.

Maps request paths to redirect targets loaded from a literal mapping or a
YAML document, and falls back to a wrapped ASGI application on misses.
"""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("url-redirector")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
