from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

__all__ = [
    "PathUrlPair",
    "build_path_map",
    "MapResolver",
]


class PathUrlPair(BaseModel):
    """One ``path`` -> ``url`` entry of a mapping document."""

    model_config = ConfigDict(frozen=True)

    path: str
    url: str


def build_path_map(pairs: Iterable[PathUrlPair] | None) -> dict[str, str]:
    """Collapse pairs into a path -> url dict.

    ``None`` is treated as an empty sequence. When a path repeats, the last
    occurrence wins.
    """
    return {pair.path: pair.url for pair in pairs or ()}


class MapResolver:
    """Read-only lookup from request path to destination URL.

    Paths are compared by exact string equality: no pattern matching, no
    trailing-slash or query-string handling. Destinations are stored as given,
    including empty strings.
    """

    __slots__ = ("_paths",)

    def __init__(self, paths_to_urls: Mapping[str, str] | None = None) -> None:
        self._paths: Mapping[str, str] = MappingProxyType(dict(paths_to_urls or {}))

    @classmethod
    def from_pairs(cls, pairs: Iterable[PathUrlPair] | None) -> MapResolver:
        return cls(build_path_map(pairs))

    def resolve(self, path: str) -> str | None:
        """Return the destination for `path`, or None when it is not mapped."""
        return self._paths.get(path)

    def as_dict(self) -> dict[str, str]:
        return dict(self._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __repr__(self) -> str:
        return f"MapResolver({len(self._paths)} paths)"
