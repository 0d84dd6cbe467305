"""Persisted name -> id caches for Godspeed lists and labels."""

import logging
import tomllib
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path

import tomli_w

from ..models.reference import ReferenceKind
from .storage import atomic_write_text, read_text_or_empty

logger = logging.getLogger(__name__)

Fetcher = Callable[[], dict[str, str]]


def find_matching_id(mapping: Mapping[str, str], search: str) -> str | None:
    """
    Look up an id by name, case-insensitively.

    An exact key match wins. Otherwise the first key that starts with the
    search string is used; when several keys share that prefix the winner
    depends on mapping order (the order the API returned them in), so
    "@wo" may pick "work" or "workout".

    Args:
        mapping: Lowercased name -> id
        search: Name as typed by the user

    Returns:
        The matching id, or None
    """
    search_lower = search.lower()

    if search_lower in mapping:
        return mapping[search_lower]

    for key, ref_id in mapping.items():
        if key.startswith(search_lower):
            return ref_id

    return None


class ReferenceCache:
    """Cache of one reference kind, backed by a TOML file.

    There is no expiry: a stale cache is only noticed when a lookup misses,
    at which point the whole mapping is re-fetched and overwritten.
    """

    def __init__(self, kind: ReferenceKind, path: Path, fetcher: Fetcher):
        """Initialize the cache.

        Args:
            kind: Which reference kind this cache holds
            path: TOML file the mapping is persisted to
            fetcher: Callable returning the current mapping from the API
        """
        self.kind = kind
        self.path = path
        self._fetcher = fetcher
        self._mapping: dict[str, str] | None = None

    @property
    def mapping(self) -> dict[str, str]:
        """Lazy-load the mapping from disk."""
        if self._mapping is None:
            self._mapping = self.load()
        return self._mapping

    def load(self) -> dict[str, str]:
        """Read the cache file. Missing or malformed files load as empty."""
        content = read_text_or_empty(self.path)
        if not content:
            return {}

        try:
            table = tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            logger.warning(f"Ignoring malformed {self.kind.value} cache {self.path}: {e}")
            return {}

        return {key.lower(): value for key, value in table.items() if isinstance(value, str)}

    def save(self, mapping: Mapping[str, str]) -> None:
        """Write the mapping to disk, replacing the previous file."""
        self._mapping = dict(mapping)
        atomic_write_text(self.path, tomli_w.dumps(self._mapping))

    def find(self, name: str) -> str | None:
        return find_matching_id(self.mapping, name)

    def refresh(self) -> dict[str, str]:
        """Re-fetch the full mapping from the API and persist it.

        Raises:
            RemoteError: If the fetch fails
        """
        logger.info(f"Refreshing {self.kind.value} cache")
        mapping = self._fetcher()

        try:
            self.save(mapping)
        except OSError as e:
            logger.warning(f"Failed to save {self.kind.value} cache: {e}")
        self._mapping = mapping

        return mapping

    def resolve(self, name: str) -> str | None:
        """Resolve a name, refreshing once on a miss."""
        ref_id = self.find(name)
        if ref_id is not None:
            return ref_id

        self.refresh()
        ref_id = self.find(name)
        if ref_id is None:
            logger.info(f"No {self.kind.value} entry matches {name!r}")
        return ref_id

    def resolve_all(self, names: Iterable[str]) -> list[str]:
        """Resolve several names with at most one refresh.

        Names that still don't match after the refresh are left out.
        """
        names = list(names)
        if any(self.find(name) is None for name in names):
            self.refresh()

        resolved = []
        for name in names:
            ref_id = self.find(name)
            if ref_id is None:
                logger.info(f"No {self.kind.value} entry matches {name!r}")
            else:
                resolved.append(ref_id)
        return resolved
