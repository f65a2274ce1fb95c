"""Per-file symbol cache keyed on modification time and size.

Every lookup re-stats the file before trusting an entry, so a changed file is
always re-extracted. Single-threaded use only: queries are synchronous and
never overlap.
"""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Callable
from pathlib import Path

import structlog

from usenav.resolution.models import Symbol

log = structlog.get_logger(__name__)

_StatKey = tuple[int, int]  # (mtime_ns, size)


class SymbolCache:
    """LRU cache of extracted symbols per file."""

    def __init__(self, max_entries: int = 256) -> None:
        self._max_entries = max_entries
        self._entries: OrderedDict[Path, tuple[_StatKey, tuple[Symbol, ...]]] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def get_or_extract(
        self,
        path: Path,
        extract: Callable[[], list[Symbol] | None],
    ) -> list[Symbol] | None:
        """Return cached symbols for path, or run extract and cache its result.

        A None result from extract (unreadable file) is not cached.
        """
        try:
            st = path.stat()
        except OSError:
            self.invalidate(path)
            return extract()
        key = (st.st_mtime_ns, st.st_size)

        entry = self._entries.get(path)
        if entry is not None and entry[0] == key:
            self._entries.move_to_end(path)
            self.hits += 1
            return list(entry[1])

        self.misses += 1
        symbols = extract()
        if symbols is None:
            self.invalidate(path)
            return None
        self._entries[path] = (key, tuple(symbols))
        self._entries.move_to_end(path)
        while len(self._entries) > self._max_entries:
            evicted, _ = self._entries.popitem(last=False)
            log.debug("cache.evicted", path=str(evicted))
        return symbols

    def invalidate(self, path: Path) -> None:
        self._entries.pop(path, None)

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0
