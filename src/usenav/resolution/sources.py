"""Whole-file reads for resolution queries.

Files are read on every query. Anything that cannot be read as UTF-8 text
within the size limit is reported as missing.
"""

from __future__ import annotations

from pathlib import Path

import structlog

log = structlog.get_logger(__name__)


def read_source(path: Path, max_bytes: int | None = None) -> str | None:
    """Read a source file, or None if it is too large, unreadable or not UTF-8."""
    try:
        if max_bytes is not None and path.stat().st_size > max_bytes:
            log.info("sources.too_large", path=str(path), max_bytes=max_bytes)
            return None
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.warning("sources.read_failed", path=str(path), error=str(e))
        return None
