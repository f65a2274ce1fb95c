"""Canonical specifier -> file path lookup.

Every check is an existence check against the real file system. No content
is read here and nothing is cached: results always reflect the disk at call
time.
"""

from __future__ import annotations

import os
from pathlib import Path

import structlog

from usenav.config.constants import MODELS_DIR, SOURCE_DIR, SOURCE_EXTENSIONS
from usenav.resolution.models import is_identifier

log = structlog.get_logger(__name__)


class ModuleLocator:
    """Maps canonical specifiers and model names to files under one root."""

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    @property
    def models_root(self) -> Path:
        return self._root / SOURCE_DIR / MODELS_DIR

    def resolve(self, canonical: str) -> Path | None:
        """Resolve a canonical specifier to an existing file.

        Tries ``<root>/<canonical>.js``, then ``.ts``, then the specifier
        verbatim (for specifiers that already carry an extension).
        """
        if not canonical:
            return None
        base = self._root / canonical
        for ext in SOURCE_EXTENSIONS:
            candidate = base.with_name(base.name + ext)
            if _is_file(candidate):
                return candidate
        if _is_file(base):
            return base
        log.debug("locator.unresolved", specifier=canonical)
        return None

    def find_model_file(self, name: str) -> Path | None:
        """Find the file of a model by name.

        Lookup order:
        1. Flat layout: ``Models/<name>.<ext>``
        2. Nested layout: ``Models/<name>/<name>.<ext>``
        3. Depth-first search of the whole models subtree, matching
           basenames case-insensitively.

        When several same-named files exist in different directories the
        search returns one valid match, not a unique one. Entries are visited
        in name order so the pick is stable for a given tree.
        """
        if not is_identifier(name):
            return None

        models_root = self.models_root
        for ext in SOURCE_EXTENSIONS:
            flat = models_root / f"{name}{ext}"
            if _is_file(flat):
                return flat
        for ext in SOURCE_EXTENSIONS:
            nested = models_root / name / f"{name}{ext}"
            if _is_file(nested):
                return nested

        targets = frozenset(f"{name.lower()}{ext}" for ext in SOURCE_EXTENSIONS)
        found = _find_file_recursive(models_root, targets)
        if found is None:
            log.debug("locator.model_missing", model=name)
        return found


def _is_file(path: Path) -> bool:
    """``path.is_file()`` that treats OS errors (e.g. a name too long) as a miss."""
    try:
        return path.is_file()
    except OSError as e:
        log.debug("locator.probe_failed", path=str(path), error=str(e))
        return False


def _find_file_recursive(start_dir: Path, basenames: frozenset[str]) -> Path | None:
    """Stack-based depth-first search for a file whose lowercased name is in basenames.

    Directories that cannot be listed are skipped. Symlinked directories are
    not followed.
    """
    stack: list[str] = [str(start_dir)]
    while stack:
        directory = stack.pop()
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            log.debug("locator.dir_skipped", path=directory, error=str(e))
            continue

        subdirs: list[str] = []
        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(entry.path)
                elif entry.is_file() and entry.name.lower() in basenames:
                    return Path(entry.path)
            except OSError:
                continue
        # Reversed so the alphabetically first subdirectory is popped first
        stack.extend(reversed(subdirs))
    return None
