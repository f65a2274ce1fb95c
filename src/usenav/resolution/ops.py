"""Resolution operations - definition and completion queries.

Pure functions of their inputs plus the read-only file system. Every
unresolvable step yields "no result": entry points return None or an empty
list and never raise to the caller. A miss is indistinguishable from
"nothing found".

Pipeline shared by the chain-based queries:

    ReferenceResolver (text -> raw specifier)
      -> normalize_specifier (raw -> canonical)
      -> ModuleLocator (canonical -> file)
      -> read + extract (file -> members)
"""

from __future__ import annotations

from pathlib import Path

import structlog

from usenav.config.models import ResolutionConfig
from usenav.resolution.cache import SymbolCache
from usenav.resolution.extractor import extract_symbols, find_member_line
from usenav.resolution.locator import ModuleLocator
from usenav.resolution.models import (
    Completion,
    Location,
    ReferenceChain,
    ResolvedModule,
    Symbol,
)
from usenav.resolution.normalizer import normalize_specifier
from usenav.resolution.references import ReferenceResolver

log = structlog.get_logger(__name__)


class ResolutionOps:
    """Definition and completion queries for one project root.

    ``repo_root`` is the first workspace folder. Without one, every query
    yields no result.
    """

    def __init__(self, repo_root: Path | None, config: ResolutionConfig | None = None) -> None:
        self._config = config or ResolutionConfig()
        self._max_bytes = self._config.max_file_size_kb * 1024
        self._locator = ModuleLocator(repo_root) if repo_root is not None else None
        self._resolver = (
            ReferenceResolver(self._locator, max_bytes=self._max_bytes)
            if self._locator is not None
            else None
        )
        self._cache = (
            SymbolCache(self._config.symbol_cache.max_entries)
            if self._config.symbol_cache.enabled
            else None
        )

    @property
    def cache(self) -> SymbolCache | None:
        return self._cache

    def find_model_file(self, name: str) -> Path | None:
        """Locate the file of a model by name."""
        if self._locator is None:
            return None
        return self._locator.find_model_file(name)

    def resolve_specifier_location(self, raw: str | None) -> Location | None:
        """Definition of a ``use('...')`` specifier: the target file at line 0."""
        if self._locator is None:
            return None
        canonical = normalize_specifier(raw)
        if canonical is None:
            return None
        path = self._locator.resolve(canonical)
        if path is None:
            return None
        log.debug("ops.specifier_resolved", specifier=canonical, path=str(path))
        return Location(path=path, line=0)

    def resolve_module(self, document_text: str, chain: ReferenceChain) -> ResolvedModule | None:
        """Resolve a reference chain to the module file it refers to."""
        if self._locator is None or self._resolver is None or chain.is_self:
            return None
        raw = self._resolver.resolve_chain(document_text, chain.head, chain.tail)
        canonical = normalize_specifier(raw)
        if canonical is None:
            return None
        path = self._locator.resolve(canonical)
        if path is None:
            return None
        return ResolvedModule(specifier=canonical, path=path)

    def resolve_member_location(
        self,
        document_text: str,
        chain: ReferenceChain,
        member: str,
    ) -> Location | None:
        """Definition of ``chain.member``.

        Falls back to the top of the resolved file when no line declares the
        member.
        """
        module = self.resolve_module(document_text, chain)
        if module is None:
            return None
        text = module.read_text(self._max_bytes)
        if text is None:
            return None
        line = find_member_line(text, member)
        if line is None:
            log.debug("ops.member_not_declared", path=str(module.path), member=member)
            line = 0
        return Location(path=module.path, line=line)

    def list_completions(self, document_text: str, chain: ReferenceChain) -> list[Completion]:
        """Members that can follow ``chain.``, unique by name, in discovery order."""
        module = self.resolve_module(document_text, chain)
        if module is None:
            return []
        symbols = self._symbols(module)
        if symbols is None:
            return []
        log.debug("ops.completions", chain=str(chain), path=str(module.path), count=len(symbols))
        return [Completion.from_symbol(s) for s in symbols]

    def _symbols(self, module: ResolvedModule) -> list[Symbol] | None:
        def extract() -> list[Symbol] | None:
            text = module.read_text(self._max_bytes)
            return extract_symbols(text) if text is not None else None

        if self._cache is None:
            return extract()
        return self._cache.get_or_extract(module.path, extract)
