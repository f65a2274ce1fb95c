"""Symbol resolution for the legacy ``use()`` module convention."""

from usenav.resolution.extractor import extract_symbols, find_member_line
from usenav.resolution.locator import ModuleLocator
from usenav.resolution.models import (
    Completion,
    Location,
    ReferenceChain,
    ResolvedModule,
    Symbol,
    SymbolKind,
)
from usenav.resolution.normalizer import normalize_specifier
from usenav.resolution.ops import ResolutionOps
from usenav.resolution.references import ReferenceResolver

__all__ = [
    "Completion",
    "Location",
    "ModuleLocator",
    "ReferenceChain",
    "ReferenceResolver",
    "ResolutionOps",
    "ResolvedModule",
    "Symbol",
    "SymbolKind",
    "extract_symbols",
    "find_member_line",
    "normalize_specifier",
]
