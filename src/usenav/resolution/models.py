"""Value types for resolution queries.

All values are transient: built for one query and discarded after it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from usenav.resolution.sources import read_source

_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")

SELF_IDENTIFIER = "this"


def is_identifier(name: str | None) -> bool:
    """True for a plain JS identifier (letters, digits, ``_`` and ``$``)."""
    return name is not None and _IDENTIFIER.match(name) is not None


class SymbolKind(str, Enum):
    """Classification of a declared member."""

    METHOD = "method"
    STATIC_METHOD = "static_method"
    FUNCTION = "function"
    EXPORTED_PROPERTY = "exported_property"
    STATIC_PROPERTY = "static_property"


@dataclass(frozen=True, slots=True)
class Symbol:
    """A member declared in a source file."""

    name: str
    kind: SymbolKind


@dataclass(frozen=True, slots=True)
class ReferenceChain:
    """``head`` or ``head.tail`` immediately preceding the cursor."""

    head: str
    tail: str | None = None

    @property
    def is_self(self) -> bool:
        return self.head == SELF_IDENTIFIER

    @classmethod
    def parse(cls, text: str) -> ReferenceChain | None:
        """Parse ``"A"`` or ``"A.b"``. Longer chains and non-identifiers yield None."""
        parts = text.strip().split(".")
        if len(parts) > 2 or not all(is_identifier(p) for p in parts):
            return None
        return cls(parts[0], parts[1] if len(parts) == 2 else None)

    def __str__(self) -> str:
        return f"{self.head}.{self.tail}" if self.tail else self.head


@dataclass(frozen=True, slots=True)
class ResolvedModule:
    """A canonical specifier bound to the file it resolves to."""

    specifier: str
    path: Path

    def read_text(self, max_bytes: int | None = None) -> str | None:
        """Read the file. Not cached: every call hits the file system."""
        return read_source(self.path, max_bytes)


@dataclass(frozen=True, slots=True)
class Location:
    """Zero-based position inside a file."""

    path: Path
    line: int
    character: int = 0

    def to_dict(self) -> dict[str, object]:
        return {"path": str(self.path), "line": self.line, "character": self.character}


@dataclass(frozen=True, slots=True)
class Completion:
    """A completion entry offered after a dot."""

    name: str
    kind: SymbolKind

    @classmethod
    def from_symbol(cls, symbol: Symbol) -> Completion:
        return cls(name=symbol.name, kind=symbol.kind)

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "kind": self.kind.value}
