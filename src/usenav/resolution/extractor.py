"""Lexical member extraction from unparsed source text.

Pattern matching over raw text, not syntactic parsing. Nesting is not
evaluated, so a declaration-shaped line inside a string literal or a comment
is reported like a real one.

Sources of symbols, unioned in this discovery order:
1. Method declarations: ``[static] [async] name(``
2. Free functions: ``function name(``
3. Named exports: ``exports.name =``
4. Top-level keys of a ``module.exports = { ... }`` block
5. Static fields: ``static name =``

Results are unique by name; the first classification found wins.
"""

from __future__ import annotations

import re

from usenav.resolution.models import Symbol, SymbolKind, is_identifier

_NAME = r"[A-Za-z_$][\w$]*"

_RE_METHOD = re.compile(
    rf"^[ \t]*(static[ \t]+)?(?:async[ \t]+)?(?:\*[ \t]*)?({_NAME})[ \t]*\(",
    re.MULTILINE,
)
_RE_FUNCTION = re.compile(rf"\bfunction\b[ \t]*\*?[ \t]*({_NAME})\s*\(")
_RE_NAMED_EXPORT = re.compile(rf"\bexports\.({_NAME})\s*=(?![=>])")
_RE_EXPORT_BLOCK = re.compile(r"\bmodule\.exports\s*=\s*\{")
_RE_EXPORT_KEY = re.compile(rf"\s*({_NAME})\s*(?::|$)")
_RE_STATIC_FIELD = re.compile(rf"\bstatic\s+({_NAME})\s*=(?![=>])")
_RE_COMMENT = re.compile(r"//[^\n]*|/\*[\s\S]*?\*/")

# Statement keywords that take the shape of a method declaration at line start
_NOT_METHODS: frozenset[str] = frozenset({
    "constructor",
    "if",
    "for",
    "while",
    "switch",
    "catch",
    "with",
    "return",
    "function",
    "typeof",
    "await",
    "yield",
    "new",
    "super",
    "delete",
    "void",
    "throw",
    "case",
    "do",
    "else",
    "import",
})

_OPENERS = "{[("
_CLOSERS = "}])"
_QUOTES = "'\"`"


def extract_symbols(text: str) -> list[Symbol]:
    """Extract declared members from file text, unique by name, in discovery order."""
    found: dict[str, Symbol] = {}

    def add(name: str, kind: SymbolKind) -> None:
        if name not in found:
            found[name] = Symbol(name, kind)

    for m in _RE_METHOD.finditer(text):
        name = m.group(2)
        if name in _NOT_METHODS:
            continue
        add(name, SymbolKind.STATIC_METHOD if m.group(1) else SymbolKind.METHOD)

    for m in _RE_FUNCTION.finditer(text):
        add(m.group(1), SymbolKind.FUNCTION)

    for m in _RE_NAMED_EXPORT.finditer(text):
        add(m.group(1), SymbolKind.EXPORTED_PROPERTY)

    for name in export_block_keys(text):
        add(name, SymbolKind.EXPORTED_PROPERTY)

    for m in _RE_STATIC_FIELD.finditer(text):
        add(m.group(1), SymbolKind.STATIC_PROPERTY)

    return list(found.values())


def export_block_keys(text: str) -> list[str]:
    """Top-level property names of the first ``module.exports = { ... }`` block.

    Shorthand entries (``{ a, b }``) and ``key: value`` entries both count;
    keys of nested objects and value-side identifiers do not. Line and block
    comments are skipped like quoted text. An unterminated block yields the
    entries completed so far.
    """
    m = _RE_EXPORT_BLOCK.search(text)
    if m is None:
        return []

    entries: list[str] = []
    depth = 0
    quote: str | None = None
    start = i = m.end()
    while i < len(text):
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = None
        elif text.startswith("//", i):
            end = text.find("\n", i)
            if end == -1:
                break
            i = end
            continue
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            if end == -1:
                break
            i = end + 2
            continue
        elif ch in _QUOTES:
            quote = ch
        elif ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            if depth == 0:
                entries.append(text[start:i])
                break
            depth -= 1
        elif ch == "," and depth == 0:
            entries.append(text[start:i])
            start = i + 1
        i += 1

    keys: list[str] = []
    for entry in entries:
        km = _RE_EXPORT_KEY.match(_RE_COMMENT.sub(" ", entry))
        if km:
            keys.append(km.group(1))
    return keys


def find_member_line(text: str, member: str) -> int | None:
    """Zero-based index of the first line declaring ``member(``.

    Matches an optional ``static`` qualifier, then the member name, then an
    opening parenthesis. This is intentionally narrower than a bare
    ``[static] member(`` match: the name must start a word and must not follow
    a ``.``, so property calls such as ``obj.member(`` and longer names such
    as ``research(`` are skipped rather than reported as declarations.
    """
    if not is_identifier(member):
        return None
    pattern = re.compile(rf"(?:\bstatic\s+)?(?<![\w$.]){re.escape(member)}\s*\(")
    for index, line in enumerate(text.splitlines()):
        if pattern.search(line):
            return index
    return None
