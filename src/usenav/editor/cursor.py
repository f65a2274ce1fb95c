"""Cursor context extraction from a single line of text.

Maps an editor line and a zero-based column to the plain inputs of the
resolution entry points. Columns follow editor word-range semantics: a span
contains the column when ``start <= column <= end``.
"""

from __future__ import annotations

import re

from usenav.config.constants import LOADER_NAME
from usenav.resolution.models import ReferenceChain

_RE_LOADER_CALL = re.compile(re.escape(LOADER_NAME) + r"\(\s*['\"`](.*?)['\"`]\s*\)")
_RE_CHAIN_BEFORE = re.compile(r"(?<![\w$])([A-Za-z_$][\w$]*)(?:\.([A-Za-z_$][\w$]*))?\.$")
_RE_WORD = re.compile(r"[\w$]+")


def specifier_at(line_text: str, column: int) -> str | None:
    """Raw specifier of the ``use('...')`` call spanning column."""
    for m in _RE_LOADER_CALL.finditer(line_text):
        if m.start() <= column <= m.end():
            return m.group(1)
    return None


def chain_before_cursor(line_text: str, column: int) -> ReferenceChain | None:
    """The ``head.`` or ``head.tail.`` chain ending right before column."""
    m = _RE_CHAIN_BEFORE.search(line_text[:column])
    if m is None:
        return None
    return ReferenceChain(m.group(1), m.group(2))


def member_at(line_text: str, column: int) -> tuple[ReferenceChain, str] | None:
    """The word under the cursor and the chain it is accessed through.

    For ``Repo.search(q)`` with the cursor inside ``search`` this returns
    ``(ReferenceChain("Repo"), "search")``.
    """
    for m in _RE_WORD.finditer(line_text):
        if m.start() <= column <= m.end():
            chain = chain_before_cursor(line_text, m.start())
            if chain is None:
                return None
            return chain, m.group(0)
    return None
