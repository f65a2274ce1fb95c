"""Specifier normalization.

Turns a raw specifier as written in source (``'/App/Models/Client'``) into
its canonical, root-relative form (``app/Models/Client``).
"""

from __future__ import annotations

from usenav.config.constants import ALIAS_SEGMENT, SOURCE_DIR

_QUOTES = "'\"`"
_WHITESPACE = " \t\r\n"


def normalize_specifier(raw: str | None) -> str | None:
    """Canonicalize a raw module specifier.

    Strips surrounding whitespace and quotes, converts backslashes to forward
    slashes and drops leading slashes. Every leading slash is dropped, not
    only one, so ``//App/x`` and ``/App/x`` agree and the function stays
    idempotent. A first segment equal to the alias (case-insensitive) is
    rewritten to the real source directory; every other segment is left
    untouched.

    Examples:
        >>> normalize_specifier("'/App/Models/Client/Client'")
        'app/Models/Client/Client'
        >>> normalize_specifier("Something/App/Foo")
        'Something/App/Foo'
        >>> normalize_specifier("")
    """
    if not raw:
        return None

    cleaned = raw.replace("\\", "/")
    cleaned = cleaned.lstrip(_QUOTES + _WHITESPACE + "/").rstrip(_QUOTES + _WHITESPACE)
    if not cleaned:
        return None

    head, sep, rest = cleaned.partition("/")
    if head.lower() == ALIAS_SEGMENT.lower():
        head = SOURCE_DIR
    return head + sep + rest
