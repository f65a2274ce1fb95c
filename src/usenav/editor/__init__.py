"""Editor adapter helpers."""

from usenav.editor.cursor import chain_before_cursor, member_at, specifier_at

__all__ = ["chain_before_cursor", "member_at", "specifier_at"]
