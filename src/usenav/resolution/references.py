"""Reference chain -> module specifier discovery.

Given ``head`` or ``head.tail`` before the cursor and the text of the open
document, find the raw specifier the chain refers to. Strategies run in a
fixed priority order and the first non-null answer wins:

1. Typed member (only with a tail): ``head`` is a model name. Its model file
   carries a type annotation right above the declaration of ``tail``::

       /** @type {typeof import('App/Services/Repository')} */
       static repository

2. Document annotation: the same annotation shape inside the open document,
   for ``tail`` (or ``head`` when there is no tail).

3. Local declaration: ``const head = use('App/Services/Repo')``.

The order is load-bearing: an annotation always beats a same-named ``use()``
binding.
"""

from __future__ import annotations

import re

import structlog

from usenav.config.constants import ALIAS_SEGMENT, LOADER_NAME
from usenav.resolution.locator import ModuleLocator
from usenav.resolution.models import SELF_IDENTIFIER, is_identifier
from usenav.resolution.sources import read_source

log = structlog.get_logger(__name__)

# Annotation marker, alias-rooted specifier capture, annotation close. The
# intervening text up to the property may not contain another annotation.
_ANNOTATION_PREFIX = (
    r"@type\s*\{\s*typeof\s+import\(\s*['\"`]"
    rf"(/?{ALIAS_SEGMENT}/[^'\"`]+)"
    r"['\"`]\s*\)\s*\}\s*\*/"
    r"(?:(?!@type\b)[\s\S])*?"
    r"(?:\bstatic\s+)?(?<![\w$])"
)

_LOADER_CALL = re.escape(LOADER_NAME) + r"\(\s*['\"`]([^'\"`]+)['\"`]\s*\)"


def find_annotation(text: str, prop: str) -> str | None:
    """Specifier of the type annotation immediately preceding ``prop``."""
    if not is_identifier(prop):
        return None
    pattern = re.compile(_ANNOTATION_PREFIX + re.escape(prop) + r"(?![\w$])", re.IGNORECASE)
    m = pattern.search(text)
    return m.group(1) if m else None


def find_local_declaration(text: str, name: str) -> str | None:
    """Specifier of ``const <name> = use('...')``, case-insensitive, first match."""
    if not is_identifier(name):
        return None
    pattern = re.compile(
        r"\bconst\s+" + re.escape(name) + r"\s*=\s*" + _LOADER_CALL,
        re.IGNORECASE,
    )
    m = pattern.search(text)
    return m.group(1) if m else None


class ReferenceResolver:
    """Resolves reference chains to raw module specifiers."""

    def __init__(self, locator: ModuleLocator, *, max_bytes: int | None = None) -> None:
        self._locator = locator
        self._max_bytes = max_bytes

    def resolve_chain(
        self,
        document_text: str,
        head: str,
        tail: str | None = None,
    ) -> str | None:
        """Return the raw specifier ``head`` / ``head.tail`` refers to, or None."""
        if head == SELF_IDENTIFIER or not is_identifier(head):
            return None
        if tail is not None and not is_identifier(tail):
            return None

        if tail is not None:
            specifier = self._typed_member(head, tail)
            if specifier:
                log.debug("references.strategy_hit", strategy="typed_member", head=head, tail=tail)
                return specifier

        specifier = find_annotation(document_text, tail or head)
        if specifier:
            log.debug("references.strategy_hit", strategy="annotation", head=head, tail=tail)
            return specifier

        specifier = find_local_declaration(document_text, head)
        if specifier:
            log.debug("references.strategy_hit", strategy="local_declaration", head=head)
            return specifier

        log.debug("references.unresolved", head=head, tail=tail)
        return None

    def _typed_member(self, model: str, prop: str) -> str | None:
        model_path = self._locator.find_model_file(model)
        if model_path is None:
            return None
        text = read_source(model_path, self._max_bytes)
        if text is None:
            return None
        return find_annotation(text, prop)
