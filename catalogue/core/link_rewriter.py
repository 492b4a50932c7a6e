"""
Semantic link rewriter.

Normalizes domain autolinks (`place://Lisbon`, `dish://cacio%20e%20pepe`, ...)
in catalogue markdown into standard markdown links with decoded display text.

Two passes run over the text:

1. Link text written percent-encoded (`[Dom%20Luís](place://Dom%20Luís)`) is
   decoded in place.
2. Bare references become `[term](scheme://token)`. When the same term is
   written right before the reference (`Lisbon place://Lisbon`,
   `**Afonso I**place://Afonso%20I`) the mention and the reference collapse
   into one link, keeping the mention's emphasis.

Each pass collects non-overlapping replacement spans over its input and
rebuilds the text once, left to right. Ambiguous input is left as written.

Dependencies: re, unicodedata (stdlib), catalogue.models.semantic_link
System role: Render-time markdown preprocessing for semantic references
"""

import logging
import re
import unicodedata
from functools import lru_cache
from typing import NamedTuple

from catalogue.configs import get_settings
from catalogue.models.semantic_link import (
    SemanticLinkCategory,
    percent_decode,
    reference_authority,
)

logger = logging.getLogger(__name__)

_SCHEMES = SemanticLinkCategory.pattern()

# [text](scheme://destination)
_LINK_PATTERN = re.compile(rf"\[([^\]]+)\]\((?:{_SCHEMES})://[^)]+\)")

# scheme://token, unless it ends a longer scheme name or opens a link destination or link text
_BARE_REFERENCE_PATTERN = re.compile(rf"(?<![^\W_])(?<![+.\-(\[])(?:{_SCHEMES})://[^\s)]+")

# **phrase**, *phrase* or _phrase_ ending the line before a reference
_EMPHASIS_TAIL_PATTERN = re.compile(r"(\*\*|\*|_)([^*_\[\]()\n]+)\1[ \t]*\Z")

# Characters that end a plain-text mention when scanning backwards
_PLAIN_TAIL_DELIMITERS = "[]()*_\n"

_WORD_PATTERN = re.compile(r"\S+")


class _Replacement(NamedTuple):
    start: int
    end: int
    text: str


class _Mention(NamedTuple):
    start: int
    marker: str


def _splice(text: str, replacements: list[_Replacement]) -> str:
    """Apply sorted, non-overlapping replacements in a single pass."""
    if not replacements:
        return text
    parts: list[str] = []
    cursor = 0
    for replacement in replacements:
        parts.append(text[cursor:replacement.start])
        parts.append(replacement.text)
        cursor = replacement.end
    parts.append(text[cursor:])
    return "".join(parts)


def fold_term(text: str) -> str:
    """Case- and diacritic-insensitive comparison form of a term."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return " ".join(stripped.casefold().split())


def _plain_tail_start(line: str) -> int:
    """Index where the trailing delimiter-free run of line begins."""
    return max(line.rfind(delimiter) for delimiter in _PLAIN_TAIL_DELIMITERS) + 1


def _find_mention(text: str, floor: int, start: int, term: str) -> _Mention | None:
    """
    Find a mention of term written immediately before text[start].

    Looks no further back than floor and never across a line break.

    Returns:
        _Mention | None: Where the mention begins and its emphasis marker
            ("" for plain text), or None if the preceding phrase differs
    """
    window = text[floor:start]
    folded_term = fold_term(term)
    if not folded_term:
        return None

    emphasis = _EMPHASIS_TAIL_PATTERN.search(window)
    if emphasis is not None:
        if fold_term(emphasis.group(2)) == folded_term:
            return _Mention(floor + emphasis.start(), emphasis.group(1))
        return None

    line = window.rstrip(" \t")
    tail_start = _plain_tail_start(line)
    tail = line[tail_start:]
    words = list(_WORD_PATTERN.finditer(tail))
    count = len(folded_term.split())
    if len(words) < count:
        return None
    first = words[-count]
    if fold_term(tail[first.start():]) != folded_term:
        return None
    return _Mention(floor + tail_start + first.start(), "")


class SemanticLinkRewriter:
    """Rewrites semantic references in markdown into standard links."""

    def __init__(self, collapse_duplicates: bool = True) -> None:
        """
        Initialize rewriter.

        Args:
            collapse_duplicates: Merge a mention written right before a bare
                reference into the generated link
        """
        self.collapse_duplicates = collapse_duplicates

    def rewrite(self, markdown: str) -> str:
        """
        Run both passes over markdown.

        Args:
            markdown: Catalogue markdown

        Returns:
            str: Markdown with semantic references as standard links
        """
        return self.link_bare_references(self.decode_link_text(markdown))

    def decode_link_text(self, markdown: str) -> str:
        """Decode percent-encoded display text of existing semantic links."""
        replacements: list[_Replacement] = []
        for match in _LINK_PATTERN.finditer(markdown):
            text = match.group(1)
            decoded = percent_decode(text)
            if decoded is None or decoded == text:
                continue
            replacements.append(_Replacement(match.start(1), match.end(1), decoded))
        return _splice(markdown, replacements)

    def link_bare_references(self, markdown: str) -> str:
        """Wrap bare semantic references as markdown links."""
        replacements: list[_Replacement] = []
        floor = 0

        for match in _BARE_REFERENCE_PATTERN.finditer(markdown):
            start, end = match.span()
            reference = match.group(0)
            authority = reference_authority(reference)
            if authority is None:
                continue
            decoded = percent_decode(authority)
            term = authority if decoded is None else decoded
            link = f"[{term}]({reference})"

            mention = None
            if self.collapse_duplicates:
                mention = _find_mention(markdown, floor, start, term)

            if mention is not None:
                replacement = f"{mention.marker}{link}{mention.marker}"
                replacements.append(_Replacement(mention.start, end, replacement))
            else:
                leading = " " if start > 0 and not markdown[start - 1].isspace() else ""
                trailing = " " if end < len(markdown) and not markdown[end].isspace() else ""
                replacements.append(_Replacement(start, end, f"{leading}{link}{trailing}"))
            floor = end

        if replacements:
            logger.debug(
                "Linked bare semantic references",
                extra={"reference_count": len(replacements)},
            )
        return _splice(markdown, replacements)


@lru_cache
def get_default_rewriter() -> SemanticLinkRewriter:
    """Rewriter configured from settings."""
    return SemanticLinkRewriter(
        collapse_duplicates=get_settings().rewriter.collapse_duplicates,
    )


def rewrite(markdown: str) -> str:
    """Rewrite markdown with the configured rewriter."""
    return get_default_rewriter().rewrite(markdown)
