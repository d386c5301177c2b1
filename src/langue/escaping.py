"""Escaping helpers for pattern fragments and markup.

Two pure transformations:
- escape_pattern: make literal text safe inside a regular-expression fragment
- escape_markup: make text safe inside HTML markup (five named entities)

Example:
    >>> escape_pattern("/*")
    '/\\\\*'
    >>> escape_markup("<a href='x'>")
    '&lt;a href=&#039;x&#039;&gt;'
"""

from __future__ import annotations

import re

# Characters with special meaning inside a pattern fragment
_PATTERN_SPECIAL = re.compile(r"[.*+?^${}()|\[\]\\]")

# Order matters: "&" first so entities produced later are not re-escaped
_MARKUP_ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)

_MARKUP_TABLE = str.maketrans(dict(_MARKUP_ENTITIES))

_UNESCAPE = re.compile("|".join(re.escape(entity) for _, entity in _MARKUP_ENTITIES))
_UNESCAPE_MAP = {entity: char for char, entity in _MARKUP_ENTITIES}


def escape_pattern(text: str) -> str:
    """Backslash-escape pattern metacharacters.

    Args:
        text: Literal text (e.g. a fence like "/*")

    Returns:
        Fragment that matches ``text`` literally
    """
    return _PATTERN_SPECIAL.sub(r"\\\g<0>", text)


def escape_markup(text: str) -> str:
    """Escape ``& < > " '`` to named entities.

    Each character is translated exactly once, so input that already
    contains entities is escaped as literal text (``&amp;`` becomes
    ``&amp;amp;``) and never double-escaped by this function.

    Args:
        text: Plain text

    Returns:
        Text safe for inclusion in markup and attribute values
    """
    if not text:
        return ""
    return text.translate(_MARKUP_TABLE)


def unescape_markup(markup: str) -> str:
    """Reverse escape_markup (only the five entities it produces)."""
    return _UNESCAPE.sub(lambda m: _UNESCAPE_MAP[m.group(0)], markup)


__all__ = [
    "escape_markup",
    "escape_pattern",
    "unescape_markup",
]
