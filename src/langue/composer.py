"""Fragment builders for the token categories.

Each builder returns a Matcher. Five tagged categories (keyword,
punctuation, string, comment, special) and one untagged category (skip).

String and comment builders take fence pairs, either as compact
notation ``"start,end|start2,end2"`` or as a sequence of
``(start, end)`` pairs, and expand them into one non-greedy
alternation with literal-escaped fence text:

    comment:  start[\\s\\S]*?end
    string:   start(?:\\\\[\\s\\S]|[^\\\\])*?end

The string form consumes a backslash together with the character after
it, so an escaped backslash or an escaped end fence sits inside the
content without terminating the match.

Example:
    >>> m = string('","')
    >>> m.match_at('say "hi \\\\" there"', 4).value
    '"hi \\\\" there"'
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from langue.errors import DefinitionError
from langue.escaping import escape_pattern
from langue.matcher import Matcher
from langue.tokens import TokenTag

FencePairs = str | Iterable[Sequence[str]]


def parse_fences(fences: FencePairs, category: str = "fence") -> tuple[tuple[str, str], ...]:
    """Normalize fence notation into a tuple of (start, end) pairs.

    Args:
        fences: ``"start,end|start2,end2"`` or an iterable of pairs
        category: Category name used in error messages

    Returns:
        Tuple of (start, end) pairs in declaration order

    Raises:
        DefinitionError: If fences are not a string or a list of pairs, a
            pair does not have exactly two non-empty string parts, or no
            pairs are given
    """
    if isinstance(fences, str):
        raw: list[Sequence[str]] = [chunk.split(",") for chunk in fences.split("|")]
    elif isinstance(fences, Iterable):
        raw = [
            list(pair) if isinstance(pair, Sequence) and not isinstance(pair, str) else [pair]
            for pair in fences
        ]
    else:
        raise DefinitionError(
            f"fences must be a string or a list of pairs, got {type(fences).__name__}",
            None,
            category,
        )

    pairs: list[tuple[str, str]] = []
    for pair in raw:
        if len(pair) != 2 or not all(isinstance(p, str) and p for p in pair):
            raise DefinitionError("fence pair must be exactly (start, end)", repr(pair), category)
        pairs.append((pair[0], pair[1]))

    if not pairs:
        raise DefinitionError("at least one fence pair is required", None, category)
    return tuple(pairs)


def _string_alternative(start: str, end: str) -> str:
    # Backslash pairs and other characters are disjoint, so there is one parse
    return rf"(?:{escape_pattern(start)}(?:\\[\s\S]|[^\\])*?{escape_pattern(end)})"


def _comment_alternative(start: str, end: str) -> str:
    return rf"(?:{escape_pattern(start)}[\s\S]*?{escape_pattern(end)})"


def keyword(fragment: str) -> Matcher:
    """Keyword matcher from an alternation fragment, e.g. ``\\b(?:if|else)\\b``."""
    return Matcher.compile(TokenTag.KEYWORD, fragment)


def punctuation(chars: str | Iterable[str]) -> Matcher:
    """Punctuation matcher: any single literal character from ``chars``."""
    chars = [c for c in chars if c]
    if not chars:
        raise DefinitionError("punctuation needs at least one character", "", TokenTag.PUNCTUATION)
    return Matcher.compile(TokenTag.PUNCTUATION, "|".join(escape_pattern(c) for c in chars))


def string(fences: FencePairs) -> Matcher:
    """String matcher; escaped end fences stay inside the string."""
    pairs = parse_fences(fences, TokenTag.STRING)
    return Matcher.compile(TokenTag.STRING, "|".join(_string_alternative(s, e) for s, e in pairs))


def comment(fences: FencePairs) -> Matcher:
    """Comment matcher; the first end fence after the start closes it."""
    pairs = parse_fences(fences, TokenTag.COMMENT)
    return Matcher.compile(TokenTag.COMMENT, "|".join(_comment_alternative(s, e) for s, e in pairs))


def special(fragment: str) -> Matcher:
    return Matcher.compile(TokenTag.SPECIAL, fragment)


def skip(fragment: str) -> Matcher:
    """Untagged matcher: consumes text that renders without a span."""
    return Matcher.compile(TokenTag.SKIP, fragment)


__all__ = [
    "FencePairs",
    "comment",
    "keyword",
    "parse_fences",
    "punctuation",
    "skip",
    "special",
    "string",
]
