"""Token and TokenTag definitions for the Langue scanner.

The scanner produces a list of Token objects that the renderer consumes.
Each Token has a tag (its class), the consumed text, and a start offset.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenTag is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TokenTag(StrEnum):
    """Token classes understood by the composer.

    SKIP is the untagged class: its tokens advance the scan but are
    rendered as plain escaped text rather than wrapped in a span.
    """

    KEYWORD = "keyword"
    PUNCTUATION = "punctuation"
    STRING = "string"
    COMMENT = "comment"
    SPECIAL = "special"
    SKIP = ""


@dataclass(frozen=True, slots=True)
class Token:
    """A classified, located, non-empty slice of the source text.

    Attributes:
        tag: Class name rendered into the span ("" for untagged)
        value: The consumed text, including any absorbed whitespace
        index: Absolute offset where ``value`` starts in the source

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    tag: str
    value: str
    index: int

    @property
    def end(self) -> int:
        """Offset one past the last consumed character."""
        return self.index + len(self.value)

    @property
    def tagged(self) -> bool:
        """True if the token renders as a span."""
        return bool(self.tag)

    def contains(self, other: Token) -> bool:
        """True if this token's span fully covers ``other``'s span."""
        return self.index <= other.index and self.end >= other.end

    def overlaps(self, other: Token) -> bool:
        """True if the two spans share at least one character."""
        return self.index < other.end and other.index < self.end

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.tag or '-'}, {val!r}, {self.index})"
