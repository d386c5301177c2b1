"""Single classified pattern fragment with anchored and locate modes.

A Matcher pairs a tag with a compiled fragment. It never owns scan state;
every call takes the text and an offset and produces at most one Token.

Modes:
- match_at: anchored. The fragment must match starting exactly at the
  offset (Pattern.match is the sticky primitive). Optionally absorbs
  whitespace on both sides into the consumed span.
- locate: forward search for the nearest non-empty occurrence at or
  after the offset. Reports where a rule could begin; consumes nothing.

Thread Safety:
Matcher is frozen (immutable) and safe to share across threads.
Compiled re.Pattern objects are thread-safe.

"""

from __future__ import annotations

import re
from dataclasses import dataclass

from langue.errors import DefinitionError
from langue.tokens import Token

FLAGS = re.MULTILINE

# Whitespace absorbed around an anchored match
_WHITESPACE = re.compile(r"\s*")


def compile_fragment(
    fragment: str, category: str | None = None, flags: int = FLAGS
) -> re.Pattern[str]:
    """Compile a fragment, reporting failures as DefinitionError."""
    try:
        return re.compile(fragment, flags)
    except re.error as e:
        raise DefinitionError(f"invalid pattern ({e})", fragment, category) from e


@dataclass(frozen=True, slots=True)
class Matcher:
    """A tag and a compiled pattern fragment.

    Use Matcher.compile() to build one from fragment text; it fails fast
    with DefinitionError if the fragment is not a valid pattern.

    Attributes:
        tag: Token class ("" for untagged skip matches)
        pattern: Fragment compiled with re.MULTILINE

    """

    tag: str
    pattern: re.Pattern[str]

    @classmethod
    def compile(cls, tag: str, fragment: str) -> Matcher:
        """Build a Matcher from raw fragment text.

        Raises:
            DefinitionError: If the fragment does not compile
        """
        return cls(tag, compile_fragment(fragment, tag or "skip"))

    def match_at(self, text: str, pos: int, *, absorb_whitespace: bool = False) -> Token | None:
        """Anchored match starting exactly at ``pos``.

        Args:
            text: Full source text
            pos: Offset the match must start at
            absorb_whitespace: Include whitespace before and after the
                fragment in the consumed span

        Returns:
            Token covering the consumed span, or None if the fragment does
            not match here or matches only the empty string
        """
        start = _WHITESPACE.match(text, pos).end() if absorb_whitespace else pos
        m = self.pattern.match(text, start)
        if m is None and start > pos:
            # Fragments that begin with whitespace themselves
            m = self.pattern.match(text, pos)
        if m is None or m.end() == m.start():
            return None
        end = _WHITESPACE.match(text, m.end()).end() if absorb_whitespace else m.end()
        return Token(self.tag, text[pos:end], pos)

    def locate(self, text: str, pos: int) -> int | None:
        """Offset of the nearest non-empty occurrence at or after ``pos``."""
        for m in self.pattern.finditer(text, pos):
            if m.end() > m.start():
                return m.start()
        return None

    def __repr__(self) -> str:
        return f"Matcher({self.tag or '-'}, {self.pattern.pattern!r})"
