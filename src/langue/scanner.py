"""Cursor-driven scanner: the core tokenization loop.

Each outer iteration:
1. Locate where every rule's first matcher next occurs from the cursor.
2. Order candidates by offset, then by rule declaration order.
3. Try each candidate's full rule anchored at its offset; the first rule
   that matches completely wins and its tokens are committed.
4. Stop if nothing matched or the cursor did not move past where this
   iteration started.

Every committed iteration strictly advances the cursor, which is bounded
by the text length, so the scan always terminates. Text after the final
cursor is left for the renderer to emit as plain text.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; the Definition is read-only.

"""

from __future__ import annotations

from langue.rules import Definition, Group, Leaf, Rule
from langue.tokens import Token
from langue.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner:
    """Tokenizes one source string against a Definition.

    Usage:
        >>> from langue import composer
        >>> from langue.rules import Definition
        >>> d = Definition.of(composer.keyword("if"), composer.punctuation("{}"))
        >>> Scanner("if{}", d).scan()
        [Token(keyword, 'if', 0), Token(punctuation, '{', 2), Token(punctuation, '}', 3)]

    """

    __slots__ = (
        "_text",
        "_definition",
        "_absorb",
        "_cursor",
        "_stuck",
        "_tokens",
    )

    def __init__(
        self,
        text: str,
        definition: Definition,
        *,
        absorb_whitespace: bool = False,
    ) -> None:
        """Initialize scanner state.

        Args:
            text: Source text
            definition: Rules to scan with
            absorb_whitespace: Anchored matches absorb surrounding whitespace
        """
        self._text = text
        self._definition = definition
        self._absorb = absorb_whitespace
        self._cursor: int = 0
        self._stuck: int = 0
        self._tokens: list[Token] = []

    @property
    def cursor(self) -> int:
        """Next unscanned offset."""
        return self._cursor

    def scan(self) -> list[Token]:
        """Run the outer loop to completion.

        Returns:
            Tokens in source order, non-overlapping, all non-empty
        """
        text_len = len(self._text)
        while self._cursor < text_len:
            self._stuck = self._cursor
            if not self._step() or self._cursor <= self._stuck:
                break

        logger.debug(
            "scan of %s stopped at %d/%d with %d tokens",
            self._definition.name or "<anonymous>",
            self._cursor,
            text_len,
            len(self._tokens),
        )
        return self._tokens

    def _candidates(self) -> list[tuple[int, int]]:
        """(match offset, rule index) for every rule whose start occurs ahead."""
        found: list[tuple[int, int]] = []
        for rule_index, rule in enumerate(self._definition.rules):
            offset = rule.first.locate(self._text, self._cursor)
            if offset is not None:
                found.append((offset, rule_index))
        # Proximity first, then declaration order
        found.sort()
        return found

    def _step(self) -> bool:
        """Commit the first candidate rule that matches fully.

        Returns:
            True if a rule matched and its tokens were committed
        """
        rules = self._definition.rules
        for offset, rule_index in self._candidates():
            result = self._apply(rules[rule_index], offset)
            if result is None:
                continue
            tokens, end = result
            self._tokens.extend(tokens)
            self._cursor = end
            return True
        return False

    def _apply(self, rule: Rule, pos: int) -> tuple[list[Token], int] | None:
        """Match every element of ``rule`` in sequence from ``pos``.

        Returns:
            (tokens, end offset), or None if a Leaf failed to match
        """
        tokens: list[Token] = []
        for element in rule:
            match element:
                case Leaf(matcher):
                    token = matcher.match_at(self._text, pos, absorb_whitespace=self._absorb)
                    if token is None:
                        return None
                    tokens.append(token)
                    pos = token.end
                case Group(inner):
                    pos = self._repeat(inner, pos, tokens)
        return tokens, pos

    def _repeat(self, rule: Rule, pos: int, tokens: list[Token]) -> int:
        """Re-apply ``rule`` while each application strictly advances.

        Tokens of advancing applications are appended to ``tokens``.

        Returns:
            Offset after the last advancing application (``pos`` if none)
        """
        while True:
            result = self._apply(rule, pos)
            if result is None:
                return pos
            inner_tokens, end = result
            if end <= pos:
                return pos
            tokens.extend(inner_tokens)
            pos = end


def tokenize(text: str, definition: Definition, *, absorb_whitespace: bool = False) -> list[Token]:
    """Tokenize ``text`` with a fresh Scanner."""
    return Scanner(text, definition, absorb_whitespace=absorb_whitespace).scan()


__all__ = [
    "Scanner",
    "tokenize",
]
