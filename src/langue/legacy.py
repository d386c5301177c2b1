"""Priority-containment resolver (the earlier tokenization strategy).

Each category is searched independently over the whole text, with no
shared cursor. Overlaps are then reconciled by category priority:

    COMMENT > STRING > KEYWORD > PUNCTUATION

Under OverlapPolicy.CONTAIN (the compatible default) a lower-priority
token is discarded only when a higher-priority token's span fully
contains it. Partial overlaps survive, so the result is not guaranteed
to be a partition of the text and the rendered markup for such input
repeats the overlapping characters.

OverlapPolicy.STRICT also discards a lower-priority token on any partial
overlap with a surviving higher-priority token, which does guarantee a
non-overlapping result.

Example:
    >>> import re
    >>> findall(re.compile(r"(?:^|\\W)(if)"), " if", "keyword")
    [Token(keyword, 'if', 1)]
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from enum import Enum, IntEnum

from langue.tokens import Token, TokenTag


class Priority(IntEnum):
    """Category ranking for overlap resolution; higher value wins."""

    PUNCTUATION = 0
    KEYWORD = 1
    STRING = 2
    COMMENT = 3

    @property
    def tag(self) -> TokenTag:
        return TokenTag(self.name.lower())


class OverlapPolicy(Enum):
    """How lower-priority tokens that overlap higher ones are handled."""

    CONTAIN = "contain"  # drop only fully contained tokens
    STRICT = "strict"  # drop on any overlap


def findall(pattern: re.Pattern[str], text: str, tag: str) -> list[Token]:
    """Collect every match of ``pattern`` by repeated search-and-advance.

    When the pattern has capture groups, group 1 is the token and its start
    is the token index; the rest of the match is context only. Empty
    tokens are skipped.
    """
    tokens: list[Token] = []
    use_group = pattern.groups > 0
    for m in pattern.finditer(text):
        if use_group:
            value, index = m.group(1), m.start(1)
            if value is None:
                continue
        else:
            value, index = m.group(0), m.start()
        if value:
            tokens.append(Token(tag, value, index))
    return tokens


def resolve(
    candidates: Mapping[Priority, Iterable[Token]],
    *,
    overlap: OverlapPolicy = OverlapPolicy.CONTAIN,
) -> list[Token]:
    """Reconcile per-category candidates into one ordered token list.

    Args:
        candidates: Tokens found for each category
        overlap: Which overlaps eliminate a lower-priority token

    Returns:
        Surviving tokens sorted by start index (higher priority first on ties)
    """
    survivors: list[tuple[Priority, Token]] = []
    higher: list[Token] = []
    for priority in sorted(candidates, reverse=True):
        tokens = list(candidates[priority])
        for token in tokens:
            if any(other.contains(token) for other in higher):
                continue
            if overlap is OverlapPolicy.STRICT and any(
                other.overlaps(token) for _, other in survivors
            ):
                continue
            survivors.append((priority, token))
        higher.extend(tokens)

    survivors.sort(key=lambda item: (item[1].index, -item[0]))
    return [token for _, token in survivors]


def tokenize_legacy(
    text: str,
    patterns: Mapping[Priority, re.Pattern[str]],
    *,
    overlap: OverlapPolicy = OverlapPolicy.CONTAIN,
) -> list[Token]:
    """Search each category pattern independently, then resolve overlaps."""
    candidates = {
        priority: findall(pattern, text, priority.tag) for priority, pattern in patterns.items()
    }
    return resolve(candidates, overlap=overlap)


__all__ = [
    "OverlapPolicy",
    "Priority",
    "findall",
    "resolve",
    "tokenize_legacy",
]
