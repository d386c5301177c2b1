"""Markup renderer using StringBuilder pattern.

Reassembles the full source text from a token list: plain text between
tokens is entity-escaped, tagged tokens are wrapped as
``<span class='tag'>value</span>`` and untagged tokens are emitted as
escaped text with no wrapper. Text after the last token is emitted as
plain text, so nothing the scanner skipped is lost.

Thread Safety:
render() keeps all state in locals. Safe to call concurrently.

"""

from __future__ import annotations

from collections.abc import Iterable

from langue.escaping import escape_markup
from langue.stringbuilder import StringBuilder
from langue.tokens import Token


def render_token(token: Token) -> str:
    """Markup for a single token."""
    value = escape_markup(token.value)
    if not token.tag:
        return value
    return f"<span class='{escape_markup(token.tag)}'>{value}</span>"


def render(text: str, tokens: Iterable[Token]) -> str:
    """Render ``text`` with ``tokens`` marked up.

    Args:
        text: The source the tokens were produced from
        tokens: Tokens in non-decreasing start order

    Returns:
        Markup string. Empty text renders as "".

    Note:
        A token starting before the end of the previous one (possible only
        with containment-resolved legacy output) is still rendered in full,
        so the overlapping characters appear twice.
    """
    sb = StringBuilder()
    offset = 0
    for token in tokens:
        if token.index > offset:
            sb.append(escape_markup(text[offset : token.index]))
        sb.append(render_token(token))
        offset = max(offset, token.end)
    sb.append(escape_markup(text[offset:]))
    return sb.build()


__all__ = [
    "render",
    "render_token",
]
