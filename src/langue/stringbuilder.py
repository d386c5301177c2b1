"""StringBuilder for O(n) markup accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation while the renderer interleaves plain
segments and token spans.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.append("<span class='keyword'>")
        >>> sb.append("if")
        >>> sb.append("</span>")
        >>> sb.build()
        "<span class='keyword'>if</span>"

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

