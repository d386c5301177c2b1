"""Highlight a snippet with an inline definition: no fetching, no config."""

from langue import Definition, comment, highlight, keyword, punctuation, string

c = Definition.of(
    comment("/*,*/"),
    string('","'),
    keyword(r"\b(?:if|return)\b"),
    punctuation("{}();"),
)

print(highlight('if (ok) { return "<done>"; } /* fin */', c))
