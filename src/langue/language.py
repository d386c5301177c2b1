"""Language-definition resources and their compilation.

A language resource is a small JSON object:

    {
        "keywords": "\\\\b(?:if|else|while)\\\\b",
        "punctuation": "{}()[];,",
        "comment": [["//", "\\n"], ["/*", "*/"]],
        "string": [["\\"", "\\""], ["'", "'"]]
    }

Optional ``special`` and ``skip`` fragments add the special category and
untagged matches. compile_language() turns a LanguageSpec into both
forms the highlighter can run: a scanner Definition and the per-category
patterns used by the legacy resolver. Compilation fails fast with
DefinitionError; nothing is deferred to scan time.

Thread Safety:
LanguageSpec and CompiledLanguage are frozen. Safe to share.

"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from langue import composer
from langue.errors import DefinitionError
from langue.legacy import Priority
from langue.matcher import Matcher
from langue.rules import Definition, Rule
from langue.utils.logger import get_logger

logger = get_logger(__name__)

Fences = tuple[tuple[str, str], ...]


@dataclass(frozen=True, slots=True)
class LanguageSpec:
    """Raw fragments of one language, as read from its resource.

    Attributes:
        keywords: Keyword alternation pattern
        punctuation: Punctuation characters, one token per character
        comment: Comment fence pairs
        string: String fence pairs
        special: Pattern for the special category (optional)
        skip: Pattern for untagged matches (optional)

    """

    keywords: str | None = None
    punctuation: str | None = None
    comment: Fences = ()
    string: Fences = ()
    special: str | None = None
    skip: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LanguageSpec:
        """Create LanguageSpec from a decoded JSON resource.

        Unknown keys are ignored. Missing or empty fields leave the
        category out of the compiled language.

        Raises:
            DefinitionError: If a field has the wrong type or a fence pair
                is malformed
        """
        if not isinstance(data, Mapping):
            raise DefinitionError(f"language resource must be an object, got {type(data).__name__}")

        values: dict[str, Any] = {}
        for name in ("keywords", "punctuation", "special", "skip"):
            value = data.get(name)
            if value is None or value == "":
                continue
            if name == "punctuation" and isinstance(value, list):
                if not all(isinstance(c, str) for c in value):
                    raise DefinitionError("punctuation entries must be strings", repr(value), name)
                value = "".join(value)
            if not isinstance(value, str):
                raise DefinitionError(f"expected a string, got {type(value).__name__}", None, name)
            values[name] = value

        for name in ("comment", "string"):
            value = data.get(name)
            if value:
                values[name] = composer.parse_fences(value, name)

        return cls(**values)


@dataclass(frozen=True, slots=True)
class CompiledLanguage:
    """A language ready for highlighting.

    Attributes:
        name: Language name
        definition: Rules for the scanner strategy
        patterns: Per-category patterns for the legacy strategy
    """

    name: str
    definition: Definition
    patterns: Mapping[Priority, re.Pattern[str]] = field(default_factory=dict)


def _legacy_pattern(fragment: str, priority: Priority) -> re.Pattern[str]:
    # The legacy resolver reads group 1; keyword fragments bring their own.
    if priority is not Priority.KEYWORD:
        fragment = f"({fragment})"
    try:
        return re.compile(fragment, re.MULTILINE)
    except re.error as e:
        raise DefinitionError(f"invalid pattern ({e})", fragment, priority.tag) from e


def compile_language(spec: LanguageSpec, name: str) -> CompiledLanguage:
    """Compile a LanguageSpec into matchers, rules and legacy patterns.

    Rule order in the Definition is comment, string, keyword, special,
    punctuation, skip, so that rules starting at the same offset are tried
    in the same ranking the legacy resolver uses.

    Raises:
        DefinitionError: If any fragment fails to compile
    """
    matchers: list[tuple[Matcher, Priority | None]] = []
    if spec.comment:
        matchers.append((composer.comment(spec.comment), Priority.COMMENT))
    if spec.string:
        matchers.append((composer.string(spec.string), Priority.STRING))
    if spec.keywords:
        matchers.append((composer.keyword(spec.keywords), Priority.KEYWORD))
    if spec.special:
        matchers.append((composer.special(spec.special), None))
    if spec.punctuation:
        matchers.append((composer.punctuation(spec.punctuation), Priority.PUNCTUATION))
    if spec.skip:
        matchers.append((composer.skip(spec.skip), None))

    patterns: dict[Priority, re.Pattern[str]] = {}
    for matcher, priority in matchers:
        if priority is None:
            continue
        source = spec.keywords if priority is Priority.KEYWORD else matcher.pattern.pattern
        assert source is not None
        patterns[priority] = _legacy_pattern(source, priority)

    definition = Definition(tuple(Rule.of(m) for m, _ in matchers), name)
    logger.debug("compiled language %s with %d rules", name, len(definition))
    return CompiledLanguage(name, definition, patterns)


def load_language(data: Mapping[str, Any], name: str) -> CompiledLanguage:
    """Validate and compile a decoded language resource in one step."""
    return compile_language(LanguageSpec.from_dict(data), name)


__all__ = [
    "CompiledLanguage",
    "LanguageSpec",
    "compile_language",
    "load_language",
]
