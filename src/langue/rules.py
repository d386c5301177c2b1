"""Rule trees and language Definitions.

A Rule is an ordered sequence of elements. Each element is either a
Leaf (one Matcher that must match once) or a Group (a nested Rule that
repeats for as long as each repetition advances).

    Element = Leaf(Matcher) | Group(Rule)

A Definition is the ordered list of top-level Rules for one language.
Declaration order breaks ties when several rules could begin at the
same offset.

Thread Safety:
All types here are frozen dataclasses holding tuples. Safe to share.

Example:
    >>> from langue import composer
    >>> call = Rule.of(composer.keyword(r"\\bprint\\b"), composer.punctuation("("))
    >>> args = Rule.of(composer.string('","'), composer.punctuation(","))
    >>> Rule.of(*call.elements, Group(args)).first
    Matcher(keyword, '\\\\bprint\\\\b')
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from langue.errors import DefinitionError
from langue.matcher import Matcher


@dataclass(frozen=True, slots=True)
class Leaf:
    """Element that matches its Matcher exactly once."""

    matcher: Matcher


@dataclass(frozen=True, slots=True)
class Group:
    """Element that re-applies a nested Rule while it keeps advancing.

    Zero repetitions is a valid outcome; a Group never fails its parent.
    """

    rule: Rule


Element = Leaf | Group


@dataclass(frozen=True, slots=True)
class Rule:
    """An ordered sequence of Leaf and Group elements.

    Invariants (checked at construction):
        - At least one element
        - The first element is a Leaf, so the rule has a locatable start
    """

    elements: tuple[Element, ...]

    def __post_init__(self) -> None:
        if not self.elements:
            raise DefinitionError("rule must have at least one element")
        for element in self.elements:
            if not isinstance(element, Leaf | Group):
                raise DefinitionError(
                    f"rule element must be Leaf or Group, got {type(element).__name__}"
                )
        if not isinstance(self.elements[0], Leaf):
            raise DefinitionError("rule must start with a matcher, not a repetition group")

    @classmethod
    def of(cls, *items: Matcher | Rule | Element) -> Rule:
        """Build a Rule, wrapping bare Matchers as Leaf and bare Rules as Group."""
        elements: list[Element] = []
        for item in items:
            match item:
                case Matcher():
                    elements.append(Leaf(item))
                case Rule():
                    elements.append(Group(item))
                case _:
                    elements.append(item)
        return cls(tuple(elements))

    @property
    def first(self) -> Matcher:
        """Matcher used to locate where this rule could begin."""
        match self.elements[0]:
            case Leaf(matcher):
                return matcher
            case head:
                raise DefinitionError(f"rule must start with a matcher, got {head!r}")

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)


@dataclass(frozen=True, slots=True)
class Definition:
    """Ordered top-level rules for one language.

    Attributes:
        rules: Rules in priority order (earlier wins ties)
        name: Language name, for logging (optional)
    """

    rules: tuple[Rule, ...]
    name: str | None = None

    @classmethod
    def of(cls, *items: Matcher | Rule, name: str | None = None) -> Definition:
        """Build a Definition; a bare Matcher becomes a one-element Rule."""
        rules = tuple(item if isinstance(item, Rule) else Rule.of(item) for item in items)
        return cls(rules, name)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)


__all__ = [
    "Definition",
    "Element",
    "Group",
    "Leaf",
    "Rule",
]
