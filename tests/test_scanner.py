"""Tests for the cursor-driven Scanner."""

from langue import composer
from langue.rules import Definition, Rule
from langue.scanner import Scanner, tokenize
from langue.tokens import Token


def braces_and_if() -> Definition:
    return Definition.of(composer.punctuation("{}"), composer.keyword("if"))


class TestBasicScanning:
    """Example scenarios and basic cursor behavior."""

    def test_keyword_and_punctuation(self) -> None:
        tokens = tokenize("if{}", braces_and_if())
        assert tokens == [
            Token("keyword", "if", 0),
            Token("punctuation", "{", 2),
            Token("punctuation", "}", 3),
        ]

    def test_string_between_plain_text(self) -> None:
        definition = Definition.of(composer.string('","'))
        assert tokenize('a "b" c', definition) == [Token("string", '"b"', 2)]

    def test_empty_input(self) -> None:
        assert tokenize("", braces_and_if()) == []

    def test_no_matches(self) -> None:
        assert tokenize("nothing", braces_and_if()) == []

    def test_empty_definition(self) -> None:
        assert tokenize("if{}", Definition(())) == []

    def test_cursor_after_scan(self) -> None:
        scanner = Scanner("if{} tail", braces_and_if())
        scanner.scan()
        assert scanner.cursor == 4


class TestPriority:
    """Proximity first, then declaration order."""

    def test_nearest_rule_wins(self) -> None:
        definition = Definition.of(composer.keyword("b"), composer.special("a"))
        assert [t.tag for t in tokenize("ab", definition)] == ["special", "keyword"]

    def test_declaration_order_breaks_ties(self) -> None:
        definition = Definition.of(composer.special("if"), composer.keyword("if"))
        assert tokenize("if", definition) == [Token("special", "if", 0)]

    def test_comment_hides_contents(self) -> None:
        definition = Definition.of(
            composer.comment([["/*", "*/"]]),
            composer.keyword("if"),
        )
        tokens = tokenize("/* if */ if", definition)
        assert tokens == [Token("comment", "/* if */", 0), Token("keyword", "if", 9)]

    def test_string_outranks_inner_keyword(self) -> None:
        definition = Definition.of(composer.string('","'), composer.keyword("if"))
        assert tokenize('"if"', definition) == [Token("string", '"if"', 0)]


class TestSequentialRules:
    """Multi-element rules must match every element contiguously."""

    def test_full_sequence(self) -> None:
        call = Rule.of(composer.keyword("print"), composer.punctuation("("))
        tokens = tokenize("print(", Definition((call,)))
        assert tokens == [Token("keyword", "print", 0), Token("punctuation", "(", 5)]

    def test_failing_candidate_falls_through(self) -> None:
        call = Rule.of(composer.keyword("print"), composer.punctuation("("))
        word = Rule.of(composer.special("print"))
        tokens = tokenize("print x", Definition((call, word)))
        assert tokens == [Token("special", "print", 0)]

    def test_whitespace_absorption_joins_elements(self) -> None:
        call = Rule.of(composer.keyword("print"), composer.punctuation("("))
        definition = Definition((call,))
        assert tokenize("print (", definition) == []
        tokens = tokenize("print (", definition, absorb_whitespace=True)
        assert tokens == [Token("keyword", "print ", 0), Token("punctuation", "(", 6)]

    def test_stops_when_no_candidate_completes(self) -> None:
        call = Rule.of(composer.keyword("print"), composer.punctuation("("))
        definition = Definition((call,))
        # First occurrence cannot complete, so the scan ends before the second
        assert tokenize("print x print(", definition) == []


class TestRepetitionGroups:
    """Nested rules repeat while each application advances."""

    def args_rule(self) -> Definition:
        arg = Rule.of(composer.punctuation(","), composer.special("[a-z]"))
        call = Rule.of(
            composer.keyword("f"),
            composer.punctuation("("),
            composer.special("[a-z]"),
            arg,
            composer.punctuation(")"),
        )
        return Definition((call,))

    def test_group_repeats(self) -> None:
        tokens = tokenize("f(a,b,c)", self.args_rule())
        assert [t.value for t in tokens] == ["f", "(", "a", ",", "b", ",", "c", ")"]

    def test_group_zero_repetitions(self) -> None:
        """A group that cannot advance contributes nothing; the rule continues."""
        tokens = tokenize("f(a)", self.args_rule())
        assert [t.value for t in tokens] == ["f", "(", "a", ")"]
        assert tokens[-1] == Token("punctuation", ")", 3)

    def test_partial_group_application_discarded(self) -> None:
        tokens = tokenize("f(a,)", self.args_rule())
        assert tokens == []

    def test_group_at_end_of_rule(self) -> None:
        item = Rule.of(composer.punctuation(";"))
        stmt = Rule.of(composer.keyword("go"), item)
        tokens = tokenize("go;;;x", Definition((stmt,)))
        assert [t.value for t in tokens] == ["go", ";", ";", ";"]


class TestNonOverlap:
    def test_tokens_are_ordered_and_disjoint(self) -> None:
        definition = Definition.of(
            composer.comment([["#", "\n"]]),
            composer.string('","'),
            composer.keyword(r"\b(?:if|else)\b"),
            composer.punctuation("(){}:"),
        )
        text = 'if (x) { "a#b" } # c\nelse: pass'
        tokens = tokenize(text, definition)
        for a, b in zip(tokens, tokens[1:]):
            assert a.end <= b.index
        for t in tokens:
            assert text[t.index : t.end] == t.value
