"""Tests for language resources and their compilation."""

import pytest

from langue.errors import DefinitionError
from langue.language import LanguageSpec, compile_language, load_language
from langue.legacy import Priority
from langue.scanner import tokenize

C_LIKE = {
    "keywords": r"\b(if|else|return)\b",
    "punctuation": "{}();",
    "comment": [["//", "\n"], ["/*", "*/"]],
    "string": [['"', '"']],
}


class TestLanguageSpec:
    def test_from_dict(self) -> None:
        spec = LanguageSpec.from_dict(C_LIKE)
        assert spec.keywords == r"\b(if|else|return)\b"
        assert spec.punctuation == "{}();"
        assert spec.comment == (("//", "\n"), ("/*", "*/"))
        assert spec.string == (('"', '"'),)
        assert spec.special is None

    def test_unknown_keys_ignored(self) -> None:
        spec = LanguageSpec.from_dict({"keywords": "if", "homepage": "x"})
        assert spec.keywords == "if"

    def test_punctuation_list_joined(self) -> None:
        assert LanguageSpec.from_dict({"punctuation": ["{", "}"]}).punctuation == "{}"

    def test_wrong_type_rejected(self) -> None:
        with pytest.raises(DefinitionError) as exc_info:
            LanguageSpec.from_dict({"keywords": 42})
        assert exc_info.value.category == "keywords"

    def test_not_an_object_rejected(self) -> None:
        with pytest.raises(DefinitionError):
            LanguageSpec.from_dict(["keywords"])  # type: ignore[arg-type]

    def test_malformed_fence_rejected(self) -> None:
        with pytest.raises(DefinitionError):
            LanguageSpec.from_dict({"string": [['"']]})

    @pytest.mark.parametrize(
        "data",
        [{"comment": 5}, {"comment": [5]}, {"string": True}, {"punctuation": ["{", 1]}],
    )
    def test_wrong_field_types_rejected(self, data: dict) -> None:
        with pytest.raises(DefinitionError) as exc_info:
            LanguageSpec.from_dict(data)
        assert exc_info.value.category == next(iter(data))


class TestCompileLanguage:
    def test_rule_order(self) -> None:
        language = load_language({**C_LIKE, "special": "@\\w+", "skip": "\\w+"}, "c")
        tags = [rule.first.tag for rule in language.definition]
        assert tags == ["comment", "string", "keyword", "special", "punctuation", ""]
        assert language.definition.name == "c"

    def test_empty_categories_omitted(self) -> None:
        language = load_language({"keywords": "if"}, "tiny")
        assert len(language.definition) == 1
        assert set(language.patterns) == {Priority.KEYWORD}

    def test_legacy_patterns_capture_group_one(self) -> None:
        language = load_language(C_LIKE, "c")
        assert set(language.patterns) == set(Priority)
        for pattern in language.patterns.values():
            assert pattern.groups >= 1

    def test_invalid_keyword_pattern(self) -> None:
        with pytest.raises(DefinitionError):
            compile_language(LanguageSpec(keywords="(if"), "broken")

    def test_compiled_definition_tokenizes(self) -> None:
        language = load_language(C_LIKE, "c")
        tokens = tokenize('if (x) { return "}"; } // done\n', language.definition)
        assert [(t.tag, t.value) for t in tokens] == [
            ("keyword", "if"),
            ("punctuation", "("),
            ("punctuation", ")"),
            ("punctuation", "{"),
            ("keyword", "return"),
            ("string", '"}"'),
            ("punctuation", ";"),
            ("punctuation", "}"),
            ("comment", "// done\n"),
        ]
