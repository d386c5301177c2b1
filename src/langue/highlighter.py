"""High-level highlighting entry points.

highlight() ties the pieces together: resolve the language through the
registry, tokenize with the configured strategy, render markup.

Fail-open:
    A language name that cannot be resolved or compiled is logged as a
    warning and the code is returned exactly as given (legible but not
    highlighted). Nothing is raised to the caller.

Usage:
    >>> from langue import highlight
    >>> highlight("if (x) {}", "c")
    "<span class='keyword'>if</span> <span class='punctuation'>(</span>x..."

    # With a pre-built Definition (no registry involved)
    >>> highlight("if{}", Definition.of(keyword("if"), punctuation("{}")))
    "<span class='keyword'>if</span><span class='punctuation'>{</span>..."
"""

from __future__ import annotations

from langue.config import HighlightConfig, get_config
from langue.errors import DefinitionError, UnknownLanguageError
from langue.language import CompiledLanguage
from langue.legacy import tokenize_legacy
from langue.registry import LanguageRegistry, get_registry
from langue.renderer import render
from langue.rules import Definition
from langue.scanner import tokenize
from langue.tokens import Token
from langue.utils.logger import get_logger

logger = get_logger(__name__)

LANGUAGE_PREFIX = "language-"

Language = str | Definition | CompiledLanguage


def language_from_class(class_attr: str | None) -> str | None:
    """Extract ``name`` from the first ``language-name`` class.

    Example:
        >>> language_from_class("block language-python numbered")
        'python'
    """
    if not class_attr:
        return None
    for cls in class_attr.split():
        if cls.startswith(LANGUAGE_PREFIX) and len(cls) > len(LANGUAGE_PREFIX):
            return cls[len(LANGUAGE_PREFIX) :]
    return None


def tokenize_code(
    code: str,
    language: Definition | CompiledLanguage,
    config: HighlightConfig | None = None,
) -> list[Token]:
    """Tokenize with the configured strategy.

    A bare Definition has no per-category patterns, so it always runs the
    scanner regardless of ``config.strategy``.
    """
    config = config or get_config()
    if isinstance(language, CompiledLanguage):
        if config.strategy == "legacy":
            return tokenize_legacy(code, language.patterns, overlap=config.overlap)
        language = language.definition
    return tokenize(code, language, absorb_whitespace=config.absorb_whitespace)


def highlight(
    code: str,
    language: Language,
    *,
    registry: LanguageRegistry | None = None,
    config: HighlightConfig | None = None,
) -> str:
    """Highlight ``code`` and return markup.

    Args:
        code: Source text
        language: Language name, compiled language or Definition
        registry: Registry to resolve names with (process-wide by default)
        config: Highlight config (active context config by default)

    Returns:
        Markup with tokens wrapped in spans, or ``code`` unchanged if the
        language could not be resolved
    """
    if isinstance(language, str):
        name = language.removeprefix(LANGUAGE_PREFIX)
        try:
            language = (registry if registry is not None else get_registry()).get(name)
        except (UnknownLanguageError, DefinitionError) as e:
            logger.warning("not highlighting %s code: %s", name, e)
            return code

    return render(code, tokenize_code(code, language, config))


class LangueHighlighter:
    """Highlighter object for renderers that accept one.

    Thread Safety:
        Stateless apart from the (thread-safe) registry it resolves with.
    """

    __slots__ = ("_registry", "_config")

    def __init__(
        self,
        registry: LanguageRegistry | None = None,
        config: HighlightConfig | None = None,
    ) -> None:
        self._registry = registry
        self._config = config

    @property
    def registry(self) -> LanguageRegistry:
        return self._registry if self._registry is not None else get_registry()

    def highlight(self, code: str, language: str) -> str:
        """Highlight code; unknown languages come back unhighlighted."""
        return highlight(code, language, registry=self.registry, config=self._config)

    def supports_language(self, language: str) -> bool:
        """Check if the language resolves and compiles.

        Contract:
            - MUST NOT raise exceptions for unknown languages
        """
        try:
            self.registry.get(language.removeprefix(LANGUAGE_PREFIX))
        except (UnknownLanguageError, DefinitionError):
            return False
        return True


__all__ = [
    "LANGUAGE_PREFIX",
    "LangueHighlighter",
    "highlight",
    "language_from_class",
    "tokenize_code",
]
