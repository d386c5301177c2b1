"""
Langue: Declarative Syntax Highlighter for Python

Partitions source text into classified tokens (keyword, punctuation,
string, comment, special, or untagged) using ordered pattern rules, and
renders escaped markup with ``<span class='tag'>`` wrappers.

Quick Start:
    >>> from langue import Definition, highlight, keyword, punctuation
    >>> lang = Definition.of(keyword(r"\\bif\\b"), punctuation("{}"))
    >>> highlight("if{}", lang)
    "<span class='keyword'>if</span><span class='punctuation'>{</span><span class='punctuation'>}</span>"

Named Languages:
    >>> from langue import highlight
    >>> html = highlight(code, "c")   # fetched once, cached for the process

    >>> # Or resolve names from a local directory of JSON resources
    >>> from langue import DirectoryLoader, LanguageRegistry, set_registry
    >>> set_registry(LanguageRegistry(loader=DirectoryLoader("languages")))

Installation:
    pip install langue
"""

from langue.composer import comment, keyword, parse_fences, punctuation, skip, special, string
from langue.config import (
    HighlightConfig,
    config_context,
    get_config,
    reset_config,
    set_config,
)
from langue.errors import DefinitionError, LangueError, UnknownLanguageError
from langue.escaping import escape_markup, escape_pattern, unescape_markup
from langue.highlighter import LangueHighlighter, highlight, language_from_class, tokenize_code
from langue.language import CompiledLanguage, LanguageSpec, compile_language, load_language
from langue.legacy import OverlapPolicy, Priority, findall, resolve, tokenize_legacy
from langue.loaders import DirectoryLoader, fetch_language, load_language_file
from langue.matcher import Matcher
from langue.registry import LanguageRegistry, get_registry, set_registry
from langue.renderer import render
from langue.rules import Definition, Group, Leaf, Rule
from langue.scanner import Scanner, tokenize
from langue.tokens import Token, TokenTag

__version__ = "0.1.0"

__all__ = [
    "CompiledLanguage",
    "Definition",
    "DefinitionError",
    "DirectoryLoader",
    "Group",
    "HighlightConfig",
    "LanguageRegistry",
    "LanguageSpec",
    "LangueError",
    "LangueHighlighter",
    "Leaf",
    "Matcher",
    "OverlapPolicy",
    "Priority",
    "Rule",
    "Scanner",
    "Token",
    "TokenTag",
    "UnknownLanguageError",
    "__version__",
    "comment",
    "compile_language",
    "config_context",
    "escape_markup",
    "escape_pattern",
    "fetch_language",
    "findall",
    "get_config",
    "get_registry",
    "highlight",
    "keyword",
    "language_from_class",
    "load_language",
    "load_language_file",
    "parse_fences",
    "punctuation",
    "render",
    "reset_config",
    "resolve",
    "set_config",
    "set_registry",
    "skip",
    "special",
    "string",
    "tokenize",
    "tokenize_code",
    "tokenize_legacy",
    "unescape_markup",
]
