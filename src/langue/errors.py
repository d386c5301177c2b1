"""Exception classes for Langue.

Provides standardized exceptions for error handling throughout Langue.

Scanning itself never raises: running out of matches is how a scan ends.
Errors surface at definition-compile time (malformed fragments) and at
language-resolution time (unknown language names).
"""

from __future__ import annotations


class LangueError(Exception):
    """Base exception for all Langue errors.

    Subclass this for specific error categories.
    """

    pass


class DefinitionError(LangueError):
    """A language definition could not be compiled.

    Raised when a pattern fragment fails to compile, a fence pair is
    malformed, or a rule tree is structurally invalid.
    """

    def __init__(
        self,
        message: str,
        fragment: str | None = None,
        category: str | None = None,
    ) -> None:
        """Initialize definition error with the offending fragment.

        Args:
            message: Error description
            fragment: The raw fragment that failed (optional)
            category: Token category being compiled, e.g. "string" (optional)
        """
        self.message = message
        self.fragment = fragment
        self.category = category

        prefix = f"[{category}] " if category else ""
        suffix = f": {fragment!r}" if fragment is not None else ""
        super().__init__(f"{prefix}{message}{suffix}")


class UnknownLanguageError(LangueError):
    """No definition is available for a language name.

    Raised by loaders and the registry. The high-level highlight()
    function catches it and returns the source unhighlighted.
    """

    def __init__(self, language: str, reason: str | None = None) -> None:
        """Initialize unknown language error.

        Args:
            language: The language name that failed to resolve
            reason: Underlying cause, e.g. an HTTP status (optional)
        """
        self.language = language
        self.reason = reason

        detail = f" ({reason})" if reason else ""
        super().__init__(f"Unknown language '{language}'{detail}")
