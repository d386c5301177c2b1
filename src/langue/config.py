"""ContextVar-based highlight configuration for Langue.

Provides thread-local configuration using Python's ContextVars (PEP 567).
highlight() reads the active config unless one is passed explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from langue.config import HighlightConfig, config_context

    with config_context(HighlightConfig(strategy="legacy")):
        html = highlight(code, "c")

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from langue.legacy import OverlapPolicy

DEFAULT_BASE_URL = "https://raw.githubusercontent.com/wiktor-wiki/languages/master"

STRATEGIES = frozenset({"scan", "legacy"})


@dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Immutable highlight configuration.

    Attributes:
        base_url: Where language definitions are fetched from
            (``<base_url>/<name>.json``)
        timeout: HTTP timeout in seconds for definition fetches
        absorb_whitespace: Anchored matches absorb surrounding whitespace
        strategy: "scan" (cursor scanner) or "legacy" (containment resolver)
        overlap: Overlap policy for the legacy strategy

    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 5.0
    absorb_whitespace: bool = False
    strategy: str = "scan"
    overlap: OverlapPolicy = OverlapPolicy.CONTAIN

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            msg = f"strategy must be one of {sorted(STRATEGIES)}, got {self.strategy!r}"
            raise ValueError(msg)
        if not isinstance(self.overlap, OverlapPolicy):
            object.__setattr__(self, "overlap", OverlapPolicy(self.overlap))

    @classmethod
    def from_dict(cls, config_dict: dict) -> HighlightConfig:
        """Create HighlightConfig from dictionary.

        Only includes keys that are valid HighlightConfig fields; unknown keys
        are silently ignored. ``overlap`` may be given as its string value.

        Example:
            >>> config = HighlightConfig.from_dict({
            ...     "strategy": "legacy",
            ...     "overlap": "strict",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.overlap
            <OverlapPolicy.STRICT: 'strict'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: HighlightConfig = HighlightConfig()

_highlight_config: ContextVar[HighlightConfig] = ContextVar(
    "highlight_config",
    default=_DEFAULT_CONFIG,
)


def get_config() -> HighlightConfig:
    """Get current highlight configuration (thread-local)."""
    return _highlight_config.get()


def set_config(config: HighlightConfig) -> None:
    """Set highlight configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _highlight_config.set(config)


def reset_config() -> None:
    """Reset to default configuration."""
    _highlight_config.set(_DEFAULT_CONFIG)


@contextmanager
def config_context(config: HighlightConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.
    """
    previous = _highlight_config.get()
    _highlight_config.set(config)
    try:
        yield
    finally:
        _highlight_config.set(previous)


__all__ = [
    "DEFAULT_BASE_URL",
    "HighlightConfig",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
]
