"""Process-wide cache of compiled languages.

Languages are loaded and compiled on first use, keyed by name, and kept
for the life of the process (no invalidation or eviction).

Single-flight compilation:
    The first caller for a name installs a Future under the lock, then
    loads and compiles outside it. Concurrent callers for the same name
    find that Future and wait on it, so each name is loaded and compiled
    at most once. A failed load is removed again so a later call can
    retry; waiting callers see the same exception.

Thread Safety:
    All mutation happens under a threading.Lock. Reads of completed
    entries return immutable CompiledLanguage objects.

Example:
    >>> registry = LanguageRegistry(loader=DirectoryLoader("languages"))
    >>> c = registry.get("c")        # loads languages/c.json, compiles
    >>> registry.get("c") is c       # cached
    True
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from concurrent.futures import Future
from typing import Any

from langue.config import get_config
from langue.language import CompiledLanguage, load_language
from langue.loaders import fetch_language
from langue.utils.logger import get_logger

logger = get_logger(__name__)

# Resolves a language name to its decoded resource
Loader = Callable[[str], Mapping[str, Any]]


class LanguageRegistry:
    """Name → CompiledLanguage cache with at-most-once compilation per name."""

    __slots__ = ("_loader", "_entries", "_lock")

    def __init__(self, loader: Loader | None = None) -> None:
        """Initialize an empty registry.

        Args:
            loader: Resolves names not yet cached. Defaults to fetching
                from the configured base URL.
        """
        self._loader = loader
        self._entries: dict[str, Future[CompiledLanguage]] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> CompiledLanguage:
        """Return the compiled language, loading it on first use.

        Raises:
            UnknownLanguageError: If the loader cannot resolve the name
            DefinitionError: If the resource does not compile
        """
        with self._lock:
            future = self._entries.get(name)
            owner = future is None
            if owner:
                future = Future()
                self._entries[name] = future

        assert future is not None
        if owner:
            self._populate(name, future)
        return future.result()

    def _populate(self, name: str, future: Future[CompiledLanguage]) -> None:
        logger.debug("language cache miss: %s", name)
        try:
            language = load_language(self._load(name), name)
        except BaseException as e:
            with self._lock:
                if self._entries.get(name) is future:
                    del self._entries[name]
            future.set_exception(e)
            return
        future.set_result(language)

    def _load(self, name: str) -> Mapping[str, Any]:
        if self._loader is not None:
            return self._loader(name)
        config = get_config()
        return fetch_language(name, base_url=config.base_url, timeout=config.timeout)

    def register(self, language: CompiledLanguage, name: str | None = None) -> None:
        """Pre-populate the cache, replacing any existing entry."""
        future: Future[CompiledLanguage] = Future()
        future.set_result(language)
        with self._lock:
            self._entries[name or language.name] = future

    def has(self, name: str) -> bool:
        """True if ``name`` is compiled (or compiling) in this registry."""
        with self._lock:
            return name in self._entries

    @property
    def names(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._entries)

    def __contains__(self, name: str) -> bool:
        """Support 'name in registry' syntax."""
        return self.has(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_registry: LanguageRegistry = LanguageRegistry()
_registry_lock = threading.Lock()


def get_registry() -> LanguageRegistry:
    """Get the process-wide registry."""
    return _registry


def set_registry(registry: LanguageRegistry) -> None:
    """Replace the process-wide registry (e.g. with a custom loader)."""
    global _registry
    with _registry_lock:
        _registry = registry


__all__ = [
    "LanguageRegistry",
    "Loader",
    "get_registry",
    "set_registry",
]
