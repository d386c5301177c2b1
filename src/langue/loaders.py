"""Resolve language names to decoded definition resources.

Loaders are plain callables ``name -> Mapping`` used by LanguageRegistry:

- fetch_language: HTTP GET of ``<base_url>/<name>.json`` (requests),
  retried on connection failures (tenacity)
- DirectoryLoader: ``<directory>/<name>.json`` on the local filesystem
- load_language_file: one local JSON file

Every loader reports a name it cannot resolve as UnknownLanguageError.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

import requests
import tenacity

from langue.errors import UnknownLanguageError
from langue.utils.logger import get_logger

logger = get_logger(__name__)

# Names become URL and file path segments
_VALID_NAME = re.compile(r"^[A-Za-z0-9_+#.-]+$")


def _check_name(name: str) -> None:
    if not _VALID_NAME.match(name) or name in (".", ".."):
        raise UnknownLanguageError(name, "invalid language name")


@tenacity.retry(
    reraise=True,
    stop=tenacity.stop_after_attempt(3),
    wait=tenacity.wait_random(1, 2),
    retry=tenacity.retry_if_exception_type(requests.exceptions.ConnectionError),
)
def _get(url: str, timeout: float) -> requests.Response:
    return requests.get(url, timeout=timeout)


def fetch_language(name: str, *, base_url: str, timeout: float = 5.0) -> dict[str, Any]:
    """Download and decode ``<base_url>/<name>.json``.

    Raises:
        UnknownLanguageError: On a bad name, a non-2xx response, a
            connection that keeps failing, or a body that is not JSON
    """
    _check_name(name)
    url = f"{base_url.rstrip('/')}/{name}.json"
    logger.debug("fetching language %s from %s", name, url)
    try:
        response = _get(url, timeout)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.HTTPError as e:
        raise UnknownLanguageError(name, f"HTTP {e.response.status_code}") from e
    except ValueError as e:
        raise UnknownLanguageError(name, "response is not JSON") from e
    except requests.exceptions.RequestException as e:
        raise UnknownLanguageError(name, str(e)) from e


def load_language_file(path: str | Path) -> dict[str, Any]:
    """Read one JSON language resource from disk.

    Raises:
        UnknownLanguageError: If the file is missing, unreadable or not JSON
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as fh:
            return json.load(fh)
    except FileNotFoundError as e:
        raise UnknownLanguageError(path.stem, f"no such file {path}") from e
    except json.JSONDecodeError as e:
        raise UnknownLanguageError(path.stem, f"{path} is not JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise UnknownLanguageError(path.stem, f"{path} is not UTF-8: {e}") from e
    except OSError as e:
        raise UnknownLanguageError(path.stem, f"cannot read {path}: {e}") from e


class DirectoryLoader:
    """Loads ``<directory>/<name>.json``."""

    __slots__ = ("directory",)

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def __call__(self, name: str) -> dict[str, Any]:
        _check_name(name)
        return load_language_file(self.directory / f"{name}.json")

    def __repr__(self) -> str:
        return f"DirectoryLoader({str(self.directory)!r})"


__all__ = [
    "DirectoryLoader",
    "fetch_language",
    "load_language_file",
]
