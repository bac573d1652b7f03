"""Content loading: maps content keys to zero-argument payload thunks.

A thunk may return the payload directly or an awaitable of it, so file or
network backed content can replace inline text without touching dispatch.
"""

from __future__ import annotations

import inspect
import json
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, Iterable, Iterator, Mapping, Optional, Union

from errors import ConfigurationError, LoaderMissing, LoadFailure

logger = logging.getLogger(__name__)

Payload = Union[str, Awaitable[str]]
Thunk = Callable[[], Payload]


def text_entry(text: str) -> Thunk:
    return lambda: text


def file_entry(path: Path) -> Thunk:
    def _read() -> str:
        return path.read_text(encoding="utf-8")

    return _read


def json_entry(data: Any) -> Thunk:
    return lambda: json.dumps(data, indent=2, ensure_ascii=False)


class ContentLoader:
    def __init__(self, entries: Optional[Mapping[str, Thunk]] = None) -> None:
        self._entries: Dict[str, Thunk] = {}
        for key, thunk in (entries or {}).items():
            self.register(key, thunk)

    @classmethod
    def from_directory(cls, root: Path, keys: Iterable[str], suffix: str = ".md") -> "ContentLoader":
        """Bind each key to ``<root>/<key><suffix>``; files are read on every load."""

        return cls({key: file_entry(root / f"{key}{suffix}") for key in keys})

    def register(self, key: str, thunk: Thunk) -> None:
        if key in self._entries:
            raise ConfigurationError(f"Duplicate content key: {key}")
        self._entries[key] = thunk

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    async def load(self, key: str) -> str:
        thunk = self._entries.get(key)
        if thunk is None:
            raise LoaderMissing(key)
        try:
            payload = thunk()
            if inspect.isawaitable(payload):
                payload = await payload
        except Exception as exc:
            logger.debug("Loader for %s raised", key, exc_info=True)
            raise LoadFailure(key, exc) from exc
        if not isinstance(payload, str):
            raise LoadFailure(key, TypeError(f"expected str payload, got {type(payload).__name__}"))
        return payload
