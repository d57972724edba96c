"""In-memory CSS cache keyed by user agent, locale and font set."""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, Sequence

logger = logging.getLogger(__name__)

_NON_WORD_RE = re.compile(r"\W")


def derive_key(ua: str, locale: str, fonts: Sequence[str]) -> str:
    """Build the cache key for a request.

    No normalization: casing, whitespace and font order all matter.
    """
    return f"{ua}-{locale}-{','.join(fonts)}"


def cache_filename(key: str) -> str:
    """File name for a cache key: non-word characters become ``-``."""
    return _NON_WORD_RE.sub("-", key) + ".css"


@dataclass(frozen=True)
class CacheEntry:
    css: str
    css_path: Path


class CssCache:
    """Cache of generated CSS with per-key single-flight on misses.

    Entries are never evicted; clear() is the only invalidation. Failed
    builds are not cached.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._inflight: dict[str, asyncio.Task[CacheEntry]] = {}
        self._generation = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    @property
    def generation(self) -> int:
        """Bumped by every clear(); builds compare it to detect staleness."""
        return self._generation

    def get(self, key: str) -> CacheEntry | None:
        return self._entries.get(key)

    def clear(self) -> None:
        self._generation += 1
        self._entries.clear()
        # Builds started before clear() must not repopulate the cache.
        self._inflight.clear()

    async def get_or_build(
        self,
        key: str,
        build: Callable[[], Awaitable[CacheEntry]],
    ) -> CacheEntry:
        """Return the entry for ``key``, running ``build`` on a miss.

        Concurrent misses for the same key share a single build.
        """
        entry = self._entries.get(key)
        if entry is not None:
            return entry

        task = self._inflight.get(key)
        if task is None:
            logger.debug(f"CSS cache miss: {key}")
            task = asyncio.ensure_future(self._run(key, build))
            self._inflight[key] = task
        # shield: a cancelled waiter must not cancel the shared build
        return await asyncio.shield(task)

    async def _run(
        self,
        key: str,
        build: Callable[[], Awaitable[CacheEntry]],
    ) -> CacheEntry:
        task = asyncio.current_task()
        try:
            entry = await build()
            if self._inflight.get(key) is task:
                self._entries[key] = entry
            return entry
        finally:
            if self._inflight.get(key) is task:
                del self._inflight[key]
