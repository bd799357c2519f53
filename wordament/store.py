"""
In-memory word store: the word list is downloaded once per process, on first use.
"""
from __future__ import annotations

import asyncio
import logging
import threading
from typing import Callable

from .fetch import fetch_words

Fetcher = Callable[[], list[str]]


class WordStore:
    def __init__(self, fetcher: Fetcher | None = None):
        self._fetcher: Fetcher = fetcher or fetch_words
        self._words: tuple[str, ...] = ()
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return bool(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def ensure_loaded(self) -> None:
        """
        Fetch the word list if the store is still empty; no-op otherwise.
        Concurrent first callers wait on the lock, so only one of them fetches.
        A failed or empty fetch leaves the store empty and the next call tries again.
        """
        if self._words:
            return
        with self._lock:
            if self._words:
                return
            words = self._fetcher()
            # Publish the complete list in one assignment
            self._words = tuple(words)
        if self._words:
            logging.info("Loaded %s words", len(self._words))

    async def ensure_loaded_async(self) -> None:
        if self._words:
            return
        await asyncio.to_thread(self.ensure_loaded)

    def snapshot(self) -> tuple[str, ...]:
        """The loaded words without copying and without triggering a load."""
        return self._words

    def words(self) -> list[str]:
        """All words, loading them first if needed. Returns a fresh list the caller may mutate."""
        self.ensure_loaded()
        return list(self._words)

    async def words_async(self) -> list[str]:
        await self.ensure_loaded_async()
        return list(self._words)
