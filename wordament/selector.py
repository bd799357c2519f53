"""
Random word selection, optionally constrained by length / prefix / suffix filters.

Filtered draws use rejection sampling for a bounded number of attempts and then
fall back to filtering the whole list once, so a filter that matches nothing
raises NoMatchError instead of looping forever.
"""
from __future__ import annotations

import logging
import random
import threading

from pydantic import BaseModel, field_validator

from .errors import EmptyStoreError, NoMatchError
from .store import WordStore

MAX_ATTEMPTS = 1000


class WordFilter(BaseModel):
    max_length: int = 0
    exact_length: int = 0
    starts_with: str = ""
    ends_with: str = ""

    @field_validator("max_length", "exact_length", mode="before")
    @classmethod
    def none_length_is_inactive(cls, v):
        return 0 if v is None else v

    @field_validator("starts_with", "ends_with", mode="before")
    @classmethod
    def none_affix_is_inactive(cls, v):
        return "" if v is None else v

    @property
    def length_check(self) -> bool:
        return self.max_length > 0

    @property
    def exact_length_check(self) -> bool:
        return self.exact_length > 0

    @property
    def starts_check(self) -> bool:
        return bool(self.starts_with.strip())

    @property
    def ends_check(self) -> bool:
        return bool(self.ends_with.strip())

    def is_active(self) -> bool:
        return self.length_check or self.exact_length_check or self.starts_check or self.ends_check

    def matches(self, word: str) -> bool:
        """True if every active condition holds; inactive ones are ignored."""
        if self.length_check and len(word) > self.max_length:
            return False
        if self.exact_length_check and len(word) != self.exact_length:
            return False
        if self.starts_check and not word.startswith(self.starts_with):
            return False
        if self.ends_check and not word.endswith(self.ends_with):
            return False
        return True

    def describe(self) -> str:
        parts = []
        if self.length_check:
            parts.append(f"length <= {self.max_length}")
        if self.exact_length_check:
            parts.append(f"length == {self.exact_length}")
        if self.starts_check:
            parts.append(f"starts with {self.starts_with!r}")
        if self.ends_check:
            parts.append(f"ends with {self.ends_with!r}")
        return ", ".join(parts) or "no conditions"


class Selector:
    def __init__(
        self,
        store: WordStore,
        rng: random.Random | None = None,
        *,
        max_attempts: int = MAX_ATTEMPTS,
    ):
        self.store = store
        self.max_attempts = max_attempts
        self._rng = rng or random.Random()
        self._rng_lock = threading.Lock()

    def _pick(self, words) -> str:
        with self._rng_lock:
            return words[self._rng.randrange(len(words))]

    def _draw(self) -> str:
        words = self.store.snapshot()
        if not words:
            raise EmptyStoreError("Word list is empty; nothing to draw from.")
        return self._pick(words)

    def _draw_matching(self, word_filter: WordFilter) -> str:
        if not word_filter.is_active():
            return self._draw()
        for _ in range(self.max_attempts):
            word = self._draw()
            if word_filter.matches(word):
                return word
        logging.debug(
            "No match after %s draws (%s); filtering the whole list",
            self.max_attempts, word_filter.describe(),
        )
        candidates = [w for w in self.store.snapshot() if word_filter.matches(w)]
        if not candidates:
            raise NoMatchError(f"No word satisfies: {word_filter.describe()}")
        return self._pick(candidates)

    def random_word(self) -> str:
        self.store.ensure_loaded()
        return self._draw()

    async def random_word_async(self) -> str:
        await self.store.ensure_loaded_async()
        return self._draw()

    def random_matching(self, word_filter: WordFilter) -> str:
        self.store.ensure_loaded()
        return self._draw_matching(word_filter)

    async def random_matching_async(self, word_filter: WordFilter) -> str:
        await self.store.ensure_loaded_async()
        return self._draw_matching(word_filter)

    def random_word_conditional(
        self,
        max_length: int = 0,
        starts_with: str = "",
        ends_with: str = "",
        exact_length: int = 0,
    ) -> str:
        return self.random_matching(
            WordFilter(
                max_length=max_length,
                starts_with=starts_with,
                ends_with=ends_with,
                exact_length=exact_length,
            )
        )

    async def random_word_conditional_async(
        self,
        max_length: int = 0,
        starts_with: str = "",
        ends_with: str = "",
        exact_length: int = 0,
    ) -> str:
        return await self.random_matching_async(
            WordFilter(
                max_length=max_length,
                starts_with=starts_with,
                ends_with=ends_with,
                exact_length=exact_length,
            )
        )
