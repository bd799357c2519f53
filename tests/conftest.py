from __future__ import annotations

import threading
import time

import pytest

SAMPLE_WORDS = ["cat", "car", "dog", "apple"]


class CountingFetcher:
    """Fake fetcher: returns a fixed word list and counts how often it was called."""

    def __init__(self, words=None, delay: float = 0.0, fail_after: int | None = None):
        self.words = list(SAMPLE_WORDS if words is None else words)
        self.delay = delay
        self.fail_after = fail_after
        self.calls = 0
        self._lock = threading.Lock()

    def __call__(self) -> list[str]:
        with self._lock:
            self.calls += 1
            n = self.calls
        if self.fail_after is not None and n > self.fail_after:
            raise AssertionError("fetcher called again")
        if self.delay:
            time.sleep(self.delay)
        return list(self.words)


@pytest.fixture
def fetcher() -> CountingFetcher:
    return CountingFetcher()
