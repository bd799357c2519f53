"""Tests for the lazily loaded word store."""
from __future__ import annotations

import asyncio
import threading

import pytest

from wordament.errors import FetchError
from wordament.store import WordStore

from .conftest import SAMPLE_WORDS, CountingFetcher


class TestEnsureLoaded:
    def test_starts_empty_without_fetching(self, fetcher) -> None:
        store = WordStore(fetcher)
        assert not store.is_loaded
        assert len(store) == 0
        assert fetcher.calls == 0

    def test_second_call_does_not_refetch(self, fetcher) -> None:
        store = WordStore(fetcher)
        assert store.words() == SAMPLE_WORDS
        assert store.words() == SAMPLE_WORDS
        assert fetcher.calls == 1

    def test_idempotent_with_fetcher_that_fails_second_time(self) -> None:
        fetcher = CountingFetcher(fail_after=1)
        store = WordStore(fetcher)
        store.ensure_loaded()
        store.ensure_loaded()
        assert store.is_loaded
        assert fetcher.calls == 1

    def test_words_returns_a_copy(self, fetcher) -> None:
        store = WordStore(fetcher)
        words = store.words()
        words.clear()
        assert store.words() == SAMPLE_WORDS

    def test_failed_fetch_leaves_store_empty_and_retries(self) -> None:
        calls = []

        def flaky() -> list[str]:
            calls.append(1)
            if len(calls) == 1:
                raise FetchError("down")
            return ["cat"]

        store = WordStore(flaky)
        with pytest.raises(FetchError):
            store.ensure_loaded()
        assert not store.is_loaded
        assert store.words() == ["cat"]
        assert len(calls) == 2

    def test_empty_fetch_is_retried(self) -> None:
        fetcher = CountingFetcher(words=[])
        store = WordStore(fetcher)
        assert store.words() == []
        assert store.words() == []
        assert fetcher.calls == 2


class TestConcurrentLoad:
    def test_parallel_first_callers_fetch_once(self) -> None:
        fetcher = CountingFetcher(delay=0.05)
        store = WordStore(fetcher)
        n = 16
        barrier = threading.Barrier(n)
        results: list[list[str]] = []
        lock = threading.Lock()

        def worker() -> None:
            barrier.wait()
            words = store.words()
            with lock:
                results.append(words)

        threads = [threading.Thread(target=worker) for _ in range(n)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert fetcher.calls == 1
        assert len(results) == n
        assert all(r == SAMPLE_WORDS for r in results)

    def test_parallel_async_callers_fetch_once(self) -> None:
        fetcher = CountingFetcher(delay=0.05)
        store = WordStore(fetcher)

        async def main():
            return await asyncio.gather(*(store.words_async() for _ in range(8)))

        results = asyncio.run(main())
        assert fetcher.calls == 1
        assert all(r == SAMPLE_WORDS for r in results)
