"""
Process-wide word list access: load, snapshot, and random (optionally filtered) words.

    from wordament.words import get_random_word_conditional
    get_random_word_conditional(max_length=6, starts_with="ca")

Every function takes an optional store= / selector= for callers that manage their own.
"""
from __future__ import annotations

from .selector import Selector
from .store import WordStore

_STORE = WordStore()
_SELECTOR = Selector(_STORE)


def default_store() -> WordStore:
    return _STORE


def default_selector() -> Selector:
    return _SELECTOR


def _store_for(store: WordStore | None) -> WordStore:
    # An empty store is falsy (__len__), so compare against None
    return _STORE if store is None else store


def _selector_for(store: WordStore | None, selector: Selector | None) -> Selector:
    if selector is not None:
        return selector
    if store is not None and store is not _STORE:
        return Selector(store)
    return _SELECTOR


def load_words(*, store: WordStore | None = None) -> None:
    """Download the word list once. Does nothing if it is already loaded."""
    _store_for(store).ensure_loaded()


async def load_words_async(*, store: WordStore | None = None) -> None:
    await _store_for(store).ensure_loaded_async()


def get_words(*, store: WordStore | None = None) -> list[str]:
    """Copy of the full word list."""
    return _store_for(store).words()


async def get_words_async(*, store: WordStore | None = None) -> list[str]:
    return await _store_for(store).words_async()


def get_random_word(*, store: WordStore | None = None, selector: Selector | None = None) -> str:
    return _selector_for(store, selector).random_word()


async def get_random_word_async(*, store: WordStore | None = None, selector: Selector | None = None) -> str:
    return await _selector_for(store, selector).random_word_async()


def get_random_word_conditional(
    max_length: int = 0,
    starts_with: str = "",
    ends_with: str = "",
    exact_length: int = 0,
    *,
    store: WordStore | None = None,
    selector: Selector | None = None,
) -> str:
    """
    Random word that satisfies every active condition:
    max_length / exact_length when > 0, starts_with / ends_with when not blank.
    Raises NoMatchError if no word in the list qualifies.
    """
    return _selector_for(store, selector).random_word_conditional(
        max_length, starts_with, ends_with, exact_length
    )


async def get_random_word_conditional_async(
    max_length: int = 0,
    starts_with: str = "",
    ends_with: str = "",
    exact_length: int = 0,
    *,
    store: WordStore | None = None,
    selector: Selector | None = None,
) -> str:
    return await _selector_for(store, selector).random_word_conditional_async(
        max_length, starts_with, ends_with, exact_length
    )
