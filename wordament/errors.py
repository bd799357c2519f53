"""
Errors raised by the word store and selector.
"""
from __future__ import annotations


class WordamentError(Exception):
    """Base class for every error raised by this package."""


class FetchError(WordamentError):
    """The word list could not be downloaded. The store stays empty, so retrying is safe."""


class EmptyStoreError(WordamentError):
    """The word list loaded but has no entries to draw from."""


class NoMatchError(WordamentError):
    """No word in the list satisfies the requested filter."""
