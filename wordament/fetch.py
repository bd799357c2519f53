"""
Download the English word list (dwyl/english-words, one word per line).
URL and timeout can be overridden with WORDAMENT_WORDS_URL / WORDAMENT_FETCH_TIMEOUT.
"""
from __future__ import annotations

import logging
import os

import requests

from .errors import FetchError

DEFAULT_WORDS_URL = "https://cdn.jsdelivr.net/gh/dwyl/english-words/words_alpha.txt"
DEFAULT_TIMEOUT = 30.0

REQUEST_HEADERS = {
    "User-Agent": "wordament/1.0 (+https://github.com/dwyl/english-words)",
    "Accept": "text/plain,*/*;q=0.8",
}


def get_words_url() -> str:
    url = os.environ.get("WORDAMENT_WORDS_URL", "").strip()
    return url or DEFAULT_WORDS_URL


def get_fetch_timeout() -> float:
    raw = os.environ.get("WORDAMENT_FETCH_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logging.warning("Ignoring WORDAMENT_FETCH_TIMEOUT=%r (not a number)", raw)
        return DEFAULT_TIMEOUT
    if value <= 0:
        logging.warning("Ignoring WORDAMENT_FETCH_TIMEOUT=%r (must be positive)", raw)
        return DEFAULT_TIMEOUT
    return value


def split_lines(text: str) -> list[str]:
    """
    Drop every carriage return, then split on line feeds.
    A trailing newline leaves a trailing "" entry; an empty body gives no entries.
    """
    if not text:
        return []
    return text.replace("\r", "").split("\n")


def _session() -> requests.Session:
    s = requests.Session()
    s.headers.update(REQUEST_HEADERS)
    return s


def fetch_text(url: str | None = None, *, timeout: float | None = None) -> str:
    """GET the word list and return the body as text. Raises FetchError on any transport or HTTP failure."""
    url = url or get_words_url()
    timeout = timeout if timeout is not None else get_fetch_timeout()
    logging.info("Downloading %s ...", url)
    try:
        with _session() as session:
            resp = session.get(url, timeout=timeout)
            resp.raise_for_status()
            body = resp.content
    except requests.RequestException as e:
        raise FetchError(f"Could not download word list from {url}: {e}") from e
    # Bad bytes only spoil the line they sit on
    return body.decode("utf-8", errors="ignore")


def fetch_words(url: str | None = None, *, timeout: float | None = None) -> list[str]:
    """Download and split the word list. This is the default fetcher of WordStore."""
    words = split_lines(fetch_text(url, timeout=timeout))
    if not words:
        logging.warning("Word list at %s was empty", url or get_words_url())
    return words
