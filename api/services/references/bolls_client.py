# api/services/references/bolls_client.py
"""
Bolls.life API client.

Provides the two upstream collaborators the reference services depend on:
- Chapter text for a translation/edition (English or original-language)
- Lexicon entries for Strong's numbers (BDBT dictionary)

A single best-effort attempt is made per request; every failure is raised
as BollsNetworkError and callers decide whether it is fatal.
"""

import logging
import threading
from typing import Optional

import requests

from core import config

logger = logging.getLogger(__name__)


# Public translation codes -> Bolls.life translation codes
TRANSLATION_MAP = {
    "ESV": "ESV",
    "NIV": "NIV",
    "KJV": "KJV",
    "NKJV": "NKJV",
    "NASB": "NASB",
    "NLT": "NLT",
    "CSB": "CSB17",
    "MSG": "MSG",
    "AMP": "AMP",
    "NRSV": "NRSVCE",
    "WEB": "WEB",
    "YLT": "YLT",
}

DEFAULT_TRANSLATION = "ESV"


class BollsError(Exception):
    """Base exception for Bolls.life client errors."""
    pass


class BollsNetworkError(BollsError):
    """Raised when a request fails, returns non-2xx, or returns a malformed payload."""
    pass


def resolve_translation(code: Optional[str]) -> str:
    """Map a public translation code to a Bolls.life code (unknown -> ESV)."""
    if not code:
        return TRANSLATION_MAP[DEFAULT_TRANSLATION]
    return TRANSLATION_MAP.get(code.strip().upper(), TRANSLATION_MAP[DEFAULT_TRANSLATION])


def edition_for_language(language: str) -> str:
    """Original-language edition for "Hebrew" or "Greek"."""
    if language == "Hebrew":
        return config.BOLLS_HEBREW_EDITION
    return config.BOLLS_GREEK_EDITION


class BollsClient:
    """
    Client for the Bolls.life text and dictionary API.

    Usage:
        client = BollsClient()

        # Whole chapter as [{"verse": 1, "text": "..."}, ...]
        chapter = client.get_chapter("KJV", 43, 3)

        # Lexicon entry for a Strong's number
        entry = client.get_definition("H430")
        print(entry["short_definition"])
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or config.BOLLS_BASE_URL).rstrip("/")
        self.dictionary = config.BOLLS_DICTIONARY
        self._request_timeout = timeout or config.BOLLS_TIMEOUT
        # One requests.Session per thread
        self._local = threading.local()

    def _get_session(self) -> requests.Session:
        """Session owned by the calling thread, created on first use."""
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
        return session

    def _get_json(self, path: str):
        url = f"{self.base_url}/{path}"

        try:
            logger.debug(f"Fetching {url}")
            response = self._get_session().get(url, timeout=self._request_timeout)
            response.raise_for_status()
            return response.json()

        except requests.Timeout:
            raise BollsNetworkError(f"Request to {url} timed out after {self._request_timeout}s")
        except requests.HTTPError as e:
            raise BollsNetworkError(f"Bolls.life returned HTTP {e.response.status_code} for {url}")
        except requests.RequestException as e:
            raise BollsNetworkError(f"Network error fetching {url}: {e}")
        except ValueError as e:
            raise BollsNetworkError(f"Malformed JSON from {url}: {e}")

    def get_chapter(self, edition: str, book_number: int, chapter: int) -> list:
        """
        Get every verse of a chapter.

        Args:
            edition: Bolls.life translation code (e.g., "KJV", "OHB", "OGNT")
            book_number: Canonical book number (1-66)
            chapter: Chapter number

        Returns:
            List of {"verse": int, "text": str, ...} dicts

        Raises:
            BollsNetworkError: On any request failure or malformed payload
        """
        data = self._get_json(f"get-text/{edition}/{book_number}/{chapter}/")

        if not isinstance(data, list):
            raise BollsNetworkError(
                f"Expected a verse list for {edition} {book_number}:{chapter}, got {type(data).__name__}"
            )

        return [v for v in data if isinstance(v, dict)]

    def get_verse_texts(self, edition: str, ref) -> list:
        """
        Get the verses of a VerseRef's range, in order.

        Verses missing from the upstream chapter are skipped.
        """
        chapter = self.get_chapter(edition, ref.book_number, ref.chapter)
        by_verse = {v.get("verse"): v for v in chapter}
        return [by_verse[n] for n in ref.verses if n in by_verse]

    def get_definition(self, strongs_number: str) -> Optional[dict]:
        """
        Get the lexicon entry for a Strong's number.

        Args:
            strongs_number: Normalized Strong's number (e.g., "H430", "G26")

        Returns:
            Entry dict with lemma, transliteration, part_of_speech,
            definition, short_definition, occurrences, or None when the
            dictionary has no entry

        Raises:
            BollsNetworkError: On any request failure or malformed payload
        """
        data = self._get_json(f"dictionary-definition/{self.dictionary}/{strongs_number}/")

        if not isinstance(data, list):
            raise BollsNetworkError(
                f"Expected an entry list for {strongs_number}, got {type(data).__name__}"
            )
        if not data:
            return None

        entry = data[0]
        if not isinstance(entry, dict):
            raise BollsNetworkError(f"Malformed dictionary entry for {strongs_number}")
        return entry
