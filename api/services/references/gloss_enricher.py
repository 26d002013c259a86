# api/services/references/gloss_enricher.py
"""
Fill in English glosses for interlinear words.

For each word with a Strong's number and no gloss, in order:
1. Curated gloss cache (Hebrew only)
2. First sense parsed from the lexicon's long definition
3. Lexicon short definition, cut at the first comma/semicolon
4. Otherwise the gloss stays empty

Lexicon fetches run concurrently, one per distinct Strong's number, and a
failed fetch only affects the words that needed it.
"""

import html
import logging
import re
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, Iterable, List, Optional

from core import config

from . import gloss_cache
from .bolls_client import BollsClient, BollsNetworkError
from .interlinear_extractor import HEBREW, WordToken

logger = logging.getLogger(__name__)


SHORT_GLOSS_MAX_CHARS = 25

# Lines in BDBT definitions that describe the entry rather than a sense
METADATA_LABELS = (
    "origin:",
    "part(s)",
    "parts of speech",
    "phonetic:",
    "pronunciation:",
    "transliteration:",
    "strong's",
    "usage:",
    "tdnt:",
)

# <li>, <br>, <p>, newlines and "1." / "a." / "2)" style enumerations
_LIST_ITEM_BOUNDARY = re.compile(
    r"<li[^>]*>|</li>|<br\s*/?>|<p[^>]*>|</p>|\n|(?:^|\s)(?:\d{1,2}|[a-z])[.)]\s",
    re.IGNORECASE,
)
_MARKUP = re.compile(r"<[^>]*>")
_ENUMERATOR = re.compile(r"^(?:\d{1,2}|[a-z])[.)]\s+", re.IGNORECASE)
_TO_VERB = re.compile(r"^to\s+([a-z][a-z' \-]{0,30}?)\s*(?:[,;:.(]|$)", re.IGNORECASE)
_LEADING_PHRASE = re.compile(r"^([a-z][a-z' \-]{0,30}?)\s*[,;:.(]", re.IGNORECASE)


def _clean_text(text: str) -> str:
    text = html.unescape(_MARKUP.sub(" ", text))
    return re.sub(r"\s+", " ", text).strip()


def _definition_items(definition: str) -> List[str]:
    items = []
    for part in _LIST_ITEM_BOUNDARY.split(definition):
        item = _clean_text(part).lstrip("-–—*• ").strip()
        item = _ENUMERATOR.sub("", item)
        if not item:
            continue
        if item.lower().startswith(METADATA_LABELS):
            continue
        items.append(item)
    return items


def best_gloss_from_definition(definition: Optional[str]) -> Optional[str]:
    """
    Pick a short gloss from a long, markup-bearing lexicon definition.

    Only the first sense after metadata lines is considered:
    "to create, shape" -> "create"; "to go up, ascend" -> "go up";
    "beginning, first, chief" -> "beginning".

    Returns:
        Lowercased gloss, or None when the first sense has no usable phrase
    """
    if not definition:
        return None

    items = _definition_items(definition)
    if not items:
        return None
    first = items[0]

    match = _TO_VERB.match(first)
    if match:
        return match.group(1).strip().lower()

    match = _LEADING_PHRASE.match(first)
    if match:
        phrase = match.group(1).strip().lower()
        if len(phrase) > 1:
            return phrase

    return None


def gloss_from_short_definition(short_definition: Optional[str]) -> str:
    """Short definition with markup stripped, cut at the first comma/semicolon."""
    if not short_definition:
        return ""
    text = _clean_text(short_definition)
    text = re.split(r"[,;]", text, maxsplit=1)[0].strip()
    return text[:SHORT_GLOSS_MAX_CHARS].rstrip()


def gloss_from_entry(entry: dict) -> str:
    """Gloss from a lexicon entry: long definition first, then short definition."""
    gloss = best_gloss_from_definition(entry.get("definition"))
    if gloss:
        return gloss
    return gloss_from_short_definition(entry.get("short_definition"))


class GlossEnricher:
    """
    Fills WordToken.english_gloss in place.

    Usage:
        enricher = GlossEnricher()
        words = enricher.enrich(extract(text, "Hebrew"), "Hebrew")
    """

    def __init__(self, client: Optional[BollsClient] = None, max_workers: Optional[int] = None):
        self.client = client or BollsClient()
        self.max_workers = max_workers or config.GLOSS_MAX_WORKERS

    def enrich(self, tokens: List[WordToken], language: str) -> List[WordToken]:
        """
        Fill missing glosses; token order and count are unchanged.

        Args:
            tokens: Words from the interlinear extractor
            language: "Hebrew" or "Greek"

        Returns:
            The same list
        """
        needs_fetch = []

        for token in tokens:
            if not token.strongs_number or token.english_gloss:
                continue

            if language == HEBREW:
                cached = gloss_cache.lookup(token.strongs_number)
                if cached:
                    token.english_gloss = cached.gloss
                    if len(cached.transliteration) >= 2:
                        token.transliteration = cached.transliteration
                    continue

            needs_fetch.append(token)

        if needs_fetch:
            numbers = list(dict.fromkeys(t.strongs_number for t in needs_fetch))
            glosses = self._fetch_glosses(numbers)
            for token in needs_fetch:
                token.english_gloss = glosses.get(token.strongs_number, "")

        return tokens

    def _fetch_glosses(self, numbers: Iterable[str]) -> Dict[str, str]:
        numbers = list(numbers)
        workers = max(1, min(self.max_workers, len(numbers)))
        glosses = {}

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {executor.submit(self._fetch_gloss, n): n for n in numbers}
            for future in as_completed(futures):
                number = futures[future]
                try:
                    glosses[number] = future.result()
                except Exception:
                    logger.exception(f"Unexpected error building gloss for {number}")
                    glosses[number] = ""

        logger.debug(f"Fetched lexicon glosses for {len(numbers)} Strong's numbers")
        return glosses

    def _fetch_gloss(self, strongs_number: str) -> str:
        try:
            entry = self.client.get_definition(strongs_number)
        except BollsNetworkError as e:
            logger.warning(f"Lexicon lookup failed for {strongs_number}: {e}")
            return ""

        if not entry:
            return ""
        return gloss_from_entry(entry)
