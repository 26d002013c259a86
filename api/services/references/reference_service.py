# api/services/references/reference_service.py
"""
Reference service composing the parser, datasets and Bolls.life client.

Each method corresponds to one public endpoint and returns the JSON-ready
payload for it. Upstream failures degrade the response where a partial
answer is still useful (interlinear words without glosses, "available":
false) and raise only where there is nothing to return.
"""

import logging
import re
from typing import Optional

from .bolls_client import (
    BollsClient,
    BollsNetworkError,
    edition_for_language,
    resolve_translation,
)
from .cross_references import CrossReferenceIndex
from .gloss_cache import normalize_strongs
from .gloss_enricher import GlossEnricher
from .interlinear_extractor import (
    HEBREW,
    GREEK,
    extract_with_strategy,
    strip_markup,
    transliterate,
)
from .preloaded import get_preloaded_strongs, get_preloaded_verse
from .reference_parser import (
    VerseRef,
    build_lookup_key,
    display_form,
    parse_reference,
)

logger = logging.getLogger(__name__)


CROSS_REFERENCE_SOURCE = "Treasury of Scripture Knowledge"
LONG_DEFINITION_MAX_CHARS = 500

INTERLINEAR_UNAVAILABLE_MESSAGE = (
    "Interlinear data temporarily unavailable. Try popular verses like "
    "Genesis 1:1, John 3:16, Psalm 23:1, or Romans 8:28"
)


class VerseNotFoundError(Exception):
    """Raised when no text could be retrieved for a verse."""

    def __init__(self, reference: str, message: str = None):
        self.reference = reference
        super().__init__(message or f"Verse not found: {reference}")


class StrongsNotFoundError(Exception):
    """Raised when a Strong's number is neither preloaded nor in the lexicon."""

    def __init__(self, number: str):
        self.number = number
        super().__init__(f"Strong's number not found: {number}")


def _single_verse(ref: VerseRef) -> VerseRef:
    return VerseRef(ref.book_number, ref.chapter, ref.verse_start, ref.verse_start)


def _clean_definition(text: str) -> str:
    return re.sub(r"\s+", " ", re.sub(r"<[^>]*>", " ", text or "")).strip()


class ReferenceService:
    """
    Verse text, cross-references, interlinear words and lexicon entries.

    Usage:
        service = ReferenceService()

        service.get_verse("John 3:16", "KJV")
        service.get_cross_references("Jn 3:16")
        service.get_interlinear(parse_reference("Genesis 1:1"))
        service.get_strongs("H7225")
    """

    def __init__(
        self,
        client: Optional[BollsClient] = None,
        cross_references: Optional[CrossReferenceIndex] = None,
        enricher: Optional[GlossEnricher] = None,
    ):
        self.client = client or BollsClient()
        self.cross_references = cross_references or CrossReferenceIndex()
        self.enricher = enricher or GlossEnricher(client=self.client)

    # -------------------------------------------------------------------------
    # Verse text
    # -------------------------------------------------------------------------

    def get_verse(self, ref_text: str, translation: str = "ESV") -> dict:
        """
        Get English text for a verse or verse range.

        Raises:
            ReferenceParseError: If the reference cannot be parsed
            VerseNotFoundError: If the upstream fails or has none of the verses
        """
        ref = parse_reference(ref_text)
        reference = display_form(ref)
        translation = (translation or "ESV").strip().upper()
        edition = resolve_translation(translation)

        try:
            verses = self.client.get_verse_texts(edition, ref)
        except BollsNetworkError as e:
            logger.warning(f"Verse lookup failed for {reference} ({edition}): {e}")
            raise VerseNotFoundError(reference) from e

        texts = [strip_markup(v.get("text", "")) for v in verses]
        text = " ".join(t for t in texts if t)
        if not text:
            raise VerseNotFoundError(reference, f"Verse not found in chapter: {reference}")

        return {
            "reference": reference,
            "translation": translation,
            "text": text,
            "bookNum": ref.book_number,
            "chapter": ref.chapter,
            "verse": ref.verse_start,
        }

    # -------------------------------------------------------------------------
    # Cross-references
    # -------------------------------------------------------------------------

    def get_cross_references(self, ref_text: str) -> dict:
        """
        Get cross-references for the first verse of a reference.

        A verse with no entries is a normal result with an empty list.

        Raises:
            ReferenceParseError: If the reference cannot be parsed
        """
        ref = parse_reference(ref_text)
        key = build_lookup_key(ref)
        refs = self.cross_references.lookup(key)

        result = {
            "reference": display_form(ref),
            "key": key,
            "crossReferences": refs,
        }
        if refs:
            result["source"] = CROSS_REFERENCE_SOURCE
        else:
            result["note"] = "No cross-references found for this verse"
        return result

    # -------------------------------------------------------------------------
    # Interlinear
    # -------------------------------------------------------------------------

    def get_interlinear(self, ref: VerseRef, debug: bool = False) -> dict:
        """
        Get word-by-word original-language data for the first verse of a reference.

        Curated verses are served without any upstream call. Otherwise the
        chapter is fetched from the edition for the book's language, the
        verse is extracted and glosses are filled in.

        Returns:
            Payload with words and fullText, or "available": False when the
            upstream is unreachable or yields no words
        """
        verse_ref = _single_verse(ref)
        reference = display_form(verse_ref)

        preloaded = get_preloaded_verse(reference)
        if preloaded:
            logger.debug(f"Interlinear {reference}: preloaded")
            result = {"reference": reference, "source": "preloaded", **preloaded}
            if debug:
                result["strategy"] = "preloaded"
            return result

        language = verse_ref.language
        edition = edition_for_language(language)
        strategy = "none"

        try:
            verses = self.client.get_verse_texts(edition, verse_ref)
        except BollsNetworkError as e:
            logger.warning(f"Interlinear fetch failed for {reference} ({edition}): {e}")
            verses = []

        if verses and verses[0].get("text"):
            tagged_text = verses[0]["text"]
            tokens, strategy = extract_with_strategy(tagged_text, language)
            logger.info(f"Interlinear {reference}: {strategy} strategy, {len(tokens)} words")

            if tokens:
                self.enricher.enrich(tokens, language)
                result = {
                    "reference": reference,
                    "source": "api",
                    "language": language,
                    "words": [t.to_dict() for t in tokens],
                    "fullText": strip_markup(tagged_text),
                }
                if debug:
                    result["strategy"] = strategy
                return result

        result = {
            "reference": reference,
            "source": "api",
            "language": language,
            "available": False,
            "message": INTERLINEAR_UNAVAILABLE_MESSAGE,
        }
        if debug:
            result["strategy"] = strategy
        return result

    # -------------------------------------------------------------------------
    # Strong's lexicon
    # -------------------------------------------------------------------------

    def get_strongs(self, number: str) -> dict:
        """
        Get a lexicon entry for a Strong's number.

        Raises:
            ValueError: If the number is not "H####" / "G####"
            StrongsNotFoundError: If neither the curated table nor the lexicon has it
        """
        normalized = normalize_strongs(number)
        if normalized is None:
            raise ValueError(f"Invalid Strong's number: {number!r}")

        preloaded = get_preloaded_strongs(normalized)
        if preloaded:
            return {"number": normalized, "source": "preloaded", **preloaded}

        try:
            entry = self.client.get_definition(normalized)
        except BollsNetworkError as e:
            logger.warning(f"Lexicon lookup failed for {normalized}: {e}")
            entry = None

        if not entry:
            raise StrongsNotFoundError(normalized)

        return self._format_lexicon_entry(normalized, entry)

    def _format_lexicon_entry(self, number: str, entry: dict) -> dict:
        long_definition = _clean_definition(entry.get("definition"))
        short_definition = _clean_definition(
            entry.get("short_definition") or long_definition.split(".")[0]
        )
        if len(long_definition) > LONG_DEFINITION_MAX_CHARS:
            long_definition = long_definition[:LONG_DEFINITION_MAX_CHARS] + "..."

        lemma = entry.get("lemma") or entry.get("word") or ""
        language = HEBREW if number.startswith("H") else GREEK
        occurrences = entry.get("occurrences")

        return {
            "number": number,
            "lemma": lemma,
            "translit": entry.get("transliteration") or transliterate(lemma, language),
            "pronunciation": entry.get("pronunciation") or "",
            "partOfSpeech": entry.get("part_of_speech") or "",
            "definition": short_definition,
            "longDefinition": long_definition,
            "usage": f"Used {occurrences} times" if occurrences else "",
            "source": "bolls",
        }
