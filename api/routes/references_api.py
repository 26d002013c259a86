# routes/references_api.py
"""
API endpoints for scripture reference lookup.

Provides access to:
- Verse text in a chosen English translation
- Cross-references for a verse
- Word-by-word Hebrew/Greek interlinear data
- Strong's lexicon entries
"""

import logging

from flask import Blueprint, request, jsonify

from services.references import (
    ReferenceService,
    ReferenceParseError,
    VerseNotFoundError,
    StrongsNotFoundError,
    parse_reference,
    reference_from_parts,
)
from utils.errors import (
    error_response,
    missing_field,
    invalid_field,
    not_found,
    reference_error,
    server_error,
)

logger = logging.getLogger(__name__)

references_bp = Blueprint("references_api", __name__, url_prefix="/api")

# Lazily initialized service instance
_service = None


def get_service() -> ReferenceService:
    """Get or create ReferenceService instance."""
    global _service
    if _service is None:
        _service = ReferenceService()
    return _service


def _is_truthy(value) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes")


# =============================================================================
# Verse Text
# =============================================================================

@references_bp.get("/verse")
def get_verse():
    """
    Get the text of a verse or verse range.

    Query params:
        ref: Reference string (required) e.g., "John 3:16"
        translation: Translation code (optional, default ESV)

    Returns:
        {
            "reference": "John 3:16",
            "translation": "ESV",
            "text": "For God so loved the world...",
            "bookNum": 43,
            "chapter": 3,
            "verse": 16
        }
    """
    ref = request.args.get("ref")
    if not ref:
        return missing_field("ref", usage="/api/verse?ref=Genesis%201:1&translation=ESV")

    translation = request.args.get("translation") or "ESV"

    try:
        return jsonify(get_service().get_verse(ref, translation))
    except ReferenceParseError as e:
        return reference_error(e, ref)
    except VerseNotFoundError as e:
        return error_response("verse_not_found", 404, str(e), reference=e.reference)
    except Exception as e:
        logger.exception(f"Verse lookup failed for {ref!r}")
        return server_error(detail=str(e))


# =============================================================================
# Cross-References
# =============================================================================

@references_bp.get("/cross-references")
def get_cross_references():
    """
    Get cross-references for a verse.

    Query params:
        ref: Reference string (required) e.g., "John 3:16"

    Returns:
        {
            "reference": "John 3:16",
            "key": "john_3_16",
            "crossReferences": ["Romans 5:8", ...],
            "source": "Treasury of Scripture Knowledge"
        }

        or, when the verse has none, an empty list with a "note".
    """
    ref = request.args.get("ref")
    if not ref:
        return missing_field("ref", usage="/api/cross-references?ref=John%203:16")

    try:
        return jsonify(get_service().get_cross_references(ref))
    except ReferenceParseError as e:
        return reference_error(e, ref)
    except Exception as e:
        logger.exception(f"Cross-reference lookup failed for {ref!r}")
        return server_error(detail=str(e))


# =============================================================================
# Interlinear
# =============================================================================

@references_bp.get("/interlinear")
def get_interlinear():
    """
    Get word-by-word original-language data for a verse.

    Query params:
        ref: Reference string e.g., "Genesis 1:1"
        -- or --
        book, chapter, verse: Separate parts e.g., ?book=Genesis&chapter=1&verse=1
        debug: "true" to include the extraction strategy used

    Returns:
        {
            "reference": "Genesis 1:1",
            "source": "preloaded" | "api",
            "language": "Hebrew",
            "words": [{"original", "translit", "english", "strongs"}, ...],
            "fullText": "..."
        }

        or {"available": false, "message": ...} when the upstream has no data.
    """
    ref = request.args.get("ref")
    book = request.args.get("book")
    chapter = request.args.get("chapter")
    verse = request.args.get("verse")
    debug = _is_truthy(request.args.get("debug"))

    try:
        if ref:
            received = ref
            verse_ref = parse_reference(ref)
        elif book and chapter and verse:
            received = f"{book} {chapter}:{verse}"
            verse_ref = reference_from_parts(book, chapter, verse)
        else:
            return missing_field(
                "ref",
                usage="/api/interlinear?ref=Genesis%201:1 or ?book=Genesis&chapter=1&verse=1",
            )
    except ReferenceParseError as e:
        return reference_error(e, ref or f"{book} {chapter}:{verse}")

    try:
        return jsonify(get_service().get_interlinear(verse_ref, debug=debug))
    except Exception as e:
        logger.exception(f"Interlinear lookup failed for {received!r}")
        return server_error(detail=str(e))


# =============================================================================
# Strong's Lexicon
# =============================================================================

@references_bp.get("/strongs")
def get_strongs():
    """
    Get a Strong's Concordance entry.

    Query params:
        num: Strong's number (required) e.g., "H7225", "G26"

    Returns:
        {
            "number": "H7225",
            "lemma": "רֵאשִׁית",
            "translit": "reshith",
            "pronunciation": "ray-sheeth'",
            "partOfSpeech": "noun feminine",
            "definition": "beginning, first, chief",
            "longDefinition": "...",
            "usage": "Used 51 times...",
            "source": "preloaded" | "bolls"
        }
    """
    num = request.args.get("num")
    if not num:
        return missing_field("num", usage="/api/strongs?num=H7225", examples=["H7225", "H430", "G26", "G2316"])

    try:
        return jsonify(get_service().get_strongs(num))
    except StrongsNotFoundError as e:
        return not_found(
            "Strong's number",
            f"Definition for {e.number} not available. Try: H7225, H430, G26, G2316",
            number=e.number,
        )
    except ValueError:
        return invalid_field(
            "num",
            "Expected H#### for Hebrew or G#### for Greek (e.g., H7225, G26)",
            received=num,
        )
    except Exception as e:
        logger.exception(f"Strong's lookup failed for {num!r}")
        return server_error(detail=str(e))
