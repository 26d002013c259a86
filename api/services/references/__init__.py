# api/services/references/__init__.py
"""
Scripture reference resolution and text extraction for GospelPath.

This package provides:
- ReferenceService: Verse text, cross-references, interlinear and lexicon lookups
- book_catalog: Canonical book table (names, aliases, testament, language)
- parse_reference / VerseRef: Free-text references and dataset lookup keys
- gloss_cache: Curated Hebrew glosses keyed by Strong's number
- interlinear_extractor: Tagged Hebrew/Greek text -> WordToken list
- GlossEnricher: Fills English glosses from the cache and the lexicon
- CrossReferenceIndex: Popular/full cross-reference datasets
- BollsClient: Bolls.life text and dictionary API
"""

from .book_catalog import (
    BookEntry,
    BookNotFoundError,
    Testament,
    resolve,
    get_book,
    all_books,
    testament_of,
    language_of,
)
from .reference_parser import (
    VerseRef,
    ReferenceParseError,
    UnknownBookError,
    BadSyntaxError,
    parse_reference,
    reference_from_parts,
    build_lookup_key,
    display_form,
    is_valid_reference,
)
from .interlinear_extractor import (
    WordToken,
    extract,
    extract_with_strategy,
    transliterate,
    strip_markup,
)
from .gloss_enricher import GlossEnricher
from .cross_references import CrossReferenceIndex
from .bolls_client import (
    BollsClient,
    BollsError,
    BollsNetworkError,
)
from .reference_service import (
    ReferenceService,
    VerseNotFoundError,
    StrongsNotFoundError,
)

__all__ = [
    # Service (primary interface)
    "ReferenceService",
    "VerseNotFoundError",
    "StrongsNotFoundError",
    # Book catalog
    "BookEntry",
    "BookNotFoundError",
    "Testament",
    "resolve",
    "get_book",
    "all_books",
    "testament_of",
    "language_of",
    # Reference parsing
    "VerseRef",
    "ReferenceParseError",
    "UnknownBookError",
    "BadSyntaxError",
    "parse_reference",
    "reference_from_parts",
    "build_lookup_key",
    "display_form",
    "is_valid_reference",
    # Interlinear
    "WordToken",
    "extract",
    "extract_with_strategy",
    "transliterate",
    "strip_markup",
    "GlossEnricher",
    # Datasets and upstream
    "CrossReferenceIndex",
    "BollsClient",
    "BollsError",
    "BollsNetworkError",
]
