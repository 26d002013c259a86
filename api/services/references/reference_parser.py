# api/services/references/reference_parser.py
"""
Scripture reference parser.

Turns free-text references into VerseRef values and derives the two string
forms every dataset is keyed by:

- build_lookup_key(): "john_3_16" (cross-reference JSON files)
- display_form(): "John 3:16" (API output, preloaded verse tables)

Accepted input:
- "Genesis 1:1", "Gen 1:1", "Gen. 1:1"
- "1 Corinthians 13:4-7", "1Cor 13:4-7", "I Cor 13:4–7"
- "Song of Solomon 2:4"
"""

import re
from dataclasses import dataclass
from enum import Enum

from .book_catalog import BookEntry, BookNotFoundError, get_book, resolve


class ParseErrorReason(str, Enum):
    UNKNOWN_BOOK = "unknown_book"
    BAD_SYNTAX = "bad_syntax"


class ReferenceParseError(ValueError):
    """
    Raised when a reference cannot be parsed.

    Attributes:
        reason: ParseErrorReason
        text: The offending input, echoed back to API callers
    """

    reason = ParseErrorReason.BAD_SYNTAX

    def __init__(self, text: str, message: str = None):
        self.text = text
        super().__init__(message or f"Invalid reference: {text!r}")


class UnknownBookError(ReferenceParseError):
    reason = ParseErrorReason.UNKNOWN_BOOK


class BadSyntaxError(ReferenceParseError):
    reason = ParseErrorReason.BAD_SYNTAX


@dataclass(frozen=True)
class VerseRef:
    """
    A parsed verse or verse range within a single chapter.

    Attributes:
        book_number: Canonical book number (1-66)
        chapter: Chapter number (>= 1)
        verse_start: First verse (>= 1)
        verse_end: Last verse (>= verse_start, equal for a single verse)
    """
    book_number: int
    chapter: int
    verse_start: int
    verse_end: int

    @property
    def book(self) -> BookEntry:
        return get_book(self.book_number)

    @property
    def language(self) -> str:
        return self.book.language

    @property
    def is_range(self) -> bool:
        return self.verse_end != self.verse_start

    @property
    def verses(self) -> range:
        return range(self.verse_start, self.verse_end + 1)

    def to_dict(self) -> dict:
        return {
            "book": self.book.name,
            "bookNum": self.book_number,
            "chapter": self.chapter,
            "verseStart": self.verse_start,
            "verseEnd": self.verse_end,
        }


# <book> <chapter>:<verse>[-<verse>]
# Book: optional leading numeral, then one to three words ("Song of Solomon").
_REFERENCE_PATTERN = re.compile(
    r"^(?P<book>(?:\d\s*)?[a-z][a-z.]*(?:\s+[a-z][a-z.]*){0,2})"
    r"\s+(?P<chapter>\d+)\s*:\s*(?P<start>\d+)"
    r"(?:\s*[-–—]\s*(?P<end>\d+))?$",
    re.IGNORECASE,
)


def _make_ref(text: str, book: BookEntry, chapter: int, start: int, end: int) -> VerseRef:
    if chapter < 1 or start < 1:
        raise BadSyntaxError(text, f"Chapter and verse must be positive: {text!r}")
    if end < start:
        raise BadSyntaxError(text, f"Verse range ends before it starts: {text!r}")
    return VerseRef(
        book_number=book.number,
        chapter=chapter,
        verse_start=start,
        verse_end=end,
    )


def parse_reference(text: str) -> VerseRef:
    """
    Parse a scripture reference string.

    Args:
        text: Reference like "John 3:16" or "1 Corinthians 13:4-7"

    Returns:
        VerseRef

    Raises:
        UnknownBookError: Syntax is valid but the book is not recognized
        BadSyntaxError: Chapter/verse syntax is malformed
    """
    if text is None:
        raise BadSyntaxError("", "Reference is empty")

    cleaned = re.sub(r"\s+", " ", text.strip())
    match = _REFERENCE_PATTERN.match(cleaned)
    if not match:
        raise BadSyntaxError(text)

    try:
        book = resolve(match.group("book"))
    except BookNotFoundError:
        raise UnknownBookError(text, f"Unknown book: {match.group('book')!r}") from None

    start = int(match.group("start"))
    end = int(match.group("end")) if match.group("end") else start
    return _make_ref(text, book, int(match.group("chapter")), start, end)


def reference_from_parts(book, chapter, verse) -> VerseRef:
    """
    Build a VerseRef from separate book/chapter/verse values
    (e.g., query params ?book=Genesis&chapter=1&verse=1).
    """
    text = f"{book} {chapter}:{verse}"
    try:
        entry = resolve(str(book))
    except BookNotFoundError:
        raise UnknownBookError(text, f"Unknown book: {book!r}") from None

    try:
        chapter_num = int(str(chapter).strip())
        verse_num = int(str(verse).strip())
    except ValueError:
        raise BadSyntaxError(text) from None

    return _make_ref(text, entry, chapter_num, verse_num, verse_num)


def build_lookup_key(ref: VerseRef) -> str:
    """
    Build the dataset lookup key for a verse: "{book_key}_{chapter}_{verse}".

    Only the first verse of a range is used. Every dataset keyed by verse
    must use this function.
    """
    return f"{ref.book.key}_{ref.chapter}_{ref.verse_start}".lower()


def display_form(ref: VerseRef) -> str:
    """Return the canonical display string, e.g. "1 Corinthians 13:4-7"."""
    base = f"{ref.book.name} {ref.chapter}:{ref.verse_start}"
    if ref.is_range:
        return f"{base}-{ref.verse_end}"
    return base


def is_valid_reference(text: str) -> bool:
    """Return True if the text parses as a reference."""
    try:
        parse_reference(text)
    except ReferenceParseError:
        return False
    return True
