# api/services/references/book_catalog.py
"""
Canonical catalog of the 66 books of the Protestant canon.

Every consumer that needs book metadata (reference parsing, dataset keys,
language selection for the original-language text) goes through this module.

- BookEntry: number, canonical name, OSIS abbreviation, testament
- resolve(): exact alias lookup ("Genesis", "Gen", "gn", "1 Sam", "1sam", ...)
- testament_of() / language_of(): the OT/NT boundary (book 39 / book 40)
"""

import re
from dataclasses import dataclass
from enum import Enum


LAST_OT_BOOK = 39
BOOK_COUNT = 66


class Testament(str, Enum):
    OT = "OT"
    NT = "NT"

    @property
    def language(self) -> str:
        """Source language of the testament ("Hebrew" or "Greek")."""
        return "Hebrew" if self is Testament.OT else "Greek"


class BookNotFoundError(KeyError):
    """Raised when a book name or number is not in the catalog."""

    def __init__(self, token):
        super().__init__(token)
        self.token = token

    def __str__(self) -> str:
        return f"Unknown book: {self.token}"


@dataclass(frozen=True)
class BookEntry:
    """
    A canonical Bible book.

    Attributes:
        number: Canonical order, 1 (Genesis) to 66 (Revelation)
        name: Display name (e.g., "1 Corinthians")
        osis: OSIS abbreviation (e.g., "1Cor")
        testament: Testament.OT or Testament.NT
    """
    number: int
    name: str
    osis: str
    testament: Testament

    @property
    def key(self) -> str:
        """Short alias used for dataset lookup keys (e.g., "1cor")."""
        return self.osis.lower()

    @property
    def language(self) -> str:
        return self.testament.language


# (number, name, OSIS abbreviation)
_CANON = [
    (1, "Genesis", "Gen"),
    (2, "Exodus", "Exod"),
    (3, "Leviticus", "Lev"),
    (4, "Numbers", "Num"),
    (5, "Deuteronomy", "Deut"),
    (6, "Joshua", "Josh"),
    (7, "Judges", "Judg"),
    (8, "Ruth", "Ruth"),
    (9, "1 Samuel", "1Sam"),
    (10, "2 Samuel", "2Sam"),
    (11, "1 Kings", "1Kgs"),
    (12, "2 Kings", "2Kgs"),
    (13, "1 Chronicles", "1Chr"),
    (14, "2 Chronicles", "2Chr"),
    (15, "Ezra", "Ezra"),
    (16, "Nehemiah", "Neh"),
    (17, "Esther", "Esth"),
    (18, "Job", "Job"),
    (19, "Psalms", "Ps"),
    (20, "Proverbs", "Prov"),
    (21, "Ecclesiastes", "Eccl"),
    (22, "Song of Solomon", "Song"),
    (23, "Isaiah", "Isa"),
    (24, "Jeremiah", "Jer"),
    (25, "Lamentations", "Lam"),
    (26, "Ezekiel", "Ezek"),
    (27, "Daniel", "Dan"),
    (28, "Hosea", "Hos"),
    (29, "Joel", "Joel"),
    (30, "Amos", "Amos"),
    (31, "Obadiah", "Obad"),
    (32, "Jonah", "Jonah"),
    (33, "Micah", "Mic"),
    (34, "Nahum", "Nah"),
    (35, "Habakkuk", "Hab"),
    (36, "Zephaniah", "Zeph"),
    (37, "Haggai", "Hag"),
    (38, "Zechariah", "Zech"),
    (39, "Malachi", "Mal"),
    (40, "Matthew", "Matt"),
    (41, "Mark", "Mark"),
    (42, "Luke", "Luke"),
    (43, "John", "John"),
    (44, "Acts", "Acts"),
    (45, "Romans", "Rom"),
    (46, "1 Corinthians", "1Cor"),
    (47, "2 Corinthians", "2Cor"),
    (48, "Galatians", "Gal"),
    (49, "Ephesians", "Eph"),
    (50, "Philippians", "Phil"),
    (51, "Colossians", "Col"),
    (52, "1 Thessalonians", "1Thess"),
    (53, "2 Thessalonians", "2Thess"),
    (54, "1 Timothy", "1Tim"),
    (55, "2 Timothy", "2Tim"),
    (56, "Titus", "Titus"),
    (57, "Philemon", "Phlm"),
    (58, "Hebrews", "Heb"),
    (59, "James", "Jas"),
    (60, "1 Peter", "1Pet"),
    (61, "2 Peter", "2Pet"),
    (62, "1 John", "1John"),
    (63, "2 John", "2John"),
    (64, "3 John", "3John"),
    (65, "Jude", "Jude"),
    (66, "Revelation", "Rev"),
]

BOOKS = tuple(
    BookEntry(
        number=number,
        name=name,
        osis=osis,
        testament=Testament.OT if number <= LAST_OT_BOOK else Testament.NT,
    )
    for number, name, osis in _CANON
)

_BY_NUMBER = {book.number: book for book in BOOKS}


# Extra abbreviations, keyed to book number. Full names, OSIS codes and
# numbered-book spacing variants are generated in _build_aliases().
_ABBREVIATIONS = {
    1: ["gen", "gn", "ge"],
    2: ["ex", "exo", "exod"],
    3: ["lev", "lv", "le"],
    4: ["num", "nm", "nu", "numb"],
    5: ["deut", "dt", "deu"],
    6: ["josh", "jos", "jsh"],
    7: ["judg", "jdg", "jg", "jdgs"],
    8: ["ru", "rth"],
    9: ["1 sam", "1 sa", "1 sm", "i sam", "i samuel"],
    10: ["2 sam", "2 sa", "2 sm", "ii sam", "ii samuel"],
    11: ["1 kgs", "1 ki", "1 kin", "i kings", "i kgs"],
    12: ["2 kgs", "2 ki", "2 kin", "ii kings", "ii kgs"],
    13: ["1 chr", "1 ch", "1 chron", "i chronicles", "i chr"],
    14: ["2 chr", "2 ch", "2 chron", "ii chronicles", "ii chr"],
    15: ["ezr"],
    16: ["neh", "ne"],
    17: ["esth", "est", "es"],
    18: ["jb"],
    19: ["ps", "psa", "psalm", "pss", "psm"],
    20: ["prov", "pr", "prv", "pro"],
    21: ["eccl", "ecc", "ec", "eccles", "qoh", "qoheleth"],
    22: ["song", "song of songs", "sos", "ss", "sg", "canticles", "cant"],
    23: ["isa", "is"],
    24: ["jer", "je", "jr"],
    25: ["lam", "la"],
    26: ["ezek", "eze", "ezk"],
    27: ["dan", "dn", "da"],
    28: ["hos", "ho"],
    29: ["jl", "joe"],
    30: ["am"],
    31: ["obad", "ob"],
    32: ["jon", "jnh"],
    33: ["mic", "mi"],
    34: ["nah", "na"],
    35: ["hab", "hb"],
    36: ["zeph", "zep", "zp"],
    37: ["hag", "hg"],
    38: ["zech", "zec", "zc"],
    39: ["mal", "ml"],
    40: ["matt", "mt", "mat"],
    41: ["mk", "mr", "mrk"],
    42: ["lk", "lu", "luk"],
    43: ["jn", "joh", "jhn"],
    44: ["ac", "act"],
    45: ["rom", "ro", "rm"],
    46: ["1 cor", "1 co", "i corinthians", "i cor"],
    47: ["2 cor", "2 co", "ii corinthians", "ii cor"],
    48: ["gal", "ga"],
    49: ["eph", "ephes"],
    50: ["phil", "php", "pp"],
    51: ["col"],
    52: ["1 thess", "1 th", "1 thes", "i thessalonians", "i thess"],
    53: ["2 thess", "2 th", "2 thes", "ii thessalonians", "ii thess"],
    54: ["1 tim", "1 ti", "i timothy", "i tim"],
    55: ["2 tim", "2 ti", "ii timothy", "ii tim"],
    56: ["tit"],
    57: ["phlm", "philem", "phm", "pm"],
    58: ["heb"],
    59: ["jas", "jm"],
    60: ["1 pet", "1 pe", "1 pt", "i peter", "i pet"],
    61: ["2 pet", "2 pe", "2 pt", "ii peter", "ii pet"],
    62: ["1 jn", "1 jo", "1 joh", "i john", "i jn"],
    63: ["2 jn", "2 jo", "2 joh", "ii john", "ii jn"],
    64: ["3 jn", "3 jo", "3 joh", "iii john", "iii jn"],
    65: ["jud", "jd"],
    66: ["rev", "re", "rv", "apoc", "apocalypse", "revelations"],
}


def _normalize_token(token: str) -> str:
    """Lowercase, trim, collapse whitespace and drop a trailing period."""
    key = re.sub(r"\s+", " ", token.strip().lower())
    return key.rstrip(".").strip()


def _build_aliases() -> dict:
    aliases = {}

    def add(alias: str, number: int):
        alias = _normalize_token(alias)
        existing = aliases.get(alias)
        if existing is not None and existing != number:
            raise ValueError(f"Alias {alias!r} maps to books {existing} and {number}")
        aliases[alias] = number
        # "1 samuel" -> "1samuel"
        if alias[:1].isdigit() and " " in alias:
            aliases.setdefault(alias.replace(" ", "", 1), number)

    for book in BOOKS:
        add(book.name, book.number)
        add(book.osis, book.number)
        for abbrev in _ABBREVIATIONS.get(book.number, []):
            add(abbrev, book.number)

    return aliases


BOOK_ALIASES = _build_aliases()


def resolve(name_token: str) -> BookEntry:
    """
    Resolve a book name or abbreviation to its catalog entry.

    Args:
        name_token: Book token in any supported spelling ("Gen", "1 Cor.")

    Returns:
        The matching BookEntry

    Raises:
        BookNotFoundError: If the token is not an exact alias
    """
    if not name_token:
        raise BookNotFoundError(name_token)

    number = BOOK_ALIASES.get(_normalize_token(name_token))
    if number is None:
        raise BookNotFoundError(name_token)
    return _BY_NUMBER[number]


def get_book(number: int) -> BookEntry:
    """Return the book with the given canonical number."""
    try:
        return _BY_NUMBER[number]
    except KeyError:
        raise BookNotFoundError(number) from None


def all_books() -> tuple:
    return BOOKS


def testament_of(book_number: int) -> Testament:
    """Return the testament of a book number (OT for 1-39, NT for 40-66)."""
    if not 1 <= book_number <= BOOK_COUNT:
        raise ValueError(f"Book number out of range: {book_number}")
    return Testament.OT if book_number <= LAST_OT_BOOK else Testament.NT


def language_of(book_number: int) -> str:
    """Return "Hebrew" for OT books and "Greek" for NT books."""
    return testament_of(book_number).language
