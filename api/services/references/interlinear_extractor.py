# api/services/references/interlinear_extractor.py
"""
Word-by-word extraction from tagged Hebrew/Greek verse text.

The upstream text provider does not tag Strong's numbers consistently, so
three strategies are tried in order and the first that yields any words wins:

1. adjacent: original-script word immediately followed by a bare code
             "בְּרֵאשִׁיתH7225" / "λόγος G3056"
2. tagged:   digits-only tags after the word, prefix implied by language
             "בְּרֵאשִׁית<S>7225</S>"
3. fallback: every original-script run, without Strong's numbers
"""

import logging
import re
import unicodedata
from dataclasses import dataclass
from typing import List, Tuple

from .gloss_cache import normalize_strongs

logger = logging.getLogger(__name__)


HEBREW = "Hebrew"
GREEK = "Greek"

STRATEGY_ADJACENT = "adjacent"
STRATEGY_TAGGED = "tagged"
STRATEGY_FALLBACK = "fallback"
STRATEGY_NONE = "none"

# Hebrew block + Alphabetic Presentation Forms (Hebrew part)
HEBREW_CHARS = "\u0590-\u05FF\uFB1D-\uFB4F"
# Greek and Coptic + Greek Extended (polytonic)
GREEK_CHARS = "\u0370-\u03FF\u1F00-\u1FFF"

# Verse/clause punctuation inside the script blocks: paseq, sof pasuq,
# nun hafukha, Greek question mark, ano teleia
_SCRIPT_PUNCTUATION = "\u05C0\u05C3\u05C6\u037E\u0387"

_RUN_PATTERNS = {
    HEBREW: re.compile(f"[{HEBREW_CHARS}]+"),
    GREEK: re.compile(f"[{GREEK_CHARS}]+"),
}

_ADJACENT_PATTERNS = {
    HEBREW: re.compile(f"([{HEBREW_CHARS}]+)[ \\t]*([HG]\\d+[a-z]?)(?![0-9A-Za-z])", re.IGNORECASE),
    GREEK: re.compile(f"([{GREEK_CHARS}]+)[ \\t]*([HG]\\d+[a-z]?)(?![0-9A-Za-z])", re.IGNORECASE),
}

# <S>430</S>, <n>430</n>, <S>H430</S>
_STRONGS_TAG = re.compile(r"<([A-Za-z]{1,3})>\s*([HG]?)(\d+)\s*</\1>", re.IGNORECASE)
_BARE_STRONGS = re.compile(r"(?<![A-Za-z])[HG]\d+[a-z]?(?![0-9A-Za-z])")
_MARKUP = re.compile(r"<[^>]*>")


@dataclass
class WordToken:
    """
    One original-language word of a verse.

    Attributes:
        original: Word in the source script
        transliteration: Latin-letter approximation
        english_gloss: Short English sense ("" until enriched)
        strongs_number: "H430" / "G3056", or "" when unknown
    """
    original: str
    transliteration: str = ""
    english_gloss: str = ""
    strongs_number: str = ""

    def to_dict(self) -> dict:
        return {
            "original": self.original,
            "translit": self.transliteration,
            "english": self.english_gloss,
            "strongs": self.strongs_number,
        }


# =============================================================================
# Transliteration
# =============================================================================

HEBREW_TRANSLIT = {
    "א": "'", "ב": "b", "ג": "g", "ד": "d", "ה": "h",
    "ו": "v", "ז": "z", "ח": "ch", "ט": "t", "י": "y",
    "כ": "k", "ך": "k", "ל": "l", "מ": "m", "ם": "m",
    "נ": "n", "ן": "n", "ס": "s", "ע": "'", "פ": "p",
    "ף": "p", "צ": "ts", "ץ": "ts", "ק": "q", "ר": "r",
    "ש": "sh", "ת": "t",
}

GREEK_TRANSLIT = {
    "α": "a", "β": "b", "γ": "g", "δ": "d", "ε": "e",
    "ζ": "z", "η": "ē", "θ": "th", "ι": "i", "κ": "k",
    "λ": "l", "μ": "m", "ν": "n", "ξ": "x", "ο": "o",
    "π": "p", "ρ": "r", "σ": "s", "ς": "s", "τ": "t",
    "υ": "u", "φ": "ph", "χ": "ch", "ψ": "ps", "ω": "ō",
}

_MAQAF = "\u05BE"
_SIN_DOT = "\u05C2"
_ROUGH_BREATHING = "\u0314"


def _transliterate_hebrew(text: str) -> str:
    chars = unicodedata.normalize("NFD", text)
    out = []
    for i, ch in enumerate(chars):
        if ch == _MAQAF:
            out.append("-")
        elif ch == "ש":
            # Sin dot among the following combining marks makes it "s"
            j = i + 1
            is_sin = False
            while j < len(chars) and unicodedata.combining(chars[j]):
                if chars[j] == _SIN_DOT:
                    is_sin = True
                j += 1
            out.append("s" if is_sin else "sh")
        elif ch in HEBREW_TRANSLIT:
            out.append(HEBREW_TRANSLIT[ch])
        elif "\u0591" <= ch <= "\u05C7" or ch in _SCRIPT_PUNCTUATION:
            continue
        else:
            out.append(ch)
    return "".join(out)


def _transliterate_greek_word(word: str) -> str:
    chars = unicodedata.normalize("NFD", word.lower())
    rough = _ROUGH_BREATHING in chars[:3]
    letters = "".join(
        GREEK_TRANSLIT.get(ch, ch)
        for ch in chars
        if not unicodedata.combining(ch) and ch not in _SCRIPT_PUNCTUATION
    )
    letters = letters.replace("gg", "ng").replace("gk", "nk").replace("gx", "nx")
    if rough and letters:
        return "rh" + letters[1:] if letters.startswith("r") else "h" + letters
    return letters


def transliterate(text: str, language: str) -> str:
    """
    Best-effort Latin rendering of a Hebrew or Greek word.

    Hebrew: consonants only, vowel points and cantillation dropped.
    Greek: lowercase, diacritics dropped, rough breathing as "h".
    """
    if not text:
        return ""
    if language == HEBREW:
        return _transliterate_hebrew(text)
    return " ".join(_transliterate_greek_word(w) for w in text.split())


# =============================================================================
# Extraction
# =============================================================================

def _clean_run(run: str) -> str:
    return run.strip(_SCRIPT_PUNCTUATION)


def _script_runs(text: str, language: str) -> List[str]:
    pattern = _RUN_PATTERNS.get(language, _RUN_PATTERNS[GREEK])
    runs = (_clean_run(m.group(0)) for m in pattern.finditer(text))
    return [r for r in runs if r]


def _make_token(original: str, strongs: str, language: str) -> WordToken:
    return WordToken(
        original=original,
        transliteration=transliterate(original, language),
        strongs_number=strongs,
    )


def _extract_adjacent(text: str, language: str) -> List[WordToken]:
    pattern = _ADJACENT_PATTERNS.get(language, _ADJACENT_PATTERNS[GREEK])
    tokens = []
    for match in pattern.finditer(text):
        original = _clean_run(match.group(1))
        strongs = normalize_strongs(match.group(2))
        if original and strongs:
            tokens.append(_make_token(original, strongs, language))
    return tokens


def _extract_tagged(text: str, language: str) -> List[WordToken]:
    default_prefix = "H" if language == HEBREW else "G"
    tokens = []
    segment_start = 0

    for match in _STRONGS_TAG.finditer(text):
        segment = text[segment_start:match.start()]
        segment_start = match.end()

        # Earlier runs in the segment belong to a previous word or punctuation
        runs = _script_runs(segment, language)
        if not runs:
            continue

        prefix = (match.group(2) or default_prefix).upper()
        strongs = normalize_strongs(f"{prefix}{match.group(3)}")
        if strongs:
            tokens.append(_make_token(runs[-1], strongs, language))

    return tokens


def _extract_fallback(text: str, language: str) -> List[WordToken]:
    return [_make_token(run, "", language) for run in _script_runs(text, language)]


def extract_with_strategy(tagged_text: str, language: str) -> Tuple[List[WordToken], str]:
    """
    Extract words and report which strategy produced them.

    Returns:
        (tokens, strategy) where strategy is "adjacent", "tagged",
        "fallback", or "none" when the text has no original-script words
    """
    if not tagged_text:
        return [], STRATEGY_NONE

    strategies = (
        (STRATEGY_ADJACENT, _extract_adjacent),
        (STRATEGY_TAGGED, _extract_tagged),
        (STRATEGY_FALLBACK, _extract_fallback),
    )
    for name, strategy in strategies:
        tokens = strategy(tagged_text, language)
        if tokens:
            logger.debug(f"Interlinear extraction: {name} strategy, {len(tokens)} words")
            return tokens, name

    return [], STRATEGY_NONE


def extract(tagged_text: str, language: str) -> List[WordToken]:
    """
    Parse tagged original-language text into words in reading order.

    Args:
        tagged_text: Verse text from the original-language provider
        language: "Hebrew" or "Greek"

    Returns:
        List of WordToken (possibly empty)
    """
    tokens, _ = extract_with_strategy(tagged_text, language)
    return tokens


def strip_markup(text: str) -> str:
    """Plain verse text: Strong's codes and tags removed, whitespace collapsed."""
    if not text:
        return ""
    text = _STRONGS_TAG.sub(" ", text)
    text = _MARKUP.sub(" ", text)
    text = _BARE_STRONGS.sub(" ", text)
    return re.sub(r"\s+", " ", text).strip()
