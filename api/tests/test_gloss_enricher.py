# api/tests/test_gloss_enricher.py
"""
Tests for gloss_enricher.py and gloss_cache.py - tiered English gloss resolution.

The lexicon client is mocked; no network access is needed.
"""

import os
import sys
from unittest.mock import MagicMock

# Add api directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.references import gloss_cache
from services.references.bolls_client import BollsNetworkError
from services.references.gloss_enricher import (
    SHORT_GLOSS_MAX_CHARS,
    GlossEnricher,
    best_gloss_from_definition,
    gloss_from_entry,
    gloss_from_short_definition,
)
from services.references.interlinear_extractor import GREEK, HEBREW, WordToken


def _client(entries=None, errors=None):
    """Mock lexicon client answering from a dict of Strong's number -> entry."""
    entries = entries or {}
    errors = errors or {}

    def get_definition(number):
        if number in errors:
            raise errors[number]
        return entries.get(number)

    client = MagicMock()
    client.get_definition.side_effect = get_definition
    return client


def test_normalize_strongs():
    print("\n=== Testing normalize_strongs ===")

    assert gloss_cache.normalize_strongs("H430") == "H430"
    assert gloss_cache.normalize_strongs("h0430") == "H430"
    assert gloss_cache.normalize_strongs(" G26 ") == "G26"
    assert gloss_cache.normalize_strongs("H1254a") == "H1254"
    for bad in ("430", "X430", "H", "H0", "", None, "G26x7"):
        assert gloss_cache.normalize_strongs(bad) is None, bad
    print("✓ Canonical form and rejects")


def test_gloss_cache_lookup():
    print("\n=== Testing gloss cache ===")

    entry = gloss_cache.lookup("H430")
    assert entry.gloss == "God"
    assert entry.transliteration == "elohim"
    assert gloss_cache.lookup("h0430") == entry
    print("✓ Hit with spelling variants")

    assert gloss_cache.lookup("G26") is None
    assert gloss_cache.lookup("H9999") is None
    assert gloss_cache.lookup("bogus") is None
    print("✓ Greek and unknown numbers miss")


def test_best_gloss_from_definition():
    """Test tier-2 heuristics on long definitions."""
    print("\n=== Testing best_gloss_from_definition ===")

    assert best_gloss_from_definition("<p>Origin: a primitive root</p><p>to create, shape, form</p>") == "create"
    assert best_gloss_from_definition("to go up, ascend") == "go up"
    assert best_gloss_from_definition("to go up") == "go up"
    assert best_gloss_from_definition("beginning, first, chief") == "beginning"
    assert best_gloss_from_definition("<ul><li>Love, affection; goodwill</li></ul>") == "love"
    print("✓ Verb and leading phrase")

    definition = "Phonetic: ag-ah'-pay<br>Part(s) of speech: Noun<br>1. brotherly love, affection."
    assert best_gloss_from_definition(definition) == "brotherly love"
    print("✓ Metadata lines and enumerators skipped")

    assert best_gloss_from_definition("a, b, c") is None
    assert best_gloss_from_definition("") is None
    assert best_gloss_from_definition(None) is None
    assert best_gloss_from_definition("Origin: from H1") is None
    print("✓ Single letters and empty input rejected")

    definition = "word without any terminating punctuation at all in this item"
    assert best_gloss_from_definition(definition) is None
    print("✓ Unterminated phrase rejected")


def test_short_definition_fallback():
    """Test tier-3 short definition handling."""
    print("\n=== Testing short definition ===")

    assert gloss_from_short_definition("<b>word</b>, saying; speech") == "word"
    assert gloss_from_short_definition("grace; favour") == "grace"
    assert gloss_from_short_definition("") == ""
    assert gloss_from_short_definition(None) == ""
    long_text = gloss_from_short_definition("an extraordinarily long sense of a word")
    assert len(long_text) <= SHORT_GLOSS_MAX_CHARS
    assert long_text.startswith("an extraordinarily")
    print("✓ Cut at comma/semicolon and capped")

    assert gloss_from_entry({"definition": "to love, cherish", "short_definition": "love"}) == "love"
    assert gloss_from_entry({"definition": "???", "short_definition": "faith, belief"}) == "faith"
    assert gloss_from_entry({}) == ""
    print("✓ gloss_from_entry tier order")


def test_hebrew_cache_skips_fetch():
    """Test curated Hebrew glosses win without touching the lexicon."""
    print("\n=== Testing Hebrew cache tier ===")

    client = _client()
    enricher = GlossEnricher(client=client)
    tokens = [WordToken("אֱלֹהִים", "'lhym", "", "H430")]

    result = enricher.enrich(tokens, HEBREW)

    assert result is tokens
    assert tokens[0].english_gloss == "God"
    assert tokens[0].transliteration == "elohim"
    client.get_definition.assert_not_called()
    print("✓ H430 -> God, transliteration upgraded, no fetch")


def test_greek_uses_lexicon():
    """Test Greek words go to the lexicon even when the number is cached for Hebrew."""
    print("\n=== Testing lexicon tiers ===")

    client = _client({
        "G3056": {"definition": "<p>Phonetic: log'-os</p><p>something said, word</p>"},
        "G26": {"definition": "", "short_definition": "love, benevolence"},
    })
    enricher = GlossEnricher(client=client)
    tokens = [
        WordToken("λόγος", "logos", "", "G3056"),
        WordToken("ἀγάπη", "agapē", "", "G26"),
    ]

    enricher.enrich(tokens, GREEK)

    assert tokens[0].english_gloss == "something said"
    assert tokens[1].english_gloss == "love"
    assert tokens[1].transliteration == "agapē"
    print("✓ Long definition then short definition")


def test_one_fetch_per_number():
    print("\n=== Testing fetch de-duplication ===")

    client = _client({"G2316": {"definition": "God, a deity."}})
    enricher = GlossEnricher(client=client, max_workers=4)
    tokens = [
        WordToken("θεὸν", "theon", "", "G2316"),
        WordToken("καὶ", "kai", "", "G2532"),
        WordToken("θεὸς", "theos", "", "G2316"),
    ]

    enricher.enrich(tokens, GREEK)

    assert client.get_definition.call_count == 2
    assert [t.english_gloss for t in tokens] == ["god", "", "god"]
    print("✓ Duplicate numbers fetched once, missing entry leaves gloss empty")


def test_failures_are_per_token():
    """Test a failed lookup leaves only its own words unglossed."""
    print("\n=== Testing failure isolation ===")

    client = _client(
        entries={"G5485": {"short_definition": "grace"}},
        errors={
            "G4102": BollsNetworkError("timed out"),
            "G1680": RuntimeError("unexpected"),
        },
    )
    enricher = GlossEnricher(client=client)
    tokens = [
        WordToken("πίστις", "pistis", "", "G4102"),
        WordToken("χάρις", "charis", "", "G5485"),
        WordToken("ἐλπίς", "elpis", "", "G1680"),
    ]

    result = enricher.enrich(tokens, GREEK)

    assert len(result) == 3
    assert [t.english_gloss for t in result] == ["", "grace", ""]
    assert [t.original for t in result] == ["πίστις", "χάρις", "ἐλπίς"]
    print("✓ Network and unexpected errors isolated, order preserved")


def test_tokens_left_alone():
    print("\n=== Testing skipped tokens ===")

    client = _client()
    enricher = GlossEnricher(client=client)
    tokens = [
        WordToken("λόγος", "logos", "", ""),
        WordToken("ἀγάπη", "agapē", "love", "G26"),
    ]

    enricher.enrich(tokens, GREEK)

    assert tokens[0].english_gloss == ""
    assert tokens[1].english_gloss == "love"
    client.get_definition.assert_not_called()
    assert enricher.enrich([], HEBREW) == []
    print("✓ No Strong's number or existing gloss: no fetch")


def main():
    """Run all tests."""
    print("=" * 60)
    print("Gloss Enricher Test Suite")
    print("=" * 60)

    test_normalize_strongs()
    test_gloss_cache_lookup()
    test_best_gloss_from_definition()
    test_short_definition_fallback()
    test_hebrew_cache_skips_fetch()
    test_greek_uses_lexicon()
    test_one_fetch_per_number()
    test_failures_are_per_token()
    test_tokens_left_alone()

    print("\n" + "=" * 60)
    print("ALL TESTS PASSED!")
    print("=" * 60)


if __name__ == "__main__":
    main()
