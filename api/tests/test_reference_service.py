# api/tests/test_reference_service.py
"""
Tests for reference_service.py - endpoint payloads with a mocked Bolls.life client.
"""

import os
import sys
from unittest.mock import MagicMock

# Add api directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.references.bolls_client import BollsNetworkError
from services.references.reference_parser import ReferenceParseError, UnknownBookError, parse_reference
from services.references.reference_service import (
    CROSS_REFERENCE_SOURCE,
    LONG_DEFINITION_MAX_CHARS,
    ReferenceService,
    StrongsNotFoundError,
    VerseNotFoundError,
)


def _service(verses=None, verse_error=None, definition=None, definition_error=None, cross_refs=None):
    client = MagicMock()
    if verse_error is not None:
        client.get_verse_texts.side_effect = verse_error
    else:
        client.get_verse_texts.return_value = verses or []
    if definition_error is not None:
        client.get_definition.side_effect = definition_error
    else:
        client.get_definition.return_value = definition

    index = MagicMock()
    index.lookup.return_value = cross_refs or []
    return ReferenceService(client=client, cross_references=index)


# =============================================================================
# Verse text
# =============================================================================

def test_get_verse():
    print("\n=== Testing get_verse ===")

    service = _service(verses=[{"verse": 16, "text": "For God so loved<S>25</S> the <i>world</i>"}])
    result = service.get_verse("Jn 3:16", "kjv")

    assert result == {
        "reference": "John 3:16",
        "translation": "KJV",
        "text": "For God so loved the world",
        "bookNum": 43,
        "chapter": 3,
        "verse": 16,
    }
    edition, ref = service.client.get_verse_texts.call_args[0]
    assert edition == "KJV"
    assert (ref.book_number, ref.chapter, ref.verse_start) == (43, 3, 16)
    print("✓ Text stripped of markup, translation uppercased")

    service = _service(verses=[{"verse": 4, "text": "Love is patient"}, {"verse": 5, "text": "or rude."}])
    result = service.get_verse("1 Cor 13:4-5", "CSB")
    assert result["reference"] == "1 Corinthians 13:4-5"
    assert result["text"] == "Love is patient or rude."
    assert service.client.get_verse_texts.call_args[0][0] == "CSB17"
    print("✓ Ranges joined, translation code mapped")


def test_get_verse_errors():
    print("\n=== Testing get_verse errors ===")

    try:
        _service(verse_error=BollsNetworkError("down")).get_verse("John 3:16")
        assert False, "Should have raised VerseNotFoundError"
    except VerseNotFoundError as e:
        assert e.reference == "John 3:16"
    print("✓ Upstream failure")

    try:
        _service(verses=[]).get_verse("John 3:99")
        assert False, "Should have raised VerseNotFoundError"
    except VerseNotFoundError:
        pass
    print("✓ Verse absent from chapter")

    try:
        _service().get_verse("Foobar 1:1")
        assert False, "Should have raised UnknownBookError"
    except UnknownBookError:
        pass
    print("✓ Parse errors propagate")


# =============================================================================
# Cross-references
# =============================================================================

def test_get_cross_references():
    print("\n=== Testing get_cross_references ===")

    service = _service(cross_refs=["Romans 5:8", "1 John 4:9-10"])
    result = service.get_cross_references("jn 3:16-17")

    assert result == {
        "reference": "John 3:16-17",
        "key": "john_3_16",
        "crossReferences": ["Romans 5:8", "1 John 4:9-10"],
        "source": CROSS_REFERENCE_SOURCE,
    }
    service.cross_references.lookup.assert_called_once_with("john_3_16")
    print("✓ Hit keyed by first verse")

    result = _service().get_cross_references("Obadiah 1:21")
    assert result["crossReferences"] == []
    assert "note" in result
    assert "source" not in result
    print("✓ Miss is a normal result with a note")

    try:
        _service().get_cross_references("John three sixteen")
        assert False, "Should have raised ReferenceParseError"
    except ReferenceParseError:
        pass
    print("✓ Bad syntax propagates")


# =============================================================================
# Interlinear
# =============================================================================

def test_interlinear_preloaded():
    print("\n=== Testing preloaded interlinear ===")

    service = _service()
    result = service.get_interlinear(parse_reference("Genesis 1:1"))

    assert result["source"] == "preloaded"
    assert result["reference"] == "Genesis 1:1"
    assert result["language"] == "Hebrew"
    assert result["words"][2]["english"] == "God"
    assert "strategy" not in result
    service.client.get_verse_texts.assert_not_called()
    print("✓ Served without upstream call")

    result = service.get_interlinear(parse_reference("John 3:16-18"), debug=True)
    assert result["reference"] == "John 3:16"
    assert result["source"] == "preloaded"
    assert result["strategy"] == "preloaded"
    print("✓ Range uses first verse, debug strategy reported")


def test_interlinear_from_api():
    print("\n=== Testing fetched interlinear ===")

    service = _service(verses=[{"verse": 4, "text": "וַיַּרְא<S>7200</S> אֱלֹהִים<S>430</S>"}])
    result = service.get_interlinear(parse_reference("Genesis 1:4"), debug=True)

    assert result["source"] == "api"
    assert result["language"] == "Hebrew"
    assert result["strategy"] == "tagged"
    assert [w["strongs"] for w in result["words"]] == ["H7200", "H430"]
    assert [w["english"] for w in result["words"]] == ["saw", "God"]
    assert result["fullText"] == "וַיַּרְא אֱלֹהִים"
    assert service.client.get_verse_texts.call_args[0][0] == "OHB"
    service.client.get_definition.assert_not_called()
    print("✓ Hebrew: tagged strategy, cached glosses")

    service = _service(
        verses=[{"verse": 17, "text": "ἡ πίστις G4102 ἐξ G1537"}],
        definition={"definition": "<p>faith, belief</p>"},
    )
    result = service.get_interlinear(parse_reference("Romans 10:17"))

    assert result["language"] == "Greek"
    assert [w["strongs"] for w in result["words"]] == ["G4102", "G1537"]
    assert result["words"][0]["english"] == "faith"
    assert result["words"][0]["translit"] == "pistis"
    assert "strategy" not in result
    assert service.client.get_verse_texts.call_args[0][0] == "OGNT"
    print("✓ Greek: adjacent strategy, lexicon glosses")


def test_interlinear_unavailable():
    print("\n=== Testing unavailable interlinear ===")

    result = _service(verse_error=BollsNetworkError("down")).get_interlinear(
        parse_reference("Romans 1:1"), debug=True
    )
    assert result["available"] is False
    assert result["message"]
    assert result["strategy"] == "none"
    assert "words" not in result
    print("✓ Upstream failure degrades to available: false")

    result = _service(verses=[{"verse": 1, "text": "<S>3972</S>"}]).get_interlinear(parse_reference("Romans 1:1"))
    assert result["available"] is False
    print("✓ No words extracted")


# =============================================================================
# Strong's lexicon
# =============================================================================

def test_get_strongs_preloaded():
    print("\n=== Testing preloaded Strong's ===")

    service = _service()
    result = service.get_strongs("h0430")

    assert result["number"] == "H430"
    assert result["source"] == "preloaded"
    assert result["lemma"]
    service.client.get_definition.assert_not_called()
    print("✓ Normalized and served from curated table")

    for bad in ("430", "abc", ""):
        try:
            service.get_strongs(bad)
            assert False, f"Should have raised ValueError for {bad!r}"
        except ValueError:
            pass
    print("✓ Invalid numbers rejected")


def test_get_strongs_lexicon():
    print("\n=== Testing lexicon Strong's ===")

    entry = {
        "lemma": "צֶדֶק",
        "transliteration": "tsedeq",
        "pronunciation": "tseh'-dek",
        "part_of_speech": "noun masculine",
        "definition": "<p>justice, rightness</p>" + "x" * 600,
        "short_definition": "righteousness, justice",
        "occurrences": 116,
    }
    service = _service(definition=entry)
    result = service.get_strongs("H6664")

    assert result["number"] == "H6664"
    assert result["source"] == "bolls"
    assert result["translit"] == "tsedeq"
    assert result["partOfSpeech"] == "noun masculine"
    assert result["definition"] == "righteousness, justice"
    assert result["usage"] == "Used 116 times"
    assert result["longDefinition"].startswith("justice, rightness")
    assert result["longDefinition"].endswith("...")
    assert len(result["longDefinition"]) == LONG_DEFINITION_MAX_CHARS + 3
    service.client.get_definition.assert_called_once_with("H6664")
    print("✓ Entry shaped, long definition truncated")

    result = _service(definition={"lemma": "λόγος", "definition": "word. speech"}).get_strongs("G1234")
    assert result["translit"] == "logos"
    assert result["definition"] == "word"
    assert result["pronunciation"] == ""
    assert result["usage"] == ""
    print("✓ Missing fields derived or left empty")


def test_get_strongs_not_found():
    print("\n=== Testing Strong's not found ===")

    for service in (_service(definition=None), _service(definition_error=BollsNetworkError("down"))):
        try:
            service.get_strongs("H9999")
            assert False, "Should have raised StrongsNotFoundError"
        except StrongsNotFoundError as e:
            assert e.number == "H9999"
    print("✓ Missing entry and upstream failure")


def main():
    """Run all tests."""
    print("=" * 60)
    print("Reference Service Test Suite")
    print("=" * 60)

    test_get_verse()
    test_get_verse_errors()
    test_get_cross_references()
    test_interlinear_preloaded()
    test_interlinear_from_api()
    test_interlinear_unavailable()
    test_get_strongs_preloaded()
    test_get_strongs_lexicon()
    test_get_strongs_not_found()

    print("\n" + "=" * 60)
    print("ALL TESTS PASSED!")
    print("=" * 60)


if __name__ == "__main__":
    main()
