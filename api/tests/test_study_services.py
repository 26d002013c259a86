# api/tests/test_study_services.py
"""
Tests for services/study - JSON recovery, X-Ray parsing and study plan generation.

The LLM provider is mocked.
"""

import json
import os
import sys
from unittest.mock import MagicMock, patch

# Add api directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.llm_service import LLMError
from services.study import (
    XRAY_SECTIONS,
    JSONExtractionError,
    extract_json,
    generate_study_plan,
    generate_xray,
)
from services.study.study_plan_service import DAY_DEFAULTS
from services.study.xray_service import build_xray_prompt, parse_xray_response


def _llm(reply):
    llm = MagicMock()
    llm.chat_completion.return_value = reply
    return llm


def _sections():
    return {name: {"title": name.title(), "content": f"{name} text"} for name in XRAY_SECTIONS}


def test_extract_json():
    print("\n=== Testing extract_json ===")

    assert extract_json('[{"day": 1}]') == [{"day": 1}]
    assert extract_json('Here you go:\n```json\n{"a": 1}\n```\nEnjoy') == {"a": 1}
    assert extract_json('Sure! [1, 2] hope that helps', expect_list=True) == [1, 2]
    print("✓ Raw, fenced and embedded array")

    assert extract_json('prefix {"a": 1} suffix', expect_list=True) == [{"a": 1}]
    assert extract_json('{"a": 1}', expect_list=True) == [{"a": 1}]
    print("✓ Single object wrapped when a list is expected")

    for text in ("no json here", "", None, "[1, 2"):
        try:
            extract_json(text)
            assert False, f"Should have raised JSONExtractionError for {text!r}"
        except JSONExtractionError:
            pass
    print("✓ Unrecoverable text rejected")


def test_xray_prompt():
    print("\n=== Testing X-Ray prompt ===")

    prompt = build_xray_prompt("John 3:16", "For God so loved", "NIV", "catholic")
    assert "John 3:16" in prompt
    assert 'Verse text (NIV): "For God so loved"' in prompt
    assert "Theological perspective: catholic" in prompt
    assert "Verse text" not in build_xray_prompt("John 3:16")
    print("✓ Optional context included only when given")


def test_xray_parsing():
    print("\n=== Testing X-Ray parsing ===")

    sections = _sections()
    assert parse_xray_response(json.dumps(sections)) == sections
    print("✓ Complete response passed through")

    partial = _sections()
    del partial["application"]
    result = parse_xray_response(json.dumps(partial))
    assert result["_error"] is True
    assert set(XRAY_SECTIONS) <= set(result)
    print("✓ Missing section falls back")

    prose = "I cannot answer that. " * 50
    result = parse_xray_response(prose)
    assert result["_error"] is True
    assert len(result["_rawResponse"]) == 500
    print("✓ Prose reply falls back with raw preview")


def test_generate_xray():
    print("\n=== Testing generate_xray ===")

    llm = _llm(json.dumps(_sections()))
    with patch("services.study.xray_service.require_provider", return_value=llm) as require:
        result = generate_xray("John 3:16", provider="Claude")
        require.assert_called_once_with("claude")

    assert result["success"] is True
    assert result["translation"] == "ESV"
    assert result["perspective"] == "protestant"
    assert result["provider"] == "claude"
    assert result["sections"]["context"]["content"] == "context text"
    messages = llm.chat_completion.call_args[0][0]
    assert messages[0]["role"] == "system"
    assert "John 3:16" in messages[1]["content"]
    print("✓ Defaults and sections")

    try:
        generate_xray("  ")
        assert False, "Should have raised ValueError"
    except ValueError:
        pass
    print("✓ Empty verse rejected")


def test_generate_study_plan():
    print("\n=== Testing generate_study_plan ===")

    reply = '```json\n[{"day": 1, "title": "Peace", "verses": "John 14:27"}, {}]\n```'
    llm = _llm(reply)
    with patch("services.study.study_plan_service.require_provider", return_value=llm) as require:
        plan = generate_study_plan(" peace ", 3, "KJV")
        require.assert_called_once_with("groq")

    assert len(plan) == 2
    assert plan[0]["verses"] == ["John 14:27"]
    assert plan[0]["focus"] == DAY_DEFAULTS["focus"]
    assert plan[1]["day"] == 2
    assert plan[1]["title"] == "Day 2 Study"
    assert plan[1]["verses"] == []
    assert "KJV" in llm.chat_completion.call_args[0][0][0]["content"]
    print("✓ Missing fields filled with defaults")

    with patch("services.study.study_plan_service.require_provider", return_value=_llm('{"day": 1, "title": "Only"}')):
        plan = generate_study_plan("hope", 3)
    assert plan[0]["title"] == "Only"
    print("✓ Single object reply becomes a one-day plan")


def test_study_plan_validation():
    print("\n=== Testing study plan validation ===")

    for topic, duration in (("", 7), ("hope", 2), ("hope", 31), ("hope", True), ("hope", "7")):
        try:
            generate_study_plan(topic, duration)
            assert False, f"Should have raised ValueError for {topic!r}, {duration!r}"
        except ValueError:
            pass
    print("✓ Topic and duration validated")

    for reply in ("Sorry, I can't help with that.", ""):
        with patch("services.study.study_plan_service.require_provider", return_value=_llm(reply)):
            try:
                generate_study_plan("hope", 7)
                assert False, "Should have raised LLMError"
            except LLMError:
                pass
    print("✓ Unusable replies raise LLMError")


def main():
    """Run all tests."""
    print("=" * 60)
    print("Study Services Test Suite")
    print("=" * 60)

    test_extract_json()
    test_xray_prompt()
    test_xray_parsing()
    test_generate_xray()
    test_generate_study_plan()
    test_study_plan_validation()

    print("\n" + "=" * 60)
    print("ALL TESTS PASSED!")
    print("=" * 60)


if __name__ == "__main__":
    main()
