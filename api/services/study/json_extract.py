# api/services/study/json_extract.py
"""Pull a JSON value out of an LLM reply that may wrap it in prose or fences."""

import json
import re
from typing import Any, Iterator

_FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)```")
_ARRAY = re.compile(r"\[[\s\S]*\]")
_OBJECT = re.compile(r"\{[\s\S]*\}")


class JSONExtractionError(ValueError):
    """Raised when no JSON value can be recovered from the text."""
    pass


def _try_parse(text: str):
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return None


def _candidates(text: str, expect_list: bool) -> Iterator[str]:
    yield text

    match = _FENCED_BLOCK.search(text)
    if match:
        yield match.group(1).strip()

    if expect_list:
        match = _ARRAY.search(text)
        if match:
            yield match.group(0)

    match = _OBJECT.search(text)
    if match:
        yield match.group(0)


def extract_json(text: str, expect_list: bool = False) -> Any:
    """
    Parse JSON from an LLM reply.

    Tries, in order: the whole text, the first fenced code block, the outermost
    [...] span, the outermost {...} span. When expect_list is set, a single
    object is wrapped in a list.

    Raises:
        JSONExtractionError: If none of the candidates parse
    """
    if not text:
        raise JSONExtractionError("Empty response")

    for candidate in _candidates(text.strip(), expect_list):
        parsed = _try_parse(candidate)
        if parsed is None:
            continue
        if expect_list and isinstance(parsed, dict):
            return [parsed]
        return parsed

    raise JSONExtractionError("Could not extract valid JSON from AI response")
