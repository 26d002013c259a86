# api/services/study/xray_service.py
"""
X-Ray mode: five-section scholarly analysis of a single verse.

The model is asked for a strict JSON object with the sections below. A reply
that cannot be parsed, or that misses a section, is replaced by a fallback
structure flagged with "_error" so the client can still render something.
"""

import logging
from typing import Optional

from services.llm_service import require_provider

from .json_extract import JSONExtractionError, extract_json

logger = logging.getLogger(__name__)


XRAY_SECTIONS = ("context", "language", "connections", "meaning", "application")

XRAY_MAX_TOKENS = 4000
RAW_RESPONSE_PREVIEW_CHARS = 500

DEFAULT_TRANSLATION = "ESV"
DEFAULT_PERSPECTIVE = "protestant"

XRAY_SYSTEM_PROMPT = """You are a Bible scholar and teacher who makes Scripture accessible to everyday believers. Your goal is to help people understand God's Word, not just read it.

You combine seminary-level biblical scholarship, expertise in Hebrew and Greek, knowledge of ancient Near Eastern and Greco-Roman culture, and skill at explaining complex ideas in simple terms.

CRITICAL INSTRUCTION: You MUST respond with valid JSON only. No markdown, no code blocks, no explanatory text before or after. Just the raw JSON object.

Your response must be a JSON object with this exact structure:
{
  "context": {
    "title": "📍 Historical & Cultural Context",
    "content": "2-3 paragraphs on the historical setting, cultural background, original audience, and why the author wrote this."
  },
  "language": {
    "title": "📜 Original Language Insights",
    "content": "Key Hebrew/Greek words, verb tenses that matter, idioms and grammatical structures that shape meaning.",
    "keyWords": [
      {
        "original": "Greek or Hebrew word",
        "transliteration": "English letters",
        "meaning": "Full meaning with nuances",
        "significance": "Why this matters for understanding"
      }
    ]
  },
  "connections": {
    "title": "🔗 Biblical Connections",
    "content": "Old Testament echoes, prophecy-fulfillment links, thematic threads across Scripture.",
    "references": ["Reference 1", "Reference 2", "Reference 3"]
  },
  "meaning": {
    "title": "❓ What This Means",
    "content": "Plain-language explanation of what this verse means, addressing common misunderstandings."
  },
  "application": {
    "title": "💡 Why This Matters",
    "content": "The timeless truth underneath the ancient context and why it matters for readers today."
  }
}

GUIDELINES:
- Be accurate but accessible
- Each section should be 100-300 words max
- Include 2-4 key words in the language section
- Include 3-6 cross-references in the connections section
- When there are multiple valid interpretations, present the mainstream view while acknowledging alternatives

THEOLOGICAL PERSPECTIVE HANDLING:
- "protestant": Emphasize Scripture's authority, grace through faith, and evangelical interpretation
- "catholic": Include Church tradition, sacramental understanding, and magisterial teaching where relevant
- "orthodox": Emphasize theosis, patristic interpretation, and liturgical connection
- "academic": Present scholarly consensus with multiple viewpoints neutrally"""


def build_xray_prompt(
    verse: str,
    verse_text: Optional[str] = None,
    translation: Optional[str] = None,
    perspective: Optional[str] = None,
) -> str:
    prompt = f"Provide an X-Ray analysis for: {verse}"
    if verse_text:
        prompt += f'\n\nVerse text ({translation or DEFAULT_TRANSLATION}): "{verse_text}"'
    if translation:
        prompt += f"\n\nTranslation context: {translation}"
    if perspective:
        prompt += f"\n\nTheological perspective: {perspective}"
    prompt += "\n\nRespond with ONLY the JSON object. No other text."
    return prompt


def fallback_sections(raw_response: str) -> dict:
    """Placeholder sections returned when the model reply is unusable."""
    return {
        "context": {
            "title": "📍 Historical & Cultural Context",
            "content": "Unable to generate context analysis. Please try again.",
        },
        "language": {
            "title": "📜 Original Language Insights",
            "content": "Unable to generate language analysis. Please try again.",
            "keyWords": [],
        },
        "connections": {
            "title": "🔗 Biblical Connections",
            "content": "Unable to generate connections. Please try again.",
            "references": [],
        },
        "meaning": {
            "title": "❓ What This Means",
            "content": "Unable to generate meaning analysis. Please try again.",
        },
        "application": {
            "title": "💡 Why This Matters",
            "content": "Unable to generate application. Please try again.",
        },
        "_error": True,
        "_rawResponse": (raw_response or "")[:RAW_RESPONSE_PREVIEW_CHARS],
    }


def parse_xray_response(response_text: str) -> dict:
    """Parse the model reply into sections, or return fallback_sections()."""
    try:
        parsed = extract_json(response_text)
    except JSONExtractionError as e:
        logger.warning(f"Failed to parse X-Ray response: {e}")
        return fallback_sections(response_text)

    if not isinstance(parsed, dict):
        logger.warning(f"X-Ray response is a {type(parsed).__name__}, expected object")
        return fallback_sections(response_text)

    missing = [s for s in XRAY_SECTIONS if not parsed.get(s)]
    if missing:
        logger.warning(f"X-Ray response missing sections: {', '.join(missing)}")
        return fallback_sections(response_text)

    return parsed


def generate_xray(
    verse: str,
    verse_text: Optional[str] = None,
    translation: Optional[str] = None,
    perspective: Optional[str] = None,
    provider: Optional[str] = None,
) -> dict:
    """
    Generate an X-Ray analysis for a verse.

    Args:
        verse: Reference, e.g. "John 3:16"
        verse_text: Verse text to ground the analysis (optional)
        translation: Translation code the text comes from
        perspective: protestant | catholic | orthodox | academic
        provider: "groq" (default) or "claude"

    Returns:
        {success, verse, translation, perspective, provider, sections}

    Raises:
        ValueError: Missing verse or unknown provider
        ProviderNotConfiguredError: Provider has no API key
        LLMError: Provider request failed
    """
    if not verse or not verse.strip():
        raise ValueError("Verse reference is required")

    provider_name = (provider or "groq").strip().lower()
    llm = require_provider(provider_name)

    messages = [
        {"role": "system", "content": XRAY_SYSTEM_PROMPT},
        {"role": "user", "content": build_xray_prompt(verse, verse_text, translation, perspective)},
    ]

    logger.info(f"X-Ray request: {verse} via {provider_name}")
    reply = llm.chat_completion(messages, max_tokens=XRAY_MAX_TOKENS, top_p=0.9)

    return {
        "success": True,
        "verse": verse,
        "translation": translation or DEFAULT_TRANSLATION,
        "perspective": perspective or DEFAULT_PERSPECTIVE,
        "provider": provider_name,
        "sections": parse_xray_response(reply),
    }
