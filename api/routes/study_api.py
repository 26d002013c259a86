# routes/study_api.py
"""
API endpoints backed by the LLM providers.

- POST /api/chat: Pass-through chat completion (groq | claude)
- POST /api/xray: Five-section verse analysis
- POST /api/study-plan: Day-by-day topical study plan
"""

import logging

from flask import Blueprint, request, jsonify

from services.llm_service import (
    PROVIDERS,
    LLMError,
    ProviderNotConfiguredError,
    require_provider,
)
from services.study import MIN_DURATION, MAX_DURATION, generate_study_plan, generate_xray
from utils.errors import (
    invalid_field,
    missing_field,
    provider_not_configured,
    server_error,
    upstream_error,
)

logger = logging.getLogger(__name__)

study_bp = Blueprint("study_api", __name__, url_prefix="/api")


def _provider_name(data: dict) -> str:
    return (data.get("provider") or "groq").strip().lower()


def _invalid_provider(provider: str):
    return invalid_field(
        "provider",
        f"Provider must be one of: {', '.join(PROVIDERS)}",
        received=provider,
    )


@study_bp.post("/chat")
def chat():
    """
    Chat completion through the selected provider.

    Body:
        {
            "messages": [{"role": "user", "content": "..."}],  (required, non-empty)
            "provider": "groq" | "claude",                     (default groq)
            "model": "model-id"                                (optional)
        }

    Returns:
        {"provider", "model", "message", "usage"}
    """
    data = request.get_json(silent=True) or {}
    messages = data.get("messages")
    provider_name = _provider_name(data)

    if not messages or not isinstance(messages, list):
        return missing_field("messages")
    if provider_name not in PROVIDERS:
        return _invalid_provider(provider_name)

    try:
        provider = require_provider(provider_name)
        response = provider.complete(messages, model=data.get("model"))
    except ProviderNotConfiguredError:
        logger.error(f"Chat requested with unconfigured provider {provider_name}")
        return provider_not_configured(provider_name)
    except LLMError as e:
        logger.warning(f"Chat completion failed ({provider_name}): {e}")
        return upstream_error(str(e))
    except Exception as e:
        logger.exception("Chat completion failed")
        return server_error(detail=str(e))

    return jsonify({
        "provider": provider_name,
        "model": response.model,
        "message": response.text,
        "usage": response.usage,
    })


@study_bp.post("/xray")
def xray():
    """
    X-Ray analysis of a verse.

    Body:
        {
            "verse": "John 3:16",          (required)
            "verseText": "For God so...",  (optional)
            "translation": "ESV",
            "perspective": "protestant" | "catholic" | "orthodox" | "academic",
            "provider": "groq" | "claude"
        }

    Returns:
        {"success", "verse", "translation", "perspective", "provider", "sections"}
    """
    data = request.get_json(silent=True) or {}
    verse = (data.get("verse") or "").strip()
    provider_name = _provider_name(data)

    if not verse:
        return missing_field("verse")
    if provider_name not in PROVIDERS:
        return _invalid_provider(provider_name)

    try:
        result = generate_xray(
            verse,
            verse_text=data.get("verseText"),
            translation=data.get("translation"),
            perspective=data.get("perspective"),
            provider=provider_name,
        )
    except ProviderNotConfiguredError:
        return provider_not_configured(provider_name)
    except LLMError as e:
        logger.warning(f"X-Ray generation failed for {verse!r}: {e}")
        return upstream_error(str(e))
    except Exception as e:
        logger.exception(f"X-Ray generation failed for {verse!r}")
        return server_error(detail=str(e))

    return jsonify(result)


@study_bp.post("/study-plan")
def study_plan():
    """
    Generate a topical study plan.

    Body:
        {
            "topic": "anxiety",    (required)
            "duration": 7,         (3..30, default 7)
            "translation": "ESV"
        }

    Returns:
        {"success", "topic", "duration", "translation", "plan": [...]}
    """
    data = request.get_json(silent=True) or {}
    topic = data.get("topic")
    translation = data.get("translation") or "ESV"

    if not topic or not isinstance(topic, str) or not topic.strip():
        return missing_field("topic")

    try:
        duration = int(data.get("duration", 7))
    except (TypeError, ValueError):
        return invalid_field("duration", "Duration must be a whole number of days")

    if duration < MIN_DURATION or duration > MAX_DURATION:
        return invalid_field(
            "duration",
            f"Duration must be between {MIN_DURATION} and {MAX_DURATION} days",
        )

    try:
        plan = generate_study_plan(topic, duration, translation)
    except ProviderNotConfiguredError:
        return provider_not_configured("groq")
    except LLMError as e:
        logger.warning(f"Study plan generation failed for {topic!r}: {e}")
        return upstream_error(str(e))
    except Exception as e:
        logger.exception(f"Study plan generation failed for {topic!r}")
        return server_error(detail=str(e))

    return jsonify({
        "success": True,
        "topic": topic.strip(),
        "duration": duration,
        "translation": translation,
        "plan": plan,
    })
