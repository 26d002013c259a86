# api/services/study/study_plan_service.py
"""
Topical Bible study plans generated by the default LLM provider.
"""

import logging

from services.llm_service import LLMError, require_provider

from .json_extract import extract_json

logger = logging.getLogger(__name__)


MIN_DURATION = 3
MAX_DURATION = 30
DEFAULT_DURATION = 7
PLAN_MAX_TOKENS = 4000

DAY_DEFAULTS = {
    "focus": "Focus on understanding the passage in context.",
    "reflection": "How does this passage apply to your life today?",
    "prayer": "Lord, help me understand and apply Your Word. Amen.",
}


def _system_prompt(topic: str, duration: int, translation: str) -> str:
    return f"""You are a knowledgeable Bible study guide creating personalized study plans. Your plans are spiritually enriching, biblically accurate, and practical.

IMPORTANT: You MUST respond with ONLY a valid JSON array. No markdown, no code blocks, no explanation - just the raw JSON array.

Create a {duration}-day Bible study plan on the topic: "{topic}"

Each day in the array must have this exact structure:
{{
  "day": 1,
  "title": "Short inspiring title for this day's study",
  "verses": ["Book Chapter:Verse", "Book Chapter:Verse"],
  "focus": "2-3 sentence focus for what to pay attention to while reading",
  "reflection": "3-4 thought-provoking questions or points for personal reflection",
  "prayer": "A short prayer related to the day's theme (2-3 sentences)"
}}

Guidelines:
- Use the {translation} translation for verse references
- Include 2-4 relevant Bible verses per day
- Build progressively - start with foundational concepts, go deeper
- Vary the books of the Bible used (mix Old and New Testament where appropriate)
- Ensure verse references are accurate and exist in the Bible

Return ONLY the JSON array with {duration} day objects. No other text."""


def normalize_plan(plan: list) -> list:
    """Fill missing day fields with defaults; verses is always a list."""
    days = []
    for i, day in enumerate(plan):
        if not isinstance(day, dict):
            logger.warning(f"Study plan day {i + 1} is not an object, skipping")
            continue

        number = i + 1
        if not all(day.get(k) for k in ("day", "title", "verses", "focus", "reflection", "prayer")):
            logger.warning(f"Study plan day {number} missing fields, filling defaults")

        day["day"] = day.get("day") or number
        day["title"] = day.get("title") or f"Day {number} Study"
        day["verses"] = day.get("verses") or []
        for key, default in DAY_DEFAULTS.items():
            day[key] = day.get(key) or default

        if not isinstance(day["verses"], list):
            day["verses"] = [day["verses"]]

        days.append(day)
    return days


def generate_study_plan(topic: str, duration: int = DEFAULT_DURATION, translation: str = "ESV") -> list:
    """
    Generate a day-by-day study plan.

    Args:
        topic: Study topic, e.g. "anxiety"
        duration: Number of days, 3..30
        translation: Translation code for verse references

    Returns:
        List of {day, title, verses, focus, reflection, prayer}

    Raises:
        ValueError: Empty topic or duration out of range
        ProviderNotConfiguredError: Groq has no API key
        LLMError: Provider failure or a reply with no usable plan
    """
    if not topic or not topic.strip():
        raise ValueError("Topic is required")
    if not isinstance(duration, int) or isinstance(duration, bool):
        raise ValueError("Duration must be an integer")
    if duration < MIN_DURATION or duration > MAX_DURATION:
        raise ValueError(f"Duration must be between {MIN_DURATION} and {MAX_DURATION} days")

    topic = topic.strip()
    llm = require_provider("groq")

    messages = [
        {"role": "system", "content": _system_prompt(topic, duration, translation)},
        {
            "role": "user",
            "content": f'Generate a {duration}-day Bible study plan about "{topic}". Return only the JSON array.',
        },
    ]

    logger.info(f"Study plan request: topic={topic!r} duration={duration} translation={translation}")
    reply = llm.chat_completion(messages, max_tokens=PLAN_MAX_TOKENS)
    if not reply:
        raise LLMError("No response from AI service")

    try:
        plan = extract_json(reply, expect_list=True)
    except ValueError as e:
        raise LLMError(str(e)) from e

    if not isinstance(plan, list):
        raise LLMError("Invalid response format - expected array")

    days = normalize_plan(plan)
    logger.info(f"Generated {len(days)} day plan")
    return days
