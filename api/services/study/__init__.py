# api/services/study/__init__.py
"""
LLM-backed study features: verse X-Ray analysis and topical study plans.
"""

from .json_extract import JSONExtractionError, extract_json
from .xray_service import generate_xray, XRAY_SECTIONS
from .study_plan_service import generate_study_plan, MIN_DURATION, MAX_DURATION

__all__ = [
    "JSONExtractionError",
    "extract_json",
    "generate_xray",
    "XRAY_SECTIONS",
    "generate_study_plan",
    "MIN_DURATION",
    "MAX_DURATION",
]
