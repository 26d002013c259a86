# api/utils/errors.py
"""
JSON error payloads shared by every blueprint.

Shape: {"error": "<snake_case_code>", "detail": "<message>", ...extra}

The code is what clients branch on; detail is for humans and may change.
"""

from typing import Optional

from flask import jsonify


def error_response(code: str, status: int = 400, detail: Optional[str] = None, **extra):
    """
    Build an error payload.

    Args:
        code: snake_case error code ("unknown_book", "ref_required")
        status: HTTP status to return
        detail: Message for humans, omitted when empty
        **extra: Additional top-level fields (received, example, usage, ...)

    Returns:
        (response, status) tuple for returning from a view
    """
    body = {"error": code}
    if detail:
        body["detail"] = detail
    body.update(extra)
    return jsonify(body), status


# ---- 400 ----

def missing_field(field: str, **extra):
    """A required query param or body field was not supplied."""
    return error_response(f"{field}_required", 400, f"Missing required field: {field}", **extra)


def invalid_field(field: str, detail: str = None, **extra):
    """A supplied value failed validation."""
    return error_response(f"invalid_{field}", 400, detail, **extra)


def reference_error(exc, received: str):
    """
    Unparseable scripture reference.

    Error code is the parse failure reason ("unknown_book" / "bad_syntax"),
    with the offending input echoed back.
    """
    return error_response(
        exc.reason.value,
        400,
        str(exc),
        received=received,
        example="John 3:16",
    )


# ---- 404 ----

def not_found(resource: str = "resource", detail: str = None, **extra):
    return error_response("not_found", 404, detail or f"{resource} not found", **extra)


# ---- 5xx ----

def server_error(code: str = "internal_error", detail: str = None):
    return error_response(code, 500, detail)


def provider_not_configured(provider: str):
    """The requested LLM provider has no API key."""
    return error_response(
        "provider_not_configured",
        500,
        f"AI provider '{provider}' is not configured",
        provider=provider,
    )


def upstream_error(detail: str = None):
    """An external API call failed."""
    return error_response("upstream_error", 502, detail)
