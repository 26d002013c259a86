from flask import Blueprint, jsonify
from datetime import datetime, timezone

from services.llm_service import provider_status

status_bp = Blueprint("status_api", __name__, url_prefix="/api")


def _now_utc() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _check_cross_references() -> tuple[bool, str]:
    """Check that the popular cross-reference dataset is present."""
    from routes.references_api import get_service
    index = get_service().cross_references
    if index.popular_path.exists():
        return True, str(index.popular_path)
    return False, f"missing: {index.popular_path}"


@status_bp.get("/status")
def status():
    """Basic liveness check."""
    return jsonify(
        {
            "status": "ok",
            "time_utc": _now_utc(),
        }
    )


@status_bp.get("/health")
def health():
    """
    Component health check.

    Reports the cross-reference dataset and each LLM provider. Always 200;
    a missing component only degrades the endpoints that use it.
    """
    refs_ok, refs_detail = _check_cross_references()
    providers = provider_status()

    response = {
        "status": "healthy" if refs_ok else "degraded",
        "time_utc": _now_utc(),
        "components": {
            "cross_references": {"ok": refs_ok, "detail": refs_detail},
            "llm": {
                name: {"ok": ok, "detail": "configured" if ok else "not configured"}
                for name, ok in providers.items()
            },
        },
    }

    return jsonify(response), 200
