"""Global DRF exception handler.

Invariants:
    - Framework errors (bad JSON, wrong method, ...) → ``{"errors": [{"msg": ...}]}``
    - Not found raised by the framework → ``{"error": msg}``
    - Anything else (storage failures included) → 500 ``{"error": ...}``,
      logged with traceback, never leaking internal details
"""

from __future__ import annotations

from typing import Any, Dict, List

import structlog
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Error Interno del Servidor"


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Reshape DRF error responses and turn unexpected errors into a 500."""
    response = exception_handler(exc, context)
    view = context.get("view")

    if response is None:
        logger.exception(
            "request.unhandled_error",
            view=view.__class__.__name__ if view else None,
            error_type=exc.__class__.__name__,
        )
        set_rollback()
        return Response(
            {"error": INTERNAL_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, (NotFound, Http404)):
        response.data = {"error": str(response.data.get("detail", ""))}
    else:
        response.data = {"errors": _as_findings(response.data)}
    return response


def _as_findings(data: Any) -> List[Dict[str, str]]:
    if isinstance(data, dict) and "detail" in data:
        return [{"msg": str(data["detail"])}]
    if isinstance(data, dict):
        findings = []
        for field, messages in data.items():
            if not isinstance(messages, list):
                messages = [messages]
            findings.extend({"msg": str(message), "path": field} for message in messages)
        return findings
    if isinstance(data, list):
        return [{"msg": str(message)} for message in data]
    return [{"msg": str(data)}]
