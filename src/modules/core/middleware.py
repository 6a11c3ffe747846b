"""Request logging middleware.

Every request gets a correlation id (the client's ``X-Request-ID`` or a new
UUID4) that is bound, together with the method and path, into structlog's
context vars.  Service, repository and validation log lines emitted while the
request runs therefore carry the same ``correlation_id``/``method``/``path``
triple, and the id is echoed back in the ``X-Request-ID`` response header.
"""

import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger()


def _log_method_for(status_code: int) -> Callable[..., None]:
    if status_code >= 500:
        return logger.error
    if status_code >= 400:
        return logger.warning
    return logger.info


class CorrelationIdMiddleware:
    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=cid,
            method=request.method,
            path=request.path,
        )

        logger.info("request_started", query=request.META.get("QUERY_STRING") or None)
        start = time.monotonic()

        response = self.get_response(request)

        _log_method_for(response.status_code)(
            "request_finished",
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - start) * 1000, 2),
        )

        response[REQUEST_ID_HEADER] = cid
        return response
