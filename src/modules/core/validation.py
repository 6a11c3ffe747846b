"""Request validation pipeline.

Each route declares one serializer for its path parameters and one for its
body.  Their fields are ``RuleField`` instances carrying an ordered list of
``Check`` validators; every check runs on every request, so a single field
can report several findings.  ``validate_input`` is the aggregation step: it
runs the declared serializers, flattens their errors into findings and stops
the request with 400 when there is at least one.
"""

from __future__ import annotations

import functools
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Mapping, Optional, Type

import structlog
from pydantic import BaseModel, ConfigDict
from rest_framework import serializers, status
from rest_framework.fields import empty
from rest_framework.request import Request
from rest_framework.response import Response

logger = structlog.get_logger(__name__)

PARAMS = "params"
BODY = "body"

_INT_RE = re.compile(r"[-+]?[0-9]+")
_NUMERIC_RE = re.compile(r"[+-]?([0-9]*[.])?[0-9]+")
_BOOLEAN_STRINGS = frozenset({"true", "false", "1", "0"})


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_int(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and _INT_RE.fullmatch(value) is not None


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return Decimal(str(value)).is_finite()
    return isinstance(value, str) and _NUMERIC_RE.fullmatch(value) is not None


def not_empty(value: Any) -> bool:
    return value is not None and value != ""


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def is_positive(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        return False
    return number.is_finite() and number > 0


def is_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return True
    if isinstance(value, int):
        return value in (0, 1)
    return isinstance(value, str) and value in _BOOLEAN_STRINGS


def max_length(limit: int) -> Callable[[Any], bool]:
    """Strings must be at most ``limit`` characters; other values pass."""

    def within_max_length(value: Any) -> bool:
        return not isinstance(value, str) or len(value) <= limit

    return within_max_length


def fits_decimal(max_digits: int, decimal_places: int) -> Callable[[Any], bool]:
    """Numeric values must be storable in a ``DecimalField`` of this size
    without rounding; non-numeric values pass.
    """

    def fits_decimal_column(value: Any) -> bool:
        if not is_numeric(value):
            return True
        _, digits, exponent = Decimal(str(value)).normalize().as_tuple()
        places = max(0, -exponent)
        whole = max(0, len(digits) + exponent)
        return places <= decimal_places and whole <= max_digits - decimal_places

    return fits_decimal_column


# ---------------------------------------------------------------------------
# Rule fields
# ---------------------------------------------------------------------------


class Check:
    """Validator pairing a predicate with the message reported on failure."""

    def __init__(self, predicate: Callable[[Any], bool], message: str) -> None:
        self.predicate = predicate
        self.message = message

    def __call__(self, value: Any) -> None:
        if not self.predicate(value):
            raise serializers.ValidationError(self.message)

    def __repr__(self) -> str:
        return f"Check({self.predicate.__name__}, {self.message!r})"


class RuleField(serializers.Field):
    """Pass-through field that always runs its validators.

    DRF short-circuits missing, ``null`` and un-coercible values before
    validators run; here the raw value (``None`` when absent) reaches every
    ``Check`` and DRF's ``run_validators`` collects all of their messages.
    """

    def validate_empty_values(self, data):
        if data is empty:
            data = None
        return (False, data)

    def to_internal_value(self, data):
        return data

    def to_representation(self, value):
        return value


# ---------------------------------------------------------------------------
# Findings
# ---------------------------------------------------------------------------


class Finding(BaseModel):
    """A single field-level violation as rendered in ``{"errors": [...]}``."""

    model_config = ConfigDict(frozen=True)

    type: str = "field"
    value: Any = None
    msg: str
    path: str
    location: str

    def as_response(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


def collect_findings(
    serializer: serializers.Serializer, location: str
) -> List[Finding]:
    """Validate ``serializer`` and turn its errors into ordered findings."""
    if serializer.is_valid():
        return []

    data = serializer.initial_data
    findings: List[Finding] = []
    for field, messages in serializer.errors.items():
        value = data.get(field) if isinstance(data, Mapping) else None
        if not isinstance(messages, list):
            messages = [messages]
        for message in messages:
            findings.append(
                Finding(value=value, msg=str(message), path=field, location=location)
            )
    return findings


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


def validate_input(
    params: Optional[Type[serializers.Serializer]] = None,
    body: Optional[Type[serializers.Serializer]] = None,
):
    """Run the route's rule serializers before the handler.

    Path parameters are checked first, then the request body.  When any
    finding exists the handler is skipped and a 400 with every finding is
    returned.
    """

    def decorator(handler):
        @functools.wraps(handler)
        def wrapper(self, request: Request, *args, **kwargs) -> Response:
            findings: List[Finding] = []
            if params is not None:
                findings += collect_findings(params(data=dict(kwargs)), PARAMS)
            if body is not None:
                findings += collect_findings(body(data=request.data), BODY)

            if findings:
                logger.warning(
                    "request.validation_failed",
                    path=request.path,
                    method=request.method,
                    fields=sorted({finding.path for finding in findings}),
                    count=len(findings),
                )
                return Response(
                    {"errors": [finding.as_response() for finding in findings]},
                    status=status.HTTP_400_BAD_REQUEST,
                )
            return handler(self, request, *args, **kwargs)

        return wrapper

    return decorator
