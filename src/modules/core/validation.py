"""Declarative request validation for API views.

A route declares one ``FieldChain`` per field it inspects::

    body("price")
        .is_numeric().with_message("price must be a number")
        .custom(is_positive).with_message("price must be > 0")

and attaches the chains to a view method with ``@validate_request``.
Every rule of every chain is evaluated; each failing rule contributes
its own error entry, in declaration order.  When at least one rule
fails, ``RequestValidationError`` is raised before the view method
runs and the API exception handler renders it as HTTP 400.

Values are compared in their string form, so ``500``, ``500.0`` and
``"500"`` are all numeric and a missing field reads as ``""``.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Dict, List, Mapping, Sequence

import structlog
from rest_framework.exceptions import UnsupportedMediaType

from modules.core.exceptions import RequestValidationError

logger = structlog.get_logger(__name__)

PARAMS = "params"
BODY = "body"

INT_PATTERN = re.compile(r"[+-]?[0-9]+")
NUMERIC_PATTERN = re.compile(r"[+-]?(?:[0-9]*[.])?[0-9]+")
BOOLEAN_STRINGS = frozenset({"true", "false", "1", "0"})

DEFAULT_MESSAGE = "Invalid value"


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


MISSING = _Missing()


def to_string(value: Any) -> str:
    """Render a raw request value the way the string-based rules see it."""
    if value is MISSING or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float, Decimal, str)):
        return str(value)
    # objects and arrays never satisfy a scalar format
    return f"[{type(value).__name__}]"


@dataclass
class Rule:
    check: Callable[[Any], bool]
    message: str = DEFAULT_MESSAGE

    def passes(self, value: Any) -> bool:
        try:
            return bool(self.check(value))
        except (TypeError, ValueError, ArithmeticError):
            return False


class FieldChain:
    """Ordered rules for a single field read from one request location."""

    def __init__(self, field: str, location: str) -> None:
        self.field = field
        self.location = location
        self.rules: List[Rule] = []

    def __repr__(self) -> str:
        return f"FieldChain({self.location}.{self.field}, rules={len(self.rules)})"

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def _add(self, check: Callable[[Any], bool]) -> FieldChain:
        self.rules.append(Rule(check))
        return self

    def is_int(self) -> FieldChain:
        return self._add(lambda value: INT_PATTERN.fullmatch(to_string(value)))

    def is_numeric(self) -> FieldChain:
        return self._add(lambda value: NUMERIC_PATTERN.fullmatch(to_string(value)))

    def is_boolean(self) -> FieldChain:
        return self._add(lambda value: to_string(value) in BOOLEAN_STRINGS)

    def not_empty(self) -> FieldChain:
        return self._add(lambda value: to_string(value) != "")

    def custom(self, predicate: Callable[[Any], bool]) -> FieldChain:
        """Add a predicate over the raw value (``None`` when missing).

        A predicate that raises ``TypeError``, ``ValueError`` or an
        arithmetic error counts as a failure.
        """
        return self._add(
            lambda value: predicate(None if value is MISSING else value)
        )

    def with_message(self, message: str) -> FieldChain:
        """Set the message of the most recently added rule."""
        if not self.rules:
            raise ValueError(f"{self!r} has no rule to attach a message to")
        self.rules[-1].message = message
        return self

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def run(self, source: Mapping[str, Any]) -> List[Dict[str, Any]]:
        """Evaluate every rule and return one error entry per failure."""
        value = source.get(self.field, MISSING)
        errors = []
        for rule in self.rules:
            if rule.passes(value):
                continue
            entry: Dict[str, Any] = {"type": "field"}
            if value is not MISSING:
                entry["value"] = value
            entry.update(msg=rule.message, path=self.field, location=self.location)
            errors.append(entry)
        return errors


def param(field: str) -> FieldChain:
    """Start a rule chain over a URL path parameter."""
    return FieldChain(field, PARAMS)


def body(field: str) -> FieldChain:
    """Start a rule chain over a JSON body field."""
    return FieldChain(field, BODY)


def collect_errors(
    chains: Sequence[FieldChain],
    params: Mapping[str, Any],
    payload: Any,
) -> List[Dict[str, Any]]:
    """Run ``chains`` against a request's params and body, in order."""
    if not isinstance(payload, Mapping):
        payload = {}
    sources = {PARAMS: params, BODY: payload}
    errors: List[Dict[str, Any]] = []
    for chain in chains:
        errors.extend(chain.run(sources[chain.location]))
    return errors


def read_body(request) -> Any:
    """Return the parsed request body.

    Only JSON is parsed; a body sent with any other media type reads as
    an empty object, so it is judged by the rule chains like a missing
    body.  Malformed JSON still raises ``ParseError``.
    """
    try:
        return request.data
    except UnsupportedMediaType:
        return {}


def validate_request(*chains: FieldChain):
    """Guard a DRF view method with the given rule chains.

    Path parameters come from the URL kwargs; the body is only parsed
    when a chain reads from it.
    """
    reads_body = any(chain.location == BODY for chain in chains)

    def decorator(handler):
        @functools.wraps(handler)
        def wrapper(view, request, *args, **kwargs):
            payload = read_body(request) if reads_body else {}
            errors = collect_errors(chains, kwargs, payload)
            if errors:
                logger.warning(
                    "request.validation_failed",
                    method=request.method,
                    path=request.path,
                    error_count=len(errors),
                    fields=sorted({error["path"] for error in errors}),
                )
                raise RequestValidationError(errors)
            return handler(view, request, *args, **kwargs)

        return wrapper

    return decorator
