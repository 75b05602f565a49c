"""Shared API error taxonomy and the DRF exception handler.

Error bodies come in two shapes:

- ``{"errors": [...]}``: field-level validation failures (HTTP 400).
- ``{"error": "..."}``: everything else (not found, malformed JSON,
  storage failures, framework errors).

Storage failures (``django.db.DatabaseError``) are never caught by view
code; they reach this handler, get logged with their traceback and are
answered with an opaque 500.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.db import DatabaseError
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class RequestValidationError(Exception):
    """One or more request validation rules failed."""

    def __init__(self, errors: List[Dict[str, Any]]) -> None:
        super().__init__(f"{len(errors)} validation error(s)")
        self.errors = errors

    @classmethod
    def from_pydantic(
        cls, exc: PydanticValidationError, location: str = "body"
    ) -> RequestValidationError:
        """Re-shape Pydantic errors into validation error entries."""
        errors = []
        for error in exc.errors():
            entry: Dict[str, Any] = {"type": "field"}
            if error["type"] != "missing":
                entry["value"] = error.get("input")
            message = error["msg"]
            if message.startswith("Value error, "):
                message = message[len("Value error, "):]
            entry.update(
                msg=message,
                path=".".join(str(part) for part in error["loc"]),
                location=location,
            )
            errors.append(entry)
        return cls(errors)


def _view_name(context: Dict[str, Any]) -> Optional[str]:
    view = context.get("view")
    return type(view).__name__ if view is not None else None


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """DRF ``EXCEPTION_HANDLER`` for the project."""
    if isinstance(exc, RequestValidationError):
        return Response({"errors": exc.errors}, status=status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, DatabaseError):
        set_rollback()
        logger.error(
            "storage.error",
            view=_view_name(context),
            error_type=type(exc).__name__,
            exc_info=exc,
        )
        return Response(
            {"error": INTERNAL_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    response = exception_handler(exc, context)
    if response is not None and isinstance(response.data, dict):
        detail = response.data.get("detail")
        if detail is not None:
            response.data = {"error": str(detail)}
    return response
