"""Unit tests for the project exception handler and error re-shaping."""

from __future__ import annotations

import pytest
from django.db import IntegrityError
from pydantic import ValidationError
from rest_framework.exceptions import NotFound, ParseError

from modules.core.exceptions import RequestValidationError, api_exception_handler
from modules.products.dtos import UpdateProductDTO

pytestmark = pytest.mark.unit


def _pydantic_error(payload) -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        UpdateProductDTO.model_validate(payload)
    return exc_info.value


class TestFromPydantic:
    def test_missing_fields_have_no_value(self):
        exc = RequestValidationError.from_pydantic(_pydantic_error({}))
        assert [e["path"] for e in exc.errors] == ["name", "price", "availability"]
        assert all("value" not in e for e in exc.errors)
        assert all(e["location"] == "body" for e in exc.errors)

    def test_value_error_prefix_is_stripped(self):
        exc = RequestValidationError.from_pydantic(
            _pydantic_error({"name": "x", "price": "0.001", "availability": True})
        )
        assert len(exc.errors) == 1
        assert exc.errors[0]["msg"] == "price must be > 0"
        assert exc.errors[0]["path"] == "price"
        assert "value" in exc.errors[0]


class TestApiExceptionHandler:
    def test_validation_error_renders_errors_list(self):
        errors = [{"type": "field", "msg": "invalid id", "path": "id", "location": "params"}]
        response = api_exception_handler(RequestValidationError(errors), {})
        assert response.status_code == 400
        assert response.data == {"errors": errors}

    def test_database_error_is_opaque(self):
        response = api_exception_handler(IntegrityError("constraint failed"), {})
        assert response.status_code == 500
        assert response.data == {"error": "Internal server error"}

    def test_drf_detail_is_flattened(self):
        response = api_exception_handler(ParseError("bad json"), {})
        assert response.status_code == 400
        assert response.data == {"error": "bad json"}

        response = api_exception_handler(NotFound(), {})
        assert response.status_code == 404
        assert "error" in response.data

    def test_unknown_exception_is_left_to_django(self):
        assert api_exception_handler(RuntimeError("boom"), {}) is None
