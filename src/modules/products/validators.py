"""Request rule chains for the product routes.

Each list is the full rule set of one route, in evaluation order:

- ``PRODUCT_ID_RULES``: GET, PATCH and DELETE ``/:id``.
- ``CREATE_PRODUCT_RULES``: POST ``/``.
- ``UPDATE_PRODUCT_RULES``: PUT ``/:id``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from modules.core.validation import body, param, to_string

INVALID_ID = "invalid id"
NAME_REQUIRED = "name is required"
PRICE_NOT_NUMERIC = "price must be a number"
PRICE_REQUIRED = "price is required"
PRICE_NOT_POSITIVE = "price must be > 0"
AVAILABILITY_NOT_BOOLEAN = "availability must be a boolean"


def is_positive(value: Any) -> bool:
    return Decimal(to_string(value)) > 0


def _id_rule():
    return param("id").is_int().with_message(INVALID_ID)


def _name_rule():
    return body("name").not_empty().with_message(NAME_REQUIRED)


def _price_rule():
    return (
        body("price")
        .is_numeric()
        .with_message(PRICE_NOT_NUMERIC)
        .not_empty()
        .with_message(PRICE_REQUIRED)
        .custom(is_positive)
        .with_message(PRICE_NOT_POSITIVE)
    )


PRODUCT_ID_RULES = [_id_rule()]

CREATE_PRODUCT_RULES = [_name_rule(), _price_rule()]

UPDATE_PRODUCT_RULES = [
    _id_rule(),
    _name_rule(),
    _price_rule(),
    body("availability").is_boolean().with_message(AVAILABILITY_NOT_BOOLEAN),
]
