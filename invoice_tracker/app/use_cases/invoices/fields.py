"""Coercion of loosely typed request fields

Request bodies arrive as arbitrary JSON. Presence is checked with plain
truthiness (``None``, ``""``, ``0``, ``False`` and empty containers count as
missing); after that each field is parsed explicitly and rejected when it
cannot be read as the expected type.
"""

import math
from typing import Any, Union


class FieldError(ValueError):
    """A present field whose value cannot be coerced"""


def is_missing(*values: Any) -> bool:
    return any(not value for value in values)


def coerce_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FieldError("Customer name and due date must be text.")
    return str(value)


def coerce_amount(value: Any) -> Union[int, float]:
    """Parse an amount, keeping integral values as int (250 rather than 250.0)."""
    if isinstance(value, bool):
        raise FieldError("Amount must be a valid number.")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise FieldError("Amount must be a valid number.") from None
    if not math.isfinite(number):
        raise FieldError("Amount must be a valid number.")
    return int(number) if number.is_integer() else number


def coerce_invoice_id(value: Any) -> int:
    if isinstance(value, bool):
        raise FieldError("Invoice id must be a positive integer.")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise FieldError("Invoice id must be a positive integer.") from None
    if not math.isfinite(number) or not number.is_integer() or number < 1:
        raise FieldError("Invoice id must be a positive integer.")
    return int(number)
