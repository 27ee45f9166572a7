"""Display formatting shared by the UI table and the PDF printout."""

from datetime import datetime
from typing import Any, Iterable


def format_amount(amount: Any, currency_symbol: str = "$") -> str:
    """Format an amount with two decimals, e.g. ``$250.00``."""
    try:
        return f"{currency_symbol}{float(amount):.2f}"
    except (TypeError, ValueError):
        return f"{currency_symbol}{amount}"


def total_amount(amounts: Iterable[Any]) -> float:
    """Sum amounts, skipping anything that is not a number."""
    total = 0.0
    for amount in amounts:
        try:
            total += float(amount)
        except (TypeError, ValueError):
            continue
    return total


def format_due_date(value: Any) -> str:
    """Date part of a due date (``YYYY-MM-DD``)."""
    return str(value or "")[:10]


def format_created_at(value: Any) -> str:
    """
    Render a creation timestamp in local time.

    Accepts a datetime or an ISO-8601 string (with or without a trailing
    ``Z``); anything unparseable is returned unchanged.
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            return str(value or "")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.strftime("%Y-%m-%d %H:%M:%S")
