from .formatting import format_amount, format_created_at, format_due_date, total_amount

__all__ = [
    "format_amount",
    "format_created_at",
    "format_due_date",
    "total_amount",
]
