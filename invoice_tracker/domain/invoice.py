"""Invoice Domain Entity

A single tracked invoice: who owes, how much, and when it is due.
"""

from datetime import datetime, timezone
from typing import Optional, Union
from sqlmodel import Field
from invoice_tracker.domain.base import BaseModel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Invoice(BaseModel):
    """
    Invoice - tracked customer invoice

    Domain Rules:
    - id is assigned by the store, unique and never reused
    - created_at is stamped once at creation and never changes
    - customer_name, amount and due_date may be replaced by an update
    """

    id: Optional[int] = Field(
        default=None,
        description="Unique invoice identifier (assigned by the store)"
    )

    customer_name: str = Field(
        min_length=1,
        description="Customer name"
    )

    amount: Union[int, float] = Field(
        description="Invoice amount"
    )

    due_date: str = Field(
        min_length=1,
        description="Due date (date-valued text, e.g. 2024-01-31)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        description="Invoice creation timestamp (UTC)"
    )

    def apply_changes(self, customer_name: str, amount: Union[int, float], due_date: str) -> None:
        """Replace the mutable fields, keeping id and created_at."""
        self.customer_name = customer_name
        self.amount = amount
        self.due_date = due_date
