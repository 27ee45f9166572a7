"""Data Transfer Objects for Invoice Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime, timezone
from typing import Any, Union
from pydantic import BaseModel, ConfigDict, Field, field_serializer

from invoice_tracker.domain.invoice import Invoice


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    Values are carried as received; the use case checks presence and
    coerces them.
    """

    customer_name: Any = Field(
        default=None,
        description="Customer name"
    )

    amount: Any = Field(
        default=None,
        description="Invoice amount (number or numeric string)"
    )

    due_date: Any = Field(
        default=None,
        description="Due date (e.g. 2024-01-31)"
    )


class UpdateInvoiceCommandDTO(CreateInvoiceCommandDTO):
    """
    Command DTO for updating an invoice

    Identifies the invoice by id and carries the replacement values.
    """

    invoice_id: Any = Field(
        default=None,
        description="ID of the invoice to update"
    )


class DeleteInvoiceCommandDTO(BaseModel):
    """Command DTO for deleting an invoice"""

    invoice_id: Any = Field(
        default=None,
        description="ID of the invoice to delete"
    )


class InvoiceResponseDTO(BaseModel):
    """
    Response DTO for invoice operations

    Serialized with camelCase keys, matching the request bodies.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "customerName": "Acme",
                "amount": 250,
                "dueDate": "2024-01-01",
                "createdAt": "2024-01-01T10:00:00.000Z",
            }
        },
    )

    id: int = Field(
        ...,
        description="Invoice ID"
    )

    customer_name: str = Field(
        ...,
        alias="customerName",
        description="Customer name"
    )

    amount: Union[int, float] = Field(
        ...,
        description="Invoice amount"
    )

    due_date: str = Field(
        ...,
        alias="dueDate",
        description="Due date"
    )

    created_at: datetime = Field(
        ...,
        alias="createdAt",
        description="Creation timestamp (UTC)"
    )

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        return format_timestamp(value)

    @classmethod
    def from_entity(cls, invoice: Invoice) -> "InvoiceResponseDTO":
        return cls(
            id=invoice.id,
            customer_name=invoice.customer_name,
            amount=invoice.amount,
            due_date=invoice.due_date,
            created_at=invoice.created_at,
        )


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as ISO-8601 UTC with milliseconds, e.g. 2024-01-01T10:00:00.000Z"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class InvoicePrintoutDTO(BaseModel):
    """Response DTO for the printable invoice list"""

    filename: str = Field(
        default="invoices.pdf",
        description="Suggested download filename"
    )

    pdf_bytes: bytes = Field(
        ...,
        description="Rendered PDF document"
    )

    invoice_count: int = Field(
        ...,
        description="Number of invoices in the printout"
    )
