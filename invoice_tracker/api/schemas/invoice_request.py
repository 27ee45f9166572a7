"""Request schemas for Invoice API

Pydantic models describing the accepted JSON bodies. Fields are loose on
purpose: presence and type rules are enforced by the use cases so that a
missing field is a 400 with a readable message rather than a 422.
"""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class CreateInvoiceRequestSchema(BaseModel):
    """
    Request schema for creating an invoice

    Used for POST /api/invoices.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "customerName": "Acme",
                "amount": "250",
                "dueDate": "2024-01-01",
            }
        },
    )

    customer_name: Any = Field(
        default=None,
        alias="customerName",
        description="Customer name (required, non-empty)"
    )

    amount: Any = Field(
        default=None,
        description="Invoice amount (required, number or numeric string)"
    )

    due_date: Any = Field(
        default=None,
        alias="dueDate",
        description="Due date (required, e.g. 2024-01-01)"
    )


class UpdateInvoiceRequestSchema(CreateInvoiceRequestSchema):
    """
    Request schema for updating an invoice

    Used for PUT /api/invoices.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "customerName": "Acme Co",
                "amount": 300,
                "dueDate": "2024-02-01",
            }
        },
    )

    id: Any = Field(
        default=None,
        description="Invoice ID (required, positive integer)"
    )


class DeleteInvoiceRequestSchema(BaseModel):
    """
    Request schema for deleting an invoice

    Used for DELETE /api/invoices.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"id": 1}})

    id: Any = Field(
        default=None,
        description="Invoice ID (required, positive integer)"
    )
