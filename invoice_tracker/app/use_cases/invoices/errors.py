"""Error codes and messages shared by the invoice use cases"""

from typing import Optional
from invoice_tracker.app.result import Error

VALIDATION_ERROR = "VALIDATION_ERROR"
INVOICE_NOT_FOUND = "INVOICE_NOT_FOUND"
INTERNAL_ERROR = "INTERNAL_ERROR"

ALL_FIELDS_REQUIRED = "All fields are required."
ID_REQUIRED = "Invoice id is required."
INVOICE_NOT_FOUND_MESSAGE = "Invoice not found."

CREATE_FAILED = "Error while creating the invoice."
UPDATE_FAILED = "Error while updating the invoice."
DELETE_FAILED = "Error while deleting the invoice."
PRINT_FAILED = "Error while printing the invoices."


def validation_error(message: str, reason: Optional[str] = None) -> Error:
    return Error(code=VALIDATION_ERROR, message=message, reason=reason)


def not_found_error(invoice_id: int) -> Error:
    return Error(
        code=INVOICE_NOT_FOUND,
        message=INVOICE_NOT_FOUND_MESSAGE,
        reason=f"No invoice with ID {invoice_id}",
    )


def internal_error(message: str, reason: Optional[str] = None) -> Error:
    return Error(code=INTERNAL_ERROR, message=message, reason=reason)
