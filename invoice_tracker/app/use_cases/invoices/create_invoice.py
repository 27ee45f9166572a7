"""CreateInvoice Use Case

Validates a new invoice and adds it to the store.
"""

import logging
from invoice_tracker.app.result import Result, Return
from invoice_tracker.app.repositories.invoice_repository import InvoiceRepository
from invoice_tracker.domain.invoice import Invoice
from . import errors
from .dtos import CreateInvoiceCommandDTO, InvoiceResponseDTO
from .fields import FieldError, coerce_amount, coerce_text, is_missing

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create invoice

    Business Rules:
    1. customer_name, amount and due_date are all required
    2. amount must read as a finite number
    3. id and created_at are assigned by the store, never by the caller

    Flow:
    1. Check required fields
    2. Coerce amount to a number and the other fields to text
    3. Store the invoice
    4. Return response
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with customer_name, amount, due_date

        Returns:
            Result[InvoiceResponseDTO]: Created invoice or error
        """
        # Step 1: Required fields
        if is_missing(command.customer_name, command.amount, command.due_date):
            return Return.err(errors.validation_error(errors.ALL_FIELDS_REQUIRED))

        # Step 2: Coerce
        try:
            customer_name = coerce_text(command.customer_name)
            amount = coerce_amount(command.amount)
            due_date = coerce_text(command.due_date)
        except FieldError as e:
            return Return.err(errors.validation_error(str(e)))

        try:
            # Step 3: Store
            invoice = await self.invoice_repo.create(
                Invoice(customer_name=customer_name, amount=amount, due_date=due_date)
            )
            logger.info(f"Created invoice {invoice.id} for {invoice.customer_name}")

            # Step 4: Build response
            return Return.ok(InvoiceResponseDTO.from_entity(invoice))

        except Exception as e:
            logger.exception("Error creating invoice")
            return Return.err(errors.internal_error(errors.CREATE_FAILED, reason=str(e)))
