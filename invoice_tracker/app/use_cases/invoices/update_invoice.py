"""UpdateInvoice Use Case

Replaces the customer, amount and due date of an existing invoice.
"""

import logging
from invoice_tracker.app.result import Result, Return
from invoice_tracker.app.repositories.invoice_repository import InvoiceRepository
from . import errors
from .dtos import UpdateInvoiceCommandDTO, InvoiceResponseDTO
from .fields import FieldError, coerce_amount, coerce_invoice_id, coerce_text, is_missing

logger = logging.getLogger(__name__)


class UpdateInvoice:
    """
    Use Case: Update invoice

    Business Rules:
    1. invoice_id, customer_name, amount and due_date are all required
    2. invoice_id is compared numerically ("1" and 1 name the same invoice)
    3. id and created_at of the stored invoice are preserved

    Flow:
    1. Check required fields
    2. Coerce id, amount and text fields
    3. Look up the invoice
    4. Apply the new values in place
    5. Return response
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, command: UpdateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice update

        Args:
            command: UpdateInvoiceCommandDTO with invoice_id and replacement values

        Returns:
            Result[InvoiceResponseDTO]: Updated invoice or error
        """
        # Step 1: Required fields
        if is_missing(command.invoice_id, command.customer_name, command.amount, command.due_date):
            return Return.err(errors.validation_error(errors.ALL_FIELDS_REQUIRED))

        # Step 2: Coerce
        try:
            invoice_id = coerce_invoice_id(command.invoice_id)
            customer_name = coerce_text(command.customer_name)
            amount = coerce_amount(command.amount)
            due_date = coerce_text(command.due_date)
        except FieldError as e:
            return Return.err(errors.validation_error(str(e)))

        try:
            # Step 3: Look up
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            if invoice is None:
                return Return.err(errors.not_found_error(invoice_id))

            # Step 4: Apply
            invoice.apply_changes(customer_name=customer_name, amount=amount, due_date=due_date)
            updated = await self.invoice_repo.update(invoice)
            logger.info(f"Updated invoice {updated.id}")

            # Step 5: Build response
            return Return.ok(InvoiceResponseDTO.from_entity(updated))

        except Exception as e:
            logger.exception("Error updating invoice")
            return Return.err(errors.internal_error(errors.UPDATE_FAILED, reason=str(e)))
