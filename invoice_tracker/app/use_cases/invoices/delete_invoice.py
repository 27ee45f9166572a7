"""DeleteInvoice Use Case

Removes an invoice from the store and hands back what was removed.
"""

import logging
from invoice_tracker.app.result import Result, Return
from invoice_tracker.app.repositories.invoice_repository import InvoiceRepository
from . import errors
from .dtos import DeleteInvoiceCommandDTO, InvoiceResponseDTO
from .fields import FieldError, coerce_invoice_id, is_missing

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete invoice

    Business Rules:
    1. invoice_id is required
    2. Deleting an id that is not stored (including one already deleted)
       is INVOICE_NOT_FOUND
    3. The deleted id is never handed out again
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, command: DeleteInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice deletion

        Args:
            command: DeleteInvoiceCommandDTO with invoice_id

        Returns:
            Result[InvoiceResponseDTO]: The invoice as it was before deletion, or error
        """
        if is_missing(command.invoice_id):
            return Return.err(errors.validation_error(errors.ID_REQUIRED))

        try:
            invoice_id = coerce_invoice_id(command.invoice_id)
        except FieldError as e:
            return Return.err(errors.validation_error(str(e)))

        try:
            deleted = await self.invoice_repo.delete(invoice_id)
            if deleted is None:
                return Return.err(errors.not_found_error(invoice_id))

            logger.info(f"Deleted invoice {deleted.id}")
            return Return.ok(InvoiceResponseDTO.from_entity(deleted))

        except Exception as e:
            logger.exception("Error deleting invoice")
            return Return.err(errors.internal_error(errors.DELETE_FAILED, reason=str(e)))
