"""PrintInvoices Use Case

Renders the invoice table as a PDF document.
"""

import logging
from invoice_tracker.app.result import Result, Return
from invoice_tracker.app.repositories.invoice_repository import InvoiceRepository
from invoice_tracker.app.services.pdf_service import PdfService
from . import errors
from .dtos import InvoicePrintoutDTO

logger = logging.getLogger(__name__)


class PrintInvoices:
    """
    Use Case: Print invoices

    Produces the printable version of the invoice table: every stored
    invoice in insertion order followed by a total row.
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        pdf_service: PdfService,
        title: str = "Invoice Generator",
        currency_symbol: str = "$",
    ):
        self.invoice_repo = invoice_repo
        self.pdf_service = pdf_service
        self.title = title
        self.currency_symbol = currency_symbol

    async def execute(self) -> Result[InvoicePrintoutDTO]:
        try:
            invoices = await self.invoice_repo.list_all()

            pdf_bytes = self.pdf_service.generate_invoice_list(
                invoices=invoices,
                title=self.title,
                currency_symbol=self.currency_symbol,
            )

            return Return.ok(
                InvoicePrintoutDTO(
                    pdf_bytes=pdf_bytes,
                    invoice_count=len(invoices),
                )
            )

        except Exception as e:
            logger.exception("Error printing invoices")
            return Return.err(errors.internal_error(errors.PRINT_FAILED, reason=str(e)))
