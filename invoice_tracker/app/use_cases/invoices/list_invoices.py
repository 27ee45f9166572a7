"""
List Invoices Use Case

Returns the whole invoice collection.
"""
from typing import List
from invoice_tracker.app.result import Result, Return
from invoice_tracker.app.repositories.invoice_repository import InvoiceRepository
from .dtos import InvoiceResponseDTO


class ListInvoices:
    """
    Use case: List invoices

    Invoices are returned in insertion order. There is no filtering or
    pagination.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self) -> Result[List[InvoiceResponseDTO]]:
        invoices = await self.invoice_repo.list_all()
        return Return.ok([InvoiceResponseDTO.from_entity(invoice) for invoice in invoices])
