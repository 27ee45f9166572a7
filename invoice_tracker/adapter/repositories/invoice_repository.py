"""In-Memory Invoice Repository Implementation

Implements invoice storage as a process-lifetime ordered map.
"""

from typing import Dict, Optional, List
from invoice_tracker.app.repositories.invoice_repository import InvoiceRepository
from invoice_tracker.domain.invoice import Invoice


class InMemoryInvoiceRepository(InvoiceRepository):
    """
    In-memory implementation of InvoiceRepository

    Holds invoices in an insertion-ordered dict keyed by id, plus the
    counter that issues ids. Contents are lost when the process exits.
    None of the methods await, so each call completes within a single
    event-loop step.
    """

    def __init__(self, start_id: int = 1):
        if start_id < 1:
            raise ValueError("start_id must be a positive integer")
        self._invoices: Dict[int, Invoice] = {}
        self._next_id = start_id

    @property
    def next_id(self) -> int:
        """The id the next created invoice will receive"""
        return self._next_id

    def __len__(self) -> int:
        return len(self._invoices)

    async def list_all(self) -> List[Invoice]:
        return list(self._invoices.values())

    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        return self._invoices.get(invoice_id)

    async def create(self, invoice: Invoice) -> Invoice:
        """
        Store a new invoice

        The current counter value becomes the invoice id, then the counter
        advances. Any id already set on the entity is overwritten.

        Args:
            invoice: Invoice entity to store

        Returns:
            Created Invoice with its assigned ID
        """
        invoice.id = self._next_id
        self._next_id += 1
        self._invoices[invoice.id] = invoice
        return invoice

    async def update(self, invoice: Invoice) -> Invoice:
        """
        Store new values for an existing invoice

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice

        Raises:
            KeyError: If the invoice is not stored
        """
        if invoice.id not in self._invoices:
            raise KeyError(invoice.id)
        self._invoices[invoice.id] = invoice
        return invoice

    async def delete(self, invoice_id: int) -> Optional[Invoice]:
        return self._invoices.pop(invoice_id, None)
