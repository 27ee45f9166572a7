"""Invoice Repository Interface

Defines the contract for invoice storage operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from invoice_tracker.domain.invoice import Invoice


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice storage

    Implementations own the id counter: ids are assigned on create, only
    ever increase, and are never handed out twice.
    """

    @abstractmethod
    async def list_all(self) -> List[Invoice]:
        """
        Retrieve every invoice

        Returns:
            Invoices in insertion order
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Store a new invoice

        Args:
            invoice: Invoice entity without an id

        Returns:
            Created Invoice with its assigned ID
        """
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """
        Store new values for an existing invoice

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        pass

    @abstractmethod
    async def delete(self, invoice_id: int) -> Optional[Invoice]:
        """
        Remove an invoice

        Args:
            invoice_id: Invoice ID

        Returns:
            The removed Invoice, or None if no invoice had that ID
        """
        pass
