"""PDF Generation Service Interface

Defines the contract for PDF generation operations.
"""

from abc import ABC, abstractmethod
from typing import List
from invoice_tracker.domain.invoice import Invoice


class PdfService(ABC):
    """
    Service interface for PDF generation

    Provides the printable version of the invoice table.
    """

    @abstractmethod
    def generate_invoice_list(
        self,
        invoices: List[Invoice],
        title: str = "Invoice Generator",
        currency_symbol: str = "$",
    ) -> bytes:
        """
        Generate a PDF listing the given invoices

        Args:
            invoices: Invoices to print, in display order
            title: Heading printed at the top of the page
            currency_symbol: Symbol prefixed to every amount

        Returns:
            PDF document as bytes
        """
        pass
