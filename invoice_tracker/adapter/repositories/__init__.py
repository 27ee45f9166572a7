from .invoice_repository import InMemoryInvoiceRepository

__all__ = [
    "InMemoryInvoiceRepository",
]
