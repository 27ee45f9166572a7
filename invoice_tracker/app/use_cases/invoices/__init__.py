"""Invoice use cases"""
from .list_invoices import ListInvoices
from .create_invoice import CreateInvoice
from .update_invoice import UpdateInvoice
from .delete_invoice import DeleteInvoice
from .print_invoices import PrintInvoices
from .dtos import (
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    DeleteInvoiceCommandDTO,
    InvoiceResponseDTO,
    InvoicePrintoutDTO,
)

__all__ = [
    "ListInvoices",
    "CreateInvoice",
    "UpdateInvoice",
    "DeleteInvoice",
    "PrintInvoices",
    "CreateInvoiceCommandDTO",
    "UpdateInvoiceCommandDTO",
    "DeleteInvoiceCommandDTO",
    "InvoiceResponseDTO",
    "InvoicePrintoutDTO",
]
