from fastapi import Request
from invoice_tracker.app.repositories.invoice_repository import InvoiceRepository
from invoice_tracker.app.services.pdf_service import PdfService
from invoice_tracker.adapter.services.pdf_service import ReportLabPdfService


def get_invoice_repository(request: Request) -> InvoiceRepository:
    """The store owned by the running application (see create_app)."""
    return request.app.state.invoice_repository


def get_pdf_service() -> PdfService:
    return ReportLabPdfService()


def get_config(request: Request):
    return request.app.state.config
