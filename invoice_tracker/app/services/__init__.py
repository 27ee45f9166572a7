from .pdf_service import PdfService

__all__ = [
    "PdfService",
]
