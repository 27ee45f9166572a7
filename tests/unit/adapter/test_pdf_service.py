"""Unit tests for ReportLabPdfService"""

from datetime import datetime, timezone

from invoice_tracker.adapter.services.pdf_service import ReportLabPdfService
from invoice_tracker.domain.invoice import Invoice


class TestReportLabPdfService:

    def test_generates_pdf_for_invoices(self):
        """Test a PDF document is produced for a populated table"""
        invoices = [
            Invoice(
                id=1,
                customer_name="Acme & <Sons>",
                amount=250,
                due_date="2024-01-01",
                created_at=datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc),
            ),
            Invoice(id=2, customer_name="Globex", amount=99.5, due_date="2024-02-01"),
        ]

        pdf_bytes = ReportLabPdfService().generate_invoice_list(invoices, title="Acme Billing")

        assert pdf_bytes.startswith(b"%PDF")
        assert len(pdf_bytes) > 0

    def test_generates_pdf_for_empty_table(self):
        """Test an empty invoice list still renders"""
        pdf_bytes = ReportLabPdfService().generate_invoice_list([])

        assert pdf_bytes.startswith(b"%PDF")
