"""ReportLab PDF Generation Service Implementation

Implements PDF generation using ReportLab library.
"""

from io import BytesIO
from typing import List

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from invoice_tracker.app.services.pdf_service import PdfService
from invoice_tracker.domain.invoice import Invoice, utc_now
from invoice_tracker.utils.formatting import format_amount, format_due_date, total_amount


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Prints the invoice table on A4: a heading, one row per invoice and a
    total row.
    """

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
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title=title,
        )

        styles = getSampleStyleSheet()
        elements = []

        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=22,
            spaceAfter=6,
            textColor=colors.HexColor("#1F2937"),
        )
        header_style = ParagraphStyle(
            "HeaderStyle",
            parent=styles["Normal"],
            fontSize=9,
            textColor=colors.HexColor("#6B7280"),
        )
        cell_style = ParagraphStyle(
            "CellStyle",
            parent=styles["Normal"],
            fontSize=9,
        )

        # Header
        elements.append(Paragraph(_escape(title), title_style))
        elements.append(
            Paragraph(
                f"Printed {utc_now().strftime('%Y-%m-%d %H:%M:%S UTC')} - "
                f"{len(invoices)} invoice(s)",
                header_style,
            )
        )
        elements.append(Spacer(1, 8 * mm))

        # Invoice table
        table_data = [["Customer Name", "Amount", "Due Date", "Created At"]]
        if invoices:
            for invoice in invoices:
                table_data.append(
                    [
                        Paragraph(_escape(invoice.customer_name), cell_style),
                        format_amount(invoice.amount, currency_symbol),
                        format_due_date(invoice.due_date),
                        invoice.created_at.strftime("%Y-%m-%d %H:%M:%S"),
                    ]
                )
        else:
            table_data.append(["No invoices yet.", "", "", ""])

        total = total_amount(invoice.amount for invoice in invoices)
        table_data.append(["Total", format_amount(total, currency_symbol), "", ""])

        invoice_table = Table(
            table_data, colWidths=[65 * mm, 30 * mm, 30 * mm, 45 * mm], repeatRows=1
        )
        invoice_table.setStyle(
            TableStyle(
                [
                    # Header row
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#F3F4F6")),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 9),
                    # Amount column
                    ("ALIGN", (1, 1), (1, -1), "RIGHT"),
                    # Total row
                    ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
                    ("LINEABOVE", (0, -1), (-1, -1), 1.2, colors.HexColor("#1F2937")),
                    # Grid
                    ("GRID", (0, 0), (-1, -2), 0.5, colors.HexColor("#D1D5DB")),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
                    ("TOPPADDING", (0, 0), (-1, -1), 5),
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -2),
                        [colors.white, colors.HexColor("#F9FAFB")],
                    ),
                ]
            )
        )
        elements.append(invoice_table)

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes


def _escape(text: str) -> str:
    # Paragraph parses a small XML markup language
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
