"""
Dash component builders for the invoice page.

Builders are pure: they take labels and data and return component trees,
so they can be rendered for either locale and checked in tests without a
running app.
"""

from typing import Any, Dict, List

from dash import dcc, html

from invoice_tracker.utils.formatting import (
    format_amount,
    format_created_at,
    format_due_date,
    total_amount,
)


def build_header(labels: Dict[str, str], show_print: bool = True) -> html.Header:
    """Page title with the optional print control."""
    children = [html.H1(labels["title"], className="page-title")]
    if show_print:
        children.append(
            html.Button(
                labels["print"],
                id="print-button",
                type="button",
                n_clicks=0,
                className="button button-secondary",
            )
        )
    return html.Header(className="page-header", children=children)


def build_messages(error: str, success: str) -> List[html.Div]:
    """Error and success banners; empty strings render nothing."""
    messages = []
    if error:
        messages.append(html.Div(error, className="alert alert-error", role="alert"))
    if success:
        messages.append(html.Div(success, className="alert alert-success", role="status"))
    return messages


def build_form(labels: Dict[str, str]) -> html.Div:
    """Create/update form. Field values are driven by callbacks."""
    return html.Div(
        className="invoice-form",
        children=[
            _field(
                labels["customer_name"],
                dcc.Input(
                    id="customer-name",
                    type="text",
                    value="",
                    placeholder=labels["customer_name_placeholder"],
                    className="text-input",
                ),
            ),
            _field(
                labels["amount"],
                dcc.Input(
                    id="amount",
                    type="number",
                    value=None,
                    placeholder=labels["amount_placeholder"],
                    className="text-input",
                ),
            ),
            _field(
                labels["due_date"],
                dcc.DatePickerSingle(
                    id="due-date",
                    date=None,
                    display_format="YYYY-MM-DD",
                    clearable=True,
                    is_RTL=labels["dir"] == "rtl",
                ),
            ),
            html.Button(
                labels["create_invoice"],
                id="invoice-submit",
                type="button",
                n_clicks=0,
                className="button button-primary",
            ),
        ],
    )


def _field(label: str, control: Any) -> html.Div:
    return html.Div(
        className="form-field",
        children=[html.Label(label, className="form-label"), control],
    )


def submit_label(labels: Dict[str, str], is_editing: bool) -> str:
    return labels["update_invoice"] if is_editing else labels["create_invoice"]


def build_invoice_table(
    invoices: List[Dict[str, Any]],
    labels: Dict[str, str],
    read_only: bool = False,
    currency_symbol: str = "$",
) -> html.Table:
    """
    Render the invoice table.

    The last column holds Edit/Delete buttons, or a status label when
    ``read_only`` is set. A footer row carries the formatted total.
    """
    last_column = labels["status"] if read_only else labels["actions"]
    header = html.Thead(
        html.Tr(
            [
                html.Th(labels["customer_name"]),
                html.Th(labels["amount"]),
                html.Th(labels["due_date"]),
                html.Th(labels["created_at"]),
                html.Th(last_column),
            ]
        )
    )

    if not invoices:
        body = html.Tbody(
            html.Tr(html.Td(labels["no_invoices"], colSpan=5, className="empty-row"))
        )
    else:
        body = html.Tbody(
            [_invoice_row(invoice, labels, read_only, currency_symbol) for invoice in invoices]
        )

    total = total_amount(invoice.get("amount") for invoice in invoices)
    footer = html.Tfoot(
        html.Tr(
            [
                html.Td(labels["total"], className="total-label"),
                html.Td(format_amount(total, currency_symbol), className="total-amount"),
                html.Td(colSpan=3),
            ]
        )
    )

    return html.Table(className="invoice-table", children=[header, body, footer])


def _invoice_row(
    invoice: Dict[str, Any],
    labels: Dict[str, str],
    read_only: bool,
    currency_symbol: str,
) -> html.Tr:
    invoice_id = invoice.get("id")
    if read_only:
        last_cell = html.Td(
            html.Span(labels["status_pending"], className="status-badge")
        )
    else:
        last_cell = html.Td(
            html.Div(
                className="row-actions",
                children=[
                    html.Button(
                        labels["edit"],
                        id={"type": "edit-invoice", "index": invoice_id},
                        type="button",
                        n_clicks=0,
                        className="button button-small button-edit",
                    ),
                    html.Button(
                        labels["delete"],
                        id={"type": "delete-invoice", "index": invoice_id},
                        type="button",
                        n_clicks=0,
                        className="button button-small button-delete",
                    ),
                ],
            )
        )

    return html.Tr(
        key=str(invoice_id),
        children=[
            html.Td(invoice.get("customerName", "")),
            html.Td(format_amount(invoice.get("amount"), currency_symbol)),
            html.Td(format_due_date(invoice.get("dueDate"))),
            html.Td(format_created_at(invoice.get("createdAt"))),
            last_cell,
        ],
    )


def build_table_section(labels: Dict[str, str]) -> html.Section:
    """Heading with loading indicator, and the container the table renders into."""
    return html.Section(
        className="invoice-section",
        children=[
            html.Div(
                className="section-header",
                children=[
                    html.H2(labels["invoices"]),
                    html.Span(id="loading-indicator", className="muted"),
                ],
            ),
            html.Div(id="invoice-table-container", className="table-wrapper"),
        ],
    )
