"""
Layout helpers for the invoice Dash application.

The root layout only tracks the URL; the page itself is built by
build_page for the locale the path selects (``/`` English, ``/ar`` Arabic).
"""

from dash import dcc, html

from invoice_tracker.ui.components import build_form, build_header, build_table_section
from invoice_tracker.ui.labels import get_labels, is_read_only, resolve_locale
from invoice_tracker.ui.state import ViewState


def build_root_layout() -> html.Div:
    return html.Div(
        children=[
            dcc.Location(id="url", refresh=False),
            html.Div(id="page-container"),
        ]
    )


def build_page(locale: str = "en") -> html.Div:
    """
    Build the invoice page for a locale.

    Includes the stores holding view state, the delete confirmation dialog,
    the download target used by the print control, the form and the table
    section. The table renders once the initial fetch (triggered by
    initial-load-trigger) completes.
    """
    locale = resolve_locale(locale)
    labels = get_labels(locale)
    read_only = is_read_only(locale)

    return html.Div(
        className="app-shell",
        dir=labels["dir"],
        lang=locale,
        children=[
            # Serialized ViewState
            dcc.Store(id="view-state", data=ViewState().to_store()),
            # Locale of the rendered page
            dcc.Store(id="locale", data=locale),
            # Fires the initial fetch when the page mounts
            dcc.Store(id="initial-load-trigger", data=1),
            dcc.ConfirmDialog(id="delete-confirm", message=labels["confirm_delete"]),
            dcc.Download(id="print-download"),
            html.Div(
                className="app-container",
                children=[
                    build_header(labels, show_print=not read_only),
                    html.Div(id="messages"),
                    build_form(labels),
                    build_table_section(labels),
                ],
            ),
        ],
    )
