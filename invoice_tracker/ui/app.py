"""
Dash application for the invoice page.

create_dash_app wires the layout to the view-state functions in
invoice_tracker.ui.state. All user actions that change view state go
through one callback (handle_action) so the state store has a single
writer; rendering is a separate callback reading that store.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from dash import ALL, Dash, Input, Output, State, ctx, dcc, no_update

from invoice_tracker.ui.client import InvoiceApiClient
from invoice_tracker.ui.components import build_invoice_table, build_messages, submit_label
from invoice_tracker.ui.labels import get_labels, is_read_only, locale_from_path
from invoice_tracker.ui.layout import build_page, build_root_layout
from invoice_tracker.ui.state import (
    InvoiceForm,
    ViewState,
    cancel_delete,
    confirm_delete,
    load_invoices,
    print_invoices,
    request_delete,
    start_edit,
    submit_form,
)

logger = logging.getLogger(__name__)

_ASSETS_PATH = Path(__file__).resolve().parent / "assets"


def handle_action(
    client: InvoiceApiClient,
    triggered_id: Any,
    triggered_value: Any,
    state_data: Optional[Dict[str, Any]],
    locale: Optional[str],
    customer_name: Any,
    amount: Any,
    due_date: Any,
):
    """
    Apply one user action to the view state.

    Returns ``(state_data, customer_name, amount, due_date, confirm_displayed)``
    with ``no_update`` for every output the action leaves alone.
    """
    labels = get_labels(locale)
    state = ViewState.from_store(state_data)
    unchanged = (no_update, no_update, no_update, no_update, no_update)

    # Initial call when the page mounts. Newly rendered row buttons also
    # produce an initial call, so the fetch only runs while still loading.
    if triggered_id is None or triggered_id == "initial-load-trigger":
        if not state.fetch_loading:
            return unchanged
        return load_invoices(client, state, labels).to_store(), no_update, no_update, no_update, no_update

    if triggered_id in ("invoice-submit", "delete-confirm.submit", "delete-confirm.cancel") and not triggered_value:
        return unchanged

    if triggered_id == "invoice-submit":
        form = InvoiceForm(customer_name=customer_name, amount=amount, due_date=due_date)
        next_state, next_form = submit_form(client, state, form, labels)
        return (
            next_state.to_store(),
            next_form.customer_name,
            next_form.amount if next_form.amount != "" else None,
            next_form.due_date or None,
            no_update,
        )

    if triggered_id == "delete-confirm.submit":
        return confirm_delete(client, state, labels).to_store(), no_update, no_update, no_update, no_update

    if triggered_id == "delete-confirm.cancel":
        return cancel_delete(state).to_store(), no_update, no_update, no_update, no_update

    # Row buttons: rendering new rows also fires these with n_clicks == 0
    if isinstance(triggered_id, dict) and triggered_value:
        invoice_id = triggered_id.get("index")
        if triggered_id.get("type") == "edit-invoice":
            next_state, form = start_edit(state, invoice_id)
            if form is None:
                return unchanged
            return next_state.to_store(), form.customer_name, form.amount, form.due_date, no_update
        if triggered_id.get("type") == "delete-invoice":
            next_state = request_delete(state, invoice_id)
            displayed = next_state.pending_delete_id is not None
            return next_state.to_store(), no_update, no_update, no_update, displayed

    return unchanged


def render_view(state_data: Optional[Dict[str, Any]], locale: Optional[str], currency_symbol: str = "$"):
    """Return ``(messages, table, submit_label, loading_text)`` for the current state."""
    labels = get_labels(locale)
    state = ViewState.from_store(state_data)
    table = build_invoice_table(
        state.invoices,
        labels,
        read_only=is_read_only(locale),
        currency_symbol=currency_symbol,
    )
    loading_text = labels["loading_invoices"] if state.fetch_loading else ""
    return (
        build_messages(state.error, state.success),
        table,
        submit_label(labels, state.is_editing),
        loading_text,
    )


def create_dash_app(config, client: Optional[InvoiceApiClient] = None) -> Dash:
    """
    Build the Dash application.

    Args:
        config: Settings object exposing the ApplicationConfig attributes
        client: API client; defaults to one pointed at UI_API_BASE_URL
    """
    client = client or InvoiceApiClient.from_config(config)
    currency_symbol = config.CURRENCY_SYMBOL

    app = Dash(
        __name__,
        title=get_labels("en")["title"],
        assets_folder=str(_ASSETS_PATH),
        # Page content is rendered per path, so callback targets appear later
        suppress_callback_exceptions=True,
    )
    app.layout = build_root_layout()

    @app.callback(Output("page-container", "children"), Input("url", "pathname"))
    def render_page(pathname: Optional[str]):
        return build_page(locale_from_path(pathname))

    @app.callback(
        Output("view-state", "data"),
        Output("customer-name", "value"),
        Output("amount", "value"),
        Output("due-date", "date"),
        Output("delete-confirm", "displayed"),
        Input("initial-load-trigger", "data"),
        Input("invoice-submit", "n_clicks"),
        Input({"type": "edit-invoice", "index": ALL}, "n_clicks"),
        Input({"type": "delete-invoice", "index": ALL}, "n_clicks"),
        Input("delete-confirm", "submit_n_clicks"),
        Input("delete-confirm", "cancel_n_clicks"),
        State("view-state", "data"),
        State("locale", "data"),
        State("customer-name", "value"),
        State("amount", "value"),
        State("due-date", "date"),
        running=[(Output("invoice-submit", "disabled"), True, False)],
    )
    def on_action(
        _load, _submit, _edits, _deletes, _confirm, _cancel,
        state_data, locale, customer_name, amount, due_date,
    ):
        triggered_id = ctx.triggered_id
        triggered_value = ctx.triggered[0]["value"] if ctx.triggered else None
        if triggered_id == "delete-confirm":
            prop = ctx.triggered[0]["prop_id"].split(".")[-1]
            triggered_id = "delete-confirm.submit" if prop == "submit_n_clicks" else "delete-confirm.cancel"
        return handle_action(
            client, triggered_id, triggered_value, state_data, locale,
            customer_name, amount, due_date,
        )

    @app.callback(
        Output("messages", "children"),
        Output("invoice-table-container", "children"),
        Output("invoice-submit", "children"),
        Output("loading-indicator", "children"),
        Input("view-state", "data"),
        State("locale", "data"),
    )
    def on_state_change(state_data, locale):
        return render_view(state_data, locale, currency_symbol)

    @app.callback(
        Output("print-download", "data"),
        Output("view-state", "data", allow_duplicate=True),
        Input("print-button", "n_clicks"),
        State("view-state", "data"),
        State("locale", "data"),
        prevent_initial_call=True,
    )
    def on_print(n_clicks, state_data, locale):
        if not n_clicks:
            return no_update, no_update
        state, pdf_bytes = print_invoices(client, ViewState.from_store(state_data), get_labels(locale))
        if pdf_bytes is None:
            return no_update, state.to_store()
        return dcc.send_bytes(pdf_bytes, "invoices.pdf"), no_update

    logger.info(f"Invoice UI ready, API at {config.UI_API_BASE_URL}")
    return app
