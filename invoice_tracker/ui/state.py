"""
View state for the invoice page.

ViewState is what the page remembers between callbacks (kept in a
``dcc.Store`` as a plain dict). The functions below are the page's
behaviour: each takes the current state plus user input, talks to the API
when needed, and returns the next state. They never raise on a failed
request; the failure becomes a message in ``ViewState.error``.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from invoice_tracker.ui.client import InvoiceApiClient, InvoiceApiError
from invoice_tracker.utils.formatting import format_due_date

logger = logging.getLogger(__name__)


class ViewState(BaseModel):
    """State of the invoice page between callbacks."""

    invoices: List[Dict[str, Any]] = Field(default_factory=list)
    editing_id: Optional[int] = None
    pending_delete_id: Optional[int] = None
    fetch_loading: bool = True
    error: str = ""
    success: str = ""

    @classmethod
    def from_store(cls, data: Optional[Dict[str, Any]]) -> "ViewState":
        return cls.model_validate(data) if data else cls()

    def to_store(self) -> Dict[str, Any]:
        return self.model_dump()

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def find(self, invoice_id: Any) -> Optional[Dict[str, Any]]:
        return next((inv for inv in self.invoices if inv.get("id") == invoice_id), None)

    def with_messages(self, error: str = "", success: str = "") -> "ViewState":
        return self.model_copy(update={"error": error, "success": success})


class InvoiceForm(BaseModel):
    """Values of the create/update form inputs."""

    customer_name: Any = ""
    amount: Any = ""
    due_date: Any = ""

    def is_incomplete(self) -> bool:
        return any(_is_blank(value) for value in (self.customer_name, self.amount, self.due_date))


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def load_invoices(
    client: InvoiceApiClient, state: ViewState, labels: Dict[str, str]
) -> ViewState:
    """Fetch the whole collection; used once when the page is first shown."""
    try:
        invoices = client.list_invoices()
    except InvoiceApiError:
        logger.exception("Fetching invoices failed")
        return state.model_copy(update={"fetch_loading": False, "error": labels["fetch_error"]})

    return state.model_copy(update={"invoices": invoices, "fetch_loading": False, "error": ""})


def submit_form(
    client: InvoiceApiClient,
    state: ViewState,
    form: InvoiceForm,
    labels: Dict[str, str],
) -> Tuple[ViewState, InvoiceForm]:
    """
    Create or update an invoice from the form.

    Returns the next state and the form values to show: an empty form on
    success, the submitted values otherwise.
    """
    state = state.with_messages()

    if form.is_incomplete():
        return state.with_messages(error=labels["fill_all_fields"]), form

    try:
        if state.is_editing:
            saved = client.update_invoice(
                state.editing_id, form.customer_name, form.amount, form.due_date
            )
        else:
            saved = client.create_invoice(form.customer_name, form.amount, form.due_date)
    except InvoiceApiError as exc:
        return state.with_messages(error=exc.message or labels["save_error"]), form

    if state.is_editing:
        invoices = [saved if inv.get("id") == saved.get("id") else inv for inv in state.invoices]
        success = labels["updated"]
    else:
        invoices = [saved, *state.invoices]
        success = labels["created"]

    next_state = state.model_copy(
        update={"invoices": invoices, "editing_id": None, "success": success}
    )
    return next_state, InvoiceForm()


def start_edit(state: ViewState, invoice_id: Any) -> Tuple[ViewState, Optional[InvoiceForm]]:
    """Fill the form from an invoice and switch to editing mode. Sends nothing."""
    invoice = state.find(invoice_id)
    if invoice is None:
        return state, None

    form = InvoiceForm(
        customer_name=invoice.get("customerName", ""),
        amount=invoice.get("amount", ""),
        due_date=format_due_date(invoice.get("dueDate")),
    )
    next_state = state.with_messages().model_copy(update={"editing_id": invoice["id"]})
    return next_state, form


def request_delete(state: ViewState, invoice_id: Any) -> ViewState:
    """Remember which invoice to delete while the confirmation dialog is open."""
    if state.find(invoice_id) is None:
        return state
    return state.model_copy(update={"pending_delete_id": invoice_id})


def cancel_delete(state: ViewState) -> ViewState:
    return state.model_copy(update={"pending_delete_id": None})


def confirm_delete(
    client: InvoiceApiClient, state: ViewState, labels: Dict[str, str]
) -> ViewState:
    """Delete the invoice awaiting confirmation."""
    invoice_id = state.pending_delete_id
    if invoice_id is None:
        return state

    state = state.with_messages().model_copy(update={"pending_delete_id": None})
    try:
        client.delete_invoice(invoice_id)
    except InvoiceApiError as exc:
        return state.with_messages(error=exc.message or labels["delete_error"])

    invoices = [inv for inv in state.invoices if inv.get("id") != invoice_id]
    update = {"invoices": invoices, "success": labels["deleted"]}
    if state.editing_id == invoice_id:
        update["editing_id"] = None
    return state.model_copy(update=update)


def print_invoices(
    client: InvoiceApiClient, state: ViewState, labels: Dict[str, str]
) -> Tuple[ViewState, Optional[bytes]]:
    """Fetch the PDF printout; returns None for the document on failure."""
    try:
        return state, client.print_invoices()
    except InvoiceApiError as exc:
        return state.with_messages(error=exc.message or labels["print_error"]), None
