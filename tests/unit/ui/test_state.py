"""Unit tests for invoice page view state

Tests cover:
- Initial fetch and fetch failure
- Create and update from the form
- Edit, delete confirmation and print
- Server messages shown verbatim, localized fallbacks otherwise
"""

import pytest
from unittest.mock import MagicMock

from invoice_tracker.ui.client import InvoiceApiError
from invoice_tracker.ui.labels import get_labels
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

EN = get_labels("en")
AR = get_labels("ar")

ACME = {"id": 1, "customerName": "Acme", "amount": 250, "dueDate": "2024-01-01", "createdAt": "2024-01-01T10:00:00.000Z"}
GLOBEX = {"id": 2, "customerName": "Globex", "amount": 99.5, "dueDate": "2024-02-01", "createdAt": "2024-01-02T10:00:00.000Z"}


@pytest.fixture
def client():
    """Mock invoice API client"""
    return MagicMock()


@pytest.fixture
def loaded_state():
    return ViewState(invoices=[GLOBEX, ACME], fetch_loading=False)


class TestLoadInvoices:

    def test_load_populates_invoices(self, client):
        client.list_invoices.return_value = [ACME]

        state = load_invoices(client, ViewState(), EN)

        assert state.invoices == [ACME]
        assert state.fetch_loading is False
        assert state.error == ""

    def test_load_failure_sets_localized_message(self, client):
        client.list_invoices.side_effect = InvoiceApiError()

        state = load_invoices(client, ViewState(), AR)

        assert state.invoices == []
        assert state.fetch_loading is False
        assert state.error == AR["fetch_error"]


class TestSubmitForm:

    def test_incomplete_form_is_rejected_locally(self, client, loaded_state):
        """
        Given: Amount left empty
        When: The form is submitted
        Then: No request is sent and the fill-all-fields message shows
        """
        form = InvoiceForm(customer_name="Acme", amount=None, due_date="2024-01-01")

        state, returned_form = submit_form(client, loaded_state, form, EN)

        assert state.error == "Please fill in all fields."
        assert returned_form == form
        client.create_invoice.assert_not_called()

    def test_create_prepends_new_invoice_and_clears_form(self, client, loaded_state):
        created = {**ACME, "id": 3, "customerName": "Initech"}
        client.create_invoice.return_value = created
        form = InvoiceForm(customer_name="Initech", amount=250, due_date="2024-01-01")

        state, returned_form = submit_form(client, loaded_state, form, EN)

        assert state.invoices[0] == created
        assert len(state.invoices) == 3
        assert state.success == "Invoice created successfully."
        assert state.error == ""
        assert returned_form == InvoiceForm()
        client.create_invoice.assert_called_once_with("Initech", 250, "2024-01-01")

    def test_update_replaces_invoice_in_place(self, client, loaded_state):
        updated = {**ACME, "customerName": "Acme Co", "amount": 300}
        client.update_invoice.return_value = updated
        editing = loaded_state.model_copy(update={"editing_id": 1})
        form = InvoiceForm(customer_name="Acme Co", amount=300, due_date="2024-01-01")

        state, _ = submit_form(client, editing, form, EN)

        assert state.invoices == [GLOBEX, updated]
        assert state.editing_id is None
        assert state.success == "Invoice updated successfully."
        client.update_invoice.assert_called_once_with(1, "Acme Co", 300, "2024-01-01")

    def test_server_message_shown_verbatim(self, client, loaded_state):
        client.create_invoice.side_effect = InvoiceApiError("Amount must be a valid number.", 400)
        form = InvoiceForm(customer_name="Acme", amount="x", due_date="2024-01-01")

        state, returned_form = submit_form(client, loaded_state, form, EN)

        assert state.error == "Amount must be a valid number."
        assert returned_form == form
        assert state.invoices == loaded_state.invoices

    def test_fallback_message_without_server_message(self, client, loaded_state):
        client.create_invoice.side_effect = InvoiceApiError(status_code=502)
        form = InvoiceForm(customer_name="Acme", amount=1, due_date="2024-01-01")

        state, _ = submit_form(client, loaded_state, form, AR)

        assert state.error == AR["save_error"]


class TestEditAndDelete:

    def test_start_edit_fills_form(self, loaded_state):
        state, form = start_edit(loaded_state, 1)

        assert state.editing_id == 1
        assert form == InvoiceForm(customer_name="Acme", amount=250, due_date="2024-01-01")

    def test_start_edit_unknown_invoice(self, loaded_state):
        state, form = start_edit(loaded_state, 42)

        assert state == loaded_state
        assert form is None

    def test_request_and_cancel_delete(self, loaded_state):
        pending = request_delete(loaded_state, 2)
        assert pending.pending_delete_id == 2

        cancelled = cancel_delete(pending)
        assert cancelled.pending_delete_id is None
        assert cancelled.invoices == loaded_state.invoices

    def test_confirm_delete_removes_invoice(self, client, loaded_state):
        client.delete_invoice.return_value = GLOBEX
        pending = request_delete(loaded_state, 2)

        state = confirm_delete(client, pending, EN)

        assert state.invoices == [ACME]
        assert state.pending_delete_id is None
        assert state.success == "Invoice deleted successfully."
        client.delete_invoice.assert_called_once_with(2)

    def test_deleting_edited_invoice_leaves_edit_mode(self, client, loaded_state):
        client.delete_invoice.return_value = ACME
        pending = loaded_state.model_copy(update={"editing_id": 1, "pending_delete_id": 1})

        state = confirm_delete(client, pending, EN)

        assert state.editing_id is None

    def test_confirm_delete_failure_keeps_invoice(self, client, loaded_state):
        client.delete_invoice.side_effect = InvoiceApiError("Invoice not found.", 404)
        pending = request_delete(loaded_state, 2)

        state = confirm_delete(client, pending, EN)

        assert state.invoices == loaded_state.invoices
        assert state.error == "Invoice not found."

    def test_confirm_without_pending_does_nothing(self, client, loaded_state):
        state = confirm_delete(client, loaded_state, EN)

        assert state == loaded_state
        client.delete_invoice.assert_not_called()


class TestPrint:

    def test_print_returns_document(self, client, loaded_state):
        client.print_invoices.return_value = b"%PDF-1.4"

        state, document = print_invoices(client, loaded_state, EN)

        assert document == b"%PDF-1.4"
        assert state == loaded_state

    def test_print_failure_sets_message(self, client, loaded_state):
        client.print_invoices.side_effect = InvoiceApiError()

        state, document = print_invoices(client, loaded_state, EN)

        assert document is None
        assert state.error == "Error while printing the invoices."


class TestStoreRoundTrip:

    def test_empty_store_gives_initial_state(self):
        state = ViewState.from_store(None)

        assert state.fetch_loading is True
        assert state.invoices == []

    def test_store_data_restores_state(self, loaded_state):
        assert ViewState.from_store(loaded_state.to_store()) == loaded_state
