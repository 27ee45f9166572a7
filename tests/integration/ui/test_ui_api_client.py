"""Integration tests for the UI's API client against the real application"""

import pytest

from invoice_tracker.ui.client import InvoiceApiClient, InvoiceApiError
from invoice_tracker.ui.labels import get_labels
from invoice_tracker.ui.state import InvoiceForm, ViewState, confirm_delete, load_invoices, request_delete, submit_form

EN = get_labels("en")


@pytest.fixture
def api(sync_client):
    return InvoiceApiClient(sync_client)


class TestInvoiceApiClient:

    def test_crud_cycle(self, api):
        """Create, update, list and delete through the client"""
        created = api.create_invoice("Acme", "250", "2024-01-01")
        assert created["id"] == 1
        assert created["amount"] == 250

        updated = api.update_invoice(1, "Acme Co", 300, "2024-02-01")
        assert updated["customerName"] == "Acme Co"
        assert updated["createdAt"] == created["createdAt"]

        assert api.list_invoices() == [updated]

        deleted = api.delete_invoice(1)
        assert deleted == updated
        assert api.list_invoices() == []

    def test_error_message_from_server(self, api):
        """Failed requests raise with the server's message and status"""
        with pytest.raises(InvoiceApiError) as exc_info:
            api.delete_invoice(999)

        assert exc_info.value.message == "Invoice not found."
        assert exc_info.value.status_code == 404

    def test_validation_error_from_server(self, api):
        with pytest.raises(InvoiceApiError) as exc_info:
            api.create_invoice("Acme", "abc", "2024-01-01")

        assert exc_info.value.message == "Amount must be a valid number."
        assert exc_info.value.status_code == 400

    def test_print_returns_pdf_bytes(self, api):
        api.create_invoice("Acme", 250, "2024-01-01")

        assert api.print_invoices().startswith(b"%PDF")


class TestPageFlow:

    def test_create_then_delete_from_the_page(self, api):
        """The page state follows the server through a create and a delete"""
        state = load_invoices(api, ViewState(), EN)
        assert state.invoices == []

        state, form = submit_form(
            api, state, InvoiceForm(customer_name="Acme", amount=250, due_date="2024-01-01"), EN
        )
        assert state.success == "Invoice created successfully."
        assert form == InvoiceForm()
        assert [invoice["customerName"] for invoice in state.invoices] == ["Acme"]

        state = confirm_delete(api, request_delete(state, 1), EN)
        assert state.invoices == []
        assert load_invoices(api, ViewState(), EN).invoices == []

    def test_server_validation_message_reaches_the_page(self, api):
        state = ViewState(fetch_loading=False)

        state, _ = submit_form(
            api, state, InvoiceForm(customer_name="Acme", amount="abc", due_date="2024-01-01"), EN
        )

        assert state.error == "Amount must be a valid number."
