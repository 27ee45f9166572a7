"""
HTTP client for the invoice API used by the Dash UI.

Wraps an ``httpx.Client`` pointed at the API server. Every call returns the
decoded JSON body on success and raises InvoiceApiError otherwise, carrying
the server's ``message`` when the response had one.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)


class InvoiceApiError(Exception):
    """A request to the invoice API failed."""

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message or "Invoice API request failed")
        self.message = message
        self.status_code = status_code


class InvoiceApiClient:
    """
    Client for the ``/api/invoices`` endpoints.

    Args:
        http: Configured httpx client (base URL, timeout). FastAPI's
            TestClient is an httpx client and can be passed directly.
        path: Path of the invoice collection relative to the base URL.
    """

    def __init__(self, http: httpx.Client, path: str = "/api/invoices") -> None:
        self.http = http
        self.path = path

    @classmethod
    def from_config(cls, config) -> "InvoiceApiClient":
        http = httpx.Client(
            base_url=config.UI_API_BASE_URL,
            timeout=config.UI_REQUEST_TIMEOUT,
        )
        return cls(http, path=f"{config.API_PREFIX}/invoices")

    def list_invoices(self) -> List[Dict[str, Any]]:
        return self._send_json("GET")

    def create_invoice(self, customer_name: Any, amount: Any, due_date: Any) -> Dict[str, Any]:
        payload = {"customerName": customer_name, "amount": amount, "dueDate": due_date}
        return self._send_json("POST", payload)

    def update_invoice(
        self, invoice_id: int, customer_name: Any, amount: Any, due_date: Any
    ) -> Dict[str, Any]:
        payload = {
            "id": invoice_id,
            "customerName": customer_name,
            "amount": amount,
            "dueDate": due_date,
        }
        return self._send_json("PUT", payload)

    def delete_invoice(self, invoice_id: int) -> Dict[str, Any]:
        return self._send_json("DELETE", {"id": invoice_id})

    def print_invoices(self) -> bytes:
        """Return the PDF printout of the invoice table."""
        return self._send("GET", path=f"{self.path}/print").content

    def _send_json(self, method: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        response = self._send(method, payload)
        try:
            return response.json()
        except ValueError as exc:
            logger.error("%s %s returned a non-JSON body", method, self.path)
            raise InvoiceApiError(status_code=response.status_code) from exc

    def _send(
        self, method: str, payload: Optional[Dict[str, Any]] = None, path: Optional[str] = None
    ) -> httpx.Response:
        url = path or self.path
        try:
            # httpx.Client.delete() takes no body, so every verb goes through request()
            response = self.http.request(method, url, json=payload)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise InvoiceApiError() from exc

        if response.is_error:
            message = _error_message(response)
            logger.warning("%s %s -> %s %s", method, url, response.status_code, message)
            raise InvoiceApiError(message, status_code=response.status_code)
        return response


def _error_message(response: httpx.Response) -> Optional[str]:
    """The ``message`` field of an error body, if the body has one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"] or None
    return None
