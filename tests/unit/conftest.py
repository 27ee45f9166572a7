import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock

from invoice_tracker.domain.invoice import Invoice


@pytest.fixture
def mock_invoice_repo():
    """Mock invoice repository"""
    return MagicMock()


@pytest.fixture
def sample_invoice():
    """Stored invoice with a fixed creation time"""
    return Invoice(
        id=1,
        customer_name="Acme",
        amount=250,
        due_date="2024-01-01",
        created_at=datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc),
    )
