"""Unit tests for UpdateInvoice use case

Tests cover:
- Replacing customer, amount and due date
- id and created_at preserved
- Unknown id
- Validation of id and fields
"""

import pytest
from unittest.mock import AsyncMock

from invoice_tracker.app.use_cases.invoices.update_invoice import UpdateInvoice
from invoice_tracker.app.use_cases.invoices.dtos import UpdateInvoiceCommandDTO
from invoice_tracker.app.use_cases.invoices import errors


@pytest.fixture
def update_use_case(mock_invoice_repo):
    """UpdateInvoice use case instance with mocked dependencies"""
    return UpdateInvoice(invoice_repo=mock_invoice_repo)


@pytest.mark.asyncio
class TestUpdateInvoiceSuccess:
    """Test successful invoice update"""

    async def test_update_replaces_fields_and_keeps_identity(
        self, update_use_case, mock_invoice_repo, sample_invoice
    ):
        """
        Given: Stored invoice 1
        When: execute is called with new values
        Then: Fields replaced, id and created_at unchanged
        """
        # Arrange
        created_at = sample_invoice.created_at
        mock_invoice_repo.get_by_id = AsyncMock(return_value=sample_invoice)
        mock_invoice_repo.update = AsyncMock(side_effect=lambda invoice: invoice)
        command = UpdateInvoiceCommandDTO(
            invoice_id=1, customer_name="Acme Co", amount=300, due_date="2024-02-01"
        )

        # Act
        result = await update_use_case.execute(command)

        # Assert
        assert result.is_ok()
        assert result.value.id == 1
        assert result.value.customer_name == "Acme Co"
        assert result.value.amount == 300
        assert result.value.due_date == "2024-02-01"
        assert result.value.created_at == created_at
        mock_invoice_repo.get_by_id.assert_called_once_with(1)
        mock_invoice_repo.update.assert_called_once()

    async def test_string_id_matches_numeric_id(self, update_use_case, mock_invoice_repo, sample_invoice):
        """
        Given: id sent as the string "1"
        When: execute is called
        Then: Invoice 1 is looked up
        """
        # Arrange
        mock_invoice_repo.get_by_id = AsyncMock(return_value=sample_invoice)
        mock_invoice_repo.update = AsyncMock(side_effect=lambda invoice: invoice)
        command = UpdateInvoiceCommandDTO(
            invoice_id="1", customer_name="Acme", amount="275.25", due_date="2024-03-01"
        )

        # Act
        result = await update_use_case.execute(command)

        # Assert
        assert result.is_ok()
        assert result.value.amount == 275.25
        mock_invoice_repo.get_by_id.assert_called_once_with(1)


@pytest.mark.asyncio
class TestUpdateInvoiceFailures:
    """Test update failures"""

    async def test_unknown_id_returns_not_found(self, update_use_case, mock_invoice_repo):
        """
        Given: No invoice with id 999
        When: execute is called
        Then: INVOICE_NOT_FOUND returned, nothing updated
        """
        # Arrange
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)
        mock_invoice_repo.update = AsyncMock()
        command = UpdateInvoiceCommandDTO(
            invoice_id=999, customer_name="Acme", amount=300, due_date="2024-02-01"
        )

        # Act
        result = await update_use_case.execute(command)

        # Assert
        assert result.is_err()
        assert result.error.code == errors.INVOICE_NOT_FOUND
        assert result.error.message == "Invoice not found."
        mock_invoice_repo.update.assert_not_called()

    async def test_missing_id_returns_validation_error(self, update_use_case, mock_invoice_repo):
        """
        Given: No id in the command
        When: execute is called
        Then: VALIDATION_ERROR returned without touching the repository
        """
        # Arrange
        mock_invoice_repo.get_by_id = AsyncMock()
        command = UpdateInvoiceCommandDTO(customer_name="Acme", amount=300, due_date="2024-02-01")

        # Act
        result = await update_use_case.execute(command)

        # Assert
        assert result.is_err()
        assert result.error.code == errors.VALIDATION_ERROR
        assert result.error.message == "All fields are required."
        mock_invoice_repo.get_by_id.assert_not_called()

    @pytest.mark.parametrize("invoice_id", ["abc", -1, 1.5])
    async def test_invalid_id_returns_validation_error(self, update_use_case, mock_invoice_repo, invoice_id):
        """
        Given: id that is not a positive integer
        When: execute is called
        Then: VALIDATION_ERROR returned
        """
        # Arrange
        mock_invoice_repo.get_by_id = AsyncMock()
        command = UpdateInvoiceCommandDTO(
            invoice_id=invoice_id, customer_name="Acme", amount=300, due_date="2024-02-01"
        )

        # Act
        result = await update_use_case.execute(command)

        # Assert
        assert result.is_err()
        assert result.error.code == errors.VALIDATION_ERROR
        assert result.error.message == "Invoice id must be a positive integer."
        mock_invoice_repo.get_by_id.assert_not_called()

    async def test_repository_failure_returns_internal_error(
        self, update_use_case, mock_invoice_repo, sample_invoice
    ):
        """
        Given: Repository raises while saving
        When: execute is called
        Then: INTERNAL_ERROR returned with the update message
        """
        # Arrange
        mock_invoice_repo.get_by_id = AsyncMock(return_value=sample_invoice)
        mock_invoice_repo.update = AsyncMock(side_effect=KeyError(1))
        command = UpdateInvoiceCommandDTO(
            invoice_id=1, customer_name="Acme", amount=300, due_date="2024-02-01"
        )

        # Act
        result = await update_use_case.execute(command)

        # Assert
        assert result.is_err()
        assert result.error.code == errors.INTERNAL_ERROR
        assert result.error.message == "Error while updating the invoice."
