"""Invoice API Routes

FastAPI routes for listing, creating, updating, deleting and printing
invoices.
"""

import logging
from typing import List, Type, TypeVar
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import Response
from pydantic import BaseModel

from invoice_tracker.api.error import ClientError
from invoice_tracker.api.schemas.invoice_request import (
    CreateInvoiceRequestSchema,
    UpdateInvoiceRequestSchema,
    DeleteInvoiceRequestSchema,
)
from invoice_tracker.app.repositories.invoice_repository import InvoiceRepository
from invoice_tracker.app.result import Error, Result
from invoice_tracker.app.services.pdf_service import PdfService
from invoice_tracker.app.use_cases.invoices import (
    ListInvoices,
    CreateInvoice,
    UpdateInvoice,
    DeleteInvoice,
    PrintInvoices,
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    DeleteInvoiceCommandDTO,
    InvoiceResponseDTO,
)
from invoice_tracker.app.use_cases.invoices import errors
from invoice_tracker.depends import get_config, get_invoice_repository, get_pdf_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/invoices", tags=["Invoices"])

SchemaT = TypeVar("SchemaT", bound=BaseModel)

_STATUS_BY_CODE = {
    errors.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    errors.INVOICE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    errors.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_ERROR_EXAMPLES = {
    400: {
        "description": "Missing or invalid field",
        "content": {"application/json": {"example": {"message": errors.ALL_FIELDS_REQUIRED}}},
    },
    404: {
        "description": "Invoice not found",
        "content": {"application/json": {"example": {"message": errors.INVOICE_NOT_FOUND_MESSAGE}}},
    },
    500: {
        "description": "Request body could not be processed",
        "content": {"application/json": {"example": {"message": errors.UPDATE_FAILED}}},
    },
}


async def read_payload(request: Request, schema: Type[SchemaT], failure_message: str) -> SchemaT:
    """
    Parse the JSON request body into the given schema.

    A body that is not JSON, or not a JSON object, cannot be handled at all
    and is reported as an internal error with the operation's message.
    """
    try:
        body = await request.json()
        return schema.model_validate(body)
    except ValueError as e:
        logger.exception(f"Unreadable request body for {request.method} {request.url.path}")
        raise ClientError(
            Error(code=errors.INTERNAL_ERROR, message=failure_message, reason=str(e)),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def unwrap(result: Result):
    """Return the value of a successful result or raise the matching ClientError."""
    if result.is_err():
        status_code = _STATUS_BY_CODE.get(
            result.error.code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        raise ClientError(result.error, status_code=status_code)
    return result.value


@router.get(
    "",
    response_model=List[InvoiceResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def list_invoices(
    invoice_repo: InvoiceRepository = Depends(get_invoice_repository),
):
    """
    List all invoices in insertion order.

    **Returns:**
    - 200: Array of invoices (possibly empty)
    """
    use_case = ListInvoices(invoice_repo)
    return unwrap(await use_case.execute())


@router.post(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={400: _ERROR_EXAMPLES[400], 500: _ERROR_EXAMPLES[500]},
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {
                    "schema": CreateInvoiceRequestSchema.model_json_schema(by_alias=True)
                }
            },
        }
    },
)
async def create_invoice(
    request: Request,
    invoice_repo: InvoiceRepository = Depends(get_invoice_repository),
):
    """
    Create an invoice.

    **Request body:**
    - `customerName` (required): Customer name
    - `amount` (required): Amount, number or numeric string
    - `dueDate` (required): Due date, e.g. `2024-01-01`

    **Example request:**
    ```json
    {"customerName": "Acme", "amount": "250", "dueDate": "2024-01-01"}
    ```

    **Returns:**
    - 201: Invoice created, with assigned `id` and `createdAt`
    - 400: A field is missing or invalid
    - 500: Request body could not be read
    """
    payload = await read_payload(request, CreateInvoiceRequestSchema, errors.CREATE_FAILED)

    command = CreateInvoiceCommandDTO(
        customer_name=payload.customer_name,
        amount=payload.amount,
        due_date=payload.due_date,
    )

    use_case = CreateInvoice(invoice_repo)
    return unwrap(await use_case.execute(command))


@router.put(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=_ERROR_EXAMPLES,
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {
                    "schema": UpdateInvoiceRequestSchema.model_json_schema(by_alias=True)
                }
            },
        }
    },
)
async def update_invoice(
    request: Request,
    invoice_repo: InvoiceRepository = Depends(get_invoice_repository),
):
    """
    Replace the customer, amount and due date of an invoice.

    **Request body:**
    - `id` (required): Invoice ID
    - `customerName`, `amount`, `dueDate` (required): New values

    **Returns:**
    - 200: Updated invoice (`id` and `createdAt` unchanged)
    - 400: A field is missing or invalid
    - 404: No invoice with that ID
    - 500: Request body could not be read
    """
    payload = await read_payload(request, UpdateInvoiceRequestSchema, errors.UPDATE_FAILED)

    command = UpdateInvoiceCommandDTO(
        invoice_id=payload.id,
        customer_name=payload.customer_name,
        amount=payload.amount,
        due_date=payload.due_date,
    )

    use_case = UpdateInvoice(invoice_repo)
    return unwrap(await use_case.execute(command))


@router.delete(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        400: {
            "description": "Missing or invalid id",
            "content": {"application/json": {"example": {"message": errors.ID_REQUIRED}}},
        },
        404: _ERROR_EXAMPLES[404],
        500: _ERROR_EXAMPLES[500],
    },
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {
                    "schema": DeleteInvoiceRequestSchema.model_json_schema(by_alias=True)
                }
            },
        }
    },
)
async def delete_invoice(
    request: Request,
    invoice_repo: InvoiceRepository = Depends(get_invoice_repository),
):
    """
    Delete an invoice.

    **Request body:**
    - `id` (required): Invoice ID

    **Returns:**
    - 200: The invoice as it was before deletion
    - 400: `id` is missing or invalid
    - 404: No invoice with that ID
    - 500: Request body could not be read
    """
    payload = await read_payload(request, DeleteInvoiceRequestSchema, errors.DELETE_FAILED)

    use_case = DeleteInvoice(invoice_repo)
    return unwrap(await use_case.execute(DeleteInvoiceCommandDTO(invoice_id=payload.id)))


@router.get(
    "/print",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
    },
)
async def print_invoices(
    invoice_repo: InvoiceRepository = Depends(get_invoice_repository),
    pdf_service: PdfService = Depends(get_pdf_service),
    config=Depends(get_config),
):
    """
    Download the invoice table as a PDF file.

    **Returns:**
    - 200: PDF file as binary response
    - 500: PDF could not be rendered
    """
    use_case = PrintInvoices(
        invoice_repo,
        pdf_service,
        title=config.PDF_COMPANY_NAME,
        currency_symbol=config.CURRENCY_SYMBOL,
    )
    printout = unwrap(await use_case.execute())

    return Response(
        content=printout.pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename={printout.filename}"
        }
    )
