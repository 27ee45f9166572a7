"""FastAPI application factory"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from invoice_tracker import __version__
from invoice_tracker.adapter.repositories.invoice_repository import InMemoryInvoiceRepository
from invoice_tracker.api.error import ClientError, client_error_handler, unhandled_error_handler
from invoice_tracker.api.middleware import LoggingMiddleware
from invoice_tracker.api.routes import invoices

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(config) -> FastAPI:
    """
    Build the API application.

    Each call creates its own invoice store, so two applications (or two
    tests) never share invoices.

    Args:
        config: Settings object exposing the ApplicationConfig attributes
    """
    configure_logging(config.LOG_LEVEL)

    app = FastAPI(
        title="Invoice Tracker API",
        description="Track customer invoices: list, create, update and delete",
        version=__version__,
    )

    app.state.config = config
    app.state.invoice_repository = InMemoryInvoiceRepository(start_id=config.INVOICE_ID_START)

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(invoices.router, prefix=config.API_PREFIX)

    logger.info(f"Invoice Tracker API {__version__} ready under {config.API_PREFIX}")
    return app
