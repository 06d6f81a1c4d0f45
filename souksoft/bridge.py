"""Local HTTP bridge between the SoukSoft web-view and the print operations."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

from souksoft import __version__, commands
from souksoft.config import Settings, get_settings
from souksoft.printing import PrinterBackend, PrinterError, get_backend
from souksoft.receipt import ReceiptDispatcher, get_dispatcher
from souksoft.schemas import (
    GreetRequest,
    GreetResponse,
    HealthResponse,
    PrinterListResponse,
    PrintRequest,
    PrintResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_printer_backend(
    settings: Annotated[Settings, Depends(get_settings)],
) -> PrinterBackend:
    """Get printer backend dependency."""
    return get_backend(settings.host_family, settings.command_timeout)


def get_receipt_dispatcher(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ReceiptDispatcher:
    """Get receipt dispatcher dependency."""
    return get_dispatcher(settings)


@router.get("/health", response_model=HealthResponse)
async def health(backend: Annotated[PrinterBackend, Depends(get_printer_backend)]):
    """Report that the bridge is up and which backend it uses."""
    return HealthResponse(version=__version__, host_family=backend.host_family)


@router.post("/greet", response_model=GreetResponse)
async def greet(data: GreetRequest):
    """Greeting stub."""
    return GreetResponse(message=commands.greet(data.name))


@router.get("/printers", response_model=PrinterListResponse)
async def list_printers(backend: Annotated[PrinterBackend, Depends(get_printer_backend)]):
    """List printers installed on the host.

    Raises:
        HTTPException: 502 with the OS error text if the query failed.
    """
    try:
        printers = await commands.list_printers(backend)
    except PrinterError as e:
        logger.warning(f"Listing printers failed: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e
    return PrinterListResponse(printers=printers)


@router.post("/print", response_model=PrintResponse)
async def print_receipt(
    data: PrintRequest,
    dispatcher: Annotated[ReceiptDispatcher, Depends(get_receipt_dispatcher)],
):
    """Print an HTML receipt.

    Raises:
        HTTPException: 502 with the error text if printing failed.
    """
    try:
        await commands.print_receipt(data, dispatcher)
    except PrinterError as e:
        logger.warning(f"Printing receipt failed: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e
    return PrintResponse()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the bridge application.

    Args:
        settings: Settings to use (default: cached settings).

    Returns:
        FastAPI: Configured application.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=f"{settings.app_name} print bridge",
        description="Printer discovery and receipt printing for the SoukSoft desktop shell",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api", tags=["printing"])
    app.dependency_overrides[get_settings] = lambda: settings

    return app
