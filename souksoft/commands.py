"""Operations invoked by the SoukSoft front-end.

The blocking subprocess work runs in a worker thread so callers on an
event loop are never blocked while a print command is running.
"""

import asyncio

from souksoft.config import get_settings
from souksoft.printing import PrinterBackend, get_backend
from souksoft.receipt import ReceiptDispatcher, get_dispatcher
from souksoft.schemas import PrintRequest


def greet(name: str) -> str:
    """Greeting stub used by the front-end to check the native side is wired up."""
    return f"Hello, {name}! You've been greeted from Python!"


async def list_printers(backend: PrinterBackend | None = None) -> list[str]:
    """List the host's printers.

    Args:
        backend: Printer backend (default: backend for the running OS).

    Returns:
        list[str]: Printer names.

    Raises:
        PrinterError: If the host could not be queried.
    """
    if backend is None:
        settings = get_settings()
        backend = get_backend(settings.host_family, settings.command_timeout)
    return await asyncio.to_thread(backend.list_printers)


async def print_receipt(
    request: PrintRequest,
    dispatcher: ReceiptDispatcher | None = None,
) -> None:
    """Print an HTML receipt.

    Args:
        request: Receipt markup and print options.
        dispatcher: Receipt dispatcher (default: built from settings).

    Raises:
        PrinterError: If the receipt could not be printed.
    """
    dispatcher = dispatcher or get_dispatcher()
    await asyncio.to_thread(dispatcher.dispatch, request)
