"""Command-line interface for the SoukSoft print bridge."""

import asyncio
import logging
import sys

import click
from pydantic import ValidationError

from souksoft import __version__, commands
from souksoft.config import get_settings
from souksoft.printing import PrinterError, detect_host_family, get_backend
from souksoft.receipt import get_dispatcher
from souksoft.schemas import PrintRequest

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Set up logging configuration.

    Args:
        level: Log level string.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(verbose: bool):
    """SoukSoft print bridge.

    Lists the printers installed on this machine and prints HTML
    receipts through the operating system's print tools.
    """
    settings = get_settings()
    setup_logging("DEBUG" if verbose else settings.log_level)


@main.command()
@click.argument("name")
def greet(name: str):
    """Print the greeting the front-end receives."""
    click.echo(commands.greet(name))


@main.command()
def printers():
    """List available printers."""
    settings = get_settings()
    backend = get_backend(settings.host_family, settings.command_timeout)

    try:
        names = asyncio.run(commands.list_printers(backend))
    except PrinterError as e:
        logger.warning(f"Listing printers failed: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not names:
        click.echo("No printers found.")
        return

    for name in names:
        marker = "* " if name == settings.default_printer else "  "
        click.echo(f"{marker}{name}")

    if settings.default_printer:
        click.echo("\n(* = configured default printer)")


@main.command("print")
@click.argument("receipt", type=click.File("r", encoding="utf-8"))
@click.option("--paper-width", "-w", type=click.IntRange(min=1), help="Paper width in mm")
@click.option("--printer", "-p", help="Printer name (default: configured or system default)")
def print_command(receipt, paper_width: int | None, printer: str | None):
    """Print an HTML receipt file (use - to read from stdin)."""
    settings = get_settings()

    try:
        request = PrintRequest(
            html_content=receipt.read(),
            paper_width_mm=paper_width,
            printer_name=printer or settings.default_printer,
        )
    except ValidationError as e:
        click.echo(f"Error: invalid receipt: {e.errors()[0]['msg']}", err=True)
        sys.exit(1)

    try:
        asyncio.run(commands.print_receipt(request, get_dispatcher(settings)))
    except PrinterError as e:
        logger.warning(f"Printing receipt failed: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Receipt sent to {request.printer_name or 'default printer'}.")


@main.command()
@click.option("--host", help="Bind address (default: from settings)")
@click.option("--port", type=int, help="Port (default: from settings)")
def serve(host: str | None, port: int | None):
    """Run the local bridge for the web-view front-end.

    Press Ctrl+C to stop.
    """
    import uvicorn

    from souksoft.bridge import create_app

    settings = get_settings()
    host = host or settings.bridge_host
    port = port or settings.bridge_port

    click.echo(f"Starting print bridge on http://{host}:{port} (Ctrl+C to stop)")
    uvicorn.run(create_app(settings), host=host, port=port, log_level=settings.log_level.lower())


@main.command()
def info():
    """Show effective settings and detected host."""
    settings = get_settings()
    backend = get_backend(settings.host_family, settings.command_timeout)

    click.echo("\n=== SoukSoft Print Bridge ===\n")
    click.echo(f"Version: {__version__}")
    click.echo(f"Detected host: {detect_host_family()}")
    click.echo(f"Backend: {backend.host_family} ({type(backend).__name__})")
    click.echo(f"Default printer: {settings.default_printer or '(system default)'}")
    click.echo(f"Paper width: {settings.paper_width_mm}mm")
    click.echo(f"Receipt files: {'unique per job' if settings.unique_receipt_files else 'fixed'}")
    click.echo(f"Temp dir: {settings.temp_dir or '(system temp)'}")
    click.echo(f"Command timeout: {settings.command_timeout or 'none'}")
    click.echo(f"Bridge: http://{settings.bridge_host}:{settings.bridge_port}")


if __name__ == "__main__":
    main()
