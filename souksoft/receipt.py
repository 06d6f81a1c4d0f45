"""Receipt dispatch: write the receipt HTML to disk and hand it to the spooler."""

import logging
import tempfile
import threading
from pathlib import Path

from souksoft.config import Settings, get_settings
from souksoft.printing import PrinterBackend, PrinterError, get_backend
from souksoft.schemas import PrintRequest

logger = logging.getLogger(__name__)

# Guards the shared receipt file when unique_receipt_files is off.
_fixed_file_lock = threading.Lock()


class ReceiptDispatcher:
    """Prints HTML receipts through a printer backend.

    Two file strategies are supported:

    - unique files (default): every call gets its own temp file, removed
      once the print mechanisms have run.
    - fixed file: every call overwrites `<temp>/<app>-receipt.html` and
      leaves it in place. Calls are serialized so one receipt cannot be
      swapped out while another is being printed.
    """

    def __init__(
        self,
        backend: PrinterBackend,
        app_name: str = "SoukSoft",
        default_paper_width: int = 80,
        temp_dir: Path | None = None,
        unique_files: bool = True,
    ):
        """Initialize the dispatcher.

        Args:
            backend: Host printer backend.
            app_name: Used in the job title and file names.
            default_paper_width: Width (mm) used when a request sets none.
            temp_dir: Directory for receipt files (None = OS temp dir).
            unique_files: Use one file per call instead of a fixed file.
        """
        self.backend = backend
        self.app_name = app_name
        self.default_paper_width = default_paper_width
        self.temp_dir = Path(temp_dir) if temp_dir else None
        self.unique_files = unique_files

    @property
    def _file_stem(self) -> str:
        return f"{self.app_name.lower().replace(' ', '-')}-receipt"

    @property
    def fixed_path(self) -> Path:
        """Location of the shared receipt file."""
        base = self.temp_dir or Path(tempfile.gettempdir())
        return base / f"{self._file_stem}.html"

    def job_title(self, paper_width_mm: int | None = None) -> str:
        """Build the print job title, e.g. 'SoukSoft Receipt 80mm'."""
        return f"{self.app_name} Receipt {paper_width_mm or self.default_paper_width}mm"

    def _write_unique(self, html: str) -> Path:
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                newline="",
                prefix=f"{self._file_stem}-",
                suffix=".html",
                dir=self.temp_dir,
                delete=False,
            ) as f:
                f.write(html)
        except OSError as e:
            raise PrinterError(f"Failed to write receipt: {e}") from e
        return Path(f.name)

    def _write_fixed(self, html: str) -> Path:
        path = self.fixed_path
        try:
            path.write_text(html, encoding="utf-8", newline="")
        except OSError as e:
            raise PrinterError(f"Failed to write receipt: {e}") from e
        return path

    def dispatch(self, request: PrintRequest) -> None:
        """Print one receipt.

        Args:
            request: Receipt markup and print options.

        Raises:
            PrinterError: If the receipt file could not be written (no print
                mechanism is tried in that case) or every mechanism failed.
        """
        title = self.job_title(request.paper_width_mm)

        if not self.unique_files:
            with _fixed_file_lock:
                path = self._write_fixed(request.html_content)
                logger.debug(f"Receipt written to {path}")
                self.backend.print_file(path, title, request.printer_name)
            return

        path = self._write_unique(request.html_content)
        logger.debug(f"Receipt written to {path}")
        try:
            self.backend.print_file(path, title, request.printer_name)
        finally:
            path.unlink(missing_ok=True)


def get_dispatcher(settings: Settings | None = None) -> ReceiptDispatcher:
    """Factory function for ReceiptDispatcher.

    Args:
        settings: Settings to build from (default: cached settings).

    Returns:
        ReceiptDispatcher: Dispatcher bound to the host backend.
    """
    settings = settings or get_settings()
    return ReceiptDispatcher(
        get_backend(settings.host_family, settings.command_timeout),
        app_name=settings.app_name,
        default_paper_width=settings.paper_width_mm,
        temp_dir=settings.temp_dir,
        unique_files=settings.unique_receipt_files,
    )
