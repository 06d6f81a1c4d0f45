"""CUPS printing backend for Linux and macOS (lpstat/lp/lpr commands)."""

import logging
from pathlib import Path

from souksoft.printing.base import PrinterError
from souksoft.printing.runner import Mechanism, first_column, run_chain

logger = logging.getLogger(__name__)

LIST_ERROR_PREFIX = "Failed to list printers"


class CupsPrinter:
    """Unix-class backend talking to the CUPS command-line tools."""

    host_family = "unix"

    def __init__(self, timeout: float | None = None):
        """Initialize the backend.

        Args:
            timeout: Per-command timeout in seconds (None = no limit).
        """
        self.timeout = timeout

    def list_printers(self) -> list[str]:
        """Get printer names from `lpstat -a`.

        Returns:
            list[str]: First column of every output line, in order.

        Raises:
            PrinterError: If lpstat cannot be run or exits non-zero.
        """
        result = run_chain(
            [Mechanism("lpstat", ["lpstat", "-a"], LIST_ERROR_PREFIX)],
            self.timeout,
        )
        if not result.succeeded:
            raise PrinterError(result.diagnostic("lpstat -a failed"))

        printers = first_column(result.outcome.stdout)
        logger.debug(f"lpstat reported {len(printers)} printer(s)")
        return printers

    def _mechanisms(self, file_path: Path, title: str, printer_name: str | None) -> list[Mechanism]:
        lp_cmd = ["lp", "-t", title]
        if printer_name:
            lp_cmd.extend(["-d", printer_name])
        lp_cmd.append(str(file_path))

        lpr_cmd = ["lpr"]
        if printer_name:
            lpr_cmd.extend(["-P", printer_name])
        lpr_cmd.append(str(file_path))

        return [
            Mechanism("lp", lp_cmd, "lp error"),
            Mechanism("lpr", lpr_cmd, "lpr error"),
        ]

    def print_file(
        self,
        file_path: Path,
        title: str,
        printer_name: str | None = None,
    ) -> None:
        """Submit a file with lp, falling back to lpr.

        Args:
            file_path: File to print.
            title: Job title passed to lp.
            printer_name: Destination printer (None = default).

        Raises:
            PrinterError: If both lp and lpr failed.
        """
        result = run_chain(self._mechanisms(file_path, title, printer_name), self.timeout)
        if not result.succeeded:
            raise PrinterError(result.diagnostic("No printer command found (lp/lpr)"))

        logger.info(
            f"Print job submitted via {result.mechanism.name} to "
            f"{printer_name or 'default'}: {result.outcome.stdout.strip()}"
        )
