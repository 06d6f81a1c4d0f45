"""Windows printing backend using PowerShell, wmic and the legacy print command."""

import logging
from pathlib import Path

from souksoft.printing.base import PrinterError
from souksoft.printing.runner import (
    CommandOutcome,
    Mechanism,
    describe_failure,
    first_column,
    run_chain,
)

logger = logging.getLogger(__name__)

LIST_ERROR_PREFIX = "Failed to list printers"

GET_PRINTER_SCRIPT = "Get-Printer | Select-Object -ExpandProperty Name"


def ps_quote(value: str) -> str:
    """Quote a value as a PowerShell single-quoted string literal.

    Inside single quotes PowerShell expands nothing; the only character
    needing an escape is the quote itself, written twice.
    """
    return "'" + value.replace("'", "''") + "'"


def _has_printer_lines(outcome: CommandOutcome) -> bool:
    return outcome.succeeded and bool(outcome.lines)


def _powershell(script: str) -> list[str]:
    return ["powershell", "-NoProfile", "-Command", script]


class Win32Printer:
    """Windows-class backend built on stock Windows command-line tools."""

    host_family = "windows"

    def __init__(self, timeout: float | None = None):
        """Initialize the backend.

        Args:
            timeout: Per-command timeout in seconds (None = no limit).
        """
        self.timeout = timeout

    def list_printers(self) -> list[str]:
        """Get printer names via Get-Printer, falling back to wmic.

        Get-Printer needs PowerShell 3+. Its answer is only used when it
        names at least one printer; otherwise wmic (Windows 7+) is asked.

        Returns:
            list[str]: Printer names.

        Raises:
            PrinterError: If wmic cannot be run or exits non-zero.
        """
        result = run_chain(
            [
                Mechanism(
                    "Get-Printer",
                    _powershell(GET_PRINTER_SCRIPT),
                    "PowerShell printer query error",
                    accept=_has_printer_lines,
                ),
                Mechanism("wmic", ["wmic", "printer", "list", "brief"], LIST_ERROR_PREFIX),
            ],
            self.timeout,
        )

        if not result.succeeded:
            # Only the wmic diagnostic is reported; Get-Printer is optional.
            _, wmic_outcome = result.attempts[-1]
            raise PrinterError(describe_failure([wmic_outcome], "wmic printer query failed"))

        if result.mechanism.name == "Get-Printer":
            return result.outcome.lines

        # Skip the header row; the first column is taken as the name.
        return first_column(result.outcome.stdout, skip=1)

    def _mechanisms(self, file_path: Path, printer_name: str | None) -> list[Mechanism]:
        script = f"Get-Content -Path {ps_quote(str(file_path))} | Out-Printer"
        if printer_name:
            script += f" -Name {ps_quote(printer_name)}"

        # print.exe only accepts a full path and an optional /D:<printer>
        print_cmd = ["print"]
        if printer_name:
            print_cmd.append(f"/D:{printer_name}")
        print_cmd.append(str(file_path))

        return [
            Mechanism("Out-Printer", _powershell(script), "PowerShell print error"),
            Mechanism("print", print_cmd, "print command error"),
        ]

    def print_file(
        self,
        file_path: Path,
        title: str,
        printer_name: str | None = None,
    ) -> None:
        """Send a file to the printer with Out-Printer, falling back to print.

        Args:
            file_path: File to print.
            title: Job title (unused; neither tool accepts one).
            printer_name: Target printer (None = default).

        Raises:
            PrinterError: If both mechanisms failed.
        """
        result = run_chain(self._mechanisms(file_path, printer_name), self.timeout)
        if not result.succeeded:
            raise PrinterError(
                result.diagnostic("Printing failed (PowerShell and legacy print)")
            )

        logger.info(f"Print job submitted via {result.mechanism.name} to {printer_name or 'default'}")
