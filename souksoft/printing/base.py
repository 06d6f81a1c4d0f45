"""Abstract printer backend interface."""

from pathlib import Path
from typing import Protocol, runtime_checkable


class PrinterError(Exception):
    """Error during printing operation.

    The message is the error string reported back to the front-end.
    """

    pass


@runtime_checkable
class PrinterBackend(Protocol):
    """Protocol defining the printer backend interface.

    One implementation exists per host family; get_backend() picks the
    right one for the running OS.
    """

    host_family: str

    def list_printers(self) -> list[str]:
        """Get the names of the printers installed on the host.

        Returns:
            list[str]: Printer names, possibly empty.

        Raises:
            PrinterError: If the host could not be queried.
        """
        ...

    def print_file(
        self,
        file_path: Path,
        title: str,
        printer_name: str | None = None,
    ) -> None:
        """Hand a file to the OS print spooler.

        Args:
            file_path: File to print.
            title: Print job title (ignored where the host has no notion of it).
            printer_name: Target printer (None = default printer).

        Raises:
            PrinterError: If every print mechanism failed.
        """
        ...
