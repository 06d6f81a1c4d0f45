"""Cross-platform printing abstraction.

Provides a unified printer interface across Linux/macOS (CUPS tools) and
Windows (PowerShell, wmic, print). Use get_backend() to get the
appropriate backend for the current platform.
"""

import platform

from souksoft.printing.base import PrinterBackend, PrinterError

HOST_FAMILIES = ("windows", "unix")


def detect_host_family() -> str:
    """Classify the running OS.

    Returns:
        str: 'windows' on Windows, 'unix' everywhere else.
    """
    return "windows" if platform.system() == "Windows" else "unix"


def get_backend(host_family: str | None = None, timeout: float | None = None) -> PrinterBackend:
    """Factory function that returns the appropriate printer backend.

    Args:
        host_family: 'windows', 'unix', or None/'auto' to detect.
        timeout: Per-command timeout in seconds.

    Returns:
        PrinterBackend: Host-specific printer backend.

    Raises:
        ValueError: If host_family is not recognised.
    """
    family = host_family if host_family not in (None, "auto") else detect_host_family()

    if family == "windows":
        from souksoft.printing.win32_printer import Win32Printer

        return Win32Printer(timeout=timeout)
    if family == "unix":
        # Linux and macOS both use CUPS
        from souksoft.printing.cups_printer import CupsPrinter

        return CupsPrinter(timeout=timeout)

    raise ValueError(f"Unknown host family: {host_family!r} (expected one of {HOST_FAMILIES})")


__all__ = [
    "HOST_FAMILIES",
    "PrinterBackend",
    "PrinterError",
    "detect_host_family",
    "get_backend",
]
