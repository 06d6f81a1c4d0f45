"""SoukSoft print bridge - native printing for the SoukSoft desktop shell.

Exposes the operations the SoukSoft front-end calls: listing the host's
printers and printing HTML receipts through the operating system's own
print utilities (lp/lpr on Linux and macOS, PowerShell/print/wmic on
Windows).

Usage:
    souksoft printers
    souksoft print receipt.html --paper-width 58 --printer Thermal
    souksoft serve

The web-view front-end reaches the same operations through the local
bridge started by `souksoft serve`.
"""

__version__ = "0.1.0"
