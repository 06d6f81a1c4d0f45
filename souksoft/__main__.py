"""Allow running as `python -m souksoft`."""

from souksoft.cli import main

main()
