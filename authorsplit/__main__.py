"""Module entrypoint for running authorsplit as ``python -m authorsplit``."""

from __future__ import annotations

from authorsplit.cli import main


if __name__ == "__main__":
    main()
