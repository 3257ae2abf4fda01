"""Command line entry point for the smart signal simulation."""

from __future__ import annotations

from smart_signal.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
