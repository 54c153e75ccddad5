"""
Entry point for running period as a module.

This file enables:
- `python -m period humanize 2026-02-22T14:30:00+00:00`
- `uv run python -m period ago 3 days`
"""

from __future__ import annotations

from period.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
