"""Utility helper package for shared script helpers.

Submodules
----------
cli
    Shared argparse configuration helpers for the any-two command.
io
    Observer CSV discovery and reading helpers.
schema
    Column names for CSV exports.
"""

from __future__ import annotations

__all__ = [
    "cli",
    "io",
    "schema",
]
