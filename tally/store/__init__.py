"""Store layer - keeps the current ledger snapshot on disk.

This module re-exports the public snapshot functions for easy importing.
"""

from tally.store.snapshot import (
    ledger_exists,
    ledger_from_document,
    ledger_to_document,
    load_ledger,
    save_ledger,
)

__all__ = [
    "ledger_exists",
    "ledger_from_document",
    "ledger_to_document",
    "load_ledger",
    "save_ledger",
]
