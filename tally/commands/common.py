"""Helpers shared by the command modules."""

import sys
from pathlib import Path

import structlog
from rich.console import Console

from tally.config import get_ledger_path, load_settings
from tally.domain.ledger import Ledger
from tally.store import load_ledger, save_ledger

console = Console()
logger = structlog.get_logger(__name__)


def currency_symbol() -> str:
    return str(load_settings()["currency_symbol"])


def open_ledger() -> tuple[Ledger, Path]:
    """Load the current ledger snapshot, exiting on failure.

    Returns:
        Tuple of (ledger, ledger_path).
    """
    ledger_path = get_ledger_path()

    try:
        return load_ledger(ledger_path), ledger_path
    except FileNotFoundError:
        console.print("[red]Ledger not found. Run 'tally init' first.[/red]", style="bold")
        console.print(f"[dim]Expected location: {ledger_path}[/dim]")
        sys.exit(1)
    except ValueError as e:
        logger.error("ledger_load_failed", path=str(ledger_path), error=str(e))
        console.print(f"[red]Could not read ledger: {e}[/red]", style="bold")
        sys.exit(1)


def commit_ledger(ledger: Ledger, ledger_path: Path) -> None:
    """Write the new ledger snapshot, exiting on failure."""
    try:
        save_ledger(ledger, ledger_path)
    except OSError as e:
        logger.error("ledger_save_failed", path=str(ledger_path), error=str(e))
        console.print(f"[red]Could not save ledger: {e}[/red]", style="bold")
        sys.exit(1)
