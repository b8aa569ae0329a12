"""Admin commands for init and listing transactions."""

import sys
from datetime import date
from pathlib import Path

from rich.table import Table

from tally.commands.common import console, currency_symbol, logger, open_ledger
from tally.config import (
    create_default_config,
    default_settings,
    get_config_path,
    get_ledger_path,
    load_settings,
    set_setting,
)
from tally.domain.ledger import empty_ledger, sample_ledger
from tally.domain.models import TransactionType
from tally.domain.query import current_month_query, filter_transactions
from tally.domain.sorting import SortDirection, SortField, sort_transactions
from tally.domain.transactions import format_money_display
from tally.store import save_ledger


def run_full_init(config_path: Path, ledger_path: Path, sample: bool) -> None:
    """Create config and ledger snapshot."""
    console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
    create_default_config(config_path, ledger_path)
    console.print("[green]✓[/green] Config file created (permissions: 600)")

    ledger = sample_ledger() if sample else empty_ledger()
    console.print(f"[cyan]Writing ledger to {ledger_path}...[/cyan]")
    save_ledger(ledger, ledger_path)
    if sample:
        console.print("[green]✓[/green] Ledger seeded with sample data")
    else:
        console.print("[green]✓[/green] Empty ledger created")

    logger.info("initialized", config=str(config_path), ledger=str(ledger_path), sample=sample)

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print(f"[dim]Config: {config_path}[/dim]")
    console.print(f"[dim]Ledger: {ledger_path}[/dim]")


def init_command(force: bool = False, sample: bool = False) -> None:
    """Initialize tally config and ledger snapshot."""
    config_path = get_config_path()
    ledger_path = get_ledger_path(config_path)

    config_exists = config_path.exists()
    ledger_exists = ledger_path.exists()

    try:
        # Guard: refuse to overwrite without force flag
        if not force and (config_exists or ledger_exists):
            console.print("[red]Initialization failed:[/red]", style="bold")
            if config_exists:
                console.print(f"  Config already exists: {config_path}")
            if ledger_exists:
                console.print(f"  Ledger already exists: {ledger_path}")
            console.print("\n[yellow]Use 'tally init --force' to overwrite[/yellow]")
            sys.exit(1)

        run_full_init(config_path, ledger_path, sample)

    except OSError as e:
        logger.error("init_failed", error=str(e))
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)


def format_amount_cell(amount: float, transaction_type: TransactionType, symbol: str) -> str:
    if transaction_type == TransactionType.EXPENSE:
        return f"[red]-{format_money_display(amount, symbol)}[/red]"
    return f"[green]+{format_money_display(amount, symbol)}[/green]"


def list_command(
    query: str | None = None,
    sort_field: SortField = SortField.DATE,
    direction: SortDirection = SortDirection.DESC,
    limit: int | None = None,
    this_month: bool = False,
) -> None:
    """List transactions matching a query, sorted by a field."""
    ledger, _ = open_ledger()
    symbol = currency_symbol()

    if this_month:
        query = current_month_query(date.today())

    matching = filter_transactions(ledger.transactions, query or "", ledger)
    transactions = sort_transactions(matching, sort_field, direction)

    if limit is not None:
        transactions = transactions[:limit]

    if not transactions:
        console.print("[yellow]No transactions found[/yellow]")
        return

    title = f"Transactions (showing {len(transactions)} of {ledger.transaction_count()})"
    if query:
        title += f" matching '{query}'"

    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("Date", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Category", style="magenta")
    table.add_column("Type")
    table.add_column("Amount", justify="right")

    for txn in transactions:
        category = ledger.get_category_by_id(txn.category_id)
        category_name = category.name if category else "[dim]-[/dim]"
        table.add_row(
            txn.id,
            txn.date.strftime("%Y-%m-%d"),
            txn.description,
            category_name,
            txn.type.value,
            format_amount_cell(txn.amount, txn.type, symbol),
        )

    console.print(table)


def config_command(key: str | None = None, value: str | None = None) -> None:
    """Show settings, or change one."""
    config_path = get_config_path()

    if key is None:
        settings = load_settings(config_path)
        for name in sorted(settings):
            console.print(f"  {name}: [cyan]{settings[name]}[/cyan]")
        console.print(f"[dim]Config: {config_path}[/dim]")
        return

    if key not in default_settings():
        console.print(f"[red]Unknown setting '{key}'[/red]")
        console.print(f"[dim]Known settings: {', '.join(sorted(default_settings()))}[/dim]")
        sys.exit(1)

    if value is None:
        console.print(f"  {key}: [cyan]{load_settings(config_path)[key]}[/cyan]")
        return

    try:
        set_setting(key, value, config_path)
    except OSError as e:
        logger.error("config_save_failed", error=str(e))
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] {key} set to {value}")
