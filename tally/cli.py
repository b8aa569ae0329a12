"""CLI entry point for tally."""

import typer

from tally.commands.admin import config_command, init_command, list_command
from tally.commands.categories import (
    add_category_command,
    delete_category_command,
    edit_category_command,
    list_categories_command,
)
from tally.commands.report import summary_command, trends_command
from tally.commands.transactions import add_command, delete_command, edit_command
from tally.config import load_settings
from tally.domain.models import TransactionType
from tally.domain.sorting import SortDirection, SortField
from tally.logs import configure_logging

app = typer.Typer(
    name="tally",
    help="Tally - a household budget ledger",
    add_completion=False,
)

category_app = typer.Typer(help="Manage your budget categories.", add_completion=False)
app.add_typer(category_app, name="category")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Tally - a household budget ledger."""
    level = "DEBUG" if verbose else str(load_settings()["log_level"])
    configure_logging(level)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing ledger and config"),
    sample: bool = typer.Option(False, "--sample", help="Seed the ledger with sample data"),
) -> None:
    """Initialize tally configuration and ledger."""
    init_command(force, sample)


@app.command(name="config")
def config(
    key: str = typer.Argument(None, help="Setting name"),
    value: str = typer.Argument(None, help="New value"),
) -> None:
    """Show or change your settings."""
    config_command(key, value)


@app.command(name="list")
def list_transactions(
    query: str = typer.Option(
        None,
        "--query",
        "-q",
        help="Search text; supports @cat:<name>, @type:<expense|income> and @date:<month>-<year>",
    ),
    sort: SortField = typer.Option(SortField.DATE, "--sort", "-s", help="Field to sort by"),
    asc: bool = typer.Option(False, "--asc/--desc", help="Sort direction (default: descending)"),
    limit: int = typer.Option(None, help="Maximum transactions to show"),
    this_month: bool = typer.Option(False, "--this-month", help="Only show the current month"),
) -> None:
    """List your transactions."""
    direction = SortDirection.ASC if asc else SortDirection.DESC
    list_command(query, sort, direction, limit, this_month)


@app.command()
def add(
    date: str,
    description: str,
    amount: float,
    transaction_type: TransactionType = typer.Option(TransactionType.EXPENSE, "--type", "-t", help="Transaction type"),
    category: str = typer.Option(None, "--category", "-c", help="Category id (income always uses the income category)"),
) -> None:
    """Add a transaction."""
    add_command(date, description, amount, transaction_type, category)


@app.command()
def edit(
    transaction_id: str,
    description: str = typer.Option(None, "--description", "-d", help="New description"),
    category: str = typer.Option(None, "--category", "-c", help="New category id"),
) -> None:
    """Change the description or category of a transaction."""
    edit_command(transaction_id, description, category)


@app.command()
def delete(transaction_id: str) -> None:
    """Delete a transaction."""
    delete_command(transaction_id)


@app.command()
def summary() -> None:
    """Show budget usage, totals and your savings rate."""
    summary_command()


@app.command()
def trends(
    months: int = typer.Option(6, "--months", "-m", help="Number of recent months to show"),
) -> None:
    """Show monthly income, expenses and spending insights."""
    trends_command(months)


@category_app.command(name="list")
def category_list() -> None:
    """List your categories."""
    list_categories_command()


@category_app.command(name="add")
def category_add(
    name: str,
    budget: float,
    color: str = typer.Option(None, "--color", help="Display color (default: next palette color)"),
) -> None:
    """Create a category with a monthly budget."""
    add_category_command(name, budget, color)


@category_app.command(name="edit")
def category_edit(
    category_id: str,
    name: str = typer.Option(None, "--name", help="New name"),
    budget: float = typer.Option(None, "--budget", help="New monthly budget"),
    color: str = typer.Option(None, "--color", help="New display color"),
) -> None:
    """Change a category's name, budget or color."""
    edit_category_command(category_id, name, budget, color)


@category_app.command(name="delete")
def category_delete(
    category_id: str,
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation"),
) -> None:
    """Delete a category and its transactions."""
    delete_category_command(category_id, yes)


if __name__ == "__main__":
    app()
