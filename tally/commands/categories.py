"""Category management commands (list, add, edit, delete)."""

import sys
from datetime import datetime

import typer
from rich.table import Table

from tally.commands.common import commit_ledger, console, currency_symbol, logger, open_ledger
from tally.domain.categories import Category, CategoryPatch, next_category_color
from tally.domain.models import INCOME_CATEGORY_ID, CategoryId, Money
from tally.domain.transactions import format_money_display, next_id
from tally.domain.validation import validate_category_form


def list_categories_command() -> None:
    """Show every category with its budget."""
    ledger, _ = open_ledger()
    symbol = currency_symbol()

    if not ledger.categories:
        console.print("[yellow]No categories found[/yellow]")
        return

    table = Table(title="Categories")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="magenta")
    table.add_column("Color")
    table.add_column("Budget", justify="right")
    table.add_column("Transactions", justify="right")

    for category in ledger.categories:
        book = ledger.category_book(category.id)
        count = len(book.transactions) if book else 0
        budget = "[dim]-[/dim]" if category.id == INCOME_CATEGORY_ID else format_money_display(category.budget, symbol)
        table.add_row(
            category.id,
            category.name,
            category.color,
            budget,
            str(count),
        )

    console.print(table)


def add_category_command(name: str, budget: float, color: str | None = None) -> None:
    """Create a category.

    Args:
        name: Display name.
        budget: Monthly budget.
        color: Display color; picked from the default palette when omitted.
    """
    ledger, ledger_path = open_ledger()

    is_valid, error = validate_category_form(name, budget)
    if not is_valid:
        console.print(f"[red]{error}[/red]")
        sys.exit(1)

    category = Category(
        id=CategoryId(next_id(ledger.categories)),
        date=datetime.now(),
        name=name.strip(),
        color=color or next_category_color(ledger.categories),
        budget=Money(budget),
    )
    commit_ledger(ledger.add_category(category), ledger_path)
    logger.info("category_added", id=category.id, name=category.name, budget=category.budget)

    console.print(f"[green]✓[/green] Created category {category.id}: {category.name}")
    console.print(f"  Budget: {format_money_display(category.budget, currency_symbol())}")


def edit_category_command(
    category_id: str,
    name: str | None = None,
    budget: float | None = None,
    color: str | None = None,
) -> None:
    """Change name, budget or color of a category.

    Args:
        category_id: Category ID (from 'tally category list').
        name: New name.
        budget: New monthly budget.
        color: New display color.
    """
    ledger, ledger_path = open_ledger()

    category = ledger.get_category_by_id(category_id)
    if category is None:
        console.print(f"[red]Category {category_id} not found[/red]")
        sys.exit(1)

    if name is None and budget is None and color is None:
        console.print("[yellow]Nothing to change (use --name, --budget or --color)[/yellow]")
        return

    is_valid, error = validate_category_form(
        name if name is not None else category.name,
        budget if budget is not None else category.budget,
    )
    # The income category carries no budget
    if not is_valid and not (category.id == INCOME_CATEGORY_ID and budget is None):
        console.print(f"[red]{error}[/red]")
        sys.exit(1)

    patch = CategoryPatch(
        name=name.strip() if name is not None else None,
        color=color,
        budget=Money(budget) if budget is not None else None,
    )
    updated = ledger.edit_category(category_id, patch)
    commit_ledger(updated, ledger_path)
    logger.info("category_edited", id=category_id)

    new_category = updated.get_category_by_id(category_id)
    console.print(f"[green]✓[/green] Updated category {category_id}:")
    if new_category is not None:
        console.print(f"  Name: {new_category.name}")
        console.print(f"  Color: {new_category.color}")
        console.print(f"  Budget: {format_money_display(new_category.budget, currency_symbol())}")


def delete_category_command(category_id: str, yes: bool = False) -> None:
    """Delete a category and the transactions assigned to it.

    Args:
        category_id: Category ID (from 'tally category list').
        yes: Skip the confirmation prompt.
    """
    ledger, ledger_path = open_ledger()

    if category_id == INCOME_CATEGORY_ID:
        console.print("[red]The income category can't be deleted[/red]")
        sys.exit(1)

    category = ledger.get_category_by_id(category_id)
    if category is None:
        console.print(f"[red]Category {category_id} not found[/red]")
        sys.exit(1)

    book = ledger.category_book(category_id)
    orphaned = len(book.transactions) if book else 0

    if orphaned and not yes:
        confirmed = typer.confirm(
            f"Deleting '{category.name}' also deletes {orphaned} transaction(s). Continue?", default=False
        )
        if not confirmed:
            console.print("[dim]Nothing deleted[/dim]")
            return

    updated = ledger.remove_category(category_id).remove_category_transactions(category_id)
    commit_ledger(updated, ledger_path)
    logger.info("category_deleted", id=category_id, transactions_removed=orphaned)

    console.print(f"[green]✓[/green] Deleted category {category_id}: {category.name}")
    if orphaned:
        console.print(f"[dim]Removed {orphaned} transaction(s) in that category[/dim]")
