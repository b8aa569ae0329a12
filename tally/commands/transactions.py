"""Transaction management commands (add, edit, delete)."""

import re
import sys
from datetime import datetime

import pandas as pd

from tally.commands.common import commit_ledger, console, currency_symbol, logger, open_ledger
from tally.domain.models import INCOME_CATEGORY_ID, CategoryId, Money, TransactionType
from tally.domain.transactions import Transaction, TransactionPatch, format_money_display
from tally.domain.validation import validate_transaction_form


ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{1,2}-\d{1,2}")


def parse_date(raw_date: str) -> datetime:
    """Parse a user-supplied date.

    ISO dates are read year first; anything else is read day first. A UTC
    offset is dropped, keeping the wall-clock time as entered.

    Args:
        raw_date: Date text (YYYY-MM-DD, DD/MM/YYYY, or other formats).

    Returns:
        Parsed naive datetime.

    Raises:
        ValueError: If the date can't be parsed.
    """
    dayfirst = ISO_DATE_PATTERN.match(raw_date.strip()) is None
    try:
        parsed = pd.to_datetime(raw_date, dayfirst=dayfirst)
    except (ValueError, pd.errors.ParserError) as e:
        raise ValueError(f"Could not parse date '{raw_date}': {e}") from e

    if pd.isna(parsed):
        raise ValueError(f"Could not parse date '{raw_date}'")
    if parsed.tzinfo is not None:
        parsed = parsed.tz_localize(None)
    return parsed.to_pydatetime()


def add_command(
    date: str,
    description: str,
    amount: float,
    transaction_type: TransactionType = TransactionType.EXPENSE,
    category_id: str | None = None,
) -> None:
    """Add a transaction.

    Args:
        date: Transaction date (YYYY-MM-DD, DD/MM/YYYY, or other formats).
        description: Transaction description.
        amount: Transaction amount (positive).
        transaction_type: Expense or income.
        category_id: Category id. Income always goes to the income category.
    """
    ledger, ledger_path = open_ledger()

    try:
        parsed_date = parse_date(date)
    except ValueError as e:
        console.print(f"[red]Invalid date format: {e}[/red]")
        console.print("[dim]Accepted formats: YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY, etc.[/dim]")
        sys.exit(1)

    if transaction_type == TransactionType.INCOME:
        category_id = INCOME_CATEGORY_ID

    is_valid, error = validate_transaction_form(description, category_id, amount, parsed_date)
    if not is_valid:
        console.print(f"[red]{error}[/red]")
        sys.exit(1)

    allowed = {c.id for c in ledger.available_categories(transaction_type)}
    if category_id not in allowed:
        console.print(f"[red]Category '{category_id}' can't hold {transaction_type.value} transactions[/red]")
        console.print("[dim]Use 'tally category list' to see category ids[/dim]")
        sys.exit(1)

    transaction = Transaction(
        id=ledger.next_transaction_id(),
        date=parsed_date,
        amount=Money(amount),
        type=transaction_type,
        description=description,
        category_id=CategoryId(str(category_id)),
    )
    commit_ledger(ledger.add_transaction(transaction), ledger_path)
    logger.info("transaction_added", id=transaction.id, type=transaction.type.value, amount=transaction.amount)

    category = ledger.get_category_by_id(transaction.category_id)
    console.print(f"[green]✓[/green] Transaction {transaction.id} added:")
    console.print(f"  Date: {parsed_date:%Y-%m-%d}")
    console.print(f"  Description: {description}")
    console.print(f"  Amount: {format_money_display(amount, currency_symbol())}")
    console.print(f"  Type: {transaction_type.value}")
    console.print(f"  Category: {category.name if category else transaction.category_id}")


def edit_command(
    transaction_id: str,
    description: str | None = None,
    category_id: str | None = None,
) -> None:
    """Change the description or category of a transaction.

    Args:
        transaction_id: Transaction ID (from 'tally list').
        description: New description.
        category_id: New category id.
    """
    ledger, ledger_path = open_ledger()

    txn = ledger.get_transaction_by_id(transaction_id)
    if txn is None:
        console.print(f"[red]Transaction {transaction_id} not found[/red]")
        sys.exit(1)

    if description is None and category_id is None:
        console.print("[yellow]Nothing to change (use --description or --category)[/yellow]")
        return

    if description is not None and not description.strip():
        console.print("[red]Please enter a description[/red]")
        sys.exit(1)

    if category_id is not None:
        allowed = {c.id for c in ledger.available_categories(txn.type)}
        if category_id not in allowed:
            console.print(f"[red]Category '{category_id}' can't hold {txn.type.value} transactions[/red]")
            sys.exit(1)

    patch = TransactionPatch(
        description=description,
        category_id=CategoryId(category_id) if category_id is not None else None,
    )
    updated = ledger.edit_transaction(transaction_id, patch)
    commit_ledger(updated, ledger_path)
    logger.info("transaction_edited", id=transaction_id)

    new_txn = updated.get_transaction_by_id(transaction_id)
    console.print(f"[green]✓[/green] Updated transaction {transaction_id}:")
    if new_txn is not None:
        console.print(f"  Description: {new_txn.description}")
        category = updated.get_category_by_id(new_txn.category_id)
        console.print(f"  Category: {category.name if category else new_txn.category_id}")


def delete_command(transaction_id: str) -> None:
    """Delete a transaction.

    Args:
        transaction_id: Transaction ID (from 'tally list').
    """
    ledger, ledger_path = open_ledger()

    txn = ledger.get_transaction_by_id(transaction_id)
    if txn is None:
        console.print(f"[red]Transaction {transaction_id} not found[/red]")
        sys.exit(1)

    commit_ledger(ledger.remove_transaction(transaction_id), ledger_path)
    logger.info("transaction_deleted", id=transaction_id)

    console.print(f"[green]✓[/green] Deleted transaction {transaction_id}: {txn.description}")
