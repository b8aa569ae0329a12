"""Pure functions for transaction records.

This module contains the functional core for transaction operations:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations
- Easy to test

Transactions are immutable; edits produce new records.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Protocol

from tally.domain.models import CategoryId, Money, TransactionId, TransactionType


@dataclass(frozen=True)
class Transaction:
    """Immutable transaction data."""

    id: TransactionId
    date: datetime
    amount: Money
    type: TransactionType
    description: str
    category_id: CategoryId


@dataclass(frozen=True)
class TransactionPatch:
    """Changes to the mutable fields of a transaction.

    Fields left as None are kept.
    """

    description: str | None = None
    category_id: CategoryId | None = None


class HasId(Protocol):
    @property
    def id(self) -> str: ...


def apply_transaction_patch(transaction: Transaction, patch: TransactionPatch) -> Transaction:
    """Apply a patch to a transaction.

    Only description and category can change; id, date, amount and type are fixed
    at creation.

    Args:
        transaction: Transaction to update.
        patch: Changes to apply.

    Returns:
        New Transaction with the patch applied.
    """
    changes: dict[str, str] = {}
    if patch.description is not None:
        changes["description"] = patch.description
    if patch.category_id is not None:
        changes["category_id"] = patch.category_id
    return replace(transaction, **changes)


def edit_transaction(
    transactions: Sequence[Transaction],
    transaction_id: str,
    patch: TransactionPatch,
) -> tuple[Transaction, ...]:
    """Return transactions with the matching one patched.

    Args:
        transactions: Transactions to search.
        transaction_id: Id of the transaction to edit.
        patch: Changes to apply.

    Returns:
        New tuple of transactions. Unchanged if the id is unknown.
    """
    return tuple(apply_transaction_patch(t, patch) if t.id == transaction_id else t for t in transactions)


def remove_transaction(transactions: Sequence[Transaction], transaction_id: str) -> tuple[Transaction, ...]:
    """Return transactions without the one with the given id."""
    return tuple(t for t in transactions if t.id != transaction_id)


def find_transaction(transactions: Iterable[Transaction], transaction_id: str) -> Transaction | None:
    """Find a transaction by id.

    Returns:
        The transaction, or None if no transaction has that id.
    """
    return next((t for t in transactions if t.id == transaction_id), None)


def sum_amounts(
    transactions: Iterable[Transaction],
    transaction_type: TransactionType,
    category_id: str | None = None,
) -> Money:
    """Sum amounts of transactions of one type.

    Args:
        transactions: Transactions to sum.
        transaction_type: Only transactions of this type are counted.
        category_id: If given, only transactions in this category are counted.

    Returns:
        Total amount.
    """
    return Money(
        sum(
            t.amount
            for t in transactions
            if t.type == transaction_type and (category_id is None or t.category_id == category_id)
        )
    )


def parse_numeric_id(value: str) -> int | None:
    """Parse a string id as an integer.

    Returns:
        The integer value, or None if the id is not numeric.
    """
    try:
        return int(value)
    except ValueError:
        return None


def find_max_id(items: Iterable[HasId]) -> int:
    """Find the largest numeric id among items.

    Non-numeric ids are ignored.

    Args:
        items: Records with string ids.

    Returns:
        Largest numeric id, or 0 if no id is numeric.
    """
    numeric_ids = [n for n in (parse_numeric_id(item.id) for item in items) if n is not None]
    return max(numeric_ids, default=0)


def next_id(items: Iterable[HasId]) -> str:
    """Derive the id for a new record: one past the largest numeric id."""
    return str(find_max_id(items) + 1)


def same_day(first: date, second: date) -> bool:
    """Check whether two dates fall on the same calendar day."""
    return first.year == second.year and first.month == second.month and first.day == second.day


def transactions_on_day(transactions: Iterable[Transaction], day: date) -> tuple[Transaction, ...]:
    """Select transactions whose date matches year, month and day exactly."""
    return tuple(t for t in transactions if same_day(t.date, day))


def sort_by_date_desc(transactions: Iterable[Transaction]) -> tuple[Transaction, ...]:
    """Sort transactions newest first."""
    return tuple(sorted(transactions, key=lambda t: t.date, reverse=True))


def sort_by_amount_desc(transactions: Iterable[Transaction]) -> tuple[Transaction, ...]:
    """Sort transactions largest amount first."""
    return tuple(sorted(transactions, key=lambda t: t.amount, reverse=True))


def format_money_display(amount: float, symbol: str = "$", include_sign: bool = False) -> str:
    """Format money amount for display.

    Args:
        amount: Amount in major units.
        symbol: Currency symbol.
        include_sign: Whether to include + or - sign.

    Returns:
        Formatted string (e.g., "-$123.45" or "$123.45").
    """
    formatted = f"{symbol}{abs(amount):,.2f}"

    if amount < 0:
        return f"-{formatted}"
    if include_sign:
        return f"+{formatted}"
    return formatted
