"""Pure functions for budget categories.

This module contains the functional core for category operations:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations
- Easy to test
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any

from tally.domain.models import CategoryId, Money, TransactionType
from tally.domain.transactions import (
    Transaction,
    TransactionPatch,
    edit_transaction,
    remove_transaction,
    sort_by_amount_desc,
    sort_by_date_desc,
    sum_amounts,
    transactions_on_day,
)


DEFAULT_COLORS = (
    "#ef4444",
    "#f97316",
    "#eab308",
    "#22c55e",
    "#06b6d4",
    "#3b82f6",
    "#8b5cf6",
    "#ec4899",
    "#f59e0b",
    "#10b981",
)


@dataclass(frozen=True)
class Category:
    """Immutable budget category."""

    id: CategoryId
    date: datetime
    name: str
    color: str
    budget: Money


@dataclass(frozen=True)
class CategoryPatch:
    """Changes to the mutable fields of a category.

    Fields left as None are kept.
    """

    name: str | None = None
    color: str | None = None
    budget: Money | None = None


def apply_category_patch(category: Category, patch: CategoryPatch) -> Category:
    """Apply a patch to a category.

    Args:
        category: Category to update.
        patch: Changes to apply. Only name, color and budget can change.

    Returns:
        New Category with the patch applied.
    """
    changes: dict[str, Any] = {}
    if patch.name is not None:
        changes["name"] = patch.name
    if patch.color is not None:
        changes["color"] = patch.color
    if patch.budget is not None:
        changes["budget"] = patch.budget
    return replace(category, **changes)


def next_category_color(categories: Sequence[Category]) -> str:
    """Pick a color for a new category, cycling through the default palette."""
    return DEFAULT_COLORS[len(categories) % len(DEFAULT_COLORS)]


def calculate_remaining(budget: Money, expense: Money) -> Money:
    """Calculate budget left after expenses.

    Returns:
        Remaining amount (negative when over budget).
    """
    return Money(budget - expense)


def calculate_usage_percentage(expense: Money, budget: Money) -> float:
    """Calculate percentage of budget used.

    Args:
        expense: Amount spent.
        budget: Budget ceiling.

    Returns:
        Percentage of budget used (0-100+). 0 when the budget is 0.
    """
    if budget == 0:
        return 0.0
    return (expense / budget) * 100


@dataclass(frozen=True)
class CategoryBook:
    """A category together with its own transactions.

    A book is a view derived from the ledger's transaction list. Changing a
    book returns a new book and leaves the ledger as it was.
    """

    category: Category
    transactions: tuple[Transaction, ...] = ()

    def calculate_expense(self) -> Money:
        return sum_amounts(self.transactions, TransactionType.EXPENSE)

    def calculate_remaining_budget(self) -> Money:
        return calculate_remaining(self.category.budget, self.calculate_expense())

    def calculate_usage(self) -> float:
        return calculate_usage_percentage(self.calculate_expense(), self.category.budget)

    def add_transaction(self, transaction: Transaction) -> "CategoryBook":
        return replace(self, transactions=(*self.transactions, transaction))

    def remove_transaction(self, transaction_id: str) -> "CategoryBook":
        return replace(self, transactions=remove_transaction(self.transactions, transaction_id))

    def edit_transaction(self, transaction_id: str, patch: TransactionPatch) -> "CategoryBook":
        return replace(self, transactions=edit_transaction(self.transactions, transaction_id, patch))

    def sort_by_date(self) -> "CategoryBook":
        """Order transactions newest first."""
        return replace(self, transactions=sort_by_date_desc(self.transactions))

    def sort_by_amount(self) -> "CategoryBook":
        """Order transactions largest first."""
        return replace(self, transactions=sort_by_amount_desc(self.transactions))

    def search_date(self, day: date) -> tuple[Transaction, ...]:
        return transactions_on_day(self.transactions, day)


def build_category_book(category: Category, transactions: Sequence[Transaction]) -> CategoryBook:
    """Collect the transactions that reference a category into a book."""
    return CategoryBook(
        category=category,
        transactions=tuple(t for t in transactions if t.category_id == category.id),
    )
