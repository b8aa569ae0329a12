"""The ledger aggregate: categories, transactions and derived metrics.

A Ledger is an immutable snapshot. Every update method returns a new Ledger,
so callers replace their current snapshot instead of mutating it.

Lookups never raise. Unknown ids return None, and metrics for an unknown
category degrade to 0.
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import date, datetime

from tally.domain.categories import (
    Category,
    CategoryBook,
    CategoryPatch,
    apply_category_patch,
    build_category_book,
    calculate_remaining,
    calculate_usage_percentage,
)
from tally.domain.models import INCOME_CATEGORY_ID, CategoryId, Money, TransactionId, TransactionType
from tally.domain.transactions import (
    Transaction,
    TransactionPatch,
    edit_transaction,
    find_transaction,
    next_id,
    remove_transaction,
    sort_by_amount_desc,
    sort_by_date_desc,
    sum_amounts,
    transactions_on_day,
)


@dataclass(frozen=True)
class Ledger:
    """Immutable ledger snapshot."""

    categories: tuple[Category, ...] = ()
    transactions: tuple[Transaction, ...] = ()

    # Categories

    def with_categories(self, categories: Iterable[Category]) -> "Ledger":
        """Replace the whole category list."""
        return replace(self, categories=tuple(categories))

    def get_category_by_id(self, category_id: str) -> Category | None:
        return next((c for c in self.categories if c.id == category_id), None)

    def add_category(self, category: Category) -> "Ledger":
        return replace(self, categories=(*self.categories, category))

    def edit_category(self, category_id: str, patch: CategoryPatch) -> "Ledger":
        """Update name, color and budget of a category.

        The transaction list is left untouched.
        """
        return replace(
            self,
            categories=tuple(apply_category_patch(c, patch) if c.id == category_id else c for c in self.categories),
        )

    def remove_category(self, category_id: str) -> "Ledger":
        """Drop a category.

        Transactions pointing at it are kept; use remove_category_transactions
        to drop them as well.
        """
        return replace(self, categories=tuple(c for c in self.categories if c.id != category_id))

    def remove_category_transactions(self, category_id: str) -> "Ledger":
        """Drop every transaction assigned to a category."""
        return replace(self, transactions=tuple(t for t in self.transactions if t.category_id != category_id))

    def category_count(self) -> int:
        return len(self.categories)

    def available_categories(self, transaction_type: TransactionType) -> tuple[Category, ...]:
        """Categories a transaction of the given type may be assigned to.

        Income always goes to the reserved income category; expenses go to any
        other category.
        """
        if transaction_type == TransactionType.INCOME:
            return tuple(c for c in self.categories if c.id == INCOME_CATEGORY_ID)
        return tuple(c for c in self.categories if c.id != INCOME_CATEGORY_ID)

    def category_book(self, category_id: str) -> CategoryBook | None:
        category = self.get_category_by_id(category_id)
        if category is None:
            return None
        return build_category_book(category, self.transactions)

    # Transactions

    def with_transactions(self, transactions: Iterable[Transaction]) -> "Ledger":
        """Replace the whole transaction list."""
        return replace(self, transactions=tuple(transactions))

    def get_transaction_by_id(self, transaction_id: str) -> Transaction | None:
        return find_transaction(self.transactions, transaction_id)

    def add_transaction(self, transaction: Transaction) -> "Ledger":
        return replace(self, transactions=(*self.transactions, transaction))

    def edit_transaction(self, transaction_id: str, patch: TransactionPatch) -> "Ledger":
        """Update description and category of a transaction."""
        return replace(self, transactions=edit_transaction(self.transactions, transaction_id, patch))

    def remove_transaction(self, transaction_id: str) -> "Ledger":
        return replace(self, transactions=remove_transaction(self.transactions, transaction_id))

    def transaction_count(self) -> int:
        return len(self.transactions)

    def next_transaction_id(self) -> TransactionId:
        return TransactionId(next_id(self.transactions))

    def sort_transactions_by_date(self) -> "Ledger":
        return replace(self, transactions=sort_by_date_desc(self.transactions))

    def sort_transactions_by_amount(self) -> "Ledger":
        return replace(self, transactions=sort_by_amount_desc(self.transactions))

    def search_transaction_date(self, day: date) -> tuple[Transaction, ...]:
        return transactions_on_day(self.transactions, day)

    # Metrics

    def calculate_income(self, category_id: str) -> Money:
        return sum_amounts(self.transactions, TransactionType.INCOME, category_id)

    def calculate_expense(self, category_id: str) -> Money:
        return sum_amounts(self.transactions, TransactionType.EXPENSE, category_id)

    def calculate_remaining_budget(self, category_id: str) -> Money:
        """Budget left in a category; 0 if the category does not exist."""
        category = self.get_category_by_id(category_id)
        if category is None:
            return Money(0.0)
        return calculate_remaining(category.budget, self.calculate_expense(category_id))

    def calculate_usage(self, category_id: str) -> float:
        """Percentage of a category's budget spent; 0 if missing or unbudgeted."""
        category = self.get_category_by_id(category_id)
        if category is None:
            return 0.0
        return calculate_usage_percentage(self.calculate_expense(category_id), category.budget)

    def calculate_total_income(self) -> Money:
        # Summed per category, so income assigned to a missing category is not counted
        return Money(sum(self.calculate_income(c.id) for c in self.categories))

    def calculate_total_expense(self) -> Money:
        return Money(sum(self.calculate_expense(c.id) for c in self.categories))

    def calculate_total_remaining_budget(self) -> Money:
        return Money(sum(self.calculate_remaining_budget(c.id) for c in self.categories))

    def calculate_saving_rate(self) -> float:
        """Share of income not spent, as a percentage. 0 without income."""
        total_income = self.calculate_total_income()
        if total_income == 0:
            return 0.0
        return ((total_income - self.calculate_total_expense()) / total_income) * 100


def income_category(created: datetime) -> Category:
    return Category(INCOME_CATEGORY_ID, created, "Income", "#ffffff", Money(0.0))


def empty_ledger(created: datetime | None = None) -> Ledger:
    """Build a new ledger holding only the reserved income category.

    Args:
        created: Creation time of the income category. Defaults to now.

    Returns:
        Ledger with no transactions and category "0".
    """
    if created is None:
        created = datetime.now()
    return Ledger().with_categories([income_category(created)])


def sample_ledger() -> Ledger:
    """Build a ledger seeded with example categories and transactions."""
    created = datetime(2025, 10, 1)
    spent = datetime(2025, 10, 15)

    categories = [
        income_category(created),
        Category(CategoryId("1"), created, "Transportation", "#ef4444", Money(500.0)),
        Category(CategoryId("2"), created, "Entertainment", "#f97316", Money(200.0)),
    ]
    transactions = [
        Transaction(TransactionId("1"), spent, Money(85.50), TransactionType.EXPENSE, "Chevron", CategoryId("1")),
        Transaction(TransactionId("2"), spent, Money(40.00), TransactionType.EXPENSE, "Game", CategoryId("2")),
        Transaction(TransactionId("3"), spent, Money(40.00), TransactionType.EXPENSE, "Movie Theater", CategoryId("2")),
        Transaction(TransactionId("4"), spent, Money(1200.00), TransactionType.INCOME, "Salary", INCOME_CATEGORY_ID),
    ]
    return Ledger().with_categories(categories).with_transactions(transactions)
