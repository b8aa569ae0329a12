"""Tests for tally.domain.sorting."""

from datetime import datetime

import pytest

from tally.domain.models import CategoryId, Money, TransactionId, TransactionType
from tally.domain.sorting import SortDirection, SortField, SortState, sort_transactions
from tally.domain.transactions import Transaction


def txn(
    id: str,
    when: datetime,
    amount: float,
    description: str,
    category_id: str,
    type: TransactionType = TransactionType.EXPENSE,
) -> Transaction:
    return Transaction(TransactionId(id), when, Money(amount), type, description, CategoryId(category_id))


@pytest.fixture
def transactions() -> list[Transaction]:
    return [
        txn("1", datetime(2024, 12, 15), 85.50, "chevron", "1"),
        txn("2", datetime(2024, 11, 2), 40.00, "Movie Theater", "2"),
        txn("3", datetime(2025, 1, 9), 1200.00, "Salary", "0", TransactionType.INCOME),
        txn("4", datetime(2024, 12, 15), 40.00, "arcade", "2"),
    ]


def ids(transactions: tuple[Transaction, ...]) -> list[str]:
    return [t.id for t in transactions]


class TestSortTransactions:
    """Tests for sort_transactions."""

    def test_date_ascending(self, transactions: list[Transaction]) -> None:
        assert ids(sort_transactions(transactions, SortField.DATE, SortDirection.ASC)) == ["2", "1", "4", "3"]

    def test_date_descending_keeps_tie_order(self, transactions: list[Transaction]) -> None:
        """Should keep equal dates in their original order."""
        assert ids(sort_transactions(transactions, SortField.DATE, SortDirection.DESC)) == ["3", "1", "4", "2"]

    def test_description_is_case_insensitive(self, transactions: list[Transaction]) -> None:
        assert ids(sort_transactions(transactions, SortField.DESCRIPTION, SortDirection.ASC)) == ["4", "1", "2", "3"]

    def test_amount_ascending_stable(self, transactions: list[Transaction]) -> None:
        assert ids(sort_transactions(transactions, SortField.AMOUNT, SortDirection.ASC)) == ["2", "4", "1", "3"]

    def test_category_by_id(self, transactions: list[Transaction]) -> None:
        assert ids(sort_transactions(transactions, SortField.CATEGORY, SortDirection.ASC)) == ["3", "1", "2", "4"]

    def test_type(self, transactions: list[Transaction]) -> None:
        assert ids(sort_transactions(transactions, SortField.TYPE, SortDirection.DESC)) == ["3", "1", "2", "4"]

    def test_idempotent(self, transactions: list[Transaction]) -> None:
        """Should not change an already sorted list."""
        once = sort_transactions(transactions, SortField.AMOUNT, SortDirection.ASC)

        assert sort_transactions(once, SortField.AMOUNT, SortDirection.ASC) == once

    def test_toggle_reverses_distinct_keys(self, transactions: list[Transaction]) -> None:
        ascending = sort_transactions(transactions, SortField.DESCRIPTION, SortDirection.ASC)
        descending = sort_transactions(ascending, SortField.DESCRIPTION, SortDirection.DESC)

        assert descending == tuple(reversed(ascending))

    def test_does_not_modify_input(self, transactions: list[Transaction]) -> None:
        original = list(transactions)

        sort_transactions(transactions, SortField.AMOUNT, SortDirection.DESC)

        assert transactions == original

    def test_defaults_to_newest_first(self, transactions: list[Transaction]) -> None:
        assert ids(sort_transactions(transactions))[0] == "3"


class TestSortState:
    """Tests for SortState.toggle."""

    def test_default(self) -> None:
        state = SortState()

        assert state.field == SortField.DATE
        assert state.direction == SortDirection.DESC

    def test_same_field_flips_direction(self) -> None:
        state = SortState().toggle(SortField.DATE)

        assert state == SortState(SortField.DATE, SortDirection.ASC)
        assert state.toggle(SortField.DATE) == SortState(SortField.DATE, SortDirection.DESC)

    def test_new_field_starts_ascending(self) -> None:
        state = SortState(SortField.DATE, SortDirection.DESC).toggle(SortField.AMOUNT)

        assert state == SortState(SortField.AMOUNT, SortDirection.ASC)

    def test_apply(self, transactions: list[Transaction]) -> None:
        state = SortState(SortField.AMOUNT, SortDirection.DESC)

        assert ids(state.apply(transactions)) == ["3", "1", "2", "4"]
