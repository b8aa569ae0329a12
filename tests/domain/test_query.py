"""Tests for the transaction search mini-language."""

from datetime import date, datetime

import pytest

from tally.domain.categories import Category
from tally.domain.ledger import Ledger
from tally.domain.models import INCOME_CATEGORY_ID, CategoryId, Money, TransactionId, TransactionType
from tally.domain.query import (
    MonthYear,
    category_query,
    current_month_query,
    filter_transactions,
    matches_query,
    parse_month_year,
    type_query,
)
from tally.domain.transactions import Transaction


@pytest.fixture
def search_ledger() -> Ledger:
    created = datetime(2024, 1, 1)
    return Ledger(
        categories=(
            Category(INCOME_CATEGORY_ID, created, "Income", "#ffffff", Money(0)),
            Category(CategoryId("1"), created, "Transportation", "#ef4444", Money(500)),
            Category(CategoryId("2"), created, "Entertainment", "#f97316", Money(200)),
        ),
        transactions=(
            Transaction(
                TransactionId("1"),
                datetime(2024, 12, 15),
                Money(85.50),
                TransactionType.EXPENSE,
                "Chevron",
                CategoryId("1"),
            ),
            Transaction(
                TransactionId("2"),
                datetime(2025, 1, 3),
                Money(40),
                TransactionType.EXPENSE,
                "Movie Theater",
                CategoryId("2"),
            ),
            Transaction(
                TransactionId("3"),
                datetime(2024, 12, 31),
                Money(1200),
                TransactionType.INCOME,
                "Salary",
                INCOME_CATEGORY_ID,
            ),
        ),
    )


def ids(ledger: Ledger, query: str) -> list[str]:
    return [t.id for t in filter_transactions(ledger.transactions, query, ledger)]


class TestParseMonthYear:
    """Tests for parse_month_year."""

    def test_valid(self) -> None:
        assert parse_month_year("12-2024") == MonthYear(month=12, year=2024)

    def test_single_digit_month(self) -> None:
        assert parse_month_year("1-2025") == MonthYear(month=1, year=2025)

    def test_missing_dash(self) -> None:
        assert parse_month_year("122024") is None

    def test_non_numeric(self) -> None:
        assert parse_month_year("dec-2024") is None
        assert parse_month_year("chevron") is None

    def test_empty(self) -> None:
        assert parse_month_year("") is None


class TestMatchesQuery:
    """Tests for matches_query on the Chevron transaction."""

    @pytest.fixture
    def chevron(self, search_ledger: Ledger) -> Transaction:
        transaction = search_ledger.get_transaction_by_id("1")
        assert transaction is not None
        return transaction

    def test_category_prefix(self, chevron: Transaction, search_ledger: Ledger) -> None:
        assert matches_query(chevron, "@cat:Transportation", search_ledger)

    def test_type_prefix_excludes_other_type(self, chevron: Transaction, search_ledger: Ledger) -> None:
        assert not matches_query(chevron, "@type:income", search_ledger)

    def test_date_prefix_same_month(self, chevron: Transaction, search_ledger: Ledger) -> None:
        assert matches_query(chevron, "@date:12-2024", search_ledger)

    def test_date_prefix_other_month(self, chevron: Transaction, search_ledger: Ledger) -> None:
        assert not matches_query(chevron, "@date:1-2025", search_ledger)

    def test_empty_query(self, chevron: Transaction, search_ledger: Ledger) -> None:
        assert matches_query(chevron, "", search_ledger)
        assert matches_query(chevron, "   ", search_ledger)

    def test_case_insensitive(self, chevron: Transaction, search_ledger: Ledger) -> None:
        assert matches_query(chevron, "  CHEV  ", search_ledger)
        assert matches_query(chevron, "@CAT:transport", search_ledger)

    def test_dangling_category_never_matches_by_name(self, search_ledger: Ledger) -> None:
        """Should skip the category check when the category is missing."""
        orphan = Transaction(
            TransactionId("9"), datetime(2020, 5, 5), Money(1), TransactionType.EXPENSE, "Gift", CategoryId("42")
        )

        assert not matches_query(orphan, "@cat:", search_ledger)
        assert matches_query(orphan, "gift", search_ledger)


class TestFilterTransactions:
    """Tests for filter_transactions."""

    def test_blank_query_matches_all(self, search_ledger: Ledger) -> None:
        assert ids(search_ledger, "") == ["1", "2", "3"]

    def test_plain_text_matches_description(self, search_ledger: Ledger) -> None:
        assert ids(search_ledger, "movie") == ["2"]

    def test_plain_text_matches_category_name(self, search_ledger: Ledger) -> None:
        assert ids(search_ledger, "entertain") == ["2"]

    def test_plain_text_matches_type(self, search_ledger: Ledger) -> None:
        assert ids(search_ledger, "income") == ["3"]

    def test_plain_text_matches_month(self, search_ledger: Ledger) -> None:
        """Should treat a bare month-year as a date filter."""
        assert ids(search_ledger, "12-2024") == ["1", "3"]

    def test_type_prefix(self, search_ledger: Ledger) -> None:
        assert ids(search_ledger, "@type:expense") == ["1", "2"]

    def test_malformed_date_matches_nothing(self, search_ledger: Ledger) -> None:
        assert ids(search_ledger, "@date:13/2024") == []

    def test_category_prefix_also_checks_other_matchers(self, search_ledger: Ledger) -> None:
        """Should OR every matcher even when a prefix is given."""
        # "in" is in "Income" and "Entertainment" by name
        assert ids(search_ledger, "@cat:in") == ["2", "3"]


class TestShortcuts:
    """Tests for query shortcut builders."""

    def test_current_month(self) -> None:
        assert current_month_query(date(2025, 3, 9)) == "@date:3-2025"

    def test_category(self) -> None:
        assert category_query("Entertainment") == "@cat:Entertainment"

    def test_type(self) -> None:
        assert type_query(TransactionType.INCOME) == "@type:income"

    def test_current_month_round_trip(self, search_ledger: Ledger) -> None:
        assert ids(search_ledger, current_month_query(date(2025, 1, 20))) == ["2"]
