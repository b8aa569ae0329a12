"""Tests for tally.domain.analytics pure functions."""

from datetime import datetime

import pytest

from tally.domain.analytics import (
    InsightKind,
    budget_vs_actual,
    calculate_transaction_saving_rate,
    expense_breakdown,
    monthly_trends,
    spending_insights,
)
from tally.domain.categories import Category
from tally.domain.ledger import Ledger, sample_ledger
from tally.domain.models import INCOME_CATEGORY_ID, CategoryId, Money, TransactionId, TransactionType
from tally.domain.transactions import Transaction


def txn(id: str, when: datetime, amount: float, type: TransactionType = TransactionType.EXPENSE) -> Transaction:
    category_id = INCOME_CATEGORY_ID if type == TransactionType.INCOME else CategoryId("1")
    return Transaction(TransactionId(id), when, Money(amount), type, f"Item {id}", category_id)


class TestBudgetVsActual:
    """Tests for budget_vs_actual."""

    def test_skips_income_category(self) -> None:
        reports = budget_vs_actual(sample_ledger())

        assert [r.name for r in reports] == ["Transportation", "Entertainment"]

    def test_values(self) -> None:
        report = budget_vs_actual(sample_ledger())[1]

        assert report.budget == 200
        assert report.spent == 80
        assert report.remaining == 120
        assert report.usage == pytest.approx(40.0)
        assert not report.over_budget

    def test_remaining_clamped_at_zero(self) -> None:
        ledger = Ledger(
            categories=(Category(CategoryId("1"), datetime(2024, 1, 1), "Food", "#fff", Money(50)),),
            transactions=(txn("1", datetime(2024, 1, 2), 80),),
        )

        report = budget_vs_actual(ledger)[0]

        assert report.remaining == 0
        assert report.over_budget


class TestExpenseBreakdown:
    """Tests for expense_breakdown."""

    def test_only_categories_with_spending(self) -> None:
        ledger = sample_ledger().remove_category_transactions("2")

        assert [r.name for r in expense_breakdown(ledger)] == ["Transportation"]


class TestMonthlyTrends:
    """Tests for monthly_trends."""

    def test_groups_by_month_oldest_first(self) -> None:
        transactions = [
            txn("1", datetime(2025, 2, 3), 100),
            txn("2", datetime(2024, 12, 1), 50),
            txn("3", datetime(2025, 2, 20), 1000, TransactionType.INCOME),
        ]

        trends = monthly_trends(transactions)

        assert [t.month for t in trends] == ["2024-12", "2025-02"]
        assert trends[1].income == 1000
        assert trends[1].expenses == 100
        assert trends[1].savings == 900
        assert trends[0].savings == -50

    def test_keeps_last_months(self) -> None:
        transactions = [txn(str(m), datetime(2024, m, 1), 10) for m in range(1, 13)]

        trends = monthly_trends(transactions, limit=6)

        assert [t.month for t in trends] == ["2024-07", "2024-08", "2024-09", "2024-10", "2024-11", "2024-12"]

    def test_empty(self) -> None:
        assert monthly_trends([]) == []


class TestSpendingInsights:
    """Tests for spending_insights."""

    def test_sample_ledger(self) -> None:
        insights = spending_insights(sample_ledger())

        assert [i.title for i in insights] == ["Highest Spending", "Great Savings Rate"]
        assert insights[0].message == "Transportation: $85.50"
        assert insights[1].kind == InsightKind.SUCCESS

    def test_over_budget_and_low_savings(self) -> None:
        ledger = Ledger(
            categories=(
                Category(INCOME_CATEGORY_ID, datetime(2024, 1, 1), "Income", "#fff", Money(0)),
                Category(CategoryId("1"), datetime(2024, 1, 1), "Food", "#fff", Money(50)),
            ),
            transactions=(
                txn("1", datetime(2024, 1, 2), 95),
                txn("2", datetime(2024, 1, 3), 100, TransactionType.INCOME),
            ),
        )

        insights = spending_insights(ledger, "£")

        assert insights[0].kind == InsightKind.WARNING
        assert insights[0].message == "1 categories are over budget"
        assert insights[1].message == "Food: £95.00"
        assert insights[2].title == "Low Savings Rate"

    def test_middle_savings_rate_has_no_insight(self) -> None:
        ledger = Ledger(transactions=(txn("1", datetime(2024, 1, 2), 85), txn("2", datetime(2024, 1, 3), 100, TransactionType.INCOME)))

        assert spending_insights(ledger) == []


class TestCalculateTransactionSavingRate:
    """Tests for calculate_transaction_saving_rate."""

    def test_without_income(self) -> None:
        assert calculate_transaction_saving_rate([txn("1", datetime(2024, 1, 1), 10)]) == 0.0

    def test_rate(self) -> None:
        transactions = [
            txn("1", datetime(2024, 1, 1), 25),
            txn("2", datetime(2024, 1, 1), 100, TransactionType.INCOME),
        ]

        assert calculate_transaction_saving_rate(transactions) == pytest.approx(75.0)
