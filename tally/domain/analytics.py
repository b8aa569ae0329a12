"""Pure functions for budget analytics and spending insights.

This module contains the functional core for analytics:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations
- Easy to test
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from tally.dates import month_of
from tally.domain.ledger import Ledger
from tally.domain.models import INCOME_CATEGORY_ID, CategoryId, Money, Month, TransactionType
from tally.domain.transactions import Transaction, format_money_display

LOW_SAVINGS_RATE = 10.0
HIGH_SAVINGS_RATE = 20.0


@dataclass(frozen=True)
class CategoryBudgetReport:
    """Immutable budget-vs-actual data for one category."""

    category_id: CategoryId
    name: str
    color: str
    budget: Money
    spent: Money
    remaining: Money  # Never below 0
    usage: float

    @property
    def over_budget(self) -> bool:
        return self.spent > self.budget


@dataclass(frozen=True)
class MonthlyTrend:
    """Immutable income and expense totals for one month."""

    month: Month
    income: Money
    expenses: Money

    @property
    def savings(self) -> Money:
        return Money(self.income - self.expenses)


class InsightKind(StrEnum):
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


@dataclass(frozen=True)
class Insight:
    """Immutable spending insight."""

    kind: InsightKind
    title: str
    message: str


def budget_vs_actual(ledger: Ledger) -> list[CategoryBudgetReport]:
    """Compare budget with spending for every expense category.

    The income category is skipped.

    Args:
        ledger: Ledger to report on.

    Returns:
        One report per category, in ledger order.
    """
    reports: list[CategoryBudgetReport] = []

    for category in ledger.categories:
        if category.id == INCOME_CATEGORY_ID:
            continue

        spent = ledger.calculate_expense(category.id)
        reports.append(
            CategoryBudgetReport(
                category_id=category.id,
                name=category.name,
                color=category.color,
                budget=category.budget,
                spent=spent,
                remaining=Money(max(0.0, category.budget - spent)),
                usage=ledger.calculate_usage(category.id),
            )
        )

    return reports


def expense_breakdown(ledger: Ledger) -> list[CategoryBudgetReport]:
    """Budget reports for categories with any spending."""
    return [report for report in budget_vs_actual(ledger) if report.spent > 0]


def monthly_trends(transactions: Iterable[Transaction], limit: int = 6) -> list[MonthlyTrend]:
    """Total income and expenses per month.

    Args:
        transactions: Transactions to group.
        limit: Number of most recent months to keep.

    Returns:
        Trends ordered oldest month first.
    """
    totals: dict[Month, tuple[float, float]] = {}

    for transaction in transactions:
        month = month_of(transaction.date)
        income, expenses = totals.get(month, (0.0, 0.0))
        if transaction.type == TransactionType.INCOME:
            income += transaction.amount
        else:
            expenses += transaction.amount
        totals[month] = (income, expenses)

    trends = [
        MonthlyTrend(month=month, income=Money(income), expenses=Money(expenses))
        for month, (income, expenses) in sorted(totals.items())
    ]

    if limit <= 0:
        return []
    return trends[-limit:]


def calculate_transaction_saving_rate(transactions: Iterable[Transaction]) -> float:
    """Savings rate over raw transactions, regardless of category.

    Returns:
        Percentage of income not spent, or 0 without income.
    """
    income = 0.0
    expenses = 0.0
    for transaction in transactions:
        if transaction.type == TransactionType.INCOME:
            income += transaction.amount
        else:
            expenses += transaction.amount

    if income <= 0:
        return 0.0
    return ((income - expenses) / income) * 100


def spending_insights(ledger: Ledger, currency_symbol: str = "$") -> list[Insight]:
    """Derive short spending insights from a ledger.

    Args:
        ledger: Ledger to analyse.
        currency_symbol: Symbol used in messages.

    Returns:
        Insights in display order.
    """
    insights: list[Insight] = []
    reports = budget_vs_actual(ledger)

    over_budget = [report for report in reports if report.over_budget]
    if over_budget:
        insights.append(
            Insight(
                kind=InsightKind.WARNING,
                title="Over Budget Alert",
                message=f"{len(over_budget)} categories are over budget",
            )
        )

    if reports:
        # First category wins ties
        highest = max(reports, key=lambda report: report.spent)
        if highest.spent > 0:
            insights.append(
                Insight(
                    kind=InsightKind.INFO,
                    title="Highest Spending",
                    message=f"{highest.name}: {format_money_display(highest.spent, currency_symbol)}",
                )
            )

    savings_rate = calculate_transaction_saving_rate(ledger.transactions)
    if savings_rate < LOW_SAVINGS_RATE:
        insights.append(
            Insight(
                kind=InsightKind.WARNING,
                title="Low Savings Rate",
                message=f"Consider increasing savings to at least {LOW_SAVINGS_RATE:.0f}%",
            )
        )
    elif savings_rate >= HIGH_SAVINGS_RATE:
        insights.append(
            Insight(
                kind=InsightKind.SUCCESS,
                title="Great Savings Rate",
                message=f"You're saving {savings_rate:.1f}% of your income",
            )
        )

    return insights
