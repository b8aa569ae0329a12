"""Summary and trends commands for viewing budget data."""

from rich.table import Table

from tally.commands.common import console, currency_symbol, open_ledger
from tally.dates import month_label
from tally.domain.analytics import InsightKind, budget_vs_actual, monthly_trends, spending_insights
from tally.domain.transactions import format_money_display

INSIGHT_STYLES = {
    InsightKind.WARNING: "yellow",
    InsightKind.INFO: "cyan",
    InsightKind.SUCCESS: "green",
}


def format_usage_with_color(percentage: float) -> str:
    """Format budget usage with color based on percentage.

    Args:
        percentage: Budget usage percentage.

    Returns:
        Colored string for usage display.
    """
    usage_text = f"{percentage:.0f}%"
    if percentage > 100:
        return f"[red]{usage_text}[/red]"
    elif percentage > 90:
        return f"[yellow]{usage_text}[/yellow]"
    else:
        return f"[green]{usage_text}[/green]"


def format_signed(amount: float, symbol: str) -> str:
    if amount < 0:
        return f"[red]{format_money_display(amount, symbol)}[/red]"
    return format_money_display(amount, symbol)


def summary_command() -> None:
    """Show budget usage per category, totals and savings rate."""
    ledger, _ = open_ledger()
    symbol = currency_symbol()

    reports = budget_vs_actual(ledger)

    if reports:
        table = Table(title="Budgets")
        table.add_column("Category", style="magenta")
        table.add_column("Budget", justify="right")
        table.add_column("Spent", justify="right")
        table.add_column("Remaining", justify="right")
        table.add_column("Used", justify="right")

        for report in reports:
            table.add_row(
                report.name,
                format_money_display(report.budget, symbol),
                format_money_display(report.spent, symbol),
                format_signed(ledger.calculate_remaining_budget(report.category_id), symbol),
                format_usage_with_color(report.usage),
            )

        console.print(table)
    else:
        console.print("[yellow]No budget categories yet[/yellow]")

    total_income = ledger.calculate_total_income()
    total_expense = ledger.calculate_total_expense()

    console.print("\n[bold]Totals[/bold]")
    console.print(f"  Income:           [green]{format_money_display(total_income, symbol)}[/green]")
    console.print(f"  Expenses:         [red]{format_money_display(total_expense, symbol)}[/red]")
    console.print(f"  Remaining budget: {format_signed(ledger.calculate_total_remaining_budget(), symbol)}")
    console.print(f"  Savings rate:     {ledger.calculate_saving_rate():.1f}%")


def trends_command(months: int = 6) -> None:
    """Show monthly income and expenses with spending insights.

    Args:
        months: Number of most recent months to show.
    """
    ledger, _ = open_ledger()
    symbol = currency_symbol()

    trends = monthly_trends(ledger.transactions, limit=months)

    if trends:
        table = Table(title=f"Monthly Trends (last {len(trends)} months)")
        table.add_column("Month", style="cyan")
        table.add_column("Income", justify="right", style="green")
        table.add_column("Expenses", justify="right", style="red")
        table.add_column("Savings", justify="right")

        for trend in trends:
            table.add_row(
                month_label(trend.month),
                format_money_display(trend.income, symbol),
                format_money_display(trend.expenses, symbol),
                format_signed(trend.savings, symbol),
            )

        console.print(table)
    else:
        console.print("[yellow]No transactions found[/yellow]")

    insights = spending_insights(ledger, symbol)
    if insights:
        console.print("\n[bold]Insights[/bold]")
        for insight in insights:
            style = INSIGHT_STYLES[insight.kind]
            console.print(f"  [{style}]{insight.title}[/{style}]: {insight.message}")
