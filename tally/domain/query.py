"""Transaction search mini-language.

A query is free text, optionally using one of these prefixes:

- ``@cat:<text>``: category name contains text
- ``@type:<text>``: transaction type equals text
- ``@date:<month>-<year>``: transaction falls in that month (1-12) and year

Matching is case-insensitive. Every matcher runs against the query and the
results are OR'd, whichever prefix was typed, so plain text can match on
description, category name, type or month alike.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from tally.dates import month_year_token
from tally.domain.ledger import Ledger
from tally.domain.models import TransactionType
from tally.domain.transactions import Transaction

CATEGORY_PREFIX = "@cat:"
TYPE_PREFIX = "@type:"
DATE_PREFIX = "@date:"


@dataclass(frozen=True)
class MonthYear:
    """A calendar month; month is 1-12."""

    month: int
    year: int


def normalize_query(query: str) -> str:
    return query.lower().strip()


def strip_prefix(query: str, prefix: str) -> str:
    """Remove the first occurrence of a prefix and trim whitespace."""
    return query.replace(prefix, "", 1).strip()


def parse_month_year(text: str) -> MonthYear | None:
    """Parse "<month>-<year>" text.

    Args:
        text: Text such as "12-2024".

    Returns:
        MonthYear, or None if the text is not two dash-separated integers.
    """
    parts = text.split("-")
    if len(parts) < 2:
        return None

    try:
        month = int(parts[0])
        year = int(parts[1])
    except ValueError:
        return None

    return MonthYear(month=month, year=year)


def description_matches(transaction: Transaction, query: str) -> bool:
    return query in transaction.description.lower()


def category_matches(transaction: Transaction, query: str, ledger: Ledger) -> bool:
    category = ledger.get_category_by_id(transaction.category_id)
    if category is None:
        return False
    return strip_prefix(query, CATEGORY_PREFIX) in category.name.lower()


def type_matches(transaction: Transaction, query: str) -> bool:
    return transaction.type.value == strip_prefix(query, TYPE_PREFIX)


def date_matches(transaction: Transaction, query: str) -> bool:
    period = parse_month_year(strip_prefix(query, DATE_PREFIX))
    if period is None:
        return False
    return transaction.date.month == period.month and transaction.date.year == period.year


def matches_query(transaction: Transaction, query: str, ledger: Ledger) -> bool:
    """Check a transaction against a search query.

    Args:
        transaction: Transaction to test.
        query: Raw query as typed by the user.
        ledger: Ledger used to resolve category names.

    Returns:
        True if any matcher accepts the transaction, or the query is blank.
    """
    normalized = normalize_query(query)
    if not normalized:
        return True

    return (
        description_matches(transaction, normalized)
        or category_matches(transaction, normalized, ledger)
        or type_matches(transaction, normalized)
        or date_matches(transaction, normalized)
    )


def filter_transactions(transactions: Iterable[Transaction], query: str, ledger: Ledger) -> tuple[Transaction, ...]:
    """Select the transactions matching a search query."""
    return tuple(t for t in transactions if matches_query(t, query, ledger))


def current_month_query(today: date) -> str:
    return f"{DATE_PREFIX}{month_year_token(today)}"


def category_query(name: str) -> str:
    return f"{CATEGORY_PREFIX}{name}"


def type_query(transaction_type: TransactionType) -> str:
    return f"{TYPE_PREFIX}{transaction_type.value}"
