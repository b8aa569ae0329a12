"""Ordering of transaction lists for display."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from tally.domain.transactions import Transaction


class SortField(StrEnum):
    DATE = "date"
    DESCRIPTION = "description"
    CATEGORY = "category"
    TYPE = "type"
    AMOUNT = "amount"


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortDirection":
        return SortDirection.DESC if self == SortDirection.ASC else SortDirection.ASC


SORT_KEYS: dict[SortField, Callable[[Transaction], Any]] = {
    SortField.DATE: lambda t: t.date,
    SortField.DESCRIPTION: lambda t: t.description.lower(),
    SortField.CATEGORY: lambda t: t.category_id.lower(),
    SortField.TYPE: lambda t: t.type.value,
    SortField.AMOUNT: lambda t: t.amount,
}


def sort_transactions(
    transactions: Iterable[Transaction],
    field: SortField = SortField.DATE,
    direction: SortDirection = SortDirection.DESC,
) -> tuple[Transaction, ...]:
    """Sort transactions by one field.

    The sort is stable in both directions: transactions with equal keys keep
    their relative order.

    Args:
        transactions: Transactions to sort.
        field: Field to sort by.
        direction: Ascending or descending.

    Returns:
        New tuple of sorted transactions.
    """
    return tuple(sorted(transactions, key=SORT_KEYS[field], reverse=direction == SortDirection.DESC))


@dataclass(frozen=True)
class SortState:
    """Current sort column and direction of a transaction table."""

    field: SortField = SortField.DATE
    direction: SortDirection = SortDirection.DESC

    def toggle(self, field: SortField) -> "SortState":
        """Select a column: the same column flips direction, a new one starts ascending."""
        if field == self.field:
            return SortState(field=field, direction=self.direction.toggled())
        return SortState(field=field, direction=SortDirection.ASC)

    def apply(self, transactions: Iterable[Transaction]) -> tuple[Transaction, ...]:
        return sort_transactions(transactions, self.field, self.direction)
