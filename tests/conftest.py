"""Shared fixtures for tally tests."""

from collections.abc import Iterator
from datetime import datetime
from pathlib import Path

import pytest
import structlog

from tally.domain.categories import Category
from tally.domain.ledger import Ledger
from tally.domain.models import INCOME_CATEGORY_ID, CategoryId, Money, TransactionId, TransactionType
from tally.domain.transactions import Transaction


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo logging configuration made by CLI invocations."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config and data directories at a temporary location."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    return tmp_path


def make_transaction(
    id: str,
    amount: float,
    type: TransactionType = TransactionType.EXPENSE,
    category_id: str = "1",
    description: str = "Test",
    date: datetime = datetime(2024, 12, 15),
) -> Transaction:
    return Transaction(
        id=TransactionId(id),
        date=date,
        amount=Money(amount),
        type=type,
        description=description,
        category_id=CategoryId(category_id),
    )


def make_category(id: str, name: str, budget: float, color: str = "#ef4444") -> Category:
    return Category(
        id=CategoryId(id),
        date=datetime(2024, 12, 1),
        name=name,
        color=color,
        budget=Money(budget),
    )


@pytest.fixture
def ledger() -> Ledger:
    """Income and transportation categories with one expense and one income."""
    return Ledger(
        categories=(
            make_category(INCOME_CATEGORY_ID, "Income", 0),
            make_category("1", "Transportation", 500),
        ),
        transactions=(
            make_transaction("1", 85.50, category_id="1", description="Chevron"),
            make_transaction("2", 1200, TransactionType.INCOME, INCOME_CATEGORY_ID, "Salary"),
        ),
    )
