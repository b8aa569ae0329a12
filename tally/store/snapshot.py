"""Ledger snapshot file: a TOML document holding categories and transactions."""

import tomllib
from datetime import datetime
from pathlib import Path
from typing import Any

import structlog
import tomli_w

from tally.config import get_ledger_path
from tally.domain.categories import Category
from tally.domain.ledger import Ledger
from tally.domain.models import CategoryId, Money, TransactionId, TransactionType
from tally.domain.transactions import Transaction

logger = structlog.get_logger(__name__)


def _as_datetime(value: Any) -> datetime:
    """Read a snapshot date as a naive datetime, keeping its wall-clock time."""
    if not isinstance(value, datetime):
        value = datetime.fromisoformat(str(value))
    if value.tzinfo is not None:
        value = value.replace(tzinfo=None)
    return value


def category_to_record(category: Category) -> dict[str, Any]:
    return {
        "id": category.id,
        "date": category.date,
        "name": category.name,
        "color": category.color,
        "budget": float(category.budget),
    }


def category_from_record(record: dict[str, Any]) -> Category:
    """Build a Category from a snapshot record.

    Raises:
        ValueError: If a field is missing or has the wrong shape.
    """
    try:
        return Category(
            id=CategoryId(str(record["id"])),
            date=_as_datetime(record["date"]),
            name=str(record["name"]),
            color=str(record["color"]),
            budget=Money(float(record["budget"])),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid category record {record!r}: {e}") from e


def transaction_to_record(transaction: Transaction) -> dict[str, Any]:
    return {
        "id": transaction.id,
        "date": transaction.date,
        "amount": float(transaction.amount),
        "type": transaction.type.value,
        "description": transaction.description,
        "category_id": transaction.category_id,
    }


def transaction_from_record(record: dict[str, Any]) -> Transaction:
    """Build a Transaction from a snapshot record.

    Raises:
        ValueError: If a field is missing or has the wrong shape.
    """
    try:
        return Transaction(
            id=TransactionId(str(record["id"])),
            date=_as_datetime(record["date"]),
            amount=Money(float(record["amount"])),
            type=TransactionType(record["type"]),
            description=str(record["description"]),
            category_id=CategoryId(str(record["category_id"])),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid transaction record {record!r}: {e}") from e


def ledger_to_document(ledger: Ledger) -> dict[str, Any]:
    """Convert a ledger into a TOML-serialisable document."""
    return {
        "categories": [category_to_record(c) for c in ledger.categories],
        "transactions": [transaction_to_record(t) for t in ledger.transactions],
    }


def ledger_from_document(document: dict[str, Any]) -> Ledger:
    """Build a ledger from a parsed snapshot document.

    Raises:
        ValueError: If any record is invalid.
    """
    categories = [category_from_record(r) for r in document.get("categories", [])]
    transactions = [transaction_from_record(r) for r in document.get("transactions", [])]
    return Ledger().with_categories(categories).with_transactions(transactions)


def ledger_exists(ledger_path: Path | None = None) -> bool:
    if ledger_path is None:
        ledger_path = get_ledger_path()
    return ledger_path.exists()


def load_ledger(ledger_path: Path | None = None) -> Ledger:
    """Load the ledger snapshot.

    Args:
        ledger_path: Path to the snapshot. If None, uses the configured location.

    Returns:
        Ledger read from the file.

    Raises:
        FileNotFoundError: If the snapshot doesn't exist.
        ValueError: If the snapshot is not valid TOML or holds invalid records.
    """
    if ledger_path is None:
        ledger_path = get_ledger_path()

    with open(ledger_path, "rb") as f:
        try:
            document = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Could not parse ledger file {ledger_path}: {e}") from e

    ledger = ledger_from_document(document)
    logger.debug(
        "ledger_loaded",
        path=str(ledger_path),
        categories=ledger.category_count(),
        transactions=ledger.transaction_count(),
    )
    return ledger


def save_ledger(ledger: Ledger, ledger_path: Path | None = None) -> None:
    """Write a ledger snapshot, replacing the previous one.

    Args:
        ledger: Ledger to write.
        ledger_path: Path to the snapshot. If None, uses the configured location.
    """
    if ledger_path is None:
        ledger_path = get_ledger_path()

    ledger_path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path = ledger_path.with_name(ledger_path.name + ".tmp")
    try:
        with open(tmp_path, "wb") as f:
            tomli_w.dump(ledger_to_document(ledger), f)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    tmp_path.replace(ledger_path)

    logger.debug(
        "ledger_saved",
        path=str(ledger_path),
        categories=ledger.category_count(),
        transactions=ledger.transaction_count(),
    )
