"""Domain type definitions for tally.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in major currency units (e.g. 85.50)
- Month: Month in YYYY-MM format
- CategoryId: Primary key of a category
- TransactionId: Primary key of a transaction
"""

from enum import StrEnum
from typing import NewType

# Amounts are plain floats in major units; the ledger never rounds them
Money = NewType("Money", float)

# Month is always in YYYY-MM format (e.g., "2025-01")
Month = NewType("Month", str)

CategoryId = NewType("CategoryId", str)

TransactionId = NewType("TransactionId", str)

# Reserved category holding every income transaction
INCOME_CATEGORY_ID = CategoryId("0")


class TransactionType(StrEnum):
    """Direction of a transaction."""

    EXPENSE = "expense"
    INCOME = "income"
