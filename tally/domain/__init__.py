"""Domain models and types for tally.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from tally.domain.models import INCOME_CATEGORY_ID, CategoryId, Money, Month, TransactionId, TransactionType

__all__ = ["INCOME_CATEGORY_ID", "CategoryId", "Money", "Month", "TransactionId", "TransactionType"]
