"""Form validation for new and edited records.

The ledger accepts whatever it is given; callers run these checks before
building a Category or Transaction. Each check returns (is_valid, message)
with the first problem found.
"""

import math
from datetime import datetime


def validate_transaction_form(
    description: str | None,
    category_id: str | None,
    amount: float | None,
    date: datetime | None,
) -> tuple[bool, str | None]:
    """Validate transaction form input.

    Args:
        description: Transaction description.
        category_id: Selected category id.
        amount: Transaction amount.
        date: Transaction date.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if not description:
        return False, "Please enter a description"

    if not category_id:
        return False, "Please select a category"

    if not amount or not math.isfinite(amount):
        return False, "Please enter an amount"

    if amount <= 0:
        return False, "Please enter an amount that is greater than zero"

    if date is None:
        return False, "Please select a date"

    return True, None


def validate_category_form(name: str | None, budget: float | None) -> tuple[bool, str | None]:
    """Validate category form input.

    Args:
        name: Category name.
        budget: Monthly budget.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if not name or not name.strip():
        return False, "Please enter a name"

    if budget is None or not math.isfinite(budget):
        return False, "Please enter a budget"

    if budget <= 0:
        return False, "Please enter a budget that is greater than zero"

    return True, None
