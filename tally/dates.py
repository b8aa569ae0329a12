"""Date utilities for tally.

Pure functions for month keys and labels.
"""

from datetime import date, datetime

from tally.domain.models import Month


def month_of(day: date) -> Month:
    """Get the YYYY-MM month key of a date."""
    return Month(f"{day.year:04d}-{day.month:02d}")


def month_label(month: Month) -> str:
    """Format a month key for display.

    Args:
        month: Month in YYYY-MM format.

    Returns:
        Short label (e.g., "Jan 2025").

    Raises:
        ValueError: If the month is not in YYYY-MM format.
    """
    return datetime.strptime(month, "%Y-%m").strftime("%b %Y")


def month_year_token(day: date) -> str:
    """Format a date as the "<month>-<year>" token used by search queries."""
    return f"{day.month}-{day.year}"
