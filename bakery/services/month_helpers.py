# bakery/services/month_helpers.py
#
# Month / Day Helpers
# Parses the "YYYY-MM" month token used by the summary views and derives
# the calendar dates the growth cards compare.

from datetime import date, timedelta


# ---- Month tokens ----

def parse_month(month_str: str) -> tuple[int, int]:
    """
    month_str: 'YYYY-MM'.
    Returns (year, month). Raises ValueError for anything else.
    """
    try:
        year_str, month_only_str = month_str.strip().split("-")
        if len(year_str) != 4 or len(month_only_str) != 2:
            raise ValueError
        year = int(year_str)
        month = int(month_only_str)
    except (AttributeError, ValueError):
        raise ValueError(f"month must look like YYYY-MM, got {month_str!r}") from None

    if not (1 <= month <= 12):
        raise ValueError(f"month out of range: {month_str!r}")
    return year, month


def current_month(today: date | None = None) -> str:
    today = today or date.today()
    return f"{today.year:04d}-{today.month:02d}"


def get_month_range(month_str: str | None, today: date | None = None):
    """
    month_str: 'YYYY-MM' or None.
    Returns (start_date, end_date_exclusive, normalized_month_str).
    If month_str is None, uses the CURRENT month.
    """
    if month_str:
        year, month = parse_month(month_str)
    else:
        today = today or date.today()
        year, month = today.year, today.month

    start_date = date(year, month, 1)
    if month == 12:
        end_date_exclusive = date(year + 1, 1, 1)
    else:
        end_date_exclusive = date(year, month + 1, 1)

    normalized = f"{year:04d}-{month:02d}"
    return start_date, end_date_exclusive, normalized


# ---- Days ----

def today_and_yesterday(today: date | None = None) -> tuple[date, date]:
    today = today or date.today()
    return today, today - timedelta(days=1)
