"""Lease term resolution.

Pure functions. No I/O.
"""

from datetime import date

from dateutil.relativedelta import relativedelta


def lease_term_months(start_date: date, end_date: date) -> int:
    """Whole calendar months between two dates, ignoring day-of-month.

    2024-01-01 -> 2026-12-31 is 35, and two dates in the same month give 0.
    Callers are expected to have rejected end <= start already.
    """
    return (end_date.year - start_date.year) * 12 + (end_date.month - start_date.month)


def add_months(start_date: date, months: int) -> date:
    # relativedelta clamps Jan 31 + 1 month to Feb 28/29
    return start_date + relativedelta(months=months)
