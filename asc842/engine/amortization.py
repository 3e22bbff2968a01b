"""Lease liability and right-of-use asset amortization schedule.

Liability follows the effective-interest method, the ROU asset is
amortized straight-line. Every amount is rounded to cents before it is
carried into the next month, so the final liability lands near zero
rather than exactly on it.

Pure functions: dataclasses in, dataclasses out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from asc842.engine.term import add_months
from asc842.engine.valuation import lease_metrics
from asc842.models.lease import LeaseMetrics, LeaseTerms, ScheduleRow

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")


def amortization_schedule(
    terms: LeaseTerms,
    metrics: LeaseMetrics | None = None,
) -> list[ScheduleRow]:
    """One row per month of the lease term.

    Args:
        terms: Lease inputs
        metrics: Precomputed initial measurement; derived from ``terms`` if omitted
    """
    if metrics is None:
        metrics = lease_metrics(terms)

    r = metrics.monthly_interest_rate
    payment = terms.monthly_payment.quantize(TWO_PLACES, ROUND_HALF_UP)
    rou_amortization = metrics.monthly_amortization_expense

    liability = metrics.initial_lease_liability
    rou_balance = metrics.initial_right_of_use_asset
    rows: list[ScheduleRow] = []

    for month in range(1, metrics.total_lease_term + 1):
        interest = (liability * r).quantize(TWO_PLACES, ROUND_HALF_UP)
        principal = payment - interest
        # Only the balances are floored; the last principal may overshoot by a few cents
        ending_liability = max(ZERO, liability - principal).quantize(TWO_PLACES, ROUND_HALF_UP)
        ending_rou = max(ZERO, rou_balance - rou_amortization).quantize(TWO_PLACES, ROUND_HALF_UP)

        rows.append(ScheduleRow(
            month=month,
            date=add_months(terms.start_date, month - 1),
            beginning_lease_liability=liability,
            interest_expense=interest,
            lease_payment=payment,
            principal_reduction=principal,
            ending_lease_liability=ending_liability,
            right_of_use_asset_amortization=rou_amortization,
            right_of_use_asset_balance=ending_rou,
        ))

        liability = ending_liability
        rou_balance = ending_rou

    return rows


def schedule_totals(schedule: list[ScheduleRow]) -> dict[str, Decimal]:
    """Totals over the whole schedule."""
    return {
        "interest": sum((row.interest_expense for row in schedule), ZERO),
        "principal": sum((row.principal_reduction for row in schedule), ZERO),
        "payments": sum((row.lease_payment for row in schedule), ZERO),
        "rou_amortization": sum((row.right_of_use_asset_amortization for row in schedule), ZERO),
    }


def yearly_schedule_summary(schedule: list[ScheduleRow]) -> list[dict[str, Decimal]]:
    """Aggregate the schedule by lease year (12-month buckets from commencement).

    Returns list of dicts with keys: year, interest, principal, payments,
    rou_amortization, ending_liability, ending_rou_balance. The last year may
    be partial.
    """
    yearly: list[dict[str, Decimal]] = []
    for start in range(0, len(schedule), 12):
        bucket = schedule[start:start + 12]
        totals = schedule_totals(bucket)
        last = bucket[-1]
        yearly.append({
            "year": Decimal(str(start // 12 + 1)),
            **totals,
            "ending_liability": last.ending_lease_liability,
            "ending_rou_balance": last.right_of_use_asset_balance,
        })
    return yearly
