"""Present value and initial measurement of a lease (ASC 842-20-30).

Pure functions: Decimal in, dataclass out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from asc842.engine.errors import DegenerateTermError, InvalidRateError
from asc842.engine.term import lease_term_months
from asc842.models.lease import LeaseMetrics, LeaseTerms

TWO_PLACES = Decimal("0.01")
MAX_ANNUAL_RATE = Decimal("1")


def monthly_rate(annual_rate: Decimal) -> Decimal:
    if not annual_rate.is_finite() or annual_rate < 0 or annual_rate > MAX_ANNUAL_RATE:
        raise InvalidRateError(annual_rate)
    return annual_rate / 12


def present_value(payment: Decimal, annual_rate: Decimal, periods: int) -> Decimal:
    """Present value of an ordinary annuity of ``periods`` monthly payments."""
    r = monthly_rate(annual_rate)
    if r == 0:
        return (payment * periods).quantize(TWO_PLACES, ROUND_HALF_UP)

    # PV = P * (1 - (1+r)^-n) / r
    factor = (1 - (1 + r) ** -periods) / r
    return (payment * factor).quantize(TWO_PLACES, ROUND_HALF_UP)


def lease_metrics(terms: LeaseTerms) -> LeaseMetrics:
    """Initial lease liability and right-of-use asset.

    ROU asset = liability + prepaid rent + initial direct costs - lease incentives,
    amortized straight-line over the term.
    """
    term = lease_term_months(terms.start_date, terms.end_date)
    if term <= 0:
        raise DegenerateTermError(term)

    pv = present_value(terms.monthly_payment, terms.discount_rate, term)
    liability = pv
    rou_asset = (
        liability
        + terms.prepaid_rent
        + terms.initial_direct_costs
        - terms.lease_incentives
    ).quantize(TWO_PLACES, ROUND_HALF_UP)

    return LeaseMetrics(
        total_lease_term=term,
        present_value_of_lease_payments=pv,
        initial_lease_liability=liability,
        initial_right_of_use_asset=rou_asset,
        monthly_amortization_expense=(rou_asset / term).quantize(TWO_PLACES, ROUND_HALF_UP),
        initial_lease_payment=terms.monthly_payment,
        monthly_interest_rate=monthly_rate(terms.discount_rate),
    )
