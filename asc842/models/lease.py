from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class LeaseTerms:
    """Lease inputs as supplied by the validated write path."""
    lease_name: str
    start_date: date
    end_date: date
    monthly_payment: Decimal
    discount_rate: Decimal  # Annual, e.g. Decimal("0.05")
    prepaid_rent: Decimal = Decimal("0")
    initial_direct_costs: Decimal = Decimal("0")
    lease_incentives: Decimal = Decimal("0")
    lease_id: str = ""  # Assigned by the store, empty for ad-hoc calculations


@dataclass(frozen=True)
class LeaseMetrics:
    total_lease_term: int  # Whole months
    present_value_of_lease_payments: Decimal
    initial_lease_liability: Decimal
    initial_right_of_use_asset: Decimal
    monthly_amortization_expense: Decimal  # Straight-line ROU amortization
    initial_lease_payment: Decimal
    monthly_interest_rate: Decimal  # Unrounded annual / 12


@dataclass(frozen=True)
class ScheduleRow:
    month: int  # 1-based
    date: date
    beginning_lease_liability: Decimal
    interest_expense: Decimal
    lease_payment: Decimal
    principal_reduction: Decimal
    ending_lease_liability: Decimal
    right_of_use_asset_amortization: Decimal
    right_of_use_asset_balance: Decimal
