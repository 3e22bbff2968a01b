from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum

RIGHT_OF_USE_ASSET = "Right-of-Use Asset"
LEASE_LIABILITY = "Lease Liability"
PREPAID_RENT = "Prepaid Rent"
CASH = "Cash"
LEASE_INCENTIVES_RECEIVABLE = "Lease Incentives Receivable"
INTEREST_EXPENSE = "Interest Expense"
ROU_AMORTIZATION_EXPENSE = "Amortization Expense - Right-of-Use Asset"
ROU_ACCUMULATED_AMORTIZATION = "Accumulated Amortization - Right-of-Use Asset"


class EntryType(Enum):
    INITIAL_RECOGNITION = "initial_recognition"
    MONTHLY_AMORTIZATION = "monthly_amortization"
    REMEASUREMENT = "remeasurement"  # Reserved, nothing generates it yet


@dataclass(frozen=True)
class AccountEntry:
    account: str
    amount: Decimal


@dataclass(frozen=True)
class JournalEntry:
    entry_date: date
    entry_type: EntryType
    description: str
    debits: tuple[AccountEntry, ...] = field(default_factory=tuple)
    credits: tuple[AccountEntry, ...] = field(default_factory=tuple)
    lease_id: str = ""

    @property
    def total_debits(self) -> Decimal:
        return sum((d.amount for d in self.debits), Decimal("0"))

    @property
    def total_credits(self) -> Decimal:
        return sum((c.amount for c in self.credits), Decimal("0"))

    def is_balanced(self, tolerance: Decimal = Decimal("0.01")) -> bool:
        """Debits equal credits within ``tolerance`` currency units."""
        return abs(self.total_debits - self.total_credits) <= tolerance
