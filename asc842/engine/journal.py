"""Double-entry journal entries for lease recognition and monthly amortization.

Pure functions: dataclasses in, dataclasses out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from asc842.engine.amortization import amortization_schedule
from asc842.engine.valuation import lease_metrics
from asc842.models.journal import (
    CASH,
    INTEREST_EXPENSE,
    LEASE_INCENTIVES_RECEIVABLE,
    LEASE_LIABILITY,
    PREPAID_RENT,
    RIGHT_OF_USE_ASSET,
    ROU_ACCUMULATED_AMORTIZATION,
    ROU_AMORTIZATION_EXPENSE,
    AccountEntry,
    EntryType,
    JournalEntry,
)
from asc842.models.lease import LeaseMetrics, LeaseTerms, ScheduleRow

TWO_PLACES = Decimal("0.01")


def _cents(amount: Decimal) -> Decimal:
    return amount.quantize(TWO_PLACES, ROUND_HALF_UP)


def initial_recognition_entry(terms: LeaseTerms, metrics: LeaseMetrics) -> JournalEntry:
    """Commencement-date entry.

    Dr Right-of-Use Asset, Cr Lease Liability, then only when non-zero:
    Cr Prepaid Rent, Cr Cash (initial direct costs), Dr Lease Incentives Receivable.
    """
    debits = [AccountEntry(RIGHT_OF_USE_ASSET, metrics.initial_right_of_use_asset)]
    credits = [AccountEntry(LEASE_LIABILITY, metrics.initial_lease_liability)]

    if terms.prepaid_rent > 0:
        credits.append(AccountEntry(PREPAID_RENT, _cents(terms.prepaid_rent)))
    if terms.initial_direct_costs > 0:
        credits.append(AccountEntry(CASH, _cents(terms.initial_direct_costs)))
    if terms.lease_incentives > 0:
        debits.append(AccountEntry(LEASE_INCENTIVES_RECEIVABLE, _cents(terms.lease_incentives)))

    return JournalEntry(
        entry_date=terms.start_date,
        entry_type=EntryType.INITIAL_RECOGNITION,
        description=f"Initial recognition of lease: {terms.lease_name}",
        debits=tuple(debits),
        credits=tuple(credits),
        lease_id=terms.lease_id,
    )


def monthly_amortization_entries(
    terms: LeaseTerms, schedule: list[ScheduleRow]
) -> list[JournalEntry]:
    """Two entries per schedule row: interest and payment, then ROU amortization."""
    entries: list[JournalEntry] = []
    for row in schedule:
        entries.append(JournalEntry(
            entry_date=row.date,
            entry_type=EntryType.MONTHLY_AMORTIZATION,
            description=f"Month {row.month} - Interest expense and lease payment",
            debits=(
                AccountEntry(INTEREST_EXPENSE, row.interest_expense),
                AccountEntry(LEASE_LIABILITY, row.principal_reduction),
            ),
            credits=(AccountEntry(CASH, row.lease_payment),),
            lease_id=terms.lease_id,
        ))
        entries.append(JournalEntry(
            entry_date=row.date,
            entry_type=EntryType.MONTHLY_AMORTIZATION,
            description=f"Month {row.month} - Right-of-use asset amortization",
            debits=(AccountEntry(ROU_AMORTIZATION_EXPENSE, row.right_of_use_asset_amortization),),
            credits=(AccountEntry(ROU_ACCUMULATED_AMORTIZATION, row.right_of_use_asset_amortization),),
            lease_id=terms.lease_id,
        ))
    return entries


def generate_journal_entries(
    terms: LeaseTerms,
    metrics: LeaseMetrics | None = None,
    schedule: list[ScheduleRow] | None = None,
) -> list[JournalEntry]:
    """Initial recognition entry followed by every monthly entry (1 + 2N)."""
    if metrics is None:
        metrics = lease_metrics(terms)
    if schedule is None:
        schedule = amortization_schedule(terms, metrics)
    return [initial_recognition_entry(terms, metrics)] + monthly_amortization_entries(terms, schedule)


def unbalanced_entries(
    entries: list[JournalEntry], tolerance: Decimal = Decimal("0.01")
) -> list[JournalEntry]:
    return [e for e in entries if not e.is_balanced(tolerance)]
