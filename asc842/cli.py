"""CLI for running the lease calculation engine on ad-hoc terms.

Usage:
    python -m asc842.cli "Office Lease" 2024-01-01 2026-12-31 5000 0.05
    python -m asc842.cli "Office Lease" 2024-01-01 2026-12-31 5000 0.05 --prepaid-rent 1000 --entries
"""

import argparse
import sys
from datetime import date
from decimal import Decimal

from asc842.engine.amortization import schedule_totals, yearly_schedule_summary
from asc842.engine.errors import LeaseCalculationError
from asc842.engine.pipeline import calculate_lease
from asc842.models.lease import LeaseTerms
from asc842.models.results import LeaseCalculation


def print_calculation(terms: LeaseTerms, calc: LeaseCalculation, show_entries: bool = False) -> None:
    m = calc.metrics
    print(f"\n{'=' * 78}")
    print(f"  {terms.lease_name}")
    print(f"{'=' * 78}")
    print(f"  Lease term:               {m.total_lease_term} months")
    print(f"  PV of lease payments:     ${m.present_value_of_lease_payments:,.2f}")
    print(f"  Initial lease liability:  ${m.initial_lease_liability:,.2f}")
    print(f"  Initial ROU asset:        ${m.initial_right_of_use_asset:,.2f}")
    print(f"  Monthly ROU amortization: ${m.monthly_amortization_expense:,.2f}")
    print()
    print(f"  {'Month':>5}  {'Date':<10}  {'Begin Liab':>12}  {'Interest':>10}  "
          f"{'Principal':>10}  {'End Liab':>12}  {'ROU Bal':>12}")
    for row in calc.schedule:
        print(f"  {row.month:>5}  {row.date.isoformat():<10}  {row.beginning_lease_liability:>12,.2f}  "
              f"{row.interest_expense:>10,.2f}  {row.principal_reduction:>10,.2f}  "
              f"{row.ending_lease_liability:>12,.2f}  {row.right_of_use_asset_balance:>12,.2f}")
    print()

    totals = schedule_totals(calc.schedule)
    print(f"  Total payments:           ${totals['payments']:,.2f}")
    print(f"  Total interest expense:   ${totals['interest']:,.2f}")
    print(f"  Total ROU amortization:   ${totals['rou_amortization']:,.2f}")
    print()
    print(f"  {'Year':>5}  {'Interest':>12}  {'Payments':>12}  {'ROU Amort':>12}  {'End Liab':>12}  {'ROU Bal':>12}")
    for y in yearly_schedule_summary(calc.schedule):
        print(f"  {y['year']:>5}  {y['interest']:>12,.2f}  {y['payments']:>12,.2f}  {y['rou_amortization']:>12,.2f}  "
              f"{y['ending_liability']:>12,.2f}  {y['ending_rou_balance']:>12,.2f}")
    print()

    if show_entries:
        for entry in calc.journal_entries:
            print(f"  {entry.entry_date.isoformat()}  {entry.description}")
            for d in entry.debits:
                print(f"      Dr {d.account:<48} {d.amount:>12,.2f}")
            for c in entry.credits:
                print(f"          Cr {c.account:<44} {c.amount:>12,.2f}")
        print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="ASC 842 lease calculator")
    parser.add_argument("name", help="Lease name")
    parser.add_argument("start", type=date.fromisoformat, help="Start date (YYYY-MM-DD)")
    parser.add_argument("end", type=date.fromisoformat, help="End date (YYYY-MM-DD)")
    parser.add_argument("payment", type=Decimal, help="Monthly payment")
    parser.add_argument("rate", type=Decimal, help="Annual discount rate (0.05 for 5%%)")
    parser.add_argument("--prepaid-rent", type=Decimal, default=Decimal("0"))
    parser.add_argument("--initial-direct-costs", type=Decimal, default=Decimal("0"))
    parser.add_argument("--lease-incentives", type=Decimal, default=Decimal("0"))
    parser.add_argument("--entries", action="store_true", help="Also print journal entries")

    args = parser.parse_args(argv)
    if args.end <= args.start:
        parser.error("end date must be after start date")

    terms = LeaseTerms(
        lease_name=args.name,
        start_date=args.start,
        end_date=args.end,
        monthly_payment=args.payment,
        discount_rate=args.rate,
        prepaid_rent=args.prepaid_rent,
        initial_direct_costs=args.initial_direct_costs,
        lease_incentives=args.lease_incentives,
    )
    try:
        calc = calculate_lease(terms)
    except LeaseCalculationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print_calculation(terms, calc, show_entries=args.entries)
    return 0


if __name__ == "__main__":
    sys.exit(main())
