"""Lease calculation orchestrator.

Runs term resolution -> valuation -> amortization -> journal entries.
Pure computation. No I/O.
"""

from asc842.engine.amortization import amortization_schedule
from asc842.engine.journal import generate_journal_entries
from asc842.engine.valuation import lease_metrics
from asc842.models.lease import LeaseTerms
from asc842.models.results import LeaseCalculation


def calculate_lease(terms: LeaseTerms) -> LeaseCalculation:
    metrics = lease_metrics(terms)
    schedule = amortization_schedule(terms, metrics)
    entries = generate_journal_entries(terms, metrics, schedule)
    return LeaseCalculation(metrics=metrics, schedule=schedule, journal_entries=entries)
