"""Canonical test fixtures used across engine, store and API tests.

Fixture: office lease, $5,000/month, 5% annual discount rate,
2024-01-01 to 2026-12-31 (35 whole months), with $1,000 prepaid rent,
$500 initial direct costs and $2,000 lease incentives.
"""

from datetime import date
from decimal import Decimal
from dataclasses import replace

import pytest

from asc842.models.lease import LeaseTerms


@pytest.fixture
def sample_terms() -> LeaseTerms:
    return LeaseTerms(
        lease_name="Test Office Lease",
        start_date=date(2024, 1, 1),
        end_date=date(2026, 12, 31),
        monthly_payment=Decimal("5000"),
        discount_rate=Decimal("0.05"),
        prepaid_rent=Decimal("1000"),
        initial_direct_costs=Decimal("500"),
        lease_incentives=Decimal("2000"),
        lease_id="test-lease-1",
    )


@pytest.fixture
def simple_terms(sample_terms) -> LeaseTerms:
    """Same lease without prepaid rent, direct costs or incentives."""
    return replace(
        sample_terms,
        prepaid_rent=Decimal("0"),
        initial_direct_costs=Decimal("0"),
        lease_incentives=Decimal("0"),
    )


@pytest.fixture
def lease_payload() -> dict:
    return {
        "lease_name": "Test Office Lease",
        "lease_start_date": "2024-01-01",
        "lease_end_date": "2026-12-31",
        "monthly_payment": 5000,
        "discount_rate": 0.05,
        "prepaid_rent": 1000,
        "initial_direct_costs": 500,
        "lease_incentives": 2000,
    }
