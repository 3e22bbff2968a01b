from datetime import date

from asc842.engine.term import lease_term_months, add_months


class TestLeaseTermMonths:
    def test_multi_year(self):
        assert lease_term_months(date(2024, 1, 1), date(2026, 12, 31)) == 35

    def test_same_year(self):
        assert lease_term_months(date(2024, 1, 1), date(2024, 12, 31)) == 11

    def test_day_of_month_ignored(self):
        assert lease_term_months(date(2024, 1, 31), date(2024, 2, 1)) == 1
        assert lease_term_months(date(2024, 1, 1), date(2024, 2, 29)) == 1

    def test_same_month_resolves_to_zero(self):
        """Same-month leases resolve to 0; the term is not bumped to 1."""
        assert lease_term_months(date(2024, 1, 1), date(2024, 1, 31)) == 0


class TestAddMonths:
    def test_simple(self):
        assert add_months(date(2024, 1, 1), 13) == date(2025, 2, 1)

    def test_zero(self):
        assert add_months(date(2024, 3, 15), 0) == date(2024, 3, 15)

    def test_clamps_to_month_end(self):
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
        assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)
