"""Rejections raised by the lease calculation engine.

Both are deterministic for a given input, so callers should surface them
rather than retry.
"""


class LeaseCalculationError(ValueError):
    pass


class DegenerateTermError(LeaseCalculationError):
    """Lease term resolves to zero or fewer whole months."""

    def __init__(self, term_months: int):
        self.term_months = term_months
        super().__init__(
            f"Lease term resolves to {term_months} whole months; at least 1 is required"
        )


class InvalidRateError(LeaseCalculationError):
    """Annual discount rate is outside [0, 1] or not a finite number."""

    def __init__(self, annual_rate):
        self.annual_rate = annual_rate
        super().__init__(f"Discount rate {annual_rate} must be a finite value between 0 and 1")
