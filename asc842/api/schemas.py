"""Pydantic schemas for API request/response models.

Request schemas are the validation layer in front of the calculation
engine: the engine assumes these rules already hold.
"""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from asc842.engine.amortization import schedule_totals, yearly_schedule_summary
from asc842.models.journal import JournalEntry
from asc842.models.lease import LeaseMetrics, LeaseTerms, ScheduleRow
from asc842.models.results import LeaseCalculation


# ---- Request schemas ----

class LeaseCreate(BaseModel):
    lease_name: str = Field(..., min_length=1, max_length=100)
    lease_start_date: date
    lease_end_date: date
    monthly_payment: Decimal = Field(..., gt=0, decimal_places=2)
    discount_rate: Decimal = Field(..., ge=0, le=1, decimal_places=6, description="Annual rate as decimal (0.05 for 5%)")
    prepaid_rent: Decimal = Field(Decimal("0"), ge=0, decimal_places=2)
    initial_direct_costs: Decimal = Field(Decimal("0"), ge=0, decimal_places=2)
    lease_incentives: Decimal = Field(Decimal("0"), ge=0, decimal_places=2)

    @model_validator(mode="after")
    def end_after_start(self) -> "LeaseCreate":
        if self.lease_end_date <= self.lease_start_date:
            raise ValueError("End date must be after start date")
        return self

    def to_terms(self, lease_id: str = "") -> LeaseTerms:
        return LeaseTerms(
            lease_name=self.lease_name,
            start_date=self.lease_start_date,
            end_date=self.lease_end_date,
            monthly_payment=self.monthly_payment,
            discount_rate=self.discount_rate,
            prepaid_rent=self.prepaid_rent,
            initial_direct_costs=self.initial_direct_costs,
            lease_incentives=self.lease_incentives,
            lease_id=lease_id,
        )


class LeaseUpdate(BaseModel):
    """Partial update; merged over the stored lease and revalidated as LeaseCreate."""
    lease_name: str | None = Field(None, min_length=1, max_length=100)
    lease_start_date: date | None = None
    lease_end_date: date | None = None
    monthly_payment: Decimal | None = Field(None, gt=0, decimal_places=2)
    discount_rate: Decimal | None = Field(None, ge=0, le=1, decimal_places=6)
    prepaid_rent: Decimal | None = Field(None, ge=0, decimal_places=2)
    initial_direct_costs: Decimal | None = Field(None, ge=0, decimal_places=2)
    lease_incentives: Decimal | None = Field(None, ge=0, decimal_places=2)

    def merge(self, terms: LeaseTerms) -> LeaseCreate:
        current = {
            "lease_name": terms.lease_name,
            "lease_start_date": terms.start_date,
            "lease_end_date": terms.end_date,
            "monthly_payment": terms.monthly_payment,
            "discount_rate": terms.discount_rate,
            "prepaid_rent": terms.prepaid_rent,
            "initial_direct_costs": terms.initial_direct_costs,
            "lease_incentives": terms.lease_incentives,
        }
        current.update(self.model_dump(exclude_none=True))
        return LeaseCreate(**current)


class RegenerateRequest(BaseModel):
    lease_id: UUID


class AccountEntrySchema(BaseModel):
    account: str = Field(..., min_length=1)
    amount: Decimal


# ---- Response schemas ----

class LeaseResponse(BaseModel):
    id: UUID
    lease_name: str
    lease_start_date: date
    lease_end_date: date
    monthly_payment: Decimal
    discount_rate: Decimal
    prepaid_rent: Decimal
    initial_direct_costs: Decimal
    lease_incentives: Decimal
    created_at: datetime | None = None
    updated_at: datetime | None = None


class LeaseListResponse(BaseModel):
    leases: list[LeaseResponse]


class MetricsResponse(BaseModel):
    total_lease_term: int
    present_value_of_lease_payments: Decimal
    initial_lease_liability: Decimal
    initial_right_of_use_asset: Decimal
    monthly_amortization_expense: Decimal
    initial_lease_payment: Decimal

    @classmethod
    def from_metrics(cls, m: LeaseMetrics) -> "MetricsResponse":
        return cls(
            total_lease_term=m.total_lease_term,
            present_value_of_lease_payments=m.present_value_of_lease_payments,
            initial_lease_liability=m.initial_lease_liability,
            initial_right_of_use_asset=m.initial_right_of_use_asset,
            monthly_amortization_expense=m.monthly_amortization_expense,
            initial_lease_payment=m.initial_lease_payment,
        )


class ScheduleRowResponse(BaseModel):
    month: int
    date: date
    beginning_lease_liability: Decimal
    interest_expense: Decimal
    lease_payment: Decimal
    principal_reduction: Decimal
    ending_lease_liability: Decimal
    right_of_use_asset_amortization: Decimal
    right_of_use_asset_balance: Decimal

    @classmethod
    def from_row(cls, row: ScheduleRow) -> "ScheduleRowResponse":
        return cls(
            month=row.month,
            date=row.date,
            beginning_lease_liability=row.beginning_lease_liability,
            interest_expense=row.interest_expense,
            lease_payment=row.lease_payment,
            principal_reduction=row.principal_reduction,
            ending_lease_liability=row.ending_lease_liability,
            right_of_use_asset_amortization=row.right_of_use_asset_amortization,
            right_of_use_asset_balance=row.right_of_use_asset_balance,
        )


class JournalEntryResponse(BaseModel):
    lease_id: str
    entry_date: date
    entry_type: str
    description: str
    debits: list[AccountEntrySchema]
    credits: list[AccountEntrySchema]

    @classmethod
    def from_entry(cls, entry: JournalEntry) -> "JournalEntryResponse":
        return cls(
            lease_id=entry.lease_id,
            entry_date=entry.entry_date,
            entry_type=entry.entry_type.value,
            description=entry.description,
            debits=[AccountEntrySchema(account=d.account, amount=d.amount) for d in entry.debits],
            credits=[AccountEntrySchema(account=c.account, amount=c.amount) for c in entry.credits],
        )


class JournalEntriesResponse(BaseModel):
    journal_entries: list[JournalEntryResponse]


class ScheduleTotalsResponse(BaseModel):
    interest: Decimal
    principal: Decimal
    payments: Decimal
    rou_amortization: Decimal


class YearSummaryResponse(ScheduleTotalsResponse):
    year: int
    ending_liability: Decimal
    ending_rou_balance: Decimal


class CalculationResponse(BaseModel):
    metrics: MetricsResponse
    schedule: list[ScheduleRowResponse]
    totals: ScheduleTotalsResponse
    yearly_summary: list[YearSummaryResponse]
    journal_entries: list[JournalEntryResponse]

    @classmethod
    def from_calculation(cls, calc: LeaseCalculation) -> "CalculationResponse":
        return cls(
            metrics=MetricsResponse.from_metrics(calc.metrics),
            schedule=[ScheduleRowResponse.from_row(r) for r in calc.schedule],
            totals=ScheduleTotalsResponse(**schedule_totals(calc.schedule)),
            yearly_summary=[YearSummaryResponse(**y) for y in yearly_schedule_summary(calc.schedule)],
            journal_entries=[JournalEntryResponse.from_entry(e) for e in calc.journal_entries],
        )
