"""SQLAlchemy ORM models for lease and journal entry persistence."""

import uuid
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import (
    String,
    Numeric,
    Date,
    DateTime,
    ForeignKey,
    JSON,
    Uuid,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class LeaseRecord(Base):
    __tablename__ = "leases"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())

    lease_name: Mapped[str] = mapped_column(String(100))
    start_date: Mapped[date] = mapped_column(Date)
    end_date: Mapped[date] = mapped_column(Date)
    monthly_payment: Mapped[Decimal] = mapped_column(Numeric(14, 2))
    discount_rate: Mapped[Decimal] = mapped_column(Numeric(7, 6))

    # Initial costs & incentives
    prepaid_rent: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=0)
    initial_direct_costs: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=0)
    lease_incentives: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=0)


class JournalEntryRecord(Base):
    __tablename__ = "journal_entries"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    lease_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("leases.id"), index=True)
    # Position in the generated sequence, keeps same-date entries in order
    sequence: Mapped[int] = mapped_column(default=0)
    entry_date: Mapped[date] = mapped_column(Date, index=True)
    entry_type: Mapped[str] = mapped_column(String(32))
    description: Mapped[str] = mapped_column(String(255))

    # [{"account": ..., "amount": "123.45"}, ...]
    debits: Mapped[list] = mapped_column(JSON)
    credits: Mapped[list] = mapped_column(JSON)
