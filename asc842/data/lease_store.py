"""Persistence for leases and their generated journal entries.

The calculation engine never touches storage; this store feeds it plain
LeaseTerms and writes back what it returns. Journal entry generation for a
lease is delete-then-insert inside one transaction, so concurrent callers
must still serialize writes per lease.
"""

import logging
import uuid
from decimal import Decimal

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from asc842.config import settings
from asc842.engine.journal import generate_journal_entries, unbalanced_entries
from asc842.models.db import JournalEntryRecord, LeaseRecord
from asc842.models.journal import AccountEntry, EntryType, JournalEntry
from asc842.models.lease import LeaseTerms

logger = logging.getLogger(__name__)


class LeaseNotFoundError(LookupError):
    def __init__(self, lease_id: uuid.UUID):
        self.lease_id = lease_id
        super().__init__(f"Lease {lease_id} not found")


def record_to_terms(record: LeaseRecord) -> LeaseTerms:
    return LeaseTerms(
        lease_name=record.lease_name,
        start_date=record.start_date,
        end_date=record.end_date,
        monthly_payment=Decimal(record.monthly_payment),
        discount_rate=Decimal(record.discount_rate),
        prepaid_rent=Decimal(record.prepaid_rent or 0),
        initial_direct_costs=Decimal(record.initial_direct_costs or 0),
        lease_incentives=Decimal(record.lease_incentives or 0),
        lease_id=str(record.id),
    )


def _lines_to_json(lines: tuple[AccountEntry, ...]) -> list[dict[str, str]]:
    return [{"account": line.account, "amount": str(line.amount)} for line in lines]


def _lines_from_json(lines: list[dict[str, str]]) -> tuple[AccountEntry, ...]:
    return tuple(AccountEntry(account=line["account"], amount=Decimal(line["amount"])) for line in lines)


def entry_to_record(entry: JournalEntry, lease_id: uuid.UUID, sequence: int) -> JournalEntryRecord:
    return JournalEntryRecord(
        lease_id=lease_id,
        sequence=sequence,
        entry_date=entry.entry_date,
        entry_type=entry.entry_type.value,
        description=entry.description,
        debits=_lines_to_json(entry.debits),
        credits=_lines_to_json(entry.credits),
    )


def record_to_entry(record: JournalEntryRecord) -> JournalEntry:
    return JournalEntry(
        entry_date=record.entry_date,
        entry_type=EntryType(record.entry_type),
        description=record.description,
        debits=_lines_from_json(record.debits),
        credits=_lines_from_json(record.credits),
        lease_id=str(record.lease_id),
    )


class LeaseStore:
    def __init__(self, session: AsyncSession):
        self.session = session

    # ---- Leases ----

    async def list_leases(self) -> list[LeaseRecord]:
        result = await self.session.scalars(select(LeaseRecord).order_by(LeaseRecord.created_at))
        return list(result)

    async def get_lease(self, lease_id: uuid.UUID) -> LeaseRecord:
        record = await self.session.get(LeaseRecord, lease_id)
        if record is None:
            raise LeaseNotFoundError(lease_id)
        return record

    async def create_lease(self, terms: LeaseTerms) -> LeaseRecord:
        record = LeaseRecord(
            lease_name=terms.lease_name,
            start_date=terms.start_date,
            end_date=terms.end_date,
            monthly_payment=terms.monthly_payment,
            discount_rate=terms.discount_rate,
            prepaid_rent=terms.prepaid_rent,
            initial_direct_costs=terms.initial_direct_costs,
            lease_incentives=terms.lease_incentives,
        )
        self.session.add(record)
        await self.session.commit()
        await self.session.refresh(record)
        logger.info("Created lease %s (%s)", record.id, record.lease_name)
        return record

    async def update_lease(self, lease_id: uuid.UUID, terms: LeaseTerms) -> LeaseRecord:
        """Overwrite a lease's terms and drop its now-stale journal entries."""
        record = await self.get_lease(lease_id)
        record.lease_name = terms.lease_name
        record.start_date = terms.start_date
        record.end_date = terms.end_date
        record.monthly_payment = terms.monthly_payment
        record.discount_rate = terms.discount_rate
        record.prepaid_rent = terms.prepaid_rent
        record.initial_direct_costs = terms.initial_direct_costs
        record.lease_incentives = terms.lease_incentives
        await self.session.execute(
            delete(JournalEntryRecord).where(JournalEntryRecord.lease_id == lease_id)
        )
        await self.session.commit()
        await self.session.refresh(record)
        logger.info("Updated lease %s, stored journal entries cleared", lease_id)
        return record

    async def delete_lease(self, lease_id: uuid.UUID) -> None:
        record = await self.get_lease(lease_id)
        await self.session.execute(
            delete(JournalEntryRecord).where(JournalEntryRecord.lease_id == lease_id)
        )
        await self.session.delete(record)
        await self.session.commit()
        logger.info("Deleted lease %s and its journal entries", lease_id)

    # ---- Journal entries ----

    async def list_entries(self, lease_id: uuid.UUID) -> list[JournalEntry]:
        result = await self.session.scalars(
            select(JournalEntryRecord)
            .where(JournalEntryRecord.lease_id == lease_id)
            .order_by(JournalEntryRecord.entry_date, JournalEntryRecord.sequence)
        )
        return [record_to_entry(r) for r in result]

    async def entries_for(self, lease_id: uuid.UUID) -> list[JournalEntry]:
        """Stored entries for a lease, generated and stored on first access."""
        await self.get_lease(lease_id)
        entries = await self.list_entries(lease_id)
        if entries:
            return entries
        logger.debug("No stored journal entries for lease %s, generating", lease_id)
        return await self.regenerate_entries(lease_id)

    async def regenerate_entries(self, lease_id: uuid.UUID) -> list[JournalEntry]:
        """Replace every stored entry for the lease with a freshly computed set.

        Engine errors are raised before anything is deleted.
        """
        record = await self.get_lease(lease_id)
        entries = generate_journal_entries(record_to_terms(record))
        unbalanced = unbalanced_entries(entries, settings.balance_tolerance)
        if unbalanced:
            logger.warning(
                "Lease %s produced %d unbalanced journal entries, first: %s",
                lease_id, len(unbalanced), unbalanced[0].description,
            )

        try:
            await self.session.execute(
                delete(JournalEntryRecord).where(JournalEntryRecord.lease_id == lease_id)
            )
            self.session.add_all(
                entry_to_record(entry, lease_id, seq) for seq, entry in enumerate(entries)
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            logger.exception("Journal entry regeneration failed for lease %s", lease_id)
            raise

        logger.info("Stored %d journal entries for lease %s", len(entries), lease_id)
        return sorted(entries, key=lambda e: e.entry_date)
