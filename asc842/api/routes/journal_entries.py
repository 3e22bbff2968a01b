"""Journal entry routes."""

from uuid import UUID

from fastapi import APIRouter, Depends

from asc842.api.deps import get_store
from asc842.api.schemas import JournalEntriesResponse, JournalEntryResponse, RegenerateRequest
from asc842.data.lease_store import LeaseStore

router = APIRouter(prefix="/api/v1/journal-entries", tags=["journal-entries"])


@router.get("", response_model=JournalEntriesResponse)
async def get_journal_entries(lease_id: UUID, store: LeaseStore = Depends(get_store)):
    """Stored entries for a lease; generated on first request."""
    entries = await store.entries_for(lease_id)
    return JournalEntriesResponse(journal_entries=[JournalEntryResponse.from_entry(e) for e in entries])


@router.post("/regenerate", response_model=JournalEntriesResponse)
async def regenerate_journal_entries(req: RegenerateRequest, store: LeaseStore = Depends(get_store)):
    """Replace all stored entries for the lease with a fresh computation."""
    entries = await store.regenerate_entries(req.lease_id)
    return JournalEntriesResponse(journal_entries=[JournalEntryResponse.from_entry(e) for e in entries])
