"""Lease CRUD routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from asc842.api.deps import get_store
from asc842.api.schemas import LeaseCreate, LeaseListResponse, LeaseResponse, LeaseUpdate
from asc842.data.lease_store import LeaseStore, record_to_terms
from asc842.engine.valuation import lease_metrics
from asc842.models.db import LeaseRecord

router = APIRouter(prefix="/api/v1/leases", tags=["leases"])


def _to_response(record: LeaseRecord) -> LeaseResponse:
    return LeaseResponse(
        id=record.id,
        lease_name=record.lease_name,
        lease_start_date=record.start_date,
        lease_end_date=record.end_date,
        monthly_payment=record.monthly_payment,
        discount_rate=record.discount_rate,
        prepaid_rent=record.prepaid_rent,
        initial_direct_costs=record.initial_direct_costs,
        lease_incentives=record.lease_incentives,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


@router.get("", response_model=LeaseListResponse)
async def list_leases(store: LeaseStore = Depends(get_store)):
    return LeaseListResponse(leases=[_to_response(r) for r in await store.list_leases()])


@router.post("", response_model=LeaseResponse, status_code=201)
async def create_lease(req: LeaseCreate, store: LeaseStore = Depends(get_store)):
    terms = req.to_terms()
    # Reject terms the engine cannot measure before anything is stored
    lease_metrics(terms)
    return _to_response(await store.create_lease(terms))


@router.get("/{lease_id}", response_model=LeaseResponse)
async def get_lease(lease_id: UUID, store: LeaseStore = Depends(get_store)):
    return _to_response(await store.get_lease(lease_id))


@router.put("/{lease_id}", response_model=LeaseResponse)
async def update_lease(lease_id: UUID, req: LeaseUpdate, store: LeaseStore = Depends(get_store)):
    existing = record_to_terms(await store.get_lease(lease_id))
    try:
        merged = req.merge(existing)
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False, include_input=False),
        )
    terms = merged.to_terms(lease_id=str(lease_id))
    lease_metrics(terms)
    return _to_response(await store.update_lease(lease_id, terms))


@router.delete("/{lease_id}")
async def delete_lease(lease_id: UUID, store: LeaseStore = Depends(get_store)):
    await store.delete_lease(lease_id)
    return {"message": "Lease deleted successfully"}
