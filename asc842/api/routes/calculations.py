"""Stateless calculation route: lease terms in, full ASC 842 output back."""

from fastapi import APIRouter

from asc842.api.schemas import CalculationResponse, LeaseCreate
from asc842.engine.pipeline import calculate_lease

router = APIRouter(prefix="/api/v1", tags=["calculations"])


@router.post("/calculate", response_model=CalculationResponse)
async def calculate(req: LeaseCreate):
    """Metrics, amortization schedule and journal entries. Nothing is stored."""
    return CalculationResponse.from_calculation(calculate_lease(req.to_terms()))
