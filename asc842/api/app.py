"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from asc842.api.routes import calculations, journal_entries, leases
from asc842.config import settings
from asc842.data.lease_store import LeaseNotFoundError
from asc842.engine.errors import LeaseCalculationError

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="ASC 842 Lease Engine",
    description="Lease liability, right-of-use asset and journal entry calculations",
    version="0.1.0",
)

app.include_router(calculations.router)
app.include_router(leases.router)
app.include_router(journal_entries.router)


@app.exception_handler(LeaseCalculationError)
async def calculation_error_handler(request: Request, exc: LeaseCalculationError):
    logger.info("Rejected lease calculation for %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(LeaseNotFoundError)
async def not_found_handler(request: Request, exc: LeaseNotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.get("/health")
async def health():
    return {"status": "ok"}
