"""Route tests against a temporary SQLite database."""

import asyncio
import uuid
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool

from asc842.api.app import app
from asc842.api.deps import get_db
from asc842.models.db import Base


async def _create_tables(engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
def client(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'api.db'}", poolclass=NullPool)
    asyncio.run(_create_tables(engine))
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def lease_id(client, lease_payload) -> str:
    resp = client.post("/api/v1/leases", json=lease_payload)
    assert resp.status_code == 201
    return resp.json()["id"]


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestCalculate:
    def test_full_calculation(self, client, lease_payload):
        resp = client.post("/api/v1/calculate", json=lease_payload)
        assert resp.status_code == 200
        body = resp.json()
        assert body["metrics"]["total_lease_term"] == 35
        assert Decimal(body["metrics"]["initial_lease_liability"]) == Decimal("162523.63")
        assert Decimal(body["metrics"]["initial_right_of_use_asset"]) == Decimal("162023.63")
        assert len(body["schedule"]) == 35
        assert body["schedule"][0]["date"] == "2024-01-01"
        assert Decimal(body["schedule"][0]["interest_expense"]) == Decimal("677.18")
        assert len(body["journal_entries"]) == 71
        assert body["journal_entries"][0]["entry_type"] == "initial_recognition"

    def test_totals_and_yearly_summary(self, client, lease_payload):
        body = client.post("/api/v1/calculate", json=lease_payload).json()
        totals = body["totals"]
        assert Decimal(totals["payments"]) == Decimal("175000.00")
        assert Decimal(totals["interest"]) + Decimal(totals["principal"]) == Decimal(totals["payments"])

        years = body["yearly_summary"]
        assert [y["year"] for y in years] == [1, 2, 3]
        assert Decimal(years[0]["payments"]) == Decimal("60000.00")
        assert Decimal(years[2]["payments"]) == Decimal("55000.00")
        assert years[0]["ending_liability"] == body["schedule"][11]["ending_lease_liability"]
        assert years[-1]["ending_rou_balance"] == body["schedule"][-1]["right_of_use_asset_balance"]

    def test_zero_rate_keeps_zero_interest_lines(self, client, lease_payload):
        lease_payload["discount_rate"] = 0
        resp = client.post("/api/v1/calculate", json=lease_payload)
        assert resp.status_code == 200
        entries = resp.json()["journal_entries"]
        interest_lines = [d for e in entries for d in e["debits"] if d["account"] == "Interest Expense"]
        assert len(interest_lines) == 35
        assert all(Decimal(d["amount"]) == 0 for d in interest_lines)
        for e in entries:
            assert sum(Decimal(d["amount"]) for d in e["debits"]) == sum(Decimal(c["amount"]) for c in e["credits"])

    def test_validation_error(self, client, lease_payload):
        lease_payload["monthly_payment"] = 0
        assert client.post("/api/v1/calculate", json=lease_payload).status_code == 422

    @pytest.mark.parametrize("field, value", [
        ("monthly_payment", "5000.005"),
        ("discount_rate", "0.0512345"),
    ])
    def test_rejects_precision_beyond_storage(self, client, lease_payload, field, value):
        lease_payload[field] = value
        assert client.post("/api/v1/leases", json=lease_payload).status_code == 422
        assert client.get("/api/v1/leases").json()["leases"] == []

    def test_degenerate_term(self, client, lease_payload):
        lease_payload["lease_end_date"] = "2024-01-31"
        resp = client.post("/api/v1/calculate", json=lease_payload)
        assert resp.status_code == 400
        assert "0 whole months" in resp.json()["detail"]


class TestLeaseRoutes:
    def test_create_and_get(self, client, lease_id):
        resp = client.get(f"/api/v1/leases/{lease_id}")
        assert resp.status_code == 200
        assert resp.json()["lease_name"] == "Test Office Lease"

    def test_list(self, client, lease_id):
        leases = client.get("/api/v1/leases").json()["leases"]
        assert [l["id"] for l in leases] == [lease_id]

    def test_create_rejects_degenerate_term(self, client, lease_payload):
        lease_payload["lease_end_date"] = "2024-01-15"
        assert client.post("/api/v1/leases", json=lease_payload).status_code == 400
        assert client.get("/api/v1/leases").json()["leases"] == []

    def test_update(self, client, lease_id):
        resp = client.put(f"/api/v1/leases/{lease_id}", json={"monthly_payment": 6000})
        assert resp.status_code == 200
        assert Decimal(resp.json()["monthly_payment"]) == Decimal("6000")

    def test_update_invalid_merge(self, client, lease_id):
        resp = client.put(f"/api/v1/leases/{lease_id}", json={"lease_end_date": "2023-01-01"})
        assert resp.status_code == 422

    def test_missing(self, client):
        assert client.get(f"/api/v1/leases/{uuid.uuid4()}").status_code == 404

    def test_delete(self, client, lease_id):
        client.get("/api/v1/journal-entries", params={"lease_id": lease_id})
        assert client.delete(f"/api/v1/leases/{lease_id}").status_code == 200
        assert client.get(f"/api/v1/leases/{lease_id}").status_code == 404


class TestJournalEntryRoutes:
    def test_get_generates(self, client, lease_id):
        resp = client.get("/api/v1/journal-entries", params={"lease_id": lease_id})
        assert resp.status_code == 200
        entries = resp.json()["journal_entries"]
        assert len(entries) == 71
        assert entries[0]["entry_type"] == "initial_recognition"
        assert entries[0]["lease_id"] == lease_id

    def test_regenerate_after_update(self, client, lease_id):
        client.get("/api/v1/journal-entries", params={"lease_id": lease_id})
        client.put(f"/api/v1/leases/{lease_id}", json={"lease_end_date": "2024-12-31"})
        resp = client.post("/api/v1/journal-entries/regenerate", json={"lease_id": lease_id})
        assert resp.status_code == 200
        assert len(resp.json()["journal_entries"]) == 1 + 2 * 11

    def test_unknown_lease(self, client):
        resp = client.get("/api/v1/journal-entries", params={"lease_id": str(uuid.uuid4())})
        assert resp.status_code == 404
