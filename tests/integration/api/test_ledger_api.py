"""Integration tests for Ledger API endpoints"""

import pytest
from decimal import Decimal
from httpx import AsyncClient


def _dec(value) -> Decimal:
    return Decimal(str(value))


class TestDashboardAPI:
    """Dashboard and read-only endpoints"""

    @pytest.mark.asyncio
    async def test_dashboard(self, client: AsyncClient):
        response = await client.get("/api/dashboard")

        assert response.status_code == 200
        data = response.json()
        assert data["today"] == "2026-01-19"
        assert data["totals"]["customer_count"] == 3
        assert _dec(data["totals"]["outstanding"]) == Decimal("1100")
        assert _dec(data["past_due"]["within30"]) == Decimal("1600")
        assert [c["risk"]["tier"] for c in data["customers"]] == ["Low", "Medium", "High"]

    @pytest.mark.asyncio
    async def test_overdue_list(self, client: AsyncClient):
        response = await client.get("/api/overdue")

        assert response.status_code == 200
        rows = response.json()
        assert [r["customer_label"] for r in rows] == ["Alice Traders", "Bright Supplies", "Cedar Mart"]
        assert [_dec(r["outstanding"]) for r in rows] == [Decimal("300"), Decimal("500"), Decimal("300")]
        assert rows[1]["reminder_sent"] is True

    @pytest.mark.asyncio
    async def test_customer_totals_and_risk(self, client: AsyncClient):
        totals = (await client.get("/api/customers/1/totals")).json()
        risk = (await client.get("/api/customers/1/risk")).json()

        assert _dec(totals["balance"]) == Decimal("300")
        assert totals["max_overdue_days"] == 9
        assert risk["score"] == 84
        assert risk["color"] == "green"

    @pytest.mark.asyncio
    async def test_unknown_customer_returns_404(self, client: AsyncClient):
        response = await client.get("/api/customers/99")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "CUSTOMER_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_limit_check_boundary(self, client: AsyncClient):
        at_limit = await client.get("/api/customers/1/limit-check", params={"amount": "1700"})
        over_limit = await client.get("/api/customers/1/limit-check", params={"amount": "1701"})

        assert at_limit.json()["limit_exceeded"] is False
        assert over_limit.json()["limit_exceeded"] is True

    @pytest.mark.asyncio
    async def test_customer_ledger(self, client: AsyncClient):
        response = await client.get("/api/customers/1/ledger")

        rows = response.json()
        assert [r["type"] for r in rows] == ["Customer", "Credit", "Payment"]
        assert _dec(rows[-1]["running_balance"]) == Decimal("300")


class TestMutationAPI:
    """Customer, credit and payment writes"""

    @pytest.mark.asyncio
    async def test_create_customer(self, client: AsyncClient):
        payload = {"name": "Dune Hardware", "contact": "555-4040", "credit_limit": "2500"}

        response = await client.post("/api/customers", json=payload)

        assert response.status_code == 201
        data = response.json()
        assert data["created"] is True
        assert data["customer"]["id"] == 4
        assert data["customer"]["created_date"] == "2026-01-19"

    @pytest.mark.asyncio
    async def test_create_customer_validation_error(self, client: AsyncClient):
        response = await client.post("/api/customers", json={"name": "", "contact": "555", "credit_limit": "1"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_FAILED"

    @pytest.mark.asyncio
    async def test_update_customer(self, client: AsyncClient):
        payload = {"name": "Cedar Mart", "contact": "555-3031", "credit_limit": "1200"}

        response = await client.put("/api/customers/3", json=payload)

        assert response.status_code == 200
        assert response.json()["created"] is False
        assert _dec(response.json()["customer"]["credit_limit"]) == Decimal("1200")

    @pytest.mark.asyncio
    async def test_update_unknown_customer(self, client: AsyncClient):
        payload = {"name": "Ghost", "contact": "n/a", "credit_limit": "0"}

        response = await client.put("/api/customers/99", json=payload)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_create_credit_over_limit_warns(self, client: AsyncClient, ledger_store):
        payload = {
            "customer_id": 1,
            "amount": "2000",
            "issue_date": "2026-01-19",
            "due_date": "2026-02-02",
            "remarks": "Bulk order",
        }

        response = await client.post("/api/credits", json=payload)

        assert response.status_code == 201
        data = response.json()
        assert data["credit"]["id"] == 4
        assert data["limit_exceeded"] is True
        assert len(ledger_store.credits()) == 4
        assert ledger_store.history()[-1].timestamp == "2026-01-19 10:30"

    @pytest.mark.asyncio
    async def test_create_credit_unknown_customer(self, client: AsyncClient):
        payload = {"customer_id": 42, "amount": "10", "issue_date": "2026-01-19", "due_date": "2026-01-26"}

        response = await client.post("/api/credits", json=payload)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "CUSTOMER_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_create_credit_bad_due_date(self, client: AsyncClient):
        payload = {"customer_id": 1, "amount": "10", "issue_date": "2026-01-19", "due_date": "2026-02-30"}

        response = await client.post("/api/credits", json=payload)

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_create_payment_reduces_balance(self, client: AsyncClient):
        payload = {"customer_id": 1, "amount": "100", "payment_date": "2026-01-19"}

        response = await client.post("/api/payments", json=payload)
        totals = (await client.get("/api/customers/1/totals")).json()

        assert response.status_code == 201
        assert response.json()["payment"]["id"] == 3
        assert _dec(totals["balance"]) == Decimal("200")
        assert _dec(totals["overdue_amount"]) == Decimal("200")

    @pytest.mark.asyncio
    async def test_toggle_reminder(self, client: AsyncClient):
        response = await client.post("/api/credits/1/reminder")
        reminders = (await client.get("/api/reminders")).json()

        assert response.status_code == 200
        assert response.json()["credit"]["reminder_sent"] is True
        assert reminders[0]["count"] == 1
        assert reminders[0]["status"] == "Sent"
        assert reminders[0]["next_scheduled"] == "2026-01-26"

    @pytest.mark.asyncio
    async def test_toggle_reminder_unknown_credit(self, client: AsyncClient):
        response = await client.post("/api/credits/99/reminder")

        assert response.status_code == 404


class TestClockAPI:
    """Ledger clock and reset"""

    @pytest.mark.asyncio
    async def test_advance_clock(self, client: AsyncClient):
        response = await client.post("/api/clock/advance", json={"days": 2})
        clock = (await client.get("/api/clock")).json()

        assert response.status_code == 200
        assert response.json()["today"] == "2026-01-21"
        assert clock["today"] == "2026-01-21"

    @pytest.mark.asyncio
    async def test_advance_clock_defaults_to_one_day(self, client: AsyncClient):
        response = await client.post("/api/clock/advance", json={})

        assert response.json()["today"] == "2026-01-20"

    @pytest.mark.asyncio
    async def test_advance_clock_rejects_zero(self, client: AsyncClient):
        response = await client.post("/api/clock/advance", json={"days": 0})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_reset_ledger(self, client: AsyncClient):
        response = await client.post("/api/ledger/reset")
        dashboard = (await client.get("/api/dashboard")).json()
        customers = (await client.get("/api/customers")).json()

        assert response.status_code == 200
        assert response.json()["today"] == "2026-01-19"
        assert customers == []
        assert dashboard["totals"]["customer_count"] == 0
        assert _dec(dashboard["totals"]["outstanding"]) == Decimal("0")
        assert dashboard["customers"] == []
