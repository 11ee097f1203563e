"""
Shelter Admin Backend — Donation Tests
========================================

What we test:
    ✅ New donations are pending without a receipt
    ✅ Confirm / cancel / receipt actions
    ✅ In-kind items keep their camelCase keys
    ✅ Amounts beyond the stored precision are a 400
    ✅ Stats sum only confirmed amounts
"""

import pytest

DONATION = {"donorName": "Pat Lee", "amount": 150.5, "paymentMethod": "card"}


async def create_donation(client, **overrides):
    response = await client.post("/donations", json={**DONATION, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestDonations:
    @pytest.mark.asyncio
    async def test_create_defaults(self, auth_client):
        donation = await create_donation(auth_client)
        assert donation["status"] == "pending"
        assert donation["receiptIssued"] is False
        assert donation["donorType"] == "individual"
        assert donation["donationType"] == "money"
        assert donation["donationDate"] is not None
        assert donation["amount"] == 150.5

    @pytest.mark.asyncio
    async def test_goods_items(self, auth_client):
        donation = await create_donation(
            auth_client,
            donationType="goods",
            amount=0,
            items=[{"name": "Kibble", "quantity": 20, "unit": "kg", "estimatedValue": 80}],
        )
        assert donation["items"] == [
            {"name": "Kibble", "quantity": 20.0, "unit": "kg", "estimatedValue": 80.0}
        ]

    @pytest.mark.asyncio
    async def test_negative_amount_rejected(self, auth_client):
        response = await auth_client.post("/donations", json={**DONATION, "amount": -1})
        assert response.status_code == 400

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["amount", "totalValue"])
    async def test_amount_beyond_column_precision_rejected(self, auth_client, field):
        response = await auth_client.post("/donations", json={**DONATION, field: 1e12})
        assert response.status_code == 400
        assert field in response.json()["message"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["amount", "totalValue"])
    async def test_update_beyond_column_precision_rejected(self, auth_client, field):
        donation = await create_donation(auth_client)
        response = await auth_client.patch(
            f"/donations/{donation['id']}", json={field: 100_000_000}
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_largest_storable_amount_accepted(self, auth_client):
        donation = await create_donation(auth_client, amount=99_999_999.99)
        assert donation["amount"] == 99_999_999.99

    @pytest.mark.asyncio
    async def test_confirm_cancel_receipt(self, auth_client):
        donation = await create_donation(auth_client)
        url = f"/donations/{donation['id']}"

        confirmed = (await auth_client.post(f"{url}/confirm")).json()["data"]
        assert confirmed["status"] == "confirmed"

        receipt = (await auth_client.post(f"{url}/receipt")).json()["data"]
        assert receipt["receiptIssued"] is True
        assert receipt["status"] == "confirmed"

        cancelled = (await auth_client.post(f"{url}/cancel")).json()["data"]
        assert cancelled["status"] == "cancelled"

    @pytest.mark.asyncio
    async def test_confirm_missing(self, auth_client):
        response = await auth_client.post("/donations/8/confirm")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_stats_sum_confirmed_only(self, auth_client):
        first = await create_donation(auth_client, amount=100)
        await create_donation(auth_client, amount=40)
        third = await create_donation(auth_client, amount=25.25)
        await auth_client.post(f"/donations/{first['id']}/confirm")
        await auth_client.post(f"/donations/{third['id']}/confirm")

        stats = (await auth_client.get("/donations/stats")).json()["data"]
        assert stats == {"total": 3, "pending": 1, "confirmed": 2, "totalAmount": 125.25}

    @pytest.mark.asyncio
    async def test_filter_by_status(self, auth_client):
        first = await create_donation(auth_client, donorName="Acme Corp", donorType="organization")
        await create_donation(auth_client)
        await auth_client.post(f"/donations/{first['id']}/confirm")

        response = await auth_client.get(
            "/donations", params={"status": "confirmed", "donorType": "organization"}
        )
        assert [d["donorName"] for d in response.json()["data"]["data"]] == ["Acme Corp"]
