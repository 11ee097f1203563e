"""Shelter Admin Backend — Rescue Tests"""

import pytest

RESCUE = {
    "petId": 4,
    "petName": "Pebble",
    "rescueDate": "2025-02-11T08:30:00Z",
    "rescueLocation": "Harbor Road underpass",
    "rescuer": "Jo",
    "rescueType": "stray",
    "description": "Found shivering under the bridge",
    "healthCondition": "critical",
    "immediateAction": "Warmed and taken to the vet",
    "cost": 120.0,
}


async def log_rescue(client, **overrides):
    response = await client.post("/rescues", json={**RESCUE, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestRescues:
    @pytest.mark.asyncio
    async def test_create_and_get(self, auth_client):
        rescue = await log_rescue(auth_client)
        fetched = (await auth_client.get(f"/rescues/{rescue['id']}")).json()["data"]
        assert fetched["rescueLocation"] == "Harbor Road underpass"
        assert fetched["cost"] == 120.0

    @pytest.mark.asyncio
    async def test_missing_required_field(self, auth_client):
        body = {k: v for k, v in RESCUE.items() if k != "immediateAction"}
        response = await auth_client.post("/rescues", json=body)
        assert response.status_code == 400
        assert "immediateAction" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_update_notes(self, auth_client):
        rescue = await log_rescue(auth_client)
        response = await auth_client.patch(
            f"/rescues/{rescue['id']}", json={"notes": "Recovering well"}
        )
        assert response.json()["data"]["notes"] == "Recovering well"
        assert response.json()["data"]["rescuer"] == "Jo"

    @pytest.mark.asyncio
    async def test_cost_beyond_column_precision_rejected(self, auth_client):
        response = await auth_client.post("/rescues", json={**RESCUE, "cost": 1e12})
        assert response.status_code == 400
        assert "cost" in response.json()["message"]

        rescue = await log_rescue(auth_client)
        response = await auth_client.patch(f"/rescues/{rescue['id']}", json={"cost": 1e12})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_stats(self, auth_client):
        await log_rescue(auth_client)
        await log_rescue(auth_client, healthCondition="healthy", cost=30.5)
        await log_rescue(auth_client, healthCondition="injured", cost=None)

        stats = (await auth_client.get("/rescues/stats")).json()["data"]
        assert stats == {"total": 3, "critical": 1, "healthy": 1, "totalCost": 150.5}

    @pytest.mark.asyncio
    async def test_filter_by_rescuer(self, auth_client):
        await log_rescue(auth_client)
        await log_rescue(auth_client, rescuer="Mo")

        response = await auth_client.get("/rescues", params={"rescuer": "Mo"})
        assert response.json()["data"]["total"] == 1

    @pytest.mark.asyncio
    async def test_delete_missing(self, auth_client):
        response = await auth_client.delete("/rescues/3")
        assert response.status_code == 404
        assert response.json()["message"] == "Rescue with ID '3' was not found"
