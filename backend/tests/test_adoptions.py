"""
Shelter Admin Backend — Adoption Application Tests
====================================================

What we test:
    ✅ New applications are pending with an applicationDate
    ✅ Approve/reject only from pending; a second review is refused
    ✅ Rejection without a reason fails validation
    ✅ Every review appends to reviewNotes
    ✅ Cancel and edit only while pending
"""

import pytest


async def submit(client, payload, **overrides):
    response = await client.post("/adoptions", json={**payload, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestAdoptionLifecycle:
    @pytest.mark.asyncio
    async def test_create_is_pending(self, auth_client, adoption_payload):
        application = await submit(auth_client, adoption_payload)
        assert application["status"] == "pending"
        assert application["applicationDate"]
        assert application["approvalDate"] is None
        assert application["hasYard"] is True

    @pytest.mark.asyncio
    async def test_invalid_email_rejected(self, auth_client, adoption_payload):
        response = await auth_client.post(
            "/adoptions", json={**adoption_payload, "applicantEmail": "not-an-email"}
        )
        assert response.status_code == 400
        assert "applicantEmail" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_approve_records_reviewer(self, auth_client, adoption_payload):
        application = await submit(auth_client, adoption_payload)
        response = await auth_client.post(
            f"/adoptions/{application['id']}/approve", json={"status": "approved"}
        )
        assert response.status_code == 200
        approved = response.json()["data"]
        assert approved["status"] == "approved"
        assert approved["approver"] == "admin"
        assert approved["approvalDate"] is not None
        assert approved["rejectionDate"] is None
        assert len(approved["reviewNotes"]) == 1
        assert approved["reviewNotes"][0]["content"] == "Approved"
        assert approved["reviewNotes"][0]["operator"] == "admin"

    @pytest.mark.asyncio
    async def test_second_review_refused(self, auth_client, adoption_payload):
        application = await submit(auth_client, adoption_payload)
        url = f"/adoptions/{application['id']}/approve"
        await auth_client.post(url, json={"status": "approved"})

        again = await auth_client.post(url, json={"status": "rejected", "rejectReason": "late"})
        assert again.status_code == 400
        assert "current status: approved" in again.json()["message"]

        current = (await auth_client.get(f"/adoptions/{application['id']}")).json()["data"]
        assert current["status"] == "approved"
        assert current["rejectReason"] is None

    @pytest.mark.asyncio
    async def test_reject_requires_reason(self, auth_client, adoption_payload):
        application = await submit(auth_client, adoption_payload)
        response = await auth_client.post(
            f"/adoptions/{application['id']}/approve", json={"status": "rejected"}
        )
        assert response.status_code == 400
        assert "rejectReason" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_reject_with_reason(self, auth_client, adoption_payload):
        application = await submit(auth_client, adoption_payload)
        response = await auth_client.post(
            f"/adoptions/{application['id']}/approve",
            json={"status": "rejected", "rejectReason": "No fenced yard", "rejecter": "kim"},
        )
        rejected = response.json()["data"]
        assert rejected["status"] == "rejected"
        assert rejected["rejecter"] == "kim"
        assert rejected["rejectReason"] == "No fenced yard"
        assert rejected["rejectionDate"] is not None
        assert rejected["reviewNotes"][0]["content"] == "Rejected: No fenced yard"

    @pytest.mark.asyncio
    async def test_unknown_review_status(self, auth_client, adoption_payload):
        application = await submit(auth_client, adoption_payload)
        response = await auth_client.post(
            f"/adoptions/{application['id']}/approve", json={"status": "cancelled"}
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_review_missing_application(self, auth_client):
        response = await auth_client.post("/adoptions/404/approve", json={"status": "approved"})
        assert response.status_code == 404
        assert response.json()["message"] == "Adoption application with ID '404' was not found"


class TestPendingOnlyActions:
    @pytest.mark.asyncio
    async def test_cancel_pending(self, auth_client, adoption_payload):
        application = await submit(auth_client, adoption_payload)
        response = await auth_client.post(f"/adoptions/{application['id']}/cancel")
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "cancelled"

    @pytest.mark.asyncio
    async def test_cancel_approved_refused(self, auth_client, adoption_payload):
        application = await submit(auth_client, adoption_payload)
        await auth_client.post(
            f"/adoptions/{application['id']}/approve", json={"status": "approved"}
        )
        response = await auth_client.post(f"/adoptions/{application['id']}/cancel")
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_edit_pending(self, auth_client, adoption_payload):
        application = await submit(auth_client, adoption_payload)
        response = await auth_client.patch(
            f"/adoptions/{application['id']}", json={"workHours": "9-5"}
        )
        assert response.status_code == 200
        assert response.json()["data"]["workHours"] == "9-5"

    @pytest.mark.asyncio
    async def test_edit_after_cancel_refused(self, auth_client, adoption_payload):
        application = await submit(auth_client, adoption_payload)
        await auth_client.post(f"/adoptions/{application['id']}/cancel")
        response = await auth_client.patch(
            f"/adoptions/{application['id']}", json={"workHours": "9-5"}
        )
        assert response.status_code == 400


class TestAdoptionListing:
    @pytest.mark.asyncio
    async def test_filter_by_status_and_name(self, auth_client, adoption_payload):
        first = await submit(auth_client, adoption_payload, applicantName="Ana Pike")
        await submit(auth_client, adoption_payload, applicantName="Ben Ode")
        await auth_client.post(f"/adoptions/{first['id']}/cancel")

        pending = (await auth_client.get("/adoptions", params={"status": "pending"})).json()
        assert [a["applicantName"] for a in pending["data"]["data"]] == ["Ben Ode"]

        by_name = (await auth_client.get("/adoptions", params={"applicantName": "Pike"})).json()
        assert by_name["data"]["total"] == 1

    @pytest.mark.asyncio
    async def test_stats(self, auth_client, adoption_payload):
        one = await submit(auth_client, adoption_payload)
        two = await submit(auth_client, adoption_payload)
        await submit(auth_client, adoption_payload)
        await auth_client.post(f"/adoptions/{one['id']}/approve", json={"status": "approved"})
        await auth_client.post(
            f"/adoptions/{two['id']}/approve", json={"status": "rejected", "rejectReason": "x"}
        )

        stats = (await auth_client.get("/adoptions/stats")).json()["data"]
        assert stats == {"total": 3, "pending": 1, "approved": 1, "rejected": 1}
