"""
Shelter Admin Backend — Adoption Record Tests
===============================================

What:  Record creation (numbering, retries), follow-ups, filters and stats.
How:   HTTP tests for the endpoints; service-level tests with a real session
       for the record-number retry, with generate_record_number patched.

What we test:
    ✅ Record numbers look like AR-YYYY-NNNNNN and records start active
    ✅ A taken number is retried with a fresh one
    ✅ Running out of attempts surfaces as DatabaseError (HTTP 500)
    ✅ Follow-ups append in order and move the follow-up dates
    ✅ Date-range filters are inclusive
"""

import re
from datetime import date
from unittest.mock import patch

import pytest

from app.config import settings
from app.exceptions import DatabaseError
from app.schemas.adoption_record import AdoptionRecordCreate, FollowUpCreate
from app.services.adoption_record_service import (
    adoption_record_service,
    generate_record_number,
)

RECORD_NUMBER = re.compile(r"^AR-\d{4}-\d{6}$")


async def create_record(client, payload, **overrides):
    response = await client.post("/adoption-records", json={**payload, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestRecordNumbers:
    def test_format(self):
        assert generate_record_number(2025).startswith("AR-2025-")
        assert RECORD_NUMBER.match(generate_record_number())

    def test_suffix_is_zero_padded(self):
        with patch("app.services.adoption_record_service.secrets.randbelow", return_value=42):
            assert generate_record_number(2025) == "AR-2025-000042"

    @pytest.mark.asyncio
    async def test_taken_number_is_retried(self, db_session, record_payload):
        payload = AdoptionRecordCreate(**record_payload)
        with patch(
            "app.services.adoption_record_service.generate_record_number",
            side_effect=["AR-2025-000001", "AR-2025-000001", "AR-2025-000002"],
        ) as numbers:
            first = await adoption_record_service.create(db_session, payload, operator="admin")
            second = await adoption_record_service.create(db_session, payload, operator="admin")

        assert first.record_number == "AR-2025-000001"
        assert second.record_number == "AR-2025-000002"
        assert numbers.call_count == 3

    @pytest.mark.asyncio
    async def test_attempts_exhausted(self, db_session, record_payload):
        payload = AdoptionRecordCreate(**record_payload)
        with patch(
            "app.services.adoption_record_service.generate_record_number",
            return_value="AR-2025-000001",
        ) as numbers:
            await adoption_record_service.create(db_session, payload, operator="admin")
            with pytest.raises(DatabaseError):
                await adoption_record_service.create(db_session, payload, operator="admin")

        assert numbers.call_count == 1 + settings.record_number_max_attempts


class TestRecordEndpoints:
    @pytest.mark.asyncio
    async def test_create_defaults(self, auth_client, record_payload):
        record = await create_record(auth_client, record_payload)
        assert RECORD_NUMBER.match(record["recordNumber"])
        assert record["status"] == "active"
        assert record["followUps"] == []
        assert record["createdBy"] == "admin"
        assert record["updatedBy"] == "admin"
        assert record["adoptionDate"] == "2025-03-01"

    @pytest.mark.asyncio
    async def test_exhausted_numbers_answer_500(self, auth_client, record_payload):
        with patch(
            "app.services.adoption_record_service.generate_record_number",
            return_value="AR-2025-123456",
        ):
            await create_record(auth_client, record_payload)
            response = await auth_client.post("/adoption-records", json=record_payload)
        assert response.status_code == 500
        assert response.json()["data"] is None
        assert "record number" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_missing_record(self, auth_client):
        response = await auth_client.get("/adoption-records/does-not-exist")
        assert response.status_code == 404
        assert response.json()["message"] == "Adoption record with ID 'does-not-exist' was not found"

    @pytest.mark.asyncio
    async def test_update_status(self, auth_client, record_payload):
        record = await create_record(auth_client, record_payload)
        response = await auth_client.patch(
            f"/adoption-records/{record['id']}", json={"status": "completed"}
        )
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "completed"

    @pytest.mark.asyncio
    async def test_record_number_is_not_editable(self, auth_client, record_payload):
        record = await create_record(auth_client, record_payload)
        response = await auth_client.patch(
            f"/adoption-records/{record['id']}", json={"recordNumber": "AR-1999-000000"}
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_delete(self, auth_client, record_payload):
        record = await create_record(auth_client, record_payload)
        response = await auth_client.delete(f"/adoption-records/{record['id']}")
        assert response.json()["data"] == {
            "message": "Adoption record deleted successfully",
            "id": record["id"],
            "count": None,
        }
        assert (await auth_client.get(f"/adoption-records/{record['id']}")).status_code == 404


class TestFollowUps:
    @pytest.mark.asyncio
    async def test_follow_ups_append_in_order(self, auth_client, record_payload):
        record = await create_record(auth_client, record_payload)
        url = f"/adoption-records/{record['id']}/follow-up"

        first = await auth_client.post(
            url, json={"content": "Settling in well", "nextFollowUpDate": "2030-01-15"}
        )
        assert first.status_code == 200
        after_first = first.json()["data"]
        assert after_first["nextFollowUpDate"] == "2030-01-15"
        assert after_first["lastFollowUpDate"] is not None

        second = await auth_client.post(url, json={"content": "Vet check done", "operator": "kim"})
        after_second = second.json()["data"]

        entries = after_second["followUps"]
        assert [e["content"] for e in entries] == ["Settling in well", "Vet check done"]
        assert entries[0]["operator"] == "admin"
        assert entries[0]["nextFollowUpDate"] == "2030-01-15"
        assert entries[1]["operator"] == "kim"
        assert entries[1]["nextFollowUpDate"] is None
        assert entries[0]["id"] != entries[1]["id"]
        assert after_second["nextFollowUpDate"] is None
        assert after_second["updatedBy"] == "kim"

    @pytest.mark.asyncio
    async def test_empty_content_rejected(self, auth_client, record_payload):
        record = await create_record(auth_client, record_payload)
        response = await auth_client.post(
            f"/adoption-records/{record['id']}/follow-up", json={"content": ""}
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_follow_up_missing_record(self, auth_client):
        response = await auth_client.post(
            "/adoption-records/nope/follow-up", json={"content": "hello"}
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_overdue_follow_up_counted(self, db_session, record_payload):
        record = await adoption_record_service.create(
            db_session, AdoptionRecordCreate(**record_payload), operator="admin"
        )
        await adoption_record_service.add_follow_up(
            db_session,
            record.id,
            FollowUpCreate(content="First visit", next_follow_up_date=date(2025, 4, 1)),
            operator="admin",
        )

        before = await adoption_record_service.stats(db_session, today=date(2025, 3, 31))
        after = await adoption_record_service.stats(db_session, today=date(2025, 4, 2))
        assert before.pending_follow_up == 0
        assert after.pending_follow_up == 1
        assert after.total == after.active == 1


class TestRecordListing:
    @pytest.mark.asyncio
    async def test_date_range_is_inclusive(self, auth_client, record_payload):
        for day in ("2025-01-31", "2025-02-01", "2025-02-28", "2025-03-01"):
            await create_record(auth_client, record_payload, adoptionDate=day)

        response = await auth_client.get(
            "/adoption-records", params={"startDate": "2025-02-01", "endDate": "2025-02-28"}
        )
        dates = [r["adoptionDate"] for r in response.json()["data"]["data"]]
        assert dates == ["2025-02-28", "2025-02-01"]

    @pytest.mark.asyncio
    async def test_inverted_range_rejected(self, auth_client):
        response = await auth_client.get(
            "/adoption-records", params={"startDate": "2025-03-01", "endDate": "2025-02-01"}
        )
        assert response.status_code == 400
        assert "startDate" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_filter_by_record_number(self, auth_client, record_payload):
        record = await create_record(auth_client, record_payload)
        await create_record(auth_client, record_payload)

        response = await auth_client.get(
            "/adoption-records", params={"recordNumber": record["recordNumber"]}
        )
        assert [r["id"] for r in response.json()["data"]["data"]] == [record["id"]]
