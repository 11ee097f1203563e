"""
Shelter Admin Backend — Application-Level Tests
=================================================

What:  Cross-cutting behavior of the app factory: health, envelopes,
       error mapping and middleware headers.

What we test:
    ✅ /health reports a connected database
    ✅ Unknown routes and bad input use the error envelope
    ✅ Every response carries X-Request-ID; a client-supplied one is echoed
    ✅ Every protected resource answers 404 for a missing id
"""

import pytest

from app.main import format_validation_errors


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["code"] == 200
        assert body["data"]["status"] == "healthy"
        assert body["data"]["database"] == "connected"
        assert body["data"]["uptimeSeconds"] >= 0


class TestErrorEnvelope:
    @pytest.mark.asyncio
    async def test_unknown_route(self, client):
        response = await client.get("/no-such-thing")
        assert response.status_code == 404
        assert response.json() == {"data": None, "code": 404, "message": "Not Found"}

    @pytest.mark.asyncio
    async def test_malformed_json_is_400(self, auth_client):
        response = await auth_client.post(
            "/pets", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["code"] == 400

    @pytest.mark.asyncio
    async def test_non_numeric_id_is_400(self, auth_client):
        response = await auth_client.get("/pets/abc")
        assert response.status_code == 400

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path",
        [
            "/pets/9001",
            "/adoptions/9001",
            "/adoption-records/9001",
            "/rescues/9001",
            "/activities/9001",
            "/volunteers/9001",
            "/donations/9001",
            "/notifications/9001",
            "/users/9001",
        ],
    )
    async def test_missing_ids_are_404(self, auth_client, path):
        response = await auth_client.get(path)
        assert response.status_code == 404
        body = response.json()
        assert body["data"] is None
        assert body["code"] == 404
        assert "'9001' was not found" in body["message"]

    def test_validation_message_drops_location_prefix(self):
        errors = [
            {"loc": ("body", "name"), "msg": "Field required"},
            {"loc": ("query", "limit"), "msg": "Input should be greater than or equal to 1"},
            {"loc": (), "msg": "Value error, bad range"},
        ]
        assert format_validation_errors(errors) == (
            "name: Field required, limit: Input should be greater than or equal to 1, "
            "Value error, bad range"
        )


class TestRequestId:
    @pytest.mark.asyncio
    async def test_generated(self, client):
        response = await client.get("/health")
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_echoed(self, client):
        response = await client.get("/health", headers={"X-Request-ID": "trace-42"})
        assert response.headers["X-Request-ID"] == "trace-42"
