"""
Shelter Admin Backend — Pet Endpoint Tests
============================================

What we test:
    ✅ Creation defaults (statuses, zeroed counters) and the 201 envelope
    ✅ Each detail fetch adds exactly one view
    ✅ Favorites never go below zero
    ✅ Filters, pagination metadata and newest-first ordering
    ✅ Partial updates leave other fields alone
    ✅ Delete, then 404
"""

import pytest


async def create_pet(client, payload, **overrides):
    response = await client.post("/pets", json={**payload, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestPetCrud:
    @pytest.mark.asyncio
    async def test_create_defaults(self, auth_client, pet_payload):
        response = await auth_client.post("/pets", json=pet_payload)
        assert response.status_code == 201
        body = response.json()
        assert body["code"] == 201
        assert body["message"] == "success"
        pet = body["data"]
        assert pet["healthStatus"] == "healthy"
        assert pet["adoptionStatus"] == "available"
        assert pet["viewCount"] == 0
        assert pet["favoriteCount"] == 0
        assert pet["age"] == 2.5

    @pytest.mark.asyncio
    async def test_unknown_type_rejected(self, auth_client, pet_payload):
        response = await auth_client.post("/pets", json={**pet_payload, "type": "dragon"})
        assert response.status_code == 400
        assert response.json()["data"] is None

    @pytest.mark.asyncio
    async def test_unknown_field_rejected(self, auth_client, pet_payload):
        response = await auth_client.post("/pets", json={**pet_payload, "viewCount": 50})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_partial_update(self, auth_client, pet_payload):
        pet = await create_pet(auth_client, pet_payload)
        response = await auth_client.patch(
            f"/pets/{pet['id']}", json={"color": "brown", "healthStatus": "treating"}
        )
        assert response.status_code == 200
        updated = response.json()["data"]
        assert updated["color"] == "brown"
        assert updated["healthStatus"] == "treating"
        assert updated["name"] == "Biscuit"
        assert updated["breed"] == "Beagle"

    @pytest.mark.asyncio
    async def test_null_for_required_field_is_ignored(self, auth_client, pet_payload):
        pet = await create_pet(auth_client, pet_payload)
        response = await auth_client.patch(f"/pets/{pet['id']}", json={"name": None})
        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Biscuit"

    @pytest.mark.asyncio
    async def test_delete_then_404(self, auth_client, pet_payload):
        pet = await create_pet(auth_client, pet_payload)
        response = await auth_client.delete(f"/pets/{pet['id']}")
        assert response.status_code == 200
        assert response.json()["data"]["message"] == "Pet deleted successfully"

        missing = await auth_client.get(f"/pets/{pet['id']}")
        assert missing.status_code == 404
        assert missing.json() == {
            "data": None,
            "code": 404,
            "message": f"Pet with ID '{pet['id']}' was not found",
        }

    @pytest.mark.asyncio
    async def test_update_missing_pet(self, auth_client):
        response = await auth_client.patch("/pets/4242", json={"color": "black"})
        assert response.status_code == 404


class TestPetCounters:
    @pytest.mark.asyncio
    async def test_each_fetch_adds_one_view(self, auth_client, pet_payload):
        pet = await create_pet(auth_client, pet_payload)
        first = await auth_client.get(f"/pets/{pet['id']}")
        second = await auth_client.get(f"/pets/{pet['id']}")
        assert first.json()["data"]["viewCount"] == 1
        assert second.json()["data"]["viewCount"] == 2

    @pytest.mark.asyncio
    async def test_missing_pet_view_is_404(self, auth_client):
        response = await auth_client.get("/pets/31337")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_favorite_floor_is_zero(self, auth_client, pet_payload):
        pet = await create_pet(auth_client, pet_payload)
        added = await auth_client.post(f"/pets/{pet['id']}/favorite")
        assert added.json()["data"]["favoriteCount"] == 1

        for _ in range(2):
            removed = await auth_client.delete(f"/pets/{pet['id']}/favorite")
            assert removed.status_code == 200
        assert removed.json()["data"]["favoriteCount"] == 0

    @pytest.mark.asyncio
    async def test_unfavorite_missing_pet(self, auth_client):
        response = await auth_client.delete("/pets/777/favorite")
        assert response.status_code == 404


class TestPetListing:
    @pytest.mark.asyncio
    async def test_pagination_metadata(self, auth_client, pet_payload):
        for name in ("Alpha", "Bravo", "Charlie"):
            await create_pet(auth_client, pet_payload, name=name)

        page_one = (await auth_client.get("/pets", params={"limit": 2})).json()["data"]
        assert page_one["total"] == 3
        assert page_one["page"] == 1
        assert page_one["limit"] == 2
        assert page_one["totalPages"] == 2
        assert [p["name"] for p in page_one["data"]] == ["Charlie", "Bravo"]

        page_two = (await auth_client.get("/pets", params={"limit": 2, "page": 2})).json()["data"]
        assert [p["name"] for p in page_two["data"]] == ["Alpha"]

    @pytest.mark.asyncio
    async def test_empty_listing(self, auth_client):
        page = (await auth_client.get("/pets")).json()["data"]
        assert page == {"data": [], "total": 0, "page": 1, "limit": 10, "totalPages": 0}

    @pytest.mark.asyncio
    async def test_filters_combine(self, auth_client, pet_payload):
        await create_pet(auth_client, pet_payload, name="Rex", location="Kennel A")
        await create_pet(auth_client, pet_payload, name="Tom", type="cat", location="Kennel A")
        await create_pet(auth_client, pet_payload, name="Max", location="Foster home")

        response = await auth_client.get("/pets", params={"type": "dog", "location": "Kennel"})
        names = [p["name"] for p in response.json()["data"]["data"]]
        assert names == ["Rex"]

    @pytest.mark.asyncio
    async def test_location_wildcards_are_literal(self, auth_client, pet_payload):
        await create_pet(auth_client, pet_payload, location="Room 100%")
        await create_pet(auth_client, pet_payload, location="Room 1000")

        response = await auth_client.get("/pets", params={"location": "100%"})
        assert response.json()["data"]["total"] == 1

    @pytest.mark.asyncio
    async def test_limit_out_of_range(self, auth_client):
        response = await auth_client.get("/pets", params={"limit": 0})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_stats(self, auth_client, pet_payload):
        await create_pet(auth_client, pet_payload)
        await create_pet(auth_client, pet_payload, adoptionStatus="adopted")
        await create_pet(auth_client, pet_payload, healthStatus="treating")

        stats = (await auth_client.get("/pets/stats")).json()["data"]
        assert stats == {"total": 3, "available": 2, "adopted": 1, "treating": 1}
