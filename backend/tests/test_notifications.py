"""
Shelter Admin Backend — Notification Tests
============================================

What we test:
    ✅ New notifications are unread
    ✅ mark-read, mark-all-read and the unread counter agree
    ✅ unreadOnly hides read notifications
"""

import pytest


async def notify(client, title="New application", type_="adoption"):
    response = await client.post(
        "/notifications",
        json={"type": type_, "title": title, "content": "Someone applied for Biscuit"},
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestNotifications:
    @pytest.mark.asyncio
    async def test_create_is_unread(self, auth_client):
        notification = await notify(auth_client)
        assert notification["isRead"] is False

    @pytest.mark.asyncio
    async def test_unread_counter(self, auth_client):
        first = await notify(auth_client, title="one")
        await notify(auth_client, title="two")
        await notify(auth_client, title="three")

        marked = await auth_client.post(f"/notifications/{first['id']}/mark-read")
        assert marked.json()["data"]["isRead"] is True

        count = (await auth_client.get("/notifications/unread-count")).json()["data"]
        assert count == {"unreadCount": 2}

        unread = (await auth_client.get("/notifications", params={"unreadOnly": "true"})).json()
        assert sorted(n["title"] for n in unread["data"]["data"]) == ["three", "two"]

    @pytest.mark.asyncio
    async def test_mark_all_read(self, auth_client):
        await notify(auth_client)
        await notify(auth_client)

        response = await auth_client.post("/notifications/mark-all-read")
        assert response.status_code == 200
        assert response.json()["data"]["count"] == 2

        count = (await auth_client.get("/notifications/unread-count")).json()["data"]
        assert count["unreadCount"] == 0

        stats = (await auth_client.get("/notifications/stats")).json()["data"]
        assert stats == {"total": 2, "unread": 0, "read": 2}

    @pytest.mark.asyncio
    async def test_mark_read_missing(self, auth_client):
        response = await auth_client.post("/notifications/12/mark-read")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_filter_by_type(self, auth_client):
        await notify(auth_client, type_="donation", title="Gift received")
        await notify(auth_client)

        response = await auth_client.get("/notifications", params={"type": "donation"})
        assert [n["title"] for n in response.json()["data"]["data"]] == ["Gift received"]
