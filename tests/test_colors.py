"""
Test suite for the /color endpoints.

Run with: pytest tests/test_colors.py -v
"""
import pytest

import httpx


def seed_color(pool, color_id: str = "color1", hex_code: str = "#ff0000", workspace_id: str = "workspace1"):
    return pool.insert_row(
        "colors", color_id=color_id, workspace_id=workspace_id, guest_id="guest1", hex=hex_code,
    )


class TestCreateColor:
    @pytest.mark.asyncio
    async def test_create(self, client: httpx.AsyncClient):
        resp = await client.post("/color/create", json={
            "requester_id": "admin1",
            "workspace_id": "workspace1",
            "guest_id": "guest1",
            "hex": "#00ff00",
        })

        assert resp.status_code == 201, f"Unexpected status: {resp.status_code}, body: {resp.text}"
        data = resp.json()
        assert data["message"] == "Color created successfully"
        assert data["color"]["hex"] == "#00ff00"
        assert data["success"] is True

    @pytest.mark.asyncio
    async def test_create_missing_hex(self, client: httpx.AsyncClient, pool):
        resp = await client.post("/color/create", json={
            "requester_id": "admin1",
            "workspace_id": "workspace1",
            "guest_id": "guest1",
        })

        assert resp.status_code == 400
        assert resp.json()["message"] == "requester_id, workspace_id, guest_id or hex are missing"
        pool.execute.assert_not_awaited()


class TestFindColors:
    @pytest.mark.asyncio
    async def test_find_by_hex(self, client: httpx.AsyncClient, pool):
        seed_color(pool)

        resp = await client.get("/color/oneByHex", params={"requester_id": "admin1", "hex": "#ff0000"})

        assert resp.status_code == 200
        assert resp.json()["color"]["color_id"] == "color1"

    @pytest.mark.asyncio
    async def test_find_by_id_not_found(self, client: httpx.AsyncClient):
        resp = await client.get("/color/oneById", params={"requester_id": "admin1", "color_id": "color404"})

        assert resp.status_code == 404
        assert resp.json() == {"message": "Failed to find color", "success": False}

    @pytest.mark.asyncio
    async def test_find_all_by_workspace(self, client: httpx.AsyncClient, pool):
        seed_color(pool, "color1", "#ff0000", "workspace1")
        seed_color(pool, "color2", "#00ff00", "workspace2")

        resp = await client.get("/color/allByWorkspace", params={"requester_id": "admin1", "workspace_id": "workspace2"})

        assert resp.status_code == 200
        assert [c["hex"] for c in resp.json()["colors"]] == ["#00ff00"]

    @pytest.mark.asyncio
    async def test_find_all_empty(self, client: httpx.AsyncClient):
        resp = await client.get("/color/all", params={"requester_id": "admin1"})

        assert resp.status_code == 404
        assert resp.json()["message"] == "Failed to find colors"


class TestUpdateColor:
    @pytest.mark.asyncio
    async def test_update_hex_only(self, client: httpx.AsyncClient, pool):
        seed_color(pool)

        resp = await client.put("/color/update", json={
            "requester_id": "admin1",
            "color_id": "color1",
            "hex": "#0000ff",
        })

        assert resp.status_code == 200
        assert resp.json()["color"]["hex"] == "#0000ff"
        assert len(pool.statements("UPDATE")) == 1

    @pytest.mark.asyncio
    async def test_update_all_fields(self, client: httpx.AsyncClient, pool):
        seed_color(pool)

        resp = await client.put("/color/update", json={
            "requester_id": "admin1",
            "color_id": "color1",
            "workspace_id": "workspace2",
            "guest_id": "guest2",
            "hex": "#0000ff",
        })

        assert resp.status_code == 200
        color = resp.json()["color"]
        assert (color["workspace_id"], color["guest_id"], color["hex"]) == ("workspace2", "guest2", "#0000ff")
        assert len(pool.statements("UPDATE")) == 3

    @pytest.mark.asyncio
    async def test_update_nothing_returns_current(self, client: httpx.AsyncClient, pool):
        seed_color(pool)

        resp = await client.put("/color/update", json={"requester_id": "admin1", "color_id": "color1"})

        assert resp.status_code == 200
        assert resp.json()["color"]["hex"] == "#ff0000"
        assert pool.statements("UPDATE") == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {"requester_id": "admin1", "hex": "#0000ff"},
        {"requester_id": "admin1", "color_id": " ", "hex": "#0000ff"},
        {"requester_id": "  ", "color_id": "color1", "hex": "#0000ff"},
    ])
    async def test_update_blank_ids(self, client: httpx.AsyncClient, pool, body):
        seed_color(pool)

        resp = await client.put("/color/update", json=body)

        assert resp.status_code == 400
        assert resp.json() == {"message": "requester_id or color_id are missing", "success": False}
        pool.execute.assert_not_awaited()
        assert pool.tables["colors"][0]["hex"] == "#ff0000"


class TestDeleteColor:
    @pytest.mark.asyncio
    async def test_delete(self, client: httpx.AsyncClient, pool):
        seed_color(pool)

        resp = await client.request("DELETE", "/color/delete", json={"requester_id": "admin1", "color_id": "color1"})

        assert resp.status_code == 200
        assert resp.json()["message"] == "Color deleted successfully"
        assert pool.tables["colors"] == []

    @pytest.mark.asyncio
    async def test_delete_unknown_id(self, client: httpx.AsyncClient):
        resp = await client.request("DELETE", "/color/delete", json={"requester_id": "admin1", "color_id": "color404"})

        assert resp.status_code == 200

    @pytest.mark.asyncio
    async def test_delete_blank_requester(self, client: httpx.AsyncClient, pool):
        resp = await client.request("DELETE", "/color/delete", json={"requester_id": " ", "color_id": "color1"})

        assert resp.status_code == 400
        assert resp.json() == {"message": "requester_id or color_id are missing", "success": False}
        pool.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_storage_failure(self, client: httpx.AsyncClient, pool):
        pool.fail_with(OSError("connection refused"), on="DELETE")

        resp = await client.request("DELETE", "/color/delete", json={"requester_id": "admin1", "color_id": "color1"})

        assert resp.status_code == 404
        assert resp.json() == {"message": "Failed to delete color", "success": False}
