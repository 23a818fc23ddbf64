"""
Test suite for the /user endpoints.

Covers sign-up rules, login, lookups, updates (with password re-hashing)
and deletion.

Run with: pytest tests/test_users.py -v
"""
import threading

import bcrypt
import pytest

import httpx

from src.auth.passwords import hash_password

EMAIL = "jane.doe@croneri.co.uk"


async def sign_up(client: httpx.AsyncClient, email: str = EMAIL, password: str = "hunter22", role: str = "admin"):
    return await client.post("/user/create", json={"email": email, "password": password, "role": role})


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_create_user(self, client: httpx.AsyncClient, pool, token_handler):
        resp = await sign_up(client)

        assert resp.status_code == 201, f"Unexpected status: {resp.status_code}, body: {resp.text}"
        data = resp.json()
        assert data["success"] is True
        assert data["message"] == "User created successfully"
        assert data["user"]["email"] == EMAIL
        assert data["user"]["user_id"].startswith("admin")
        assert "password" not in data["user"], "Password hash must never be returned"
        assert "id" not in data["user"], "Row id must never be returned"

        assert token_handler.decode_token(data["token"]) == data["user"]["user_id"]

        stored = pool.tables["users"][0]["password"]
        assert stored != "hunter22"
        assert stored.startswith("$2"), "Password should be stored as a bcrypt hash"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {},
        {"email": EMAIL, "password": "hunter22"},
        {"email": EMAIL, "password": "   ", "role": "admin"},
        {"email": "", "password": "hunter22", "role": "admin"},
    ])
    async def test_missing_fields(self, client: httpx.AsyncClient, pool, body):
        resp = await client.post("/user/create", json=body)

        assert resp.status_code == 400
        assert resp.json() == {"message": "Password, Email or Role are missing", "success": False}
        pool.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_foreign_organisation(self, client: httpx.AsyncClient, pool):
        resp = await sign_up(client, email="x@example.com")

        assert resp.status_code == 400
        assert resp.json()["message"] == "You should be joining only if you are part of the right organisation"
        pool.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_email(self, client: httpx.AsyncClient):
        resp = await sign_up(client, email="jane@croneri")

        assert resp.status_code == 400
        assert resp.json()["message"] == "Email invalid"

    @pytest.mark.asyncio
    async def test_duplicate_email(self, client: httpx.AsyncClient):
        await sign_up(client)
        resp = await sign_up(client, role="guest")

        assert resp.status_code == 403
        assert resp.json() == {"message": "This user already exists", "success": False}

    @pytest.mark.asyncio
    async def test_storage_failure(self, client: httpx.AsyncClient, pool):
        pool.fail_with(OSError("connection refused"))

        resp = await sign_up(client)

        assert resp.status_code == 404
        assert resp.json()["message"] == "Something went wrong during the user's creation"

    @pytest.mark.asyncio
    async def test_password_over_72_bytes(self, client: httpx.AsyncClient, pool):
        resp = await sign_up(client, password="p" * 73)

        assert resp.status_code == 400
        assert resp.json() == {"message": "Password is too long", "success": False}
        pool.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_password_of_72_bytes(self, client: httpx.AsyncClient):
        resp = await sign_up(client, password="\u00e9" * 36)

        assert resp.status_code == 201, resp.text

    @pytest.mark.asyncio
    async def test_hashing_runs_off_the_event_loop(self, client: httpx.AsyncClient, monkeypatch):
        threads = []
        original = bcrypt.hashpw

        def recording_hashpw(password, salt):
            threads.append(threading.current_thread())
            return original(password, salt)

        monkeypatch.setattr(bcrypt, "hashpw", recording_hashpw)

        resp = await sign_up(client)

        assert resp.status_code == 201
        assert threads, "bcrypt.hashpw was never called"
        assert threading.main_thread() not in threads, "Hashing blocked the event loop thread"

    @pytest.mark.asyncio
    async def test_unparseable_body(self, client: httpx.AsyncClient):
        resp = await client.post(
            "/user/create",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert resp.status_code == 400
        assert resp.json()["success"] is False


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_authenticate(self, client: httpx.AsyncClient, token_handler):
        created = (await sign_up(client)).json()["user"]

        resp = await client.post("/user/authenticate", json={"email": EMAIL, "password": "hunter22"})

        assert resp.status_code == 201
        data = resp.json()
        assert data["message"] == "Authentication successful"
        assert data["user"]["user_id"] == created["user_id"]
        assert "password" not in data["user"]
        assert token_handler.decode_token(data["token"]) == created["user_id"]

    @pytest.mark.asyncio
    async def test_wrong_password(self, client: httpx.AsyncClient):
        await sign_up(client)

        resp = await client.post("/user/authenticate", json={"email": EMAIL, "password": "wrong"})

        assert resp.status_code == 401
        assert resp.json() == {"message": "Passwords do not match", "success": False}

    @pytest.mark.asyncio
    async def test_over_long_password_never_matches(self, client: httpx.AsyncClient):
        await sign_up(client)

        resp = await client.post("/user/authenticate", json={"email": EMAIL, "password": "p" * 100})

        assert resp.status_code == 401
        assert resp.json()["message"] == "Passwords do not match"

    @pytest.mark.asyncio
    async def test_unknown_email(self, client: httpx.AsyncClient):
        resp = await client.post("/user/authenticate", json={"email": EMAIL, "password": "hunter22"})

        assert resp.status_code == 404
        assert resp.json()["message"] == "Failed to find user"

    @pytest.mark.asyncio
    async def test_missing_credentials(self, client: httpx.AsyncClient, pool):
        resp = await client.post("/user/authenticate", json={"email": EMAIL})

        assert resp.status_code == 400
        assert resp.json()["message"] == "Email, Password are missing"
        pool.fetch.assert_not_awaited()


class TestFindUsers:
    @pytest.mark.asyncio
    async def test_find_by_email(self, client: httpx.AsyncClient, token_handler):
        await sign_up(client)

        resp = await client.get("/user/oneByEmail", params={"requester_id": "admin1", "email": EMAIL})

        assert resp.status_code == 200
        data = resp.json()
        assert data["message"] == "User found successfully"
        assert data["user"]["email"] == EMAIL
        assert token_handler.decode_token(data["token"]) == "admin1"

    @pytest.mark.asyncio
    async def test_find_by_id(self, client: httpx.AsyncClient):
        created = (await sign_up(client)).json()["user"]

        resp = await client.get("/user/oneById", params={"requester_id": "admin1", "user_id": created["user_id"]})

        assert resp.status_code == 200
        assert resp.json()["user"] == created

    @pytest.mark.asyncio
    async def test_find_by_id_not_found(self, client: httpx.AsyncClient):
        resp = await client.get("/user/oneById", params={"requester_id": "admin1", "user_id": "guest404"})

        assert resp.status_code == 404
        assert resp.json() == {"message": "Failed to find user", "success": False}

    @pytest.mark.asyncio
    async def test_find_requires_requester(self, client: httpx.AsyncClient, pool):
        resp = await client.get("/user/oneByEmail", params={"email": EMAIL})

        assert resp.status_code == 400
        assert resp.json()["message"] == "Missing requester_id or email"
        pool.fetch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_find_all(self, client: httpx.AsyncClient):
        await sign_up(client)
        await sign_up(client, email="john@croneri.co.uk", role="guest")

        resp = await client.get("/user/all", params={"requester_id": "admin1"})

        assert resp.status_code == 200
        users = resp.json()["users"]
        assert {user["email"] for user in users} == {EMAIL, "john@croneri.co.uk"}
        assert all("password" not in user for user in users)

    @pytest.mark.asyncio
    async def test_find_all_empty(self, client: httpx.AsyncClient):
        resp = await client.get("/user/all", params={"requester_id": "admin1"})

        assert resp.status_code == 404
        assert resp.json()["message"] == "Failed to find users"


class TestUpdateUser:
    @pytest.mark.asyncio
    async def test_update_role(self, client: httpx.AsyncClient, pool):
        created = (await sign_up(client)).json()["user"]

        resp = await client.put("/user/update", json={
            "requester_id": "admin1",
            "user_id": created["user_id"],
            "role": "guest",
            "email": "  ",
        })

        assert resp.status_code == 200
        data = resp.json()
        assert data["message"] == "User updated successfully"
        assert data["user"]["role"] == "guest"
        assert data["user"]["email"] == EMAIL, "Whitespace-only email leaves the column unchanged"
        assert len(pool.statements("UPDATE")) == 1

    @pytest.mark.asyncio
    async def test_update_password_is_hashed(self, client: httpx.AsyncClient, pool):
        created = (await sign_up(client)).json()["user"]

        await client.put("/user/update", json={
            "requester_id": "admin1",
            "user_id": created["user_id"],
            "password": "new-password",
        })

        assert pool.tables["users"][0]["password"].startswith("$2")
        login = await client.post("/user/authenticate", json={"email": EMAIL, "password": "new-password"})
        assert login.status_code == 201

    @pytest.mark.asyncio
    async def test_update_password_too_long(self, client: httpx.AsyncClient, pool):
        created = (await sign_up(client)).json()["user"]
        stored = pool.tables["users"][0]["password"]

        resp = await client.put("/user/update", json={
            "requester_id": "admin1",
            "user_id": created["user_id"],
            "password": "p" * 100,
        })

        assert resp.status_code == 400
        assert resp.json()["message"] == "Password is too long"
        assert pool.tables["users"][0]["password"] == stored
        assert pool.statements("UPDATE") == []

    @pytest.mark.asyncio
    async def test_update_to_taken_email(self, client: httpx.AsyncClient):
        await sign_up(client)
        other = (await sign_up(client, email="john@croneri.co.uk")).json()["user"]

        resp = await client.put("/user/update", json={
            "requester_id": "admin1",
            "user_id": other["user_id"],
            "email": EMAIL,
        })

        assert resp.status_code == 403
        assert resp.json()["message"] == "This user already exists"

    @pytest.mark.asyncio
    async def test_update_unknown_user(self, client: httpx.AsyncClient):
        resp = await client.put("/user/update", json={"requester_id": "admin1", "user_id": "guest404"})

        assert resp.status_code == 404
        assert resp.json()["message"] == "Failed to update user"

    @pytest.mark.asyncio
    async def test_update_missing_ids(self, client: httpx.AsyncClient, pool):
        resp = await client.put("/user/update", json={"user_id": "guest1", "role": "admin"})

        assert resp.status_code == 400
        assert resp.json()["message"] == "requester_id or user_id are missing"
        pool.execute.assert_not_awaited()


class TestDeleteUser:
    @pytest.mark.asyncio
    async def test_delete(self, client: httpx.AsyncClient, pool):
        pool.insert_row("users", user_id="guest1", email=EMAIL, password=hash_password("x"), role="guest")

        resp = await client.request("DELETE", "/user/delete", json={"requester_id": "admin1", "user_id": "guest1"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["message"] == "User deleted successfully"
        assert data["token"]
        assert pool.tables["users"] == []

    @pytest.mark.asyncio
    async def test_delete_missing_requester(self, client: httpx.AsyncClient, pool):
        resp = await client.request("DELETE", "/user/delete", json={"user_id": "guest1"})

        assert resp.status_code == 400
        assert resp.json()["message"] == "requester_id or user_id are missing"
        pool.execute.assert_not_awaited()
