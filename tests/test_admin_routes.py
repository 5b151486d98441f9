import asyncio

import pytest
from fastapi import HTTPException

from roadrunners.services.admin_service import BOOTSTRAP_KEY, AdminService

from conftest import ADMIN_TOKEN, RIDER_TOKEN, RIDER_USER, InMemoryKVStore


def test_first_make_admin_bootstraps_once(client, store):
    resp = client.post("/make-admin", json={"userId": "admin-1"})
    assert resp.status_code == 200
    assert resp.json() == {"message": "Admin privileges granted"}
    assert store.data["admin:admin-1"]["isAdmin"] is True
    assert store.data["admin:admin-1"]["grantedBy"] is None
    assert BOOTSTRAP_KEY in store.data

    # A second unauthenticated grant is refused now that an admin exists
    resp = client.post("/make-admin", json={"userId": "rider-1"})
    assert resp.status_code == 401
    assert "admin:rider-1" not in store.data


def test_admin_can_grant_admin(client, store, admin_headers):
    resp = client.post("/make-admin", json={"userId": RIDER_USER["id"]}, headers=admin_headers)
    assert resp.status_code == 200
    assert store.data["admin:rider-1"]["grantedBy"] == "admin-1"

    # The new admin can now reach privileged endpoints
    assert client.get("/permits", headers={"X-User-Token": RIDER_TOKEN}).status_code == 200


def test_non_admin_cannot_grant(client, admin_headers):
    resp = client.post("/make-admin", json={"userId": "someone"}, headers={"X-User-Token": RIDER_TOKEN})
    assert resp.status_code == 401


def test_make_admin_requires_user_id(client):
    resp = client.post("/make-admin", json={"userId": "   "})
    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "userId is required"


def test_check_admin(client, admin_headers):
    assert client.get("/check-admin").json() == {"isAdmin": False}

    rider = client.get("/check-admin", headers={"X-User-Token": RIDER_TOKEN}).json()
    assert rider["isAdmin"] is False
    assert rider["user"]["email"] == "a@x.com"

    admin = client.get("/check-admin", headers={"X-User-Token": ADMIN_TOKEN}).json()
    assert admin["isAdmin"] is True
    assert admin["user"]["id"] == "admin-1"


def test_signup_and_existing_account(client):
    body = {"email": "new@rider.in", "password": "secret123", "name": "New Rider"}
    resp = client.post("/signup", json=body)
    assert resp.status_code == 200
    assert resp.json()["user"]["email"] == "new@rider.in"

    again = client.post("/signup", json=body)
    assert again.status_code == 200
    assert again.json() == {"message": "User already exists", "alreadyExists": True}


def test_signup_provider_error_is_400(client):
    resp = client.post("/signup", json={"email": "x@rider.in", "password": "explode"})
    assert resp.status_code == 400


def test_signup_short_password_is_validation_error(client):
    resp = client.post("/signup", json={"email": "x@rider.in", "password": "123"})
    assert resp.status_code == 422


def test_audits_require_admin(client, admin_headers):
    assert client.get("/audits").status_code == 401
    resp = client.get("/audits", headers=admin_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["skip"] == 0
    assert body["limit"] == 50
    assert body["data"][0]["action"] == "make_admin"


@pytest.mark.asyncio
async def test_concurrent_bootstrap_has_single_winner(store, identity):
    service = AdminService(store, identity)

    async def attempt(user_id):
        try:
            await service.grant_admin(user_id, None)
            return True
        except Exception:
            return False

    results = await asyncio.gather(attempt("u1"), attempt("u2"), attempt("u3"))

    assert results.count(True) == 1
    assert len([k for k in store.data if k.startswith("admin:")]) == 1


class FlakyAdminStore(InMemoryKVStore):
    """Fails the first write of an admin grant, then behaves."""

    def __init__(self):
        super().__init__()
        self.failures_left = 1

    async def set(self, key, value):
        if key.startswith("admin:") and self.failures_left:
            self.failures_left -= 1
            raise RuntimeError("write concern timeout")
        await super().set(key, value)


@pytest.mark.asyncio
async def test_failed_bootstrap_write_can_be_retried(identity):
    store = FlakyAdminStore()
    service = AdminService(store, identity)

    with pytest.raises(HTTPException) as exc:
        await service.grant_admin("u1", None)
    assert exc.value.status_code == 500
    assert BOOTSTRAP_KEY not in store.data
    assert not [k for k in store.data if k.startswith("admin:")]

    result = await service.grant_admin("u1", None)
    assert result == {"message": "Admin privileges granted"}
    assert store.data["admin:u1"]["isAdmin"] is True
    assert BOOTSTRAP_KEY in store.data


def test_make_admin_audit_names_granting_admin(client, admin_headers):
    client.post("/make-admin", json={"userId": RIDER_USER["id"]}, headers=admin_headers)

    audits = client.get("/audits", params={"action": "make_admin"}, headers=admin_headers).json()["data"]
    by_target = {a["acted"]: a for a in audits}
    assert by_target["rider-1"]["actor"] == "admin-1"
    assert by_target["admin-1"]["actor"] is None
