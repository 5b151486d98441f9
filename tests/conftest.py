import copy
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from roadrunners.database.kv_store import KVStore, get_kv_store
from roadrunners.main import app
from roadrunners.services.identity_service import get_identity_service
from roadrunners.services.storage_service import StorageService, get_storage_service

ADMIN_USER = {"id": "admin-1", "email": "boss@roadrunners.in", "name": "Trail Boss"}
RIDER_USER = {"id": "rider-1", "email": "a@x.com", "name": "A Rider"}
ADMIN_TOKEN = "admin-token"
RIDER_TOKEN = "rider-token"


class InMemoryKVStore(KVStore):
    """Dict-backed store; values are copied in and out like a real database."""

    def __init__(self):
        self.data: Dict[str, Any] = {}

    async def get(self, key: str) -> Optional[Any]:
        return copy.deepcopy(self.data.get(key))

    async def mget(self, keys: List[str]) -> List[Any]:
        return [copy.deepcopy(self.data[k]) for k in keys if k in self.data]

    async def set(self, key: str, value: Any) -> None:
        self.data[key] = copy.deepcopy(value)

    async def delete(self, key: str) -> bool:
        return self.data.pop(key, None) is not None

    async def get_by_prefix(self, prefix: str) -> List[Any]:
        return [copy.deepcopy(v) for k, v in self.data.items() if k.startswith(prefix)]

    async def set_if_absent(self, key: str, value: Any) -> bool:
        if key in self.data:
            return False
        self.data[key] = copy.deepcopy(value)
        return True


class FailingKVStore(InMemoryKVStore):
    async def set(self, key: str, value: Any) -> None:
        raise RuntimeError("store unavailable")


class FakeIdentityService:
    """Maps fixed tokens to users; anything else does not resolve."""

    def __init__(self, users: Dict[str, Dict[str, Any]]):
        self.users = users
        self.created: List[Dict[str, Any]] = []

    async def resolve_user(self, token: Optional[str]) -> Optional[Dict[str, Any]]:
        if not token:
            return None
        user = self.users.get(token)
        return dict(user) if user else None

    async def create_user(self, email: str, password: str, name: Optional[str] = None) -> Dict[str, Any]:
        if any(u["email"] == email for u in self.created):
            return {"message": "User already exists", "alreadyExists": True}
        if password == "explode":
            raise HTTPException(status_code=400, detail="Signup error: weak password")
        user = {"id": f"user-{len(self.created) + 1}", "email": email, "name": name}
        self.created.append(user)
        return {"message": "User created", "user": user}


@pytest.fixture
def store():
    return InMemoryKVStore()


@pytest.fixture
def identity():
    return FakeIdentityService({ADMIN_TOKEN: ADMIN_USER, RIDER_TOKEN: RIDER_USER})


@pytest.fixture
def supabase_client():
    client = MagicMock()
    bucket = client.storage.from_.return_value
    bucket.create_signed_url.return_value = {"signedURL": "https://storage.example/signed/doc?token=abc"}
    return client


@pytest.fixture
def storage(supabase_client):
    return StorageService(client_factory=lambda: supabase_client, bucket="test-bucket", max_size=1024)


@pytest.fixture
def client(store, identity, storage):
    app.dependency_overrides[get_kv_store] = lambda: store
    app.dependency_overrides[get_identity_service] = lambda: identity
    app.dependency_overrides[get_storage_service] = lambda: storage
    # No context manager: the lifespan (MongoDB, bucket check) is not run
    yield TestClient(app)
    app.dependency_overrides = {}


@pytest.fixture
def admin_headers(client):
    # First grant goes through the bootstrap path
    resp = client.post("/make-admin", json={"userId": ADMIN_USER["id"]})
    assert resp.status_code == 200, resp.text
    return {"X-User-Token": ADMIN_TOKEN}


@pytest.fixture
def permit_payload():
    return {
        "fullName": "A Rider",
        "email": "a@x.com",
        "idNumber": "ID1",
        "dlNumber": "DL1",
        "documentPath": "permits/doc1.pdf",
    }
