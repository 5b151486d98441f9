import time
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException
from jose import jwt

from roadrunners.services.identity_service import IdentityService

SECRET = "test-jwt-secret-with-enough-length"


def _token(secret=SECRET, **claims):
    payload = {
        "sub": "user-42",
        "email": "rider@roadrunners.in",
        "aud": "authenticated",
        "exp": int(time.time()) + 600,
        "user_metadata": {"name": "Rider Fortytwo"},
    }
    payload.update(claims)
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.mark.asyncio
async def test_local_verification_returns_user():
    service = IdentityService(client_factory=MagicMock(), jwt_secret=SECRET)
    user = await service.resolve_user(_token())
    assert user == {"id": "user-42", "email": "rider@roadrunners.in", "name": "Rider Fortytwo"}


@pytest.mark.asyncio
async def test_local_verification_rejects_bad_tokens():
    service = IdentityService(client_factory=MagicMock(), jwt_secret=SECRET)
    assert await service.resolve_user(_token(secret="another-secret-entirely")) is None
    assert await service.resolve_user(_token(exp=int(time.time()) - 10)) is None
    assert await service.resolve_user(_token(aud="anon")) is None
    assert await service.resolve_user("not-a-jwt") is None
    assert await service.resolve_user(None) is None


@pytest.mark.asyncio
async def test_provider_lookup_when_no_secret():
    client = MagicMock()
    client.auth.get_user.return_value = SimpleNamespace(
        user=SimpleNamespace(id="abc", email="a@x.com", user_metadata={"name": "A"})
    )
    service = IdentityService(client_factory=lambda: client, jwt_secret="")

    user = await service.resolve_user("opaque-token")

    assert user == {"id": "abc", "email": "a@x.com", "name": "A"}
    client.auth.get_user.assert_called_once_with("opaque-token")


@pytest.mark.asyncio
async def test_provider_failure_means_no_user():
    client = MagicMock()
    client.auth.get_user.side_effect = RuntimeError("invalid JWT")
    service = IdentityService(client_factory=lambda: client, jwt_secret="")
    assert await service.resolve_user("expired") is None


@pytest.mark.asyncio
async def test_create_user_confirms_email():
    client = MagicMock()
    client.auth.admin.create_user.return_value = SimpleNamespace(user=SimpleNamespace(id="u1", email="n@x.com"))
    service = IdentityService(client_factory=lambda: client, jwt_secret="")

    result = await service.create_user("n@x.com", "secret123", "New")

    assert result == {"message": "User created", "user": {"id": "u1", "email": "n@x.com", "name": "New"}}
    sent = client.auth.admin.create_user.call_args.args[0]
    assert sent["email_confirm"] is True
    assert sent["user_metadata"] == {"name": "New"}


@pytest.mark.asyncio
async def test_create_user_existing_account():
    client = MagicMock()
    client.auth.admin.create_user.side_effect = Exception("A user with this email address has already been registered")
    service = IdentityService(client_factory=lambda: client, jwt_secret="")

    result = await service.create_user("n@x.com", "secret123")
    assert result == {"message": "User already exists", "alreadyExists": True}


@pytest.mark.asyncio
async def test_create_user_other_errors_are_400():
    client = MagicMock()
    client.auth.admin.create_user.side_effect = Exception("Password should be at least 6 characters")
    service = IdentityService(client_factory=lambda: client, jwt_secret="")

    with pytest.raises(HTTPException) as exc:
        await service.create_user("n@x.com", "123")
    assert exc.value.status_code == 400
    assert exc.value.detail.startswith("Signup error:")
