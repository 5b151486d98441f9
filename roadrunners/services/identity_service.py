import logging
from typing import Any, Callable, Dict, Optional

from fastapi import HTTPException, status
from starlette.concurrency import run_in_threadpool

from roadrunners.core.config import settings
from roadrunners.core.security import decode_token, user_from_claims
from roadrunners.core.supabase_client import get_supabase_client

logger = logging.getLogger(__name__)


class IdentityService:
    """Resolves end-user session tokens and manages accounts in Supabase Auth.

    Tokens are verified locally with the project's JWT secret when one is
    configured; otherwise every call asks Supabase (`auth.get_user`). Either
    way nothing is cached between requests.
    """

    def __init__(self, client_factory: Callable[[], Any] = get_supabase_client, jwt_secret: Optional[str] = None):
        self._client_factory = client_factory
        self._jwt_secret = jwt_secret if jwt_secret is not None else settings.SUPABASE_JWT_SECRET

    # Resolves a session token to {id, email, name}; any failure yields None
    async def resolve_user(self, token: Optional[str]) -> Optional[Dict[str, Any]]:
        if not token:
            return None

        if self._jwt_secret:
            payload = decode_token(token, secret=self._jwt_secret)
            if payload is None:
                logger.debug("Session token rejected by local verification")
                return None
            return user_from_claims(payload)

        try:
            client = self._client_factory()
            response = await run_in_threadpool(client.auth.get_user, token)
        except Exception as e:
            logger.warning("Identity provider lookup failed: %s", type(e).__name__)
            return None

        user = getattr(response, "user", None)
        if user is None:
            return None
        metadata = getattr(user, "user_metadata", None) or {}
        return {
            "id": str(user.id),
            "email": getattr(user, "email", None),
            "name": metadata.get("name"),
        }

    # Creates a confirmed account; reports an existing account instead of failing
    async def create_user(self, email: str, password: str, name: Optional[str] = None) -> Dict[str, Any]:
        try:
            client = self._client_factory()
            response = await run_in_threadpool(
                client.auth.admin.create_user,
                {
                    "email": email,
                    "password": password,
                    "user_metadata": {"name": name},
                    # No mail server is configured, so accounts are confirmed on creation
                    "email_confirm": True,
                },
            )
        except Exception as e:
            message = str(e)
            if "already" in message.lower():
                logger.info("Signup for existing account: %s", email)
                return {"message": "User already exists", "alreadyExists": True}
            logger.warning("Signup failed for %s: %s", email, message)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Signup error: {message}"
            )

        user = response.user
        logger.info("Created user %s", user.id)
        return {
            "message": "User created",
            "user": {
                "id": str(user.id),
                "email": user.email,
                "name": name,
            },
        }


# Singleton instance
_SERVICE: Optional[IdentityService] = None


def get_identity_service() -> IdentityService:
    global _SERVICE
    if _SERVICE is None:
        _SERVICE = IdentityService()
    return _SERVICE
