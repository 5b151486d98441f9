import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import HTTPException, status

from roadrunners.database.kv_store import KVStore
from roadrunners.schemas import AdminGrant
from roadrunners.services.identity_service import IdentityService

logger = logging.getLogger(__name__)

ADMIN_PREFIX = "admin:"
BOOTSTRAP_KEY = "system:admin_bootstrap"


class AdminService:
    """Admin grants and the per-request admin authorization check."""

    def __init__(self, store: KVStore, identity: IdentityService):
        self.store = store
        self.identity = identity

    # Returns the user behind `token` if it holds an admin grant, else None
    async def resolve_admin(self, token: Optional[str]) -> Optional[Dict[str, Any]]:
        user = await self.identity.resolve_user(token)
        if not user:
            return None
        grant = await self.store.get(f"{ADMIN_PREFIX}{user['id']}")
        if not grant:
            logger.info("User %s is authenticated but not an admin", user["id"])
            return None
        return user

    async def check_admin(self, token: Optional[str]) -> Dict[str, Any]:
        user = await self.identity.resolve_user(token)
        if not user:
            return {"isAdmin": False}
        grant = await self.store.get(f"{ADMIN_PREFIX}{user['id']}")
        return {"isAdmin": bool(grant), "user": user}

    async def grant_admin(self, user_id: str, caller: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Grant admin to `user_id` on behalf of `caller` (an admin, or None).

        An existing admin may always grant. Without one, the grant is the
        bootstrap of the first admin: it is allowed only while no grant exists
        and only for the caller that wins the insert-if-absent on the
        bootstrap sentinel, so two concurrent bootstraps cannot both succeed.
        """
        user_id = (user_id or "").strip()
        if not user_id:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="userId is required")

        granted_at = datetime.now(timezone.utc).isoformat()
        bootstrapping = False

        if caller is None:
            existing = await self.store.get_by_prefix(ADMIN_PREFIX)
            if existing:
                logger.warning("Rejected admin grant for %s: caller is not an admin", user_id)
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Unauthorized - only existing admins can create new admins"
                )
            claimed = await self.store.set_if_absent(BOOTSTRAP_KEY, {"userId": user_id, "grantedAt": granted_at})
            if not claimed:
                logger.warning("Rejected bootstrap grant for %s: bootstrap already claimed", user_id)
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Unauthorized - only existing admins can create new admins"
                )
            bootstrapping = True
            logger.info("Bootstrapping first admin %s", user_id)

        grant = AdminGrant(granted_at=granted_at, granted_by=caller["id"] if caller else None)
        try:
            await self.store.set(f"{ADMIN_PREFIX}{user_id}", grant.model_dump(by_alias=True))
        except Exception as e:
            logger.error("Failed to persist admin grant for %s: %s", user_id, e)
            if bootstrapping:
                # Release the claim so a later bootstrap can still succeed
                try:
                    await self.store.delete(BOOTSTRAP_KEY)
                except Exception as release_error:
                    logger.error("Failed to release bootstrap claim: %s", release_error)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to grant admin"
            )
        return {"message": "Admin privileges granted"}
