from fastapi import Depends, Header, HTTPException, status
from typing import Dict, Optional
import logging

from roadrunners.core.config import settings
from roadrunners.core.dependencies import get_admin_service
from roadrunners.services.admin_service import AdminService

logger = logging.getLogger(__name__)


# Reads the end-user session token; the Authorization header is left to the gateway
async def get_user_token(x_user_token: Optional[str] = Header(default=None, alias=settings.USER_TOKEN_HEADER)) -> Optional[str]:
    token = (x_user_token or "").strip()
    return token or None


# Validates that the caller holds an admin grant
async def get_admin_user(
    token: Optional[str] = Depends(get_user_token),
    admin_service: AdminService = Depends(get_admin_service),
) -> Dict:
    user = await admin_service.resolve_admin(token)
    if user is None:
        logger.warning("Admin check failed (token %s)", "present" if token else "missing")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return user
