from fastapi import APIRouter, Depends, HTTPException
from typing import Optional
import logging

from roadrunners.core.auth_dependencies import get_user_token
from roadrunners.core.dependencies import get_admin_service, get_audit_service
from roadrunners.schemas import MakeAdminRequest, SignupRequest
from roadrunners.services.admin_service import AdminService
from roadrunners.services.audit_service import AuditService
from roadrunners.services.identity_service import IdentityService, get_identity_service

router = APIRouter(tags=["Authentication"])

logger = logging.getLogger(__name__)


# Registers a confirmed account with the identity provider
@router.post("/signup")
async def signup_user(
    user_data: SignupRequest,
    identity: IdentityService = Depends(get_identity_service),
    audit: AuditService = Depends(get_audit_service),
):
    try:
        result = await identity.create_user(str(user_data.email), user_data.password, user_data.name)
    except HTTPException:
        await audit.record("signup", str(user_data.email), None, "failed")
        raise
    if not result.get("alreadyExists"):
        await audit.record("signup", str(user_data.email), result["user"]["id"])
    return result


# Grants admin; the very first grant is open once (bootstrap)
@router.post("/make-admin")
async def make_admin(
    payload: MakeAdminRequest,
    token: Optional[str] = Depends(get_user_token),
    admin_service: AdminService = Depends(get_admin_service),
    audit: AuditService = Depends(get_audit_service),
):
    caller = await admin_service.resolve_admin(token)
    actor = caller["id"] if caller else None
    try:
        result = await admin_service.grant_admin(payload.user_id, caller)
    except HTTPException:
        await audit.record("make_admin", actor, payload.user_id, "failed")
        raise
    await audit.record("make_admin", actor, payload.user_id)
    return result


@router.get("/check-admin")
async def check_admin(
    token: Optional[str] = Depends(get_user_token),
    admin_service: AdminService = Depends(get_admin_service),
):
    return await admin_service.check_admin(token)
