from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Optional, Dict
import logging

from roadrunners.core.auth_dependencies import get_admin_user
from roadrunners.core.dependencies import get_audit_service
from roadrunners.services.audit_service import AuditService

router = APIRouter(prefix="/audits", tags=["Audits"])

logger = logging.getLogger(__name__)


@router.get("", status_code=200)
async def list_audits(
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=50, ge=1, le=1000),
    action: Optional[str] = Query(default=None),
    current_user: Dict = Depends(get_admin_user),
    audit: AuditService = Depends(get_audit_service),
):
    try:
        return await audit.get_audits(skip=skip, limit=limit, action=action)
    except Exception as e:
        logger.error(f"Error listing audit logs: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch audit logs")
