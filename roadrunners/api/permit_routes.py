from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Dict, Optional
import logging

from roadrunners.core.auth_dependencies import get_admin_user
from roadrunners.core.dependencies import get_audit_service, get_permit_service
from roadrunners.schemas import PermitCreate, PermitUpdate
from roadrunners.services.audit_service import AuditService
from roadrunners.services.permit_service import PermitService

router = APIRouter(prefix="/permits", tags=["Permits"])

logger = logging.getLogger(__name__)


# Public permit application; documentPath comes from a prior /upload
@router.post("", status_code=status.HTTP_200_OK)
async def submit_permit(
    data: PermitCreate,
    service: PermitService = Depends(get_permit_service),
):
    permit = await service.submit_permit(data)
    return {"message": "Permit submitted", "permit": permit}


@router.get("")
async def list_permits(
    current_user: Dict = Depends(get_admin_user),
    service: PermitService = Depends(get_permit_service),
):
    permits = await service.list_permits()
    return {"permits": permits}


# Declared before /{permit_id} routes so "by-email" is never taken as an id
@router.get("/by-email")
async def permits_by_email(
    email: Optional[str] = Query(default=None),
    service: PermitService = Depends(get_permit_service),
):
    permits = await service.lookup_by_email(email or "")
    return {"permits": permits}


@router.put("/{permit_id}")
async def update_permit(
    permit_id: str,
    update: PermitUpdate,
    current_user: Dict = Depends(get_admin_user),
    service: PermitService = Depends(get_permit_service),
    audit: AuditService = Depends(get_audit_service),
):
    try:
        permit = await service.update_permit(permit_id, update)
    except HTTPException:
        await audit.record("permit_update", current_user.get("id"), permit_id, "failed")
        raise
    await audit.record("permit_update", current_user.get("id"), permit_id)
    return {"message": "Permit updated", "permit": permit}


@router.get("/{permit_id}/document")
async def get_permit_document(
    permit_id: str,
    current_user: Dict = Depends(get_admin_user),
    service: PermitService = Depends(get_permit_service),
):
    return await service.get_document_url(permit_id)
