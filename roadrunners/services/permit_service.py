import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from pydantic import ValidationError

from roadrunners.core.config import settings
from roadrunners.database.kv_store import KVStore
from roadrunners.schemas import (
    IdTypeEnum,
    PermitApplication,
    PermitCreate,
    PermitDocumentLink,
    PermitStatusEnum,
    PermitStatusView,
    PermitUpdate,
)
from roadrunners.services.storage_service import StorageService

logger = logging.getLogger(__name__)

PERMIT_PREFIX = "permit:"

REQUIRED_FIELDS = {
    "full_name": "fullName",
    "email": "email",
    "id_number": "idNumber",
    "dl_number": "dlNumber",
    "document_path": "documentPath",
}

# Only consulted when strict transitions are enabled
ALLOWED_TRANSITIONS = {
    PermitStatusEnum.pending: {PermitStatusEnum.verified, PermitStatusEnum.rejected},
    PermitStatusEnum.verified: {PermitStatusEnum.approved, PermitStatusEnum.rejected},
    PermitStatusEnum.approved: set(),
    PermitStatusEnum.rejected: set(),
}


def generate_permit_id() -> str:
    now_ms = int(datetime.now(timezone.utc).timestamp() * 1000)
    return f"{now_ms}-{uuid.uuid4().hex[:9]}"


class PermitService:

    def __init__(self, store: KVStore, storage: StorageService, strict_transitions: Optional[bool] = None):
        self.store = store
        self.storage = storage
        self.strict_transitions = settings.PERMIT_STRICT_TRANSITIONS if strict_transitions is None else strict_transitions

    @staticmethod
    def _key(permit_id: str) -> str:
        return f"{PERMIT_PREFIX}{permit_id}"

    def _validate_permit_data(self, data: PermitCreate) -> None:
        missing = [alias for field, alias in REQUIRED_FIELDS.items() if not getattr(data, field)]
        if missing:
            logger.info(f"Rejected permit submission, missing: {missing}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Missing required fields: {', '.join(missing)}"
            )

    async def _load(self, permit_id: str) -> PermitApplication:
        raw = await self.store.get(self._key(permit_id))
        if not raw:
            logger.warning(f"Permit {permit_id} not found")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Permit not found")
        try:
            return PermitApplication.model_validate(raw)
        except ValidationError as e:
            logger.error(f"Stored permit {permit_id} is malformed: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to read permit"
            )

    # Stores a new application with status PENDING
    async def submit_permit(self, data: PermitCreate) -> Dict[str, Any]:
        self._validate_permit_data(data)

        permit = PermitApplication(
            id=generate_permit_id(),
            full_name=data.full_name,
            email=str(data.email),
            phone=data.phone,
            destination=data.destination,
            id_type=data.id_type or IdTypeEnum.aadhaar,
            id_number=data.id_number,
            dl_number=data.dl_number,
            document_path=data.document_path,
            status=PermitStatusEnum.pending,
            submitted_at=datetime.now(timezone.utc),
        )
        record = permit.to_record()

        try:
            await self.store.set(self._key(permit.id), record)
        except Exception as e:
            logger.error(f"Failed to store permit {permit.id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to submit permit"
            )

        logger.info(f"Permit {permit.id} submitted for destination {permit.destination}")
        return record

    # Returns every stored permit, newest first
    async def list_permits(self) -> List[Dict[str, Any]]:
        try:
            records = await self.store.get_by_prefix(PERMIT_PREFIX)
        except Exception as e:
            logger.error(f"Failed to fetch permits: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to fetch permits"
            )
        records.sort(key=lambda r: r.get("submittedAt") or "", reverse=True)
        logger.info(f"Retrieved {len(records)} permits")
        return records

    # Merges reviewer changes into a permit and stamps updatedAt
    async def update_permit(self, permit_id: str, update: PermitUpdate) -> Dict[str, Any]:
        permit = await self._load(permit_id)
        changes = {k: v for k, v in update.model_dump(exclude_unset=True).items() if v is not None}

        new_status = changes.get("status")
        if new_status is not None and self.strict_transitions and new_status != permit.status:
            if new_status not in ALLOWED_TRANSITIONS[permit.status]:
                logger.warning(f"Rejected transition {permit.status.value} -> {new_status.value} for {permit_id}")
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail=f"Cannot move permit from {permit.status.value} to {new_status.value}"
                )

        changes["updated_at"] = datetime.now(timezone.utc)
        updated = permit.model_copy(update=changes)
        record = updated.to_record()

        try:
            await self.store.set(self._key(permit_id), record)
        except Exception as e:
            logger.error(f"Failed to update permit {permit_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to update permit"
            )

        logger.info(f"Permit {permit_id} is now {updated.status.value}")
        return record

    # Public status lookup; returns only non-sensitive fields
    async def lookup_by_email(self, email: str) -> List[Dict[str, Any]]:
        needle = (email or "").strip().lower()
        if not needle:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email query param required")

        try:
            records = await self.store.get_by_prefix(PERMIT_PREFIX)
        except Exception as e:
            logger.error(f"Failed to fetch permits by email: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to fetch permits"
            )

        matches = [r for r in records if (r.get("email") or "").lower() == needle]
        matches.sort(key=lambda r: r.get("submittedAt") or "", reverse=True)
        return [
            PermitStatusView.model_validate(r).model_dump(by_alias=True, mode="json")
            for r in matches
        ]

    # Issues a short-lived signed URL for the permit's document
    async def get_document_url(self, permit_id: str) -> Dict[str, str]:
        permit = await self._load(permit_id)
        if not permit.document_path:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No document attached to this permit")

        url = await self.storage.create_signed_url(permit.document_path, settings.SIGNED_URL_EXPIRES_SECONDS)
        return PermitDocumentLink(url=url, path=permit.document_path).model_dump()
