import logging
import uuid
from typing import Optional, Dict, Any, List
from datetime import datetime, timezone

from roadrunners.database.kv_store import KVStore

logger = logging.getLogger(__name__)

AUDIT_PREFIX = "audit:"


class AuditService:
    """Append-only audit trail of back-office actions, kept in the KV store."""

    def __init__(self, store: KVStore):
        self.store = store

    async def create_audit(self, *, action: str, actor: Optional[str] = None, acted: Optional[str] = None, status: str = "successful") -> Dict[str, Any]:
        now = datetime.now(timezone.utc)
        entry_id = f"{int(now.timestamp() * 1000)}-{uuid.uuid4().hex[:9]}"
        entry = {
            "id": entry_id,
            "action": action,
            "actor": actor,
            "acted": acted,
            "status": status,
            "timestamp": now.isoformat(),
        }
        try:
            await self.store.set(f"{AUDIT_PREFIX}{entry_id}", entry)
        except Exception as e:
            logger.error(f"Failed to create audit log: {e}")
            raise
        return entry

    # Best-effort variant for request handlers: a failed audit write never fails the request
    async def record(self, action: str, actor: Optional[str], acted: Optional[str], status: str = "successful") -> None:
        try:
            await self.create_audit(action=action, actor=actor, acted=acted, status=status)
        except Exception:
            logger.exception(f"Failed to write {action} audit log")

    async def get_audits(self, skip: int = 0, limit: int = 50, action: Optional[str] = None) -> Dict[str, Any]:
        entries: List[Dict[str, Any]] = await self.store.get_by_prefix(AUDIT_PREFIX)
        if action:
            entries = [e for e in entries if e.get("action") == action]
        entries.sort(key=lambda e: e.get("timestamp") or "", reverse=True)
        return {
            "data": entries[skip:skip + limit],
            "total": len(entries),
            "skip": skip,
            "limit": limit,
        }
