import logging
import re
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from beanie.operators import In, RegEx, Set
from pymongo.errors import DuplicateKeyError

from roadrunners.database.models import KVEntry

logger = logging.getLogger(__name__)


class KVStore(ABC):
    """Namespaced key-value store used by every service.

    Values are JSON-compatible (dicts, lists, strings, booleans). Keys are
    namespaced with a ``<kind>:`` prefix so a prefix scan returns one kind.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        ...

    @abstractmethod
    async def mget(self, keys: List[str]) -> List[Any]:
        """Values for ``keys`` in the given order; missing keys are skipped."""

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        ...

    @abstractmethod
    async def get_by_prefix(self, prefix: str) -> List[Any]:
        ...

    @abstractmethod
    async def set_if_absent(self, key: str, value: Any) -> bool:
        """Atomically write ``value`` only if ``key`` does not exist yet.

        Returns True when this call created the key.
        """


class MongoKVStore(KVStore):
    """KV store backed by the ``kv_store`` MongoDB collection through Beanie."""

    async def get(self, key: str) -> Optional[Any]:
        entry = await KVEntry.find_one(KVEntry.key == key)
        return entry.value if entry else None

    async def mget(self, keys: List[str]) -> List[Any]:
        if not keys:
            return []
        entries = await KVEntry.find(In(KVEntry.key, keys)).to_list()
        by_key: Dict[str, Any] = {e.key: e.value for e in entries}
        return [by_key[k] for k in keys if k in by_key]

    async def set(self, key: str, value: Any) -> None:
        now = datetime.now(timezone.utc)
        await KVEntry.find_one(KVEntry.key == key).upsert(
            Set({KVEntry.value: value, KVEntry.updated_at: now}),
            on_insert=KVEntry(key=key, value=value, updated_at=now),
        )

    async def delete(self, key: str) -> bool:
        result = await KVEntry.find(KVEntry.key == key).delete()
        return bool(result and result.deleted_count)

    async def get_by_prefix(self, prefix: str) -> List[Any]:
        pattern = f"^{re.escape(prefix)}"
        entries = await KVEntry.find(RegEx(KVEntry.key, pattern)).to_list()
        return [e.value for e in entries]

    async def set_if_absent(self, key: str, value: Any) -> bool:
        # Relies on the unique index on `key`
        try:
            await KVEntry(key=key, value=value).insert()
            return True
        except DuplicateKeyError:
            logger.info("Key %s already exists, conditional write skipped", key)
            return False


# Singleton instance
_STORE: Optional[KVStore] = None


def get_kv_store() -> KVStore:
    global _STORE
    if _STORE is None:
        _STORE = MongoKVStore()
    return _STORE
