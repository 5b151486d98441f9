from beanie import Document, Indexed
from pydantic import Field
from datetime import datetime, timezone
from typing import Any


class KVEntry(Document):
    key: Indexed(str, unique=True) = Field(..., description="Namespaced key, e.g. 'permit:<id>' or 'admin:<userId>'")
    value: Any = Field(None, description="JSON-compatible value")
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), description="Timestamp of the last write")

    class Settings:
        name = "kv_store"
