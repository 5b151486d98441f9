from roadrunners.database.models.kv_entry_model import KVEntry

__all__ = ["KVEntry"]
