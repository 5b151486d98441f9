import re
import logging

import motor.motor_asyncio
from beanie import init_beanie

from roadrunners.database.models import KVEntry
from roadrunners.core.config import settings

logger = logging.getLogger(__name__)

# Global database instance
database = None


def _mask_mongo_uri(uri: str) -> str:
    # Never log credentials; keep scheme and host only
    try:
        m = re.match(r'(?P<prefix>mongodb(?:\+srv)?://)(?:(?P<creds>[^@]+)@)?(?P<rest>.+)', uri)
        if not m:
            return "mongodb://<redacted>"
        host_part = m.group('rest').split('/')[0]
        return f"{m.group('prefix')}***@{host_part}"
    except Exception:
        return "mongodb://<redacted>"


async def init_db():
    global database
    mongodb_uri = settings.MONGODB_URI
    mongodb_db_name = settings.MONGODB_DB_NAME

    if not mongodb_uri:
        logger.error("MONGODB_URI is not set in environment variables")
        raise RuntimeError("Configuration error: MONGODB_URI is not set in environment variables")
    if not mongodb_db_name:
        logger.error("MONGODB_DB_NAME is not set in environment variables")
        raise RuntimeError("Configuration error: MONGODB_DB_NAME is not set in environment variables")

    logger.info(f"Connecting to MongoDB at: {_mask_mongo_uri(mongodb_uri)}")
    logger.info(f"Database name: {mongodb_db_name}")

    try:
        client = motor.motor_asyncio.AsyncIOMotorClient(
            mongodb_uri,
            serverSelectionTimeoutMS=30000,
            connectTimeoutMS=30000,
            socketTimeoutMS=30000,
            retryWrites=True,
            w='majority'
        )

        await client.admin.command('ping')
        logger.info("Successfully connected to MongoDB!")

        database = client[mongodb_db_name]

        # Creates the unique index on kv_store.key
        await init_beanie(database, document_models=[KVEntry])
        logger.info("Beanie initialized successfully!")

        return database

    except Exception as e:
        logger.error(f"Database initialization failed: {str(e)}")
        logger.error(f"Exception type: {type(e)}")
        raise

