import logging
from functools import lru_cache

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.core.config import settings

logger = logging.getLogger(__name__)

@lru_cache()
def get_client() -> AsyncIOMotorClient:
    return AsyncIOMotorClient(
        settings.mongodb_url,
        maxPoolSize=10,
        serverSelectionTimeoutMS=5000,
        socketTimeoutMS=30000,
    )

def get_database(client: AsyncIOMotorClient | None = None) -> AsyncIOMotorDatabase:
    """
    Database named in the connection URI, or MONGODB_DB_NAME when the URI has none.
    """
    client = client or get_client()
    return client.get_default_database(default=settings.MONGODB_DB_NAME)

async def ping_database(database: AsyncIOMotorDatabase) -> bool:
    try:
        await database.command("ping")
        return True
    except PyMongoError as e:
        logger.warning("MongoDB ping failed: %s", e)
        return False

def close_client() -> None:
    if get_client.cache_info().currsize:
        get_client().close()
        get_client.cache_clear()
