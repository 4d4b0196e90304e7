"""
MongoDB database connection and utilities.
"""

import logging

import certifi
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from app.core.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)


class Database:
    """MongoDB database connection manager."""
    
    client: AsyncIOMotorClient = None
    db: AsyncIOMotorDatabase = None
    
    @classmethod
    async def connect(cls):
        """Connect to MongoDB."""
        client_kwargs = {}
        uri = settings.MONGO_URI
        if "mongodb+srv://" in uri or "ssl=true" in uri.lower():
            client_kwargs["tlsCAFile"] = certifi.where()
        
        cls.client = AsyncIOMotorClient(uri, **client_kwargs)
        cls.db = cls.client[settings.MONGO_DB_NAME]
        
        # Create indexes
        await cls._create_indexes()
        
        logger.info(f"Connected to MongoDB: {settings.MONGO_DB_NAME}")
    
    @classmethod
    async def disconnect(cls):
        """Disconnect from MongoDB."""
        if cls.client:
            cls.client.close()
            cls.client = None
            cls.db = None
            logger.info("Disconnected from MongoDB")
    
    @classmethod
    async def _create_indexes(cls):
        """Create database indexes for better query performance."""
        from app.favorites.service import FavoriteService
        await FavoriteService.ensure_indexes()
    
    @classmethod
    def get_collection(cls, name: str):
        """Get a collection by name."""
        return cls.db[name]
