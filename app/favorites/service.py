"""Service layer for user favorite plants."""

from datetime import datetime, timezone
from typing import Optional
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError

from app.core.database import Database


class FavoriteService:
    """Service for managing user favorites."""
    
    COLLECTION_NAME = "favorites"
    
    @staticmethod
    def get_collection():
        """Get the favorites collection."""
        return Database.get_collection(FavoriteService.COLLECTION_NAME)
    
    @staticmethod
    def _to_response(doc: dict) -> dict:
        """Swap Mongo's _id for a string id and drop the owner."""
        item = dict(doc)
        item["id"] = str(item.pop("_id"))
        item.pop("user_id", None)
        return item
    
    @classmethod
    async def get_user_favorites(cls, user_id: str) -> list[dict]:
        """All favorites for a user, newest first."""
        collection = cls.get_collection()
        cursor = collection.find({"user_id": user_id}).sort("created_at", -1)
        items = await cursor.to_list(length=500)
        return [cls._to_response(item) for item in items]
    
    @classmethod
    async def add_favorite(cls, user_id: str, plant_data: dict) -> Optional[dict]:
        """
        Add a plant to the user's favorites.
        
        Returns the created favorite, or None if the plant is already a favorite.
        """
        collection = cls.get_collection()
        
        existing = await collection.find_one({
            "user_id": user_id,
            "plant_id": plant_data["plant_id"]
        })
        if existing:
            return None
        
        now = datetime.now(timezone.utc)
        favorite = {
            "user_id": user_id,
            "plant_id": plant_data["plant_id"],
            "common_name": plant_data["common_name"],
            "scientific_name": plant_data.get("scientific_name"),
            "image_url": plant_data.get("image_url"),
            "created_at": now,
            "updated_at": now,
        }
        
        try:
            result = await collection.insert_one(favorite)
        except DuplicateKeyError:
            # Lost a race with a concurrent add of the same plant
            return None
        favorite["_id"] = result.inserted_id
        return cls._to_response(favorite)
    
    @classmethod
    async def remove_favorite(cls, user_id: str, favorite_id: str) -> bool:
        """
        Remove one of the user's favorites by its id.
        
        Returns False if the id is malformed, unknown, or owned by someone else.
        """
        try:
            oid = ObjectId(favorite_id)
        except (InvalidId, TypeError):
            return False
        
        collection = cls.get_collection()
        result = await collection.delete_one({"_id": oid, "user_id": user_id})
        return result.deleted_count > 0
    
    @classmethod
    async def ensure_indexes(cls):
        """Create indexes for efficient queries."""
        collection = cls.get_collection()
        await collection.create_index(
            [("user_id", 1), ("plant_id", 1)],
            unique=True,
            name="user_plant_unique"
        )
        await collection.create_index(
            [("user_id", 1), ("created_at", -1)],
            name="user_created_idx"
        )
