"""Pydantic schemas for user favorite plants.

The web client speaks camelCase (`plantId`, `commonName`, `_id`); snake_case
is accepted on input as well.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional


class FavoriteCreate(BaseModel):
    """Schema for adding a plant to favorites."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    plant_id: int = Field(..., description="Trefle plant id")
    common_name: str = Field(..., min_length=1)
    scientific_name: Optional[str] = None
    image_url: Optional[str] = None


class FavoriteResponse(FavoriteCreate):
    """A stored favorite."""
    id: str = Field(..., alias="_id")
    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    message: str
