"""API routes for user favorite plants."""

from fastapi import APIRouter, Depends, status
from app.core.dependencies import get_current_user
from app.core.exceptions import BadRequestException, NotFoundException
from app.favorites.service import FavoriteService
from app.favorites.schemas import FavoriteCreate, FavoriteResponse, MessageResponse

router = APIRouter(prefix="/plants/favorites", tags=["Favorites"])


@router.get("", response_model=list[FavoriteResponse])
async def get_favorites(current_user: dict = Depends(get_current_user)):
    """Get the current user's favorite plants, most recently added first."""
    return await FavoriteService.get_user_favorites(current_user["id"])


@router.post("", response_model=FavoriteResponse, status_code=status.HTTP_201_CREATED)
async def add_favorite(
    item: FavoriteCreate,
    current_user: dict = Depends(get_current_user)
):
    """
    Add a plant to the user's favorites.
    
    Returns 400 if the plant is already a favorite.
    """
    favorite = await FavoriteService.add_favorite(
        user_id=current_user["id"],
        plant_data=item.model_dump()
    )
    if favorite is None:
        raise BadRequestException("Plant already in favorites")
    return favorite


@router.delete("/{favorite_id}", response_model=MessageResponse)
async def remove_favorite(
    favorite_id: str,
    current_user: dict = Depends(get_current_user)
):
    """Remove a favorite by its id. Returns 404 if it is not one of yours."""
    removed = await FavoriteService.remove_favorite(
        user_id=current_user["id"],
        favorite_id=favorite_id
    )
    if not removed:
        raise NotFoundException("Favorite not found")
    return MessageResponse(message="Favorite removed")
