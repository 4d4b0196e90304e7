"""Plants API routes (Trefle proxy)."""

from fastapi import APIRouter, Query

from app.plants.trefle_service import TrefleService


router = APIRouter(prefix="/plants", tags=["Plants"])


@router.get("/search")
async def search_plants(
    q: str = Query(..., min_length=1, description="Search text, e.g. 'rose'"),
    page: int = Query(1, ge=1),
):
    """Search the plant database by common or scientific name."""
    return await TrefleService().search_plants(q, page)


@router.get("")
async def get_plants(page: int = Query(1, ge=1)):
    """List plants, paginated."""
    return await TrefleService().get_all_plants(page)


@router.get("/{plant_id}")
async def get_plant_details(plant_id: int):
    """Get the full record for one plant."""
    return await TrefleService().get_plant_details(plant_id)
