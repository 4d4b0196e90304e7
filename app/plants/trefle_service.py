"""Trefle plant database client."""

import logging
from typing import Optional
import httpx

from app.core.config import get_settings
from app.core.exceptions import NotFoundException, UpstreamException

logger = logging.getLogger(__name__)


class TrefleService:
    """Proxies plant search, listing and detail lookups to Trefle."""
    
    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.token = settings.TREFLE_API_TOKEN if token is None else token
        self.base_url = base_url or settings.TREFLE_API_URL
        self.timeout = settings.HTTP_TIMEOUT_SECONDS
        self.transport = transport
    
    async def _get(self, path: str, params: dict, error_message: str) -> dict:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(
                    f"{self.base_url}/{path}",
                    params={"token": self.token, **params},
                )
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Trefle {path} failed with {e.response.status_code}: {e.response.text[:200]}")
            if e.response.status_code == 404:
                raise NotFoundException("Plant not found")
            raise UpstreamException(error_message)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Trefle {path} failed: {e}")
            raise UpstreamException(error_message)
    
    async def search_plants(self, query: str, page: int = 1) -> dict:
        """Full-text plant search. Returns Trefle's payload unchanged."""
        return await self._get("plants/search", {"q": query, "page": page}, "Failed to search plants")
    
    async def get_all_plants(self, page: int = 1) -> dict:
        """Paginated plant listing."""
        return await self._get("plants", {"page": page}, "Failed to fetch plants")
    
    async def get_plant_details(self, plant_id: int) -> dict:
        """Full record for a single plant."""
        logger.info(f"Fetching details for plant ID: {plant_id}")
        return await self._get(f"plants/{plant_id}", {}, "Failed to get plant details")
