"""
Verdant API - Main application entry point.

Plant search, favorites, weather and climate suitability for home gardeners.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_settings
from app.core.database import Database
from app.core.exceptions import validation_exception_handler
from app.core.middleware import MaxBodySizeMiddleware
from app.favorites.views import router as favorites_router
from app.plants.views import router as plants_router
from app.weather.views import router as weather_router

settings = get_settings()
API_PREFIX = "/api/v1/verdant"

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events."""
    # Startup
    await Database.connect()
    yield
    # Shutdown
    await Database.disconnect()


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    description="""
## Verdant API

Backend for the Verdant plant-care app.

### Features

- 🔍 **Plant Search**: Search and browse the Trefle plant database
- ⭐ **Favorites**: Save plants to your personal list
- 🌤️ **Weather**: Current conditions and a 7-day forecast for any location
- 🌱 **Climate Suitability**: Score how well today's weather suits a plant

    """,
    lifespan=lifespan,
    docs_url=f"{API_PREFIX}/docs",
    redoc_url=f"{API_PREFIX}/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(MaxBodySizeMiddleware)

app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Favorites first so /plants/favorites is not captured by /plants/{plant_id}
routers = [
    favorites_router,
    plants_router,
    weather_router,
]

for router in routers:
    app.include_router(router, prefix=API_PREFIX)


@app.get("/", tags=["Health"])
async def root():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "database": "connected" if Database.client else "disconnected",
        "weather_source": "mock" if settings.use_mock_weather else "live",
        "version": settings.APP_VERSION,
    }
