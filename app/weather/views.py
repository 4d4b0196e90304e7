"""Weather API routes."""

from typing import Optional
from fastapi import APIRouter, Body

from app.core.exceptions import BadRequestException
from app.weather.models import (
    SuitabilityRequest,
    SuitabilityResponse,
    WeatherForecast,
    WeatherSnapshot,
)
from app.weather.service import WeatherService
from app.weather.suitability import calculate_climate_suitability

router = APIRouter(prefix="/weather", tags=["Weather"])


@router.get("/current/{location}", response_model=WeatherSnapshot)
async def get_current_weather(location: str):
    """Get current weather for a city name or coordinates."""
    service = WeatherService()
    return await service.get_current_weather(location)


@router.get("/forecast/{location}", response_model=WeatherForecast)
async def get_weather_forecast(location: str):
    """Get the 7-day weather forecast for a location."""
    service = WeatherService()
    return await service.get_weather_forecast(location)


@router.post("/suitability", response_model=SuitabilityResponse)
async def get_climate_suitability(request: Optional[SuitabilityRequest] = Body(None)):
    """
    Score how well the current weather at `location` suits a plant.
    
    `plantRequirements` is optional; missing ranges fall back to
    10-35°C and 30-80% humidity.
    """
    if request is None:
        request = SuitabilityRequest()
    
    location = (request.location or "").strip()
    if not location:
        raise BadRequestException("Location is required")
    
    service = WeatherService()
    weather = await service.get_current_weather(location)
    report = calculate_climate_suitability(weather, request.plant_requirements)
    
    return SuitabilityResponse(location=weather.location, **report.model_dump())
