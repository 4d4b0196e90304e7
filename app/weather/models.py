"""Weather-related models and schemas."""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class WeatherSnapshot(BaseModel):
    """Current weather for a named location."""
    location: str
    country: Optional[str] = None
    temperature: float = Field(..., description="Degrees Celsius")
    feels_like: float
    humidity: float = Field(..., description="Relative humidity, percent")
    pressure: float = Field(..., description="Millibar")
    weather: str = Field(..., description="Condition label, e.g. 'Partly cloudy'")
    description: str
    icon: Optional[str] = None
    wind_speed: float = Field(..., description="Metres per second")
    clouds: float = Field(..., description="Cloud cover, percent")
    timestamp: int = Field(..., description="Unix seconds")


class ForecastDay(BaseModel):
    """One day of the 7-day forecast."""
    date: int = Field(..., description="Unix seconds")
    temp_day: float
    temp_min: float
    temp_max: float
    humidity: float
    weather: str
    description: str
    icon: Optional[str] = None
    rain: float = Field(0, description="Total precipitation, mm")
    wind_speed: float


class WeatherForecast(BaseModel):
    """Daily forecast for a location."""
    location: str
    daily: List[ForecastDay] = Field(default_factory=list)


class PlantRequirements(BaseModel):
    """A plant's preferred climate ranges. Missing fields fall back to defaults."""
    model_config = ConfigDict(allow_inf_nan=False)

    temp_min: float = 10
    temp_max: float = 35
    humidity_min: float = 30
    humidity_max: float = 80
    rainfall_min: float = Field(0, description="Accepted for clients, not used in scoring")

    @model_validator(mode="after")
    def check_ranges(self) -> "PlantRequirements":
        if self.temp_min > self.temp_max:
            raise ValueError("temp_min must not exceed temp_max")
        if self.humidity_min > self.humidity_max:
            raise ValueError("humidity_min must not exceed humidity_max")
        return self


class Suitability(str, Enum):
    POOR = "Poor"
    FAIR = "Fair"
    GOOD = "Good"
    EXCELLENT = "Excellent"


class CurrentConditions(BaseModel):
    """The readings a suitability report was computed from."""
    temperature: float
    humidity: float
    weather: str


class SuitabilityReport(BaseModel):
    """How well current weather suits a plant."""
    score: int = Field(..., ge=0, le=100)
    suitability: Suitability
    warnings: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    current_conditions: CurrentConditions


class SuitabilityRequest(BaseModel):
    """Request body for the climate suitability endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    location: Optional[str] = None
    plant_requirements: Optional[PlantRequirements] = Field(default=None, alias="plantRequirements")


class SuitabilityResponse(SuitabilityReport):
    """Suitability report tagged with the resolved location name."""
    location: str
