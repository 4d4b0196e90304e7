"""Weather service using the WeatherAPI.com API, with synthetic fallback data."""

import logging
import time
from typing import Optional
import httpx

from app.core.config import get_settings
from app.weather.models import ForecastDay, WeatherForecast, WeatherSnapshot

logger = logging.getLogger(__name__)

FORECAST_DAYS = 7
ICON_BASE = "//cdn.weatherapi.com/weather/64x64/day"

# Condition cycle used by the synthetic forecast: (label, icon code)
MOCK_FORECAST_CONDITIONS = [
    ("Sunny", 113),
    ("Partly cloudy", 116),
    ("Cloudy", 119),
]


def kph_to_ms(kph: float) -> float:
    return kph / 3.6


def mock_current_weather(location: str) -> WeatherSnapshot:
    """Synthetic current conditions, identical for every location."""
    return WeatherSnapshot(
        location=location,
        country="IN",
        temperature=28,
        feels_like=30,
        humidity=65,
        pressure=1012,
        weather="Partly cloudy",
        description="Partly cloudy",
        icon=f"{ICON_BASE}/116.png",
        wind_speed=3.5,
        clouds=40,
        timestamp=int(time.time()),
    )


def mock_forecast(location: str) -> WeatherForecast:
    """Synthetic 7-day forecast. Values depend only on the day index."""
    now = int(time.time())
    daily = []
    for i in range(FORECAST_DAYS):
        label, icon = MOCK_FORECAST_CONDITIONS[i % len(MOCK_FORECAST_CONDITIONS)]
        daily.append(ForecastDay(
            date=now + i * 86400,
            temp_day=28 + (i % 4),
            temp_min=22 + (i % 3),
            temp_max=32 + (i % 3),
            humidity=60 + (i * 3) % 20,
            weather=label,
            description=label,
            icon=f"{ICON_BASE}/{icon}.png",
            rain=round((i % 3) * 1.5, 1),
            wind_speed=2 + (i % 3),
        ))
    return WeatherForecast(location=location, daily=daily)


class WeatherService:
    """Fetches current conditions and forecasts for a named location."""
    
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.api_key = settings.WEATHER_API_KEY if api_key is None else api_key
        self.base_url = base_url or settings.WEATHER_API_URL
        self.timeout = settings.HTTP_TIMEOUT_SECONDS
        self.transport = transport
    
    @property
    def use_mock_data(self) -> bool:
        return not self.api_key or self.api_key == "placeholder_token"
    
    async def _get(self, path: str, params: dict) -> dict:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.get(
                f"{self.base_url}/{path}",
                params={"key": self.api_key, "aqi": "no", **params},
            )
            response.raise_for_status()
            return response.json()
    
    async def get_current_weather(self, location: str) -> WeatherSnapshot:
        """
        Get current weather for a location.
        
        Never raises for provider problems: a missing API key or a failed
        request yields synthetic data instead.
        """
        if self.use_mock_data:
            logger.warning("Using mock weather data (API key not configured)")
            return mock_current_weather(location)
        
        try:
            data = await self._get("current.json", {"q": location})
            return self._parse_current(data)
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Error fetching current weather for {location!r}: {e}. Falling back to mock data")
            return mock_current_weather(location)
    
    async def get_weather_forecast(self, location: str) -> WeatherForecast:
        """Get the 7-day forecast for a location, with the same fallback rules."""
        if self.use_mock_data:
            logger.warning("Using mock forecast data (API key not configured)")
            return mock_forecast(location)
        
        try:
            data = await self._get(
                "forecast.json",
                {"q": location, "days": FORECAST_DAYS, "alerts": "no"},
            )
            return self._parse_forecast(data)
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Error fetching weather forecast for {location!r}: {e}. Falling back to mock data")
            return mock_forecast(location)
    
    @staticmethod
    def _parse_current(data: dict) -> WeatherSnapshot:
        loc = data["location"]
        current = data["current"]
        condition = current["condition"]
        return WeatherSnapshot(
            location=loc["name"],
            country=loc.get("country"),
            temperature=current["temp_c"],
            feels_like=current["feelslike_c"],
            humidity=current["humidity"],
            pressure=current["pressure_mb"],
            weather=condition["text"],
            description=condition["text"],
            icon=condition.get("icon"),
            wind_speed=kph_to_ms(current["wind_kph"]),
            clouds=current["cloud"],
            timestamp=int(loc.get("localtime_epoch") or time.time()),
        )
    
    @staticmethod
    def _parse_forecast(data: dict) -> WeatherForecast:
        daily = []
        for day in data["forecast"]["forecastday"]:
            summary = day["day"]
            condition = summary["condition"]
            daily.append(ForecastDay(
                date=int(day.get("date_epoch") or 0),
                temp_day=summary["avgtemp_c"],
                temp_min=summary["mintemp_c"],
                temp_max=summary["maxtemp_c"],
                humidity=summary["avghumidity"],
                weather=condition["text"],
                description=condition["text"],
                icon=condition.get("icon"),
                rain=summary.get("totalprecip_mm") or 0,
                wind_speed=kph_to_ms(summary["maxwind_kph"]),
            ))
        return WeatherForecast(location=data["location"]["name"], daily=daily)
