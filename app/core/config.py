"""
Application configuration using Pydantic Settings.
Loads from environment variables / .env file.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # App
    APP_NAME: str = "Verdant API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    MAX_REQUEST_BODY_BYTES: int = 1_000_000
    
    # MongoDB
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "verdant"
    
    # JWT (tokens are issued by the auth service sharing this secret)
    JWT_SECRET_KEY: str = "your-super-secret-key-change-in-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 30  # 30 days
    
    # WeatherAPI.com - empty or "placeholder_token" means synthetic weather
    WEATHER_API_KEY: str = ""
    WEATHER_API_URL: str = "https://api.weatherapi.com/v1"
    
    # Trefle plant database
    TREFLE_API_TOKEN: str = ""
    TREFLE_API_URL: str = "https://trefle.io/api/v1"
    
    # Outbound HTTP
    HTTP_TIMEOUT_SECONDS: float = 10.0
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def use_mock_weather(self) -> bool:
        return not self.WEATHER_API_KEY or self.WEATHER_API_KEY == "placeholder_token"



@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
