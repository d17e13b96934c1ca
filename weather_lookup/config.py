"""
This module contains configuration settings for the application.
"""

from functools import lru_cache
from typing import Optional, List, Literal

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

UnitSystem = Literal["standard", "metric", "imperial"]

OPENWEATHER_CURRENT_WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


class Settings(BaseSettings):
    """
    Application configuration using Pydantic BaseSettings.
    Automatically handles environment variable parsing and type conversion.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Application settings
    app_name: str = "Weather Lookup API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Upstream weather API settings
    weather_api_url: str = OPENWEATHER_CURRENT_WEATHER_URL
    weather_api_key: str = ""
    weather_units: UnitSystem = "metric"
    # None disables the timeout: a hung request simply never resolves
    weather_api_timeout: Optional[float] = None

    # CORS settings
    cors_origins: List[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]


class WeatherClientConfig(BaseModel):
    """
    Fixed configuration of a weather client, set once at construction.

    Attributes:
        base_url: Current-weather endpoint
        api_key: Value sent as the ``appid`` query parameter
        units: Unit system sent as the ``units`` query parameter
        timeout: Request timeout in seconds, or None for no timeout
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = OPENWEATHER_CURRENT_WEATHER_URL
    api_key: str
    units: UnitSystem = "metric"
    timeout: Optional[float] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "WeatherClientConfig":
        return cls(
            base_url=settings.weather_api_url,
            api_key=settings.weather_api_key,
            units=settings.weather_units,
            timeout=settings.weather_api_timeout,
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings.
    """
    return Settings()
