"""
Services package initialization.
"""

from weather_lookup.services.external_api import WeatherAPIClient
from weather_lookup.services.screen import WeatherScreenPresenter, LocationProvider
from weather_lookup.services.weather_manager import WeatherManager, WeatherObserver
from weather_lookup.services.weather_model import (
    build_weather_model,
    condition_name_for,
    format_temperature,
)

__all__ = [
    "WeatherAPIClient",
    "WeatherScreenPresenter",
    "LocationProvider",
    "WeatherManager",
    "WeatherObserver",
    "build_weather_model",
    "condition_name_for",
    "format_temperature",
]
