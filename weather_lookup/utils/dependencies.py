"""
FastAPI dependency injection providers.

The long-lived weather objects are created once in the application
lifespan and stored on ``app.state``; these providers hand them to the
routes so tests can swap them through ``app.dependency_overrides``.
"""

from fastapi import Request

from weather_lookup.services.external_api import WeatherAPIClient
from weather_lookup.services.screen import WeatherScreenPresenter


def get_weather_client(request: Request) -> WeatherAPIClient:
    """
    Provide the shared weather API client.

    Args:
        request: Incoming request, used to reach the application state

    Returns:
        WeatherAPIClient: Client created at startup
    """
    return request.app.state.weather_client


def get_screen_presenter(request: Request) -> WeatherScreenPresenter:
    """
    Provide the presenter holding the displayed screen state.

    Returns:
        WeatherScreenPresenter: Presenter created at startup
    """
    return request.app.state.screen_presenter
