"""
This module holds the behaviour of the single weather screen.

The presenter owns what the screen displays and reacts to user and
location events; drawing the values is left to whoever reads ``state``.
"""

import asyncio
from typing import Any, Callable, Optional, Protocol, Sequence, Tuple

from weather_lookup.exceptions import WeatherFetchError
from weather_lookup.models.screen import EMPTY_SEARCH_PLACEHOLDER, ScreenState
from weather_lookup.models.weather import FetchResult, WeatherModel
from weather_lookup.services.weather_manager import WeatherManager
from weather_lookup.utils.logger import setup_logger

logger = setup_logger(__name__)

Scheduler = Callable[[Callable[[], None]], Any]


class LocationProvider(Protocol):
    """Source of device location fixes."""

    def request_location(self) -> None: ...


def _run_now(callback: Callable[[], None]) -> None:
    callback()


class WeatherScreenPresenter:
    """
    Presenter for the weather screen.

    Registers itself as the manager's observer. Successful results replace
    the displayed city, temperature and condition; failures are only logged,
    so the previous values stay on screen until the next success.
    """

    def __init__(
        self,
        manager: WeatherManager,
        location_provider: Optional[LocationProvider] = None,
        scheduler: Optional[Scheduler] = None,
    ):
        """
        Initialize the presenter.

        Args:
            manager: Manager that runs the fetches
            location_provider: Asked for a fix when the location button is used
            scheduler: Runs display updates on the rendering thread,
                e.g. ``loop.call_soon_threadsafe``; defaults to running inline
        """
        self.manager = manager
        self.location_provider = location_provider
        self._schedule = scheduler or _run_now
        self._state = ScreenState()
        manager.observer = self

    @property
    def state(self) -> ScreenState:
        return self._state

    def submit_search(self, text: str) -> bool:
        """
        Handle the search field being submitted.

        Returns:
            bool: False if the text was empty and no fetch was started
        """
        city_name = text.strip()
        if not city_name:
            self._state = self._state.model_copy(
                update={"search_text": text, "search_placeholder": EMPTY_SEARCH_PLACEHOLDER}
            )
            logger.info("Rejected empty search", extra={"event": "search_rejected"})
            return False

        self.manager.fetch_weather(city_name)
        self._state = self._state.model_copy(update={"search_text": ""})
        return True

    def request_location(self) -> bool:
        if self.location_provider is None:
            logger.warning(
                "Location requested but no provider is configured",
                extra={"event": "location_unavailable"},
            )
            return False
        self.location_provider.request_location()
        return True

    def location_updated(
        self, locations: Sequence[Tuple[float, float]]
    ) -> Optional["asyncio.Task[FetchResult]"]:
        """
        Handle a batch of location fixes; only the most recent one is used.
        """
        if not locations:
            return None
        latitude, longitude = locations[-1]
        return self.manager.fetch_weather_by_coordinates(latitude, longitude)

    def location_failed(self, error: Exception) -> None:
        logger.error(
            "Location update failed",
            extra={
                "event": "location_failed",
                "error": str(error),
                "error_type": type(error).__name__,
            },
        )

    def on_success(self, model: WeatherModel) -> None:
        self._schedule(lambda: self._show(model))

    def on_failure(self, error: WeatherFetchError) -> None:
        logger.error(
            "Keeping previous weather on screen after failed fetch",
            extra={
                "event": "display_stale",
                "error": str(error),
                "error_type": type(error).__name__,
            },
        )

    def _show(self, model: WeatherModel) -> None:
        self._state = self._state.model_copy(
            update={
                "city_name": model.city_name,
                "temperature_string": model.temperature_string,
                "condition_name": model.condition_name,
            }
        )
