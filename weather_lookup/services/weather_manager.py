"""
This module dispatches weather fetches and notifies an observer.
"""

import asyncio
from typing import Optional, Protocol, Set

from weather_lookup.exceptions import WeatherFetchError
from weather_lookup.models.weather import (
    CityQuery,
    CoordinatesQuery,
    FetchResult,
    FetchSuccess,
    WeatherModel,
    WeatherQuery,
)
from weather_lookup.services.external_api import WeatherAPIClient
from weather_lookup.utils.logger import setup_logger

logger = setup_logger(__name__)


class WeatherObserver(Protocol):
    """Notification target for completed weather fetches."""

    def on_success(self, model: WeatherModel) -> None: ...

    def on_failure(self, error: WeatherFetchError) -> None: ...


class WeatherManager:
    """
    Runs weather fetches in the background and reports each outcome once.

    Requests are neither de-duplicated nor cancelled: when fetches overlap
    the observer is notified in completion order, so the last response to
    arrive is the one left on display.
    """

    def __init__(
        self,
        client: WeatherAPIClient,
        observer: Optional[WeatherObserver] = None,
    ):
        """
        Initialize the manager.

        Args:
            client: Client used to perform the fetches
            observer: Target notified after every fetch, may be set later
        """
        self.client = client
        self.observer = observer
        self._pending: Set[asyncio.Task] = set()

    @property
    def pending_count(self) -> int:
        return sum(1 for task in self._pending if not task.done())

    def fetch_weather(self, city_name: str) -> "asyncio.Task[FetchResult]":
        """
        Start a fetch by city name and return immediately.

        The caller is expected to pass a trimmed, non-empty name.
        """
        return self._dispatch(CityQuery(city_name=city_name))

    def fetch_weather_by_coordinates(
        self, latitude: float, longitude: float
    ) -> "asyncio.Task[FetchResult]":
        """
        Start a fetch by coordinates and return immediately.
        """
        return self._dispatch(CoordinatesQuery(latitude=latitude, longitude=longitude))

    async def wait_idle(self) -> None:
        """
        Wait until every fetch started so far has been delivered.
        """
        while True:
            pending = [task for task in self._pending if not task.done()]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    def _dispatch(self, query: WeatherQuery) -> "asyncio.Task[FetchResult]":
        task = asyncio.get_running_loop().create_task(self._run(query))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _run(self, query: WeatherQuery) -> FetchResult:
        result = await self.client.fetch(query)
        self._notify(result)
        return result

    def _notify(self, result: FetchResult) -> None:
        if self.observer is None:
            logger.debug(
                "No observer registered, dropping weather result",
                extra={"event": "result_dropped", "ok": result.ok},
            )
            return

        if isinstance(result, FetchSuccess):
            self.observer.on_success(result.model)
        else:
            self.observer.on_failure(result.error)
