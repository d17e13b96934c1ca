import math
from typing import Optional

import httpx

from weather_lookup.config import WeatherClientConfig
from weather_lookup.exceptions import (
    WeatherFetchError,
    RequestConstructionError,
    TransportError,
    UpstreamStatusError,
    DecodeError,
)
from weather_lookup.models.weather import (
    CityQuery,
    CoordinatesQuery,
    FetchFailure,
    FetchResult,
    FetchSuccess,
    WeatherModel,
    WeatherQuery,
    WeatherResponse,
)
from weather_lookup.services.weather_model import build_weather_model
from weather_lookup.utils.logger import setup_logger

logger = setup_logger(__name__)


class WeatherAPIClient:
    """
    Client for the upstream current-weather endpoint.

    Every call issues exactly one GET request; nothing is retried.
    """

    def __init__(
        self,
        config: WeatherClientConfig,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=config.timeout)

    async def close(self):
        if self._owns_client:
            await self.client.aclose()

    async def fetch_weather(self, city_name: str) -> FetchResult:
        return await self.fetch(CityQuery(city_name=city_name))

    async def fetch_weather_by_coordinates(
        self, latitude: float, longitude: float
    ) -> FetchResult:
        return await self.fetch(
            CoordinatesQuery(latitude=latitude, longitude=longitude)
        )

    async def fetch(self, query: WeatherQuery) -> FetchResult:
        """
        Fetch weather for a query and wrap the outcome in a result.

        Fetch errors are logged and returned as a failure, never raised.
        """
        try:
            model = await self.get_weather(query)
        except WeatherFetchError as e:
            logger.error(
                "Failed to fetch weather",
                extra={
                    "event": "fetch_failed",
                    "query": query.model_dump(),
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            return FetchFailure(error=e)

        logger.info(
            "Fetched weather",
            extra={
                "event": "fetch_succeeded",
                "city": model.city_name,
                "condition_id": model.condition_id,
            },
        )
        return FetchSuccess(model=model)

    async def get_weather(self, query: WeatherQuery) -> WeatherModel:
        """
        Fetch weather for a query and return the presentation model.

        Args:
            query: City-name or coordinates query

        Returns:
            WeatherModel: Model built from the first condition entry

        Raises:
            WeatherFetchError: Any error of the fetch taxonomy
        """
        request = self._build_request(query)
        response = await self._send(request)
        payload = self._decode(response)
        return build_weather_model(payload)

    def _build_request(self, query: WeatherQuery) -> httpx.Request:
        """
        Build the outbound GET request for a query.

        Args:
            query: City-name or coordinates query

        Returns:
            httpx.Request: Request carrying the query, api key and units

        Raises:
            RequestConstructionError: If the coordinates are not finite, the
                URL or parameters cannot be encoded, or the scheme is not http(s)
        """
        if isinstance(query, CoordinatesQuery) and not (
            math.isfinite(query.latitude) and math.isfinite(query.longitude)
        ):
            raise RequestConstructionError(
                f"Coordinates must be finite, got ({query.latitude}, {query.longitude})"
            )

        params = {
            **query.to_params(),
            "appid": self.config.api_key,
            "units": self.config.units,
        }
        try:
            request = self.client.build_request("GET", self.config.base_url, params=params)
        except httpx.InvalidURL as e:
            raise RequestConstructionError(f"Invalid weather API URL: {e}") from e
        except ValueError as e:
            # UnicodeEncodeError for text that cannot be percent-encoded
            raise RequestConstructionError(f"Cannot encode weather request: {e}") from e

        if request.url.scheme not in ("http", "https"):
            raise RequestConstructionError(
                f"Weather API URL must be http or https: {self.config.base_url!r}"
            )
        return request

    async def _send(self, request: httpx.Request) -> httpx.Response:
        """
        Send a request once and check its status.

        Args:
            request: Request built by ``_build_request``

        Returns:
            httpx.Response: Response with a 2xx status

        Raises:
            UpstreamStatusError: If the weather API answers with a non-2xx status
            TransportError: If the request could not be sent or answered
        """
        try:
            response = await self.client.send(request)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            if status_code >= 500:
                logger.error(f"Server error from weather API: {status_code}")
            else:
                logger.warning(f"Client error from weather API: {status_code}")
            raise UpstreamStatusError(
                f"Weather API returned status {status_code}",
                status_code=status_code,
                detail=_upstream_message(e.response),
            ) from e
        except httpx.RequestError as e:
            raise TransportError(f"Failed to reach weather API: {e!r}") from e
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> WeatherResponse:
        """
        Decode a response body into the wire model.

        Args:
            response: 2xx response returned by ``_send``

        Returns:
            WeatherResponse: Validated wire-shape payload

        Raises:
            DecodeError: If the body is not JSON, misses required fields or
                carries a non-finite temperature
        """
        try:
            return WeatherResponse.model_validate(response.json())
        except ValueError as e:
            raise DecodeError(f"Unexpected weather API response: {e}") from e


def _upstream_message(response: httpx.Response) -> Optional[str]:
    try:
        payload = response.json()
    except ValueError:
        return None
    if isinstance(payload, dict) and payload.get("message") is not None:
        return str(payload["message"])
    return None
