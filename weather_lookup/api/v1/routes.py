"""
This module defines the routes for API version 1.
"""

from datetime import datetime, UTC
from typing import Optional

from fastapi import APIRouter, Query, Request, HTTPException, Depends

from weather_lookup.api.v1.crud import WeatherCRUD
from weather_lookup.config import get_settings
from weather_lookup.definitions.api_versions import ApiVersion
from weather_lookup.exceptions import ValidationError
from weather_lookup.models.weather import (
    CityQuery,
    CoordinatesQuery,
    FetchFailure,
    WeatherQuery,
)
from weather_lookup.schemas.api_v1 import (
    WeatherLookupResponse,
    ScreenResponse,
    SearchRequest,
    LocationRequest,
    HealthResponse,
)
from weather_lookup.services.external_api import WeatherAPIClient
from weather_lookup.services.screen import WeatherScreenPresenter
from weather_lookup.utils.dependencies import get_weather_client, get_screen_presenter
from weather_lookup.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()

router = APIRouter(prefix=f"/{ApiVersion.V1.value}", tags=[ApiVersion.V1.value])
default_router = APIRouter(tags=["default"])


def _build_query(
    city: Optional[str], lat: Optional[float], lon: Optional[float]
) -> WeatherQuery:
    has_coordinates = lat is not None or lon is not None
    if city is not None and has_coordinates:
        raise ValidationError("Pass either city or lat/lon, not both")
    if city is not None:
        city_name = city.strip()
        if not city_name:
            raise ValidationError("City name must not be blank")
        return CityQuery(city_name=city_name)
    if lat is None or lon is None:
        raise ValidationError("Pass either city or both lat and lon")
    return CoordinatesQuery(latitude=lat, longitude=lon)


@router.get("/weather", response_model=WeatherLookupResponse)
async def get_weather(
    request: Request,
    city: Optional[str] = Query(None, description="City name", max_length=100),
    lat: Optional[float] = Query(None, description="Latitude", ge=-90, le=90),
    lon: Optional[float] = Query(None, description="Longitude", ge=-180, le=180),
    weather_client: WeatherAPIClient = Depends(get_weather_client),
) -> WeatherLookupResponse:
    """
    Get the current weather either by city name or by coordinates.

    Exactly one variant must be given: ``city``, or ``lat`` with ``lon``.
    """
    try:
        query = _build_query(city, lat, lon)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    result = await weather_client.fetch(query)
    if isinstance(result, FetchFailure):
        logger.error(
            "Error getting weather",
            extra={
                "event": "api_error",
                "api_version": "v1",
                "query": query.model_dump(),
                "error_type": type(result.error).__name__,
                "request_id": request.state.request_id,
            },
        )
        raise HTTPException(
            status_code=502,
            detail={
                "error": "Failed to retrieve weather data",
                "detail": str(result.error),
                "request_id": request.state.request_id,
            },
        )

    return WeatherCRUD.transform_internal(result.model)


@router.get("/screen", response_model=ScreenResponse)
async def get_screen(
    presenter: WeatherScreenPresenter = Depends(get_screen_presenter),
) -> ScreenResponse:
    """
    Get the values currently shown on the weather screen.
    """
    return WeatherCRUD.transform_screen(presenter.state)


@router.post("/screen/search", response_model=ScreenResponse, status_code=202)
async def submit_search(
    body: SearchRequest,
    presenter: WeatherScreenPresenter = Depends(get_screen_presenter),
) -> ScreenResponse:
    """
    Submit the search field. The lookup runs in the background and the
    screen is updated once it succeeds.
    """
    if not presenter.submit_search(body.text):
        raise HTTPException(
            status_code=422,
            detail={
                "error": "Empty search",
                "detail": presenter.state.search_placeholder,
            },
        )
    return WeatherCRUD.transform_screen(presenter.state)


@router.post("/screen/location", response_model=ScreenResponse, status_code=202)
async def update_location(
    body: LocationRequest,
    presenter: WeatherScreenPresenter = Depends(get_screen_presenter),
) -> ScreenResponse:
    """
    Report a device location fix and look up the weather there.
    """
    presenter.location_updated([(body.latitude, body.longitude)])
    return WeatherCRUD.transform_screen(presenter.state)


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.now(UTC).isoformat(),
    )


default_router.get("/weather", response_model=WeatherLookupResponse)(get_weather)
default_router.get("/screen", response_model=ScreenResponse)(get_screen)
default_router.post("/screen/search", response_model=ScreenResponse, status_code=202)(
    submit_search
)
default_router.post("/screen/location", response_model=ScreenResponse, status_code=202)(
    update_location
)
default_router.get("/health", response_model=HealthResponse)(health_check)
