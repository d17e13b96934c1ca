"""
This module defines schemas for API version 1.
"""

from pydantic import BaseModel, Field


class WeatherLookupResponse(BaseModel):
    """
    API response model for a single weather lookup.

    Mirrors the presentation model: what a screen needs to render the
    current weather for one place.
    """

    city_name: str = Field(..., description="City name reported upstream")
    temperature: float = Field(..., description="Raw temperature value")
    temperature_string: str = Field(..., description="Temperature with one decimal")
    condition_id: int = Field(..., description="Upstream condition code")
    condition_name: str = Field(..., description="Condition icon identifier")


class ScreenResponse(BaseModel):
    """
    API response model for the values currently shown on the screen.
    """

    city_name: str
    temperature_string: str
    condition_name: str
    search_text: str
    search_placeholder: str


class SearchRequest(BaseModel):
    text: str = Field(..., max_length=100, description="Search field contents")


class LocationRequest(BaseModel):
    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")


class HealthResponse(BaseModel):
    status: str = Field(..., description="Service health status")
    version: str = Field(..., description="API version")
    timestamp: str = Field(..., description="Current timestamp")
