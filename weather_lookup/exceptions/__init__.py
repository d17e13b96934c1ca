"""Weather lookup exceptions."""

from .common import (
    WeatherServiceException,
    WeatherFetchError,
    RequestConstructionError,
    TransportError,
    UpstreamStatusError,
    DecodeError,
    EmptyConditionListError,
    ValidationError,
)

__all__ = [
    "WeatherServiceException",
    "WeatherFetchError",
    "RequestConstructionError",
    "TransportError",
    "UpstreamStatusError",
    "DecodeError",
    "EmptyConditionListError",
    "ValidationError",
]
