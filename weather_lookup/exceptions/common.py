from typing import Optional


class WeatherServiceException(Exception):
    """Base exception for weather lookup."""
    def __init__(self, message: str):
        super().__init__(message)


class WeatherFetchError(WeatherServiceException):
    """Raised when a weather fetch fails for any reason."""


class RequestConstructionError(WeatherFetchError):
    """Raised when the outbound request URL cannot be built."""


class TransportError(WeatherFetchError):
    """Raised when the request could not be sent or answered."""


class UpstreamStatusError(TransportError):
    """Raised when the weather API answers with a non-success status."""

    def __init__(self, message: str, status_code: int, detail: Optional[str] = None):
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)


class DecodeError(WeatherFetchError):
    """Raised when the response body is not the expected JSON shape."""


class EmptyConditionListError(WeatherFetchError):
    """Raised when the response carries no weather condition entries."""


class ValidationError(WeatherServiceException):
    """Raised when caller input is rejected before any fetch."""
