"""
This module builds presentation models from decoded weather responses.

Everything here is pure: no I/O, and identical input yields identical output.
"""

from weather_lookup.definitions.conditions import (
    CONDITION_RANGES,
    DEFAULT_CONDITION_ICON,
)
from weather_lookup.exceptions import EmptyConditionListError
from weather_lookup.models.weather import WeatherModel, WeatherResponse


def condition_name_for(condition_id: int) -> str:
    """
    Map an upstream condition code to its icon identifier.

    Codes outside every known range fall back to the default icon.
    """
    for condition_range in CONDITION_RANGES:
        if condition_range.covers(condition_id):
            return condition_range.icon.value
    return DEFAULT_CONDITION_ICON.value


def format_temperature(temperature: float) -> str:
    """
    Format a temperature with one decimal place.

    Uses printf-style "%.1f" rounding: the exact binary value is rounded
    half-to-even, so 27.15 (stored as 27.1499...) becomes "27.1" while
    27.25 becomes "27.2" and 27.35 becomes "27.4".
    """
    return f"{temperature:.1f}"


def build_weather_model(response: WeatherResponse) -> WeatherModel:
    """
    Transform a decoded weather response into a presentation model.

    Raises:
        EmptyConditionListError: If the response has no condition entries
    """
    if not response.weather:
        raise EmptyConditionListError(
            f"Weather response for '{response.name}' has no condition entries"
        )

    condition_id = response.weather[0].id
    temperature = response.main.temp

    return WeatherModel(
        city_name=response.name,
        temperature=temperature,
        temperature_string=format_temperature(temperature),
        condition_id=condition_id,
        condition_name=condition_name_for(condition_id),
    )
