"""
This module defines the weather condition taxonomy used for presentation.

Upstream condition codes follow the OpenWeather grouping
(https://openweathermap.org/weather-conditions): 2xx thunderstorm,
3xx drizzle, 5xx rain, 6xx snow, 7xx atmosphere, 800 clear, 80x clouds.
"""

from enum import Enum
from typing import List, NamedTuple


class ConditionIcon(str, Enum):
    """Presentation icon identifiers, one per condition group."""

    THUNDERSTORM = "cloud.bolt"
    DRIZZLE = "cloud.drizzle"
    RAIN = "cloud.rain"
    SNOW = "cloud.snow"
    ATMOSPHERE = "cloud.fog"
    CLEAR = "sun.max"
    CLOUDS = "cloud"


class ConditionRange(NamedTuple):
    """Closed integer range of condition codes mapped to one icon."""

    low: int
    high: int
    icon: ConditionIcon

    def covers(self, condition_id: int) -> bool:
        return self.low <= condition_id <= self.high


# Ordered and contiguous from 200 to 804
CONDITION_RANGES: List[ConditionRange] = [
    ConditionRange(200, 299, ConditionIcon.THUNDERSTORM),
    ConditionRange(300, 499, ConditionIcon.DRIZZLE),
    ConditionRange(500, 599, ConditionIcon.RAIN),
    ConditionRange(600, 699, ConditionIcon.SNOW),
    ConditionRange(700, 799, ConditionIcon.ATMOSPHERE),
    ConditionRange(800, 800, ConditionIcon.CLEAR),
    ConditionRange(801, 804, ConditionIcon.CLOUDS),
]

DEFAULT_CONDITION_ICON = ConditionIcon.CLOUDS
