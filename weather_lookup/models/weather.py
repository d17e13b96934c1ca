from dataclasses import dataclass
from typing import List, Union, Dict

from pydantic import BaseModel, ConfigDict, Field

from weather_lookup.exceptions import WeatherFetchError


class CityQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    city_name: str = Field(..., description="City name as typed by the user")

    def to_params(self) -> Dict[str, Union[str, float]]:
        return {"q": self.city_name}


class CoordinatesQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")

    def to_params(self) -> Dict[str, Union[str, float]]:
        return {"lat": self.latitude, "lon": self.longitude}


WeatherQuery = Union[CityQuery, CoordinatesQuery]


class Main(BaseModel):
    temp: float = Field(
        ..., allow_inf_nan=False, description="Temperature in the requested unit system"
    )


class Weather(BaseModel):
    id: int = Field(..., description="Upstream condition code")


class WeatherResponse(BaseModel):
    """Subset of the upstream current-weather payload; other fields are ignored."""

    name: str = Field(..., description="City name reported upstream")
    main: Main
    weather: List[Weather] = Field(..., description="Condition entries, first one is used")


class WeatherModel(BaseModel):
    """
    Presentation result built once per successful fetch.

    Attributes:
        city_name: City name to display
        temperature: Raw temperature value
        temperature_string: Temperature rounded to one decimal place
        condition_id: Upstream condition code of the first entry
        condition_name: Icon identifier for the condition
    """

    model_config = ConfigDict(frozen=True)

    city_name: str
    temperature: float
    temperature_string: str
    condition_id: int
    condition_name: str


@dataclass(frozen=True)
class FetchSuccess:
    model: WeatherModel

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class FetchFailure:
    error: WeatherFetchError

    @property
    def ok(self) -> bool:
        return False


FetchResult = Union[FetchSuccess, FetchFailure]
