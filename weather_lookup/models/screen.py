from pydantic import BaseModel, ConfigDict, Field

from weather_lookup.definitions.conditions import ConditionIcon

DEFAULT_CITY_NAME = "San Francisco"
DEFAULT_TEMPERATURE_STRING = "27.1"
DEFAULT_CONDITION_NAME = ConditionIcon.CLEAR.value
SEARCH_PLACEHOLDER = "Search some city ..."
EMPTY_SEARCH_PLACEHOLDER = "Type something"


class ScreenState(BaseModel):
    """Values currently shown on the weather screen."""

    model_config = ConfigDict(frozen=True)

    city_name: str = Field(default=DEFAULT_CITY_NAME, description="City label")
    temperature_string: str = Field(
        default=DEFAULT_TEMPERATURE_STRING, description="Temperature label"
    )
    condition_name: str = Field(
        default=DEFAULT_CONDITION_NAME, description="Condition icon identifier"
    )
    search_text: str = Field(default="", description="Search field contents")
    search_placeholder: str = Field(
        default=SEARCH_PLACEHOLDER, description="Search field placeholder"
    )
