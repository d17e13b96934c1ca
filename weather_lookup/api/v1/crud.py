from weather_lookup.models.screen import ScreenState
from weather_lookup.models.weather import WeatherModel
from weather_lookup.schemas.api_v1 import WeatherLookupResponse, ScreenResponse


class WeatherCRUD:

    @staticmethod
    def transform_internal(model: WeatherModel) -> WeatherLookupResponse:
        """
        Transform a presentation model to API format.
        """
        return WeatherLookupResponse(
            city_name=model.city_name,
            temperature=model.temperature,
            temperature_string=model.temperature_string,
            condition_id=model.condition_id,
            condition_name=model.condition_name,
        )

    @staticmethod
    def transform_screen(state: ScreenState) -> ScreenResponse:
        return ScreenResponse(
            city_name=state.city_name,
            temperature_string=state.temperature_string,
            condition_name=state.condition_name,
            search_text=state.search_text,
            search_placeholder=state.search_placeholder,
        )
