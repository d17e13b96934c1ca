"""
Tests for building presentation models from decoded responses.
"""

import pydantic
import pytest

from weather_lookup.definitions.conditions import (
    CONDITION_RANGES,
    ConditionIcon,
)
from weather_lookup.exceptions import EmptyConditionListError
from weather_lookup.models.weather import WeatherResponse
from weather_lookup.services.weather_model import (
    build_weather_model,
    condition_name_for,
    format_temperature,
)


class TestConditionMapping:
    """Test cases for condition code to icon mapping."""

    @pytest.mark.parametrize(
        "condition_id, expected",
        [
            (200, "cloud.bolt"),
            (232, "cloud.bolt"),
            (300, "cloud.drizzle"),
            (321, "cloud.drizzle"),
            (500, "cloud.rain"),
            (531, "cloud.rain"),
            (600, "cloud.snow"),
            (622, "cloud.snow"),
            (701, "cloud.fog"),
            (781, "cloud.fog"),
            (800, "sun.max"),
            (801, "cloud"),
            (804, "cloud"),
        ],
    )
    def test_documented_codes(self, condition_id, expected):
        """Test representative upstream codes map to their group icon."""
        assert condition_name_for(condition_id) == expected

    def test_mapping_is_total_over_documented_range(self):
        """Test every code from 200 to 804 lands in exactly one range."""
        for condition_id in range(200, 805):
            matches = [r for r in CONDITION_RANGES if r.covers(condition_id)]
            assert len(matches) == 1, condition_id

    def test_ranges_are_contiguous(self):
        """Test there are no gaps between consecutive ranges."""
        for previous, current in zip(CONDITION_RANGES, CONDITION_RANGES[1:]):
            assert current.low == previous.high + 1

    @pytest.mark.parametrize("condition_id", [-1, 0, 199, 805, 900, 10_000])
    def test_unknown_codes_use_default_icon(self, condition_id):
        """Test codes outside every range fall back instead of failing."""
        assert condition_name_for(condition_id) == ConditionIcon.CLOUDS.value


class TestFormatTemperature:
    """Test cases for one-decimal temperature formatting."""

    @pytest.mark.parametrize(
        "temperature, expected",
        [
            (27.14999, "27.1"),
            (27.15, "27.1"),
            (27.25, "27.2"),
            (27.35, "27.4"),
            (27.1, "27.1"),
            (27, "27.0"),
            (-3.46, "-3.5"),
            (293.15, "293.1"),
        ],
    )
    def test_format(self, temperature, expected):
        """Test printf-style rounding of the exact binary value."""
        assert format_temperature(temperature) == expected


class TestBuildWeatherModel:
    """Test cases for build_weather_model."""

    def test_fixture_payload(self, weather_payload, weather_model):
        """Test the known fixture payload yields the expected model."""
        response = WeatherResponse.model_validate(weather_payload)

        assert build_weather_model(response) == weather_model

    def test_only_first_condition_is_used(self):
        """Test later condition entries are ignored."""
        response = WeatherResponse.model_validate(
            {
                "name": "Bergen",
                "main": {"temp": 4.0},
                "weather": [{"id": 501}, {"id": 800}],
            }
        )

        model = build_weather_model(response)

        assert model.condition_id == 501
        assert model.condition_name == "cloud.rain"

    def test_empty_condition_list_fails(self):
        """Test an empty condition list is an error, not a default."""
        response = WeatherResponse.model_validate(
            {"name": "Nowhere", "main": {"temp": 10.0}, "weather": []}
        )

        with pytest.raises(EmptyConditionListError):
            build_weather_model(response)

    def test_deterministic(self, weather_payload):
        """Test identical input produces identical output."""
        first = build_weather_model(WeatherResponse.model_validate(weather_payload))
        second = build_weather_model(WeatherResponse.model_validate(weather_payload))

        assert first == second

    def test_model_is_immutable(self, weather_model):
        """Test the presentation model cannot be changed after construction."""
        with pytest.raises(pydantic.ValidationError):
            weather_model.city_name = "Oslo"
