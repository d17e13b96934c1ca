"""
Tests for the weather screen presenter.
"""

from unittest.mock import MagicMock

import httpx

from weather_lookup.exceptions import DecodeError
from weather_lookup.models.screen import ScreenState
from weather_lookup.services.screen import WeatherScreenPresenter
from weather_lookup.services.weather_manager import WeatherManager


class TestWeatherScreenPresenter:
    """Test cases for WeatherScreenPresenter."""

    def test_initial_state(self):
        """Test the screen starts with the placeholder weather."""
        presenter = WeatherScreenPresenter(MagicMock())

        assert presenter.state == ScreenState()
        assert presenter.state.city_name == "San Francisco"
        assert presenter.state.temperature_string == "27.1"
        assert presenter.state.condition_name == "sun.max"
        assert presenter.state.search_placeholder == "Search some city ..."

    def test_registers_as_observer(self):
        """Test the presenter subscribes to the manager's results."""
        manager = MagicMock()

        presenter = WeatherScreenPresenter(manager)

        assert manager.observer is presenter

    def test_submit_search(self):
        """Test a search starts a fetch with the trimmed name and clears the field."""
        manager = MagicMock()
        presenter = WeatherScreenPresenter(manager)

        accepted = presenter.submit_search("  Paris ")

        assert accepted is True
        manager.fetch_weather.assert_called_once_with("Paris")
        assert presenter.state.search_text == ""

    def test_submit_empty_search(self):
        """Test empty input is rejected and the placeholder changes."""
        manager = MagicMock()
        presenter = WeatherScreenPresenter(manager)

        accepted = presenter.submit_search("   ")

        assert accepted is False
        manager.fetch_weather.assert_not_called()
        assert presenter.state.search_placeholder == "Type something"

    def test_location_uses_latest_fix(self):
        """Test only the most recent location fix is looked up."""
        manager = MagicMock()
        presenter = WeatherScreenPresenter(manager)

        presenter.location_updated([(59.91, 10.75), (60.39, 5.32)])

        manager.fetch_weather_by_coordinates.assert_called_once_with(60.39, 5.32)

    def test_location_without_fixes(self):
        """Test an empty batch of fixes is ignored."""
        manager = MagicMock()
        presenter = WeatherScreenPresenter(manager)

        assert presenter.location_updated([]) is None
        manager.fetch_weather_by_coordinates.assert_not_called()

    def test_request_location(self):
        """Test the location button asks the provider for a fix."""
        provider = MagicMock()
        presenter = WeatherScreenPresenter(MagicMock(), location_provider=provider)

        assert presenter.request_location() is True
        provider.request_location.assert_called_once_with()

    def test_request_location_without_provider(self):
        """Test the location button does nothing without a provider."""
        presenter = WeatherScreenPresenter(MagicMock())

        assert presenter.request_location() is False

    def test_location_failed_keeps_state(self):
        """Test a location error leaves the screen untouched."""
        presenter = WeatherScreenPresenter(MagicMock())

        presenter.location_failed(RuntimeError("denied"))

        assert presenter.state == ScreenState()

    def test_success_updates_display(self, weather_model):
        """Test a successful result replaces the displayed weather."""
        presenter = WeatherScreenPresenter(MagicMock())
        model = weather_model.model_copy(
            update={
                "city_name": "Oslo",
                "temperature_string": "-3.5",
                "condition_name": "cloud.snow",
            }
        )

        presenter.on_success(model)

        assert presenter.state.city_name == "Oslo"
        assert presenter.state.temperature_string == "-3.5"
        assert presenter.state.condition_name == "cloud.snow"

    def test_failure_keeps_stale_values(self, weather_model):
        """Test a failed fetch leaves the previous values on screen."""
        presenter = WeatherScreenPresenter(MagicMock())
        presenter.on_success(weather_model.model_copy(update={"city_name": "Oslo"}))

        presenter.on_failure(DecodeError("bad payload"))

        assert presenter.state.city_name == "Oslo"

    def test_updates_go_through_scheduler(self, weather_model):
        """Test display updates are marshalled through the scheduler."""
        queued = []
        presenter = WeatherScreenPresenter(MagicMock(), scheduler=queued.append)

        presenter.on_success(weather_model.model_copy(update={"city_name": "Oslo"}))

        assert presenter.state.city_name == "San Francisco"
        assert len(queued) == 1

        queued[0]()

        assert presenter.state.city_name == "Oslo"

    async def test_search_end_to_end(self, make_weather_client):
        """Test a search flows through the client back to the screen."""
        client = make_weather_client(
            lambda request: httpx.Response(
                200,
                json={"name": "Tromsø", "main": {"temp": -7.04}, "weather": [{"id": 601}]},
            )
        )
        manager = WeatherManager(client)
        presenter = WeatherScreenPresenter(manager)

        presenter.submit_search("Tromso")
        await manager.wait_idle()

        assert presenter.state.city_name == "Tromsø"
        assert presenter.state.temperature_string == "-7.0"
        assert presenter.state.condition_name == "cloud.snow"

    async def test_failed_search_end_to_end(self, make_weather_client):
        """Test an unknown city leaves the screen as it was."""
        client = make_weather_client(
            lambda request: httpx.Response(404, json={"message": "city not found"})
        )
        manager = WeatherManager(client)
        presenter = WeatherScreenPresenter(manager)

        presenter.submit_search("Atlantis")
        await manager.wait_idle()

        assert presenter.state.city_name == "San Francisco"
        assert presenter.state.temperature_string == "27.1"
