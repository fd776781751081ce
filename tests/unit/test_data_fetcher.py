# -*- coding: utf-8 -*-
"""
Тесты для scripts/competition/_processes/data_fetcher.py
"""
import pytest

from core.models.weather_response import Coordinate
from core.utils.error_handler import FetchError
from scripts.competition._processes.data_fetcher import fetch_forecast

DUBLIN = Coordinate(53.3403505, -6.3534707)


class StubClient:
    def __init__(self, data=None, error=None):
        self.data = data
        self.error = error

    def get_forecast(self, coordinate):
        if self.error:
            raise self.error
        return self.data


def test_fetch_forecast_returns_body():
    assert fetch_forecast(StubClient(data=b'{"daily": {}}'), "Dublin", DUBLIN) == b'{"daily": {}}'


def test_fetch_error_gets_location(caplog):
    with pytest.raises(FetchError) as excinfo:
        fetch_forecast(StubClient(error=FetchError("x")), "Dublin", DUBLIN)
    assert excinfo.value.context["location"] == "Dublin"
    assert "Dublin" in caplog.text
    print("✅ test_fetch_error_gets_location passed")


def test_existing_location_not_overwritten():
    error = FetchError("x", {"location": "Ballyfermot"})
    with pytest.raises(FetchError) as excinfo:
        fetch_forecast(StubClient(error=error), "Dublin", DUBLIN)
    assert excinfo.value.context["location"] == "Ballyfermot"
