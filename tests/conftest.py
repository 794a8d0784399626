import json
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
import requests

from gridmix import fetch_generation
from gridmix.fuel_mix import FuelMix, Interval

SERIES_START = datetime(2025, 12, 10, 0, 0, tzinfo=timezone.utc)
HALF_HOUR = timedelta(minutes=30)


class _MockResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error", response=self)


class _MockGet:
    """Stand-in for requests.get recording every requested URL."""

    def __init__(self, response: _MockResponse | Exception) -> None:
        self._response = response
        self.calls: list[tuple[str, Any]] = []

    def __call__(self, url: str, timeout: Any = None) -> _MockResponse:
        self.calls.append((url, timeout))
        if isinstance(self._response, Exception):
            raise self._response
        return self._response


@pytest.fixture
def mock_get(monkeypatch):
    """Patch requests.get with a canned body, status or exception."""

    def _install(body: Any = None, status: int = 200, exc: Exception | None = None) -> _MockGet:
        if exc is not None:
            getter = _MockGet(exc)
        else:
            text = body if isinstance(body, str) else json.dumps(body)
            getter = _MockGet(_MockResponse(text, status))
        monkeypatch.setattr(fetch_generation.requests, "get", getter)
        return getter

    return _install


def make_interval(index: int, mix: dict[str, float], start: datetime = SERIES_START) -> Interval:
    begin = start + index * HALF_HOUR
    return Interval(
        start=begin,
        end=begin + HALF_HOUR,
        generation_mix=[FuelMix(fuel=fuel, perc=perc) for fuel, perc in mix.items()],
    )


def make_series(mixes: list[dict[str, float]], start: datetime = SERIES_START) -> list[Interval]:
    return [make_interval(i, mix, start) for i, mix in enumerate(mixes)]


def api_payload(mixes: list[dict[str, float]], start: datetime = SERIES_START) -> dict:
    """Build a generation response body as the Carbon Intensity API returns it."""
    data = []
    for i, mix in enumerate(mixes):
        begin = start + i * HALF_HOUR
        data.append(
            {
                "from": begin.strftime("%Y-%m-%dT%H:%MZ"),
                "to": (begin + HALF_HOUR).strftime("%Y-%m-%dT%H:%MZ"),
                "generationmix": [{"fuel": fuel, "perc": perc} for fuel, perc in mix.items()],
            }
        )
    return {"data": data}


@pytest.fixture
def series_factory():
    return make_series


@pytest.fixture
def payload_factory():
    return api_payload
