import json
import math
from datetime import datetime

import click
import requests

from gridmix.fuel_mix import FuelMix, Interval
from gridmix.time_window import format_instant

GENERATION_URL = "https://api.carbonintensity.org.uk/generation"
DEFAULT_TIMEOUT = 10


def fetch_generation_data(start: datetime,
                          end: datetime,
                          base_url: str = GENERATION_URL,
                          timeout: float = DEFAULT_TIMEOUT) -> str | None:
    """
    Fetch the generation mix series for [start, end) from the Carbon
    Intensity API. Returns the raw response body, or None on any
    transport error or non-success status.
    """
    url = f"{base_url.rstrip('/')}/{format_instant(start)}/{format_instant(end)}"
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        click.echo(f"❌ Error fetching generation mix: {e}", err=True)
        return None
    return resp.text


def _parse_timestamp(value: str) -> datetime:
    # API timestamps look like 2025-12-10T00:30Z
    if not isinstance(value, str):
        raise TypeError(f"timestamp {value!r} is not a string")
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _parse_fuel_mix(mix: dict) -> FuelMix:
    fuel, perc = mix["fuel"], mix["perc"]
    if not isinstance(fuel, str):
        raise TypeError(f"fuel {fuel!r} is not a string")
    if isinstance(perc, bool) or not isinstance(perc, (int, float)):
        raise TypeError(f"perc {perc!r} for {fuel} is not a number")
    perc = float(perc)
    if not math.isfinite(perc):
        raise ValueError(f"perc {perc!r} for {fuel} is not finite")
    return FuelMix(fuel=fuel, perc=perc)


def _parse_interval(item: dict) -> Interval:
    start = _parse_timestamp(item["from"])
    end = _parse_timestamp(item["to"])
    if not start < end:
        raise ValueError(f"interval {item['from']} → {item['to']} is empty")

    mixes = [_parse_fuel_mix(mix) for mix in item.get("generationmix") or []]
    return Interval(start=start, end=end, generation_mix=mixes)


def parse_intervals(raw: str | bytes) -> list[Interval] | None:
    """
    Decode a generation response body into intervals, in the order given.
    Returns [] for a well-formed empty series and None when the body is
    malformed or has no "data" list.
    """
    try:
        payload = json.loads(raw)
        data = payload["data"]
        if not isinstance(data, list):
            raise TypeError(f"'data' is a {type(data).__name__}, expected a list")
        return [_parse_interval(item) for item in data]
    except (ValueError, KeyError, TypeError, OverflowError, RecursionError) as e:
        # json.JSONDecodeError is a ValueError
        click.echo(f"❌ Error parsing generation mix: {e}", err=True)
        return None
