from datetime import datetime

import click

from gridmix.daily_mix import calculate_daily_mix
from gridmix.fetch_generation import (
    DEFAULT_TIMEOUT,
    GENERATION_URL,
    fetch_generation_data,
    parse_intervals,
)
from gridmix.fuel_mix import ChargingWindow, DayMix, Interval
from gridmix.temporal_window import find_optimal_window
from gridmix.time_window import format_instant, mix_report_window, optimal_search_window


def _fetch_intervals(start: datetime,
                     end: datetime,
                     base_url: str,
                     timeout: float) -> list[Interval] | None:
    raw = fetch_generation_data(start, end, base_url=base_url, timeout=timeout)
    if raw is None:
        return None

    intervals = parse_intervals(raw)
    if intervals is None:
        return None
    if not intervals:
        click.echo(
            f"ℹ No generation data between {format_instant(start)} and {format_instant(end)}",
            err=True,
        )
        return None
    return intervals


def get_average_energy_mix(now: datetime | None = None,
                           base_url: str = GENERATION_URL,
                           timeout: float = DEFAULT_TIMEOUT) -> list[DayMix] | None:
    """
    Average energy mix and clean energy share for today, tomorrow and the
    day after tomorrow.

    Forecasts reach about two days ahead, so the last day may only be
    partially covered depending on when this runs. Returns None when the
    data could not be fetched, could not be parsed or is empty.
    """
    start, end = mix_report_window(now)
    intervals = _fetch_intervals(start, end, base_url, timeout)
    if intervals is None:
        return None
    return calculate_daily_mix(intervals)


def get_optimal_window(hours: int,
                       now: datetime | None = None,
                       base_url: str = GENERATION_URL,
                       timeout: float = DEFAULT_TIMEOUT) -> ChargingWindow | None:
    """
    Cleanest `hours`-long charging window over the next two days.
    Returns None on fetch or parse failure, or when there is not enough
    data to fill the window.
    """
    start, end = optimal_search_window(now)
    intervals = _fetch_intervals(start, end, base_url, timeout)
    if intervals is None:
        return None

    window = find_optimal_window(intervals, hours)
    if window is None:
        click.echo(
            f"ℹ Not enough data for a {hours}h window ({len(intervals)} intervals available)",
            err=True,
        )
    return window
