from datetime import date
from decimal import Decimal
from typing import Iterable

from gridmix.fuel_mix import CLEAN_FUELS, DayMix, Interval


def clean_share(interval: Interval) -> Decimal:
    """
    Summed percentage of the clean fuels in a single interval.
    Exact (built from each percentage's shortest repr) so that equal
    shares add up to equal sums.
    """
    return sum(
        (Decimal(str(mix.perc)) for mix in interval.generation_mix if mix.fuel in CLEAN_FUELS),
        Decimal(0),
    )


def average_day_mix(day: date, intervals: list[Interval]) -> DayMix:
    """
    Average every fuel's percentage over the day's intervals (2 dp) and
    add up the clean fuels' averages into the day's clean energy share.
    """
    count = len(intervals)
    if count == 0:
        return DayMix(date=day, average_mix={}, clean_energy_percentage=0.0)

    totals: dict[str, float] = {}
    for interval in intervals:
        for mix in interval.generation_mix:
            totals[mix.fuel] = totals.get(mix.fuel, 0.0) + mix.perc

    average_mix = {}
    clean_pct = 0.0
    for fuel, total in totals.items():
        average = round(total / count, 2)
        average_mix[fuel] = average
        if fuel in CLEAN_FUELS:
            clean_pct += average

    return DayMix(date=day, average_mix=average_mix,
                  clean_energy_percentage=round(clean_pct, 2))


def calculate_daily_mix(intervals: Iterable[Interval]) -> list[DayMix]:
    """
    Group intervals by the calendar date of their start and return one
    DayMix per day, oldest first. An empty series gives an empty list.
    """
    by_day: dict[date, list[Interval]] = {}
    for interval in intervals:
        by_day.setdefault(interval.start.date(), []).append(interval)

    return [average_day_mix(day, by_day[day]) for day in sorted(by_day)]
