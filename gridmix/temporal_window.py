from datetime import timedelta
from decimal import Decimal
from typing import Sequence

from gridmix.daily_mix import clean_share
from gridmix.fuel_mix import INTERVALS_PER_HOUR, ChargingWindow, Interval


def find_optimal_window(intervals: Sequence[Interval], duration_h: int) -> ChargingWindow | None:
    """
    Given a chronologically ordered half-hourly series and a window length
    in hours, slide an exact-duration window (duration_h * intervals per
    hour) to find the highest average clean energy share.
    Returns None if the series is shorter than the window.
    """
    window_size = duration_h * INTERVALS_PER_HOUR
    n = len(intervals)
    if window_size < 1 or window_size > n:
        return None

    # Decimal shares keep the running sum free of float drift, so windows
    # with equal contents compare equal
    shares = [clean_share(interval) for interval in intervals]

    window_sum = sum(shares[:window_size], Decimal(0))
    best_sum = window_sum
    best_start = 0

    # Slide over interval index: one share enters, one leaves
    for i in range(1, n - window_size + 1):
        window_sum += shares[i + window_size - 1] - shares[i - 1]
        if window_sum > best_sum:
            best_sum = window_sum
            best_start = i

    start = intervals[best_start].start
    return ChargingWindow(
        start=start,
        end=start + timedelta(hours=duration_h),
        clean_energy_percentage=round(float(best_sum / window_size), 2),
    )
