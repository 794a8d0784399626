from datetime import datetime, timedelta, timezone

ISO_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Querying at exactly midnight makes the API return the previous day's
# 23:30 - 00:00 interval, so every window starts one minute past midnight.
BOUNDARY_OFFSET = timedelta(minutes=1)


def _midnight_utc(now: datetime | None) -> datetime:
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def mix_report_window(now: datetime | None = None) -> tuple[datetime, datetime]:
    """
    Three consecutive days: today, tomorrow and the day after tomorrow.
    e.g. now 2025-12-10 16:00 → (2025-12-10T00:01Z, 2025-12-13T00:01Z)
    """
    today = _midnight_utc(now) + BOUNDARY_OFFSET
    return today, today + timedelta(days=3)


def optimal_search_window(now: datetime | None = None) -> tuple[datetime, datetime]:
    """
    The next two days, starting tomorrow. Only future time is searched
    since the result is used to pick an upcoming charging slot.
    """
    tomorrow = _midnight_utc(now) + timedelta(days=1) + BOUNDARY_OFFSET
    return tomorrow, tomorrow + timedelta(days=2)


def format_instant(dt: datetime) -> str:
    """UTC instant at second precision, as used in the API path."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).strftime(ISO_FORMAT)
