"""
Date and Time utilities

This module handles the time arithmetic of the tabbed schedule: show time
ranges, day tab dates and conversion to epoch milliseconds.
Centralizes all time parsing logic to maintain consistency across the application.
"""
from datetime import date, datetime, time, timedelta, tzinfo
from zoneinfo import ZoneInfo
import logging

from radio_schedule.errors import ParseTimeError

logger = logging.getLogger(__name__)

TIME_RANGE_SEPARATOR = " - "
DEFAULT_TIME = "00:00"


def resolve_timezone(name: str | None) -> tzinfo | None:
    """
    Resolve the schedule timezone

    Args:
        name: IANA timezone name, or None for the server's local timezone

    Returns:
        ZoneInfo for the name, or None meaning system local time
    """
    return ZoneInfo(name) if name else None


def today_in(tz: tzinfo | None) -> date:
    """Current calendar date in the given timezone (None = local)"""
    return datetime.now(tz).date()


def parse_clock_time(text: str) -> time:
    """
    Parse a 24-hour ``HH:MM`` time of day

    Raises:
        ParseTimeError: If the text is not a valid time
    """
    try:
        return datetime.strptime(text.strip(), "%H:%M").time()
    except ValueError as e:
        raise ParseTimeError(f"Invalid time of day: '{text}'") from e


def parse_time_range(text: str) -> tuple[time, timedelta]:
    """
    Parse a ``"HH:MM - HH:MM"`` show time range

    A missing end time counts as midnight. When the end reads earlier than the
    start, the duration is the absolute difference between the two clock
    times, so ``23:00 - 01:00`` lasts 22 hours.

    Args:
        text: Time range text as it appears on the page

    Returns:
        Tuple of (start time, duration)

    Raises:
        ParseTimeError: If either side is not a valid ``HH:MM`` time
    """
    parts = text.strip().split(TIME_RANGE_SEPARATOR)
    start = parse_clock_time(parts[0])
    end = parse_clock_time(parts[1] if len(parts) > 1 else DEFAULT_TIME)

    duration = datetime.combine(date.min, end) - datetime.combine(date.min, start)
    return start, abs(duration)


def tab_date(today: date, tab_index: int) -> date:
    """
    Calendar date of a Monday-first day tab, looking forward from today

    Tabs for weekdays earlier than today roll over into next week.

    Args:
        today: Anchor date
        tab_index: 0-based tab position (0 = Monday)

    Returns:
        Date the tab's shows air on
    """
    return today + timedelta(days=(tab_index - today.weekday()) % 7)


def to_epoch_millis(value: datetime) -> int:
    """Convert a timezone-aware datetime to milliseconds since the Unix epoch"""
    return round(value.timestamp() * 1000)


def show_interval(day: date, time_range: str, tz: tzinfo | None) -> tuple[int, int]:
    """
    Absolute start and end of a show in epoch milliseconds

    Args:
        day: Date the show airs on
        time_range: ``"HH:MM - HH:MM"`` text
        tz: Timezone the wall-clock times are in (None = local)

    Returns:
        Tuple of (start_at, end_at)
    """
    start_time, duration = parse_time_range(time_range)
    start_dt = datetime.combine(day, start_time, tzinfo=tz)
    if tz is None:
        start_dt = start_dt.astimezone()
    start_at = to_epoch_millis(start_dt)
    return start_at, start_at + duration // timedelta(milliseconds=1)
