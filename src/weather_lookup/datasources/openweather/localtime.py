"""Local wall-clock time at the queried location.

The provider reports ``dt`` (UTC epoch seconds) and ``timezone`` (offset in
seconds). Adding the offset and formatting in UTC gives the location's wall
clock without involving the machine's own timezone.

When either value is missing or unusable the helpers fall back to the
machine's local time. The fallback is silent.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weather_lookup.schemas import CurrentConditions

LOCAL_TIME_FORMAT = "%Y-%m-%d %H:%M"

Clock = Callable[[], datetime]


def system_now() -> datetime:
    return datetime.now()


def derive_local_time(current: CurrentConditions, *, now: Clock = system_now) -> str:
    """``yyyy-MM-dd HH:mm`` at the queried location."""
    epoch = current.epoch_utc
    offset = current.timezone_offset_seconds
    if epoch is None or offset is None:
        return now().strftime(LOCAL_TIME_FORMAT)
    try:
        local = datetime.fromtimestamp(epoch + offset, tz=UTC)
    except (OverflowError, OSError, ValueError):
        return now().strftime(LOCAL_TIME_FORMAT)
    return local.strftime(LOCAL_TIME_FORMAT)


def derive_local_date(current: CurrentConditions, *, now: Clock = system_now) -> str:
    """Date part (first whitespace-delimited token) of ``derive_local_time``."""
    local = derive_local_time(current, now=now)
    parts = local.split()
    return parts[0] if parts else local


def parse_hour(local_time: str) -> int | None:
    """
    Hour from a ``"<date> HH:mm"`` string.

    Returns None when the string has no space, no colon after it, or the hour
    is not an integer in [0, 23].
    """
    try:
        time_part = local_time.split(" ")[1]
        hour = int(time_part.split(":")[0])
    except (IndexError, ValueError, AttributeError):
        return None
    if ":" not in time_part or not 0 <= hour <= 23:
        return None
    return hour


def derive_local_hour(current: CurrentConditions, *, now: Clock = system_now) -> int:
    """Hour (0-23) at the queried location, or the machine's current hour."""
    hour = parse_hour(derive_local_time(current, now=now))
    if hour is None:
        return now().hour
    return hour
