"""
Service producing the current-time snapshot.

The clock is sampled exactly once per call and every textual field is
derived from that instant, so the fields never disagree with each
other.  "Local" fields use the configured zone; day and month names
are fixed English abbreviations and do not depend on the process
locale.
"""

import logging
from datetime import datetime, timedelta, timezone, tzinfo
from email.utils import format_datetime
from typing import Callable, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from showcase_api.app.schemas.time import TimeSnapshot


logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def resolve_zone(name: str) -> tzinfo:
    """Return the ``tzinfo`` for an IANA name, falling back to UTC."""
    if name.upper() in {"UTC", "Z", "ETC/UTC"}:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, falling back to UTC", name)
        return timezone.utc


def zone_name(zone: tzinfo) -> str:
    """IANA key for ``ZoneInfo`` zones, abbreviation otherwise."""
    return getattr(zone, "key", None) or zone.tzname(None) or "UTC"


class TimeService:
    """Builds ``TimeSnapshot`` objects from an injectable clock."""

    def __init__(self, zone: Union[str, tzinfo] = "UTC", clock: Optional[Clock] = None) -> None:
        self.zone = resolve_zone(zone) if isinstance(zone, str) else zone
        self.clock = clock or utc_now

    def current_time(self) -> TimeSnapshot:
        now = self.clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        now = now.astimezone(timezone.utc)
        local = now.astimezone(self.zone)

        hour12 = local.hour % 12 or 12
        meridiem = "AM" if local.hour < 12 else "PM"
        offset = local.strftime("%z") or "+0000"

        return TimeSnapshot(
            timestamp=(now - EPOCH) // timedelta(milliseconds=1),
            iso=now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            local=f"{local.month}/{local.day}/{local.year}, {hour12}:{local:%M:%S} {meridiem}",
            utc=format_datetime(now, usegmt=True),
            date=f"{_DAYS[local.weekday()]} {_MONTHS[local.month - 1]} {local.day:02d} {local.year}",
            time=f"{local:%H:%M:%S} GMT{offset} ({local.tzname()})",
            timezone=zone_name(self.zone),
        )
