import logging
import re
from datetime import datetime, time, timedelta, timezone, tzinfo
from typing import Any
from zoneinfo import ZoneInfo

from .config import Settings

logger = logging.getLogger(__name__)

DEFAULT_UTC_OFFSET_HOURS = -5
DEFAULT_TZ = timezone(timedelta(hours=DEFAULT_UTC_OFFSET_HOURS))

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::\d{2}(?:\.\d+)?)?$")


def format_time(value: Any) -> str:
    """Render a time-of-day as 24-hour ``HH:MM``.

    Accepts ``datetime``/``time`` objects, bare clock strings (``9:00``,
    ``09:00:00``) and ISO timestamps. Timestamps carry the stored wall time in
    UTC, so aware values are read in UTC. Anything else renders as ``""``.
    """
    if value is None or value == "":
        return ""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime("%H:%M")
    if isinstance(value, time):
        return value.strftime("%H:%M")
    if isinstance(value, str):
        text = value.strip()
        match = _CLOCK_RE.match(text)
        if match:
            hours, minutes = int(match.group(1)), int(match.group(2))
            if hours < 24 and minutes < 60:
                return f"{hours:02d}:{minutes:02d}"
        else:
            try:
                return format_time(datetime.fromisoformat(text.replace("Z", "+00:00")))
            except ValueError:
                pass
    logger.debug("Unparsable time value %r rendered as empty string", value)
    return ""


def get_display_tz(settings: Settings) -> tzinfo:
    if settings.timezone:
        return ZoneInfo(settings.timezone)
    return timezone(timedelta(hours=settings.utc_offset_hours))
