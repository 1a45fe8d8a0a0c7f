from collections.abc import Mapping
from typing import Any, Iterable

from sqlalchemy.orm import Session

from ..core.errors import DuplicateDayEntry, InvalidDayIndex
from ..models.schedule import ProviderSchedule
from ..schemas.schedule import DayAvailability, ScheduleEntry, WeeklyAvailability
from ..core.time_format import format_time

# Index in this tuple is the day_of_week value (0 = Sunday)
DAY_NAMES = ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")

_FIELD_KEYS = {
    "day_of_week": ("day_of_week", "dayOfWeek"),
    "start_time": ("start_time", "startTime"),
    "end_time": ("end_time", "endTime"),
    "is_active": ("is_active", "isActive"),
    "enabled": ("enabled",),
}


def day_name(day_of_week: int) -> str:
    if not isinstance(day_of_week, int) or isinstance(day_of_week, bool) or not 0 <= day_of_week <= 6:
        raise InvalidDayIndex(day_of_week)
    return DAY_NAMES[day_of_week]


def day_index(name: str) -> int:
    try:
        return DAY_NAMES.index(name.strip().lower())
    except ValueError:
        raise InvalidDayIndex(name) from None


def from_python_weekday(weekday: int) -> int:
    # Convert Python weekday (Mon=0) to Sunday=0 convention
    return (weekday + 1) % 7


def read_field(entry: Any, field: str) -> Any:
    """Read a schedule field from a dict (snake or camel case) or an object."""
    for key in _FIELD_KEYS[field]:
        if isinstance(entry, Mapping):
            if key in entry:
                return entry[key]
        elif hasattr(entry, key):
            return getattr(entry, key)
    return None


def read_day_index(entry: Any) -> int:
    day = read_field(entry, "day_of_week")
    if isinstance(day, bool) or not isinstance(day, int) or not 0 <= day <= 6:
        raise InvalidDayIndex(day)
    return day


def is_entry_active(entry: Any) -> bool:
    return read_field(entry, "is_active") is True or read_field(entry, "enabled") is True


def is_weekly_mapping(value: Any) -> bool:
    if isinstance(value, WeeklyAvailability):
        return True
    return isinstance(value, Mapping) and bool(value) and all(
        isinstance(key, str) and key.lower() in DAY_NAMES for key in value
    )


def weekly_to_entries(week: WeeklyAvailability | Mapping) -> list[ScheduleEntry]:
    if not isinstance(week, WeeklyAvailability):
        week = WeeklyAvailability.model_validate({str(k).lower(): v for k, v in week.items()})
    entries = []
    for index, name in enumerate(DAY_NAMES):
        slot: DayAvailability = getattr(week, name)
        entries.append(
            ScheduleEntry(
                day_of_week=index,
                start_time=slot.start_time,
                end_time=slot.end_time,
                is_active=slot.enabled,
            )
        )
    return entries


def entries_to_weekly(entries: Iterable[Any] | None) -> WeeklyAvailability:
    slots: dict[str, DayAvailability] = {}
    for entry in entries or []:
        day = read_day_index(entry)
        name = DAY_NAMES[day]
        if name in slots:
            raise DuplicateDayEntry(day)
        slots[name] = DayAvailability(
            enabled=is_entry_active(entry),
            start_time=format_time(read_field(entry, "start_time")) or None,
            end_time=format_time(read_field(entry, "end_time")) or None,
        )
    return WeeklyAvailability(**slots)


def list_branch_schedules(db: Session, branch_id: str) -> list[ProviderSchedule]:
    return (
        db.query(ProviderSchedule)
        .filter(ProviderSchedule.branch_id == branch_id)
        .order_by(ProviderSchedule.day_of_week)
        .all()
    )
