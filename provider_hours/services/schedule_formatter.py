"""Compact, human-readable rendering of a provider's weekly opening hours.

Pipeline: normalize entries -> classify homogeneity -> build either a
day-range label or a "today" label. Every stage is pure; only
``summarize_schedule`` reads the clock, and only when ``now`` is not given.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo
from enum import Enum
from typing import Any, Iterable

from ..core.errors import DuplicateDayEntry
from .availability_service import (
    from_python_weekday,
    is_entry_active,
    is_weekly_mapping,
    read_day_index,
    read_field,
    weekly_to_entries,
)
from ..core.time_format import DEFAULT_TZ, format_time

logger = logging.getLogger(__name__)

DAY_ABBREVIATIONS = ("Dom", "Lun", "Mar", "Mié", "Jue", "Vie", "Sáb")

NO_SCHEDULE_LABEL = "Horario no disponible"
ALL_CLOSED_LABEL = "Temporalmente no disponible"
CLOSED_TODAY_LABEL = "Hoy: Cerrado"


class ScheduleState(str, Enum):
    NO_SCHEDULE = "no_schedule"
    ALL_CLOSED = "all_closed"
    ACTIVE = "active"
    HOMOGENEOUS = "homogeneous"
    TODAY = "today"


@dataclass(frozen=True)
class NormalizedEntry:
    day_of_week: int
    start: str
    end: str


@dataclass
class NormalizationResult:
    state: ScheduleState
    entries: list[NormalizedEntry] = field(default_factory=list)


@dataclass(frozen=True)
class ScheduleSummary:
    summary: str
    state: ScheduleState
    today_index: int | None = None


def normalize_entries(entries: Iterable[Any] | Any | None) -> NormalizationResult:
    """Keep active entries, formatted and sorted by day_of_week.

    ``entries`` may be a flat list of entries or a per-weekday-name mapping.
    Raises InvalidDayIndex for any entry whose day is not an int in 0..6 and
    DuplicateDayEntry when a day appears twice.
    """
    if entries is None:
        return NormalizationResult(ScheduleState.NO_SCHEDULE)
    if is_weekly_mapping(entries):
        entries = weekly_to_entries(entries)
    entries = list(entries)
    if not entries:
        return NormalizationResult(ScheduleState.NO_SCHEDULE)

    active = []
    seen: set[int] = set()
    for entry in entries:
        day = read_day_index(entry)
        if day in seen:
            raise DuplicateDayEntry(day)
        seen.add(day)
        if not is_entry_active(entry):
            continue
        active.append(
            NormalizedEntry(
                day_of_week=day,
                start=format_time(read_field(entry, "start_time")),
                end=format_time(read_field(entry, "end_time")),
            )
        )
    if not active:
        return NormalizationResult(ScheduleState.ALL_CLOSED)
    active.sort(key=lambda e: e.day_of_week)
    return NormalizationResult(ScheduleState.ACTIVE, active)


def is_homogeneous(active: list[NormalizedEntry]) -> bool:
    first = active[0]
    return all(e.start == first.start and e.end == first.end for e in active)


def _wrapping_run(days: list[int]) -> tuple[int, int] | None:
    # (first, last) of a single circular run that crosses Saturday -> Sunday
    day_set = set(days)
    if len(day_set) == 7:
        return None
    run_starts = [d for d in day_set if (d - 1) % 7 not in day_set]
    if len(run_starts) != 1:
        return None
    first = last = run_starts[0]
    while (last + 1) % 7 in day_set:
        last = (last + 1) % 7
    if first <= last:
        return None
    return first, last


def build_range_label(active: list[NormalizedEntry], start: str, end: str, *, wrap_ranges: bool = True) -> str:
    """Render ``"Lun 09:00-17:00"`` or ``"Lun-Vie 09:00-17:00"``.

    ``active`` must be sorted by day. With ``wrap_ranges`` a contiguous run such
    as Sat, Sun, Mon renders as ``"Sáb-Lun"`` instead of ``"Dom-Sáb"``.
    """
    hours = f"{start}-{end}"
    if len(active) == 1:
        return f"{DAY_ABBREVIATIONS[active[0].day_of_week]} {hours}"
    first, last = active[0].day_of_week, active[-1].day_of_week
    if wrap_ranges:
        run = _wrapping_run([e.day_of_week for e in active])
        if run:
            first, last = run
    return f"{DAY_ABBREVIATIONS[first]}-{DAY_ABBREVIATIONS[last]} {hours}"


def resolve_today_index(now: datetime | None = None, tz: tzinfo | None = None) -> int:
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return from_python_weekday(now.astimezone(tz or DEFAULT_TZ).weekday())


def build_today_label(active: list[NormalizedEntry], today_index: int) -> str:
    for entry in active:
        if entry.day_of_week == today_index:
            return f"Hoy: {entry.start} - {entry.end}"
    return CLOSED_TODAY_LABEL


def summarize_schedule(
    entries: Iterable[Any] | Any | None,
    *,
    now: datetime | None = None,
    tz: tzinfo | None = None,
    wrap_ranges: bool = True,
) -> ScheduleSummary:
    normalized = normalize_entries(entries)
    if normalized.state is ScheduleState.NO_SCHEDULE:
        return ScheduleSummary(NO_SCHEDULE_LABEL, ScheduleState.NO_SCHEDULE)
    if normalized.state is ScheduleState.ALL_CLOSED:
        return ScheduleSummary(ALL_CLOSED_LABEL, ScheduleState.ALL_CLOSED)

    active = normalized.entries
    if is_homogeneous(active):
        label = build_range_label(active, active[0].start, active[0].end, wrap_ranges=wrap_ranges)
        logger.debug("Homogeneous schedule over %d day(s): %s", len(active), label)
        return ScheduleSummary(label, ScheduleState.HOMOGENEOUS)

    # Output is only valid for the instant it was computed; do not cache across days
    today = resolve_today_index(now, tz)
    label = build_today_label(active, today)
    logger.debug("Heterogeneous schedule, today index %d: %s", today, label)
    return ScheduleSummary(label, ScheduleState.TODAY, today_index=today)


def format_smart_schedule(
    entries: Iterable[Any] | Any | None,
    *,
    now: datetime | None = None,
    tz: tzinfo | None = None,
    wrap_ranges: bool = True,
) -> str:
    return summarize_schedule(entries, now=now, tz=tz, wrap_ranges=wrap_ranges).summary
