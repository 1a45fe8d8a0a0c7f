from .schedule import (
    ScheduleEntry,
    DayAvailability,
    WeeklyAvailability,
    ScheduleSummaryRequest,
    ScheduleSummaryOut,
)

__all__ = [
    "ScheduleEntry",
    "DayAvailability",
    "WeeklyAvailability",
    "ScheduleSummaryRequest",
    "ScheduleSummaryOut",
]
