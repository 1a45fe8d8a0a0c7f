from .availability_service import entries_to_weekly, weekly_to_entries, list_branch_schedules
from .schedule_formatter import format_smart_schedule, summarize_schedule

__all__ = [
    "entries_to_weekly",
    "weekly_to_entries",
    "list_branch_schedules",
    "format_smart_schedule",
    "summarize_schedule",
]
