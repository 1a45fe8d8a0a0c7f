from fastapi import APIRouter, HTTPException, status

from ..core.config import get_settings
from ..core.errors import ScheduleError
from ..schemas.schedule import ScheduleEntry, ScheduleSummaryOut, ScheduleSummaryRequest, WeeklyAvailability
from ..services import availability_service, schedule_formatter
from ..core.time_format import get_display_tz

router = APIRouter()


@router.post("/summary", response_model=ScheduleSummaryOut)
def summarize(payload: ScheduleSummaryRequest):
    settings = get_settings()
    source = payload.availability if payload.availability is not None else payload.entries
    try:
        result = schedule_formatter.summarize_schedule(
            source,
            now=payload.now,
            tz=get_display_tz(settings),
            wrap_ranges=settings.wrap_week_ranges,
        )
    except ScheduleError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return ScheduleSummaryOut(summary=result.summary, state=result.state.value, today_index=result.today_index)


@router.post("/entries", response_model=list[ScheduleEntry])
def to_entries(payload: WeeklyAvailability):
    return availability_service.weekly_to_entries(payload)


@router.post("/weekly", response_model=WeeklyAvailability)
def to_weekly(payload: list[ScheduleEntry]):
    try:
        return availability_service.entries_to_weekly(payload)
    except ScheduleError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
