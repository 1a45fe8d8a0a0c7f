import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..core.config import get_settings
from ..core.db import get_db
from ..core.errors import ScheduleError
from ..schemas.schedule import ScheduleSummaryOut, WeeklyAvailability
from ..services import availability_service, schedule_formatter
from ..core.time_format import get_display_tz

logger = logging.getLogger(__name__)

router = APIRouter()


def _stored_data_error(branch_id: str, exc: ScheduleError) -> HTTPException:
    logger.warning("Invalid stored schedule for branch=%s: %s", branch_id, exc)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("/{branch_id}/schedule", response_model=WeeklyAvailability)
def get_branch_schedule(branch_id: str, db: Session = Depends(get_db)):
    rows = availability_service.list_branch_schedules(db, branch_id)
    try:
        return availability_service.entries_to_weekly(rows)
    except ScheduleError as exc:
        raise _stored_data_error(branch_id, exc)


@router.get("/{branch_id}/schedule/summary", response_model=ScheduleSummaryOut)
def get_branch_schedule_summary(branch_id: str, db: Session = Depends(get_db)):
    settings = get_settings()
    rows = availability_service.list_branch_schedules(db, branch_id)
    try:
        result = schedule_formatter.summarize_schedule(
            rows,
            tz=get_display_tz(settings),
            wrap_ranges=settings.wrap_week_ranges,
        )
    except ScheduleError as exc:
        raise _stored_data_error(branch_id, exc)
    return ScheduleSummaryOut(summary=result.summary, state=result.state.value, today_index=result.today_index)
