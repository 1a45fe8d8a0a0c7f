from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..core.time_format import format_time


class ScheduleEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # strict keeps JSON booleans from passing as 0/1; the range is checked by the normalizer
    day_of_week: int = Field(..., alias="dayOfWeek", strict=True, description="0=Sunday, 6=Saturday")
    start_time: str | None = Field(None, alias="startTime")
    end_time: str | None = Field(None, alias="endTime")
    is_active: bool = Field(False, alias="isActive")


class DayAvailability(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    enabled: bool = False
    start_time: str | None = Field(None, alias="startTime")
    end_time: str | None = Field(None, alias="endTime")

    @field_validator("start_time", "end_time")
    @classmethod
    def canonical_time(cls, value: str | None) -> str | None:
        """Store times as HH:MM; unparsable values become null."""
        if value is None:
            return None
        return format_time(value) or None


class WeeklyAvailability(BaseModel):
    monday: DayAvailability = Field(default_factory=DayAvailability)
    tuesday: DayAvailability = Field(default_factory=DayAvailability)
    wednesday: DayAvailability = Field(default_factory=DayAvailability)
    thursday: DayAvailability = Field(default_factory=DayAvailability)
    friday: DayAvailability = Field(default_factory=DayAvailability)
    saturday: DayAvailability = Field(default_factory=DayAvailability)
    sunday: DayAvailability = Field(default_factory=DayAvailability)


class ScheduleSummaryRequest(BaseModel):
    """Either ``entries`` or ``availability``, not both."""

    entries: list[ScheduleEntry] | None = None
    availability: WeeklyAvailability | None = None
    now: datetime | None = None

    @model_validator(mode="after")
    def single_source(self):
        if self.entries is not None and self.availability is not None:
            raise ValueError("send either entries or availability, not both")
        return self


class ScheduleSummaryOut(BaseModel):
    summary: str
    state: str
    today_index: int | None = None
