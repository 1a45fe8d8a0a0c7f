from datetime import time
from types import SimpleNamespace

import pytest

from provider_hours.core.errors import DuplicateDayEntry, InvalidDayIndex
from provider_hours.schemas.schedule import DayAvailability, WeeklyAvailability
from provider_hours.services import availability_service
from provider_hours.services.availability_service import (
    day_index,
    day_name,
    entries_to_weekly,
    from_python_weekday,
    weekly_to_entries,
)


def clinic_week():
    return WeeklyAvailability(
        monday=DayAvailability(enabled=True, start_time="08:00", end_time="17:00"),
        tuesday=DayAvailability(enabled=True, start_time="08:00", end_time="17:00"),
        wednesday=DayAvailability(enabled=False, start_time="09:00", end_time="13:00"),
        saturday=DayAvailability(enabled=True, start_time="09:00", end_time="13:00"),
    )


def test_weekly_round_trip_is_identity():
    week = clinic_week()
    assert entries_to_weekly(weekly_to_entries(week)) == week


def test_weekly_to_entries_emits_every_day_sunday_first():
    entries = weekly_to_entries(clinic_week())
    assert [e.day_of_week for e in entries] == list(range(7))
    sunday, monday = entries[0], entries[1]
    assert sunday.is_active is False
    assert sunday.start_time is None
    assert monday.is_active is True
    assert (monday.start_time, monday.end_time) == ("08:00", "17:00")


def test_weekly_to_entries_accepts_plain_mapping():
    entries = weekly_to_entries({"Friday": {"enabled": True, "startTime": "07:00", "endTime": "15:00"}})
    assert entries[5].is_active is True
    assert entries[5].start_time == "07:00"


def test_entries_to_weekly_defaults_missing_days_to_closed():
    week = entries_to_weekly([{"day_of_week": 3, "start_time": "10:00", "end_time": "18:00", "is_active": True}])
    assert week.wednesday == DayAvailability(enabled=True, start_time="10:00", end_time="18:00")
    assert week.thursday == DayAvailability()
    assert entries_to_weekly(None) == WeeklyAvailability()


def test_entries_to_weekly_normalizes_row_times():
    rows = [SimpleNamespace(day_of_week=1, start_time=time(9, 30), end_time=None, is_active=False)]
    week = entries_to_weekly(rows)
    assert week.monday == DayAvailability(enabled=False, start_time="09:30", end_time=None)


def test_entries_to_weekly_rejects_duplicate_days():
    rows = [{"day_of_week": 2, "is_active": True}, {"day_of_week": 2, "is_active": False}]
    with pytest.raises(DuplicateDayEntry) as exc:
        entries_to_weekly(rows)
    assert exc.value.day_of_week == 2


def test_entries_to_weekly_rejects_bad_day():
    with pytest.raises(InvalidDayIndex):
        entries_to_weekly([{"day_of_week": 8, "is_active": True}])


def test_serialized_with_camel_case_keys():
    dumped = clinic_week().model_dump(by_alias=True)
    assert dumped["monday"] == {"enabled": True, "startTime": "08:00", "endTime": "17:00"}
    assert dumped["sunday"] == {"enabled": False, "startTime": None, "endTime": None}


def test_day_name_helpers():
    assert day_name(0) == "sunday"
    assert day_name(6) == "saturday"
    assert day_index("Monday") == 1
    with pytest.raises(InvalidDayIndex):
        day_name(7)
    with pytest.raises(InvalidDayIndex):
        day_index("someday")


def test_from_python_weekday():
    assert from_python_weekday(0) == 1  # Monday
    assert from_python_weekday(6) == 0  # Sunday


def test_list_branch_schedules_filters_and_orders():
    class FakeQuery:
        def __init__(self):
            self.calls = []

        def filter(self, *args, **kwargs):
            self.calls.append("filter")
            return self

        def order_by(self, *args):
            self.calls.append("order_by")
            return self

        def all(self):
            return ["row"]

    query = FakeQuery()

    class FakeDB:
        def query(self, model):
            assert model is availability_service.ProviderSchedule
            return query

    assert availability_service.list_branch_schedules(FakeDB(), "branch-1") == ["row"]
    assert query.calls == ["filter", "order_by"]


@pytest.mark.parametrize("start, end", [("09:00:00", "17:00:00"), ("9:00", "17:00")])
def test_round_trip_holds_for_other_clock_spellings(start, end):
    week = WeeklyAvailability(monday=DayAvailability(enabled=True, start_time=start, end_time=end))
    assert week.monday.start_time == "09:00"
    assert entries_to_weekly(weekly_to_entries(week)) == week


def test_unparsable_day_times_become_null():
    week = WeeklyAvailability.model_validate({"friday": {"enabled": True, "startTime": "soon", "endTime": "18:00"}})
    assert week.friday == DayAvailability(enabled=True, start_time=None, end_time="18:00")
    assert entries_to_weekly(weekly_to_entries(week)) == week
