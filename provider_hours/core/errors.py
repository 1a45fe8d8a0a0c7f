class ScheduleError(ValueError):
    """Base class for malformed schedule input."""


class InvalidDayIndex(ScheduleError):
    def __init__(self, day_of_week):
        self.day_of_week = day_of_week
        super().__init__(f"day_of_week must be an integer between 0 and 6, got {day_of_week!r}")


class DuplicateDayEntry(ScheduleError):
    def __init__(self, day_of_week: int):
        self.day_of_week = day_of_week
        super().__init__(f"more than one schedule entry for day_of_week={day_of_week}")
