"""Month window arithmetic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, timedelta

from .dates import CalendarDate, normalize


@dataclass(frozen=True, order=True)
class MonthWindow:
    """The (year, month) currently shown by a calendar. Month is 1-based."""

    year: int
    month: int

    @property
    def first_day(self) -> CalendarDate:
        return CalendarDate(self.year, self.month, 1)

    def contains(self, value: object) -> bool:
        """Check if a date falls anywhere in this month."""
        day = normalize(value)
        if day is None:
            return False
        return day.year == self.year and day.month == self.month

    def day(self, day_of_month: int) -> CalendarDate:
        return CalendarDate(self.year, self.month, day_of_month)

    def days(self) -> list[CalendarDate]:
        """Every day of the month in order."""
        return [self.day(d) for d in range(1, month_length(self.year, self.month) + 1)]

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


def _shift(window: MonthWindow, months: int) -> MonthWindow:
    # Zero-based month index makes year rollover a divmod
    year, month_index = divmod(window.year * 12 + (window.month - 1) + months, 12)
    return MonthWindow(year, month_index + 1)


def previous_month(window: MonthWindow) -> MonthWindow:
    """The month before, rolling January back to December of the prior year."""
    return _shift(window, -1)


def next_month(window: MonthWindow) -> MonthWindow:
    """The month after, rolling December forward to January of the next year."""
    return _shift(window, 1)


def window_of(value: object) -> MonthWindow | None:
    """The month containing a date, or None if the date is unusable."""
    day = normalize(value)
    if day is None:
        return None
    return MonthWindow(day.year, day.month)


def month_length(year: int, month: int) -> int:
    """
    Number of days in a month, leap years included.

    Computed as the day before the 1st of the following month.
    Month must be 1-12.
    """
    following = _shift(MonthWindow(year, month), 1)
    last_day = date(following.year, following.month, 1) - timedelta(days=1)
    return last_day.day


def first_weekday_offset(year: int, month: int) -> int:
    """
    Weekday of the 1st of the month, Sunday = 0 ... Saturday = 6.

    This is the number of blank cells before day 1 in a Sunday-first grid.
    """
    return CalendarDate(year, month, 1).weekday()
