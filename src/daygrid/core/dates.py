"""Calendar day values and date normalization - no I/O dependencies."""

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta

_ISO_DAY_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A calendar day: (year, month, day) with no time or timezone."""

    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(d.year, d.month, d.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def weekday(self) -> int:
        """Day of week with Sunday = 0 ... Saturday = 6."""
        return (self.to_date().weekday() + 1) % 7

    def shift(self, days: int) -> "CalendarDate":
        return CalendarDate.from_date(self.to_date() + timedelta(days=days))

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class StringDate:
    """A date as it arrived in text form, e.g. from JSON."""

    value: str


@dataclass(frozen=True)
class NativeDate:
    """A date or datetime object handed in by the caller."""

    value: date


RawDate = StringDate | NativeDate


def as_raw_date(value: object) -> RawDate | None:
    """
    Tag an untyped date value.

    This is the only place that looks at the shape of incoming date values.
    Returns None for None and for unsupported types.
    """
    match value:
        case StringDate() | NativeDate():
            return value
        case str():
            return StringDate(value)
        case date():
            # datetime is a subclass of date
            return NativeDate(value)
        case _:
            return None


def _parse_iso_day(text: str) -> CalendarDate | None:
    parts = _ISO_DAY_PATTERN.fullmatch(text)
    if not parts:
        return None
    year, month, day = (int(part) for part in parts.groups())
    try:
        # Reject impossible days like 2023-02-30
        date(year, month, day)
    except ValueError:
        return None
    return CalendarDate(year, month, day)


def normalize(value: object) -> CalendarDate | None:
    """
    Normalize a raw date into a CalendarDate.

    Strings must be YYYY-MM-DD and are read as local calendar components,
    never as a UTC instant. Aware datetimes are converted to local time before
    the time-of-day is dropped. Anything unparseable gives None.
    """
    if isinstance(value, CalendarDate):
        return value

    raw = as_raw_date(value)
    match raw:
        case None:
            return None
        case StringDate(value=text):
            return _parse_iso_day(text)
        case NativeDate(value=native):
            if isinstance(native, datetime):
                if native.tzinfo is not None:
                    native = native.astimezone()
                native = native.date()
            return CalendarDate.from_date(native)


def same_day(a: object, b: object) -> bool:
    """True when both values normalize to the same calendar day."""
    first = normalize(a)
    second = normalize(b)
    if first is None or second is None:
        return False
    return first == second
