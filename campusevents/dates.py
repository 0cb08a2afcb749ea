"""Calendar dates written as ``yyyy/MM/dd`` or ``yyyy-MM-dd``."""

from __future__ import annotations

import datetime as _dt
import re

_INT = re.compile(r"\s*([+-]?\d+)")
_CHAR = re.compile(r"\s*(\S)")
_DELIMITERS = "-/"
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_FEBRUARY = 2


def _read(text: str, kinds: str) -> list[int | str]:
    """Extract integers ("i") and single characters ("c") in order.

    Whitespace before each field is skipped; extraction stops at the
    first field that cannot be read.
    """
    values: list[int | str] = []
    position = 0
    for kind in kinds:
        match = (_INT if kind == "i" else _CHAR).match(text, position)
        if match is None:
            break
        token = match.group(1)
        values.append(int(token) if kind == "i" else token)
        position = match.end()
    return values


def _text_of(date: str | Date) -> str:
    return date.value if isinstance(date, Date) else date


def _report_invalid(source: str, full_date: str, warning: str) -> None:
    print(
        f"The date [{full_date}] isn't valid. Found error in [{source}]. "
        f"Warning: {warning}."
    )


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def validate_month(month: int) -> bool:
    return 1 <= month <= 12


def validate_year(year: int) -> bool:
    """Years from 1900 up to the current year are accepted."""
    return 1900 <= year <= current_year()


def validate_day(day: int, month: int, year: int) -> bool:
    """Check that ``day`` exists in the given month of the given year.

    February only has its upper bound checked.
    """
    if month == _FEBRUARY:
        return day <= (29 if is_leap_year(year) else 28)
    if not validate_month(month):
        return False
    return 1 <= day <= _DAYS_IN_MONTH[month - 1]


def validate_date(date: str, verbose: bool = False) -> bool:
    """Check the format and the year, month and day of a date string."""
    fields = _read(date, "icici")
    if len(fields) < 5:
        if verbose:
            _report_invalid(
                date,
                date,
                "Check if the date is in the [yyyy/MM/dd] format. "
                "([yyyy-MM-dd] format is also supported).",
            )
        return False
    year, first, month, second, day = fields
    if first != second or first not in _DELIMITERS:
        if verbose:
            _report_invalid(
                date,
                date,
                "Check if the date is in the [yyyy/MM/dd] format. "
                "([yyyy-MM-dd] format is also supported).",
            )
        return False

    if not validate_month(month):
        if verbose:
            _report_invalid(
                str(month), date, "Check if the month provided is a number between 1 and 12."
            )
        return False

    if not validate_year(year):
        if verbose:
            _report_invalid(
                str(year),
                date,
                "Check if the year provided is valid. It shouldn't be higher than "
                f"the current year [{current_year()}] neither lower than 1900.",
            )
        return False

    if not validate_day(day, month, year):
        if verbose:
            _report_invalid(
                str(day), date, "Check if the provided day is valid for the month and year provided."
            )
        return False

    return True


def slice_year(date: str | Date) -> int:
    """The leading number of a date, or 0 when there is none."""
    fields = _read(_text_of(date), "i")
    return fields[0] if fields else 0


def slice_month(date: str | Date) -> int:
    """The second number of a date, or 0 when there is none."""
    fields = _read(_text_of(date), "ici")
    return fields[2] if len(fields) == 3 else 0


def slice_day(date: str | Date) -> int:
    """The third number of a date, or 0 when there is none."""
    fields = _read(_text_of(date), "icici")
    return fields[4] if len(fields) == 5 else 0


def assemble_date(day: int, month: int, year: int) -> str:
    """Build a ``yyyy/MM/dd`` string from its parts."""
    return f"{year:04d}/{month:02d}/{day:02d}"


def current_year() -> int:
    return _dt.date.today().year


def current_date() -> str:
    """Today's local date as ``yyyy/MM/dd``."""
    today = _dt.date.today()
    return assemble_date(today.day, today.month, today.year)


class Date:
    """A date string; holds the empty string when the given text is invalid."""

    __slots__ = ("value",)

    def __init__(self, value: str) -> None:
        self.value = value if validate_date(value, True) else ""

    @classmethod
    def _raw(cls, value: str) -> Date:
        date = cls.__new__(cls)
        date.value = value
        return date

    @classmethod
    def today(cls) -> Date:
        """The current local date."""
        return cls._raw(current_date())

    @classmethod
    def from_parts(cls, day: int, month: int, year: int) -> Date:
        """A date assembled from numbers, without validation."""
        return cls._raw(assemble_date(day, month, year))

    @property
    def day(self) -> int:
        return slice_day(self.value)

    @property
    def month(self) -> int:
        return slice_month(self.value)

    @property
    def year(self) -> int:
        return slice_year(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Date({self.value!r})"

    def __bool__(self) -> bool:
        return bool(self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Date):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)