"""Date-based path formats such as ``dailylog/%Y/%m/%d``."""

from __future__ import annotations

import re
from datetime import date, timedelta
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Iterable

from .period import Period


class ValidInterval(Enum):
    """Length of the period a format describes."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


def interval_from_format(fmt: str) -> ValidInterval:
    """Work out the interval a date format describes.

    Raises ValueError if the format holds neither ``%Y`` nor ``%G``.
    """
    if "%Y" in fmt:
        if "%m" in fmt:
            return ValidInterval.DAILY if "%d" in fmt else ValidInterval.MONTHLY
        return ValidInterval.YEARLY
    if "%G" in fmt:
        if "%V" in fmt:
            return ValidInterval.DAILY if "%u" in fmt else ValidInterval.WEEKLY
        return ValidInterval.MONTHLY
    raise ValueError("Invalid date format")


_NAMED_GROUPS = (
    ("%Y", r"(?P<year>\d{4})"),
    ("%m", r"(?P<month>\d{2})"),
    ("%d", r"(?P<day>\d{2})"),
    ("%G", r"(?P<isoyear>\d{4})"),
    ("%V", r"(?P<isoweek>\d{2})"),
)


def date_format_to_pattern(fmt: str) -> str:
    """Turn a date format into a regular expression pattern.

    The first occurrence of each field becomes a named group; later
    occurrences only have to be digits.
    """
    pattern = re.escape(fmt)
    for field, group in _NAMED_GROUPS:
        pattern = pattern.replace(field, group, 1)
    pattern = re.sub(r"%[YG]", lambda _m: r"\d{4}", pattern)
    pattern = re.sub(r"%[mdV]", lambda _m: r"\d{2}", pattern)
    return pattern


def date_format_to_regex(fmt: str) -> re.Pattern[str]:
    """Compile the pattern for a date format."""
    return re.compile(date_format_to_pattern(fmt))


def _last_day_of_month(year: int, month: int) -> date:
    first_of_next = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
    return first_of_next - timedelta(days=1)


class PeriodFormat:
    """A path format that maps dates to paths and paths back to periods."""

    def __init__(self, fmt: str) -> None:
        self.format = fmt
        self.regex = date_format_to_regex(fmt)
        self.interval = interval_from_format(fmt)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PeriodFormat):
            return NotImplemented
        return self.format == other.format

    def __hash__(self) -> int:
        return hash(self.format)

    def __str__(self) -> str:
        return self.format

    def __repr__(self) -> str:
        return f"PeriodFormat({self.format!r})"

    def match_format(self, s: str) -> bool:
        """Return True if the format matches anywhere in ``s``."""
        return self.regex.search(s) is not None

    def find_latest_path(self, paths: Iterable[str | PathLike[str]]) -> Path | None:
        """Return the greatest path that matches the format, or None."""
        for path in sorted((Path(p) for p in paths), reverse=True):
            if self.match_format(str(path)):
                return path
        return None

    def get_path(self, date: date) -> Path:
        """Return the path the format gives for ``date``."""
        return Path(date.strftime(self.format))

    def get_today_path(self) -> Path:
        """Return the path for today's date."""
        return self.get_path(date.today())

    def get_period(self, s: str) -> Period | None:
        """Return the period a matching path stands for.

        Returns None when the captured fields do not make up a period.
        Raises ValueError if ``s`` does not match the format.
        """
        match = self.regex.search(s)
        if match is None:
            raise ValueError(f"{s!r} does not match format {self.format!r}")
        groups = match.groupdict()

        def number(name: str) -> int | None:
            value = groups.get(name)
            return int(value) if value is not None else None

        year = number("year")
        month = number("month")
        day = number("day")
        iso_year = number("isoyear")
        iso_week = number("isoweek")

        if year is not None and month is not None and day is not None:
            start = date(year, month, day)
            end = start
        elif iso_year is not None and iso_week is not None:
            start = date.fromisocalendar(iso_year, iso_week, 1)
            end = date.fromisocalendar(iso_year, iso_week, 7)
        elif year is not None and month is not None:
            start = date(year, month, 1)
            end = _last_day_of_month(year, month)
        elif year is not None and month is None and day is None:
            start = date(year, 1, 1)
            end = date(year + 1, 1, 1) - timedelta(days=1)
        elif iso_year is not None:
            start = date.fromisocalendar(iso_year, 1, 1)
            end = date.fromisocalendar(iso_year + 1, 1, 1) - timedelta(days=1)
        else:
            return None
        return Period(start=start, end=end)