from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from loguru import logger

from packages.common.constants import (
    EPOCH_YEAR,
    FAST_LEAP_MAX_YEAR,
    FAST_LEAP_MIN_YEAR,
    MS_PER_DAY,
    MS_PER_YEAR,
)
from packages.common.errors import InvalidDayError, InvalidMonthError


@dataclass(frozen=True)
class MonthSpec:
    number: int
    name: str
    days: int  # length in a common year
    days_before: int  # cumulative days before this month in a common year

    def length(self, leap: bool) -> int:
        if leap and self.number == 2:
            return self.days + 1
        return self.days

    def offset(self, leap: bool) -> int:
        # Feb 29 shifts every month from March on by one day.
        if leap and self.number > 2:
            return self.days_before + 1
        return self.days_before


def _build_months() -> Tuple[MonthSpec, ...]:
    lengths = (
        ("January", 31),
        ("February", 28),
        ("March", 31),
        ("April", 30),
        ("May", 31),
        ("June", 30),
        ("July", 31),
        ("August", 31),
        ("September", 30),
        ("October", 31),
        ("November", 30),
        ("December", 31),
    )
    out = []
    before = 0
    for i, (name, days) in enumerate(lengths, start=1):
        out.append(MonthSpec(number=i, name=name, days=days, days_before=before))
        before += days
    return tuple(out)


MONTHS: Tuple[MonthSpec, ...] = _build_months()
MONTHS_BY_NUMBER: Dict[int, MonthSpec] = {m.number: m for m in MONTHS}


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _ordered(a: int, b: int) -> Tuple[int, int]:
    return (a, b) if a <= b else (b, a)


def leap_years_between_fast(a: int, b: int) -> int:
    """
    Closed-form count of leap years y with lower <= y < higher.

    Floor division keeps this exact for any integers; callers still route
    only FAST_LEAP_MIN_YEAR..FAST_LEAP_MAX_YEAR through here.
    """
    lower, higher = _ordered(a, b)
    hi = higher - 1
    lo = lower - 1
    return (hi // 4 - lo // 4) - ((hi // 100 - lo // 100) - (hi // 400 - lo // 400))


def leap_years_between_slow(a: int, b: int) -> int:
    lower, higher = _ordered(a, b)
    return sum(1 for y in range(lower, higher) if is_leap_year(y))


def leap_years_between(a: int, b: int) -> int:
    """
    Number of leap years in [min(a, b), max(a, b)).

    Symmetric, and 0 when a == b.
    """
    lower, higher = _ordered(a, b)
    if lower >= FAST_LEAP_MIN_YEAR and higher <= FAST_LEAP_MAX_YEAR:
        return leap_years_between_fast(lower, higher)

    logger.debug("leap_years_between falling back to scan lower={} higher={}", lower, higher)
    return leap_years_between_slow(lower, higher)


def days_in_month(year: int, month: int) -> int:
    info = MONTHS_BY_NUMBER.get(month)
    if info is None:
        raise InvalidMonthError(month)
    return info.length(is_leap_year(year))


def validate_and_convert_date(year: int, month: int, day: int) -> int:
    """
    Validate a (year, month, day) triple and return ms since the epoch at
    00:00:00.000Z of that day.

    Raises InvalidDayError / InvalidMonthError.
    """
    if day < 1:
        raise InvalidDayError(day, year=year, month=month)

    info = MONTHS_BY_NUMBER.get(month)
    if info is None:
        raise InvalidMonthError(month)

    leap = is_leap_year(year)
    if day > info.length(leap):
        raise InvalidDayError(day, year=year, month=month)

    ms = MS_PER_DAY * info.offset(leap) + MS_PER_DAY * (day - 1)
    ms += MS_PER_YEAR * (year - EPOCH_YEAR)

    # Leap days in [EPOCH_YEAR, year) push forward; those in [year, EPOCH_YEAR) pull back.
    leap_days = leap_years_between(EPOCH_YEAR, year)
    if year >= EPOCH_YEAR:
        ms += MS_PER_DAY * leap_days
    else:
        ms -= MS_PER_DAY * leap_days
    return ms
