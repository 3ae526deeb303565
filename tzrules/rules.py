"""
rules.py - Yearly transition rules and the resolver that dates them

A TransitionRule says "the <week> <dow> of <month> at <hour>:00 local time,
switch to <offset> minutes from UTC". resolve_rule() turns one into an
instant (seconds since 1970-01-01, proleptic Gregorian) for a given year.

MIT License - Copyright (c) 2025 Matthew S. Smith
"""

from datetime import datetime, timedelta
from typing import NamedTuple

SECS_PER_MIN = 60
SECS_PER_HOUR = 3600
SECS_PER_DAY = 86400

# Week of month (0 means the last occurrence)
LAST, FIRST, SECOND, THIRD, FOURTH = range(5)

# Day of week, 1=Sunday
SUN, MON, TUE, WED, THU, FRI, SAT = range(1, 8)

# Month of year, 1=January
JAN, FEB, MAR, APR, MAY, JUN, JUL, AUG, SEP, OCT, NOV, DEC = range(1, 13)

_EPOCH = datetime(1970, 1, 1)


class TransitionRule(NamedTuple):
    """
    When a zone changes regime, and the UTC offset it changes to.

    abbrev: label such as "EDT" (5 chars max, informational only)
    week:   LAST or FIRST..FOURTH
    dow:    SUN..SAT
    month:  JAN..DEC
    hour:   local wall-clock hour the change happens at
    offset: minutes from UTC once the rule has fired
    """
    abbrev: str
    week: int
    dow: int
    month: int
    hour: int
    offset: int


def _days_from_civil(year, month, day):
    """Days since 1970-01-01 on the proleptic Gregorian calendar, any year."""
    # Count years from March so the leap day falls at the end
    if month <= 2:
        year -= 1
    era = year // 400
    yoe = year - era * 400
    doy = (153 * (month - 3 if month > 2 else month + 9) + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def _year_from_days(days):
    days += 719468
    era = days // 146097
    doe = days - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    # mp counts months from March; January and February belong to the next year
    return yoe + era * 400 + (1 if mp >= 10 else 0)


def make_time(year: int, month: int, day: int, hour: int = 0,
              minute: int = 0, second: int = 0) -> int:
    """
    Seconds since the epoch for a wall-clock date, no offset applied.

    Months outside 1..12 roll into neighbouring years and days past the end
    of the month roll forward, so no year is out of range.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return (_days_from_civil(year, month, day) * SECS_PER_DAY + hour * SECS_PER_HOUR
            + minute * SECS_PER_MIN + second)


def to_datetime(instant: int) -> datetime:
    """Naive datetime for an instant (years 1..9999 only)."""
    return _EPOCH + timedelta(seconds=instant)


def year_of(instant: int) -> int:
    return _year_from_days(instant // SECS_PER_DAY)


def weekday_of(instant: int) -> int:
    """Day of week for an instant, 1=Sunday .. 7=Saturday."""
    # 1970-01-01 was a Thursday
    return (instant // SECS_PER_DAY + 4) % 7 + 1


def resolve_rule(rule: TransitionRule, year: int) -> int:
    """
    Find the instant a rule fires in the given year.

    The result is a raw wall-clock value: it becomes a local time or a UTC
    time depending on which offset the caller subtracts from it. Field values
    are not checked; an out-of-range month rolls into a neighbouring year and
    any other bad field just shifts the result. Any integer year works.
    """
    month = rule.month
    week = rule.week

    if week == LAST:
        # Start from the next month, then back up a week at the end
        month += 1
        week = FIRST

    t = make_time(year, month, 1, rule.hour)
    t += (7 * (week - 1) + (rule.dow - weekday_of(t) + 7) % 7) * SECS_PER_DAY

    if rule.week == LAST:
        t -= 7 * SECS_PER_DAY

    return t
