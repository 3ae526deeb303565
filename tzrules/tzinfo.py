# tzrules
# datetime.tzinfo adapter for rule-based zones
#
# MIT License - Copyright (c) 2025 Matthew S. Smith

from datetime import datetime, timedelta, tzinfo

from .rules import SECS_PER_MIN, make_time, resolve_rule, to_datetime, year_of


def to_instant(dt: datetime) -> int:
    """Seconds since the epoch for a datetime's wall-clock fields."""
    return make_time(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)


def from_instant(instant: int) -> datetime:
    return to_datetime(instant)


def format_offset(minutes):
    """Format an offset in minutes as UTC+h or UTC+h:mm."""
    sign = '-' if minutes < 0 else '+'
    hours, minutes = divmod(abs(minutes), 60)
    if minutes:
        return f"UTC{sign}{hours}:{minutes:02d}"
    return f"UTC{sign}{hours}"


class ZoneTzinfo(tzinfo):
    """
    Timezone implementation compatible with datetime.tzinfo.
    Wraps a Zone so aware datetimes follow its DST rules.
    """

    def __init__(self, zone, key=None):
        self._zone = zone
        self._key = key

    @property
    def zone(self):
        return self._zone

    @property
    def key(self):
        return self._key

    def _in_repeated_hour(self, local):
        """Does a local instant fall in the wall-clock hour that repeats when DST ends?"""
        if not self._zone.observes_dst:
            return False
        std_local = resolve_rule(self._zone.std_rule, year_of(local))
        shift = (self._zone.dst_rule.offset - self._zone.std_rule.offset) * SECS_PER_MIN
        return std_local - shift <= local < std_local

    def _is_dst(self, dt):
        # fold=1 picks the second, standard-time copy of a repeated hour
        local = to_instant(dt.replace(tzinfo=None))
        if dt.fold and self._in_repeated_hour(local):
            return False
        return self._zone.local_is_dst(local)

    def _rule(self, dt):
        if self._is_dst(dt):
            return self._zone.dst_rule
        return self._zone.std_rule

    def utcoffset(self, dt):
        if dt is None:
            return None
        return timedelta(minutes=self._rule(dt).offset)

    def dst(self, dt):
        if dt is None:
            return None
        if self._is_dst(dt):
            return timedelta(minutes=self._zone.dst_rule.offset - self._zone.std_rule.offset)
        return timedelta(0)

    def tzname(self, dt):
        if dt is None:
            return None
        return self._rule(dt).abbrev

    def fromutc(self, dt):
        if dt.tzinfo is not self:
            raise ValueError("fromutc: dt.tzinfo is not self")
        utc = to_instant(dt.replace(tzinfo=None))
        local, rule = self._zone.to_local_with_rule(utc)
        fold = 1 if rule != self._zone.dst_rule and self._in_repeated_hour(local) else 0
        return from_instant(local).replace(microsecond=dt.microsecond, tzinfo=self, fold=fold)

    def __repr__(self):
        if self._key:
            return f"ZoneTzinfo(key='{self._key}')"
        return f"ZoneTzinfo({self._zone!r})"

    def __str__(self):
        return self._key or repr(self)

    def __eq__(self, other):
        if isinstance(other, ZoneTzinfo):
            return self._zone == other._zone and self._key == other._key
        return NotImplemented

    def __hash__(self):
        return hash((self._zone, self._key))
