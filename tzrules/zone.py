"""
zone.py - UTC <-> local conversion for a zone with two yearly transitions

MIT License - Copyright (c) 2025 Matthew S. Smith
"""

import enum
import logging
import threading
from typing import NamedTuple, Optional, Tuple

from .rules import SECS_PER_MIN, TransitionRule, resolve_rule, year_of

logger = logging.getLogger(__name__)


class Regime(enum.Enum):
    DST = 'dst'
    STANDARD = 'standard'


class TransitionTimes(NamedTuple):
    """The year's two transitions, on the UTC and on the local timeline."""
    dst_utc: int
    std_utc: int
    dst_local: int
    std_local: int


def _in_dst(t, dst_start, std_start):
    if std_start > dst_start:
        # Northern hemisphere: DST sits inside the year
        return dst_start <= t < std_start
    # Southern hemisphere: standard time sits inside the year
    return not (std_start <= t < dst_start)


class Zone:
    """
    A time zone defined by a DST rule and a standard-time rule.

    For a zone without DST pass the same rule twice. Transition instants are
    computed for one year at a time and reused until a query falls in a
    different year. The cache is swapped as a whole under a per-zone lock, so
    a zone can be shared between threads.
    """

    def __init__(self, dst_rule: TransitionRule, std_rule: TransitionRule):
        self._dst = dst_rule
        self._std = std_rule
        self._times: Optional[TransitionTimes] = None
        self._lock = threading.Lock()

    @property
    def dst_rule(self) -> TransitionRule:
        return self._dst

    @property
    def std_rule(self) -> TransitionRule:
        return self._std

    @property
    def observes_dst(self) -> bool:
        return self._dst != self._std

    def rule_for(self, regime: Regime) -> TransitionRule:
        return self._dst if regime is Regime.DST else self._std

    def _calc_time_changes(self, year):
        dst_local = resolve_rule(self._dst, year)
        std_local = resolve_rule(self._std, year)
        # Each change happens while the other regime's offset is in force
        times = TransitionTimes(
            dst_utc=dst_local - self._std.offset * SECS_PER_MIN,
            std_utc=std_local - self._dst.offset * SECS_PER_MIN,
            dst_local=dst_local,
            std_local=std_local,
        )
        logger.debug('Computed transitions for %d: %s', year, times)
        self._times = times
        return times

    def _utc_times(self, utc):
        with self._lock:
            times = self._times
            if times is None or year_of(utc) != year_of(times.dst_utc):
                times = self._calc_time_changes(year_of(utc))
            return times

    def _local_times(self, local):
        with self._lock:
            times = self._times
            if times is None or year_of(local) != year_of(times.dst_local):
                times = self._calc_time_changes(year_of(local))
            return times

    def transitions(self, year: int) -> TransitionTimes:
        """Compute (and cache) the transition instants for a year."""
        with self._lock:
            return self._calc_time_changes(year)

    def utc_is_dst(self, utc: int) -> bool:
        """Is DST in force at the given UTC instant?"""
        times = self._utc_times(utc)
        if times.std_utc == times.dst_utc:
            return False
        return _in_dst(utc, times.dst_utc, times.std_utc)

    def local_is_dst(self, local: int) -> bool:
        """Is DST in force at the given local wall-clock instant?"""
        times = self._local_times(local)
        if times.std_utc == times.dst_utc:
            return False
        return _in_dst(local, times.dst_local, times.std_local)

    def regime_at(self, utc: int) -> Regime:
        return Regime.DST if self.utc_is_dst(utc) else Regime.STANDARD

    def to_local(self, utc: int) -> int:
        """Convert a UTC instant to local time."""
        return self.to_local_with_rule(utc)[0]

    def to_local_with_rule(self, utc: int) -> Tuple[int, TransitionRule]:
        """
        Convert a UTC instant to local time and report the rule applied.

        The rule is returned so callers can show its abbreviation; rules are
        immutable, so handing one out cannot disturb the zone.
        """
        rule = self._dst if self.utc_is_dst(utc) else self._std
        return utc + rule.offset * SECS_PER_MIN, rule

    def to_utc(self, local: int) -> int:
        """
        Convert a local instant to UTC.

        Use sparingly. In the hour skipped when DST starts the result is
        wrong, and nothing flags it. In the hour repeated when DST ends the
        earlier occurrence (the one before the change) is assumed.
        """
        rule = self._dst if self.local_is_dst(local) else self._std
        return local - rule.offset * SECS_PER_MIN

    def __eq__(self, other):
        if isinstance(other, Zone):
            return (self._dst, self._std) == (other._dst, other._std)
        return NotImplemented

    def __hash__(self):
        return hash((self._dst, self._std))

    def __repr__(self):
        return f'Zone(dst_rule={self._dst!r}, std_rule={self._std!r})'
