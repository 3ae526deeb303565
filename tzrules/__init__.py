# tzrules
# UTC <-> local time conversion driven by two yearly DST rules
#
# MIT License - Copyright (c) 2025 Matthew S. Smith

from .catalog import available_zones, get_zone
from .record import (
    FileRuleStore,
    MemoryRuleStore,
    RecordError,
    RuleStore,
    load_zone,
    pack_rule,
    pack_rules,
    save_zone,
    unpack_rule,
    unpack_rules,
)
from .rules import (
    APR, AUG, DEC, FEB, FIRST, FOURTH, FRI, JAN, JUL, JUN, LAST, MAR, MAY, MON, NOV, OCT,
    SAT, SECOND, SEP, SUN, THIRD, THU, TUE, WED,
    TransitionRule,
    resolve_rule,
)
from .tzinfo import ZoneTzinfo, from_instant, to_instant
from .zone import Regime, TransitionTimes, Zone

__version__ = '0.1.0'
