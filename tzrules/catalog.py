# tzrules
# Predefined zones - pass the key to get_zone()
#
# MIT License - Copyright (c) 2025 Matthew S. Smith

from .rules import APR, FIRST, LAST, MAR, NOV, OCT, SECOND, SUN, TransitionRule
from .zone import Zone

# Rules: (abbrev, week, dow, month, hour, offset_minutes)
AEDT = TransitionRule("AEDT", FIRST, SUN, OCT, 2, 660)   # +11:00
AEST = TransitionRule("AEST", FIRST, SUN, APR, 3, 600)   # +10:00
CEST = TransitionRule("CEST", LAST, SUN, MAR, 2, 120)    # +02:00
CET = TransitionRule("CET", LAST, SUN, OCT, 3, 60)       # +01:00
BST = TransitionRule("BST", LAST, SUN, MAR, 1, 60)       # +01:00
GMT = TransitionRule("GMT", LAST, SUN, OCT, 2, 0)        # +00:00
US_EDT = TransitionRule("EDT", SECOND, SUN, MAR, 2, -240)
US_EST = TransitionRule("EST", FIRST, SUN, NOV, 2, -300)
US_CDT = TransitionRule("CDT", SECOND, SUN, MAR, 2, -300)
US_CST = TransitionRule("CST", FIRST, SUN, NOV, 2, -360)
US_MDT = TransitionRule("MDT", SECOND, SUN, MAR, 2, -360)
US_MST = TransitionRule("MST", FIRST, SUN, NOV, 2, -420)
US_PDT = TransitionRule("PDT", SECOND, SUN, MAR, 2, -420)
US_PST = TransitionRule("PST", FIRST, SUN, NOV, 2, -480)

# Zone data: (dst_rule, std_rule) - the same rule twice means no DST
_ZONES = {
    "ausET": (AEDT, AEST),       # Sydney, Melbourne
    "CE": (CEST, CET),           # Frankfurt, Paris
    "UK": (BST, GMT),            # London, Belfast
    "usET": (US_EDT, US_EST),    # New York, Detroit
    "usCT": (US_CDT, US_CST),    # Chicago, Houston
    "usMT": (US_MDT, US_MST),    # Denver, Salt Lake City
    "usAZ": (US_MST, US_MST),    # Arizona, no DST
    "usPT": (US_PDT, US_PST),    # Las Vegas, Los Angeles
}


def get_zone(key):
    """Return a new Zone for a predefined key."""
    if key not in _ZONES:
        raise KeyError(f"Unknown timezone: {key}")
    return Zone(*_ZONES[key])


def available_zones():
    """Return set of predefined zone keys."""
    return set(_ZONES.keys())
