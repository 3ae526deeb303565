"""
record.py - Fixed-size binary records for storing a zone's rules

Each rule is packed the way an AVR board lays out the rule struct in
EEPROM: a 6-byte NUL-padded label (5 characters max), week, dow, month and
hour as unsigned bytes, then the offset as a signed 16-bit little-endian
integer. A zone is two records back to back, DST rule first.

Where the bytes live is up to the RuleStore passed in.

MIT License - Copyright (c) 2025 Matthew S. Smith
"""

import logging
import struct
from pathlib import Path
from typing import Protocol

from .rules import TransitionRule
from .zone import Zone

logger = logging.getLogger(__name__)

_RULE = struct.Struct('<6s4Bh')
RULE_SIZE = _RULE.size
ZONE_SIZE = 2 * RULE_SIZE


class RecordError(ValueError):
    """A rule could not be packed, or stored bytes are not a valid record."""


class RuleStore(Protocol):
    def save(self, data: bytes) -> None: ...

    def load(self) -> bytes: ...


class MemoryRuleStore:
    """Keeps the packed rules in memory; handy for tests and as a default."""

    def __init__(self, data: bytes = b''):
        self.data = bytes(data)

    def save(self, data: bytes) -> None:
        self.data = bytes(data)

    def load(self) -> bytes:
        return self.data


class FileRuleStore:
    """Keeps the packed rules in a file, standing in for EEPROM."""

    def __init__(self, path):
        self.path = Path(path)

    def save(self, data: bytes) -> None:
        self.path.write_bytes(data)
        logger.debug('Wrote %d bytes to %s', len(data), self.path)

    def load(self) -> bytes:
        return self.path.read_bytes()


def pack_rule(rule: TransitionRule) -> bytes:
    label = rule.abbrev.encode('ascii', 'replace')[:5]
    try:
        return _RULE.pack(label, rule.week, rule.dow, rule.month, rule.hour, rule.offset)
    except struct.error as e:
        raise RecordError(f"Cannot pack rule {rule!r}: {e}") from e


def unpack_rule(data: bytes) -> TransitionRule:
    if len(data) != RULE_SIZE:
        raise RecordError(f"Rule record must be {RULE_SIZE} bytes, got {len(data)}")
    label, week, dow, month, hour, offset = _RULE.unpack(data)
    abbrev = label.split(b'\0', 1)[0].decode('ascii', 'replace')
    return TransitionRule(abbrev, week, dow, month, hour, offset)


def pack_rules(dst_rule: TransitionRule, std_rule: TransitionRule) -> bytes:
    return pack_rule(dst_rule) + pack_rule(std_rule)


def unpack_rules(data: bytes):
    """
    Read a DST rule and a standard rule from consecutive records.

    Bytes after the second record are ignored, like reading a fixed-size
    block from a larger memory.
    """
    if len(data) < ZONE_SIZE:
        raise RecordError(f"Need {ZONE_SIZE} bytes for two rules, got {len(data)}")
    return unpack_rule(data[:RULE_SIZE]), unpack_rule(data[RULE_SIZE:ZONE_SIZE])


def save_zone(zone: Zone, store: RuleStore) -> None:
    store.save(pack_rules(zone.dst_rule, zone.std_rule))


def load_zone(store: RuleStore) -> Zone:
    return Zone(*unpack_rules(store.load()))
