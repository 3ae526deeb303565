"""
cli.py - Convert timestamps between UTC and a rule-based zone

Usage:
    tzrules usET -t 2023-07-01T12:00:00
    tzrules usET -t 2023-11-05T01:30:00 --to-utc
    tzrules ausET --transitions 2024

    # Zones from a TOML file, or rules stored in a binary record file
    tzrules --config zones.toml myzone
    tzrules --rules rules.bin -t 2024-01-15T00:00:00

MIT License - Copyright (c) 2025 Matthew S. Smith
"""

import argparse
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path

from .catalog import available_zones, get_zone
from .config import ConfigError, load_zones
from .record import FileRuleStore, RecordError, load_zone, save_zone
from .tzinfo import format_offset, from_instant, to_instant


def parse_timestamp(text: str) -> int:
    """
    Parse an ISO 8601 timestamp into an instant.

    Naive timestamps are taken as-is; aware ones are moved to UTC first.
    """
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Invalid timestamp: {text}")
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return to_instant(dt)


def format_instant(instant: int) -> str:
    return from_instant(instant).isoformat()


def list_zones(configured: dict):
    """Print predefined and configured zones."""
    print("Predefined zones:\n")
    for key in sorted(available_zones()):
        _print_zone(key, get_zone(key))
    if configured:
        print("\nConfigured zones:\n")
        for key in sorted(configured):
            _print_zone(key, configured[key])


def _print_zone(key, zone):
    std = zone.std_rule
    if zone.observes_dst:
        dst = zone.dst_rule
        print(f"  {key}: {std.abbrev} {format_offset(std.offset)} / {dst.abbrev} {format_offset(dst.offset)}")
    else:
        print(f"  {key}: {std.abbrev} {format_offset(std.offset)} (no DST)")


def print_transitions(zone, year: int):
    times = zone.transitions(year)
    dst, std = zone.dst_rule, zone.std_rule
    print(f"Transitions for {year}:")
    print(f"  {dst.abbrev} starts: {format_instant(times.dst_utc)} UTC ({format_instant(times.dst_local)} local)")
    print(f"  {std.abbrev} starts: {format_instant(times.std_utc)} UTC ({format_instant(times.std_local)} local)")


def convert(zone, instant: int, to_utc: bool = False):
    if to_utc:
        utc = zone.to_utc(instant)
        print(f"{format_instant(instant)} local -> {format_instant(utc)} UTC")
        return
    local, rule = zone.to_local_with_rule(instant)
    regime = "DST" if rule is zone.dst_rule and zone.observes_dst else "standard time"
    print(f"{format_instant(instant)} UTC -> {format_instant(local)} {rule.abbrev} "
          f"({format_offset(rule.offset)}, {regime})")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='tzrules',
        description='Convert timestamps between UTC and a zone defined by two DST rules'
    )
    parser.add_argument(
        'zone',
        nargs='?',
        help='Zone key (e.g., usET CE ausET) or a key from --config'
    )
    parser.add_argument(
        '-t', '--time',
        help='ISO 8601 timestamp (default: now). UTC unless --to-utc is given'
    )
    parser.add_argument(
        '--to-utc',
        action='store_true',
        help='Treat --time as local time and convert it to UTC'
    )
    parser.add_argument(
        '--transitions',
        type=int,
        metavar='YEAR',
        help='Show when DST starts and ends in YEAR'
    )
    parser.add_argument(
        '-c', '--config',
        type=Path,
        help='TOML file with additional zone definitions'
    )
    parser.add_argument(
        '--rules',
        type=Path,
        help='Load the zone from a binary rule record file'
    )
    parser.add_argument(
        '--save',
        type=Path,
        help='Write the zone rules to a binary rule record file'
    )
    parser.add_argument(
        '-l', '--list',
        action='store_true',
        help='List available zones'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    configured = {}
    if args.config:
        try:
            configured = load_zones(args.config)
        except ConfigError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    if args.list:
        list_zones(configured)
        return

    if args.rules:
        try:
            zone = load_zone(FileRuleStore(args.rules))
        except (OSError, RecordError) as e:
            print(f"Error: Cannot read rules from {args.rules}: {e}", file=sys.stderr)
            sys.exit(1)
    elif args.zone:
        if args.zone in configured:
            zone = configured[args.zone]
        else:
            try:
                zone = get_zone(args.zone)
            except KeyError:
                print(f"Error: Unknown zone: {args.zone}", file=sys.stderr)
                sys.exit(1)
    else:
        parser.print_help()
        print("\nError: No zone specified", file=sys.stderr)
        sys.exit(1)

    if args.save:
        try:
            save_zone(zone, FileRuleStore(args.save))
        except (OSError, RecordError) as e:
            print(f"Error: Cannot write rules to {args.save}: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Saved rules to {args.save}")

    if args.transitions is not None:
        print_transitions(zone, args.transitions)
        return

    if args.time:
        try:
            instant = parse_timestamp(args.time)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        instant = int(time.time())

    convert(zone, instant, args.to_utc)


if __name__ == '__main__':
    main()
