"""
Southern hemisphere example for tzrules

In Sydney DST starts in October and ends in April, so standard time is
the interval inside the calendar year and DST wraps around New Year.
"""

from datetime import datetime

from tzrules import from_instant, get_zone, to_instant

sydney = get_zone("ausET")

print("--- Seasonal offset comparison ---")
for month in (1, 4, 7, 10, 12):
    utc = to_instant(datetime(2024, month, 15, 0, 0))
    local, rule = sydney.to_local_with_rule(utc)
    print(f"2024-{month:02d}-15 00:00 UTC -> {from_instant(local)} {rule.abbrev}")

# DST transition boundary (first Sunday October 2024)
# October 6, 2024 is the first Sunday; 02:00 AEST becomes 03:00 AEDT
times = sydney.transitions(2024)
print(f"\nAEDT starts: {from_instant(times.dst_local)} local, {from_instant(times.dst_utc)} UTC")
print(f"AEST starts: {from_instant(times.std_local)} local, {from_instant(times.std_utc)} UTC")

pre_dst = to_instant(datetime(2024, 10, 6, 1, 59))
post_dst = to_instant(datetime(2024, 10, 6, 3, 1))
print("\nDST transition (October 6, 2024):")
print(f"  01:59 local is DST: {sydney.local_is_dst(pre_dst)} (just before)")
print(f"  03:01 local is DST: {sydney.local_is_dst(post_dst)} (just after)")
