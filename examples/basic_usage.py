"""
Basic usage example for tzrules

Demonstrates:
- Converting UTC timestamps to local time
- Checking DST status
- Using a zone as a datetime tzinfo
"""

from datetime import datetime, timezone

from tzrules import ZoneTzinfo, available_zones, from_instant, get_zone, to_instant

# List predefined zones
print("Available zones:")
for key in sorted(available_zones()):
    print(f"  {key}")
print()

eastern = get_zone("usET")

# Summer: DST in force
summer = to_instant(datetime(2023, 7, 1, 12, 0))
local, rule = eastern.to_local_with_rule(summer)
print(f"2023-07-01 12:00 UTC is {from_instant(local)} {rule.abbrev}")
print(f"  DST active: {eastern.utc_is_dst(summer)}")

# Winter: standard time
winter = to_instant(datetime(2023, 1, 1, 12, 0))
local, rule = eastern.to_local_with_rule(winter)
print(f"2023-01-01 12:00 UTC is {from_instant(local)} {rule.abbrev}")
print(f"  DST active: {eastern.utc_is_dst(winter)}")

# When does the clock change this year?
times = eastern.transitions(2023)
print(f"\nDST starts {from_instant(times.dst_utc)} UTC")
print(f"DST ends   {from_instant(times.std_utc)} UTC")

# As a tzinfo
tz = ZoneTzinfo(eastern, key="usET")
noon_utc = datetime(2023, 7, 1, 12, 0, tzinfo=timezone.utc)
print(f"\nastimezone(): {noon_utc.astimezone(tz)} ({noon_utc.astimezone(tz).tzname()})")
