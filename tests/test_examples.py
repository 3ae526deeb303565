"""Run the example scripts end to end."""

import runpy
from pathlib import Path

EXAMPLES = Path(__file__).resolve().parent.parent / "examples"


def test_basic_usage(capsys) -> None:
    runpy.run_path(str(EXAMPLES / "basic_usage.py"), run_name="__main__")
    out = capsys.readouterr().out
    assert "usET" in out
    assert "2023-07-01 12:00 UTC is 2023-07-01 08:00:00 EDT" in out
    assert "2023-01-01 12:00 UTC is 2023-01-01 07:00:00 EST" in out
    assert "DST starts 2023-03-12 07:00:00 UTC" in out
    assert "astimezone(): 2023-07-01 08:00:00-04:00 (EDT)" in out


def test_timezone_australian(capsys) -> None:
    runpy.run_path(str(EXAMPLES / "timezone_australian.py"), run_name="__main__")
    out = capsys.readouterr().out
    assert "2024-01-15 00:00 UTC -> 2024-01-15 11:00:00 AEDT" in out
    assert "2024-07-15 00:00 UTC -> 2024-07-15 10:00:00 AEST" in out
    assert "AEDT starts: 2024-10-06 02:00:00 local, 2024-10-05 16:00:00 UTC" in out
    assert "01:59 local is DST: False" in out
    assert "03:01 local is DST: True" in out
