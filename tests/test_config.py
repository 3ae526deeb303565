"""Tests for loading zones from TOML."""

import pytest

from tzrules import get_zone
from tzrules.config import ConfigError, load_config, load_zones

ZONES_TOML = """
[zones.eastern]
dst = { abbrev = "EDT", week = 2, dow = 1, month = 3, hour = 2, offset = -240 }
std = { abbrev = "EST", week = 1, dow = 1, month = 11, hour = 2, offset = -300 }

[zones.india]
dst = { abbrev = "IST", week = 1, dow = 1, month = 1, hour = 0, offset = 330 }
std = { abbrev = "IST", week = 1, dow = 1, month = 1, hour = 0, offset = 330 }
"""


@pytest.fixture
def zones_file(tmp_path):
    path = tmp_path / "zones.toml"
    path.write_text(ZONES_TOML, encoding="utf-8")
    return path


class TestLoadZones:
    def test_loads_all_zones(self, zones_file) -> None:
        zones = load_zones(zones_file)
        assert set(zones) == {"eastern", "india"}
        assert zones["eastern"] == get_zone("usET")
        assert not zones["india"].observes_dst

    def test_accepts_str_path(self, zones_file) -> None:
        assert "india" in load_zones(str(zones_file))

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "empty.toml"
        path.write_text("", encoding="utf-8")
        assert load_zones(path) == {}
        assert load_config(path).zones == {}

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_zones(tmp_path / "nope.toml")

    def test_invalid_toml(self, tmp_path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("[zones.x\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_zones(path)

    def test_out_of_range_rule(self, tmp_path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text(ZONES_TOML.replace("week = 2", "week = 7"), encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid zone definition"):
            load_zones(path)

    def test_missing_rule(self, tmp_path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text('[zones.x]\ndst = { abbrev = "A", week = 1, dow = 1, month = 1, hour = 0, offset = 0 }\n',
                        encoding="utf-8")
        with pytest.raises(ConfigError):
            load_zones(path)

    def test_config_error_is_value_error(self) -> None:
        assert issubclass(ConfigError, ValueError)
