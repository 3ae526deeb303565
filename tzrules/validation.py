"""
validation.py - Optional range checking for rules and zones

The core converts whatever it is given. Build rules through these models
when out-of-range fields should be rejected instead.

MIT License - Copyright (c) 2025 Matthew S. Smith
"""

from pydantic import BaseModel, Field, model_validator

from .rules import TransitionRule
from .zone import Zone


class RuleModel(BaseModel):
    """A range-checked TransitionRule."""

    model_config = {"frozen": True}

    abbrev: str = Field(max_length=5)
    week: int = Field(ge=0, le=4)
    dow: int = Field(ge=1, le=7)
    month: int = Field(ge=1, le=12)
    hour: int = Field(ge=0, le=23)
    offset: int = Field(ge=-1440, le=1440)

    @classmethod
    def from_rule(cls, rule: TransitionRule) -> "RuleModel":
        return cls.model_validate(rule._asdict())

    def to_rule(self) -> TransitionRule:
        return TransitionRule(self.abbrev, self.week, self.dow, self.month, self.hour, self.offset)


class ZoneModel(BaseModel):
    """A DST rule and a standard rule; without DST both must be the same rule."""

    model_config = {"frozen": True}

    dst: RuleModel
    std: RuleModel

    @model_validator(mode="after")
    def check_same_rule_without_dst(self) -> "ZoneModel":
        if self.dst.offset == self.std.offset and self.dst != self.std:
            raise ValueError("zones without DST must use the same rule for dst and std")
        return self

    def to_zone(self) -> Zone:
        return Zone(self.dst.to_rule(), self.std.to_rule())


def validate_rule(rule: TransitionRule) -> TransitionRule:
    """Return the rule unchanged, or raise pydantic.ValidationError."""
    return RuleModel.from_rule(rule).to_rule()


def validate_zone(dst_rule: TransitionRule, std_rule: TransitionRule) -> Zone:
    model = ZoneModel(dst=RuleModel.from_rule(dst_rule), std=RuleModel.from_rule(std_rule))
    return model.to_zone()
