# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
Calibrated season profiles.

Each profile holds the season's Lab range, its population-calibrated
reference point and the thresholds that split it into three subtypes. The
table is built once at import and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from seasonkit.errors import ConfigurationError
from seasonkit.schema.classification import Season
from seasonkit.schema.color_types import LabColor


@dataclass(frozen=True, slots=True)
class LabRange:
    """Inclusive per-channel Lab bounds."""
    l: tuple[float, float]
    a: tuple[float, float]
    b: tuple[float, float]

    def __post_init__(self) -> None:
        for name in ("l", "a", "b"):
            lo, hi = getattr(self, name)
            if lo > hi:
                raise ConfigurationError(f"Range {name} has min > max: {lo} > {hi}")

    def channels(self) -> tuple[tuple[str, tuple[float, float]], ...]:
        return (("l", self.l), ("a", self.a), ("b", self.b))

    def contains(self, lab: LabColor) -> bool:
        return all(lo <= getattr(lab, name) <= hi for name, (lo, hi) in self.channels())

    def distance(self, channel: str, value: float) -> float:
        """Distance of value outside the channel's range (0 when inside)."""
        lo, hi = getattr(self, channel)
        if value < lo:
            return lo - value
        if value > hi:
            return value - hi
        return 0.0


@dataclass(frozen=True, slots=True)
class SubtypeThresholds:
    """
    Secondary thresholds on L and warmth that pick one of three subtypes.

    Rules are (predicate, subtype) pairs evaluated in order; the first match
    wins and `default` applies when none match.
    """
    rules: tuple[tuple[Callable[[LabColor], bool], str], ...]
    default: str

    @property
    def subtypes(self) -> tuple[str, ...]:
        return tuple(name for _, name in self.rules) + (self.default,)

    def resolve(self, lab: LabColor) -> str:
        for predicate, subtype in self.rules:
            if predicate(lab):
                return subtype
        return self.default


@dataclass(frozen=True, slots=True)
class SeasonProfile:
    """
    Read-only calibration of one season.

    Attributes:
        season: The season
        lab_range: Calibrated Lab range of typical skin for the season
        reference: Population-calibrated center point
        subtypes: Subtype resolution thresholds
    """
    season: Season
    lab_range: LabRange
    reference: LabColor
    subtypes: SubtypeThresholds

    def subtype_for(self, lab: LabColor) -> str:
        return self.subtypes.resolve(lab)


# Spring: light_spring needs both L > 70 and a, b within 3 of each other
_SPRING = SeasonProfile(
    season=Season.SPRING,
    lab_range=LabRange(l=(65.0, 75.0), a=(6.0, 12.0), b=(12.0, 18.0)),
    reference=LabColor(67.58, 8.91, 14.23),
    subtypes=SubtypeThresholds(
        rules=(
            (lambda c: c.l > 70.0 and abs(c.a - c.b) < 3.0, "light_spring"),
            (lambda c: c.b > c.a + 4.0, "warm_spring"),
        ),
        default="bright_spring",
    ),
)

_SUMMER = SeasonProfile(
    season=Season.SUMMER,
    lab_range=LabRange(l=(66.0, 76.0), a=(8.0, 14.0), b=(8.0, 14.0)),
    reference=LabColor(67.92, 9.45, 11.70),
    subtypes=SubtypeThresholds(
        rules=(
            (lambda c: c.l > 70.0, "light_summer"),
            (lambda c: abs(c.a - c.b) < 2.0, "soft_summer"),
        ),
        default="cool_summer",
    ),
)

_AUTUMN = SeasonProfile(
    season=Season.AUTUMN,
    lab_range=LabRange(l=(58.0, 68.0), a=(10.0, 16.0), b=(14.0, 22.0)),
    reference=LabColor(62.09, 11.25, 16.54),
    subtypes=SubtypeThresholds(
        rules=(
            (lambda c: c.l < 60.0, "deep_autumn"),
            (lambda c: c.b > c.a + 5.0, "warm_autumn"),
        ),
        default="soft_autumn",
    ),
)

_WINTER = SeasonProfile(
    season=Season.WINTER,
    lab_range=LabRange(l=(57.0, 67.0), a=(11.0, 17.0), b=(10.0, 16.0)),
    reference=LabColor(61.41, 12.46, 13.82),
    subtypes=SubtypeThresholds(
        rules=(
            (lambda c: c.l < 60.0, "deep_winter"),
            (lambda c: c.a > c.b + 3.0, "cool_winter"),
        ),
        default="clear_winter",
    ),
)

SEASON_PROFILES: Mapping[Season, SeasonProfile] = MappingProxyType({
    p.season: p for p in (_SPRING, _SUMMER, _AUTUMN, _WINTER)
})


def get_profile(season: Season | str) -> SeasonProfile:
    """
    Profile of one season.

    Raises:
        ConfigurationError: For a name outside the four seasons.
    """
    return SEASON_PROFILES[Season.parse(season)]
