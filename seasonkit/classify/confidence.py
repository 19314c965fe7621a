# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
Confidence signals for a season assignment.

Two independent signals, always reported side by side:

- Range fit: 100 minus fixed penalties for each Lab channel outside the
  season's calibrated range (15 for L, 10 each for a and b), floored at 50.
  With three channels the lowest reachable value is 65, so the floor only
  guards against future penalty changes.
- Distance: (1 - ΔE / max_distance) · 100 clipped to 0-100, where ΔE is the
  simplified distance to the nearest season reference point.

Callers choose which one to surface; nothing here merges them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Optional

from seasonkit.classify.profiles import SEASON_PROFILES, SeasonProfile
from seasonkit.errors import ConfigurationError, InvalidColor
from seasonkit.measure.delta_e import simplified_distance
from seasonkit.schema.classification import SEASON_PRIORITY, Season
from seasonkit.schema.color_types import LabColor, LabLike


RANGE_FIT_START = 100.0
RANGE_FIT_FLOOR = 50.0
RANGE_PENALTIES = {"l": 15.0, "a": 10.0, "b": 10.0}
DEFAULT_MAX_DISTANCE = 20.0


def range_fit_confidence(lab: LabLike, profile: SeasonProfile) -> float:
    """
    Range-fit confidence of a color against one season's calibrated range.

    Returns:
        Confidence in [50, 100]
    """
    lab = LabColor.coerce(lab)
    confidence = RANGE_FIT_START
    for channel, (lo, hi) in profile.lab_range.channels():
        if not lo <= getattr(lab, channel) <= hi:
            confidence -= RANGE_PENALTIES[channel]
    return max(RANGE_FIT_FLOOR, confidence)


def distance_confidence(
    delta_e: float,
    max_distance: float = DEFAULT_MAX_DISTANCE,
) -> float:
    """
    Distance-based confidence: max(0, (1 - ΔE / max_distance) · 100).

    Raises:
        ConfigurationError: If max_distance is not a positive number.
        InvalidColor: If delta_e is negative or not finite.
    """
    if not (isinstance(max_distance, (int, float)) and max_distance > 0):
        raise ConfigurationError(f"max_distance must be > 0, got {max_distance!r}")
    if not math.isfinite(delta_e) or delta_e < 0:
        raise InvalidColor(f"delta_e must be a finite number >= 0, got {delta_e!r}")
    return min(100.0, max(0.0, (1.0 - delta_e / max_distance) * 100.0))


def nearest_reference(
    lab: LabLike,
    profiles: Optional[Mapping[Season, SeasonProfile]] = None,
) -> tuple[Season, float]:
    """
    Season whose reference point is closest by simplified_distance.

    Equal distances resolve by SEASON_PRIORITY.

    Returns:
        (season, distance)
    """
    lab = LabColor.coerce(lab)
    profiles = SEASON_PROFILES if profiles is None else profiles
    best: Optional[tuple[Season, float]] = None
    for season in SEASON_PRIORITY:
        profile = profiles.get(season)
        if profile is None:
            continue
        distance = simplified_distance(lab, profile.reference)
        if best is None or distance < best[1]:
            best = (season, distance)
    if best is None:
        raise ConfigurationError("No season profiles to compare against")
    return best


@dataclass(frozen=True, slots=True)
class ConfidenceReport:
    """
    Both confidence signals for one color and season.

    Attributes:
        season: Season the range fit was measured against
        range_fit: Range-fit confidence (50-100)
        distance_based: Distance-based confidence (0-100)
        nearest_season: Season with the closest reference point
        distance: Simplified distance to that reference point
    """
    season: Season
    range_fit: float
    distance_based: float
    nearest_season: Season
    distance: float

    def to_dict(self) -> dict:
        return {
            "season": self.season.value,
            "range_fit": self.range_fit,
            "distance_based": self.distance_based,
            "nearest_season": self.nearest_season.value,
            "distance": self.distance,
        }


class ConfidenceEngine:
    """
    Scores how well a color fits a season.

    Used on its own, and by SeasonClassifier for the two confidence fields
    of every ClassificationResult.

    Args:
        max_distance: ΔE at which distance-based confidence reaches 0
        profiles: Season profiles (default: the calibrated table)
    """

    def __init__(
        self,
        max_distance: float = DEFAULT_MAX_DISTANCE,
        profiles: Optional[Mapping[Season, SeasonProfile]] = None,
    ) -> None:
        if not (isinstance(max_distance, (int, float)) and max_distance > 0):
            raise ConfigurationError(f"max_distance must be > 0, got {max_distance!r}")
        self.max_distance = float(max_distance)
        self.profiles = SEASON_PROFILES if profiles is None else profiles

    def assess(self, lab: LabLike, season: Season | str) -> ConfidenceReport:
        """
        Measure both signals for a color assigned to `season`.

        Raises:
            InvalidColor: If lab is invalid.
            ConfigurationError: If the season has no profile.
        """
        lab = LabColor.coerce(lab)
        season = Season.parse(season)
        try:
            profile = self.profiles[season]
        except KeyError:
            raise ConfigurationError(f"No profile for season {season.value!r}") from None

        nearest, distance = nearest_reference(lab, self.profiles)
        return ConfidenceReport(
            season=season,
            range_fit=range_fit_confidence(lab, profile),
            distance_based=distance_confidence(distance, self.max_distance),
            nearest_season=nearest,
            distance=distance,
        )
