# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
Season classification for Seasonkit.

Turns a (corrected) skin Lab sample into a season, a subtype and two
independent confidence signals. All tables are read-only.
"""

from seasonkit.classify.confidence import (
    ConfidenceEngine,
    ConfidenceReport,
    distance_confidence,
    nearest_reference,
    range_fit_confidence,
)
from seasonkit.classify.profiles import (
    SEASON_PROFILES,
    LabRange,
    SeasonProfile,
    SubtypeThresholds,
    get_profile,
)
from seasonkit.classify.season import SeasonClassifier, classify

__all__ = [
    "SeasonClassifier",
    "classify",
    "ConfidenceEngine",
    "ConfidenceReport",
    "range_fit_confidence",
    "distance_confidence",
    "nearest_reference",
    "SEASON_PROFILES",
    "SeasonProfile",
    "LabRange",
    "SubtypeThresholds",
    "get_profile",
]
