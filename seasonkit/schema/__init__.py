# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
Schema definitions for colors and season diagnoses.

All types in this module are immutable (frozen dataclasses).
Out-of-domain color values are rejected at construction with InvalidColor.
"""

from seasonkit.schema.classification import (
    SCHEMA_VERSION,
    SEASON_PRIORITY,
    ClassificationResult,
    PCCSTone,
    Season,
    SeasonAnalysis,
    SeasonScore,
    ToneResult,
)
from seasonkit.schema.color_types import (
    HSLColor,
    LabColor,
    LabLike,
    RGBColor,
    RGBLike,
    XYZColor,
)
from seasonkit.schema.illuminant import (
    DEFAULT_ILLUMINANT,
    ILLUMINANTS,
    Illuminant,
    get_illuminant,
    resolve_illuminant,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Color values
    "RGBColor",
    "XYZColor",
    "LabColor",
    "HSLColor",
    "LabLike",
    "RGBLike",
    # Illuminants
    "Illuminant",
    "ILLUMINANTS",
    "DEFAULT_ILLUMINANT",
    "get_illuminant",
    "resolve_illuminant",
    # Classification
    "Season",
    "SEASON_PRIORITY",
    "PCCSTone",
    "ToneResult",
    "SeasonScore",
    "SeasonAnalysis",
    "ClassificationResult",
]
