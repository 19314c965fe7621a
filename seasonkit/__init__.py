# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
Seasonkit -- Personal color season classification engine.

Converts measured skin colors between sRGB, XYZ, CIE Lab and HSL, measures
perceptual color differences (ΔE76, ΔE94, CIEDE2000), assigns a PCCS tone,
and classifies the sample into one of four seasons and twelve subtypes with
two independent confidence signals.

Quick start::

    from seasonkit import SeasonClassifier

    classifier = SeasonClassifier()
    result = classifier.classify((67.0, 9.0, 16.0))
    result.season        # Season.SPRING
    result.subtype       # "warm_spring"
    result.to_json()     # JSON for the report layer
"""

from __future__ import annotations

__version__ = "1.0.0"

from seasonkit.cache import EvictionPolicy, ReferenceCache
from seasonkit.classify import ConfidenceEngine, SeasonClassifier, classify
from seasonkit.config import EngineConfig, LabAdjustment, PopulationCorrection
from seasonkit.errors import (
    ConfigurationError,
    InvalidColor,
    InvalidResult,
    SeasonkitError,
)
from seasonkit.measure import ColorSpaceConverter, classify_tone, delta_e_2000
from seasonkit.schema import (
    ClassificationResult,
    HSLColor,
    LabColor,
    PCCSTone,
    RGBColor,
    Season,
    XYZColor,
)

__all__ = [
    # Core API
    "classify",
    "SeasonClassifier",
    "ConfidenceEngine",
    "ColorSpaceConverter",
    "classify_tone",
    "delta_e_2000",
    "ClassificationResult",
    # Configuration
    "EngineConfig",
    "PopulationCorrection",
    "LabAdjustment",
    "ReferenceCache",
    "EvictionPolicy",
    # Types (commonly needed)
    "RGBColor",
    "XYZColor",
    "LabColor",
    "HSLColor",
    "Season",
    "PCCSTone",
    # Errors
    "SeasonkitError",
    "InvalidColor",
    "ConfigurationError",
    "InvalidResult",
    # Version
    "__version__",
]
