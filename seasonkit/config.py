# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
Engine configuration.

One frozen settings object per classifier. Rounding precision and the
active illuminant are system-wide settings held here, never per-call
arguments.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from seasonkit.cache import EvictionPolicy, ReferenceCache
from seasonkit.errors import ConfigurationError
from seasonkit.schema.color_types import LabColor, LabLike


@dataclass(frozen=True)
class PopulationCorrection:
    """
    Multiplicative factors applied to the season totals before normalization.

    Resolved by the caller from its population / region context; the engine
    does not look these up. 1.0 leaves a signal unchanged.

    Attributes:
        brightness: Scales the light seasons (spring, summer)
        saturation: Scales the clear seasons (spring, winter)
        contrast: Scales the high-contrast seasons (autumn, winter)
    """

    brightness: float = 1.0
    saturation: float = 1.0
    contrast: float = 1.0

    def __post_init__(self) -> None:
        """Validate factors are finite and non-negative."""
        for name in ("brightness", "saturation", "contrast"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
                raise ConfigurationError(
                    f"Correction factor {name} must be a finite number >= 0, got {value!r}"
                )

    @property
    def is_identity(self) -> bool:
        return self.brightness == self.saturation == self.contrast == 1.0


@dataclass(frozen=True)
class LabAdjustment:
    """
    Per-channel linear correction applied to a Lab sample before scoring.

    Age bracket and regional tables live outside the engine; callers
    resolve them into one of these. Each channel maps x -> x * scale + offset.
    """

    l_offset: float = 0.0
    a_offset: float = 0.0
    b_offset: float = 0.0
    l_scale: float = 1.0
    a_scale: float = 1.0
    b_scale: float = 1.0

    def __post_init__(self) -> None:
        """Validate all terms are finite."""
        for name in ("l_offset", "a_offset", "b_offset", "l_scale", "a_scale", "b_scale"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ConfigurationError(f"{name} must be a finite number, got {value!r}")

    @property
    def is_identity(self) -> bool:
        return (
            self.l_offset == self.a_offset == self.b_offset == 0.0
            and self.l_scale == self.a_scale == self.b_scale == 1.0
        )

    def apply(self, lab: LabLike) -> LabColor:
        """
        Corrected copy of `lab`.

        Raises:
            InvalidColor: If the input or the corrected color leaves the Lab domain.
        """
        lab = LabColor.coerce(lab)
        return LabColor(
            lab.l * self.l_scale + self.l_offset,
            lab.a * self.a_scale + self.a_offset,
            lab.b * self.b_scale + self.b_offset,
        )

    def then(self, other: LabAdjustment) -> LabAdjustment:
        """Adjustment equal to applying self first, then other."""
        return LabAdjustment(
            l_offset=self.l_offset * other.l_scale + other.l_offset,
            a_offset=self.a_offset * other.a_scale + other.a_offset,
            b_offset=self.b_offset * other.b_scale + other.b_offset,
            l_scale=self.l_scale * other.l_scale,
            a_scale=self.a_scale * other.a_scale,
            b_scale=self.b_scale * other.b_scale,
        )


@dataclass(frozen=True)
class EngineConfig:
    """Configuration for conversion and classification."""

    # Illuminant used for Lab <-> XYZ (D65, D50, A, F2)
    illuminant: str = "D65"

    # When True, an unknown illuminant falls back to D65 with a logged
    # warning and a diagnostics note on every result; otherwise it raises
    allow_illuminant_fallback: bool = False

    # Decimal places for every converter output
    precision: int = 3

    # Delta E at which distance-based confidence reaches 0
    max_distance: float = 20.0

    # Range score penalty per Lab unit outside a season's range
    range_penalty: float = 3.0

    # Shared memo capacity; 0 disables caching
    cache_size: int = 0
    cache_policy: EvictionPolicy = EvictionPolicy.LRU

    def __post_init__(self) -> None:
        """Validate settings."""
        if not isinstance(self.precision, int) or not 0 <= self.precision <= 12:
            raise ConfigurationError(f"precision must be an int 0-12, got {self.precision!r}")
        if not self.max_distance > 0:
            raise ConfigurationError(f"max_distance must be > 0, got {self.max_distance}")
        if self.range_penalty < 0:
            raise ConfigurationError(f"range_penalty must be >= 0, got {self.range_penalty}")
        if self.cache_size < 0:
            raise ConfigurationError(f"cache_size must be >= 0, got {self.cache_size}")

    def build_cache(self) -> ReferenceCache | None:
        """Create the cache described by this config, or None if disabled."""
        if self.cache_size == 0:
            return None
        return ReferenceCache(self.cache_size, self.cache_policy)
