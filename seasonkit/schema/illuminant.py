# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
CIE standard illuminants (2° observer).

The set is fixed: D65 (default daylight), D50 (print), A (incandescent)
and F2 (cool white fluorescent). White points are scaled so Y = 100.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from seasonkit.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Illuminant:
    """
    A reference light source defining the white point for Lab conversion.

    Attributes:
        name: Identifier ("D65", "D50", "A", "F2")
        white_point: (X, Y, Z) tristimulus of the reference white, Y = 100
        chromaticity: (x, y) CIE 1931 chromaticity coordinates
    """
    name: str
    white_point: tuple[float, float, float]
    chromaticity: tuple[float, float]

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "white_point": list(self.white_point),
            "chromaticity": list(self.chromaticity),
        }


D65 = Illuminant("D65", (95.047, 100.000, 108.883), (0.31271, 0.32902))
D50 = Illuminant("D50", (96.422, 100.000, 82.521), (0.34567, 0.35850))
A = Illuminant("A", (109.850, 100.000, 35.585), (0.44757, 0.40745))
F2 = Illuminant("F2", (99.187, 100.000, 67.393), (0.37208, 0.37529))

ILLUMINANTS: dict[str, Illuminant] = {
    ill.name: ill for ill in (D65, D50, A, F2)
}

DEFAULT_ILLUMINANT = D65


def get_illuminant(name: str | Illuminant) -> Illuminant:
    """
    Look up an illuminant by name (case-insensitive).

    Raises:
        ConfigurationError: If the name is not one of the fixed set.
    """
    if isinstance(name, Illuminant):
        return name
    key = str(name).strip().upper()
    try:
        return ILLUMINANTS[key]
    except KeyError:
        raise ConfigurationError(
            f"Unknown illuminant {name!r}; expected one of {sorted(ILLUMINANTS)}"
        ) from None


def resolve_illuminant(
    name: str | Illuminant,
    *,
    allow_fallback: bool = False,
) -> tuple[Illuminant, str | None]:
    """
    Resolve an illuminant, optionally substituting D65 for unknown names.

    Substitution is never silent: it is logged as a warning and the returned
    note must be surfaced to the caller (classifiers attach it to every
    result's diagnostics).

    Returns:
        (illuminant, note) where note is None unless D65 was substituted.
    """
    try:
        return get_illuminant(name), None
    except ConfigurationError:
        if not allow_fallback:
            raise
    note = f"unknown illuminant {name!r}; substituted D65"
    logger.warning("Unknown illuminant %r, substituting D65", name)
    return DEFAULT_ILLUMINANT, note
