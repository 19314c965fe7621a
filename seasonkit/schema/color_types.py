# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
Color value types.

Design principles:
- Immutable: All types are frozen dataclasses
- Validated: Construction fails with InvalidColor for out-of-domain fields
- Serializable: JSON-ready via to_dict / from_dict

Domains:
- RGB: integer channels 0-255
- XYZ: tristimulus values scaled so that Y of the white point is 100
- CIE Lab: L 0-100, a and b -128..127
- HSL: H 0-360 (exclusive), S and L 0-100 (percent)
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Sequence, Union

from seasonkit.errors import InvalidColor


def _check_number(name: str, value: object) -> float:
    """Reject non-numeric, boolean and non-finite channel values."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidColor(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidColor(f"{name} must be finite, got {value!r}")
    return float(value)


def _check_channel(name: str, value: object) -> int:
    """Accept integers (and integral floats) for an 8-bit channel."""
    if isinstance(value, bool):
        raise InvalidColor(f"RGB channel {name} must be an integer, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real) and float(value).is_integer():
        return int(value)
    raise InvalidColor(f"RGB channel {name} must be an integer, got {value!r}")


# =============================================================================
# RGB
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBColor:
    """
    An sRGB color with 8-bit integer channels.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate channels are integers in 0-255."""
        for name in ("r", "g", "b"):
            value = _check_channel(name, getattr(self, name))
            object.__setattr__(self, name, value)
            if not 0 <= value <= 255:
                raise InvalidColor(f"RGB channel {name} must be 0-255, got {value}")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        """Hex string like "#BE9D87"."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGBColor:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])

    @classmethod
    def coerce(cls, value: RGBLike) -> RGBColor:
        """Build an RGBColor from an RGBColor or a 3-sequence of channels."""
        if isinstance(value, RGBColor):
            return value
        if isinstance(value, str):
            raise InvalidColor(f"RGB color must be a 3-sequence, got string {value!r}")
        return cls(*_three(value, "RGB"))


# =============================================================================
# XYZ
# =============================================================================


@dataclass(frozen=True, slots=True)
class XYZColor:
    """
    A CIE 1931 XYZ color, scaled 0-100 (white Y = 100).

    Attributes:
        x: X tristimulus value (>= 0)
        y: Y tristimulus value / luminance (>= 0)
        z: Z tristimulus value (>= 0)
    """
    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        """Validate components are finite and non-negative."""
        for name in ("x", "y", "z"):
            value = _check_number(f"XYZ {name}", getattr(self, name))
            object.__setattr__(self, name, value)
            if value < 0.0:
                raise InvalidColor(f"XYZ {name} must be >= 0, got {value}")

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: dict) -> XYZColor:
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"], z=data["z"])


# =============================================================================
# CIE Lab
# =============================================================================


@dataclass(frozen=True, slots=True)
class LabColor:
    """
    A color in CIE L*a*b* space.

    Out-of-range values make the color invalid: construction raises
    InvalidColor rather than clamping.

    Attributes:
        l: Lightness (0 = black, 100 = diffuse white)
        a: Green (-) to red (+) axis, -128..127
        b: Blue (-) to yellow (+) axis, -128..127
    """
    l: float
    a: float
    b: float

    def __post_init__(self) -> None:
        """Validate Lab values are within expected ranges."""
        l = _check_number("Lab l", self.l)
        a = _check_number("Lab a", self.a)
        b = _check_number("Lab b", self.b)
        object.__setattr__(self, "l", l)
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        if not 0.0 <= l <= 100.0:
            raise InvalidColor(f"Lab l must be 0-100, got {l}")
        if not -128.0 <= a <= 127.0:
            raise InvalidColor(f"Lab a must be -128..127, got {a}")
        if not -128.0 <= b <= 127.0:
            raise InvalidColor(f"Lab b must be -128..127, got {b}")

    @property
    def chroma(self) -> float:
        """C*ab = sqrt(a² + b²)."""
        return math.hypot(self.a, self.b)

    @property
    def hue(self) -> float:
        """Hue angle atan2(b, a) in degrees [0, 360); 0 for neutral colors."""
        if self.a == 0.0 and self.b == 0.0:
            return 0.0
        return math.degrees(math.atan2(self.b, self.a)) % 360.0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.l, self.a, self.b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"l": self.l, "a": self.a, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> LabColor:
        """Deserialize from dictionary."""
        return cls(l=data["l"], a=data["a"], b=data["b"])

    @classmethod
    def coerce(cls, value: LabLike) -> LabColor:
        """Build a LabColor from a LabColor or a 3-sequence (validated)."""
        if isinstance(value, LabColor):
            return value
        return cls(*_three(value, "Lab"))


# =============================================================================
# HSL
# =============================================================================


@dataclass(frozen=True, slots=True)
class HSLColor:
    """
    A color in HSL space.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation percent [0, 100]
        l: Lightness percent [0, 100]
    """
    h: float
    s: float
    l: float

    def __post_init__(self) -> None:
        """Validate HSL values are within expected ranges."""
        h = _check_number("HSL h", self.h)
        s = _check_number("HSL s", self.s)
        l = _check_number("HSL l", self.l)
        object.__setattr__(self, "h", h)
        object.__setattr__(self, "s", s)
        object.__setattr__(self, "l", l)
        if not 0.0 <= h < 360.0:
            raise InvalidColor(f"HSL h must be 0-360, got {h}")
        if not 0.0 <= s <= 100.0:
            raise InvalidColor(f"HSL s must be 0-100, got {s}")
        if not 0.0 <= l <= 100.0:
            raise InvalidColor(f"HSL l must be 0-100, got {l}")

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.h, self.s, self.l)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HSLColor:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], l=data["l"])


LabLike = Union[LabColor, Sequence[float]]
RGBLike = Union[RGBColor, Sequence[int]]


def _three(value: object, kind: str) -> tuple:
    try:
        items = tuple(value)  # type: ignore[arg-type]
    except TypeError:
        raise InvalidColor(f"{kind} color must have 3 components, got {value!r}") from None
    if len(items) != 3:
        raise InvalidColor(f"{kind} color must have 3 components, got {len(items)}")
    return items
