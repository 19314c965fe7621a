# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: sRGB (8-bit) → Linear RGB → CIE XYZ → CIE L*a*b*
Side branches:    sRGB ↔ HSL, sRGB ↔ hex, Lab → LCh (chroma, hue),
                  Lab → warm/cool temperature and approximate Kelvin

References:
- sRGB: IEC 61966-2-1 (matrices for the D65 reference white)
- CIE Lab: CIE 15:2004, with the exact constants ε = (6/29)³ and κ = (29/3)³
- Chromatic adaptation: Bradford, as tabulated by Lindbloom

sRGB is defined relative to D65, so rgb_to_xyz always returns D65-relative
XYZ. The RGB ↔ Lab paths adapt that XYZ to the requested illuminant's white
before computing Lab (and back again), so sRGB white is L=100, a=b=0 under
every illuminant. xyz_to_lab and lab_to_xyz take XYZ that is already
relative to the illuminant passed in.

The array functions are pure NumPy and vectorized over a trailing axis of 3;
they do no validation. The scalar functions take and return the validated
value types from seasonkit.schema. ColorSpaceConverter adds the system-wide
illuminant, output rounding, and optional memoization on top.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass, field, replace
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from seasonkit.cache import ReferenceCache, make_key
from seasonkit.errors import InvalidColor
from seasonkit.schema.color_types import (
    HSLColor,
    LabColor,
    LabLike,
    RGBColor,
    RGBLike,
    XYZColor,
)
from seasonkit.schema.illuminant import D65, Illuminant, get_illuminant


# =============================================================================
# Constants
# =============================================================================

# CIE exact constants (not the 0.008856 / 7.787 approximations)
EPSILON = (6.0 / 29.0) ** 3
KAPPA = (29.0 / 3.0) ** 3
_DELTA = 6.0 / 29.0

# Linear sRGB to XYZ (D65), rows X, Y, Z
_SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

# XYZ to linear sRGB
_XYZ_TO_SRGB = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
], dtype=np.float64)

# Bradford cone response matrix, rows rho, gamma, beta
_BRADFORD = np.array([
    [0.8951000, 0.2664000, -0.1614000],
    [-0.7502000, 1.7135000, 0.0367000],
    [0.0389000, -0.0685000, 1.0296000],
], dtype=np.float64)
_BRADFORD_INV = np.linalg.inv(_BRADFORD)

# Conversion overshoot (e.g. L = 100.000004 for pure white) snapped to the edge
_SNAP_TOLERANCE = 1e-3

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# RGB entry points also accept hex strings like "#BE9D87"
RGBInput = Union[RGBLike, str]


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear:
    - For values <= 0.0031308: 12.92 * value
    - Otherwise: 1.055 * value^(1/2.4) - 0.055
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055,
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Array conversions (unvalidated)
# =============================================================================


def rgb255_to_xyz_array(rgb: NDArray) -> NDArray[np.float64]:
    """
    Convert 8-bit sRGB of shape (..., 3) to XYZ scaled 0-100.
    """
    linear = srgb_to_linear(np.asarray(rgb, dtype=np.float64) / 255.0)
    return np.einsum("...j,ij->...i", linear, _SRGB_TO_XYZ) * 100.0


def xyz_to_rgb255_array(xyz: NDArray) -> NDArray[np.float64]:
    """
    Convert XYZ (0-100) of shape (..., 3) to unrounded sRGB 0-255.

    Out-of-gamut results are clipped to the cube.
    """
    linear = np.einsum(
        "...j,ij->...i", np.asarray(xyz, dtype=np.float64) / 100.0, _XYZ_TO_SRGB
    )
    return linear_to_srgb(linear) * 255.0


def _lab_f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.where(t > EPSILON, np.cbrt(t), (KAPPA * t + 16.0) / 116.0)


def _lab_f_inv(f: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.where(f > _DELTA, f ** 3, (116.0 * f - 16.0) / KAPPA)


def xyz_to_lab_array(
    xyz: NDArray,
    white_point: tuple[float, float, float] = D65.white_point,
) -> NDArray[np.float64]:
    """
    Convert XYZ of shape (..., 3) to CIE Lab under the given white point.

    L = 116 f(Y/Yn) - 16, a = 500 (f(X/Xn) - f(Y/Yn)), b = 200 (f(Y/Yn) - f(Z/Zn))
    """
    ratios = np.asarray(xyz, dtype=np.float64) / np.asarray(white_point, dtype=np.float64)
    f = _lab_f(ratios)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack(
        [116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], axis=-1
    )


def lab_to_xyz_array(
    lab: NDArray,
    white_point: tuple[float, float, float] = D65.white_point,
) -> NDArray[np.float64]:
    """
    Convert CIE Lab of shape (..., 3) to XYZ. Exact inverse of xyz_to_lab_array.
    """
    lab = np.asarray(lab, dtype=np.float64)
    fy = (lab[..., 0] + 16.0) / 116.0
    fx = fy + lab[..., 1] / 500.0
    fz = fy - lab[..., 2] / 200.0
    ratios = _lab_f_inv(np.stack([fx, fy, fz], axis=-1))
    return ratios * np.asarray(white_point, dtype=np.float64)


@functools.lru_cache(maxsize=16)
def chromatic_adaptation_matrix(
    source_white: tuple[float, float, float],
    target_white: tuple[float, float, float],
) -> NDArray[np.float64]:
    """
    Bradford matrix taking XYZ relative to source_white to target_white.

    M = Mb⁻¹ · diag(cone(target) / cone(source)) · Mb
    """
    cone_source = _BRADFORD @ np.asarray(source_white, dtype=np.float64)
    cone_target = _BRADFORD @ np.asarray(target_white, dtype=np.float64)
    matrix = _BRADFORD_INV @ np.diag(cone_target / cone_source) @ _BRADFORD
    matrix.setflags(write=False)
    return matrix


def adapt_xyz_array(
    xyz: NDArray,
    source_white: tuple[float, float, float],
    target_white: tuple[float, float, float],
) -> NDArray[np.float64]:
    """
    Chromatically adapt XYZ of shape (..., 3) between two white points.

    Identical white points return the input unchanged.
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    if tuple(source_white) == tuple(target_white):
        return xyz
    matrix = chromatic_adaptation_matrix(tuple(source_white), tuple(target_white))
    return np.einsum("...j,ij->...i", xyz, matrix)


def rgb255_to_lab_array(
    rgb: NDArray,
    white_point: tuple[float, float, float] = D65.white_point,
) -> NDArray[np.float64]:
    """Convert 8-bit sRGB of shape (..., 3) to Lab relative to white_point."""
    xyz = adapt_xyz_array(rgb255_to_xyz_array(rgb), D65.white_point, white_point)
    return xyz_to_lab_array(xyz, white_point)


def lab_to_rgb255_array(
    lab: NDArray,
    white_point: tuple[float, float, float] = D65.white_point,
) -> NDArray[np.float64]:
    """Convert Lab relative to white_point to unrounded, clipped sRGB 0-255."""
    xyz = adapt_xyz_array(lab_to_xyz_array(lab, white_point), white_point, D65.white_point)
    return xyz_to_rgb255_array(xyz)


def lab_to_lch_array(lab: NDArray) -> NDArray[np.float64]:
    """
    Convert Lab to LCh (L, chroma, hue in degrees [0, 360)).

    Zero chroma yields hue 0.
    """
    lab = np.asarray(lab, dtype=np.float64)
    a = lab[..., 1]
    b = lab[..., 2]
    C = np.hypot(a, b)
    H = np.where(C == 0.0, 0.0, np.degrees(np.arctan2(b, a)) % 360.0)
    return np.stack([lab[..., 0], C, H], axis=-1)


def srgb_uint8_to_lab(
    pixels: NDArray,
    illuminant: Illuminant | str = D65,
) -> NDArray[np.float64]:
    """
    Convert 8-bit sRGB pixels of shape (..., 3) to Lab.

    Convenience wrapper for sample arrays handed over by the capture layer.

    Raises:
        InvalidColor: If the last axis is not 3 or any value is outside 0-255.
    """
    pixels = np.asarray(pixels)
    if pixels.shape[-1:] != (3,):
        raise InvalidColor(f"Expected shape (..., 3), got {pixels.shape}")
    if not np.all(np.isfinite(pixels)) or pixels.min() < 0 or pixels.max() > 255:
        raise InvalidColor("RGB samples must be within 0-255")
    ill = get_illuminant(illuminant)
    return rgb255_to_lab_array(pixels, ill.white_point)


# =============================================================================
# Scalar conversions on validated value types
# =============================================================================


def _snap(value: float, lo: float, hi: float) -> float:
    """Snap conversion overshoot within tolerance back onto [lo, hi]."""
    if lo - _SNAP_TOLERANCE <= value < lo:
        return lo
    if hi < value <= hi + _SNAP_TOLERANCE:
        return hi
    return value


def _lab_from_array(values: NDArray[np.float64]) -> LabColor:
    l, a, b = (float(v) for v in values)
    return LabColor(
        l=_snap(l, 0.0, 100.0),
        a=_snap(a, -128.0, 127.0),
        b=_snap(b, -128.0, 127.0),
    )


def _rgb_from_array(values: NDArray[np.float64]) -> RGBColor:
    r, g, b = (int(v) for v in np.clip(np.rint(values), 0, 255))
    return RGBColor(r, g, b)


def to_rgb(value: RGBInput) -> RGBColor:
    """
    Build an RGBColor from an RGBColor, a 3-sequence or a hex string.

    Raises:
        InvalidColor: If the value is not a valid color.
    """
    if isinstance(value, str):
        return hex_to_rgb(value)
    return RGBColor.coerce(value)


def rgb_to_xyz(rgb: RGBInput) -> XYZColor:
    """Convert sRGB to XYZ (0-100), relative to the D65 white of sRGB."""
    rgb = to_rgb(rgb)
    x, y, z = (float(v) for v in rgb255_to_xyz_array(rgb.as_tuple()))
    return XYZColor(max(x, 0.0), max(y, 0.0), max(z, 0.0))


def xyz_to_lab(xyz: XYZColor, illuminant: Illuminant | str = D65) -> LabColor:
    """
    Convert XYZ to CIE Lab under an illuminant.

    Raises:
        InvalidColor: If the result falls outside the Lab domain (XYZ far
            brighter than the white point).
    """
    ill = get_illuminant(illuminant)
    return _lab_from_array(xyz_to_lab_array(xyz.as_tuple(), ill.white_point))


def lab_to_xyz(lab: LabLike, illuminant: Illuminant | str = D65) -> XYZColor:
    """
    Convert CIE Lab to XYZ under an illuminant.

    Raises:
        InvalidColor: If the Lab color is invalid, or maps to negative
            tristimulus values (a valid Lab triple outside the visible gamut).
    """
    lab = LabColor.coerce(lab)
    ill = get_illuminant(illuminant)
    x, y, z = (float(v) for v in lab_to_xyz_array(lab.as_tuple(), ill.white_point))
    if min(x, y, z) < -_SNAP_TOLERANCE:
        raise InvalidColor(f"{lab} has no physical XYZ equivalent (negative tristimulus)")
    return XYZColor(max(x, 0.0), max(y, 0.0), max(z, 0.0))


def xyz_to_rgb(xyz: XYZColor) -> RGBColor:
    """Convert D65-relative XYZ (0-100) to 8-bit sRGB, clipping out-of-gamut channels."""
    return _rgb_from_array(xyz_to_rgb255_array(xyz.as_tuple()))


def adapt_xyz(
    xyz: XYZColor,
    source: Illuminant | str,
    target: Illuminant | str,
) -> XYZColor:
    """Bradford-adapt XYZ relative to `source` so it is relative to `target`."""
    src = get_illuminant(source)
    dst = get_illuminant(target)
    x, y, z = (
        float(v) for v in adapt_xyz_array(xyz.as_tuple(), src.white_point, dst.white_point)
    )
    return XYZColor(max(x, 0.0), max(y, 0.0), max(z, 0.0))


def rgb_to_lab(rgb: RGBInput, illuminant: Illuminant | str = D65) -> LabColor:
    """
    Convert sRGB to CIE Lab: sRGB → XYZ (D65) → XYZ (illuminant) → Lab.

    Every valid sRGB color yields a valid Lab color under each supported
    illuminant.
    """
    rgb = to_rgb(rgb)
    ill = get_illuminant(illuminant)
    return _lab_from_array(rgb255_to_lab_array(rgb.as_tuple(), ill.white_point))


def lab_to_rgb(lab: LabLike, illuminant: Illuminant | str = D65) -> RGBColor:
    """
    Convert CIE Lab to 8-bit sRGB: Lab → XYZ (illuminant) → XYZ (D65) → sRGB.

    Lab colors outside the sRGB gamut are clipped to the nearest cube face.
    """
    lab = LabColor.coerce(lab)
    ill = get_illuminant(illuminant)
    return _rgb_from_array(lab_to_rgb255_array(lab.as_tuple(), ill.white_point))


def rgb_to_hsl(rgb: RGBInput) -> HSLColor:
    """
    Convert sRGB to HSL (h degrees, s and l percent).

    Achromatic colors (max == min) get h = 0 and s = 0.
    """
    rgb = to_rgb(rgb)
    r, g, b = rgb.r / 255.0, rgb.g / 255.0, rgb.b / 255.0
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    diff = cmax - cmin
    total = cmax + cmin
    l = total / 2.0

    if diff == 0.0:
        return HSLColor(h=0.0, s=0.0, l=l * 100.0)

    s = diff / (2.0 - total) if l > 0.5 else diff / total
    if cmax == r:
        h = (g - b) / diff + (6.0 if g < b else 0.0)
    elif cmax == g:
        h = (b - r) / diff + 2.0
    else:
        h = (r - g) / diff + 4.0
    h = (h * 60.0) % 360.0
    return HSLColor(h=h, s=min(s * 100.0, 100.0), l=l * 100.0)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def hsl_to_rgb(hsl: HSLColor) -> RGBColor:
    """Convert HSL to 8-bit sRGB."""
    h = hsl.h / 360.0
    s = hsl.s / 100.0
    l = hsl.l / 100.0

    if s == 0.0:
        gray = int(round(l * 255.0))
        return RGBColor(gray, gray, gray)

    q = l * (1.0 + s) if l < 0.5 else l + s - l * s
    p = 2.0 * l - q
    channels = [
        _hue_to_channel(p, q, h + 1.0 / 3.0),
        _hue_to_channel(p, q, h),
        _hue_to_channel(p, q, h - 1.0 / 3.0),
    ]
    return _rgb_from_array(np.array(channels) * 255.0)


def rgb_to_hex(rgb: RGBInput) -> str:
    """Convert sRGB to a hex string like "#BE9D87"."""
    return to_rgb(rgb).hex


def hex_to_rgb(hex_color: str) -> RGBColor:
    """
    Parse "#RRGGBB", "RRGGBB" or the short "#RGB" form.

    Raises:
        InvalidColor: For anything else.
    """
    m = _HEX_RE.match(hex_color.strip()) if isinstance(hex_color, str) else None
    if not m:
        raise InvalidColor(f"Invalid hex color {hex_color!r}")
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return RGBColor(
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def lab_to_lch(lab: LabLike) -> tuple[float, float, float]:
    """Return (L, chroma, hue) for a Lab color; hue 0 when chroma is 0."""
    lab = LabColor.coerce(lab)
    L, C, H = (float(v) for v in lab_to_lch_array(lab.as_tuple()))
    return L, C, H


# =============================================================================
# Color temperature
# =============================================================================

# a/b thresholds of the warm and cool regions
_WARM_B = 15.0
_COOL_B = -5.0
_COOL_B_GREENISH = 10.0

KELVIN_BASE = 5500.0
KELVIN_RANGE = (2000.0, 10000.0)


@dataclass(frozen=True, slots=True)
class ColorTemperature:
    """
    Warm/cool reading of a Lab color.

    Attributes:
        temperature: "warm", "cool" or "neutral"
        warmness: -1.0 (very cool) to 1.0 (very warm), 2 decimals;
            never negative when warm, never positive when cool
        kelvin: Approximate correlated color temperature, 2000-10000 K
    """
    temperature: str
    warmness: float
    kelvin: float

    def to_dict(self) -> dict:
        return {
            "temperature": self.temperature,
            "warmness": self.warmness,
            "kelvin": self.kelvin,
        }


def estimate_kelvin(lab: LabLike) -> float:
    """
    Rough color temperature from the yellow-blue and red-green axes.

    5500 K at a = b = 0; every 50 units of (b - a/2) moves it 1500 K
    (warmer is lower). Clamped to 2000-10000 K.
    """
    lab = LabColor.coerce(lab)
    warmth = (lab.b - lab.a * 0.5) / 50.0
    lo, hi = KELVIN_RANGE
    return float(min(hi, max(lo, KELVIN_BASE - warmth * 1500.0)))


def color_temperature(lab: LabLike) -> ColorTemperature:
    """
    Classify a Lab color as warm, cool or neutral.

    Rules, first match wins:
    - warm: b > 15 and a > 0; warmness = (b - 15)/20 + a/20, capped at 1
    - cool: b < -5, or a < 0 and b < 10; warmness is minus the distance past
      those thresholds, ((-5 - b)⁺ + (-a)⁺)/20, capped at -1
    - neutral: anything else; warmness = (a + b)/100, clipped to [-1, 1]

    Raises:
        InvalidColor: If lab is outside the Lab domain.
    """
    lab = LabColor.coerce(lab)
    a, b = lab.a, lab.b

    if b > _WARM_B and a > 0.0:
        temperature = "warm"
        warmness = min(1.0, (b - _WARM_B) / 20.0 + a / 20.0)
    elif b < _COOL_B or (a < 0.0 and b < _COOL_B_GREENISH):
        temperature = "cool"
        excess = max(0.0, _COOL_B - b) + max(0.0, -a)
        warmness = -min(1.0, excess / 20.0)
    else:
        temperature = "neutral"
        warmness = min(1.0, max(-1.0, (a + b) / 100.0))

    return ColorTemperature(temperature, round(warmness, 2) + 0.0, estimate_kelvin(lab))


# =============================================================================
# Converter: illuminant + precision + cache
# =============================================================================


def _round(value: float, precision: int) -> float:
    # +0.0 turns -0.0 into 0.0
    return round(value, precision) + 0.0


@dataclass(frozen=True)
class ColorSpaceConverter:
    """
    Conversions bound to one illuminant and one output precision.

    Every float output is rounded to `precision` decimals. Changing the
    illuminant means building a new converter (see `with_illuminant`); cache
    keys always carry the illuminant name, so a shared cache never serves a
    value computed under a different white point.

    Attributes:
        illuminant: Reference white for Lab conversions (default D65)
        precision: Decimal places of float outputs (default 3)
        cache: Optional shared ReferenceCache for rgb↔lab conversions
    """

    illuminant: Illuminant = D65
    precision: int = 3
    cache: Optional[ReferenceCache] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "illuminant", get_illuminant(self.illuminant))

    def with_illuminant(self, illuminant: Illuminant | str) -> ColorSpaceConverter:
        """A copy of this converter using another illuminant."""
        return replace(self, illuminant=get_illuminant(illuminant))

    # -- rounding helpers ---------------------------------------------------

    def _lab(self, lab: LabColor) -> LabColor:
        p = self.precision
        return LabColor(
            _snap(_round(lab.l, p), 0.0, 100.0),
            _snap(_round(lab.a, p), -128.0, 127.0),
            _snap(_round(lab.b, p), -128.0, 127.0),
        )

    def _xyz(self, xyz: XYZColor) -> XYZColor:
        p = self.precision
        return XYZColor(_round(xyz.x, p), _round(xyz.y, p), _round(xyz.z, p))

    def _hsl(self, hsl: HSLColor) -> HSLColor:
        p = self.precision
        return HSLColor(
            _round(hsl.h, p) % 360.0,
            min(_round(hsl.s, p), 100.0),
            min(_round(hsl.l, p), 100.0),
        )

    # -- conversions --------------------------------------------------------

    def rgb_to_xyz(self, rgb: RGBInput) -> XYZColor:
        return self._xyz(rgb_to_xyz(rgb))

    def xyz_to_rgb(self, xyz: XYZColor) -> RGBColor:
        return xyz_to_rgb(xyz)

    def xyz_to_lab(self, xyz: XYZColor) -> LabColor:
        return self._lab(xyz_to_lab(xyz, self.illuminant))

    def lab_to_xyz(self, lab: LabLike) -> XYZColor:
        return self._xyz(lab_to_xyz(lab, self.illuminant))

    def rgb_to_lab(self, rgb: RGBInput) -> LabColor:
        rgb = to_rgb(rgb)
        if self.cache is None:
            return self._lab(rgb_to_lab(rgb, self.illuminant))
        key = make_key("rgb_to_lab", self.illuminant.name, self.precision, *rgb.as_tuple())
        return self.cache.get_or_compute(
            key, lambda: self._lab(rgb_to_lab(rgb, self.illuminant))
        )

    def lab_to_rgb(self, lab: LabLike) -> RGBColor:
        lab = LabColor.coerce(lab)
        if self.cache is None:
            return lab_to_rgb(lab, self.illuminant)
        key = make_key("lab_to_rgb", self.illuminant.name, *lab.as_tuple())
        return self.cache.get_or_compute(key, lambda: lab_to_rgb(lab, self.illuminant))

    def rgb_to_hsl(self, rgb: RGBInput) -> HSLColor:
        return self._hsl(rgb_to_hsl(rgb))

    def hsl_to_rgb(self, hsl: HSLColor) -> RGBColor:
        return hsl_to_rgb(hsl)

    def lab_to_hsl(self, lab: LabLike) -> HSLColor:
        """HSL of the sRGB rendering of a Lab color."""
        return self.rgb_to_hsl(self.lab_to_rgb(lab))

    def rgb_to_hex(self, rgb: RGBInput) -> str:
        return rgb_to_hex(rgb)

    def hex_to_rgb(self, hex_color: str) -> RGBColor:
        return hex_to_rgb(hex_color)

    def hex_to_lab(self, hex_color: str) -> LabColor:
        return self.rgb_to_lab(hex_to_rgb(hex_color))

    def lab_to_hex(self, lab: LabLike) -> str:
        return self.lab_to_rgb(lab).hex

    def color_temperature(self, rgb: RGBInput) -> ColorTemperature:
        """Warm/cool reading of an sRGB color under this illuminant."""
        return color_temperature(self.rgb_to_lab(rgb))
