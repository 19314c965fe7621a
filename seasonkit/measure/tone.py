# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
PCCS tone classification from HSL.

Nearly unsaturated colors (S < 5%) are one of three greys by lightness.
Everything else is scored against nine tone centers:

    score = 100 - (0.6·|L - L_tone| + 0.4·|S - S_tone|), floored at 0

plus a +10 bonus for vivid (S > 85, L > 65), pale (S < 50, L > 80) and
deep (S > 75, L < 45). The best score wins; ties go to the earlier tone in
table order. Confidence is min(0.95, score / 100).
"""

from __future__ import annotations

from seasonkit.measure.colorspace import RGBInput, lab_to_rgb, rgb_to_hsl
from seasonkit.schema.classification import PCCSTone, ToneResult
from seasonkit.schema.color_types import HSLColor, LabLike
from seasonkit.schema.illuminant import D65, Illuminant


GREY_SATURATION = 5.0
MAX_CONFIDENCE = 0.95
TONE_BONUS = 10.0

# (tone, lightness center, saturation center) in table order
TONE_CENTERS: tuple[tuple[PCCSTone, float, float], ...] = (
    (PCCSTone.VIVID, 70.0, 100.0),
    (PCCSTone.BRIGHT, 80.0, 80.0),
    (PCCSTone.STRONG, 60.0, 90.0),
    (PCCSTone.DEEP, 40.0, 85.0),
    (PCCSTone.PALE, 85.0, 45.0),
    (PCCSTone.LIGHT, 75.0, 50.0),
    (PCCSTone.SOFT, 65.0, 40.0),
    (PCCSTone.DULL, 55.0, 35.0),
    (PCCSTone.DARK, 35.0, 45.0),
)


def _grey_tone(lightness: float) -> ToneResult:
    if lightness > 75.0:
        return ToneResult(PCCSTone.LIGHT_GREY, 0.95)
    if lightness > 40.0:
        return ToneResult(PCCSTone.MEDIUM_GREY, 0.90)
    return ToneResult(PCCSTone.DARK_GREY, 0.95)


def _bonus(tone: PCCSTone, s: float, l: float) -> float:
    if tone is PCCSTone.VIVID and s > 85.0 and l > 65.0:
        return TONE_BONUS
    if tone is PCCSTone.PALE and s < 50.0 and l > 80.0:
        return TONE_BONUS
    if tone is PCCSTone.DEEP and s > 75.0 and l < 45.0:
        return TONE_BONUS
    return 0.0


def classify_tone(hsl: HSLColor) -> ToneResult:
    """
    Classify an HSL color into a PCCS tone.

    Args:
        hsl: Color to classify (hue is not used)

    Returns:
        ToneResult with the winning tone, its confidence, and the score of
        every chromatic tone (empty for greys)
    """
    if not isinstance(hsl, HSLColor):
        hsl = HSLColor(*hsl)
    s, l = hsl.s, hsl.l

    if s < GREY_SATURATION:
        return _grey_tone(l)

    scores = []
    for tone, tone_l, tone_s in TONE_CENTERS:
        distance = 0.6 * abs(l - tone_l) + 0.4 * abs(s - tone_s)
        scores.append((tone, max(0.0, 100.0 - distance) + _bonus(tone, s, l)))

    best_tone, best_score = scores[0]
    for tone, score in scores[1:]:
        if score > best_score:
            best_tone, best_score = tone, score

    return ToneResult(
        tone=best_tone,
        confidence=min(MAX_CONFIDENCE, best_score / 100.0),
        scores=tuple(scores),
    )


def tone_for_rgb(rgb: RGBInput) -> ToneResult:
    """PCCS tone of an sRGB color."""
    return classify_tone(rgb_to_hsl(rgb))


def tone_for_lab(lab: LabLike, illuminant: Illuminant | str = D65) -> ToneResult:
    """PCCS tone of the sRGB rendering of a Lab color."""
    return tone_for_rgb(lab_to_rgb(lab, illuminant))
