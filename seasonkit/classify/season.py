# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
Season classification: Lab color → ClassificationResult.

Score-then-normalize over four signals, each adding to every season's total:

1. Range fit (40): L 15, a 12, b 13 when inside the season's calibrated range,
   else the weight minus range_penalty per Lab unit outside, floored at 0
2. Temperature (25): warmth b - a, weighted by min(1, chroma / 20)
3. PCCS tone (20): tone of the sRGB rendering, through a tone → season table
4. Hue bucket (15): eight fixed hue sectors, each favoring one or two seasons

Population correction factors then scale the totals, the totals are
normalized to probabilities, and the winner is the highest probability with
ties broken by SEASON_PRIORITY. The winning season's subtype thresholds pick
one of three subtypes.

The classifier holds only its configuration and read-only tables, so one
instance may be shared across threads.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from seasonkit.cache import make_key
from seasonkit.classify.confidence import ConfidenceEngine
from seasonkit.classify.profiles import SEASON_PROFILES, SeasonProfile
from seasonkit.config import EngineConfig, LabAdjustment, PopulationCorrection
from seasonkit.measure.colorspace import ColorSpaceConverter, RGBInput
from seasonkit.measure.tone import classify_tone
from seasonkit.schema.classification import (
    SEASON_PRIORITY,
    ClassificationResult,
    PCCSTone,
    Season,
    SeasonAnalysis,
    SeasonScore,
    ToneResult,
)
from seasonkit.schema.color_types import LabColor, LabLike
from seasonkit.schema.illuminant import resolve_illuminant

logger = logging.getLogger(__name__)


# =============================================================================
# Scoring tables
# =============================================================================

RANGE_WEIGHTS = {"l": 15.0, "a": 12.0, "b": 13.0}
TEMPERATURE_WEIGHT = 25.0
TONE_WEIGHT = 20.0

# Temperature label -> bias per season (0 = against, 0.5 = neutral, 1 = for)
_WARM = (Season.SPRING, Season.AUTUMN)
TEMPERATURE_BIAS: dict[str, dict[Season, float]] = {
    "very_warm": {s: (1.0 if s in _WARM else 0.0) for s in Season},
    "warm": {s: (0.75 if s in _WARM else 0.25) for s in Season},
    "neutral": {s: 0.5 for s in Season},
    "cool": {s: (0.25 if s in _WARM else 0.75) for s in Season},
    "very_cool": {s: (0.0 if s in _WARM else 1.0) for s in Season},
}

# PCCS tone -> season weight (0-1), scaled by TONE_WEIGHT and tone confidence
_SP, _SU, _AU, _WI = Season.SPRING, Season.SUMMER, Season.AUTUMN, Season.WINTER
TONE_SEASON_WEIGHTS: dict[PCCSTone, dict[Season, float]] = {
    PCCSTone.VIVID: {_SP: 1.0, _SU: 0.0, _AU: 0.2, _WI: 0.8},
    PCCSTone.BRIGHT: {_SP: 1.0, _SU: 0.5, _AU: 0.1, _WI: 0.4},
    PCCSTone.STRONG: {_SP: 0.5, _SU: 0.0, _AU: 0.8, _WI: 0.8},
    PCCSTone.DEEP: {_SP: 0.0, _SU: 0.1, _AU: 1.0, _WI: 0.9},
    PCCSTone.PALE: {_SP: 0.6, _SU: 1.0, _AU: 0.0, _WI: 0.2},
    PCCSTone.LIGHT: {_SP: 0.8, _SU: 0.9, _AU: 0.1, _WI: 0.1},
    PCCSTone.SOFT: {_SP: 0.3, _SU: 1.0, _AU: 0.6, _WI: 0.0},
    PCCSTone.DULL: {_SP: 0.0, _SU: 0.8, _AU: 1.0, _WI: 0.1},
    PCCSTone.DARK: {_SP: 0.0, _SU: 0.1, _AU: 0.9, _WI: 1.0},
    PCCSTone.LIGHT_GREY: {_SP: 0.3, _SU: 0.8, _AU: 0.1, _WI: 0.5},
    PCCSTone.MEDIUM_GREY: {_SP: 0.1, _SU: 0.7, _AU: 0.5, _WI: 0.4},
    PCCSTone.DARK_GREY: {_SP: 0.0, _SU: 0.2, _AU: 0.5, _WI: 0.9},
}

# (upper hue bound in degrees, bucket name, bonuses); lower bound is the previous entry
HUE_BUCKETS: tuple[tuple[float, str, dict[Season, float]], ...] = (
    (30.0, "red", {_WI: 15.0, _SU: 8.0}),
    (60.0, "orange", {_AU: 12.0, _SP: 6.0}),
    (90.0, "yellow", {_SP: 15.0, _AU: 8.0}),
    (150.0, "yellow_green", {_AU: 12.0, _SP: 5.0}),
    (210.0, "cyan", {_SU: 12.0, _WI: 6.0}),
    (270.0, "blue", {_WI: 12.0, _SU: 8.0}),
    (300.0, "violet", {_SU: 12.0, _WI: 8.0}),
    (360.0, "magenta", {_WI: 12.0, _SU: 10.0}),
)

# Seasons each population factor scales
_BRIGHTNESS_SEASONS = (Season.SPRING, Season.SUMMER)
_SATURATION_SEASONS = (Season.SPRING, Season.WINTER)
_CONTRAST_SEASONS = (Season.AUTUMN, Season.WINTER)


# =============================================================================
# Labels
# =============================================================================


def temperature_label(warmth: float) -> str:
    """Bucket warmth (b - a) into very_warm ... very_cool."""
    if warmth > 4.0:
        return "very_warm"
    if warmth > 1.0:
        return "warm"
    if warmth > -1.0:
        return "neutral"
    if warmth > -4.0:
        return "cool"
    return "very_cool"


def clarity_label(chroma: float) -> str:
    if chroma > 20.0:
        return "very_clear"
    if chroma > 15.0:
        return "clear"
    if chroma > 10.0:
        return "soft"
    if chroma > 5.0:
        return "muted"
    return "very_muted"


def depth_label(lightness: float) -> str:
    if lightness > 75.0:
        return "very_light"
    if lightness > 65.0:
        return "light"
    if lightness > 55.0:
        return "medium"
    if lightness > 45.0:
        return "deep"
    return "very_deep"


def intensity_label(intensity: float) -> str:
    if intensity > 18.0:
        return "high"
    if intensity > 12.0:
        return "medium"
    if intensity > 8.0:
        return "low"
    return "very_low"


def hue_bucket(hue: float) -> tuple[str, dict[Season, float]]:
    """Bucket name and season bonuses for a hue angle in [0, 360)."""
    hue = hue % 360.0
    for upper, name, bonuses in HUE_BUCKETS:
        if hue < upper:
            return name, bonuses
    return HUE_BUCKETS[-1][1], HUE_BUCKETS[-1][2]


def analyze(lab: LabColor, precision: int = 3) -> SeasonAnalysis:
    """Descriptive labels for a Lab color."""
    warmth = lab.b - lab.a
    chroma = lab.chroma
    return SeasonAnalysis(
        temperature=temperature_label(warmth),
        clarity=clarity_label(chroma),
        depth=depth_label(lab.l),
        intensity=intensity_label(chroma * lab.l / 100.0),
        warmth=round(warmth, precision),
        chroma=round(chroma, precision),
        hue=round(lab.hue, precision) % 360.0,
    )


# =============================================================================
# Signals
# =============================================================================


def range_score(lab: LabColor, profile: SeasonProfile, penalty: float = 3.0) -> float:
    """Range-fit signal of one season (0-40)."""
    score = 0.0
    for channel, weight in RANGE_WEIGHTS.items():
        distance = profile.lab_range.distance(channel, getattr(lab, channel))
        score += max(0.0, weight - penalty * distance)
    return score


def temperature_scores(lab: LabColor) -> dict[Season, float]:
    """Temperature signal per season (0-25)."""
    bias = TEMPERATURE_BIAS[temperature_label(lab.b - lab.a)]
    confidence = min(1.0, lab.chroma / 20.0)
    return {
        season: TEMPERATURE_WEIGHT * (0.5 + (bias[season] - 0.5) * confidence)
        for season in Season
    }


def tone_scores(tone: ToneResult) -> dict[Season, float]:
    """Tone signal per season (0-20)."""
    weights = TONE_SEASON_WEIGHTS[tone.tone]
    return {
        season: TONE_WEIGHT * weights[season] * tone.confidence
        for season in Season
    }


def hue_scores(lab: LabColor) -> dict[Season, float]:
    """Hue-bucket signal per season (0-15); none for achromatic colors."""
    if lab.chroma == 0.0:
        return {season: 0.0 for season in Season}
    _, bonuses = hue_bucket(lab.hue)
    return {season: bonuses.get(season, 0.0) for season in Season}


def apply_population(
    totals: dict[Season, float],
    population: PopulationCorrection,
) -> dict[Season, float]:
    """Scale season totals by the population factors."""
    corrected = dict(totals)
    for seasons, factor in (
        (_BRIGHTNESS_SEASONS, population.brightness),
        (_SATURATION_SEASONS, population.saturation),
        (_CONTRAST_SEASONS, population.contrast),
    ):
        for season in seasons:
            corrected[season] *= factor
    return corrected


def normalize(totals: dict[Season, float]) -> tuple[dict[Season, float], bool]:
    """
    Probabilities from raw totals.

    Returns:
        (probabilities, fell_back) where fell_back is True when the totals
        summed to zero and the uniform distribution was used instead.
    """
    total = sum(totals.values())
    if total <= 0.0:
        share = 1.0 / len(totals)
        return {season: share for season in totals}, True
    return {season: value / total for season, value in totals.items()}, False


def pick_winner(probabilities: dict[Season, float]) -> Season:
    """Highest probability; equal values resolve by SEASON_PRIORITY."""
    winner = SEASON_PRIORITY[0]
    for season in SEASON_PRIORITY[1:]:
        if probabilities[season] > probabilities[winner]:
            winner = season
    return winner


# =============================================================================
# Classifier
# =============================================================================


class SeasonClassifier:
    """
    Classifies skin Lab samples into a season and subtype.

    Args:
        config: Engine configuration (illuminant, precision, cache, ...)

    Raises:
        ConfigurationError: For an unknown illuminant unless
            config.allow_illuminant_fallback is set.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or EngineConfig()
        self.illuminant, note = resolve_illuminant(
            self.config.illuminant,
            allow_fallback=self.config.allow_illuminant_fallback,
        )
        self._notes: tuple[str, ...] = (note,) if note else ()
        self.cache = self.config.build_cache()
        self.converter = ColorSpaceConverter(
            illuminant=self.illuminant,
            precision=self.config.precision,
            cache=self.cache,
        )
        self.confidence = ConfidenceEngine(max_distance=self.config.max_distance)
        self.profiles = SEASON_PROFILES

    def __repr__(self) -> str:
        return f"SeasonClassifier(illuminant={self.illuminant.name!r}, config={self.config!r})"

    def classify(
        self,
        lab: LabLike,
        *,
        tone: Optional[ToneResult] = None,
        population: Optional[PopulationCorrection] = None,
        adjustment: Optional[LabAdjustment] = None,
    ) -> ClassificationResult:
        """
        Classify one Lab color.

        Args:
            lab: Measured color
            tone: Precomputed PCCS tone (default: tone of the sRGB rendering)
            population: Multiplicative season factors for the reference population
            adjustment: Lab correction applied before validation and scoring

        Returns:
            A ClassificationResult. Without a cache each call builds a new
            one; with a cache, repeated calls for the same key return the
            same frozen object.

        Raises:
            InvalidColor: If lab, or lab after adjustment, is invalid.
        """
        lab = LabColor.coerce(lab)
        if adjustment is not None:
            lab = adjustment.apply(lab)
        population = population or PopulationCorrection()

        if self.cache is None:
            return self._classify(lab, tone, population)

        key = make_key(
            "classify",
            self.illuminant.name,
            *lab.as_tuple(),
            tone.tone.value if tone else None,
            tone.confidence if tone else None,
            population.brightness,
            population.saturation,
            population.contrast,
        )
        return self.cache.get_or_compute(
            key, lambda: self._classify(lab, tone, population)
        )

    def _classify(
        self,
        lab: LabColor,
        tone: Optional[ToneResult],
        population: PopulationCorrection,
    ) -> ClassificationResult:
        if tone is None:
            tone = classify_tone(self.converter.lab_to_hsl(lab))

        temperature = temperature_scores(lab)
        tone_bonus = tone_scores(tone)
        hue_bonus = hue_scores(lab)
        totals = {
            season: range_score(lab, self.profiles[season], self.config.range_penalty)
            + temperature[season]
            + tone_bonus[season]
            + hue_bonus[season]
            for season in SEASON_PRIORITY
        }
        if not population.is_identity:
            totals = apply_population(totals, population)

        probabilities, fell_back = normalize(totals)
        winner = pick_winner(probabilities)
        profile = self.profiles[winner]
        report = self.confidence.assess(lab, winner)

        diagnostics = list(self._notes)
        if fell_back:
            diagnostics.append("all season scores were zero; used uniform probabilities")

        result = ClassificationResult(
            season=winner,
            subtype=profile.subtype_for(lab),
            confidence=report.range_fit,
            distance_confidence=report.distance_based,
            scores=tuple(
                SeasonScore(season, totals[season], min(1.0, probabilities[season]))
                for season in SEASON_PRIORITY
            ),
            analysis=analyze(lab, self.config.precision),
            tone=tone,
            lab=lab,
            nearest_reference=report.nearest_season,
            illuminant=self.illuminant.name,
            diagnostics=tuple(diagnostics),
        )
        logger.debug(
            "Classified %s as %s (%s), p=%.3f, range fit %.0f",
            lab, result.season.value, result.subtype,
            probabilities[winner], result.confidence,
        )
        return result

    def classify_rgb(self, rgb: RGBInput, **kwargs) -> ClassificationResult:
        """Classify an sRGB color (converted under the configured illuminant)."""
        return self.classify(self.converter.rgb_to_lab(rgb), **kwargs)

    def classify_hex(self, hex_color: str, **kwargs) -> ClassificationResult:
        """Classify a hex color like "#BE9D87"."""
        return self.classify(self.converter.hex_to_lab(hex_color), **kwargs)

    def classify_batch(
        self,
        labs: Iterable[LabLike],
        **kwargs,
    ) -> list[ClassificationResult]:
        """Classify independent samples; one invalid sample fails the whole batch."""
        return [self.classify(lab, **kwargs) for lab in labs]


def classify(lab: LabLike, config: Optional[EngineConfig] = None, **kwargs) -> ClassificationResult:
    """
    Classify one Lab color with a freshly built classifier.

    Convenience for one-off calls; build a SeasonClassifier to reuse its cache.
    """
    return SeasonClassifier(config).classify(lab, **kwargs)
