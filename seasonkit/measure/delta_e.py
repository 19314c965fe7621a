# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
Perceptual color difference (ΔE) in CIE Lab.

Formulas:
- ΔE76: Euclidean distance in Lab
- ΔE94: chroma-weighted distance (graphics or textiles constants)
- ΔE2000: CIEDE2000, the authoritative metric

compare_formulas reports all three for one pair; season_matching scores
seasonal palettes against a skin color with ΔE2000 and the skin-tone bands.

Reference:
    G. Sharma, W. Wu, E. N. Dalal, "The CIEDE2000 Color-Difference Formula:
    Implementation Notes, Supplementary Test Data, and Mathematical
    Observations", Color Research and Application, 2005.

simplified_distance is deliberately a separate function. It is the plain
Euclidean distance used to find the nearest season reference point, and it
is not interchangeable with delta_e_2000.

Reference thresholds (ΔE2000):
- ΔE ≈ 1.0: just noticeable
- ΔE ≈ 2.3: perceptible at a glance
- ΔE ≈ 5.0: clearly noticeable
- ΔE ≈ 10+: different colors
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from seasonkit.errors import ConfigurationError, InvalidColor
from seasonkit.schema.classification import SEASON_PRIORITY, Season
from seasonkit.schema.color_types import LabColor, LabLike


class DeltaEFormula(Enum):
    """Selectable ΔE formula."""
    CIE76 = "cie76"
    CIE94 = "cie94"
    CIE2000 = "cie2000"

    @classmethod
    def parse(cls, value: str | DeltaEFormula) -> DeltaEFormula:
        if isinstance(value, DeltaEFormula):
            return value
        key = str(value).strip().lower()
        aliases = {"76": "cie76", "94": "cie94", "2000": "cie2000"}
        try:
            return cls(aliases.get(key, key))
        except ValueError:
            raise ConfigurationError(f"Unknown delta E formula {value!r}") from None


class SimilarityContext(Enum):
    """Banding table for assess_similarity."""
    GENERAL = "general"
    SKIN_TONE = "skin_tone"


# (upper bound, level, score); the first band whose bound is >= ΔE wins
_SIMILARITY_BANDS: dict[SimilarityContext, tuple[tuple[float, str, float], ...]] = {
    SimilarityContext.GENERAL: (
        (1.0, "identical", 98.0),
        (2.3, "similar", 90.0),
        (5.0, "noticeable", 75.0),
        (10.0, "different", 50.0),
    ),
    SimilarityContext.SKIN_TONE: (
        (3.0, "excellent", 95.0),
        (6.0, "good", 85.0),
        (10.0, "acceptable", 70.0),
        (15.0, "poor", 50.0),
    ),
}

_SIMILARITY_FLOOR: dict[SimilarityContext, tuple[str, float]] = {
    SimilarityContext.GENERAL: ("very_different", 25.0),
    SimilarityContext.SKIN_TONE: ("bad", 30.0),
}


# =============================================================================
# Validation
# =============================================================================


def _as_lab_array(value: LabLike) -> NDArray[np.float64]:
    return np.array(LabColor.coerce(value).as_tuple(), dtype=np.float64)


def _check_lab_array(labs: NDArray, name: str) -> NDArray[np.float64]:
    """Validate an (..., 3) Lab array as a whole; raises InvalidColor."""
    labs = np.asarray(labs, dtype=np.float64)
    if labs.shape[-1:] != (3,):
        raise InvalidColor(f"{name} must have shape (..., 3), got {labs.shape}")
    if not np.all(np.isfinite(labs)):
        raise InvalidColor(f"{name} contains non-finite values")
    L = labs[..., 0]
    ab = labs[..., 1:]
    if np.any((L < 0.0) | (L > 100.0)):
        raise InvalidColor(f"{name} has L outside 0-100")
    if np.any((ab < -128.0) | (ab > 127.0)):
        raise InvalidColor(f"{name} has a/b outside -128..127")
    return labs


def _check_weights(**weights: float) -> None:
    for name, value in weights.items():
        if not np.isfinite(value) or value <= 0:
            raise ConfigurationError(f"{name} must be a positive number, got {value!r}")


# =============================================================================
# Array kernels (inputs assumed valid)
# =============================================================================


def _delta_e_76_array(lab1: NDArray, lab2: NDArray) -> NDArray[np.float64]:
    delta = lab1 - lab2
    return np.sqrt(np.sum(delta ** 2, axis=-1))


def _delta_e_94_array(
    lab1: NDArray, lab2: NDArray, textiles: bool
) -> NDArray[np.float64]:
    if textiles:
        kL, K1, K2 = 2.0, 0.048, 0.014
    else:
        kL, K1, K2 = 1.0, 0.045, 0.015

    dL = lab1[..., 0] - lab2[..., 0]
    C1 = np.hypot(lab1[..., 1], lab1[..., 2])
    C2 = np.hypot(lab2[..., 1], lab2[..., 2])
    dC = C1 - C2
    da = lab1[..., 1] - lab2[..., 1]
    db = lab1[..., 2] - lab2[..., 2]
    dH_sq = np.maximum(0.0, da ** 2 + db ** 2 - dC ** 2)

    # SC and SH use the chroma of the first (reference) color
    SC = 1.0 + K1 * C1
    SH = 1.0 + K2 * C1
    return np.sqrt((dL / kL) ** 2 + (dC / SC) ** 2 + dH_sq / SH ** 2)


def _hue_prime(a_prime: NDArray, b: NDArray) -> NDArray[np.float64]:
    """Hue angle in degrees [0, 360); 0 where a' = b = 0."""
    h = np.degrees(np.arctan2(b, a_prime)) % 360.0
    return np.where((a_prime == 0.0) & (b == 0.0), 0.0, h)


def _delta_e_2000_array(
    lab1: NDArray,
    lab2: NDArray,
    kL: float,
    kC: float,
    kH: float,
) -> NDArray[np.float64]:
    L1, a1, b1 = lab1[..., 0], lab1[..., 1], lab1[..., 2]
    L2, a2, b2 = lab2[..., 0], lab2[..., 1], lab2[..., 2]

    # Step 1: C', h'
    C1 = np.hypot(a1, b1)
    C2 = np.hypot(a2, b2)
    C_bar7 = ((C1 + C2) / 2.0) ** 7
    G = 0.5 * (1.0 - np.sqrt(C_bar7 / (C_bar7 + 25.0 ** 7)))

    a1p = (1.0 + G) * a1
    a2p = (1.0 + G) * a2
    C1p = np.hypot(a1p, b1)
    C2p = np.hypot(a2p, b2)
    h1p = _hue_prime(a1p, b1)
    h2p = _hue_prime(a2p, b2)

    # Step 2: ΔL', ΔC', ΔH'
    dLp = L2 - L1
    dCp = C2p - C1p

    chroma_product = C1p * C2p
    dh = h2p - h1p
    dhp = np.where(dh > 180.0, dh - 360.0, np.where(dh < -180.0, dh + 360.0, dh))
    dhp = np.where(chroma_product == 0.0, 0.0, dhp)
    dHp = 2.0 * np.sqrt(chroma_product) * np.sin(np.radians(dhp / 2.0))

    # Step 3: weighting functions
    L_bar_p = (L1 + L2) / 2.0
    C_bar_p = (C1p + C2p) / 2.0

    h_sum = h1p + h2p
    h_bar_p = np.where(
        np.abs(h1p - h2p) <= 180.0,
        h_sum / 2.0,
        np.where(h_sum < 360.0, (h_sum + 360.0) / 2.0, (h_sum - 360.0) / 2.0),
    )
    h_bar_p = np.where(chroma_product == 0.0, h_sum, h_bar_p)

    T = (
        1.0
        - 0.17 * np.cos(np.radians(h_bar_p - 30.0))
        + 0.24 * np.cos(np.radians(2.0 * h_bar_p))
        + 0.32 * np.cos(np.radians(3.0 * h_bar_p + 6.0))
        - 0.20 * np.cos(np.radians(4.0 * h_bar_p - 63.0))
    )

    d_theta = 30.0 * np.exp(-(((h_bar_p - 275.0) / 25.0) ** 2))
    C_bar_p7 = C_bar_p ** 7
    R_C = 2.0 * np.sqrt(C_bar_p7 / (C_bar_p7 + 25.0 ** 7))

    L_term = (L_bar_p - 50.0) ** 2
    S_L = 1.0 + (0.015 * L_term) / np.sqrt(20.0 + L_term)
    S_C = 1.0 + 0.045 * C_bar_p
    S_H = 1.0 + 0.015 * C_bar_p * T
    R_T = -np.sin(np.radians(2.0 * d_theta)) * R_C

    # Step 4: combine
    lightness = dLp / (kL * S_L)
    chroma = dCp / (kC * S_C)
    hue = dHp / (kH * S_H)
    return np.sqrt(lightness ** 2 + chroma ** 2 + hue ** 2 + R_T * chroma * hue)


# =============================================================================
# Scalar API
# =============================================================================


def delta_e_76(lab1: LabLike, lab2: LabLike) -> float:
    """
    ΔE76: Euclidean distance sqrt(ΔL² + Δa² + Δb²).

    Raises:
        InvalidColor: If either color is outside the Lab domain.
    """
    return float(_delta_e_76_array(_as_lab_array(lab1), _as_lab_array(lab2)))


def delta_e_94(lab1: LabLike, lab2: LabLike, textiles: bool = False) -> float:
    """
    ΔE94 with graphic-arts (default) or textiles constants.

    Not symmetric: the chroma weights come from lab1, the reference color.

    Args:
        lab1: Reference color
        lab2: Sample color
        textiles: Use K1=0.048, K2=0.014, kL=2 instead of K1=0.045, K2=0.015, kL=1

    Returns:
        ΔE94 value (>= 0)
    """
    return float(
        _delta_e_94_array(_as_lab_array(lab1), _as_lab_array(lab2), textiles)
    )


def delta_e_2000(
    lab1: LabLike,
    lab2: LabLike,
    kL: float = 1.0,
    kC: float = 1.0,
    kH: float = 1.0,
) -> float:
    """
    CIEDE2000 color difference.

    Implements every branch of the published formula: the G factor rescaling
    a*, hue-prime wrap-around, the C' = 0 cases for Δh' and H̄', the T term
    and the blue-region rotation R_T.

    Args:
        lab1, lab2: Colors to compare
        kL, kC, kH: Parametric weighting factors (default 1, must be > 0)

    Returns:
        ΔE00 value (>= 0)

    Raises:
        InvalidColor: If either color is outside the Lab domain.
        ConfigurationError: If a weighting factor is not positive.
    """
    _check_weights(kL=kL, kC=kC, kH=kH)
    return float(
        _delta_e_2000_array(_as_lab_array(lab1), _as_lab_array(lab2), kL, kC, kH)
    )


def simplified_distance(lab1: LabLike, lab2: LabLike) -> float:
    """
    Unweighted Euclidean Lab distance used for reference-point matching.

    Numerically equal to ΔE76. Kept under its own name so callers matching
    against season reference points never silently switch to CIEDE2000.
    """
    return float(_delta_e_76_array(_as_lab_array(lab1), _as_lab_array(lab2)))


def delta_e(
    lab1: LabLike,
    lab2: LabLike,
    formula: DeltaEFormula | str = DeltaEFormula.CIE2000,
) -> float:
    """Compute ΔE with the selected formula (default CIEDE2000)."""
    formula = DeltaEFormula.parse(formula)
    if formula is DeltaEFormula.CIE76:
        return delta_e_76(lab1, lab2)
    if formula is DeltaEFormula.CIE94:
        return delta_e_94(lab1, lab2)
    return delta_e_2000(lab1, lab2)


# =============================================================================
# Batch API
# =============================================================================


def delta_e_76_batch(
    colors1: NDArray[np.float64],
    colors2: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Vectorized ΔE76 for arrays of Lab colors.

    Args:
        colors1: Array of shape (N, 3) with Lab values
        colors2: Array of shape (N, 3), or (3,) to compare against one color

    Returns:
        Array of shape (N,) with ΔE values

    Raises:
        InvalidColor: If any row is outside the Lab domain.
    """
    lab1 = _check_lab_array(colors1, "colors1")
    lab2 = _check_lab_array(colors2, "colors2")
    return _delta_e_76_array(lab1, lab2)


def delta_e_2000_batch(
    colors1: NDArray[np.float64],
    colors2: NDArray[np.float64],
    kL: float = 1.0,
    kC: float = 1.0,
    kH: float = 1.0,
) -> NDArray[np.float64]:
    """
    Vectorized CIEDE2000 for arrays of Lab colors.

    Args:
        colors1: Array of shape (N, 3) with Lab values
        colors2: Array of shape (N, 3), or (3,) to compare against one color

    Returns:
        Array of shape (N,) with ΔE00 values
    """
    _check_weights(kL=kL, kC=kC, kH=kH)
    lab1 = _check_lab_array(colors1, "colors1")
    lab2 = _check_lab_array(colors2, "colors2")
    return _delta_e_2000_array(lab1, lab2, kL, kC, kH)


# =============================================================================
# Similarity and matching
# =============================================================================


@dataclass(frozen=True, slots=True)
class Similarity:
    """Banded reading of a ΔE value."""
    level: str
    score: float

    def to_dict(self) -> dict:
        return {"level": self.level, "score": self.score}


def assess_similarity(
    delta_e: float,
    context: SimilarityContext | str = SimilarityContext.GENERAL,
) -> Similarity:
    """
    Map a ΔE value to a similarity level and a 0-100 score.

    General bands: ≤1.0 identical (98), ≤2.3 similar (90), ≤5.0 noticeable (75),
    ≤10 different (50), else very_different (25).
    Skin-tone bands: ≤3 excellent (95), ≤6 good (85), ≤10 acceptable (70),
    ≤15 poor (50), else bad (30).

    Raises:
        InvalidColor: If delta_e is negative or not finite.
        ConfigurationError: If the context is unknown.
    """
    if not np.isfinite(delta_e) or delta_e < 0:
        raise InvalidColor(f"delta_e must be a finite number >= 0, got {delta_e!r}")
    if not isinstance(context, SimilarityContext):
        try:
            context = SimilarityContext(str(context).strip().lower())
        except ValueError:
            raise ConfigurationError(f"Unknown similarity context {context!r}") from None

    for bound, level, score in _SIMILARITY_BANDS[context]:
        if delta_e <= bound:
            return Similarity(level, score)
    level, score = _SIMILARITY_FLOOR[context]
    return Similarity(level, score)


@dataclass(frozen=True, slots=True)
class ColorMatch:
    """
    One candidate ranked against a target color.

    Attributes:
        index: Position of the candidate in the input sequence
        lab: The candidate color
        delta_e: Distance to the target
        similarity: Similarity band of delta_e (general bands, skin-tone
            bands inside season_matching)
    """
    index: int
    lab: LabColor
    delta_e: float
    similarity: Similarity

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "lab": self.lab.to_dict(),
            "delta_e": self.delta_e,
            "similarity": self.similarity.to_dict(),
        }


def find_closest(
    target: LabLike,
    candidates: Sequence[LabLike],
    count: Optional[int] = 5,
    formula: DeltaEFormula | str = DeltaEFormula.CIE2000,
) -> list[ColorMatch]:
    """
    Rank candidates by ΔE to the target, closest first.

    Ties keep input order. `count=None` returns every candidate.

    Raises:
        InvalidColor: If the target or any candidate is invalid.
    """
    target = LabColor.coerce(target)
    formula = DeltaEFormula.parse(formula)
    if count is not None and count < 0:
        raise ConfigurationError(f"count must be >= 0, got {count}")

    matches = []
    for index, candidate in enumerate(candidates):
        lab = LabColor.coerce(candidate)
        distance = delta_e(target, lab, formula)
        matches.append(ColorMatch(index, lab, distance, assess_similarity(distance)))

    matches.sort(key=lambda m: m.delta_e)
    return matches if count is None else matches[:count]


@dataclass(frozen=True, slots=True)
class MatchingScore:
    """
    Weighted 0-100 harmony score of a test color against a skin color.

    Attributes:
        overall: Weighted total
        delta_e_score: 100 - 5·ΔE00, floored at 0
        lightness_score: 100 - 2·|ΔL|, floored at 0
        chroma_score: 100 - 3·|ΔC|, floored at 0
        hue_score: 100 scaled down by the hue angle difference (0 at 180°)
        delta_e: The underlying ΔE00
    """
    overall: float
    delta_e_score: float
    lightness_score: float
    chroma_score: float
    hue_score: float
    delta_e: float


DEFAULT_MATCH_WEIGHTS = {"delta_e": 0.7, "lightness": 0.15, "chroma": 0.1, "hue": 0.05}


def matching_score(
    skin: LabLike,
    test: LabLike,
    weights: Optional[dict[str, float]] = None,
) -> MatchingScore:
    """
    Score how well a test color sits with a skin color.

    Args:
        skin: Measured skin color
        test: Candidate color (drape, foundation, ...)
        weights: Overrides for DEFAULT_MATCH_WEIGHTS (keys delta_e,
            lightness, chroma, hue)
    """
    skin = LabColor.coerce(skin)
    test = LabColor.coerce(test)
    w = dict(DEFAULT_MATCH_WEIGHTS)
    if weights:
        unknown = set(weights) - set(w)
        if unknown:
            raise ConfigurationError(f"Unknown weight keys {sorted(unknown)}")
        w.update(weights)

    distance = delta_e_2000(skin, test)
    de_score = max(0.0, 100.0 - distance * 5.0)
    l_score = max(0.0, 100.0 - abs(skin.l - test.l) * 2.0)
    c_score = max(0.0, 100.0 - abs(skin.chroma - test.chroma) * 3.0)

    hue_diff = abs(skin.hue - test.hue)
    if hue_diff > 180.0:
        hue_diff = 360.0 - hue_diff
    h_score = max(0.0, 100.0 - hue_diff / 180.0 * 100.0)

    overall = (
        de_score * w["delta_e"]
        + l_score * w["lightness"]
        + c_score * w["chroma"]
        + h_score * w["hue"]
    )
    return MatchingScore(
        overall=overall,
        delta_e_score=de_score,
        lightness_score=l_score,
        chroma_score=c_score,
        hue_score=h_score,
        delta_e=distance,
    )


@dataclass(frozen=True, slots=True)
class FormulaComparison:
    """The same color pair measured with every ΔE formula."""
    cie76: float
    cie94: float
    cie2000: float

    def to_dict(self) -> dict:
        return {"cie76": self.cie76, "cie94": self.cie94, "cie2000": self.cie2000}


def compare_formulas(lab1: LabLike, lab2: LabLike) -> FormulaComparison:
    """ΔE76, ΔE94 (graphic arts, lab1 as reference) and ΔE00 of one pair."""
    lab1 = LabColor.coerce(lab1)
    lab2 = LabColor.coerce(lab2)
    return FormulaComparison(
        cie76=delta_e_76(lab1, lab2),
        cie94=delta_e_94(lab1, lab2),
        cie2000=delta_e_2000(lab1, lab2),
    )


# =============================================================================
# Season matching
# =============================================================================


@dataclass(frozen=True, slots=True)
class SeasonMatch:
    """
    Skin-tone fit of one season's palette.

    Attributes:
        season: The season the palette belongs to
        average_score: Mean skin-tone similarity score of the palette, 0-100
        best: Highest-scoring palette color (lowest ΔE00 on equal score)
        matches: Every palette color, best first
    """
    season: Season
    average_score: float
    best: ColorMatch
    matches: tuple[ColorMatch, ...]

    def to_dict(self) -> dict:
        return {
            "season": self.season.value,
            "average_score": self.average_score,
            "best": self.best.to_dict(),
            "matches": [m.to_dict() for m in self.matches],
        }


@dataclass(frozen=True, slots=True)
class SeasonMatching:
    """
    Result of season_matching.

    Attributes:
        best_season: Season with the highest average score
        confidence: Average score of best_season / 100
        seasons: One SeasonMatch per supplied season, in SEASON_PRIORITY order
    """
    best_season: Season
    confidence: float
    seasons: tuple[SeasonMatch, ...]

    def for_season(self, season: Season | str) -> SeasonMatch:
        season = Season.parse(season)
        for match in self.seasons:
            if match.season is season:
                return match
        raise KeyError(f"Season '{season.value}' was not matched")

    @property
    def average_scores(self) -> dict[str, float]:
        return {m.season.value: m.average_score for m in self.seasons}

    def to_dict(self) -> dict:
        return {
            "best_season": self.best_season.value,
            "confidence": self.confidence,
            "seasons": [m.to_dict() for m in self.seasons],
        }


def season_matching(
    skin: LabLike,
    season_colors: Mapping[Season | str, Sequence[LabLike]],
) -> SeasonMatching:
    """
    Rank seasonal palettes by how well their colors sit with a skin color.

    Each palette color is scored with ΔE00 against the skin color and the
    skin-tone similarity bands (95/85/70/50/30). A season's score is the
    mean over its palette; the best season has the highest mean, with ties
    going to the earlier season in SEASON_PRIORITY.

    Args:
        skin: Measured skin color
        season_colors: Palette colors keyed by season (Season or name)

    Returns:
        SeasonMatching with per-season averages and best matches

    Raises:
        InvalidColor: If the skin color or any palette color is invalid.
        ConfigurationError: If no season is given, a season name is unknown
            or a palette is empty.
    """
    skin = LabColor.coerce(skin)
    palettes = {}
    for key, colors in season_colors.items():
        season = Season.parse(key)
        if season in palettes:
            raise ConfigurationError(f"Season '{season.value}' given twice")
        palettes[season] = [LabColor.coerce(c) for c in colors]
        if not palettes[season]:
            raise ConfigurationError(f"Palette for '{season.value}' is empty")
    if not palettes:
        raise ConfigurationError("season_colors must name at least one season")

    seasons = []
    for season in SEASON_PRIORITY:
        if season not in palettes:
            continue
        matches = []
        for index, lab in enumerate(palettes[season]):
            distance = delta_e_2000(skin, lab)
            similarity = assess_similarity(distance, SimilarityContext.SKIN_TONE)
            matches.append(ColorMatch(index, lab, distance, similarity))
        matches.sort(key=lambda m: (-m.similarity.score, m.delta_e))
        average = sum(m.similarity.score for m in matches) / len(matches)
        seasons.append(SeasonMatch(season, average, matches[0], tuple(matches)))

    # max() keeps the first of equal averages, i.e. priority order
    best = max(seasons, key=lambda m: m.average_score)
    return SeasonMatching(best.season, best.average_score / 100.0, tuple(seasons))
