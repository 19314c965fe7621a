# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
ClassificationResult v1.0: canonical schema for a season diagnosis.

Design principles:
- Immutable: All types are frozen dataclasses; mappings are exposed as copies
- Deterministic: Same input and configuration give an equal result
- Owned by the caller: results share no mutable state; a cached classifier
  may hand back the same frozen object for a repeated input
- Serializable: JSON-ready for the report / UI layer

Two confidence signals are carried side by side and never merged:
- confidence: range fit against the winning season's calibrated Lab range (50-100)
- distance_confidence: Delta E to the nearest season reference point (0-100)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from seasonkit.errors import ConfigurationError, InvalidColor, InvalidResult
from seasonkit.schema.color_types import LabColor


SCHEMA_VERSION = "1.0"


# =============================================================================
# Enumerations
# =============================================================================


class Season(Enum):
    """The four personal-color seasons."""
    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"

    @classmethod
    def parse(cls, value: str | Season) -> Season:
        """Look up a season by value; unknown names raise ConfigurationError."""
        if isinstance(value, Season):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigurationError(f"Unknown season {value!r}") from None


# Tie-break order when two seasons share the top probability. The order is
# arbitrary (inherited from the calibration tables), kept explicit here.
SEASON_PRIORITY: tuple[Season, ...] = (
    Season.SPRING,
    Season.SUMMER,
    Season.AUTUMN,
    Season.WINTER,
)


class PCCSTone(Enum):
    """PCCS tone categories (9 chromatic tones + 3 greys)."""
    VIVID = "vivid"
    BRIGHT = "bright"
    STRONG = "strong"
    DEEP = "deep"
    PALE = "pale"
    LIGHT = "light"
    SOFT = "soft"
    DULL = "dull"
    DARK = "dark"
    LIGHT_GREY = "light_grey"
    MEDIUM_GREY = "medium_grey"
    DARK_GREY = "dark_grey"

    @property
    def is_grey(self) -> bool:
        return self in (PCCSTone.LIGHT_GREY, PCCSTone.MEDIUM_GREY, PCCSTone.DARK_GREY)

    @classmethod
    def parse(cls, value: str | PCCSTone) -> PCCSTone:
        """Look up a tone by value; unknown names raise ConfigurationError."""
        if isinstance(value, PCCSTone):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigurationError(f"Unknown PCCS tone {value!r}") from None


# =============================================================================
# Tone Result
# =============================================================================


@dataclass(frozen=True, slots=True)
class ToneResult:
    """
    Output of PCCS tone classification.

    Attributes:
        tone: Winning tone
        confidence: 0.0-1.0 (capped at 0.95 for chromatic tones)
        scores: (tone, score) pairs for every tone that was scored, 0-110
    """
    tone: PCCSTone
    confidence: float
    scores: tuple[tuple[PCCSTone, float], ...] = ()

    def __post_init__(self) -> None:
        """Validate confidence is in range."""
        if not 0.0 <= self.confidence <= 1.0:
            raise InvalidResult(f"Confidence must be 0-1, got {self.confidence}")

    @property
    def score_map(self) -> dict[str, float]:
        """Scores keyed by tone name (fresh dict)."""
        return {tone.value: score for tone, score in self.scores}

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "tone": self.tone.value,
            "confidence": self.confidence,
            "scores": self.score_map,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ToneResult:
        """Deserialize from dictionary."""
        return cls(
            tone=PCCSTone.parse(data["tone"]),
            confidence=data["confidence"],
            scores=tuple(
                (PCCSTone.parse(name), score)
                for name, score in data.get("scores", {}).items()
            ),
        )


# =============================================================================
# Season Scores and Analysis
# =============================================================================


@dataclass(frozen=True, slots=True)
class SeasonScore:
    """
    Score of one season.

    Attributes:
        season: The season
        raw: Un-normalized total of all scoring signals
        probability: Normalized share of the total (0.0-1.0)
    """
    season: Season
    raw: float
    probability: float

    def __post_init__(self) -> None:
        """Validate probability is in range."""
        if not 0.0 <= self.probability <= 1.0:
            raise InvalidResult(f"Probability must be 0-1, got {self.probability}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "season": self.season.value,
            "raw": self.raw,
            "probability": self.probability,
        }

    @classmethod
    def from_dict(cls, data: dict) -> SeasonScore:
        """Deserialize from dictionary."""
        return cls(
            season=Season.parse(data["season"]),
            raw=data["raw"],
            probability=data["probability"],
        )


@dataclass(frozen=True, slots=True)
class SeasonAnalysis:
    """
    Descriptive labels for the analyzed color.

    Attributes:
        temperature: very_warm / warm / neutral / cool / very_cool (from b - a)
        clarity: very_clear / clear / soft / muted / very_muted (from chroma)
        depth: very_light / light / medium / deep / very_deep (from L)
        intensity: high / medium / low / very_low (from chroma * L / 100)
        warmth: b - a
        chroma: sqrt(a² + b²)
        hue: atan2(b, a) in degrees [0, 360)
    """
    temperature: str
    clarity: str
    depth: str
    intensity: str
    warmth: float
    chroma: float
    hue: float

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "temperature": self.temperature,
            "clarity": self.clarity,
            "depth": self.depth,
            "intensity": self.intensity,
            "warmth": self.warmth,
            "chroma": self.chroma,
            "hue": self.hue,
        }

    @classmethod
    def from_dict(cls, data: dict) -> SeasonAnalysis:
        """Deserialize from dictionary."""
        return cls(
            temperature=data["temperature"],
            clarity=data["clarity"],
            depth=data["depth"],
            intensity=data["intensity"],
            warmth=data["warmth"],
            chroma=data["chroma"],
            hue=data["hue"],
        )


# =============================================================================
# Top-Level Result
# =============================================================================


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """
    Complete season diagnosis for one color sample.

    Attributes:
        season: Winning season
        subtype: One of the three subtypes of the winning season (e.g. "deep_winter")
        confidence: Range-fit confidence, 50-100
        distance_confidence: Distance-based confidence, 0-100
        scores: One SeasonScore per season, in SEASON_PRIORITY order
        analysis: Temperature / clarity / depth / intensity labels
        tone: PCCS tone used for the tone-to-season signal
        lab: The (corrected) Lab color that was classified
        nearest_reference: Season whose reference point is closest to lab
        illuminant: Name of the illuminant used for Lab <-> RGB rendering
        diagnostics: Caller-visible notes (substitutions, fallbacks)
        version: Schema version
    """
    season: Season
    subtype: str
    confidence: float
    distance_confidence: float
    scores: tuple[SeasonScore, ...]
    analysis: SeasonAnalysis
    tone: ToneResult
    lab: LabColor
    nearest_reference: Season
    illuminant: str = "D65"
    diagnostics: tuple[str, ...] = ()
    version: str = field(default=SCHEMA_VERSION)

    def __post_init__(self) -> None:
        """Validate result structure."""
        if not 0.0 <= self.confidence <= 100.0:
            raise InvalidResult(f"Confidence must be 0-100, got {self.confidence}")
        if not 0.0 <= self.distance_confidence <= 100.0:
            raise InvalidResult(
                f"Distance confidence must be 0-100, got {self.distance_confidence}"
            )
        seasons = tuple(s.season for s in self.scores)
        if sorted(s.value for s in seasons) != sorted(s.value for s in Season):
            raise InvalidResult(f"Scores must cover every season once, got {seasons}")

    @property
    def per_season_scores(self) -> dict[str, float]:
        """Probabilities keyed by season name (fresh dict, sums to ~1.0)."""
        return {s.season.value: s.probability for s in self.scores}

    @property
    def label(self) -> str:
        """Subtype label, e.g. "bright_spring"."""
        return self.subtype

    def score_for(self, season: Season | str) -> SeasonScore:
        """Get the score entry of one season."""
        season = Season.parse(season)
        for score in self.scores:
            if score.season is season:
                return score
        raise KeyError(f"No score for season '{season.value}'")

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        result = {
            "version": self.version,
            "season": self.season.value,
            "subtype": self.subtype,
            "confidence": self.confidence,
            "distance_confidence": self.distance_confidence,
            "scores": [s.to_dict() for s in self.scores],
            "analysis": self.analysis.to_dict(),
            "tone": self.tone.to_dict(),
            "lab": self.lab.to_dict(),
            "nearest_reference": self.nearest_reference.value,
            "illuminant": self.illuminant,
        }
        if self.diagnostics:
            result["diagnostics"] = list(self.diagnostics)
        return result

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> ClassificationResult:
        """Deserialize from dictionary."""
        try:
            lab = LabColor.from_dict(data["lab"])
        except KeyError as exc:
            raise InvalidColor(f"Missing Lab field {exc}") from None
        return cls(
            version=data.get("version", SCHEMA_VERSION),
            season=Season.parse(data["season"]),
            subtype=data["subtype"],
            confidence=data["confidence"],
            distance_confidence=data["distance_confidence"],
            scores=tuple(SeasonScore.from_dict(s) for s in data["scores"]),
            analysis=SeasonAnalysis.from_dict(data["analysis"]),
            tone=ToneResult.from_dict(data["tone"]),
            lab=lab,
            nearest_reference=Season.parse(data["nearest_reference"]),
            illuminant=data.get("illuminant", "D65"),
            diagnostics=tuple(data.get("diagnostics", ())),
        )

    @classmethod
    def from_json(cls, json_str: str) -> ClassificationResult:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
