# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
Tool output serializer.

Formats a ClassificationResult as the JSON payload of a
``diagnose_season`` call, for transport to the report / UI layer or as a
function-call result.
"""

from __future__ import annotations

import json

from seasonkit.measure.colorspace import lab_to_rgb
from seasonkit.runtime.serializers.base import SerializerFormat
from seasonkit.schema import ClassificationResult


def to_tool_output(
    result: ClassificationResult,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    compact: bool = False,
    include_hex: bool = False,
    sample_id: str | None = None,
) -> str:
    """Serialize a ClassificationResult as tool output JSON.

    Args:
        result: The ClassificationResult to serialize.
        format: Output format (JSON or JSON_PRETTY).
        compact: Minimal representation: label, both confidences, compact
            Lab and rounded probabilities.
        include_hex: Include the sRGB hex rendering of the sample.
        sample_id: Optional sample identifier (e.g. "left_cheek").

    Returns:
        JSON string suitable for tool output.

    Example (compact=True)::

        {
          "tool": "seasonkit_season_diagnosis",
          "season": "spring/warm_spring",
          "confidence": 100,
          "distance_confidence": 90.7,
          "lab": "L67.0/a9.0/b16.0",
          "scores": { "spring": 0.33, "summer": 0.21, "autumn": 0.32, "winter": 0.14 }
        }
    """
    data = _build_tool_data(
        result,
        compact=compact,
        include_hex=include_hex,
        sample_id=sample_id,
    )

    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    else:
        return json.dumps(data, separators=(",", ":"))


def _format_lab(result: ClassificationResult) -> str:
    """Format as compact Lab string."""
    lab = result.lab
    return f"L{lab.l:.1f}/a{lab.a:.1f}/b{lab.b:.1f}"


def _sample_hex(result: ClassificationResult) -> str:
    return lab_to_rgb(result.lab, result.illuminant).hex


def _build_tool_data(
    result: ClassificationResult,
    compact: bool = False,
    include_hex: bool = False,
    sample_id: str | None = None,
) -> dict:
    """Build the tool output data structure."""
    data: dict = {
        "tool": "seasonkit_season_diagnosis",
    }

    if sample_id:
        data["sample_id"] = sample_id

    if compact:
        data["season"] = f"{result.season.value}/{result.subtype}"
        data["confidence"] = round(result.confidence)
        data["distance_confidence"] = round(result.distance_confidence, 1)
        data["scores"] = {
            name: round(p, 2) for name, p in result.per_season_scores.items()
        }
        data["lab"] = _format_lab(result)
        if include_hex:
            data["hex"] = _sample_hex(result)
        if result.diagnostics:
            data["diagnostics"] = list(result.diagnostics)
        return data

    data.update(result.to_dict())
    if include_hex:
        data["hex"] = _sample_hex(result)
    return data
