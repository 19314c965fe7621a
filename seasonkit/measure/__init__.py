# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
Measurement core for Seasonkit.

Color space conversion, perceptual color difference and PCCS tone
classification. All operations are pure and deterministic.
"""

from seasonkit.measure.colorspace import (
    ColorSpaceConverter,
    ColorTemperature,
    RGBInput,
    adapt_xyz,
    chromatic_adaptation_matrix,
    color_temperature,
    estimate_kelvin,
    hex_to_rgb,
    hsl_to_rgb,
    lab_to_lch,
    lab_to_rgb,
    lab_to_xyz,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    rgb_to_xyz,
    srgb_uint8_to_lab,
    to_rgb,
    xyz_to_lab,
    xyz_to_rgb,
)
from seasonkit.measure.delta_e import (
    ColorMatch,
    DeltaEFormula,
    FormulaComparison,
    MatchingScore,
    SeasonMatch,
    SeasonMatching,
    Similarity,
    SimilarityContext,
    assess_similarity,
    compare_formulas,
    delta_e,
    delta_e_76,
    delta_e_76_batch,
    delta_e_94,
    delta_e_2000,
    delta_e_2000_batch,
    find_closest,
    matching_score,
    season_matching,
    simplified_distance,
)
from seasonkit.measure.tone import classify_tone, tone_for_lab, tone_for_rgb

__all__ = [
    # Conversion
    "ColorSpaceConverter",
    "rgb_to_xyz",
    "xyz_to_lab",
    "lab_to_xyz",
    "xyz_to_rgb",
    "rgb_to_lab",
    "lab_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hex",
    "hex_to_rgb",
    "lab_to_lch",
    "srgb_uint8_to_lab",
    "to_rgb",
    "RGBInput",
    "adapt_xyz",
    "chromatic_adaptation_matrix",
    # Temperature
    "ColorTemperature",
    "color_temperature",
    "estimate_kelvin",
    # Color difference
    "DeltaEFormula",
    "delta_e",
    "delta_e_76",
    "delta_e_94",
    "delta_e_2000",
    "simplified_distance",
    "FormulaComparison",
    "compare_formulas",
    "delta_e_76_batch",
    "delta_e_2000_batch",
    "Similarity",
    "SimilarityContext",
    "assess_similarity",
    "ColorMatch",
    "find_closest",
    "MatchingScore",
    "matching_score",
    "SeasonMatch",
    "SeasonMatching",
    "season_matching",
    # Tone
    "classify_tone",
    "tone_for_rgb",
    "tone_for_lab",
]
