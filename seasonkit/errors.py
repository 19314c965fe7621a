# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
Error types for Seasonkit.

Degenerate math (zero chroma, zero max-min spread) is not an error: those
cases return documented defaults (hue 0, saturation 0, ΔH 0) and never
surface here.
"""

from __future__ import annotations


class SeasonkitError(Exception):
    """Base class for all Seasonkit errors."""


class InvalidColor(SeasonkitError, ValueError):
    """A color field is outside its documented domain.

    Raised before any computation happens; no partial or clamped result
    is ever returned alongside it.
    """


class ConfigurationError(SeasonkitError, LookupError):
    """Unknown illuminant, season, tone, or an invalid engine setting."""


class InvalidResult(SeasonkitError, ValueError):
    """A result field (confidence, probability, score coverage) is out of bounds."""
