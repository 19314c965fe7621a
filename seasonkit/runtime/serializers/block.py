# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
Context block serializer for report and UI layers.

Formats a ClassificationResult as a structured block (XML, JSON, or Markdown)
that can be embedded in a report template or handed to a front end as-is.
"""

from __future__ import annotations

import json
from enum import Enum

from seasonkit.schema import ClassificationResult


class BlockFormat(Enum):
    """Block format options."""

    XML = "xml"
    JSON = "json"
    MARKDOWN = "markdown"


def to_context_block(
    result: ClassificationResult,
    *,
    format: BlockFormat = BlockFormat.XML,
    include_scores: bool = True,
    tag_name: str = "season_diagnosis",
) -> str:
    """Serialize a ClassificationResult as a context block.

    Args:
        result: The ClassificationResult to serialize.
        format: Block format (XML, JSON, or MARKDOWN).
        include_scores: Include the per-season probabilities.
        tag_name: XML/markdown tag name for the block.

    Returns:
        Formatted block string.

    Example (XML)::

        <season_diagnosis version="1.0" illuminant="D65">
          <season name="spring" subtype="warm_spring" confidence="100" distance_confidence="90.7"/>
          <lab L="67.000" a="9.000" b="16.000"/>
          <tone name="soft" confidence="0.95"/>
          <analysis temperature="very_warm" clarity="clear" depth="light" intensity="medium"/>
          <nearest_reference season="spring"/>
          <scores>
            <score season="spring" probability="0.333"/>
            ...
          </scores>
        </season_diagnosis>
    """
    if format == BlockFormat.XML:
        return _to_xml(result, include_scores, tag_name)
    elif format == BlockFormat.JSON:
        return _to_json(result, include_scores, tag_name)
    else:
        return _to_markdown(result, include_scores, tag_name)


def _to_xml(
    result: ClassificationResult,
    include_scores: bool,
    tag_name: str,
) -> str:
    """Generate XML block."""
    lines = [
        f'<{tag_name} version="{result.version}" illuminant="{result.illuminant}">'
    ]

    lines.append(
        f'  <season name="{result.season.value}" subtype="{result.subtype}" '
        f'confidence="{result.confidence:.0f}" '
        f'distance_confidence="{result.distance_confidence:.1f}"/>'
    )

    lab = result.lab
    lines.append(f'  <lab L="{lab.l:.3f}" a="{lab.a:.3f}" b="{lab.b:.3f}"/>')
    lines.append(
        f'  <tone name="{result.tone.tone.value}" '
        f'confidence="{result.tone.confidence:.2f}"/>'
    )

    an = result.analysis
    lines.append(
        f'  <analysis temperature="{an.temperature}" clarity="{an.clarity}" '
        f'depth="{an.depth}" intensity="{an.intensity}"/>'
    )
    lines.append(f'  <nearest_reference season="{result.nearest_reference.value}"/>')

    if include_scores:
        lines.append("  <scores>")
        for score in result.scores:
            lines.append(
                f'    <score season="{score.season.value}" '
                f'probability="{score.probability:.3f}"/>'
            )
        lines.append("  </scores>")

    for note in result.diagnostics:
        lines.append(f"  <note>{_escape(note)}</note>")

    lines.append(f"</{tag_name}>")
    return "\n".join(lines)


def _escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def _block_data(result: ClassificationResult, include_scores: bool) -> dict:
    data = result.to_dict()
    if not include_scores:
        data.pop("scores", None)
    return data


def _to_json(
    result: ClassificationResult,
    include_scores: bool,
    tag_name: str,
) -> str:
    """Generate JSON block with wrapper."""
    wrapped = {tag_name: _block_data(result, include_scores)}
    return json.dumps(wrapped, indent=2)


def _to_markdown(
    result: ClassificationResult,
    include_scores: bool,
    tag_name: str,
) -> str:
    """Generate markdown block with code fence."""
    lines = [
        f"<!-- {tag_name} -->",
        "```json",
        json.dumps(_block_data(result, include_scores), indent=2),
        "```",
        f"<!-- /{tag_name} -->",
    ]
    return "\n".join(lines)
