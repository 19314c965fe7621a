# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
Delivery runtime for Seasonkit.

Serialization of ClassificationResult for the report and UI layers:

1. Tool Output -- JSON payload for function-calling or transport
2. Context Block -- XML, JSON or Markdown block for templates

The delivery layer never modifies classification content.
"""

from seasonkit.runtime.serializers import (
    SerializerFormat,
    BlockFormat,
    to_context_block,
    to_tool_output,
)

__all__ = [
    "to_tool_output",
    "to_context_block",
    "SerializerFormat",
    "BlockFormat",
]
