# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
Serializers for ClassificationResult delivery.

Each serializer formats a ClassificationResult for a specific consumer.
All serializers preserve the result exactly -- no modification or inference.
"""

from seasonkit.runtime.serializers.base import SerializerFormat
from seasonkit.runtime.serializers.block import to_context_block, BlockFormat
from seasonkit.runtime.serializers.tool import to_tool_output

__all__ = [
    "SerializerFormat",
    "BlockFormat",
    "to_tool_output",
    "to_context_block",
]
