# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Conventional consumer purposes.

These are the purposes shipped consumers use. They are conventions only;
callers may register consumers under any other purpose string.
"""

from __future__ import annotations

from schema_consumers.types import ConsumerPurpose

PURPOSE_VALIDATION = ConsumerPurpose("validation")
PURPOSE_FORMATTING = ConsumerPurpose("formatting")
PURPOSE_GENERATION = ConsumerPurpose("generation")
PURPOSE_DOCUMENTATION = ConsumerPurpose("documentation")
PURPOSE_TRANSFORM = ConsumerPurpose("transform")
PURPOSE_ANALYSIS = ConsumerPurpose("analysis")

__all__ = [
    "PURPOSE_ANALYSIS",
    "PURPOSE_DOCUMENTATION",
    "PURPOSE_FORMATTING",
    "PURPOSE_GENERATION",
    "PURPOSE_TRANSFORM",
    "PURPOSE_VALIDATION",
]
