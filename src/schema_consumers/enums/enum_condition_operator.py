# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Comparison operators understood by annotation conditions."""

from enum import Enum


class EnumConditionOperator(str, Enum):
    """Operator applied between an annotation value and a condition value.

    EQUALS: Strict equality (same concrete type and ``==``).
    CONTAINS: Substring test; both sides must be strings.
    MATCHES: Condition value is a regular expression searched in the
        annotation's string value.
    """

    EQUALS = "equals"
    CONTAINS = "contains"
    MATCHES = "matches"
