# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Conditions on schema annotations.

Operator semantics for AnnotationCondition:
    equals:   annotation value has the same concrete type as the condition
              value and compares equal (``1 == True`` does not count).
    contains: both values are strings and the condition value is a substring.
    matches:  the condition value is a regular expression (string or compiled
              pattern) found anywhere in the annotation's string value.

Incompatible value types, invalid regular expressions and unknown operators
match nothing. They never raise.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from schema_consumers.conditions.condition_base import (
    SchemaCondition,
    annotation_name,
    iter_annotations,
)
from schema_consumers.enums import EnumConditionOperator

if TYPE_CHECKING:
    from schema_consumers.protocols.protocol_schema import ProtocolSchema


def _strict_equals(actual: object, expected: object) -> bool:
    if type(actual) is not type(expected):
        return False
    try:
        return bool(actual == expected)
    except (TypeError, ValueError):
        return False


def _contains(actual: object, expected: object) -> bool:
    return isinstance(actual, str) and isinstance(expected, str) and expected in actual


def _regex_matches(actual: object, pattern: object) -> bool:
    if not isinstance(actual, str):
        return False
    if isinstance(pattern, re.Pattern):
        return isinstance(pattern.pattern, str) and pattern.search(actual) is not None
    if not isinstance(pattern, str):
        return False
    try:
        return re.search(pattern, actual) is not None
    except re.error:
        return False


_OPERATORS = {
    EnumConditionOperator.EQUALS.value: _strict_equals,
    EnumConditionOperator.CONTAINS.value: _contains,
    EnumConditionOperator.MATCHES.value: _regex_matches,
}


@dataclass(frozen=True)
class HasAnnotationCondition(SchemaCondition):
    """Matches schemas carrying at least one annotation named ``name``."""

    name: str

    def matches(self, schema: ProtocolSchema | None) -> bool:
        return any(annotation_name(a) == self.name for a in iter_annotations(schema))

    def __str__(self) -> str:
        return f"HasAnn({self.name})"


@dataclass(frozen=True)
class AnnotationCondition(SchemaCondition):
    """Matches schemas with an annotation ``name`` satisfying ``operator`` against ``value``.

    All same-named annotations are scanned; the first satisfying one decides.
    """

    name: str
    value: object
    operator: EnumConditionOperator | str = EnumConditionOperator.EQUALS

    @property
    def operator_name(self) -> str:
        if isinstance(self.operator, Enum):
            return str(self.operator.value)
        return str(self.operator)

    def matches(self, schema: ProtocolSchema | None) -> bool:
        compare = _OPERATORS.get(self.operator_name)
        if compare is None:
            return False
        for annotation in iter_annotations(schema):
            if annotation_name(annotation) != self.name:
                continue
            if compare(getattr(annotation, "value", None), self.value):
                return True
        return False

    def __str__(self) -> str:
        shown = self.value.pattern if isinstance(self.value, re.Pattern) else self.value
        return f"Ann({self.name} {self.operator_name} {shown!r})"


__all__ = ["AnnotationCondition", "HasAnnotationCondition"]
