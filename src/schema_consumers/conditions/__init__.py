# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Schema Condition DSL.

Consumers declare which schemas they apply to with an immutable predicate
tree built from the helpers below:

    ```python
    from schema_consumers.conditions import all_of, annotation, has_annotation, type_is

    # String schemas that carry a "format" annotation
    cond = all_of(type_is("string"), has_annotation("format"))

    # Same thing with operators
    cond = type_is("string") & has_annotation("format")

    # Annotation value tests
    annotation("format", "email")                       # strict equality
    annotation("description", "deprecated", "contains")
    annotation("format", "^(email|uri)$", "matches")
    ```

Evaluation is pure, deterministic and total: ``matches()`` never raises and
returns False for None or unreadable schemas, except that an empty
``all_of()`` is vacuously True (an empty ``any_of()`` is False).
"""

from __future__ import annotations

from schema_consumers.conditions.condition_annotation import (
    AnnotationCondition,
    HasAnnotationCondition,
)
from schema_consumers.conditions.condition_base import SchemaCondition
from schema_consumers.conditions.condition_logical import (
    AndCondition,
    NotCondition,
    OrCondition,
)
from schema_consumers.conditions.condition_type import AnyTypeCondition, TypeCondition
from schema_consumers.enums import EnumConditionOperator, EnumSchemaType


def all_of(*conditions: SchemaCondition) -> AndCondition:
    """Match when every condition matches (True for no conditions)."""
    return AndCondition(conditions=tuple(conditions))


def any_of(*conditions: SchemaCondition) -> OrCondition:
    """Match when at least one condition matches (False for no conditions)."""
    return OrCondition(conditions=tuple(conditions))


def negate(condition: SchemaCondition) -> NotCondition:
    return NotCondition(condition=condition)


def type_is(schema_type: EnumSchemaType | str) -> TypeCondition:
    return TypeCondition(schema_type=schema_type)


def type_in(*schema_types: EnumSchemaType | str) -> AnyTypeCondition:
    return AnyTypeCondition(schema_types=tuple(schema_types))


def has_annotation(name: str) -> HasAnnotationCondition:
    return HasAnnotationCondition(name=name)


def annotation(
    name: str,
    value: object,
    operator: EnumConditionOperator | str = EnumConditionOperator.EQUALS,
) -> AnnotationCondition:
    """Match when an annotation ``name`` satisfies ``operator`` against ``value``."""
    return AnnotationCondition(name=name, value=value, operator=operator)


__all__: list[str] = [
    # Base
    "SchemaCondition",
    # Condition classes
    "AndCondition",
    "AnnotationCondition",
    "AnyTypeCondition",
    "HasAnnotationCondition",
    "NotCondition",
    "OrCondition",
    "TypeCondition",
    # DSL helpers
    "all_of",
    "annotation",
    "any_of",
    "has_annotation",
    "negate",
    "type_in",
    "type_is",
]
