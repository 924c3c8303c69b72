# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Base class for schema conditions and schema inspection helpers.

Conditions never raise. The helpers below read a schema defensively so that
None, foreign objects and misbehaving schema implementations all evaluate to
"no type" / "no annotations" instead of propagating an error into dispatch.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from schema_consumers.protocols.protocol_schema import (
        ProtocolAnnotation,
        ProtocolSchema,
    )


def read_schema_type(schema: ProtocolSchema | None) -> object | None:
    """Return ``schema.schema_type`` or None if it cannot be read."""
    if schema is None:
        return None
    try:
        return getattr(schema, "schema_type", None)
    except Exception:
        return None


def iter_annotations(schema: ProtocolSchema | None) -> Iterator[ProtocolAnnotation]:
    """Yield the schema's annotations, or nothing if they cannot be read."""
    if schema is None:
        return
    try:
        annotations = list(getattr(schema, "annotations", None) or ())
    except Exception:
        return
    yield from annotations


def annotation_name(annotation: object) -> str | None:
    name = getattr(annotation, "name", None)
    return name if isinstance(name, str) else None


def iter_annotation_items(
    schema: ProtocolSchema | None,
) -> Iterator[tuple[str, object]]:
    """Yield ``(name, value)`` for every named annotation on ``schema``."""
    for annotation in iter_annotations(schema):
        name = annotation_name(annotation)
        if name is not None:
            yield name, getattr(annotation, "value", None)


class SchemaCondition(ABC):
    """Immutable boolean predicate over a schema.

    Subclasses are frozen dataclasses, so conditions compare structurally and
    can be shared freely between consumers and threads. ``str()`` gives a
    stable rendering for logs only.

    Conditions compose with operators:
        >>> cond = type_is("string") & has_annotation("format")
        >>> cond = type_is("number") | type_is("integer")
        >>> cond = ~has_annotation("deprecated")
    """

    @abstractmethod
    def matches(self, schema: ProtocolSchema | None) -> bool:
        """Return True when ``schema`` satisfies the condition. Never raises."""

    def __and__(self, other: SchemaCondition) -> SchemaCondition:
        from schema_consumers.conditions.condition_logical import AndCondition

        return AndCondition(
            conditions=(*_flatten(self, AndCondition), *_flatten(other, AndCondition))
        )

    def __or__(self, other: SchemaCondition) -> SchemaCondition:
        from schema_consumers.conditions.condition_logical import OrCondition

        return OrCondition(
            conditions=(*_flatten(self, OrCondition), *_flatten(other, OrCondition))
        )

    def __invert__(self) -> SchemaCondition:
        from schema_consumers.conditions.condition_logical import NotCondition

        return NotCondition(condition=self)


def _flatten(condition: SchemaCondition, kind: type) -> tuple[SchemaCondition, ...]:
    if isinstance(condition, kind):
        return tuple(getattr(condition, "conditions", ()))
    return (condition,)


__all__ = [
    "SchemaCondition",
    "annotation_name",
    "iter_annotation_items",
    "iter_annotations",
    "read_schema_type",
]
