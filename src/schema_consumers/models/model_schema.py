# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Minimal schema model.

Schema construction belongs to external builders; this frozen model is the
smallest thing that satisfies ProtocolSchema so the registry can be used
(and tested) without one.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from schema_consumers.enums import EnumSchemaType
from schema_consumers.models.model_annotation import ModelAnnotation


def schema_type_name(schema_type: object) -> str:
    """Return the plain string form of a schema type (enum member or str)."""
    if isinstance(schema_type, Enum):
        return str(schema_type.value)
    return str(schema_type)


class ModelSchema(BaseModel):
    """Immutable schema descriptor: a type tag plus annotations.

    Note:
        The registry caches condition matches by schema *identity*. Two
        ModelSchema instances with equal fields compare equal here but are
        still separate cache entries.

    Example:
        >>> schema = ModelSchema(
        ...     schema_type=EnumSchemaType.STRING,
        ...     annotations=(ModelAnnotation(name="format", value="email"),),
        ... )
        >>> schema.get_annotations("format")[0].value
        'email'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    schema_type: EnumSchemaType | str = Field(description="Schema kind")
    annotations: tuple[ModelAnnotation, ...] = Field(
        default=(),
        description="Annotations attached to the schema",
    )

    def get_annotations(self, name: str) -> list[ModelAnnotation]:
        """Return every annotation with the given name."""
        return [a for a in self.annotations if a.name == name]

    def get_annotation_value(self, name: str, default: object = None) -> object:
        """Return the value of the first annotation named ``name``."""
        for annotation in self.annotations:
            if annotation.name == name:
                return annotation.value
        return default

    def with_annotation(self, name: str, value: object) -> ModelSchema:
        """Return a new schema with an extra annotation appended."""
        return ModelSchema(
            schema_type=self.schema_type,
            annotations=(*self.annotations, ModelAnnotation(name=name, value=value)),
        )

    @classmethod
    def of(cls, schema_type: EnumSchemaType | str, **annotations: object) -> ModelSchema:
        """Build a schema from keyword annotations.

        Example:
            >>> ModelSchema.of("string", format="email", minLength=3)
        """
        return cls(
            schema_type=schema_type,
            annotations=tuple(
                ModelAnnotation(name=name, value=value)
                for name, value in annotations.items()
            ),
        )


__all__ = ["ModelSchema", "schema_type_name"]
