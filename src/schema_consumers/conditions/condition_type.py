# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Conditions on the schema's type tag."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from schema_consumers.conditions.condition_base import SchemaCondition, read_schema_type
from schema_consumers.enums import EnumSchemaType
from schema_consumers.models.model_schema import schema_type_name

if TYPE_CHECKING:
    from schema_consumers.protocols.protocol_schema import ProtocolSchema


@dataclass(frozen=True)
class TypeCondition(SchemaCondition):
    """Matches schemas whose type equals ``schema_type``."""

    schema_type: EnumSchemaType | str

    def matches(self, schema: ProtocolSchema | None) -> bool:
        actual = read_schema_type(schema)
        if actual is None:
            return False
        return schema_type_name(actual) == schema_type_name(self.schema_type)

    def __str__(self) -> str:
        return f"Type({schema_type_name(self.schema_type)})"


@dataclass(frozen=True)
class AnyTypeCondition(SchemaCondition):
    """Matches schemas whose type is one of ``schema_types``."""

    schema_types: tuple[EnumSchemaType | str, ...] = ()

    def matches(self, schema: ProtocolSchema | None) -> bool:
        actual = read_schema_type(schema)
        if actual is None:
            return False
        name = schema_type_name(actual)
        return any(name == schema_type_name(t) for t in self.schema_types)

    def __str__(self) -> str:
        return "AnyType(" + ",".join(schema_type_name(t) for t in self.schema_types) + ")"


__all__ = ["AnyTypeCondition", "TypeCondition"]
