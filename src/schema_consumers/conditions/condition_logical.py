# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Logical combinators: AND, OR, NOT.

Children are evaluated in declaration order and evaluation stops at the
first deciding child. Conditions have no side effects, so the order is not
observable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from schema_consumers.conditions.condition_base import SchemaCondition

if TYPE_CHECKING:
    from schema_consumers.protocols.protocol_schema import ProtocolSchema


@dataclass(frozen=True)
class AndCondition(SchemaCondition):
    """Matches when every child matches; vacuously True with no children."""

    conditions: tuple[SchemaCondition, ...] = ()

    def matches(self, schema: ProtocolSchema | None) -> bool:
        return all(condition.matches(schema) for condition in self.conditions)

    def __str__(self) -> str:
        return "AND(" + ",".join(str(c) for c in self.conditions) + ")"


@dataclass(frozen=True)
class OrCondition(SchemaCondition):
    """Matches when at least one child matches; vacuously False with no children."""

    conditions: tuple[SchemaCondition, ...] = ()

    def matches(self, schema: ProtocolSchema | None) -> bool:
        return any(condition.matches(schema) for condition in self.conditions)

    def __str__(self) -> str:
        return "OR(" + ",".join(str(c) for c in self.conditions) + ")"


@dataclass(frozen=True)
class NotCondition(SchemaCondition):
    """Logical negation of a single condition."""

    condition: SchemaCondition

    def matches(self, schema: ProtocolSchema | None) -> bool:
        return not self.condition.matches(schema)

    def __str__(self) -> str:
        return f"NOT({self.condition})"


__all__ = ["AndCondition", "NotCondition", "OrCondition"]
