# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for schema applicability conditions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from schema_consumers.protocols.protocol_schema import ProtocolSchema

__all__ = ["ProtocolSchemaCondition"]


@runtime_checkable
class ProtocolSchemaCondition(Protocol):
    """A pure boolean predicate over a schema's type and annotations.

    Contract:
        - ``matches`` is deterministic and total: it never raises, and returns
          False for None schemas or schemas it cannot inspect.
        - ``__str__`` is a stable rendering for logs, never used for equality.
    """

    def matches(self, schema: ProtocolSchema | None) -> bool:
        """Return True when the schema satisfies this condition."""
        ...
