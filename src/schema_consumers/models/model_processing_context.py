# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Per-call processing context handed to consumers.

A context is created for every registry call and is never retained by the
registry or by consumers. Its traversal path follows a stack discipline:
segments are pushed with ``path_segment()`` and are always popped when the
block exits, including on exceptions.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from schema_consumers.errors.error_consumer_registry import format_path

if TYPE_CHECKING:
    from schema_consumers.protocols.protocol_schema import ProtocolSchema
    from schema_consumers.types import ConsumerPurpose


@dataclass
class ModelProcessingContext:
    """Carrier of the current schema, path, parent, value and options.

    Attributes:
        schema: Schema currently being processed
        parent: Immediate parent schema (None for the root)
        value: Runtime value being processed (None when processing a schema only)
        purposes: Purposes requested by ``RegistryConsumer.process_with_context``
        options: Free-form caller-supplied options for consumers
        path: Current traversal path; read it freely, change it only
            through ``path_segment()``

    Example:
        >>> context = ModelProcessingContext(schema=user_schema)
        >>> with context.path_segment("email"):
        ...     context.path_string()
        'email'
        >>> context.path_string()
        'root'
    """

    schema: ProtocolSchema | None = None
    parent: ProtocolSchema | None = None
    value: object = None
    purposes: list[ConsumerPurpose] = field(default_factory=list)
    options: dict[str, object] = field(default_factory=dict)
    _path: list[str] = field(default_factory=list, init=False, repr=False)

    @property
    def path(self) -> tuple[str, ...]:
        """Snapshot of the current traversal path."""
        return tuple(self._path)

    @contextmanager
    def path_segment(self, segment: str) -> Iterator[ModelProcessingContext]:
        """Push ``segment`` onto the path for the duration of the block."""
        self._path.append(segment)
        try:
            yield self
        finally:
            self._path.pop()

    def path_string(self) -> str:
        """Dot-joined path, or ``root`` when the path is empty."""
        return format_path(self._path)

    def child(
        self,
        segment: str,
        schema: ProtocolSchema,
        value: object = None,
    ) -> ModelProcessingContext:
        """Create a context for a nested schema.

        The child's path extends this context's path with ``segment`` and its
        parent is this context's schema. Purposes and options are shared by
        copy, so the child cannot alter this context.
        """
        child_context = ModelProcessingContext(
            schema=schema,
            parent=self.schema,
            value=value,
            purposes=list(self.purposes),
            options=dict(self.options),
        )
        child_context._path = [*self._path, segment]
        return child_context


__all__ = ["ModelProcessingContext"]
