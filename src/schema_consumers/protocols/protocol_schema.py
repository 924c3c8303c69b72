# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definitions for the schema boundary.

Schemas and annotations are produced outside this package (builders,
reflection, the minimal ModelSchema shipped here). The registry and the
condition DSL only rely on the two read-only attributes defined below and
never construct or mutate schemas.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

__all__ = [
    "ProtocolAnnotation",
    "ProtocolSchema",
]


@runtime_checkable
class ProtocolAnnotation(Protocol):
    """A named, arbitrarily typed metadata value attached to a schema."""

    @property
    def name(self) -> str:
        """Annotation name. Several annotations on one schema may share it."""
        ...

    @property
    def value(self) -> object:
        """Untyped payload; its shape is a convention between producers and consumers."""
        ...


@runtime_checkable
class ProtocolSchema(Protocol):
    """An opaque, immutable descriptor of a data shape.

    Thread Safety:
        Schemas are shared between threads by the registry and must not be
        mutated once handed to it. The condition cache relies on schema
        identity, so mutating a schema in place would make cached matches
        stale.
    """

    @property
    def schema_type(self) -> str:
        """Discriminated kind of the schema (see EnumSchemaType)."""
        ...

    @property
    def annotations(self) -> Iterable[ProtocolAnnotation]:
        """Annotations attached to the schema, order irrelevant."""
        ...
