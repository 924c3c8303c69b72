# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definitions for schema-level and value-level consumers.

Consumers declare a purpose (what they do) and an applicability condition
(which schemas they handle); the registry selects and invokes them.

There are two distinct contracts rather than one generalized interface:

**Annotation consumers** (ProtocolAnnotationConsumer):
    Operate purely on schema metadata, e.g. documentation or code generation.

**Value consumers** (ProtocolValueConsumer):
    Operate on a runtime value paired with its schema, e.g. validation or
    formatting.

Contract shared by both:
    - Processing yields exactly one ModelConsumerResult or raises exactly one
      exception. The registry wraps the exception in ConsumerError and never
      inspects its type.
    - Implementations are invoked concurrently with different contexts and
      must be stateless or independently synchronized.
    - The ModelProcessingContext is call-scoped and must not be retained.

Example Usage:
    ```python
    from schema_consumers.conditions import all_of, has_annotation, type_is
    from schema_consumers.models import ModelConsumerMetadata, ModelConsumerResult

    class EmailFormatChecker:
        @property
        def name(self) -> str:
            return "email_format_checker"

        @property
        def purpose(self) -> str:
            return "validation"

        def applicable_schemas(self) -> SchemaCondition:
            return all_of(type_is("string"), has_annotation("format"))

        def process_value(
            self, context: ModelProcessingContext, value: object
        ) -> ModelConsumerResult:
            return ModelConsumerResult(kind="validation", value="@" in str(value))

        def metadata(self) -> ModelConsumerMetadata:
            return ModelConsumerMetadata(name=self.name, purpose=self.purpose)

    consumer: ProtocolValueConsumer = EmailFormatChecker()
    ```

Note:
    Method bodies use ``...`` per PEP 544; these are structural interfaces,
    not abstract base classes. See plugins/plugin_consumer_base.py for ABCs
    that fill in ``metadata()`` from class attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from schema_consumers.models.model_consumer_metadata import ModelConsumerMetadata
    from schema_consumers.models.model_consumer_result import ModelConsumerResult
    from schema_consumers.models.model_processing_context import (
        ModelProcessingContext,
    )
    from schema_consumers.protocols.protocol_schema_condition import (
        ProtocolSchemaCondition,
    )
    from schema_consumers.types import ConsumerPurpose

__all__ = [
    "ProtocolAnnotationConsumer",
    "ProtocolValueConsumer",
]


@runtime_checkable
class ProtocolAnnotationConsumer(Protocol):
    """Schema-level consumer: processes schemas matching ``applicable_schemas()``."""

    @property
    def name(self) -> str:
        """Unique name within the schema-consumer namespace."""
        ...

    @property
    def purpose(self) -> ConsumerPurpose:
        """Purpose this consumer is indexed under."""
        ...

    def applicable_schemas(self) -> ProtocolSchemaCondition:
        """Declarative applicability filter."""
        ...

    def process_schema(self, context: ModelProcessingContext) -> ModelConsumerResult:
        """Process ``context.schema`` and return exactly one result."""
        ...

    def metadata(self) -> ModelConsumerMetadata:
        """Descriptive information for discovery and documentation."""
        ...


@runtime_checkable
class ProtocolValueConsumer(Protocol):
    """Value-level consumer: processes a runtime value paired with its schema."""

    @property
    def name(self) -> str:
        """Unique name within the value-consumer namespace."""
        ...

    @property
    def purpose(self) -> ConsumerPurpose:
        """Purpose this consumer is indexed under."""
        ...

    def applicable_schemas(self) -> ProtocolSchemaCondition:
        """Declarative applicability filter, evaluated against the value's schema."""
        ...

    def process_value(
        self, context: ModelProcessingContext, value: object
    ) -> ModelConsumerResult:
        """Process ``value`` (described by ``context.schema``) and return one result."""
        ...

    def metadata(self) -> ModelConsumerMetadata:
        """Descriptive information for discovery and documentation."""
        ...
