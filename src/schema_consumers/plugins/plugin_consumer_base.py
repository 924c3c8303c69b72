# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Base classes for consumer plugins.

This module provides SchemaConsumerBase and ValueConsumerBase, abstract base
classes for consumers that register with RegistryConsumer. They satisfy
ProtocolAnnotationConsumer and ProtocolValueConsumer respectively and derive
``name``, ``purpose``, ``applicable_schemas()`` and ``metadata()`` from class
attributes, leaving only the processing method to implement.

Contract:
    All consumers extending these base classes MUST:
    1. Return exactly one ModelConsumerResult or raise exactly one exception
    2. Treat the ModelProcessingContext as call-scoped (never retain it)
    3. Be safe for concurrent invocation with different contexts
    4. Change the context path only through ``context.path_segment()``

Example:
    ```python
    from schema_consumers.conditions import type_is
    from schema_consumers.plugins import ValueConsumerBase

    class UpperCaseConsumer(ValueConsumerBase):
        consumer_name = "upper_case"
        consumer_purpose = PURPOSE_FORMATTING
        condition = type_is("string")
        result_kind = "formatting"

        def process_value(self, context, value):
            return self.result(str(value).upper())
    ```

Thread Safety:
    Class attributes are shared configuration and must not be mutated after
    registration. Keep per-call state in locals or the context.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from schema_consumers.conditions import SchemaCondition, all_of
from schema_consumers.models.model_consumer_metadata import ModelConsumerMetadata
from schema_consumers.models.model_consumer_result import ModelConsumerResult
from schema_consumers.types import ConsumerPurpose

if TYPE_CHECKING:
    from schema_consumers.models.model_processing_context import (
        ModelProcessingContext,
    )


class ConsumerBase(ABC):
    """Shared identity, applicability and metadata for consumer plugins.

    Subclasses set the class attributes below; ``consumer_name`` and
    ``consumer_purpose`` are required (the registry rejects empty ones).
    """

    consumer_name: ClassVar[str] = ""
    consumer_purpose: ClassVar[ConsumerPurpose] = ConsumerPurpose("")
    description: ClassVar[str] = ""
    version: ClassVar[str] = "1.0.0"
    tags: ClassVar[tuple[str, ...]] = ()
    result_kind: ClassVar[str] = ""
    result_type: ClassVar[str] = ""
    condition: ClassVar[SchemaCondition] = all_of()

    @property
    def name(self) -> str:
        return self.consumer_name

    @property
    def purpose(self) -> ConsumerPurpose:
        return self.consumer_purpose

    def applicable_schemas(self) -> SchemaCondition:
        return self.condition

    def metadata(self) -> ModelConsumerMetadata:
        return ModelConsumerMetadata(
            name=self.consumer_name,
            purpose=self.consumer_purpose,
            description=self.description,
            version=self.version,
            tags=self.tags,
            result_kind=self.result_kind or self.consumer_purpose,
            result_type=self.result_type,
            extras={"condition": str(self.condition)},
        )

    def result(self, value: object) -> ModelConsumerResult:
        """Wrap ``value`` in a result tagged with this consumer's result kind."""
        return ModelConsumerResult(
            kind=self.result_kind or self.consumer_purpose, value=value
        )


class SchemaConsumerBase(ConsumerBase):
    """Base class for schema-level (annotation) consumers."""

    @abstractmethod
    def process_schema(self, context: ModelProcessingContext) -> ModelConsumerResult:
        """Process ``context.schema`` and return exactly one result."""
        ...


class ValueConsumerBase(ConsumerBase):
    """Base class for value-level consumers."""

    @abstractmethod
    def process_value(
        self, context: ModelProcessingContext, value: object
    ) -> ModelConsumerResult:
        """Process ``value`` described by ``context.schema``."""
        ...


__all__ = ["ConsumerBase", "SchemaConsumerBase", "ValueConsumerBase"]
