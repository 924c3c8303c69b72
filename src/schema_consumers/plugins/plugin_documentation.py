# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Built-in schema documentation consumer.

Applies to every schema and describes it as a plain dict suitable for
rendering or serialization:

    {
        "type": "string",
        "path": "user.email",
        "annotations": {"format": ["email"], "description": ["Login address"]},
    }
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schema_consumers.conditions.condition_base import (
    iter_annotation_items,
    read_schema_type,
)
from schema_consumers.constants_consumer_purpose import PURPOSE_DOCUMENTATION
from schema_consumers.models.model_schema import schema_type_name
from schema_consumers.plugins.plugin_consumer_base import SchemaConsumerBase

if TYPE_CHECKING:
    from schema_consumers.models.model_consumer_result import ModelConsumerResult
    from schema_consumers.models.model_processing_context import (
        ModelProcessingContext,
    )


class SchemaDocumentationConsumer(SchemaConsumerBase):
    """Describes a schema's type, location and annotations."""

    consumer_name = "schema_documenter"
    consumer_purpose = PURPOSE_DOCUMENTATION
    description = "Describes schema type, path and annotations"
    tags = ("documentation",)
    result_kind = "documentation"
    result_type = "dict"

    def process_schema(self, context: ModelProcessingContext) -> ModelConsumerResult:
        annotations: dict[str, list[object]] = {}
        for name, value in iter_annotation_items(context.schema):
            annotations.setdefault(name, []).append(value)

        schema_type = read_schema_type(context.schema)
        return self.result(
            {
                "type": None if schema_type is None else schema_type_name(schema_type),
                "path": context.path_string(),
                "annotations": annotations,
            }
        )


__all__ = ["SchemaDocumentationConsumer"]
