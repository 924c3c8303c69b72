# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pydantic models and data carriers for schema_consumers."""

from schema_consumers.models.model_annotation import ModelAnnotation
from schema_consumers.models.model_condition_cache_info import ModelConditionCacheInfo
from schema_consumers.models.model_consumer_metadata import ModelConsumerMetadata
from schema_consumers.models.model_consumer_result import ModelConsumerResult
from schema_consumers.models.model_processing_context import ModelProcessingContext
from schema_consumers.models.model_processing_result import ModelProcessingResult
from schema_consumers.models.model_registry_config import ModelRegistryConfig
from schema_consumers.models.model_schema import ModelSchema, schema_type_name
from schema_consumers.models.model_validation_result import (
    ModelValidationIssue,
    ModelValidationResult,
)

__all__: list[str] = [
    "ModelAnnotation",
    "ModelConditionCacheInfo",
    "ModelConsumerMetadata",
    "ModelConsumerResult",
    "ModelProcessingContext",
    "ModelProcessingResult",
    "ModelRegistryConfig",
    "ModelSchema",
    "ModelValidationIssue",
    "ModelValidationResult",
    "schema_type_name",
]
