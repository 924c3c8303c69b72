# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Schema Consumers - purpose-based dispatch of schema and value consumers.

This package lets independent consumers (validators, formatters, generators,
documentation tools) declare what they are for and which schemas they apply
to, and dispatches schemas and values to them:

- Condition DSL: immutable predicates over schema type and annotations
- RegistryConsumer: SINGLE SOURCE OF TRUTH for consumer registration,
  applicability resolution and dispatch
- Structured errors with per-purpose aggregation of partial failures
- Built-in validation, formatting and documentation consumers

Key Components:
    - RegistryConsumer: thread-safe consumer registry
    - ModelProcessingContext: per-call schema/path/value carrier
    - ModelConsumerResult: uniform consumer result envelope
    - ModelProcessingResult: aggregated multi-purpose outcome
"""

from schema_consumers.models import (
    ModelConsumerResult,
    ModelProcessingContext,
    ModelProcessingResult,
    ModelRegistryConfig,
    ModelSchema,
)
from schema_consumers.runtime import (
    RegistryConsumer,
    register_builtin_consumers,
    validate_with_registry,
)
from schema_consumers.types import ConsumerPurpose

__all__: list[str] = [
    "ConsumerPurpose",
    "ModelConsumerResult",
    "ModelProcessingContext",
    "ModelProcessingResult",
    "ModelRegistryConfig",
    "ModelSchema",
    "RegistryConsumer",
    "register_builtin_consumers",
    "validate_with_registry",
]
