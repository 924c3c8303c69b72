# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""schema_consumers Errors Module.

Exports:
    ModelErrorContext: Configuration model for bundled error context
    ModelErrorDetails: Structured error payload exposed as ``error.model``
    SchemaConsumersError: Base error class
    ConsumerConfigurationError: Invalid configuration or processing context
    ConsumerRegistryError: Registration and lookup failures
    NoApplicableConsumerError: No consumer matched a requested purpose
    ConsumerError: A consumer failure wrapped with consumer name, purpose and path
    ConsumerAggregateError: Partial failure of a "process all" call

Error Context:
    Errors carry their structured fields in ``error.model.context``. Consumer
    values are never copied into error context, only names, purposes and
    paths, so errors are safe to log.

    Example::

        from schema_consumers.errors import ConsumerError

        try:
            registry.process_value_with_purpose("validation", schema, value)
        except ConsumerError as e:
            logger.warning(
                "Validation failed",
                extra={"consumer": e.consumer_name, "path": list(e.path)},
            )
"""

from schema_consumers.errors.consumer_errors import (
    ConsumerConfigurationError,
    SchemaConsumersError,
)
from schema_consumers.errors.error_consumer_registry import (
    ConsumerAggregateError,
    ConsumerError,
    ConsumerRegistryError,
    NoApplicableConsumerError,
)
from schema_consumers.errors.model_error_context import ModelErrorContext
from schema_consumers.errors.model_error_details import ModelErrorDetails

__all__: list[str] = [
    # Configuration models
    "ModelErrorContext",
    "ModelErrorDetails",
    # Error classes
    "SchemaConsumersError",
    "ConsumerConfigurationError",
    "ConsumerRegistryError",
    "NoApplicableConsumerError",
    "ConsumerError",
    "ConsumerAggregateError",
]
