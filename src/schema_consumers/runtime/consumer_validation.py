# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""One-call value validation through a consumer registry.

Runs every applicable ``validation`` value consumer and merges their
ModelValidationResult payloads into a single verdict. Dispatch failures are
folded into the verdict as ``validation_error`` issues, so callers get a
result instead of an exception.

Example Usage:
    ```python
    registry = RegistryConsumer()
    register_builtin_consumers(registry)

    verdict = validate_with_registry(
        registry, ModelSchema.of("string", format="email"), "user@example.com"
    )
    if not verdict.valid:
        print(verdict.codes)
    ```
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from schema_consumers.constants_consumer_purpose import PURPOSE_VALIDATION
from schema_consumers.errors import ConsumerAggregateError, NoApplicableConsumerError
from schema_consumers.models.model_validation_result import (
    ModelValidationIssue,
    ModelValidationResult,
)

if TYPE_CHECKING:
    from schema_consumers.models.model_consumer_result import ModelConsumerResult
    from schema_consumers.protocols.protocol_schema import ProtocolSchema
    from schema_consumers.runtime.registry_consumer import RegistryConsumer

logger = logging.getLogger(__name__)


def validate_with_registry(
    registry: RegistryConsumer,
    schema: ProtocolSchema,
    value: object,
) -> ModelValidationResult:
    """Validate ``value`` against ``schema`` with every applicable validator.

    Args:
        registry: Registry holding ``validation`` value consumers.
        schema: Schema describing ``value``.
        value: Value to validate.

    Returns:
        Merged ModelValidationResult. Results of other payload types are
        ignored. When no validator applies, or a validator raised, the
        failure is reported as a ``validation_error`` issue and results of
        the validators that succeeded are still merged in.
    """
    results: list[ModelConsumerResult]
    failures: list[ModelValidationIssue] = []
    try:
        results = registry.process_value_all_with_purpose(
            PURPOSE_VALIDATION, schema, value
        )
    except NoApplicableConsumerError as e:
        results = []
        failures.append(_failure(str(e)))
    except ConsumerAggregateError as e:
        results = e.results
        failures.extend(_failure(str(error)) for error in e.errors)

    verdicts = [r.value for r in results if isinstance(r.value, ModelValidationResult)]
    merged = ModelValidationResult().merge(
        *verdicts, ModelValidationResult.from_issues(failures)
    )
    if failures:
        logger.debug(
            "Validation dispatch reported failures",
            extra={"failure_count": len(failures), "result_count": len(verdicts)},
        )
    return merged


def _failure(message: str) -> ModelValidationIssue:
    return ModelValidationIssue(path=(), code="validation_error", message=message)


__all__ = ["validate_with_registry"]
