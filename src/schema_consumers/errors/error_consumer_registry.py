# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consumer Registry Error Classes.

This module defines the errors raised by RegistryConsumer registration,
applicability resolution and dispatch.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Optional

from schema_consumers.enums import EnumConsumerErrorCode
from schema_consumers.errors.consumer_errors import SchemaConsumersError
from schema_consumers.errors.model_error_context import ModelErrorContext

if TYPE_CHECKING:
    from schema_consumers.models.model_consumer_result import ModelConsumerResult


def format_path(path: Sequence[str]) -> str:
    """Render a traversal path for messages (``root`` when empty)."""
    return ".".join(path) if path else "root"


class ConsumerRegistryError(SchemaConsumersError):
    """Error raised when consumer registry operations fail.

    Used for:
    - Registering a None consumer or a consumer with an empty name
    - Duplicate registration within a namespace
    - Registration after the registry was frozen

    Example:
        >>> try:
        ...     registry.register_schema_consumer(consumer)
        ... except ConsumerRegistryError as e:
        ...     print(e.model.context.get("consumer_name"))
    """

    def __init__(
        self,
        message: str,
        consumer_name: Optional[str] = None,
        error_code: Optional[EnumConsumerErrorCode] = None,
        context: Optional[ModelErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize ConsumerRegistryError.

        Args:
            message: Human-readable error message
            consumer_name: Name of the consumer involved (if applicable)
            error_code: Error code (defaults to REGISTRATION_FAILED)
            context: Bundled call-site context
            **extra_context: Additional context information
        """
        if consumer_name is not None:
            extra_context["consumer_name"] = consumer_name
        super().__init__(
            message=message,
            error_code=error_code or EnumConsumerErrorCode.REGISTRATION_FAILED,
            context=context,
            **extra_context,
        )


class NoApplicableConsumerError(ConsumerRegistryError):
    """Raised when a purpose has no consumer matching the given schema.

    Never treated as success: a missing registration must be visible to the
    caller rather than looking like an empty result.
    """

    def __init__(
        self,
        purpose: str,
        consumer_kind: str,
        context: Optional[ModelErrorContext] = None,
    ) -> None:
        self.purpose = purpose
        self.consumer_kind = consumer_kind
        super().__init__(
            f"No applicable {consumer_kind} consumers found for purpose {purpose!r}",
            error_code=EnumConsumerErrorCode.NO_APPLICABLE_CONSUMER,
            context=context,
            purpose=purpose,
            consumer_kind=consumer_kind,
        )


class ConsumerError(ConsumerRegistryError):
    """A consumer's failure, wrapped with the call site that produced it.

    The original exception is available as ``cause`` and ``__cause__``; the
    registry never inspects its type.

    Example:
        >>> str(error)
        "consumer string_validator (validation) failed at user.email: boom"
    """

    def __init__(
        self,
        consumer_name: str,
        purpose: str,
        path: Sequence[str],
        cause: BaseException,
        context: Optional[ModelErrorContext] = None,
    ) -> None:
        self.consumer_name = consumer_name
        self.purpose = purpose
        self.path: tuple[str, ...] = tuple(path)
        self.cause = cause
        super().__init__(
            f"consumer {consumer_name} ({purpose}) failed at "
            f"{format_path(self.path)}: {cause}",
            consumer_name=consumer_name,
            error_code=EnumConsumerErrorCode.CONSUMER_FAILED,
            context=context,
            purpose=purpose,
            path=list(self.path),
            cause_type=type(cause).__name__,
        )
        self.__cause__ = cause


class ConsumerAggregateError(ConsumerRegistryError):
    """Raised when some consumers of a purpose failed during "process all".

    Carries both the successful results and the wrapped failures, in
    registration order, so partial success is never dropped.

    Example:
        >>> try:
        ...     results = registry.process_schema_all_with_purpose("validation", schema)
        ... except ConsumerAggregateError as e:
        ...     results = e.results  # successes
        ...     failures = e.errors  # ConsumerError instances
    """

    def __init__(
        self,
        purpose: str,
        results: Sequence[ModelConsumerResult],
        errors: Sequence[ConsumerError],
        context: Optional[ModelErrorContext] = None,
    ) -> None:
        self.purpose = purpose
        self.results: list[ModelConsumerResult] = list(results)
        self.errors: list[ConsumerError] = list(errors)
        total = len(self.results) + len(self.errors)
        details = "; ".join(str(e) for e in self.errors)
        super().__init__(
            f"{len(self.errors)} of {total} consumers failed for purpose "
            f"{purpose!r}: {details}",
            error_code=EnumConsumerErrorCode.PARTIAL_FAILURE,
            context=context,
            purpose=purpose,
            failed_consumers=[e.consumer_name for e in self.errors],
            succeeded_count=len(self.results),
        )


__all__ = [
    "ConsumerAggregateError",
    "ConsumerError",
    "ConsumerRegistryError",
    "NoApplicableConsumerError",
    "format_path",
]
