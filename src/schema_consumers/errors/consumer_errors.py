# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Base Error Classes for schema_consumers.

Error Hierarchy:
    SchemaConsumersError (base error, carries ModelErrorDetails)
    ├── ConsumerConfigurationError
    └── ConsumerRegistryError (see error_consumer_registry.py)

All errors:
    - Expose a structured ``model`` (ModelErrorDetails) with error code and context
    - Support proper error chaining with ``raise ... from e``
    - Accept ModelErrorContext for bundled call-site parameters
"""

from typing import Optional
from uuid import UUID

from schema_consumers.enums import EnumConsumerErrorCode
from schema_consumers.errors.model_error_context import ModelErrorContext
from schema_consumers.errors.model_error_details import ModelErrorDetails


class SchemaConsumersError(Exception):
    """Base error class for all schema_consumers errors.

    Structured Fields (via ModelErrorContext):
        operation: Operation being performed
        purpose: Consumer purpose involved
        correlation_id: Request correlation ID for tracking

    Example:
        >>> context = ModelErrorContext(operation="register", purpose="validation")
        >>> raise SchemaConsumersError("Operation failed", context=context)

        # Or with extra context:
        >>> raise SchemaConsumersError(
        ...     "Operation failed",
        ...     context=context,
        ...     consumer_name="string_validator",
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumConsumerErrorCode] = None,
        context: Optional[ModelErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize SchemaConsumersError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled call-site context (operation, purpose, correlation_id)
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id = None
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.purpose is not None:
                structured_context.setdefault("purpose", context.purpose)
            correlation_id = context.correlation_id

        self.model = ModelErrorDetails(
            message=message,
            error_code=error_code or EnumConsumerErrorCode.OPERATION_FAILED,
            correlation_id=correlation_id,
            context=structured_context,
        )
        super().__init__(message)

    @property
    def message(self) -> str:
        """Human-readable error message."""
        return self.model.message

    @property
    def error_code(self) -> EnumConsumerErrorCode:
        """Error classification."""
        return self.model.error_code

    @property
    def correlation_id(self) -> Optional[UUID]:
        """Correlation ID from the error context, if any."""
        return self.model.correlation_id


class ConsumerConfigurationError(SchemaConsumersError):
    """Raised when registry configuration or a processing context is invalid.

    Example:
        >>> raise ConsumerConfigurationError(
        ...     "No purposes specified in processing context",
        ...     context=ModelErrorContext(operation="process_with_context"),
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumConsumerErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


__all__ = ["ConsumerConfigurationError", "SchemaConsumersError"]
