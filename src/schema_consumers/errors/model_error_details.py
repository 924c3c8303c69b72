# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Structured error payload carried by every schema_consumers error."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from schema_consumers.enums import EnumConsumerErrorCode


class ModelErrorDetails(BaseModel):
    """Immutable, serializable view of an error.

    Attributes:
        message: Human-readable error message
        error_code: Error classification
        correlation_id: Optional correlation ID copied from the error context
        context: Structured key/value context (consumer name, purpose, path, ...)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    message: str = Field(description="Human-readable error message")
    error_code: EnumConsumerErrorCode = Field(
        default=EnumConsumerErrorCode.OPERATION_FAILED,
        description="Error classification",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Correlation ID for tracing",
    )
    context: dict[str, object] = Field(
        default_factory=dict,
        description="Structured error context",
    )


__all__ = ["ModelErrorDetails"]
