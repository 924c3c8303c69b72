# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error Context Configuration Model.

This module defines the configuration model for call-site error context,
bundling common structured fields so error constructors keep a small
parameter list while staying strongly typed.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ModelErrorContext(BaseModel):
    """Bundled call-site context for schema_consumers errors.

    Attributes:
        operation: Operation being performed (register, process_schema, ...)
        purpose: Consumer purpose involved in the failing call
        correlation_id: Request correlation ID for tracing across layers

    Example:
        >>> context = ModelErrorContext(
        ...     operation="process_schema_with_purpose",
        ...     purpose="validation",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise ConsumerRegistryError("Lookup failed", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (register, process_schema, ...)",
    )
    purpose: Optional[str] = Field(
        default=None,
        description="Consumer purpose involved in the failing call",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Request correlation ID for tracing",
    )


__all__ = ["ModelErrorContext"]
