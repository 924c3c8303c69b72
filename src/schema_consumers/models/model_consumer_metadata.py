# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consumer metadata model for discovery, documentation and tooling."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from schema_consumers.types import ConsumerPurpose


class ModelConsumerMetadata(BaseModel):
    """Descriptive, non-functional record about a consumer.

    Attributes:
        name: Consumer name
        purpose: Purpose the consumer is registered under
        description: Human-readable description
        version: Consumer version string
        tags: Free-form tags for discovery
        result_kind: Kind tag the consumer puts on its results
        result_type: Name of the result value's type, for documentation
        extras: Additional tooling-specific information
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(description="Consumer name")
    purpose: ConsumerPurpose = Field(description="Consumer purpose")
    description: str = Field(default="", description="Human-readable description")
    version: str = Field(default="1.0.0", description="Consumer version")
    tags: tuple[str, ...] = Field(default=(), description="Discovery tags")
    result_kind: str = Field(default="", description="Kind tag of produced results")
    result_type: str = Field(default="", description="Type name of produced values")
    extras: dict[str, object] = Field(
        default_factory=dict,
        description="Additional tooling-specific information",
    )


__all__ = ["ModelConsumerMetadata"]
