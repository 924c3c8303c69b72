# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Uniform, purpose-agnostic result envelope returned by every consumer."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ModelConsumerResult(BaseModel):
    """Result envelope: a semantic kind tag plus a dynamically typed payload.

    ``kind`` is chosen by the consumer and is conventionally, not necessarily,
    equal to its purpose. Callers branch on ``kind`` (or ``value_type``) to
    interpret ``value`` safely.

    Example:
        >>> result = ModelConsumerResult(kind="formatting", value="HELLO")
        >>> result.value_type
        <class 'str'>
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: str = Field(description="Semantic label, e.g. 'validation'")
    value: Any = Field(default=None, description="Consumer-specific payload")

    @property
    def value_type(self) -> type | None:
        """Concrete type of ``value``, or None when no value was produced."""
        if self.value is None:
            return None
        return type(self.value)


__all__ = ["ModelConsumerResult"]
