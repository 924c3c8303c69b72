# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Annotation model: a named metadata value attached to a schema."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ModelAnnotation(BaseModel):
    """Concrete annotation satisfying ProtocolAnnotation.

    Attributes:
        name: Annotation name (e.g. ``format``, ``minLength``)
        value: Untyped payload interpreted by consumers and conditions

    Example:
        >>> ModelAnnotation(name="format", value="email")
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1, description="Annotation name")
    value: Any = Field(default=None, description="Annotation payload")


__all__ = ["ModelAnnotation"]
