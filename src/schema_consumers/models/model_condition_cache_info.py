# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Statistics snapshot of the condition-match cache."""

from pydantic import BaseModel, ConfigDict, Field


class ModelConditionCacheInfo(BaseModel):
    """Point-in-time cache statistics, in the spirit of ``functools`` CacheInfo."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    enabled: bool = Field(description="Whether caching is active")
    hits: int = Field(default=0, ge=0, description="Lookups answered from the cache")
    misses: int = Field(default=0, ge=0, description="Lookups that evaluated the condition")
    evictions: int = Field(default=0, ge=0, description="Entries dropped by the size bound")
    size: int = Field(default=0, ge=0, description="Current number of entries")
    max_entries: int = Field(ge=1, description="Configured size bound")


__all__ = ["ModelConditionCacheInfo"]
