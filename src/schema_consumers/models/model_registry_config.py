# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consumer Registry Configuration Model.

Groups the tuning parameters of RegistryConsumer into one typed, validated
object. Values can be supplied directly or read from the environment.
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from schema_consumers.errors import ConsumerConfigurationError, ModelErrorContext

logger = logging.getLogger(__name__)

# Environment variables read by ModelRegistryConfig.from_env()
ENV_CACHE_ENABLED = "SCHEMA_CONSUMERS_CACHE_ENABLED"
ENV_CACHE_MAX_ENTRIES = "SCHEMA_CONSUMERS_CACHE_MAX_ENTRIES"

DEFAULT_CACHE_MAX_ENTRIES = 4096

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


class ModelRegistryConfig(BaseModel):
    """Configuration for RegistryConsumer.

    Attributes:
        condition_cache_enabled: Cache condition matches per (consumer, schema
            instance). Disable for schemas that are mutated in place.
        condition_cache_max_entries: Upper bound on cached matches; the least
            recently used entry is evicted beyond it.

    Example:
        >>> config = ModelRegistryConfig(condition_cache_max_entries=256)
        >>> registry = RegistryConsumer(config=config)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    condition_cache_enabled: bool = Field(
        default=True,
        description="Cache condition matches by schema identity",
    )
    condition_cache_max_entries: int = Field(
        default=DEFAULT_CACHE_MAX_ENTRIES,
        ge=1,
        description="Maximum number of cached condition matches",
    )

    @classmethod
    def from_env(cls) -> ModelRegistryConfig:
        """Build a configuration from environment variables.

        Reads ``SCHEMA_CONSUMERS_CACHE_ENABLED`` (1/0, true/false, yes/no,
        on/off) and ``SCHEMA_CONSUMERS_CACHE_MAX_ENTRIES``. Unset variables
        fall back to defaults.

        Raises:
            ConsumerConfigurationError: If a variable holds an invalid value.
        """
        context = ModelErrorContext(operation="load_registry_config")
        values: dict[str, object] = {}

        enabled_raw = os.getenv(ENV_CACHE_ENABLED)
        if enabled_raw is not None:
            normalized = enabled_raw.strip().lower()
            if normalized in _TRUTHY:
                values["condition_cache_enabled"] = True
            elif normalized in _FALSY:
                values["condition_cache_enabled"] = False
            else:
                raise ConsumerConfigurationError(
                    f"Invalid boolean for {ENV_CACHE_ENABLED}: {enabled_raw!r}",
                    context=context,
                    env_var=ENV_CACHE_ENABLED,
                )

        max_entries_raw = os.getenv(ENV_CACHE_MAX_ENTRIES)
        if max_entries_raw is not None:
            try:
                values["condition_cache_max_entries"] = int(max_entries_raw)
            except ValueError as e:
                raise ConsumerConfigurationError(
                    f"Invalid integer for {ENV_CACHE_MAX_ENTRIES}: {max_entries_raw!r}",
                    context=context,
                    env_var=ENV_CACHE_MAX_ENTRIES,
                ) from e

        try:
            config = cls.model_validate(values)
        except ValidationError as e:
            raise ConsumerConfigurationError(
                f"Invalid registry configuration from environment: {e}",
                context=context,
            ) from e

        logger.debug(
            "Loaded registry configuration from environment",
            extra={
                "condition_cache_enabled": config.condition_cache_enabled,
                "condition_cache_max_entries": config.condition_cache_max_entries,
            },
        )
        return config


__all__ = [
    "DEFAULT_CACHE_MAX_ENTRIES",
    "ENV_CACHE_ENABLED",
    "ENV_CACHE_MAX_ENTRIES",
    "ModelRegistryConfig",
]
