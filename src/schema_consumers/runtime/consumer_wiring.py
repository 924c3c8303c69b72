# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Built-in consumer registration.

This module is the single place where the shipped consumers are wired into
a RegistryConsumer. Consumers are listed explicitly (no auto-discovery) and
registered in a fixed order, which is also their invocation order within a
purpose.

Example Usage:
    ```python
    from schema_consumers.runtime import RegistryConsumer
    from schema_consumers.runtime.consumer_wiring import register_builtin_consumers

    registry = RegistryConsumer()
    summary = register_builtin_consumers(registry)
    registry.freeze()
    ```
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from schema_consumers.plugins.plugin_documentation import SchemaDocumentationConsumer
from schema_consumers.plugins.plugin_formatting import StringFormattingConsumer
from schema_consumers.plugins.plugin_validation import (
    ArrayValidationConsumer,
    BooleanValidationConsumer,
    NumberValidationConsumer,
    StringValidationConsumer,
)

if TYPE_CHECKING:
    from schema_consumers.runtime.registry_consumer import RegistryConsumer

logger = logging.getLogger(__name__)


def register_builtin_consumers(registry: RegistryConsumer) -> dict[str, list[str]]:
    """Register every shipped consumer with ``registry``.

    Args:
        registry: Registry to populate. Must not be frozen and must not already
            hold consumers with the built-in names.

    Returns:
        Summary dict with:
            - schema_consumers: Names of registered schema consumers
            - value_consumers: Names of registered value consumers

    Raises:
        ConsumerRegistryError: If a built-in name is taken or the registry is
            frozen. Consumers registered before the failure stay registered.
    """
    schema_consumers = [SchemaDocumentationConsumer()]
    value_consumers = [
        StringValidationConsumer(),
        BooleanValidationConsumer(),
        NumberValidationConsumer(),
        ArrayValidationConsumer(),
        StringFormattingConsumer(),
    ]

    for schema_consumer in schema_consumers:
        registry.register_schema_consumer(schema_consumer)
    for value_consumer in value_consumers:
        registry.register_value_consumer(value_consumer)

    summary = {
        "schema_consumers": [c.name for c in schema_consumers],
        "value_consumers": [c.name for c in value_consumers],
    }
    logger.info(
        "Built-in consumers registered",
        extra={
            "schema_consumer_count": len(schema_consumers),
            "value_consumer_count": len(value_consumers),
        },
    )
    return summary


__all__ = ["register_builtin_consumers"]
