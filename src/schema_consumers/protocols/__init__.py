# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definitions for schema_consumers."""

from schema_consumers.protocols.protocol_consumer import (
    ProtocolAnnotationConsumer,
    ProtocolValueConsumer,
)
from schema_consumers.protocols.protocol_schema import (
    ProtocolAnnotation,
    ProtocolSchema,
)
from schema_consumers.protocols.protocol_schema_condition import (
    ProtocolSchemaCondition,
)

__all__: list[str] = [
    "ProtocolAnnotation",
    "ProtocolAnnotationConsumer",
    "ProtocolSchema",
    "ProtocolSchemaCondition",
    "ProtocolValueConsumer",
]
