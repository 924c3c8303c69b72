# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Types module for schema_consumers."""

from schema_consumers.types.type_consumer_purpose import ConsumerPurpose

__all__: list[str] = [
    "ConsumerPurpose",
]
