# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Runtime module for schema_consumers.

Core Registry
-------------
- **RegistryConsumer**: SINGLE SOURCE OF TRUTH for consumer registration
    - Independent schema-consumer and value-consumer namespaces
    - Purpose index maintained at registration time (registration order)
    - Applicability resolution through declarative schema conditions
    - Single-purpose, all-consumers and multi-purpose dispatch
    - Freeze pattern to close registration after startup

Supporting Components
---------------------
- **ConditionMatchCache**: Bounded, identity-keyed cache of condition results
- **register_builtin_consumers**: Wires the shipped consumers into a registry
- **validate_with_registry**: Merged verdict of every applicable validator
"""

from __future__ import annotations

from schema_consumers.runtime.condition_match_cache import ConditionMatchCache
from schema_consumers.runtime.consumer_validation import validate_with_registry
from schema_consumers.runtime.consumer_wiring import register_builtin_consumers
from schema_consumers.runtime.registry_consumer import RegistryConsumer

__all__: list[str] = [
    "ConditionMatchCache",
    "RegistryConsumer",
    "register_builtin_consumers",
    "validate_with_registry",
]
