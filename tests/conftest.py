# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for schema_consumers tests."""

from __future__ import annotations

import pytest

from schema_consumers.models import ModelSchema
from schema_consumers.runtime import RegistryConsumer

# =============================================================================
# Duck Typing Conformance Helpers
# =============================================================================


def assert_has_methods(
    obj: object,
    required_methods: list[str],
    *,
    protocol_name: str | None = None,
) -> None:
    """Assert that an object has all required methods (duck typing conformance).

    Args:
        obj: The object to check for method presence.
        required_methods: List of method names that must be present and callable.
        protocol_name: Optional protocol name for clearer error messages.

    Example:
        >>> assert_has_methods(
        ...     consumer,
        ...     ["applicable_schemas", "process_value", "metadata"],
        ...     protocol_name="ProtocolValueConsumer",
        ... )
    """
    name = protocol_name or obj.__class__.__name__
    for method_name in required_methods:
        assert hasattr(obj, method_name), f"{name} must have '{method_name}' method"
        if not method_name.startswith("__"):
            assert callable(
                getattr(obj, method_name)
            ), f"{name}.{method_name} must be callable"


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def registry() -> RegistryConsumer:
    """Provide a fresh RegistryConsumer instance for each test."""
    return RegistryConsumer()


@pytest.fixture
def string_schema() -> ModelSchema:
    """String schema without annotations."""
    return ModelSchema.of("string")


@pytest.fixture
def email_schema() -> ModelSchema:
    """String schema annotated with ``format=email``."""
    return ModelSchema.of("string", format="email")


@pytest.fixture
def number_schema() -> ModelSchema:
    """Number schema without annotations."""
    return ModelSchema.of("number")
