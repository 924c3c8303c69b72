# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for validate_with_registry()."""

from __future__ import annotations

import pytest

from schema_consumers.conditions import type_is
from schema_consumers.models import ModelSchema, ModelValidationIssue, ModelValidationResult
from schema_consumers.runtime import (
    RegistryConsumer,
    register_builtin_consumers,
    validate_with_registry,
)
from tests.helpers import StubValueConsumer, raise_runtime_error


@pytest.fixture
def builtin_registry(registry: RegistryConsumer) -> RegistryConsumer:
    register_builtin_consumers(registry)
    return registry


class TestValidateWithRegistry:
    """Merged verdicts of every applicable validation consumer."""

    def test_valid_value(self, builtin_registry: RegistryConsumer) -> None:
        verdict = validate_with_registry(
            builtin_registry, ModelSchema.of("string", format="email"), "a@b.io"
        )

        assert verdict == ModelValidationResult()

    def test_invalid_boolean(self, builtin_registry: RegistryConsumer) -> None:
        verdict = validate_with_registry(
            builtin_registry, ModelSchema.of("boolean"), "yes"
        )

        assert not verdict.valid
        assert verdict.codes == ["type_mismatch"]

    def test_issues_from_every_validator_are_merged(
        self, builtin_registry: RegistryConsumer
    ) -> None:
        extra = ModelValidationResult.from_issues(
            [ModelValidationIssue(code="blocklisted", message="value is blocklisted")]
        )
        builtin_registry.register_value_consumer(
            StubValueConsumer(
                "blocklist",
                "validation",
                condition=type_is("string"),
                behavior=lambda context, value: extra,
            )
        )

        verdict = validate_with_registry(
            builtin_registry, ModelSchema.of("string", minLength=5), "abc"
        )

        assert verdict.codes == ["string_too_short", "blocklisted"]

    def test_no_applicable_validator_is_an_issue(
        self, builtin_registry: RegistryConsumer
    ) -> None:
        verdict = validate_with_registry(
            builtin_registry, ModelSchema.of("service"), object()
        )

        assert not verdict.valid
        assert verdict.codes == ["validation_error"]
        assert verdict.issues[0].path == ()

    def test_failing_validator_keeps_other_results(
        self, registry: RegistryConsumer
    ) -> None:
        registry.register_value_consumer(
            StubValueConsumer(
                "ok",
                "validation",
                behavior=lambda context, value: ModelValidationResult(),
            )
        )
        registry.register_value_consumer(
            StubValueConsumer("broken", "validation", behavior=raise_runtime_error)
        )

        verdict = validate_with_registry(registry, ModelSchema.of("string"), "x")

        assert verdict.codes == ["validation_error"]
        assert "broken" in verdict.issues[0].message

    def test_non_validation_payloads_are_ignored(
        self, registry: RegistryConsumer
    ) -> None:
        registry.register_value_consumer(StubValueConsumer("echo", "validation"))

        verdict = validate_with_registry(registry, ModelSchema.of("string"), "x")

        assert verdict == ModelValidationResult()
