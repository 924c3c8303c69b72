# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for RegistryConsumer dispatch.

Tests cover:
- Single-purpose processing (first applicable consumer)
- "Process all" with partial failure (N-1 results plus one error)
- Multi-purpose aggregation into ModelProcessingResult
- process_with_context() dispatch rules
- Failure logging and error wrapping
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime, timedelta

import pytest

from schema_consumers.conditions import (
    SchemaCondition,
    all_of,
    has_annotation,
    type_is,
)
from schema_consumers.errors import (
    ConsumerAggregateError,
    ConsumerConfigurationError,
    ConsumerError,
    NoApplicableConsumerError,
)
from schema_consumers.models import (
    ModelConsumerResult,
    ModelProcessingContext,
    ModelSchema,
)
from schema_consumers.runtime import RegistryConsumer
from tests.helpers import (
    StubSchemaConsumer,
    StubValueConsumer,
    filter_records,
    get_messages,
    raise_runtime_error,
)

REGISTRY_LOGGER = "schema_consumers.runtime.registry_consumer"


class RaisingCondition(SchemaCondition):
    """Third-party condition whose evaluation fails."""

    def matches(self, schema: object) -> bool:
        raise RuntimeError("bad condition")


# =============================================================================
# TestSinglePurpose
# =============================================================================


class TestSinglePurpose:
    """Tests for process_*_with_purpose()."""

    def test_no_applicable_consumer_raises(
        self, registry: RegistryConsumer, string_schema: ModelSchema
    ) -> None:
        with pytest.raises(NoApplicableConsumerError) as exc_info:
            registry.process_schema_with_purpose("documentation", string_schema)

        assert exc_info.value.purpose == "documentation"
        assert exc_info.value.consumer_kind == "schema"
        assert len(registry) == 0

    def test_non_matching_consumer_is_not_applicable(
        self, registry: RegistryConsumer, number_schema: ModelSchema
    ) -> None:
        registry.register_value_consumer(
            StubValueConsumer("strings", "validation", type_is("string"))
        )

        with pytest.raises(NoApplicableConsumerError):
            registry.process_value_with_purpose("validation", number_schema, 1)

    def test_first_applicable_consumer_wins(
        self, registry: RegistryConsumer, string_schema: ModelSchema
    ) -> None:
        first = StubValueConsumer("first", "formatting", behavior=lambda c, v: "first")
        second = StubValueConsumer("second", "formatting", behavior=lambda c, v: "second")
        registry.register_value_consumer(first)
        registry.register_value_consumer(second)

        result = registry.process_value_with_purpose("formatting", string_schema, "x")

        assert result == ModelConsumerResult(kind="formatting", value="first")
        assert second.values == []

    def test_schema_consumer_receives_context(
        self, registry: RegistryConsumer, email_schema: ModelSchema
    ) -> None:
        seen: list[ModelProcessingContext] = []

        def capture(context: ModelProcessingContext) -> object:
            seen.append(context)
            return context.options.get("mode")

        registry.register_schema_consumer(
            StubSchemaConsumer("docs", "documentation", behavior=capture)
        )

        result = registry.process_schema_with_purpose(
            "documentation", email_schema, options={"mode": "brief"}
        )

        assert result.value == "brief"
        assert seen[0].schema is email_schema
        assert seen[0].path == ()

    def test_consumer_failure_is_wrapped(
        self,
        registry: RegistryConsumer,
        string_schema: ModelSchema,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        registry.register_value_consumer(
            StubValueConsumer("broken", "validation", behavior=raise_runtime_error)
        )

        with caplog.at_level(logging.WARNING, logger=REGISTRY_LOGGER):
            with pytest.raises(ConsumerError) as exc_info:
                registry.process_value_with_purpose("validation", string_schema, "x")

        error = exc_info.value
        assert error.consumer_name == "broken"
        assert error.purpose == "validation"
        assert error.path == ()
        assert isinstance(error.__cause__, RuntimeError)
        assert str(error) == "consumer broken (validation) failed at root: boom"
        warnings = filter_records(caplog.records, REGISTRY_LOGGER)
        assert len(warnings) == 1
        assert warnings[0].consumer_name == "broken"  # type: ignore[attr-defined]

    def test_wrong_return_type_is_a_failure(
        self, registry: RegistryConsumer, string_schema: ModelSchema
    ) -> None:
        class ReturnsString(StubSchemaConsumer):
            def process_schema(self, context: ModelProcessingContext) -> object:  # type: ignore[override]
                return "not a result"

        registry.register_schema_consumer(ReturnsString("bad", "documentation"))

        with pytest.raises(ConsumerError) as exc_info:
            registry.process_schema_with_purpose("documentation", string_schema)

        assert isinstance(exc_info.value.cause, TypeError)


# =============================================================================
# TestProcessAll
# =============================================================================


class TestProcessAll:
    """Tests for process_*_all_with_purpose()."""

    def test_all_succeed_in_registration_order(
        self, registry: RegistryConsumer, string_schema: ModelSchema
    ) -> None:
        for name in ["a", "b", "c"]:
            registry.register_schema_consumer(StubSchemaConsumer(name, "generation"))

        results = registry.process_schema_all_with_purpose("generation", string_schema)

        assert [r.value for r in results] == ["a", "b", "c"]

    def test_one_failure_keeps_other_results(
        self, registry: RegistryConsumer, string_schema: ModelSchema
    ) -> None:
        """N applicable consumers with one failing yield N-1 results and one error."""
        registry.register_value_consumer(StubValueConsumer("a", "validation"))
        registry.register_value_consumer(
            StubValueConsumer("b", "validation", behavior=raise_runtime_error)
        )
        registry.register_value_consumer(StubValueConsumer("c", "validation"))

        with pytest.raises(ConsumerAggregateError) as exc_info:
            registry.process_value_all_with_purpose("validation", string_schema, "v")

        error = exc_info.value
        assert len(error.results) == 2
        assert [e.consumer_name for e in error.errors] == ["b"]
        assert isinstance(error.errors[0].__cause__, RuntimeError)

    def test_no_applicable_consumer_raises(
        self, registry: RegistryConsumer, string_schema: ModelSchema
    ) -> None:
        with pytest.raises(NoApplicableConsumerError):
            registry.process_value_all_with_purpose("validation", string_schema, "v")


# =============================================================================
# TestMultiPurpose
# =============================================================================


class TestMultiPurpose:
    """Tests for process_*_with_purposes()."""

    def test_missing_purpose_is_recorded_not_raised(
        self, registry: RegistryConsumer, string_schema: ModelSchema
    ) -> None:
        """One purpose with consumers, one without."""
        registry.register_value_consumer(StubValueConsumer("check", "validation"))

        outcome = registry.process_value_with_purposes(
            ["validation", "formatting"], string_schema, "hello"
        )

        assert outcome.success is False
        assert list(outcome.value_results) == ["validation"]
        assert len(outcome.value_results["validation"]) == 1
        assert list(outcome.errors) == ["formatting"]
        assert isinstance(outcome.errors["formatting"][0], NoApplicableConsumerError)
        assert outcome.schema_results == {}

    def test_all_purposes_succeed(
        self, registry: RegistryConsumer, string_schema: ModelSchema
    ) -> None:
        registry.register_schema_consumer(StubSchemaConsumer("docs", "documentation"))
        registry.register_schema_consumer(StubSchemaConsumer("gen", "generation"))

        before = datetime.now(UTC)
        outcome = registry.process_schema_with_purposes(
            ["documentation", "generation"], string_schema
        )

        assert outcome.success
        assert outcome.errors == {}
        assert outcome.error_count == 0
        assert [r.value for r in outcome.results_for("generation")] == ["gen"]
        assert outcome.executed_at >= before
        assert outcome.executed_at.tzinfo is not None
        assert outcome.duration >= timedelta(0)

    def test_partial_failure_records_results_and_errors(
        self, registry: RegistryConsumer, string_schema: ModelSchema
    ) -> None:
        registry.register_schema_consumer(StubSchemaConsumer("ok", "generation"))
        registry.register_schema_consumer(
            StubSchemaConsumer("bad", "generation", behavior=raise_runtime_error)
        )

        outcome = registry.process_schema_with_purposes(["generation"], string_schema)

        assert not outcome.success
        assert [r.value for r in outcome.schema_results["generation"]] == ["ok"]
        assert [e.consumer_name for e in outcome.errors["generation"]] == ["bad"]  # type: ignore[attr-defined]

    def test_duplicate_purposes_processed_once(
        self, registry: RegistryConsumer, string_schema: ModelSchema
    ) -> None:
        consumer = StubValueConsumer("check", "validation")
        registry.register_value_consumer(consumer)

        outcome = registry.process_value_with_purposes(
            ["validation", "validation"], string_schema, "v"
        )

        assert consumer.values == ["v"]
        assert len(outcome.value_results["validation"]) == 1

    def test_empty_purposes_is_empty_success(
        self, registry: RegistryConsumer, string_schema: ModelSchema
    ) -> None:
        outcome = registry.process_schema_with_purposes([], string_schema)

        assert outcome.success
        assert outcome.schema_results == {}

    def test_bare_string_purposes_rejected(
        self, registry: RegistryConsumer, string_schema: ModelSchema
    ) -> None:
        consumer = StubValueConsumer("check", "validation")
        registry.register_value_consumer(consumer)

        with pytest.raises(ConsumerConfigurationError, match="not the string"):
            registry.process_value_with_purposes("validation", string_schema, "v")  # type: ignore[arg-type]
        assert consumer.values == []

    def test_raising_condition_does_not_abort_other_purposes(
        self,
        registry: RegistryConsumer,
        string_schema: ModelSchema,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        registry.register_schema_consumer(StubSchemaConsumer("ok", "docs"))
        registry.register_schema_consumer(
            StubSchemaConsumer("bad", "lint", condition=RaisingCondition())
        )

        with caplog.at_level(logging.WARNING, logger=REGISTRY_LOGGER):
            outcome = registry.process_schema_with_purposes(
                ["docs", "lint"], string_schema
            )

        assert [r.value for r in outcome.schema_results["docs"]] == ["ok"]
        assert not outcome.success
        assert isinstance(outcome.errors["lint"][0], NoApplicableConsumerError)
        assert get_messages(caplog.records, REGISTRY_LOGGER) == [
            "Condition evaluation failed"
        ]

    def test_raising_applicable_schemas_is_no_match(
        self, registry: RegistryConsumer, string_schema: ModelSchema
    ) -> None:
        class BrokenConsumer(StubValueConsumer):
            def applicable_schemas(self) -> SchemaCondition:
                raise RuntimeError("no condition")

        registry.register_value_consumer(BrokenConsumer("broken", "validation"))
        registry.register_value_consumer(StubValueConsumer("check", "validation"))

        assert [
            c.name for c in registry.get_applicable_value_consumers(string_schema)
        ] == ["check"]


# =============================================================================
# TestProcessWithContext
# =============================================================================


class TestProcessWithContext:
    """Tests for process_with_context()."""

    def test_empty_purposes_raises(self, registry: RegistryConsumer) -> None:
        with pytest.raises(ConsumerConfigurationError):
            registry.process_with_context(
                ModelProcessingContext(schema=ModelSchema.of("string"))
            )

    def test_schema_and_value_consumers_merge(
        self, registry: RegistryConsumer, string_schema: ModelSchema
    ) -> None:
        registry.register_schema_consumer(StubSchemaConsumer("docs", "validation"))
        registry.register_value_consumer(StubValueConsumer("check", "validation"))

        outcome = registry.process_with_context(
            ModelProcessingContext(
                schema=string_schema, value="x", purposes=["validation"]
            )
        )

        assert outcome.success
        assert [r.value for r in outcome.schema_results["validation"]] == ["docs"]
        assert [r.value for r in outcome.value_results["validation"]] == ["x"]

    def test_value_none_runs_schema_consumers_only(
        self, registry: RegistryConsumer, string_schema: ModelSchema
    ) -> None:
        value_consumer = StubValueConsumer("check", "documentation")
        registry.register_schema_consumer(StubSchemaConsumer("docs", "documentation"))
        registry.register_value_consumer(value_consumer)

        outcome = registry.process_with_context(
            ModelProcessingContext(schema=string_schema, purposes=["documentation"])
        )

        assert outcome.success
        assert outcome.value_results == {}
        assert value_consumer.values == []

    def test_no_schema_is_empty_success(self, registry: RegistryConsumer) -> None:
        registry.register_schema_consumer(StubSchemaConsumer("docs", "documentation"))

        outcome = registry.process_with_context(
            ModelProcessingContext(value="x", purposes=["documentation"])
        )

        assert outcome.success
        assert outcome.schema_results == {}
        assert outcome.value_results == {}

    def test_consumers_see_caller_path(
        self, registry: RegistryConsumer, string_schema: ModelSchema
    ) -> None:
        consumer = StubSchemaConsumer("docs", "documentation")
        registry.register_schema_consumer(consumer)
        context = ModelProcessingContext(
            schema=string_schema, purposes=["documentation"]
        )

        with context.path_segment("user"), context.path_segment("email"):
            registry.process_with_context(context)

        assert consumer.calls == [("user", "email")]
        assert context.path == ()

    def test_failure_path_reported(
        self, registry: RegistryConsumer, string_schema: ModelSchema
    ) -> None:
        registry.register_value_consumer(
            StubValueConsumer("broken", "validation", behavior=raise_runtime_error)
        )
        context = ModelProcessingContext(
            schema=string_schema, value="x", purposes=["validation"]
        )

        with context.path_segment("name"):
            outcome = registry.process_with_context(context)

        error = outcome.errors["validation"][0]
        assert isinstance(error, ConsumerError)
        assert error.path == ("name",)
        with pytest.raises(ConsumerError):
            outcome.raise_for_errors()


# =============================================================================
# TestEndToEnd
# =============================================================================


class TestEndToEnd:
    """Registration, resolution and dispatch together."""

    def test_string_format_scenario(self, registry: RegistryConsumer) -> None:
        registry.register_value_consumer(
            StubValueConsumer(
                "format_check",
                "validation",
                all_of(type_is("string"), has_annotation("format")),
                behavior=lambda context, value: "@" in str(value),
            )
        )

        valid = registry.process_value_with_purpose(
            "validation", ModelSchema.of("string", format="email"), "a@b.io"
        )
        assert valid.value is True

        with pytest.raises(NoApplicableConsumerError):
            registry.process_value_with_purpose(
                "validation", ModelSchema.of("string"), "a@b.io"
            )
        with pytest.raises(NoApplicableConsumerError):
            registry.process_value_with_purpose(
                "validation", ModelSchema.of("number", format="email"), 5
            )

    def test_concurrent_processing(self, registry: RegistryConsumer) -> None:
        registry.register_value_consumer(
            StubValueConsumer(
                "upper", "formatting", behavior=lambda context, value: str(value).upper()
            )
        )
        schema = ModelSchema.of("string")

        def format_value(index: int) -> object:
            return registry.process_value_with_purpose(
                "formatting", schema, f"v{index}"
            ).value

        with ThreadPoolExecutor(max_workers=10) as executor:
            results = list(executor.map(format_value, range(200)))

        assert results == [f"V{i}" for i in range(200)]
        assert registry.cache_info().size == 1
