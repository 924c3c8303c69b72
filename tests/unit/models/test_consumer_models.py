# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for schema, result and metadata models."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from schema_consumers.enums import EnumSchemaType
from schema_consumers.errors import ConsumerError
from schema_consumers.models import (
    ModelAnnotation,
    ModelConsumerMetadata,
    ModelConsumerResult,
    ModelProcessingResult,
    ModelSchema,
    ModelValidationIssue,
    ModelValidationResult,
    schema_type_name,
)
from schema_consumers.types import ConsumerPurpose


class TestModelSchema:
    """Tests for ModelSchema helpers."""

    def test_of_builds_annotations_in_order(self) -> None:
        schema = ModelSchema.of("string", format="email", minLength=3)

        assert [a.name for a in schema.annotations] == ["format", "minLength"]
        assert schema.get_annotation_value("minLength") == 3

    def test_get_annotation_value_default(self) -> None:
        assert ModelSchema.of("string").get_annotation_value("format", "none") == "none"

    def test_with_annotation_returns_new_schema(self) -> None:
        schema = ModelSchema.of("string")
        extended = schema.with_annotation("format", "uuid")

        assert schema.annotations == ()
        assert extended.get_annotations("format") == [
            ModelAnnotation(name="format", value="uuid")
        ]

    def test_frozen(self) -> None:
        schema = ModelSchema.of("string")
        with pytest.raises(ValidationError):
            schema.schema_type = "number"  # type: ignore[misc]

    def test_annotation_name_required(self) -> None:
        with pytest.raises(ValidationError):
            ModelAnnotation(name="", value=1)

    def test_schema_type_name(self) -> None:
        assert schema_type_name(EnumSchemaType.INTEGER) == "integer"
        assert schema_type_name("decimal") == "decimal"


class TestModelConsumerResult:
    """Tests for ModelConsumerResult."""

    def test_value_type(self) -> None:
        assert ModelConsumerResult(kind="formatting", value="x").value_type is str
        assert ModelConsumerResult(kind="formatting").value_type is None

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            ModelConsumerResult(kind="x", value=1, purpose="y")  # type: ignore[call-arg]


class TestModelConsumerMetadata:
    """Tests for ModelConsumerMetadata defaults."""

    def test_defaults(self) -> None:
        metadata = ModelConsumerMetadata(name="docs", purpose=ConsumerPurpose("docs"))

        assert metadata.version == "1.0.0"
        assert metadata.tags == ()
        assert metadata.extras == {}


class TestModelValidationResult:
    """Tests for ModelValidationResult.from_issues() and merge()."""

    def test_no_issues_is_valid(self) -> None:
        result = ModelValidationResult.from_issues([])

        assert result.valid
        assert result.codes == []

    def test_issues_make_invalid(self) -> None:
        result = ModelValidationResult.from_issues(
            [ModelValidationIssue(path=("a",), code="too_short", message="short")]
        )

        assert not result.valid
        assert result.codes == ["too_short"]

    def test_merge_concatenates_issues(self) -> None:
        first = ModelValidationResult.from_issues(
            [ModelValidationIssue(code="too_short", message="short")]
        )
        second = ModelValidationResult.from_issues(
            [ModelValidationIssue(code="pattern_mismatch", message="no match")]
        )

        merged = ModelValidationResult().merge(first, second)

        assert not merged.valid
        assert merged.codes == ["too_short", "pattern_mismatch"]
        assert ModelValidationResult().codes == []

    def test_merge_of_valid_results_is_valid(self) -> None:
        assert ModelValidationResult().merge(ModelValidationResult()).valid
        assert ModelValidationResult().merge().valid

    def test_merge_keeps_invalid_verdict_without_issues(self) -> None:
        merged = ModelValidationResult().merge(ModelValidationResult(valid=False))

        assert not merged.valid


class TestModelProcessingResult:
    """Tests for ModelProcessingResult helpers."""

    def _result(self, **kwargs: object) -> ModelProcessingResult:
        return ModelProcessingResult(executed_at=datetime.now(UTC), **kwargs)

    def test_results_for_merges_schema_then_value(self) -> None:
        schema_result = ModelConsumerResult(kind="docs", value="schema")
        value_result = ModelConsumerResult(kind="docs", value="value")
        result = self._result(
            schema_results={"docs": [schema_result]},
            value_results={"docs": [value_result]},
        )

        assert result.results_for("docs") == [schema_result, value_result]
        assert result.results_for("missing") == []

    def test_error_count_and_raise_for_errors(self) -> None:
        error = ConsumerError("c", "validation", (), RuntimeError("boom"))
        result = self._result(success=False, errors={"validation": [error]})

        assert result.error_count == 1
        with pytest.raises(ConsumerError):
            result.raise_for_errors()

    def test_raise_for_errors_noop_on_success(self) -> None:
        self._result().raise_for_errors()
