# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Built-in validation consumers.

Value consumers registered under the ``validation`` purpose. Each one reads
constraint annotations from the value's schema and reports every violation
it finds, so a result is ``ModelConsumerResult(kind="validation",
value=ModelValidationResult(...))``. A constraint violation is a normal
result, not an exception; consumers only raise on programming errors.

Supported annotations:
    string:  format (email, url, uuid), pattern, minLength, maxLength, enum
    number:  min, max, multipleOf (integer schemas also reject fractions)
    array:   minItems, maxItems, uniqueItems
    boolean: none, only the value's type is checked

Malformed annotations (e.g. a non-numeric or infinite ``minLength``) are
reported as ``invalid_<name>_annotation`` issues rather than ignored.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING
from urllib.parse import urlparse
from uuid import UUID

from schema_consumers.conditions import any_of, type_is
from schema_consumers.conditions.condition_base import (
    iter_annotation_items,
    read_schema_type,
)
from schema_consumers.constants_consumer_purpose import PURPOSE_VALIDATION
from schema_consumers.enums import EnumSchemaType
from schema_consumers.models.model_schema import schema_type_name
from schema_consumers.models.model_validation_result import (
    ModelValidationIssue,
    ModelValidationResult,
)
from schema_consumers.plugins.plugin_consumer_base import ValueConsumerBase

if TYPE_CHECKING:
    from schema_consumers.models.model_consumer_result import ModelConsumerResult
    from schema_consumers.models.model_processing_context import (
        ModelProcessingContext,
    )

_EMAIL_PATTERN = re.compile(r"^[^@\s<>]+@[^@\s<>]+\.[^@\s<>]+$")


def _issue(context: ModelProcessingContext, code: str, message: str) -> ModelValidationIssue:
    return ModelValidationIssue(path=context.path, code=code, message=message)


def _as_number(value: object) -> int | float | None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return value


def _as_length(value: object) -> int | None:
    number = _as_number(value)
    if number is None or not math.isfinite(number):
        return None
    return int(number)


class StringValidationConsumer(ValueConsumerBase):
    """Validates string values against string schema annotations."""

    consumer_name = "string_validator"
    consumer_purpose = PURPOSE_VALIDATION
    description = "Validates string values against string schema constraints"
    tags = ("validation", "string", "constraints")
    result_kind = "validation"
    result_type = "ModelValidationResult"
    condition = type_is(EnumSchemaType.STRING)

    def process_value(
        self, context: ModelProcessingContext, value: object
    ) -> ModelConsumerResult:
        if not isinstance(value, str):
            return self.result(
                ModelValidationResult.from_issues(
                    [
                        _issue(
                            context,
                            "type_mismatch",
                            f"expected string, got {type(value).__name__}",
                        )
                    ]
                )
            )

        issues: list[ModelValidationIssue] = []
        for name, constraint in iter_annotation_items(context.schema):
            issue = self._check(context, name, value, constraint)
            if issue is not None:
                issues.append(issue)
        return self.result(ModelValidationResult.from_issues(issues))

    def _check(
        self,
        context: ModelProcessingContext,
        name: str,
        value: str,
        constraint: object,
    ) -> ModelValidationIssue | None:
        if name == "format":
            return self._check_format(context, value, constraint)
        if name == "pattern":
            return self._check_pattern(context, value, constraint)
        if name == "minLength":
            minimum = _as_length(constraint)
            if minimum is None:
                return _issue(
                    context,
                    "invalid_minlength_annotation",
                    "minLength annotation must be a number",
                )
            if len(value) < minimum:
                return _issue(
                    context,
                    "string_too_short",
                    f"string length {len(value)} is less than minimum {minimum}",
                )
        elif name == "maxLength":
            maximum = _as_length(constraint)
            if maximum is None:
                return _issue(
                    context,
                    "invalid_maxlength_annotation",
                    "maxLength annotation must be a number",
                )
            if len(value) > maximum:
                return _issue(
                    context,
                    "string_too_long",
                    f"string length {len(value)} exceeds maximum {maximum}",
                )
        elif name == "enum":
            if not isinstance(constraint, list | tuple | set | frozenset):
                return _issue(
                    context,
                    "invalid_enum_annotation",
                    "enum annotation must be a collection of strings",
                )
            if value not in constraint:
                return _issue(
                    context,
                    "enum_mismatch",
                    f"value {value!r} is not one of the allowed values",
                )
        return None

    def _check_format(
        self, context: ModelProcessingContext, value: str, fmt: object
    ) -> ModelValidationIssue | None:
        if not isinstance(fmt, str):
            return _issue(
                context,
                "invalid_format_annotation",
                "format annotation must be a string",
            )
        if fmt == "email" and not _EMAIL_PATTERN.match(value):
            return _issue(context, "invalid_email", "invalid email format")
        if fmt == "url":
            parsed = urlparse(value)
            if not parsed.scheme or not parsed.netloc:
                return _issue(context, "invalid_url", "invalid URL format")
        if fmt == "uuid":
            try:
                UUID(value)
            except ValueError:
                return _issue(context, "invalid_uuid", "invalid UUID format")
        return None

    def _check_pattern(
        self, context: ModelProcessingContext, value: str, pattern: object
    ) -> ModelValidationIssue | None:
        if not isinstance(pattern, str):
            return _issue(
                context,
                "invalid_pattern_annotation",
                "pattern annotation must be a string",
            )
        try:
            matched = re.search(pattern, value) is not None
        except re.error as e:
            return _issue(context, "invalid_regex", f"invalid regular expression: {e}")
        if not matched:
            return _issue(
                context,
                "pattern_mismatch",
                f"value does not match pattern: {pattern}",
            )
        return None


class NumberValidationConsumer(ValueConsumerBase):
    """Validates numeric values against number and integer schema annotations."""

    consumer_name = "number_validator"
    consumer_purpose = PURPOSE_VALIDATION
    description = "Validates numeric values against number schema constraints"
    tags = ("validation", "number", "constraints")
    result_kind = "validation"
    result_type = "ModelValidationResult"
    condition = any_of(type_is(EnumSchemaType.NUMBER), type_is(EnumSchemaType.INTEGER))

    def process_value(
        self, context: ModelProcessingContext, value: object
    ) -> ModelConsumerResult:
        number = _as_number(value)
        if number is None:
            return self.result(
                ModelValidationResult.from_issues(
                    [
                        _issue(
                            context,
                            "type_mismatch",
                            f"expected number, got {type(value).__name__}",
                        )
                    ]
                )
            )

        issues: list[ModelValidationIssue] = []
        is_integer_schema = (
            schema_type_name(read_schema_type(context.schema))
            == EnumSchemaType.INTEGER.value
        )
        if is_integer_schema and isinstance(number, float) and not number.is_integer():
            issues.append(
                _issue(context, "not_integer", f"expected integer, got {number}")
            )

        for name, constraint in iter_annotation_items(context.schema):
            if name not in ("min", "max", "multipleOf"):
                continue
            bound = _as_number(constraint)
            if bound is None:
                issues.append(
                    _issue(
                        context,
                        f"invalid_{name.lower()}_annotation",
                        f"{name} annotation must be a number",
                    )
                )
            elif name == "min" and number < bound:
                issues.append(
                    _issue(
                        context,
                        "number_too_small",
                        f"value {number} is less than minimum {bound}",
                    )
                )
            elif name == "max" and number > bound:
                issues.append(
                    _issue(
                        context,
                        "number_too_large",
                        f"value {number} exceeds maximum {bound}",
                    )
                )
            elif name == "multipleOf":
                if bound <= 0:
                    issues.append(
                        _issue(
                            context,
                            "invalid_multipleof_annotation",
                            "multipleOf annotation must be positive",
                        )
                    )
                elif not _is_multiple(number, bound):
                    issues.append(
                        _issue(
                            context,
                            "not_multiple_of",
                            f"value {number} is not a multiple of {bound}",
                        )
                    )
        return self.result(ModelValidationResult.from_issues(issues))


def _is_multiple(value: int | float, divisor: int | float) -> bool:
    if isinstance(value, int) and isinstance(divisor, int):
        return value % divisor == 0
    quotient = value / divisor
    return math.isclose(quotient, round(quotient), rel_tol=1e-9, abs_tol=1e-9)


class ArrayValidationConsumer(ValueConsumerBase):
    """Validates list and tuple values against array schema annotations."""

    consumer_name = "array_validator"
    consumer_purpose = PURPOSE_VALIDATION
    description = "Validates array values against array schema constraints"
    tags = ("validation", "array", "constraints")
    result_kind = "validation"
    result_type = "ModelValidationResult"
    condition = type_is(EnumSchemaType.ARRAY)

    def process_value(
        self, context: ModelProcessingContext, value: object
    ) -> ModelConsumerResult:
        if not isinstance(value, list | tuple):
            return self.result(
                ModelValidationResult.from_issues(
                    [
                        _issue(
                            context,
                            "type_mismatch",
                            f"expected array, got {type(value).__name__}",
                        )
                    ]
                )
            )

        issues: list[ModelValidationIssue] = []
        for name, constraint in iter_annotation_items(context.schema):
            if name in ("minItems", "maxItems"):
                limit = _as_length(constraint)
                if limit is None:
                    issues.append(
                        _issue(
                            context,
                            f"invalid_{name.lower()}_annotation",
                            f"{name} annotation must be a number",
                        )
                    )
                elif name == "minItems" and len(value) < limit:
                    issues.append(
                        _issue(
                            context,
                            "min_items_violation",
                            f"array has {len(value)} items, minimum required is {limit}",
                        )
                    )
                elif name == "maxItems" and len(value) > limit:
                    issues.append(
                        _issue(
                            context,
                            "max_items_violation",
                            f"array has {len(value)} items, maximum allowed is {limit}",
                        )
                    )
            elif name == "uniqueItems" and constraint is True:
                issues.extend(self._duplicates(context, value))
        return self.result(ModelValidationResult.from_issues(issues))

    def _duplicates(
        self, context: ModelProcessingContext, items: list[object] | tuple[object, ...]
    ) -> list[ModelValidationIssue]:
        issues: list[ModelValidationIssue] = []
        seen: set[str] = set()
        for index, item in enumerate(items):
            key = _item_key(item)
            if key in seen:
                with context.path_segment(f"[{index}]"):
                    issues.append(
                        _issue(
                            context,
                            "unique_items_violation",
                            f"duplicate item found: {item!r}",
                        )
                    )
            seen.add(key)
        return issues


def _item_key(item: object) -> str:
    """Canonical key for duplicate detection; insensitive to dict and set order."""
    if isinstance(item, dict):
        pairs = sorted(f"{_item_key(k)}={_item_key(v)}" for k, v in item.items())
        return "dict{" + ",".join(pairs) + "}"
    if isinstance(item, set | frozenset):
        return "set{" + ",".join(sorted(_item_key(i) for i in item)) + "}"
    if isinstance(item, list | tuple):
        return "list[" + ",".join(_item_key(i) for i in item) + "]"
    return f"{type(item).__name__}:{item!r}"


class BooleanValidationConsumer(ValueConsumerBase):
    """Validates that values of boolean schemas are real booleans."""

    consumer_name = "boolean_validator"
    consumer_purpose = PURPOSE_VALIDATION
    description = "Validates boolean values against boolean schema constraints"
    tags = ("validation", "boolean")
    result_kind = "validation"
    result_type = "ModelValidationResult"
    condition = type_is(EnumSchemaType.BOOLEAN)

    def process_value(
        self, context: ModelProcessingContext, value: object
    ) -> ModelConsumerResult:
        if isinstance(value, bool):
            return self.result(ModelValidationResult())
        return self.result(
            ModelValidationResult.from_issues(
                [
                    _issue(
                        context,
                        "type_mismatch",
                        f"expected boolean, got {type(value).__name__}",
                    )
                ]
            )
        )


__all__ = [
    "ArrayValidationConsumer",
    "BooleanValidationConsumer",
    "NumberValidationConsumer",
    "StringValidationConsumer",
]
