# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Built-in string formatting consumer."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from schema_consumers.conditions import type_is
from schema_consumers.conditions.condition_base import iter_annotation_items
from schema_consumers.constants_consumer_purpose import PURPOSE_FORMATTING
from schema_consumers.enums import EnumSchemaType
from schema_consumers.plugins.plugin_consumer_base import ValueConsumerBase

if TYPE_CHECKING:
    from schema_consumers.models.model_consumer_result import ModelConsumerResult
    from schema_consumers.models.model_processing_context import (
        ModelProcessingContext,
    )

_CASES: dict[str, Callable[[str], str]] = {
    "upper": str.upper,
    "lower": str.lower,
    "title": str.title,
}


class StringFormattingConsumer(ValueConsumerBase):
    """Formats string values according to ``trim`` and ``case`` annotations.

    ``trim`` (truthy) strips surrounding whitespace first, then ``case``
    (``upper``, ``lower`` or ``title``) is applied. A string without either
    annotation is returned unchanged.

    Raises:
        TypeError: If the value is not a string.
        ValueError: If the ``case`` annotation names an unknown case.
    """

    consumer_name = "string_formatter"
    consumer_purpose = PURPOSE_FORMATTING
    description = "Applies case and trim annotations to string values"
    tags = ("formatting", "string")
    result_kind = "formatting"
    result_type = "str"
    condition = type_is(EnumSchemaType.STRING)

    def process_value(
        self, context: ModelProcessingContext, value: object
    ) -> ModelConsumerResult:
        if not isinstance(value, str):
            raise TypeError(f"expected string, got {type(value).__name__}")

        annotations = dict(iter_annotation_items(context.schema))
        formatted = value
        if annotations.get("trim"):
            formatted = formatted.strip()

        case = annotations.get("case")
        if case is not None:
            convert = _CASES.get(case) if isinstance(case, str) else None
            if convert is None:
                raise ValueError(
                    f"unknown case {case!r}, expected one of {sorted(_CASES)}"
                )
            formatted = convert(formatted)
        return self.result(formatted)


__all__ = ["StringFormattingConsumer"]
