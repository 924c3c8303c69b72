# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Aggregated result of a multi-purpose processing call."""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field

from schema_consumers.models.model_consumer_result import ModelConsumerResult
from schema_consumers.types import ConsumerPurpose


class ModelProcessingResult(BaseModel):
    """Results and errors of one ``process_*_with_purposes`` or
    ``process_with_context`` call, keyed by purpose.

    A purpose may appear in both a results map and ``errors`` when some of its
    consumers succeeded and others failed.

    Attributes:
        success: False if any purpose recorded an error
        schema_results: Schema-consumer results per purpose, registration order
        value_results: Value-consumer results per purpose, registration order
        errors: Errors per purpose (NoApplicableConsumerError, ConsumerError)
        executed_at: UTC timestamp captured when the call started
        duration: Elapsed wall time of the call
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: bool = Field(default=True, description="False if any purpose errored")
    schema_results: dict[ConsumerPurpose, list[ModelConsumerResult]] = Field(
        default_factory=dict,
        description="Schema-consumer results per purpose",
    )
    value_results: dict[ConsumerPurpose, list[ModelConsumerResult]] = Field(
        default_factory=dict,
        description="Value-consumer results per purpose",
    )
    errors: dict[ConsumerPurpose, list[Exception]] = Field(
        default_factory=dict,
        description="Errors per purpose",
    )
    executed_at: datetime = Field(description="Call start time (UTC)")
    duration: timedelta = Field(
        default=timedelta(0),
        description="Elapsed wall time",
    )

    @property
    def error_count(self) -> int:
        """Total number of errors across all purposes."""
        return sum(len(errs) for errs in self.errors.values())

    def results_for(self, purpose: str) -> list[ModelConsumerResult]:
        """Schema results followed by value results for ``purpose``."""
        return [
            *self.schema_results.get(ConsumerPurpose(purpose), []),
            *self.value_results.get(ConsumerPurpose(purpose), []),
        ]

    def raise_for_errors(self) -> None:
        """Raise the first recorded error if the call was not successful."""
        for errs in self.errors.values():
            if errs:
                raise errs[0]


__all__ = ["ModelProcessingResult"]
