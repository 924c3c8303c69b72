# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Result payload produced by the built-in validation consumers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelValidationIssue(BaseModel):
    """A single validation problem.

    Attributes:
        path: Traversal path of the offending value
        code: Machine-readable issue code (e.g. ``pattern_mismatch``)
        message: Human-readable description
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: tuple[str, ...] = Field(default=(), description="Path of the offending value")
    code: str = Field(description="Machine-readable issue code")
    message: str = Field(description="Human-readable description")


class ModelValidationResult(BaseModel):
    """Outcome of validating one value; ``valid`` is False iff issues exist."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    valid: bool = Field(default=True)
    issues: tuple[ModelValidationIssue, ...] = Field(default=())

    @classmethod
    def from_issues(cls, issues: list[ModelValidationIssue]) -> ModelValidationResult:
        return cls(valid=not issues, issues=tuple(issues))

    def merge(self, *others: ModelValidationResult) -> ModelValidationResult:
        """Combine results into one verdict; invalid if any input is invalid.

        Issues are concatenated in argument order.
        """
        issues = list(self.issues)
        valid = self.valid
        for other in others:
            issues.extend(other.issues)
            valid = valid and other.valid
        return ModelValidationResult(valid=valid and not issues, issues=tuple(issues))

    @property
    def codes(self) -> list[str]:
        """Issue codes in the order they were found."""
        return [issue.code for issue in self.issues]


__all__ = ["ModelValidationIssue", "ModelValidationResult"]
