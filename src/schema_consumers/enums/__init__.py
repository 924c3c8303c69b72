# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for schema_consumers."""

from schema_consumers.enums.enum_condition_operator import EnumConditionOperator
from schema_consumers.enums.enum_consumer_error_code import EnumConsumerErrorCode
from schema_consumers.enums.enum_consumer_kind import EnumConsumerKind
from schema_consumers.enums.enum_schema_type import EnumSchemaType

__all__: list[str] = [
    "EnumConditionOperator",
    "EnumConsumerErrorCode",
    "EnumConsumerKind",
    "EnumSchemaType",
]
