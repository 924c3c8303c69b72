# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error codes attached to schema_consumers errors."""

from enum import Enum


class EnumConsumerErrorCode(str, Enum):
    """Classification of registry and consumer failures."""

    OPERATION_FAILED = "operation_failed"
    INVALID_CONFIGURATION = "invalid_configuration"
    REGISTRATION_FAILED = "registration_failed"
    DUPLICATE_REGISTRATION = "duplicate_registration"
    NO_APPLICABLE_CONSUMER = "no_applicable_consumer"
    CONSUMER_FAILED = "consumer_failed"
    PARTIAL_FAILURE = "partial_failure"
