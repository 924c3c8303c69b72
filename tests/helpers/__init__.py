# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for schema_consumers unit tests.

Available Utilities:
    Consumer Stubs:
        - StubSchemaConsumer: Configurable, recording schema consumer
        - StubValueConsumer: Configurable, recording value consumer
        - raise_runtime_error: Behavior that always fails

    Log Helpers:
        - filter_records: Filter log records by logger name and level
        - get_messages: Extract messages of filtered log records
"""

from tests.helpers.consumer_stubs import (
    StubSchemaConsumer,
    StubValueConsumer,
    raise_runtime_error,
)
from tests.helpers.log_helpers import filter_records, get_messages

__all__ = [
    "StubSchemaConsumer",
    "StubValueConsumer",
    "filter_records",
    "get_messages",
    "raise_runtime_error",
]
