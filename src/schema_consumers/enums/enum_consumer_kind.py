# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consumer kind enumeration: the two independent registry namespaces."""

from enum import Enum


class EnumConsumerKind(str, Enum):
    """Kind of consumer, which is also the registry namespace it lives in.

    SCHEMA: Annotation consumers operating on schema metadata only.
    VALUE: Value consumers operating on a runtime value paired with a schema.
    """

    SCHEMA = "schema"
    VALUE = "value"
