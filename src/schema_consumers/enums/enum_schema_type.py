# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Schema type enumeration for the closed set of schema kinds."""

from enum import Enum


class EnumSchemaType(str, Enum):
    """Discriminated kind of a schema.

    The ``str`` mixin lets conditions built from plain strings (``"string"``)
    compare equal to enum members and vice versa.
    """

    STRUCTURE = "structure"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NULL = "null"
    ANY = "any"
    OPTIONAL = "optional"
    MAP = "map"
    UNION = "union"
    REF = "ref"
    PARAMETER = "parameter"
    FUNCTION = "function"
    SERVICE = "service"
