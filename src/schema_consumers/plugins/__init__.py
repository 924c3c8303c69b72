# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consumer plugin infrastructure and built-in consumers.

Components:
    - ConsumerBase / SchemaConsumerBase / ValueConsumerBase: abstract bases
      that derive identity and metadata from class attributes
    - StringValidationConsumer, NumberValidationConsumer,
      ArrayValidationConsumer, BooleanValidationConsumer: ``validation``
      value consumers
    - StringFormattingConsumer: ``formatting`` value consumer
    - SchemaDocumentationConsumer: ``documentation`` schema consumer

See Also:
    - schema_consumers.runtime.consumer_wiring.register_builtin_consumers
"""

from schema_consumers.plugins.plugin_consumer_base import (
    ConsumerBase,
    SchemaConsumerBase,
    ValueConsumerBase,
)
from schema_consumers.plugins.plugin_documentation import SchemaDocumentationConsumer
from schema_consumers.plugins.plugin_formatting import StringFormattingConsumer
from schema_consumers.plugins.plugin_validation import (
    ArrayValidationConsumer,
    BooleanValidationConsumer,
    NumberValidationConsumer,
    StringValidationConsumer,
)

__all__: list[str] = [
    "ArrayValidationConsumer",
    "BooleanValidationConsumer",
    "ConsumerBase",
    "NumberValidationConsumer",
    "SchemaConsumerBase",
    "SchemaDocumentationConsumer",
    "StringFormattingConsumer",
    "StringValidationConsumer",
    "ValueConsumerBase",
]
