# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consumer Registry - SINGLE SOURCE OF TRUTH for consumer registration and dispatch.

This module provides the RegistryConsumer class, which stores schema-level
(annotation) consumers and value-level consumers, indexes them by purpose,
resolves which of them apply to a schema, and dispatches processing calls.

Consumers:
- Declare a purpose (open string tag: "validation", "formatting", ...)
- Declare applicability with a SchemaCondition evaluated against the schema
- Return exactly one ModelConsumerResult or raise exactly one exception

Design Principles:
- Explicit instance: no global registry; create one per application
- Append-only: consumers cannot be removed; ``freeze()`` closes registration
- Independent namespaces: schema and value consumers may reuse names
- Deterministic order: within a purpose, consumers run in registration order
- No silent no-ops: a purpose with no applicable consumer is an error
- Partial failure is representable: successes are kept alongside failures

Example Usage:
    ```python
    from schema_consumers.conditions import all_of, has_annotation, type_is
    from schema_consumers.models import ModelSchema
    from schema_consumers.runtime.registry_consumer import RegistryConsumer

    registry = RegistryConsumer()
    registry.register_value_consumer(StringValidationConsumer())
    registry.register_schema_consumer(SchemaDocumentationConsumer())
    registry.freeze()

    schema = ModelSchema.of("string", format="email")

    # First applicable consumer only
    result = registry.process_value_with_purpose("validation", schema, "a@b.io")

    # Every applicable consumer
    results = registry.process_value_all_with_purpose("validation", schema, "a@b.io")

    # Several purposes at once, errors aggregated per purpose
    outcome = registry.process_schema_with_purposes(
        ["documentation", "formatting"], schema
    )
    if not outcome.success:
        print(outcome.errors)
    ```

Thread Safety:
    - A threading.Lock guards the name maps and purpose indexes. Reads hold it
      only to snapshot candidate lists.
    - Condition evaluation and consumer invocation run outside the lock.
    - The condition-match cache has its own lock (see condition_match_cache.py);
      it is never written while the structural lock is held.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Iterable
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, TypeAlias

from schema_consumers.enums import EnumConsumerErrorCode, EnumConsumerKind
from schema_consumers.errors import (
    ConsumerAggregateError,
    ConsumerConfigurationError,
    ConsumerError,
    ConsumerRegistryError,
    ModelErrorContext,
    NoApplicableConsumerError,
)
from schema_consumers.models.model_consumer_metadata import ModelConsumerMetadata
from schema_consumers.models.model_consumer_result import ModelConsumerResult
from schema_consumers.models.model_processing_context import ModelProcessingContext
from schema_consumers.models.model_processing_result import ModelProcessingResult
from schema_consumers.models.model_registry_config import ModelRegistryConfig
from schema_consumers.runtime.condition_match_cache import ConditionMatchCache
from schema_consumers.types import ConsumerPurpose

if TYPE_CHECKING:
    from schema_consumers.models.model_condition_cache_info import (
        ModelConditionCacheInfo,
    )
    from schema_consumers.protocols import (
        ProtocolAnnotationConsumer,
        ProtocolSchema,
        ProtocolValueConsumer,
    )

    AnyConsumer: TypeAlias = ProtocolAnnotationConsumer | ProtocolValueConsumer

logger = logging.getLogger(__name__)

# Method each consumer kind must provide, checked at registration time
_PROCESS_METHOD: dict[EnumConsumerKind, str] = {
    EnumConsumerKind.SCHEMA: "process_schema",
    EnumConsumerKind.VALUE: "process_value",
}


class RegistryConsumer:
    """SINGLE SOURCE OF TRUTH for schema and value consumers.

    Two independent namespaces (schema consumers, value consumers), each an
    insertion-ordered name -> consumer map plus a purpose -> ordered list
    index maintained at registration time.

    Invariants:
        - Every consumer registered under purpose ``p`` is in the index for ``p``.
        - A consumer is reported applicable only if its condition matches the
          schema instance being resolved.

    Attributes:
        _config: Registry configuration (cache size, cache on/off)
        _lock: Structural lock guarding the maps, indexes and frozen flag
        _consumers: Per-kind name -> consumer maps (insertion ordered)
        _purpose_index: Per-kind purpose -> consumers lists (registration order)
        _condition_cache: Identity-keyed condition-match cache with its own lock
        _frozen: True once freeze() was called
    """

    def __init__(self, config: ModelRegistryConfig | None = None) -> None:
        """Initialize an empty registry.

        Args:
            config: Optional configuration; defaults to ModelRegistryConfig().
        """
        self._config = config or ModelRegistryConfig()
        self._lock = threading.Lock()
        self._consumers: dict[EnumConsumerKind, dict[str, AnyConsumer]] = {
            EnumConsumerKind.SCHEMA: {},
            EnumConsumerKind.VALUE: {},
        }
        self._purpose_index: dict[
            EnumConsumerKind, dict[ConsumerPurpose, list[AnyConsumer]]
        ] = {
            EnumConsumerKind.SCHEMA: {},
            EnumConsumerKind.VALUE: {},
        }
        self._condition_cache = ConditionMatchCache(
            max_entries=self._config.condition_cache_max_entries,
            enabled=self._config.condition_cache_enabled,
        )
        self._frozen = False

    @property
    def config(self) -> ModelRegistryConfig:
        return self._config

    # ==========================================================================
    # Registration
    # ==========================================================================

    def register_schema_consumer(self, consumer: ProtocolAnnotationConsumer) -> None:
        """Register a schema-level (annotation) consumer.

        Args:
            consumer: Consumer implementing ProtocolAnnotationConsumer.

        Raises:
            ConsumerRegistryError: If the consumer is None, has an empty name or
                purpose, lacks ``process_schema``, duplicates an existing schema
                consumer name, or the registry is frozen. Registry state is
                unchanged on failure.
        """
        self._register(EnumConsumerKind.SCHEMA, consumer)

    def register_value_consumer(self, consumer: ProtocolValueConsumer) -> None:
        """Register a value-level consumer.

        Args:
            consumer: Consumer implementing ProtocolValueConsumer.

        Raises:
            ConsumerRegistryError: Same conditions as register_schema_consumer(),
                checked against the value-consumer namespace.
        """
        self._register(EnumConsumerKind.VALUE, consumer)

    def _register(self, kind: EnumConsumerKind, consumer: AnyConsumer | None) -> None:
        context = ModelErrorContext(operation=f"register_{kind.value}_consumer")
        if consumer is None:
            raise ConsumerRegistryError(
                "Consumer cannot be None",
                context=context,
                consumer_kind=kind.value,
            )

        name = getattr(consumer, "name", None)
        if not isinstance(name, str) or not name.strip():
            raise ConsumerRegistryError(
                "Consumer name cannot be empty",
                context=context,
                consumer_kind=kind.value,
                consumer_type=type(consumer).__name__,
            )

        purpose = getattr(consumer, "purpose", None)
        if not isinstance(purpose, str) or not purpose.strip():
            raise ConsumerRegistryError(
                f"Consumer {name!r} must declare a non-empty purpose",
                consumer_name=name,
                context=context,
                consumer_kind=kind.value,
            )

        method_name = _PROCESS_METHOD[kind]
        if not callable(getattr(consumer, method_name, None)):
            raise ConsumerRegistryError(
                f"{kind.value.capitalize()} consumer {name!r} must implement "
                f"{method_name}()",
                consumer_name=name,
                context=context,
                consumer_kind=kind.value,
            )

        with self._lock:
            if self._frozen:
                raise ConsumerRegistryError(
                    f"Cannot register {kind.value} consumer {name!r}: "
                    f"registry is frozen",
                    consumer_name=name,
                    context=context,
                    consumer_kind=kind.value,
                )
            consumers = self._consumers[kind]
            if name in consumers:
                raise ConsumerRegistryError(
                    f"{kind.value.capitalize()} consumer {name!r} already registered",
                    consumer_name=name,
                    error_code=EnumConsumerErrorCode.DUPLICATE_REGISTRATION,
                    context=context,
                    consumer_kind=kind.value,
                )
            consumers[name] = consumer
            self._purpose_index[kind].setdefault(ConsumerPurpose(purpose), []).append(
                consumer
            )

        logger.debug(
            "Registered consumer",
            extra={
                "consumer_name": name,
                "consumer_kind": kind.value,
                "purpose": purpose,
            },
        )

    def freeze(self) -> None:
        """Close registration. Later register_* calls raise ConsumerRegistryError.

        Idempotent. Lookups and processing are unaffected.
        """
        with self._lock:
            self._frozen = True

    @property
    def is_frozen(self) -> bool:
        with self._lock:
            return self._frozen

    # ==========================================================================
    # Discovery
    # ==========================================================================

    def get_schema_consumer(self, name: str) -> ProtocolAnnotationConsumer | None:
        """Return the schema consumer registered as ``name``, or None."""
        with self._lock:
            return self._consumers[EnumConsumerKind.SCHEMA].get(name)  # type: ignore[return-value]

    def get_value_consumer(self, name: str) -> ProtocolValueConsumer | None:
        """Return the value consumer registered as ``name``, or None."""
        with self._lock:
            return self._consumers[EnumConsumerKind.VALUE].get(name)  # type: ignore[return-value]

    def list_schema_consumers(self) -> list[str]:
        """Schema consumer names in registration order."""
        with self._lock:
            return list(self._consumers[EnumConsumerKind.SCHEMA])

    def list_value_consumers(self) -> list[str]:
        """Value consumer names in registration order."""
        with self._lock:
            return list(self._consumers[EnumConsumerKind.VALUE])

    def list_by_purpose(self, purpose: str) -> tuple[list[str], list[str]]:
        """Return ``(schema_consumer_names, value_consumer_names)`` for a purpose.

        Example:
            >>> registry.list_by_purpose("validation")
            ([], ['string_validator', 'boolean_validator', 'number_validator', 'array_validator'])
        """
        key = ConsumerPurpose(purpose)
        with self._lock:
            schema_names = [
                c.name for c in self._purpose_index[EnumConsumerKind.SCHEMA].get(key, [])
            ]
            value_names = [
                c.name for c in self._purpose_index[EnumConsumerKind.VALUE].get(key, [])
            ]
        return schema_names, value_names

    def list_purposes(self) -> list[ConsumerPurpose]:
        """Every purpose with at least one consumer.

        Schema-consumer purposes come first, then purposes only value consumers
        use, each in first-registration order.
        """
        with self._lock:
            purposes = list(self._purpose_index[EnumConsumerKind.SCHEMA])
            for purpose in self._purpose_index[EnumConsumerKind.VALUE]:
                if purpose not in purposes:
                    purposes.append(purpose)
        return purposes

    def list_metadata(self) -> list[ModelConsumerMetadata]:
        """Metadata of every consumer: schema consumers first, then value consumers."""
        with self._lock:
            consumers = [
                *self._consumers[EnumConsumerKind.SCHEMA].values(),
                *self._consumers[EnumConsumerKind.VALUE].values(),
            ]
        return [consumer.metadata() for consumer in consumers]

    def __len__(self) -> int:
        """Total number of registered consumers across both namespaces."""
        with self._lock:
            return sum(len(consumers) for consumers in self._consumers.values())

    def __contains__(self, name: object) -> bool:
        """True if ``name`` is registered in either namespace."""
        if not isinstance(name, str):
            return False
        with self._lock:
            return any(name in consumers for consumers in self._consumers.values())

    # ==========================================================================
    # Applicability Resolution
    # ==========================================================================

    def get_applicable_schema_consumers(
        self, schema: ProtocolSchema | None
    ) -> list[ProtocolAnnotationConsumer]:
        """Schema consumers whose condition matches ``schema``, registration order."""
        return self._applicable(EnumConsumerKind.SCHEMA, schema, None)  # type: ignore[return-value]

    def get_applicable_schema_consumers_by_purpose(
        self, schema: ProtocolSchema | None, purpose: str
    ) -> list[ProtocolAnnotationConsumer]:
        """Schema consumers of ``purpose`` whose condition matches ``schema``."""
        return self._applicable(EnumConsumerKind.SCHEMA, schema, purpose)  # type: ignore[return-value]

    def get_applicable_value_consumers(
        self, schema: ProtocolSchema | None
    ) -> list[ProtocolValueConsumer]:
        """Value consumers whose condition matches ``schema``, registration order."""
        return self._applicable(EnumConsumerKind.VALUE, schema, None)  # type: ignore[return-value]

    def get_applicable_value_consumers_by_purpose(
        self, schema: ProtocolSchema | None, purpose: str
    ) -> list[ProtocolValueConsumer]:
        """Value consumers of ``purpose`` whose condition matches ``schema``."""
        return self._applicable(EnumConsumerKind.VALUE, schema, purpose)  # type: ignore[return-value]

    def _applicable(
        self,
        kind: EnumConsumerKind,
        schema: ProtocolSchema | None,
        purpose: str | None,
    ) -> list[AnyConsumer]:
        with self._lock:
            if purpose is None:
                candidates = list(self._consumers[kind].values())
            else:
                candidates = list(
                    self._purpose_index[kind].get(ConsumerPurpose(purpose), [])
                )

        return [
            consumer
            for consumer in candidates
            if self._condition_matches(kind, consumer, schema)
        ]

    def _condition_matches(
        self,
        kind: EnumConsumerKind,
        consumer: AnyConsumer,
        schema: ProtocolSchema | None,
    ) -> bool:
        # Third-party conditions may raise; a raising condition is no match.
        try:
            return self._condition_cache.matches(
                kind, consumer.name, schema, consumer.applicable_schemas()
            )
        except Exception as e:
            logger.warning(
                "Condition evaluation failed",
                extra={
                    "consumer_name": consumer.name,
                    "consumer_kind": kind.value,
                    "error_type": type(e).__name__,
                    "error": str(e),
                },
            )
            return False

    # ==========================================================================
    # Condition Cache
    # ==========================================================================

    def cache_info(self) -> ModelConditionCacheInfo:
        """Statistics snapshot of the condition-match cache."""
        return self._condition_cache.info()

    def clear_condition_cache(self) -> None:
        """Drop cached condition matches (and the schema references they hold)."""
        self._condition_cache.clear()

    # ==========================================================================
    # Single-Purpose Processing
    # ==========================================================================

    def process_schema_with_purpose(
        self,
        purpose: str,
        schema: ProtocolSchema,
        options: dict[str, object] | None = None,
    ) -> ModelConsumerResult:
        """Process ``schema`` with the first applicable consumer of ``purpose``.

        Args:
            purpose: Consumer purpose to dispatch to.
            schema: Schema to process.
            options: Optional options exposed to the consumer via the context.

        Returns:
            The consumer's result.

        Raises:
            NoApplicableConsumerError: If no schema consumer of ``purpose`` matches.
            ConsumerError: If the consumer raised; the original is ``__cause__``.
        """
        context = ModelProcessingContext(schema=schema, options=dict(options or {}))
        return self._process_first(EnumConsumerKind.SCHEMA, purpose, context)

    def process_value_with_purpose(
        self,
        purpose: str,
        schema: ProtocolSchema,
        value: object,
        options: dict[str, object] | None = None,
    ) -> ModelConsumerResult:
        """Process ``value`` with the first applicable value consumer of ``purpose``.

        Raises:
            NoApplicableConsumerError: If no value consumer of ``purpose`` matches.
            ConsumerError: If the consumer raised; the original is ``__cause__``.
        """
        context = ModelProcessingContext(
            schema=schema, value=value, options=dict(options or {})
        )
        return self._process_first(EnumConsumerKind.VALUE, purpose, context)

    def _process_first(
        self,
        kind: EnumConsumerKind,
        purpose: str,
        context: ModelProcessingContext,
    ) -> ModelConsumerResult:
        consumers = self._applicable(kind, context.schema, purpose)
        if not consumers:
            raise NoApplicableConsumerError(
                purpose,
                kind.value,
                context=ModelErrorContext(
                    operation=f"process_{kind.value}_with_purpose", purpose=purpose
                ),
            )
        return self._invoke(kind, consumers[0], purpose, context)

    # ==========================================================================
    # All-Consumers Processing
    # ==========================================================================

    def process_schema_all_with_purpose(
        self,
        purpose: str,
        schema: ProtocolSchema,
        options: dict[str, object] | None = None,
    ) -> list[ModelConsumerResult]:
        """Process ``schema`` with every applicable consumer of ``purpose``.

        Consumers run sequentially in registration order.

        Returns:
            Results in registration order when every consumer succeeded.

        Raises:
            NoApplicableConsumerError: If no schema consumer of ``purpose`` matches.
            ConsumerAggregateError: If any consumer raised. ``results`` holds the
                successes and ``errors`` the wrapped failures, both in order.
        """
        context = ModelProcessingContext(schema=schema, options=dict(options or {}))
        return self._process_all(EnumConsumerKind.SCHEMA, purpose, context)

    def process_value_all_with_purpose(
        self,
        purpose: str,
        schema: ProtocolSchema,
        value: object,
        options: dict[str, object] | None = None,
    ) -> list[ModelConsumerResult]:
        """Process ``value`` with every applicable value consumer of ``purpose``.

        Raises:
            NoApplicableConsumerError: If no value consumer of ``purpose`` matches.
            ConsumerAggregateError: If any consumer raised (partial results attached).
        """
        context = ModelProcessingContext(
            schema=schema, value=value, options=dict(options or {})
        )
        return self._process_all(EnumConsumerKind.VALUE, purpose, context)

    def _process_all(
        self,
        kind: EnumConsumerKind,
        purpose: str,
        context: ModelProcessingContext,
    ) -> list[ModelConsumerResult]:
        error_context = ModelErrorContext(
            operation=f"process_{kind.value}_all_with_purpose", purpose=purpose
        )
        consumers = self._applicable(kind, context.schema, purpose)
        if not consumers:
            raise NoApplicableConsumerError(purpose, kind.value, context=error_context)

        results: list[ModelConsumerResult] = []
        errors: list[ConsumerError] = []
        for consumer in consumers:
            try:
                results.append(self._invoke(kind, consumer, purpose, context))
            except ConsumerError as e:
                errors.append(e)

        if errors:
            raise ConsumerAggregateError(
                purpose, results, errors, context=error_context
            )
        return results

    def _invoke(
        self,
        kind: EnumConsumerKind,
        consumer: AnyConsumer,
        purpose: str,
        context: ModelProcessingContext,
    ) -> ModelConsumerResult:
        """Invoke one consumer, wrapping any failure in ConsumerError."""
        try:
            if kind is EnumConsumerKind.SCHEMA:
                result = consumer.process_schema(context)  # type: ignore[union-attr]
            else:
                result = consumer.process_value(context, context.value)  # type: ignore[union-attr]
            if not isinstance(result, ModelConsumerResult):
                raise TypeError(
                    f"expected ModelConsumerResult, got {type(result).__name__}"
                )
        except Exception as e:
            logger.warning(
                "Consumer failed",
                extra={
                    "consumer_name": consumer.name,
                    "consumer_kind": kind.value,
                    "purpose": purpose,
                    "path": context.path_string(),
                    "error_type": type(e).__name__,
                },
            )
            raise ConsumerError(
                consumer.name,
                purpose,
                context.path,
                e,
                context=ModelErrorContext(
                    operation=f"process_{kind.value}", purpose=purpose
                ),
            ) from e
        return result

    # ==========================================================================
    # Multi-Purpose Processing
    # ==========================================================================

    def process_schema_with_purposes(
        self,
        purposes: Iterable[str],
        schema: ProtocolSchema,
        options: dict[str, object] | None = None,
    ) -> ModelProcessingResult:
        """Run "process all" for each purpose and aggregate per purpose.

        A purpose without applicable consumers is recorded as an error for
        that purpose only; the remaining purposes are still processed.
        Duplicate purposes are processed once.

        Returns:
            ModelProcessingResult with ``schema_results`` and ``errors`` filled.
        """
        context = ModelProcessingContext(schema=schema, options=dict(options or {}))
        return self._process_purposes(
            _unique(purposes), context, (EnumConsumerKind.SCHEMA,)
        )

    def process_value_with_purposes(
        self,
        purposes: Iterable[str],
        schema: ProtocolSchema,
        value: object,
        options: dict[str, object] | None = None,
    ) -> ModelProcessingResult:
        """Value-consumer counterpart of process_schema_with_purposes()."""
        context = ModelProcessingContext(
            schema=schema, value=value, options=dict(options or {})
        )
        return self._process_purposes(
            _unique(purposes), context, (EnumConsumerKind.VALUE,)
        )

    def process_with_context(
        self, context: ModelProcessingContext
    ) -> ModelProcessingResult:
        """Process a caller-built context for every purpose in ``context.purposes``.

        Schema consumers run when ``context.schema`` is set; value consumers run
        when ``context.schema`` is set and ``context.value`` is not None. Both
        are merged into one result. Consumers receive ``context`` itself, so
        its path, parent and options are visible to them.

        Raises:
            ConsumerConfigurationError: If ``context.purposes`` is empty.
        """
        purposes = _unique(context.purposes)
        if not purposes:
            raise ConsumerConfigurationError(
                "No purposes specified in processing context",
                context=ModelErrorContext(operation="process_with_context"),
            )

        kinds: list[EnumConsumerKind] = []
        if context.schema is not None:
            kinds.append(EnumConsumerKind.SCHEMA)
            if context.value is not None:
                kinds.append(EnumConsumerKind.VALUE)
        return self._process_purposes(purposes, context, tuple(kinds))

    def _process_purposes(
        self,
        purposes: list[ConsumerPurpose],
        context: ModelProcessingContext,
        kinds: tuple[EnumConsumerKind, ...],
    ) -> ModelProcessingResult:
        executed_at = datetime.now(UTC)
        started = time.perf_counter()

        results: dict[EnumConsumerKind, dict[ConsumerPurpose, list[ModelConsumerResult]]] = {
            EnumConsumerKind.SCHEMA: {},
            EnumConsumerKind.VALUE: {},
        }
        errors: dict[ConsumerPurpose, list[Exception]] = {}

        for kind in kinds:
            for purpose in purposes:
                try:
                    results[kind][purpose] = self._process_all(kind, purpose, context)
                except ConsumerAggregateError as e:
                    if e.results:
                        results[kind][purpose] = e.results
                    errors.setdefault(purpose, []).extend(e.errors)
                except NoApplicableConsumerError as e:
                    errors.setdefault(purpose, []).append(e)

        outcome = ModelProcessingResult(
            success=not errors,
            schema_results=results[EnumConsumerKind.SCHEMA],
            value_results=results[EnumConsumerKind.VALUE],
            errors=errors,
            executed_at=executed_at,
            duration=timedelta(seconds=time.perf_counter() - started),
        )
        logger.debug(
            "Processed purposes",
            extra={
                "purposes": list(purposes),
                "consumer_kinds": [k.value for k in kinds],
                "success": outcome.success,
                "error_count": outcome.error_count,
            },
        )
        return outcome


def _unique(purposes: Iterable[str]) -> list[ConsumerPurpose]:
    if isinstance(purposes, str):
        raise ConsumerConfigurationError(
            f"purposes must be a collection of strings, not the string {purposes!r}",
            context=ModelErrorContext(operation="process_with_purposes"),
        )
    seen: list[ConsumerPurpose] = []
    for purpose in purposes:
        key = ConsumerPurpose(purpose)
        if key not in seen:
            seen.append(key)
    return seen


__all__: list[str] = [
    "RegistryConsumer",
]
