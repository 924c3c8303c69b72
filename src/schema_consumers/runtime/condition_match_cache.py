# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Condition Match Cache.

Caches the outcome of ``consumer.applicable_schemas().matches(schema)`` per
(consumer kind, consumer name, schema instance).

Identity Semantics:
    Entries are keyed by ``id(schema)``, not by schema content. Two
    structurally identical schema instances are separate entries and the
    second one is a miss. Each entry keeps a strong reference to its schema,
    so an ``id`` cannot be recycled by another object while the entry is
    alive; a lookup also verifies ``entry.schema is schema``.

Thread Safety:
    The cache owns its own ``threading.Lock``, independent of the registry's
    structural lock. Lookups that read the registry under its lock never
    write the cache under that same lock. Conditions are evaluated outside
    the cache lock; two threads missing on the same key may both evaluate,
    which is harmless because conditions are pure and the stored value is
    identical.

Bounding:
    At most ``max_entries`` entries are kept. The least recently used entry
    is evicted first, which also releases its schema reference.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import TYPE_CHECKING, NamedTuple

from schema_consumers.models.model_condition_cache_info import ModelConditionCacheInfo
from schema_consumers.models.model_registry_config import DEFAULT_CACHE_MAX_ENTRIES

if TYPE_CHECKING:
    from schema_consumers.enums import EnumConsumerKind
    from schema_consumers.protocols import ProtocolSchema, ProtocolSchemaCondition

logger = logging.getLogger(__name__)


class _CacheKey(NamedTuple):
    consumer_kind: str
    consumer_name: str
    schema_id: int


class _CacheEntry(NamedTuple):
    schema: object
    matched: bool


class ConditionMatchCache:
    """Bounded, independently locked, identity-keyed cache of condition matches.

    Example:
        >>> cache = ConditionMatchCache(max_entries=128)
        >>> cache.matches(EnumConsumerKind.SCHEMA, "string_docs", schema, condition)
        True
        >>> cache.info().hits
        0
    """

    def __init__(
        self,
        max_entries: int = DEFAULT_CACHE_MAX_ENTRIES,
        enabled: bool = True,
    ) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")
        self._max_entries = max_entries
        self._enabled = enabled
        self._entries: OrderedDict[_CacheKey, _CacheEntry] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def enabled(self) -> bool:
        return self._enabled

    def matches(
        self,
        consumer_kind: EnumConsumerKind,
        consumer_name: str,
        schema: ProtocolSchema | None,
        condition: ProtocolSchemaCondition,
    ) -> bool:
        """Return whether ``condition`` matches ``schema``, using the cache.

        None schemas are never cached.
        """
        if not self._enabled or schema is None:
            return condition.matches(schema)

        key = _CacheKey(consumer_kind.value, consumer_name, id(schema))
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry.schema is schema:
                self._entries.move_to_end(key)
                self._hits += 1
                return entry.matched

        matched = condition.matches(schema)

        evicted = 0
        with self._lock:
            self._misses += 1
            self._entries[key] = _CacheEntry(schema=schema, matched=matched)
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)
                evicted += 1
            self._evictions += evicted

        if evicted:
            logger.debug(
                "Evicted condition cache entries",
                extra={"evicted": evicted, "max_entries": self._max_entries},
            )
        return matched

    def clear(self) -> None:
        """Drop every entry and reset statistics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
            self._evictions = 0

    def info(self) -> ModelConditionCacheInfo:
        """Return a statistics snapshot."""
        with self._lock:
            return ModelConditionCacheInfo(
                enabled=self._enabled,
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                size=len(self._entries),
                max_entries=self._max_entries,
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__: list[str] = ["ConditionMatchCache"]
