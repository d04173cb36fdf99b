"""Translation caching.

Two tiers sit behind TieredTranslationCache:

1. TranslationCache - in-memory, keyed by (locale, group), no eviction.
2. PersistentTranslationStore - optional TTL-bound key/value store.

Lookups go memory -> persistent store -> loader; a loader result populates
both tiers.
"""

import copy
import threading
import time
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, Optional

from lingua.logging import get_module_logger

logger = get_module_logger()

TranslationData = Dict[str, Any]


class TranslationCache:
    """In-memory cache of loaded translation groups.

    Stores groups for the lifetime of the instance. A lock guards every
    operation so an instance shared across threads never exposes a
    partially updated locale mapping.
    """

    def __init__(self):
        self._cache: Dict[str, Dict[str, TranslationData]] = {}
        self._lock = threading.Lock()

    def has(self, locale: str, group: str) -> bool:
        with self._lock:
            return group in self._cache.get(locale, {})

    def get(self, locale: str, group: str) -> Optional[TranslationData]:
        """Return the cached group, or None when absent."""
        with self._lock:
            return self._cache.get(locale, {}).get(group)

    def put(self, locale: str, group: str, translations: TranslationData) -> None:
        with self._lock:
            self._cache.setdefault(locale, {})[group] = translations

    def forget(self, locale: str, group: str) -> None:
        with self._lock:
            self._cache.get(locale, {}).pop(group, None)

    def get_all_for_locale(self, locale: str) -> Dict[str, TranslationData]:
        with self._lock:
            return dict(self._cache.get(locale, {}))

    def flush(self) -> None:
        with self._lock:
            self._cache.clear()

    def flush_locale(self, locale: str) -> None:
        with self._lock:
            self._cache.pop(locale, None)


class PersistentTranslationStore(ABC):
    """Abstract base class for the persistent cache tier.

    Implementations wrap an external TTL-capable store (Redis, memcached,
    DynamoDB, ...). Keys are opaque strings built by TieredTranslationCache.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[TranslationData]:
        """Return the stored value, or None if missing or expired."""
        pass

    @abstractmethod
    def put(self, key: str, value: TranslationData, ttl_seconds: int) -> None:
        pass

    @abstractmethod
    def forget(self, key: str) -> None:
        pass


class InMemoryTranslationStore(PersistentTranslationStore):
    """Process-local persistent tier with TTL expiry.

    Used when no external store is wired in.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        # {key: (value, expiry_timestamp)}
        self._entries: Dict[str, tuple] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def get(self, key: str) -> Optional[TranslationData]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            value, expiry = entry
            if self._clock() >= expiry:
                self._entries.pop(key, None)
                logger.debug("translation_store_entry_expired", key=key)
                return None
            return value

    def put(self, key: str, value: TranslationData, ttl_seconds: int) -> None:
        with self._lock:
            self._entries[key] = (value, self._clock() + ttl_seconds)

    def forget(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


class TieredTranslationCache:
    """Facade over the in-memory tier and the optional persistent tier.

    Attributes:
        memory: In-memory tier.
        store: Persistent tier, or None when disabled.
        ttl_seconds: TTL for persistent entries.
        prefix: Key prefix for persistent entries.
    """

    def __init__(
        self,
        memory: Optional[TranslationCache] = None,
        store: Optional[PersistentTranslationStore] = None,
        ttl_seconds: int = 3600,
        prefix: str = "lingua",
    ):
        self.memory = memory if memory is not None else TranslationCache()
        self.store = store
        self.ttl_seconds = ttl_seconds
        self.prefix = prefix

    def key(self, locale: str, group: str) -> str:
        return f"{self.prefix}.{locale}.{group}"

    def remember(
        self,
        locale: str,
        group: str,
        loader: Callable[[], TranslationData],
    ) -> TranslationData:
        """Return a group from the first tier that has it, loading on miss.

        Callers get a deep copy; cached groups are never handed out for
        mutation. Empty loader results are not cached, so a group file
        created later is picked up without an explicit flush.
        """
        cached = self.memory.get(locale, group)
        if cached is not None:
            return copy.deepcopy(cached)

        if self.store is not None:
            stored = self.store.get(self.key(locale, group))
            if stored is not None:
                logger.debug("translation_store_hit", locale=locale, group=group)
                self.memory.put(locale, group, stored)
                return copy.deepcopy(stored)

        translations = loader()
        if translations:
            self.memory.put(locale, group, translations)
            if self.store is not None:
                self.store.put(self.key(locale, group), translations, self.ttl_seconds)
            return copy.deepcopy(translations)
        return translations

    def forget(self, locale: str, group: str) -> None:
        self.memory.forget(locale, group)
        if self.store is not None:
            self.store.forget(self.key(locale, group))

    def clear_locale(self, locale: str, groups: Iterable[str] = ()) -> None:
        """Drop a locale from both tiers.

        The persistent tier cannot be enumerated, so ``groups`` names the
        entries to forget there in addition to those held in memory.
        """
        known = set(groups) | set(self.memory.get_all_for_locale(locale))
        self.memory.flush_locale(locale)
        if self.store is not None:
            for group in known:
                self.store.forget(self.key(locale, group))
        logger.info("translation_cache_cleared", locale=locale, group_count=len(known))
