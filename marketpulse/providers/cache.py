"""In-memory caching for acquired competitor records.

This module provides CachingProvider, a decorator around any
CompetitorDataProvider that caches results per (company, industry) key.

The cache is designed to:
- Compute each key at most once at a time: the first caller computes,
  concurrent callers for the same key wait and share the completed value
- Evict least recently used keys beyond max_size
- Never cache failures
- Hand every caller its own list
"""

import logging
from collections import OrderedDict
from concurrent.futures import Future
from threading import Lock

from marketpulse.models.competitor_record import CompetitorRecord
from marketpulse.providers.base_provider import CompetitorDataProvider

logger = logging.getLogger(__name__)

CacheKey = tuple[str, str]


class CachingProvider(CompetitorDataProvider):
    """Single-flight LRU cache in front of another provider.
    
    Attributes:
        provider: Wrapped provider that performs the actual fetch
        max_size: Maximum number of cached keys
    """
    
    def __init__(self, provider: CompetitorDataProvider, max_size: int = 128) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        self.provider = provider
        self.max_size = max_size
        self._entries: OrderedDict[CacheKey, tuple[CompetitorRecord, ...]] = OrderedDict()
        self._in_flight: dict[CacheKey, Future] = {}
        self._lock = Lock()
        self._hits = 0
        self._misses = 0
    
    @property
    def name(self) -> str:
        return f"cached_{self.provider.name}"
    
    def fetch(self, company_name: str, industry: str) -> list[CompetitorRecord]:
        key = (company_name, industry)
        
        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self._entries.move_to_end(key)
                self._hits += 1
                logger.debug(f"Provider cache hit for {key}")
                return list(cached)
            
            future = self._in_flight.get(key)
            is_owner = future is None
            if is_owner:
                future = Future()
                self._in_flight[key] = future
                self._misses += 1
        
        if not is_owner:
            logger.debug(f"Waiting for in-flight fetch of {key}")
            # Re-raises the owner's exception if its fetch failed
            return list(future.result())
        
        try:
            records = tuple(self.provider.fetch(company_name, industry))
        except BaseException as e:
            # Waiters must be released even on KeyboardInterrupt/SystemExit
            with self._lock:
                del self._in_flight[key]
            future.set_exception(e)
            raise
        
        with self._lock:
            self._entries[key] = records
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted {evicted} from provider cache")
            del self._in_flight[key]
        future.set_result(records)
        
        return list(records)
    
    def cache_info(self) -> dict[str, int]:
        """Return cache statistics.
        
        Returns:
            Dictionary with "hits", "misses" and "size"
        """
        with self._lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "size": len(self._entries),
            }
    
    def clear(self) -> None:
        """Drop all cached entries and reset statistics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
