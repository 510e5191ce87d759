"""Persistent cache for built adaptor lists."""

import hashlib
import logging
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, TypeVar

import diskcache

from config.settings import Settings, get_settings
from src.core.models import ProtocolAdaptor

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DiskCache:
    """
    diskcache-backed store for adaptor lists, expiring after the settings TTL.

    Lists are stored in their ``to_dict`` form so an entry written by one
    process can be read back by another. Cache failures are logged and
    treated as misses.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        namespace: str = "adaptors",
    ):
        self.settings = settings or get_settings()
        self.namespace = namespace
        self._cache: Optional[diskcache.Cache] = None

    def _get_cache(self) -> diskcache.Cache:
        if self._cache is None:
            cache_dir = self.settings.ensure_cache_dir() / self.namespace
            cache_dir.mkdir(parents=True, exist_ok=True)
            self._cache = diskcache.Cache(str(cache_dir))
        return self._cache

    def _run(self, action: str, key: str, operation: Callable[[diskcache.Cache], T], fallback: T) -> T:
        """Run ``operation`` on the cache, returning ``fallback`` on failure."""
        try:
            return operation(self._get_cache())
        except Exception as e:
            logger.warning(f"Cache {action} failed for {key}: {e}")
            return fallback

    def get(self, key: str, default: Any = None) -> Any:
        return self._run("get", key, lambda cache: cache.get(key, default=default), default)

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """
        Store a plain value.

        Args:
            key: Cache key
            value: Picklable value
            ttl: Seconds until expiry (defaults to settings.cache_ttl_seconds)

        Returns:
            True if stored
        """
        expire = ttl if ttl is not None else self.settings.cache_ttl_seconds

        def store(cache: diskcache.Cache) -> bool:
            cache.set(key, value, expire=expire)
            return True

        return self._run("set", key, store, False)

    def get_adaptors(self, key: str) -> Optional[List[ProtocolAdaptor]]:
        """Cached adaptor list, or None on a miss or an unreadable entry."""
        cached = self.get(key)
        if cached is None:
            return None
        try:
            return [ProtocolAdaptor.from_dict(item) for item in cached]
        except (TypeError, ValueError) as e:
            logger.warning(f"Dropping unreadable cache entry {key}: {e}")
            self.delete(key)
            return None

    def set_adaptors(self, key: str, adaptors: Iterable[ProtocolAdaptor], ttl: Optional[int] = None) -> bool:
        return self.set(key, [adaptor.to_dict() for adaptor in adaptors], ttl=ttl)

    def delete(self, key: str) -> bool:
        """Delete a key. Returns True if it existed."""
        return self._run("delete", key, lambda cache: bool(cache.delete(key)), False)

    def clear(self) -> int:
        """Remove every entry. Returns the number removed."""
        return self._run("clear", self.namespace, lambda cache: cache.clear(), 0)

    def close(self):
        if self._cache:
            self._cache.close()
            self._cache = None


class CacheKeys:
    """Standard cache key patterns."""

    @staticmethod
    def adaptors(adaptor_type: Optional[str], fingerprint: Optional[str] = None) -> str:
        key = f"adaptors:{adaptor_type or 'all'}"
        return f"{key}:{fingerprint}" if fingerprint else key

    @staticmethod
    def fingerprint(*paths: Path) -> str:
        """Short digest of the paths' sizes and modification times.

        Editing any of the files changes the digest; missing files hash as
        ``missing``.
        """
        digest = hashlib.sha256()
        for path in paths:
            try:
                stat = path.stat()
                digest.update(f"{path}:{stat.st_mtime_ns}:{stat.st_size};".encode())
            except OSError:
                digest.update(f"{path}:missing;".encode())
        return digest.hexdigest()[:16]
