"""Cache drivers — concrete storage backends."""

from simplecache.cache.adapters.file import FileCacheDriver
from simplecache.cache.adapters.memory import MemoryCacheDriver
from simplecache.cache.adapters.redis import RedisCacheDriver
from simplecache.cache.adapters.session import SessionCacheDriver

__all__ = ["FileCacheDriver", "MemoryCacheDriver", "RedisCacheDriver", "SessionCacheDriver"]
