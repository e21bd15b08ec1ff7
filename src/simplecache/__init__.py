"""SimpleCache — a key-value cache layer over interchangeable storage drivers."""

from simplecache.cache import (
    CacheDriver,
    FileCacheDriver,
    MemoryCacheDriver,
    RedisCacheDriver,
    SessionCacheDriver,
    SimpleCache,
    create_cache,
)
from simplecache.config.properties.cache import CacheOptions
from simplecache.core.config import Config
from simplecache.kernel.exceptions import (
    CacheBackendException,
    InvalidArgumentException,
    InvalidBatchInputException,
    InvalidKeyException,
    InvalidTTLException,
    SimpleCacheException,
)

__version__ = "0.1.0"

__all__ = [
    "CacheBackendException",
    "CacheDriver",
    "CacheOptions",
    "Config",
    "FileCacheDriver",
    "InvalidArgumentException",
    "InvalidBatchInputException",
    "InvalidKeyException",
    "InvalidTTLException",
    "MemoryCacheDriver",
    "RedisCacheDriver",
    "SessionCacheDriver",
    "SimpleCache",
    "SimpleCacheException",
    "create_cache",
]
