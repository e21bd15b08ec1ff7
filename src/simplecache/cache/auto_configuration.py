# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Builds a SimpleCache from configuration."""

from __future__ import annotations

import importlib
from collections.abc import MutableMapping
from typing import Any

from simplecache.cache.core import SimpleCache
from simplecache.cache.ports.outbound import CacheDriver
from simplecache.config.properties.cache import CacheOptions
from simplecache.core.config import Config
from simplecache.kernel.exceptions import CacheBackendException
from simplecache.logging.structlog_adapter import StructlogAdapter


def is_available(module_name: str) -> bool:
    """Check if a Python package is importable."""
    try:
        importlib.import_module(module_name)
        return True
    except ImportError:
        return False


def detect_provider(options: CacheOptions) -> str:
    """Pick redis when the client library is installed and a URL is configured."""
    if options.redis_url and is_available("redis"):
        return "redis"
    return "memory"


def create_driver(
    options: CacheOptions,
    *,
    session: MutableMapping[str, Any] | None = None,
    client: Any = None,
) -> CacheDriver:
    """Instantiate the driver named by ``options.provider``.

    Args:
        options: Bound cache options.
        session: Mapping backing the ``session`` provider.
        client: Pre-built Redis client for the ``redis`` provider; when
            omitted one is created from ``options.redis_url``.
    """
    provider = options.provider if options.provider != "auto" else detect_provider(options)

    if provider == "memory":
        from simplecache.cache.adapters.memory import MemoryCacheDriver

        return MemoryCacheDriver()

    if provider == "file":
        from simplecache.cache.adapters.file import FileCacheDriver

        return FileCacheDriver(options)

    if provider == "session":
        if session is None:
            raise CacheBackendException("session provider requires a session mapping", code="CACHE_PROVIDER")
        from simplecache.cache.adapters.session import SessionCacheDriver

        return SessionCacheDriver(session, options)

    if provider == "redis":
        from simplecache.cache.adapters.redis import RedisCacheDriver

        if client is None:
            if not options.redis_url:
                raise CacheBackendException("redis provider requires simplecache.cache.redis_url", code="CACHE_PROVIDER")
            import redis

            client = redis.Redis.from_url(options.redis_url)
        return RedisCacheDriver(client)

    raise CacheBackendException(
        f"unknown cache provider: {provider}",
        code="CACHE_PROVIDER",
        context={"provider": provider},
    )


def create_cache(
    config: Config,
    *,
    session: MutableMapping[str, Any] | None = None,
    client: Any = None,
    logger: Any = None,
) -> SimpleCache:
    """Bind :class:`CacheOptions` from *config* and wrap the chosen driver.

    Without an explicit *logger*, structlog is configured from the
    ``simplecache.logging.*`` section and the cache logs through the
    ``simplecache.cache.core`` logger.
    """
    if logger is None:
        adapter = StructlogAdapter()
        adapter.configure(config)
        logger = adapter.get_logger("simplecache.cache.core")

    options = config.bind(CacheOptions)
    driver = create_driver(options, session=session, client=client)
    return SimpleCache(driver, options=options, logger=logger)
