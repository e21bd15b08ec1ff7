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
"""SimpleCache — shared cache behavior over a single-key driver."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from simplecache.cache.ports.outbound import CacheDriver
from simplecache.cache.validation import (
    TTL,
    check_key,
    check_keys,
    check_return,
    get_keys,
    get_ttl,
    get_values,
)
from simplecache.config.properties.cache import CacheOptions
from simplecache.logging.null_logger import NullLogger

_MISSING = object()


class SimpleCache:
    """Cache facade that validates input and fans batches out to a driver.

    The driver only implements ``get``/``set``/``delete``/``clear`` for one
    key at a time. Everything else (``has`` and the ``*_multiple``
    operations) is built here by calling those primitives sequentially, in
    input order.

    Batch writes and deletes are best-effort: a failing key does not stop the
    remaining keys, and keys already written are not rolled back. The
    aggregate result only says whether *every* key succeeded.

    Args:
        driver: Storage backend implementing :class:`CacheDriver`.
        options: Backend settings, kept for the lifetime of the cache.
        logger: structlog-style logger; defaults to a :class:`NullLogger`.
    """

    def __init__(
        self,
        driver: CacheDriver,
        options: CacheOptions | None = None,
        logger: Any = None,
    ) -> None:
        self._driver = driver
        self._options = options if options is not None else CacheOptions()
        self._logger = logger if logger is not None else NullLogger()

    @property
    def driver(self) -> CacheDriver:
        return self._driver

    @property
    def options(self) -> CacheOptions:
        return self._options

    def set_logger(self, logger: Any) -> None:
        """Attach the logger that receives validation errors."""
        self._logger = logger

    # -- single key -------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        """Return the cached value for *key*, or *default* if absent or expired."""
        return self._driver.get(check_key(key, self._logger), default)

    def set(self, key: str, value: Any, ttl: TTL = None) -> bool:
        """Store *value* under *key*; *ttl* may be seconds or an interval."""
        check_key(key, self._logger)
        return self._driver.set(key, value, get_ttl(ttl, self._logger))

    def delete(self, key: str) -> bool:
        return self._driver.delete(check_key(key, self._logger))

    def clear(self) -> bool:
        """Wipe the whole backend."""
        return self._driver.clear()

    def has(self, key: str) -> bool:
        """True iff *key* is retrievable; a stored ``None`` counts as present."""
        return self.get(key, _MISSING) is not _MISSING

    # -- batches ----------------------------------------------------------

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        """Fetch every key in *keys*, filling misses with *default*.

        Keys keep their input order. A repeated key is fetched again and
        keeps its first position in the result.
        """
        key_list = get_keys(keys, self._logger)
        check_keys(key_list, self._logger)

        data: dict[str, Any] = {}
        for key in key_list:
            data[key] = self._driver.get(key, default)
        return data

    def set_multiple(
        self,
        values: Mapping[str, Any] | Iterable[tuple[str, Any]],
        ttl: TTL = None,
    ) -> bool:
        """Store every pair with the same TTL; True only if every write succeeded."""
        data = get_values(values, self._logger)
        check_keys(data, self._logger)
        seconds = get_ttl(ttl, self._logger)

        results = [self._driver.set(key, value, seconds) for key, value in data.items()]
        return check_return(results)

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Delete every key; True only if every delete succeeded."""
        key_list = get_keys(keys, self._logger)
        check_keys(key_list, self._logger)

        results = [self._driver.delete(key) for key in key_list]
        return check_return(results)
