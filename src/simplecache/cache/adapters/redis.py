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
"""Redis-backed cache driver."""

from __future__ import annotations

import json
import logging
from typing import Any

_logger = logging.getLogger(__name__)


class RedisCacheDriver:
    """Cache driver that delegates to a synchronous ``redis.Redis``-like client.

    Values are JSON-serialized before storage, so only JSON-shaped values
    round-trip unchanged: tuples come back as lists, and dict keys that are
    not strings come back as strings (``{1: "a"}`` reads as ``{"1": "a"}``).
    Sets, bytes and arbitrary objects cannot be stored and make ``set``
    return ``False``. Use the file driver for arbitrary picklable values.
    Connection errors raised by the client propagate to the caller.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieve and deserialize a cached value."""
        raw = self._client.get(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, TypeError, UnicodeDecodeError):
            _logger.warning("Failed to deserialize cached value for key '%s'", key)
            return default

    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Serialize and store a value; ``ttl`` becomes the Redis ``EX`` expiry."""
        try:
            raw = json.dumps(value)
        except (TypeError, ValueError):
            _logger.error("Cannot serialize cache value for key '%s'", key)
            return False
        return bool(self._client.set(key, raw.encode(), ex=ttl))

    def delete(self, key: str) -> bool:
        """Remove a key. Removing an absent key still succeeds."""
        self._client.delete(key)
        return True

    def clear(self) -> bool:
        """Flush the entire database."""
        return bool(self._client.flushdb())

    def close(self) -> None:
        """Close the underlying Redis connection."""
        self._client.close()
