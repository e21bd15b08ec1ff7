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
"""Session-bound cache driver."""

from __future__ import annotations

import time
from collections.abc import MutableMapping
from typing import Any

from simplecache.config.properties.cache import CacheOptions


class SessionCacheDriver:
    """Keeps entries inside a caller-owned session mapping.

    All entries live in one dict stored under ``options.session_key``, so
    the cache shares the session's lifetime and persistence. Expiry uses
    wall-clock time because sessions may be reloaded by another process.
    The bucket is reassigned on every write so that session backends which
    only track top-level assignment notice the change.
    """

    def __init__(self, session: MutableMapping[str, Any], options: CacheOptions | None = None) -> None:
        self._session = session
        self._key = (options or CacheOptions()).session_key
        if not isinstance(self._session.get(self._key), dict):
            self._session[self._key] = {}

    def _bucket(self) -> dict[str, Any]:
        return dict(self._session.get(self._key) or {})

    def get(self, key: str, default: Any = None) -> Any:
        entry = self._bucket().get(key)
        if entry is None:
            return default

        expires_at = entry.get("expires_at")
        if expires_at is not None and time.time() > expires_at:
            self.delete(key)
            return default

        return entry["value"]

    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        bucket = self._bucket()
        bucket[key] = {
            "value": value,
            "expires_at": time.time() + ttl if ttl is not None else None,
        }
        self._session[self._key] = bucket
        return True

    def delete(self, key: str) -> bool:
        bucket = self._bucket()
        bucket.pop(key, None)
        self._session[self._key] = bucket
        return True

    def clear(self) -> bool:
        self._session[self._key] = {}
        return True
