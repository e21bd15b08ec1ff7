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
"""Process-local cache driver."""

from __future__ import annotations

import threading
import time
from typing import Any


class MemoryCacheDriver:
    """In-memory cache driver with optional TTL support.

    Suitable for development, testing, and single-process applications.
    Entries live in a plain dict guarded by a lock; expired entries are
    dropped lazily when read.
    """

    def __init__(self) -> None:
        self._store: dict[str, tuple[Any, float | None]] = {}
        self._lock = threading.Lock()

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for *key*, or *default* if missing or expired."""
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return default

            value, expires_at = entry
            if expires_at is not None and time.monotonic() > expires_at:
                del self._store[key]
                return default

            return value

    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        expires_at = time.monotonic() + ttl if ttl is not None else None
        with self._lock:
            self._store[key] = (value, expires_at)
        return True

    def delete(self, key: str) -> bool:
        """Remove *key*. Removing an absent key still succeeds."""
        with self._lock:
            self._store.pop(key, None)
        return True

    def clear(self) -> bool:
        with self._lock:
            self._store.clear()
        return True
