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
"""Filesystem cache driver."""

from __future__ import annotations

import hashlib
import logging
import os
import pickle
import tempfile
import threading
import time
from pathlib import Path
from typing import Any

from simplecache.config.properties.cache import CacheOptions
from simplecache.kernel.exceptions import CacheBackendException

_logger = logging.getLogger(__name__)

_SUFFIX = ".cache"


class FileCacheDriver:
    """Stores one pickled entry per key below ``options.file_storage``.

    File names are the SHA-256 of the key, sharded into two-character
    subdirectories (``ab/abcdef....cache``). Each file holds the value and
    its absolute expiry time (``None`` for no expiry). Writes go to a temp
    file first and are renamed into place.
    """

    def __init__(self, options: CacheOptions) -> None:
        if not options.file_storage:
            raise CacheBackendException(
                "file cache requires simplecache.cache.file_storage",
                code="CACHE_FILE_STORAGE",
            )

        root = Path(options.file_storage)
        if not root.is_dir() or not os.access(root, os.R_OK | os.W_OK):
            raise CacheBackendException(
                f"invalid cache storage directory: {root}",
                code="CACHE_FILE_STORAGE",
                context={"path": str(root)},
            )

        self._root = root
        self._lock = threading.Lock()

    def _path(self, key: str) -> Path:
        digest = hashlib.sha256(key.encode("utf-8", "surrogatepass")).hexdigest()
        return self._root / digest[:2] / f"{digest}{_SUFFIX}"

    def get(self, key: str, default: Any = None) -> Any:
        path = self._path(key)
        try:
            with open(path, "rb") as f:
                value, expires_at = pickle.load(f)
        except FileNotFoundError:
            return default
        except (OSError, pickle.UnpicklingError, EOFError, TypeError, ValueError):
            _logger.warning("Unreadable cache file for key '%s': %s", key, path)
            return default

        if expires_at is not None and time.time() > expires_at:
            self._unlink(path)
            return default

        return value

    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Pickle *value* to its file. Returns ``False`` if it cannot be written."""
        expires_at = time.time() + ttl if ttl is not None else None
        path = self._path(key)

        try:
            payload = pickle.dumps((value, expires_at))
        except (pickle.PicklingError, TypeError, AttributeError):
            _logger.error("Cannot serialize cache value for key '%s'", key)
            return False

        with self._lock:
            try:
                path.parent.mkdir(exist_ok=True)
                fd, tmp = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
                with os.fdopen(fd, "wb") as f:
                    f.write(payload)
                os.replace(tmp, path)
            except OSError:
                _logger.error("Failed to write cache file for key '%s': %s", key, path)
                return False

        return True

    def delete(self, key: str) -> bool:
        """Remove the file for *key*. A missing file counts as deleted."""
        return self._unlink(self._path(key))

    def clear(self) -> bool:
        """Remove every cache file under the storage root."""
        results = [self._unlink(path) for path in self._root.glob(f"??/*{_SUFFIX}")]
        return all(results)

    def _unlink(self, path: Path) -> bool:
        try:
            path.unlink(missing_ok=True)
        except OSError:
            _logger.error("Failed to remove cache file %s", path)
            return False
        return True
