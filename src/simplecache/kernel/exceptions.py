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
"""Unified exception hierarchy for SimpleCache.

All library exceptions inherit from SimpleCacheException, enabling unified
error handling: catch SimpleCacheException to handle every cache error, or
catch a specific subclass for targeted handling.

Categories:
- InvalidArgumentException: caller errors detected before any backend call
- CacheBackendException: a shipped backend could not be set up
"""

from __future__ import annotations

from typing import Any


# =============================================================================
# Base Exception
# =============================================================================


class SimpleCacheException(Exception):
    """Base exception for all SimpleCache errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CACHE_INVALID_KEY").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Argument Exceptions
# =============================================================================


class InvalidArgumentException(SimpleCacheException, ValueError):
    """The caller passed an argument the cache cannot accept.

    Never transient: retrying the same call fails the same way.
    """


class InvalidKeyException(InvalidArgumentException):
    """Cache key is not a non-empty string."""

    def __init__(self, key: Any) -> None:
        super().__init__(
            f"invalid cache key: {key!r}",
            code="CACHE_INVALID_KEY",
            context={"key": key},
        )
        self.key = key


class InvalidBatchInputException(InvalidArgumentException):
    """Batch argument is neither a collection nor an iterable of keys/pairs."""

    def __init__(self, data: Any) -> None:
        super().__init__(
            f"invalid data: {type(data).__name__}",
            code="CACHE_INVALID_BATCH",
            context={"type": type(data).__name__},
        )


class InvalidTTLException(InvalidArgumentException):
    """TTL is not None, a positive int, or a resolvable interval."""

    def __init__(self, ttl: Any) -> None:
        super().__init__(
            f"invalid ttl: {ttl!r}",
            code="CACHE_INVALID_TTL",
            context={"ttl": ttl},
        )
        self.ttl = ttl


# =============================================================================
# Backend Exceptions
# =============================================================================


class CacheBackendException(SimpleCacheException):
    """A backend is misconfigured and cannot serve requests."""
