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
"""Tests for the SimpleCache exception hierarchy."""

import pytest

from simplecache.kernel.exceptions import (
    CacheBackendException,
    InvalidArgumentException,
    InvalidBatchInputException,
    InvalidKeyException,
    InvalidTTLException,
    SimpleCacheException,
)


class TestSimpleCacheException:
    def test_basic_creation(self):
        exc = SimpleCacheException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_context_defaults_to_empty_dict(self):
        exc = SimpleCacheException("test")
        exc.context["key"] = "value"
        assert SimpleCacheException("test2").context == {}


class TestArgumentExceptions:
    def test_invalid_key(self):
        exc = InvalidKeyException("abc")
        assert exc.code == "CACHE_INVALID_KEY"
        assert exc.context == {"key": "abc"}
        assert str(exc) == "invalid cache key: 'abc'"

    def test_invalid_batch(self):
        exc = InvalidBatchInputException(42)
        assert exc.code == "CACHE_INVALID_BATCH"
        assert exc.context == {"type": "int"}

    def test_invalid_ttl(self):
        exc = InvalidTTLException(0)
        assert exc.code == "CACHE_INVALID_TTL"
        assert exc.ttl == 0

    @pytest.mark.parametrize("cls", [InvalidKeyException, InvalidBatchInputException, InvalidTTLException])
    def test_argument_errors_share_base(self, cls):
        assert issubclass(cls, InvalidArgumentException)
        assert issubclass(cls, SimpleCacheException)
        assert issubclass(cls, ValueError)


class TestBackendException:
    def test_is_not_an_argument_error(self):
        assert issubclass(CacheBackendException, SimpleCacheException)
        assert not issubclass(CacheBackendException, InvalidArgumentException)
