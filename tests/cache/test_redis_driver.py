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
"""Tests for RedisCacheDriver using a FakeRedis stub."""

from __future__ import annotations

from simplecache.cache.adapters.redis import RedisCacheDriver
from simplecache.cache.core import SimpleCache
from simplecache.cache.ports.outbound import CacheDriver

MISSING = object()


class FakeRedis:
    """Minimal in-memory stub matching the redis.Redis interface."""

    def __init__(self) -> None:
        self._store: dict[str, bytes] = {}
        self.expiries: dict[str, int | None] = {}
        self.closed = False

    def get(self, key: str) -> bytes | None:
        return self._store.get(key)

    def set(self, key: str, value: bytes, ex: int | None = None) -> bool:
        self._store[key] = value
        self.expiries[key] = ex
        return True

    def delete(self, *keys: str) -> int:
        count = 0
        for k in keys:
            if k in self._store:
                del self._store[k]
                count += 1
        return count

    def flushdb(self) -> bool:
        self._store.clear()
        return True

    def close(self) -> None:
        self.closed = True


class TestRedisCacheDriver:
    def test_protocol_compliance(self):
        assert isinstance(RedisCacheDriver(FakeRedis()), CacheDriver)

    def test_set_and_get(self):
        driver = RedisCacheDriver(FakeRedis())
        assert driver.set("key", {"name": "Alice", "age": 30}) is True
        assert driver.get("key") == {"name": "Alice", "age": 30}

    def test_get_missing_key(self):
        assert RedisCacheDriver(FakeRedis()).get("no-such-key", MISSING) is MISSING

    def test_ttl_is_passed_as_ex(self):
        client = FakeRedis()
        RedisCacheDriver(client).set("k", 1, ttl=90)
        assert client.expiries["k"] == 90

    def test_delete(self):
        driver = RedisCacheDriver(FakeRedis())
        driver.set("key", "value")
        assert driver.delete("key") is True
        assert driver.get("key") is None

    def test_delete_missing_succeeds(self):
        assert RedisCacheDriver(FakeRedis()).delete("missing") is True

    def test_clear(self):
        driver = RedisCacheDriver(FakeRedis())
        driver.set("a", 1)
        assert driver.clear() is True
        assert driver.get("a") is None

    def test_unserializable_value_returns_false(self):
        client = FakeRedis()
        assert RedisCacheDriver(client).set("k", object()) is False
        assert "k" not in client._store

    def test_json_shaped_values_only(self):
        driver = RedisCacheDriver(FakeRedis())
        driver.set("t", (1, 2))
        driver.set("d", {1: "a"})
        assert driver.get("t") == [1, 2]
        assert driver.get("d") == {"1": "a"}
        assert driver.set("s", {1, 2}) is False

    def test_corrupt_payload_returns_default(self):
        client = FakeRedis()
        client._store["k"] = b"\xff not json"
        assert RedisCacheDriver(client).get("k", MISSING) is MISSING

    def test_close(self):
        client = FakeRedis()
        RedisCacheDriver(client).close()
        assert client.closed is True

    def test_batch_through_simple_cache(self):
        cache = SimpleCache(RedisCacheDriver(FakeRedis()))
        assert cache.set_multiple({"a": [1], "b": None}, 30) is True
        assert cache.has("b") is True
        assert cache.get_multiple(["a", "b", "c"], "x") == {"a": [1], "b": None, "c": "x"}
        assert cache.delete_multiple(["a", "b"]) is True
        assert cache.has("a") is False
