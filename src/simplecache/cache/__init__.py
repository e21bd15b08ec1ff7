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
"""SimpleCache cache — shared behavior over pluggable storage drivers."""

from simplecache.cache.adapters import (
    FileCacheDriver,
    MemoryCacheDriver,
    RedisCacheDriver,
    SessionCacheDriver,
)
from simplecache.cache.auto_configuration import create_cache, create_driver
from simplecache.cache.core import SimpleCache
from simplecache.cache.ports.outbound import CacheDriver

__all__ = [
    "CacheDriver",
    "FileCacheDriver",
    "MemoryCacheDriver",
    "RedisCacheDriver",
    "SessionCacheDriver",
    "SimpleCache",
    "create_cache",
    "create_driver",
]
