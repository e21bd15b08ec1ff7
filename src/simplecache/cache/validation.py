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
"""Argument checks shared by every cache operation.

Each helper logs at error level through the logger it is given and raises
one of the :mod:`simplecache.kernel.exceptions` argument errors. None of
them touches a backend.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

from dateutil.relativedelta import relativedelta

from simplecache.kernel.exceptions import (
    InvalidBatchInputException,
    InvalidKeyException,
    InvalidTTLException,
)

TTL = int | timedelta | relativedelta | None


def check_key(key: Any, logger: Any) -> str:
    """Return *key* if it is a non-empty string, else raise InvalidKeyException."""
    if not isinstance(key, str) or not key:
        logger.error("invalid_cache_key", key=repr(key))
        raise InvalidKeyException(key)
    return key


def check_keys(keys: Iterable[Any], logger: Any) -> None:
    """Validate every key; the first bad one aborts the whole batch."""
    for key in keys:
        check_key(key, logger)


def get_keys(keys: Any, logger: Any) -> list[Any]:
    """Materialize a batch of keys into a list.

    Any iterable is accepted except ``str``/``bytes``, which would otherwise
    be split into single characters.
    """
    if isinstance(keys, (str, bytes)) or not isinstance(keys, Iterable):
        logger.error("invalid_cache_data", type=type(keys).__name__)
        raise InvalidBatchInputException(keys)
    return list(keys)


def get_values(values: Any, logger: Any) -> dict[Any, Any]:
    """Materialize a batch of writes into a key -> value dict.

    Accepts a mapping or an iterable of ``(key, value)`` pairs. Later pairs
    win when a key repeats.
    """
    if isinstance(values, Mapping):
        return dict(values)
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        logger.error("invalid_cache_data", type=type(values).__name__)
        raise InvalidBatchInputException(values)

    data: dict[Any, Any] = {}
    for item in values:
        if not isinstance(item, tuple) or len(item) != 2:
            logger.error("invalid_cache_data", type=type(values).__name__, item=repr(item))
            raise InvalidBatchInputException(values)
        key, value = item
        if not isinstance(key, str):
            # unhashable or foreign keys fail key validation, not dict insertion
            check_key(key, logger)
        data[key] = value
    return data


def get_ttl(ttl: Any, logger: Any, now: datetime | None = None) -> int | None:
    """Normalize a TTL to whole seconds from now.

    ``None`` means no expiry and passes through. A positive ``int`` passes
    through unchanged. A ``timedelta`` or ``relativedelta`` is added to a
    single captured UTC instant and the difference is rounded up to the
    next whole second, so ``relativedelta(months=1)`` resolves to the length
    of the current month.
    """
    if ttl is None:
        return None

    if isinstance(ttl, int) and not isinstance(ttl, bool):
        if ttl > 0:
            return ttl
    elif isinstance(ttl, (timedelta, relativedelta)):
        base = now or datetime.now(timezone.utc)
        try:
            seconds = math.ceil(((base + ttl) - base).total_seconds())
        except (OverflowError, ValueError):
            # past datetime.max; rejected below
            seconds = 0
        if seconds > 0:
            return seconds

    logger.error("invalid_cache_ttl", ttl=repr(ttl))
    raise InvalidTTLException(ttl)


def check_return(booleans: Iterable[Any]) -> bool:
    """True iff every per-key outcome is truthy; an empty batch is a success."""
    for result in booleans:
        if not result:
            return False
    return True
