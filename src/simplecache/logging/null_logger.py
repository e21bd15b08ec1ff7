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
"""NullLogger — structlog-compatible logger that discards every event."""

from __future__ import annotations

from typing import Any


class NullLogger:
    """Accepts structlog-style calls (``logger.error(event, **kwargs)``) and drops them.

    Default logger of :class:`~simplecache.cache.core.SimpleCache` until one
    is attached with ``set_logger``.
    """

    __slots__ = ()

    def debug(self, event: str, **kwargs: Any) -> None:
        pass

    def info(self, event: str, **kwargs: Any) -> None:
        pass

    def warning(self, event: str, **kwargs: Any) -> None:
        pass

    def error(self, event: str, **kwargs: Any) -> None:
        pass

    def critical(self, event: str, **kwargs: Any) -> None:
        pass

    def exception(self, event: str, **kwargs: Any) -> None:
        pass

    def bind(self, **kwargs: Any) -> NullLogger:
        return self
