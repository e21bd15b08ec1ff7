"""SimpleCache Logging — hexagonal logging port and adapters."""

from simplecache.logging.null_logger import NullLogger
from simplecache.logging.port import LoggingPort
from simplecache.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "NullLogger", "StructlogAdapter"]
