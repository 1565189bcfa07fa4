"""Core module exports."""

from ksymtypes.core.errors import (
    ConfigError,
    CorpusError,
    ErrorCode,
    InternalError,
    KsymtypesError,
    SymIOError,
)
from ksymtypes.core.logging import configure_logging, get_logger
from ksymtypes.core.progress import pluralize, spinner, status

__all__ = [
    # Errors
    "ConfigError",
    "CorpusError",
    "ErrorCode",
    "InternalError",
    "KsymtypesError",
    "SymIOError",
    # Logging
    "configure_logging",
    "get_logger",
    # Progress
    "pluralize",
    "spinner",
    "status",
]
