"""Config module exports."""

from ksymtypes.config.loader import load_config
from ksymtypes.config.models import (
    CompareConfig,
    KsymtypesConfig,
    LoadConfig,
    LoggingConfig,
)

__all__ = [
    "load_config",
    "KsymtypesConfig",
    "CompareConfig",
    "LoadConfig",
    "LoggingConfig",
]
