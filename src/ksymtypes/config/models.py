"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (KSYMTYPES__SECTION__KEY)
3. Explicit YAML file (--config PATH)
4. Global YAML (~/.config/ksymtypes/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    KSYMTYPES__<SECTION>__<KEY>=<VALUE>

Examples:
    KSYMTYPES__LOGGING__LEVEL=DEBUG
    KSYMTYPES__LOAD__DUPLICATE_EXPORTS=error
    KSYMTYPES__COMPARE__CONTEXT_LINES=5
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from ksymtypes.config.constants import DIFF_CONTEXT_MAX, SYMTYPES_SUFFIX

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DuplicateExportPolicy = Literal["last", "first", "error"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        KSYMTYPES__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. INFO reports corpus sizes, DEBUG every loaded file.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class LoadConfig(BaseModel):
    """Corpus loading configuration.

    Env vars:
        KSYMTYPES__LOAD__SUFFIX: Extension of declaration files
        KSYMTYPES__LOAD__DUPLICATE_EXPORTS: last, first or error
        KSYMTYPES__LOAD__VALIDATE_REFERENCES: Reject references to undeclared types
    """

    suffix: str = Field(
        default=SYMTYPES_SUFFIX,
        description="Only files whose name ends with this suffix are loaded.",
    )
    duplicate_exports: DuplicateExportPolicy = Field(
        default="last",
        description="Which file owns an export declared in several files. "
        "'error' aborts the load on the first conflict.",
    )
    validate_references: bool = Field(
        default=False,
        description="Check that every type reference in a file names a type "
        "declared in that same file.",
    )

    @field_validator("suffix")
    @classmethod
    def validate_suffix(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"Suffix must be a file extension like '.symtypes', got {v!r}")
        return v


class CompareConfig(BaseModel):
    """Comparison output configuration.

    Env vars:
        KSYMTYPES__COMPARE__SORT_OUTPUT: Sort exports and changes by name
        KSYMTYPES__COMPARE__CONTEXT_LINES: Unchanged lines around each diff hunk
        KSYMTYPES__COMPARE__FAIL_ON_CHANGE: Exit with status 2 on any difference
    """

    sort_output: bool = Field(
        default=True,
        description="Sort export names and changed type names. When false, "
        "output follows the order in which exports were loaded.",
    )
    context_lines: int = Field(default=3, description="Context lines in diff hunks.")
    fail_on_change: bool = Field(default=False)

    @field_validator("context_lines")
    @classmethod
    def validate_context_lines(cls, v: int) -> int:
        if not (0 <= v <= DIFF_CONTEXT_MAX):
            raise ValueError(f"Context lines must be 0-{DIFF_CONTEXT_MAX}, got {v}")
        return v


class KsymtypesConfig(BaseModel):
    """Root configuration for ksymtypes."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    load: LoadConfig = Field(default_factory=LoadConfig)
    compare: CompareConfig = Field(default_factory=CompareConfig)
