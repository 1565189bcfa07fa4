"""ksymtypes error types with typed error codes.

Error code ranges:
- 1xxx: I/O
- 2xxx: Config
- 3xxx: Corpus
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # I/O (1xxx)
    DIRECTORY_READ_ERROR = 1001
    FILE_OPEN_ERROR = 1002
    FILE_READ_ERROR = 1003

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Corpus (3xxx)
    DUPLICATE_EXPORT = 3001
    DANGLING_REFERENCE = 3002

    # Internal (9xxx)
    MISSING_DECLARATION = 9002
    TYPE_NOT_IN_FILE = 9003


@dataclass(frozen=True, slots=True)
class KsymtypesError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'FILE_OPEN_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class SymIOError(KsymtypesError):
    """Failure to read symtypes data from disk. Always fatal to a load."""

    @classmethod
    def _from_os_error(
        cls, code: ErrorCode, message: str, path: str, err: Exception
    ) -> "SymIOError":
        reason = getattr(err, "strerror", None) or err
        return cls(
            code=code,
            message=f"{message}: {reason}",
            details={"path": path, "cause": str(err)},
        )

    @classmethod
    def directory_read(cls, path: str, err: OSError) -> "SymIOError":
        return cls._from_os_error(
            ErrorCode.DIRECTORY_READ_ERROR, f"Failed to read directory '{path}'", path, err
        )

    @classmethod
    def file_open(cls, path: str, err: OSError) -> "SymIOError":
        return cls._from_os_error(
            ErrorCode.FILE_OPEN_ERROR, f"Failed to open file '{path}'", path, err
        )

    @classmethod
    def file_read(cls, path: str, err: OSError | UnicodeDecodeError) -> "SymIOError":
        return cls._from_os_error(
            ErrorCode.FILE_READ_ERROR, f"Failed to read data from file '{path}'", path, err
        )


class ConfigError(KsymtypesError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class CorpusError(KsymtypesError):
    """Input that loads fine but violates a corpus policy."""

    @classmethod
    def duplicate_export(cls, name: str, first_path: str, second_path: str) -> "CorpusError":
        return cls(
            code=ErrorCode.DUPLICATE_EXPORT,
            message=f"Export {name} is declared in both '{first_path}' and '{second_path}'",
            details={"name": name, "paths": [first_path, second_path]},
        )

    @classmethod
    def dangling_reference(cls, name: str, ref_name: str, path: str) -> "CorpusError":
        return cls(
            code=ErrorCode.DANGLING_REFERENCE,
            message=f"Type {name} references {ref_name} which is not declared in '{path}'",
            details={"name": name, "reference": ref_name, "path": path},
        )


class InternalError(KsymtypesError):
    """Internal consistency failures. Never recoverable."""

    @classmethod
    def missing_declaration(cls, name: str) -> "InternalError":
        return cls(
            code=ErrorCode.MISSING_DECLARATION,
            message=f"Type {name} has a missing declaration",
            details={"name": name},
        )

    @classmethod
    def type_not_in_file(cls, name: str, path: str) -> "InternalError":
        return cls(
            code=ErrorCode.TYPE_NOT_IN_FILE,
            message=f"Type {name} is not known in file {path}",
            details={"name": name, "path": path},
        )
