"""Tests for config/models.py."""

import pytest
from pydantic import ValidationError

from ksymtypes.config.models import (
    CompareConfig,
    KsymtypesConfig,
    LoadConfig,
    LogOutputConfig,
)


class TestDefaults:
    def test_root_defaults(self) -> None:
        config = KsymtypesConfig()

        assert config.logging.level == "WARNING"
        assert config.load.suffix == ".symtypes"
        assert config.load.duplicate_exports == "last"
        assert config.load.validate_references is False
        assert config.compare.sort_output is True
        assert config.compare.context_lines == 3
        assert config.compare.fail_on_change is False


class TestValidation:
    @pytest.mark.parametrize("suffix", ["", "symtypes", "."])
    def test_bad_suffix_rejected(self, suffix: str) -> None:
        with pytest.raises(ValidationError):
            LoadConfig(suffix=suffix)

    def test_multi_dot_suffix_accepted(self) -> None:
        assert LoadConfig(suffix=".k.symtypes").suffix == ".k.symtypes"

    def test_unknown_duplicate_policy_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoadConfig(duplicate_exports="random")  # type: ignore[arg-type]

    @pytest.mark.parametrize("context", [-1, 101])
    def test_context_lines_bounds(self, context: int) -> None:
        with pytest.raises(ValidationError):
            CompareConfig(context_lines=context)

    def test_relative_log_file_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LogOutputConfig(destination="relative/file.log")

    def test_console_destinations_accepted(self) -> None:
        assert LogOutputConfig(destination="stdout").destination == "stdout"
