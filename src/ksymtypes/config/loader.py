"""Configuration loading with pydantic-settings.

Sources, lowest to highest precedence:
1. Built-in defaults
2. Global config (~/.config/ksymtypes/config.yaml)
3. Explicit config file passed on the command line
4. Environment variables (KSYMTYPES__SECTION__KEY)
5. Direct kwargs
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from ksymtypes.config.models import (
    CompareConfig,
    KsymtypesConfig,
    LoadConfig,
    LoggingConfig,
)
from ksymtypes.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/ksymtypes/config.yaml").expanduser()


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top level must be a mapping")
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class _YamlSource(PydanticBaseSettingsSource):
    """Settings source that reads from pre-loaded YAML config."""

    def __init__(self, settings_cls: type[BaseSettings], yaml_config: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._yaml_config = yaml_config

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        val = self._yaml_config.get(field_name)
        return val, field_name, val is not None

    def __call__(self) -> dict[str, Any]:
        return self._yaml_config


def _make_settings_class(yaml_config: dict[str, Any]) -> type[BaseSettings]:
    """Create a Settings class bound to one pre-loaded YAML dict."""

    class KsymtypesSettings(BaseSettings):
        """Root config. Env vars: KSYMTYPES__LOGGING__LEVEL, KSYMTYPES__LOAD__SUFFIX, etc."""

        model_config = SettingsConfigDict(
            env_prefix="KSYMTYPES__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        logging: LoggingConfig = LoggingConfig()
        load: LoadConfig = LoadConfig()
        compare: CompareConfig = CompareConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            # Precedence (first wins): init kwargs > env vars > yaml files
            return (init_settings, env_settings, _YamlSource(settings_cls, yaml_config))

    return KsymtypesSettings


def load_config(config_path: Path | None = None, **kwargs: Any) -> KsymtypesConfig:
    """Load config: defaults < global config < config_path < env vars < kwargs.

    Args:
        config_path: Optional YAML file; it must exist when given.
        **kwargs: Override values per section (highest precedence).

    Returns:
        Fully resolved configuration object.

    Raises:
        ConfigError: On a missing config file, invalid YAML or validation errors.
    """
    yaml_config = _load_yaml(GLOBAL_CONFIG_PATH)

    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError.file_not_found(str(config_path))
        yaml_config = _deep_merge(yaml_config, _load_yaml(config_path))

    settings_cls = _make_settings_class(yaml_config)
    try:
        settings = settings_cls(**kwargs)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e
    return KsymtypesConfig.model_validate(settings.model_dump())
