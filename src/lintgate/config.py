from __future__ import annotations

import os
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from lintgate.constants import (
    BLACK,
    BLACK_MINIMUM_VERSION,
    DEFAULT_PYTHON,
    DEFAULT_REFORMAT_COMMAND,
    FLAKE8,
    MYPY,
    MYPY_MINIMUM_VERSION,
    MYPYPATH_ENV_VAR,
    PROJECT_CONFIG_FILENAME,
    PYTHON_ENV_VAR,
)
from lintgate.exceptions import ConfigError, VersionParseError
from lintgate.logging import get_logger
from lintgate.runners.version import parse_version

__all__ = [
    "LintgateConfig",
    "ToolConfig",
    "ToolsConfig",
    "load_config",
    "get_user_config_path",
]

logger = get_logger(__name__)


class ToolConfig(BaseModel):
    """Gating policy for one external tool.

    Attributes:
        executable: Name or path looked up on PATH.
        minimum_version: Lowest acceptable release, or None for presence-only.
        required: If True a missing tool aborts the run; if False it is skipped.
        install_hint: Optional installation hint shown when the tool is missing.
    """

    model_config = ConfigDict(frozen=True)

    executable: str
    minimum_version: str | None = None
    required: bool = False
    install_hint: str | None = None

    @field_validator("minimum_version")
    @classmethod
    def check_minimum_version(cls, v: str | None) -> str | None:
        """Reject minimum versions that are not dotted numeric releases."""
        if v is None:
            return v
        try:
            parse_version(v)
        except VersionParseError as e:
            raise ValueError(e.message) from e
        return v


_DEFAULT_TOOLS: dict[str, dict[str, Any]] = {
    BLACK: {"executable": BLACK, "minimum_version": BLACK_MINIMUM_VERSION},
    FLAKE8: {"executable": FLAKE8, "required": True},
    MYPY: {"executable": MYPY, "minimum_version": MYPY_MINIMUM_VERSION},
}


class ToolsConfig(BaseModel):
    """Per-tool settings for the formatter, style checker and type checker.

    Partial entries are merged over the built-in defaults, so
    ``tools: {mypy: {required: true}}`` keeps mypy's executable and
    minimum version.
    """

    model_config = ConfigDict(frozen=True)

    black: ToolConfig
    flake8: ToolConfig
    mypy: ToolConfig

    @model_validator(mode="before")
    @classmethod
    def fill_tool_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        merged = dict(data)
        for name, defaults in _DEFAULT_TOOLS.items():
            value = data.get(name)
            if value is None:
                merged[name] = dict(defaults)
            elif isinstance(value, dict):
                merged[name] = {**defaults, **value}
        return merged


def _read_yaml_mapping(path: Path) -> dict[str, Any]:
    """Load a YAML config file that must hold a top-level mapping.

    An empty file counts as an empty mapping.

    Raises:
        ConfigError: If the YAML is malformed or not a mapping.
    """
    try:
        loaded = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(message=f"Invalid YAML in {path}: {e}") from e
    if loaded is None:
        logger.warning("config_file_empty", path=str(path))
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(
            message=f"Config file {path} must contain a mapping",
            value=loaded,
        )
    return loaded


class YamlConfigSource(PydanticBaseSettingsSource):
    """Settings source backed by one YAML file; a missing file contributes nothing."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._data: dict[str, Any] = (
            _read_yaml_mapping(yaml_file)
            if yaml_file is not None and yaml_file.is_file()
            else {}
        )

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._data


class ConventionalEnvSource(PydanticBaseSettingsSource):
    """Settings source for the unprefixed ``PYTHON`` and ``MYPYPATH`` variables.

    These are lower priority than the ``LINTGATE_*`` variables and the YAML
    files, so they only fill in values nobody configured explicitly.
    """

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        return self().get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        python = os.environ.get(PYTHON_ENV_VAR)
        if python:
            data["python"] = python
        mypy_path = os.environ.get(MYPYPATH_ENV_VAR)
        if mypy_path:
            data["mypy_path"] = mypy_path
        return data


class LintgateConfig(BaseSettings):
    """Root configuration object, built once at startup and never mutated.

    Attributes:
        python: Interpreter used for ``py_compile`` and the type-stub data check.
        mypy_path: Module search path forwarded to mypy as MYPYPATH.
        targets: Paths handed to the formatter, style checker and type checker.
        flake8_config: Style-checker config file, forwarded verbatim.
        black_config: Formatter config file, forwarded verbatim.
        mypy_config: Type-checker config file, forwarded verbatim.
        typesafety_dir: Directory of type-stub data cases; None disables the check.
        reformat_command: Command suggested when the formatting check fails.
        tools: Per-tool gating policy.
        verbosity: Default log level when no -v/-q flag is given.
    """

    model_config = SettingsConfigDict(
        env_prefix="LINTGATE_",
        env_nested_delimiter="__",
        extra="ignore",
        frozen=True,
    )

    python: str = DEFAULT_PYTHON
    mypy_path: str | None = None
    targets: tuple[str, ...] = (".",)
    flake8_config: str | None = None
    black_config: str | None = None
    mypy_config: str | None = None
    typesafety_dir: str | None = None
    reformat_command: str = DEFAULT_REFORMAT_COMMAND
    tools: ToolsConfig = Field(default_factory=ToolsConfig)
    verbosity: Literal["error", "warning", "info", "debug"] = "warning"

    @field_validator("targets")
    @classmethod
    def check_targets_not_empty(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("at least one target path is required")
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the order of settings sources.

        Priority (highest to lowest):
        1. Init settings (CLI overrides)
        2. Environment variables (LINTGATE_*)
        3. Project YAML config (./lintgate.yaml or --config)
        4. User YAML config (~/.config/lintgate/config.yaml)
        5. Conventional variables (PYTHON, MYPYPATH)
        6. Model defaults
        """
        project_config_path = _PROJECT_CONFIG_PATH.get() or (
            Path.cwd() / PROJECT_CONFIG_FILENAME
        )
        return (
            init_settings,
            env_settings,
            YamlConfigSource(settings_cls, project_config_path),
            YamlConfigSource(settings_cls, get_user_config_path()),
            ConventionalEnvSource(settings_cls),
        )


# --config override, set by load_config() while the settings object is built
_PROJECT_CONFIG_PATH: ContextVar[Path | None] = ContextVar(
    "lintgate_project_config_path", default=None
)


def get_user_config_path() -> Path:
    """Get the path to the user configuration file.

    Returns:
        Path to ~/.config/lintgate/config.yaml
    """
    return Path.home() / ".config" / "lintgate" / "config.yaml"


def load_config(
    config_path: Path | None = None, **overrides: Any
) -> LintgateConfig:
    """Load configuration with hierarchy: defaults -> user -> project -> env.

    Args:
        config_path: Optional path to the project config file. Defaults to
            ./lintgate.yaml
        **overrides: Field values that win over every other source (CLI flags).

    Returns:
        Immutable LintgateConfig instance.

    Raises:
        ConfigError: If configuration is invalid or an explicit config_path
            does not exist.
    """
    if config_path is None:
        config_path = Path.cwd() / PROJECT_CONFIG_FILENAME
        if not config_path.exists():
            logger.info("project_config_not_found", path=str(config_path))
    elif not config_path.exists():
        raise ConfigError(
            message=f"Config file not found: {config_path}",
            field="config",
            value=str(config_path),
        )

    token = _PROJECT_CONFIG_PATH.set(config_path)
    try:
        return LintgateConfig(**overrides)
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e
    finally:
        _PROJECT_CONFIG_PATH.reset(token)
