"""Typed configuration models for the error framework."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from ..stack import DEFAULT_DEPTH, DEFAULT_IGNORED_NAMES

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "apierrors" / "apierrors.yaml"


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "apierrors"
    environment: str = "dev"


class StackSettings(BaseModel):
    """Call-path capture rules.

    ``include_prefixes`` names the application's own module space;
    ``exclude_prefixes`` carves vendored modules out of it. Frames named in
    ``ignored_names`` are dropped wherever they live.

    The defaults fit a repository whose code lives under a ``packages``
    namespace. Any other application must set its own top-level packages
    (``APIERRORS_STACK__INCLUDE_PREFIXES='["myapp"]'``), otherwise every
    captured path is empty; ``bootstrap`` warns when no imported module
    matches a prefix.
    """

    depth: int = Field(default=DEFAULT_DEPTH, ge=1, le=256)
    include_prefixes: list[str] = Field(default_factory=lambda: ["packages"])
    exclude_prefixes: list[str] = Field(default_factory=lambda: ["packages.vendor"])
    ignored_names: list[str] = Field(
        default_factory=lambda: sorted(DEFAULT_IGNORED_NAMES)
    )

    @field_validator("include_prefixes", "exclude_prefixes")
    @classmethod
    def _strip_trailing_dots(cls, value: list[str]) -> list[str]:
        """Normalize ``pkg.`` to ``pkg`` and drop blank prefixes."""
        return [prefix.strip().rstrip(".") for prefix in value if prefix.strip()]


class HttpSettings(BaseModel):
    """HTTP boundary behavior."""

    request_id_header: str = "X-Request-ID"
    expose_stack_trace: bool = False


class ApiErrorsSettings(BaseSettings):
    """Root settings resolved from init/env/yaml/defaults sources."""

    model_config = SettingsConfigDict(
        env_prefix="APIERRORS_",
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    stack: StackSettings = Field(default_factory=StackSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)

    config_path: ClassVar[Path] = DEFAULT_CONFIG_PATH

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > model defaults."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(
                settings_cls,
                yaml_file=cls.config_path,
                yaml_file_encoding="utf-8",
            ),
        )
