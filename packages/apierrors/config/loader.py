"""Settings loading with deterministic precedence.

The cascade is always:
1) CLI params
2) Environment variables
3) ~/.config/apierrors/apierrors.yaml (or an explicit ``config_path``)
4) Model defaults

Environment variable format:
- Prefix: ``APIERRORS_``
- Nested keys: ``__`` separator
- Example: ``APIERRORS_STACK__DEPTH=16`` -> ``stack.depth = 16``
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, ClassVar, Mapping

from .models import ApiErrorsSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> ApiErrorsSettings:
    """Resolve settings from CLI params, environment, YAML file and defaults."""
    settings_cls = (
        ApiErrorsSettings
        if config_path is None
        else _settings_for_path(Path(config_path))
    )
    return settings_cls(**dict(cli_params or {}))


@lru_cache(maxsize=16)
def _settings_for_path(path: Path) -> type[ApiErrorsSettings]:
    """Return a settings class whose YAML source reads ``path``."""

    class _PathSettings(ApiErrorsSettings):
        config_path: ClassVar[Path] = path

    return _PathSettings
