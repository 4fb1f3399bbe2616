"""Settings loading entrypoint with an overridable YAML path."""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar

from .models import NotarySettings


def load_settings(
    *,
    config_path: str | Path | None = None,
    **overrides: Any,
) -> NotarySettings:
    """Load settings; ``overrides`` win over env, env over YAML, YAML over defaults."""
    if config_path is None:
        return NotarySettings(**overrides)

    resolved = Path(config_path)

    class _PathBoundSettings(NotarySettings):
        _config_path: ClassVar[Path] = resolved

    return _PathBoundSettings(**overrides)
