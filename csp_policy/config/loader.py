"""Env var settings and YAML policy file loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from csp_policy.policy import PolicyConfig

logger = structlog.get_logger()


class PolicyFileError(Exception):
    """Raised when a policy file is missing, unreadable or malformed."""


class PolicySettings(BaseSettings):
    """Runtime settings, overridden by ``CSP_*`` env vars or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="CSP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "info"
    log_json: bool = True

    # YAML file holding PolicyConfig fields; empty means an all-default policy
    policy_file: str = ""

    # Header selection
    report_only: bool = False
    include_legacy_header: bool = False
    include_report_uri: bool = False


_settings: PolicySettings | None = None


def get_settings() -> PolicySettings:
    """Get or create the singleton settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def load_settings() -> PolicySettings:
    """Load settings from env vars (env vars override model defaults)."""
    global _settings
    _settings = PolicySettings()
    return _settings


def _read_yaml(path: Path) -> Any:
    if not path.is_file():
        raise PolicyFileError(f"policy file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise PolicyFileError(f"cannot read policy file {path}: {exc}") from exc


def load_policy(path: str | Path | None = None) -> PolicyConfig:
    """Build a PolicyConfig from a YAML mapping of field names to values.

    Falls back to ``PolicySettings.policy_file`` when ``path`` is not given,
    and to an all-default config when neither names a file. An empty file
    also yields the default config.

    Example file:
        default_scope: self
        image_sources: ["'self'", "https://cdn.example.com"]
        allow_inline_style: true
    """
    if path is None:
        path = get_settings().policy_file
    if not path:
        return PolicyConfig()

    path = Path(path)
    data = _read_yaml(path)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise PolicyFileError(f"policy file {path} must contain a mapping, got {type(data).__name__}")

    try:
        config = PolicyConfig.model_validate(data)
    except ValidationError as exc:
        raise PolicyFileError(f"invalid policy file {path}: {exc}") from exc

    logger.info("policy_file_loaded", path=str(path), fields=sorted(data))
    return config
