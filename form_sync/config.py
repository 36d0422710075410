"""Configuration for form-sync.

Settings are a pydantic model loaded from YAML. The file is looked up at,
in order: an explicit path, $FORM_SYNC_CONFIG, then
~/.config/form-sync/config.yaml. A missing file means defaults.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from form_sync.core.errors import ConfigError

CONFIG_ENV_VAR = "FORM_SYNC_CONFIG"
HOME_ENV_VAR = "FORM_SYNC_HOME"


class FormConfig(BaseModel):
    """Behavior of a submission orchestrator."""

    endpoint: str = "/login"
    identifier_field: str = "email"
    sensitive_field: str = "password"
    success_title: str = "Success"
    success_message: str = "You have been signed in."
    failure_title: str = "Sign in failed"
    failure_fallback: str = "Something went wrong. Please try again."
    reset_on_success: bool = False
    timeout: float | None = Field(default=None, gt=0)
    submit_options: dict[str, Any] = Field(default_factory=dict)


def get_form_sync_home() -> Path:
    """Return the form-sync configuration directory."""
    env_home = os.environ.get(HOME_ENV_VAR)
    if env_home:
        return Path(env_home)
    return Path.home() / ".config" / "form-sync"


def get_config_path() -> Path:
    """Return the config file path that applies when none is given."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return get_form_sync_home() / "config.yaml"


def load_config(path: Path | str | None = None) -> FormConfig:
    """Load and validate configuration.

    Args:
        path: Optional explicit config file. Unlike the default locations,
            an explicit path must exist.

    Returns:
        The validated FormConfig.

    Raises:
        ConfigError: If the file is missing (explicit path only), is not
            valid YAML, or does not validate.
    """
    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
    else:
        config_path = get_config_path()
        if not config_path.exists():
            return FormConfig()

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return FormConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config in {config_path} must be a mapping")

    try:
        return FormConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {config_path}: {e}") from e
