"""Configuration loader."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .models import ConfigModel

CONFIG_PATH_ENV = "BLOGSMITH_CONFIG"


def default_config_path() -> Path:
    """Config path from the environment, else the per-user default."""
    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".config" / "blogsmith" / "config.yaml"


def _with_secret(section: Dict[str, Any], env_field: str, value_field: str) -> Dict[str, Any]:
    env_name = section.get(env_field)
    if env_name:
        value = os.environ.get(env_name)
        if value:
            section[value_field] = value
    return section


class Config:
    """Configuration manager."""

    def __init__(
        self,
        config_path: Optional[Path] = None,
        model: Optional[ConfigModel] = None,
    ) -> None:
        """Initialize config manager."""
        if config_path is None:
            config_path = default_config_path()
        self.config_path = config_path
        self._config: Optional[ConfigModel] = model

    @property
    def config(self) -> ConfigModel:
        """Get loaded config."""
        if self._config is None:
            self._config = load_config(self.config_path)
        return self._config

    def get_db_config(self) -> Dict[str, Any]:
        """Get database configuration dict."""
        return _with_secret(self.config.postgres.model_dump(), "password_env", "password")

    def get_llm_config(self) -> Dict[str, Any]:
        """Get LLM configuration dict."""
        return _with_secret(self.config.llm.model_dump(), "api_key_env", "api_key")

    def get_firecrawl_config(self) -> Dict[str, Any]:
        """Get extraction service configuration dict."""
        return _with_secret(self.config.firecrawl.model_dump(), "api_key_env", "api_key")


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
