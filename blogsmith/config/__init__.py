"""Configuration management for Blogsmith."""

from .loader import Config, default_config_path, load_config, save_config
from .models import (
    ConfigModel,
    EnhancementConfig,
    FirecrawlConfig,
    IngestionConfig,
    LLMConfig,
    PostgresConfig,
    ServerConfig,
)

__all__ = [
    "Config",
    "ConfigModel",
    "EnhancementConfig",
    "FirecrawlConfig",
    "IngestionConfig",
    "LLMConfig",
    "PostgresConfig",
    "ServerConfig",
    "default_config_path",
    "load_config",
    "save_config",
]
