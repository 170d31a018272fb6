"""Configuration loading and logging setup."""

from podexport.config.logging import setup_logging
from podexport.config.manager import ConfigManager, get_config_dir
from podexport.config.schema import ExportConfig

__all__ = [
    "ConfigManager",
    "ExportConfig",
    "get_config_dir",
    "setup_logging",
]
