"""Configuration manager for loading and saving podexport config."""

from pathlib import Path

import platformdirs
import yaml

from podexport.config.schema import ExportConfig
from podexport.utils.errors import InvalidConfigError


def get_config_dir() -> Path:
    """Get the platform config directory for podexport."""
    return Path(platformdirs.user_config_dir("podexport"))


class ConfigManager:
    """Manages the podexport configuration file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Optional custom config directory. Defaults to the platform config dir.
        """
        self.config_dir = config_dir if config_dir is not None else get_config_dir()
        self.config_file = self.config_dir / "config.yaml"

    def load_config(self) -> ExportConfig:
        """Load and validate configuration.

        Returns:
            Validated ExportConfig instance

        Raises:
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            config = ExportConfig()
            self.save_config(config)
            return config

        try:
            with open(self.config_file) as f:
                data = yaml.safe_load(f) or {}
            return ExportConfig(**data)
        except Exception as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e}"
            ) from e

    def save_config(self, config: ExportConfig) -> None:
        """Save configuration.

        Args:
            config: ExportConfig instance to save
        """
        data = config.model_dump(mode="json")

        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
