"""Configuration management for findrr."""

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class FindrrConfig(BaseModel):
    """Main findrr configuration."""

    # What to do when an -exec invocation fails to spawn or is killed
    on_exec_error: Literal["abort", "continue"] = "abort"
    # Print "Can't access directory ..." for directories that cannot be opened
    report_unreadable: bool = True

    # Logging
    log_level: str = "WARNING"
    log_file: str | None = None

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


class ConfigManager:
    """Manages configuration loading and saving."""

    DEFAULT_CONFIG_NAME = "findrr.yaml"

    def __init__(self, config_path: Path | None = None):
        """Initialize config manager."""
        self.config_path = config_path or self._get_default_config_path()
        self._config: FindrrConfig | None = None

    def load(self) -> FindrrConfig:
        """Load configuration from file, falling back to defaults."""
        if self.config_path.exists():
            try:
                with open(self.config_path, encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
                self._config = FindrrConfig(**data)
            except Exception as e:
                logger.warning(f"Error loading config from {self.config_path}: {e}")
                logger.warning("Using default configuration")
                self._config = FindrrConfig()
        else:
            logger.debug(f"Config file not found at {self.config_path}, using defaults")
            self._config = FindrrConfig()

        return self._config

    def save(self, config: FindrrConfig | None = None) -> None:
        """Save configuration to file."""
        config_to_save = config or self._config
        if config_to_save is None:
            raise ValueError("No configuration to save")

        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        data = config_to_save.model_dump()
        with open(self.config_path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, indent=2)

        logger.info(f"Configuration saved to {self.config_path}")

    def get_config(self) -> FindrrConfig:
        """Get current configuration, loading if necessary."""
        if self._config is None:
            self.load()
        return self._config

    def _get_default_config_path(self) -> Path:
        """Get default configuration file path."""
        # Current directory first, then the user config dir
        current_dir = Path.cwd() / self.DEFAULT_CONFIG_NAME
        if current_dir.exists():
            return current_dir

        config_dir = Path.home() / ".config" / "findrr"
        return config_dir / self.DEFAULT_CONFIG_NAME

    def create_sample_config(self, output_path: Path | None = None) -> None:
        """Create a sample configuration file with comments."""
        output_path = output_path or (Path.cwd() / "findrr_sample.yaml")

        sample_yaml = """# findrr configuration file

# What to do when an -exec program cannot be started or is killed by a signal:
#   abort     stop the whole search (default)
#   continue  log the failure and keep searching
on_exec_error: "abort"

# Print "Can't access directory ..." for directories that cannot be opened
report_unreadable: true

# Logging
log_level: "WARNING"
log_file: null  # Set to file path for file logging
"""

        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(sample_yaml)

        logger.info(f"Sample configuration created at {output_path}")


def load_config(config_path: Path | None = None) -> FindrrConfig:
    """Load configuration from a specific path or the default location."""
    return ConfigManager(config_path).load()
