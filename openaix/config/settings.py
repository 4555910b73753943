"""Configuration management for openaix.

This module handles loading configuration from YAML files and environment variables.
Environment variables take precedence over YAML configuration.

OPENAI_* variables are not cached here; they are read at resolution time by
``ClientConfig.from_env``. The openai section only holds YAML defaults.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional
import yaml
from dotenv import load_dotenv

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Singleton configuration manager for the application."""

    _instance: Optional['Settings'] = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        """Ensure only one instance of Settings exists."""
        if cls._instance is None:
            cls._instance = super(Settings, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self) -> None:
        """Initialize configuration by loading from YAML and environment."""
        # Load environment variables from .env file if it exists
        load_dotenv()

        config_path = Path(__file__).parent / "config.yaml"
        if config_path.exists():
            with open(config_path, 'r') as f:
                self._config = yaml.safe_load(f) or {}
        else:
            self._config = {}

        self._apply_env_overrides()
        self._validate_config()

    def _apply_env_overrides(self) -> None:
        """Override configuration with environment variables."""
        # Logging overrides
        if level := os.getenv("LOG_LEVEL"):
            self._config.setdefault("logging", {})["level"] = level
        if log_file := os.getenv("LOG_FILE"):
            self._config.setdefault("logging", {})["log_file"] = log_file

    def _validate_config(self) -> None:
        """Validate the loaded configuration."""
        level = str(self.get("logging.level", "INFO")).upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid logging.level: {level}. "
                f"Expected one of: {', '.join(LOG_LEVELS)}."
            )

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get configuration value using dot notation (e.g., 'logging.level').

        Args:
            key_path: Dot-separated path to configuration value
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict):
                value = value.get(key)
                if value is None:
                    return default
            else:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get an entire configuration section.

        Args:
            section: Top-level section name (e.g., 'openai', 'logging')

        Returns:
            Dictionary containing the section configuration
        """
        return self._config.get(section) or {}

    def set(self, key_path: str, value: Any) -> None:
        """Set configuration value using dot notation.

        Args:
            key_path: Dot-separated path to configuration value
            value: Value to set
        """
        keys = key_path.split('.')
        config = self._config

        for key in keys[:-1]:
            config = config.setdefault(key, {})

        config[keys[-1]] = value

    def reload(self) -> None:
        """Reload configuration from file and environment."""
        self._initialize()

    @property
    def openai(self) -> Dict[str, Any]:
        """Get OpenAI transport configuration."""
        return self.get_section("openai")

    @property
    def logging(self) -> Dict[str, Any]:
        """Get logging configuration."""
        return self.get_section("logging")


# Global settings instance
settings = Settings()
