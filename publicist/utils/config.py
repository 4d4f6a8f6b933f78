"""
Configuration System for publicist.

This module provides a unified configuration interface for code
generation and logging, loaded from a JSON or YAML file with
environment variable overrides.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass

import yaml

from .logging import get_logger

logger = get_logger(__name__)


@dataclass
class CodegenConfig:
    """Code generation configuration."""

    indent: str = "\t"
    method_name: str = "Publicize"
    json_tags: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    enable_file_logging: bool = False
    log_file: str = "publicist.log"


class PublicistConfig:
    """
    Unified configuration manager for publicist.

    All options live in a single JSON or YAML file. Missing sections
    fall back to defaults.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses
                ``PUBLICIST_CONFIG`` or the package default location.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.codegen = self._create_codegen_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        env_file = os.getenv("PUBLICIST_CONFIG")
        if env_file:
            return Path(env_file)

        # Default location: try YAML first, then JSON
        config_dir = Path(__file__).parent
        yaml_config = config_dir / "publicist_config.yaml"
        if yaml_config.exists():
            return yaml_config
        return config_dir / "publicist_config.json"

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            logger.debug(f"Configuration file {self.config_file} not found, using defaults")
            return {}
        try:
            with open(self.config_file, "r") as f:
                if self.config_file.suffix.lower() in [".yaml", ".yml"]:
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to load configuration: {e}")
            return {}
        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data or {}

    def _create_codegen_config(self) -> CodegenConfig:
        """Create code generation configuration from loaded data."""
        codegen_data = self._config_data.get("codegen", {})

        return CodegenConfig(
            indent=codegen_data.get("indent", "\t"),
            method_name=codegen_data.get("method_name", "Publicize"),
            json_tags=codegen_data.get("json_tags", True),
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._config_data.get("logging", {})

        # Environment variable override
        level = os.getenv("PUBLICIST_LOG_LEVEL") or log_data.get("level", "INFO")

        return LoggingConfig(
            level=level,
            enable_file_logging=log_data.get("enable_file_logging", False),
            log_file=log_data.get("log_file", "publicist.log"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as a plain dictionary."""
        return {
            "version": "1.0",
            "codegen": {
                "indent": self.codegen.indent,
                "method_name": self.codegen.method_name,
                "json_tags": self.codegen.json_tags,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

    def save_config(self) -> None:
        """Save current configuration to file."""
        config_data = self.to_dict()
        with open(self.config_file, "w") as f:
            if self.config_file.suffix.lower() in [".yaml", ".yml"]:
                yaml.safe_dump(config_data, f, default_flow_style=False)
            else:
                json.dump(config_data, f, indent=2)
        logger.info(f"Configuration saved to {self.config_file}")


# Global configuration instance
_global_config: Optional[PublicistConfig] = None


def get_config() -> PublicistConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = PublicistConfig()
    return _global_config


def set_config(config: Optional[PublicistConfig]) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> PublicistConfig:
    """Load configuration from a specific file."""
    return PublicistConfig(config_file)
