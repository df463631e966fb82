"""
Configuration Manager for the linter.

This module handles loading, validation, and merging of configuration from multiple sources:
- System defaults
- Project configuration (./.cint.yaml, or the file named by CINT_CONFIG_FILE)
- Environment variables
- CLI arguments (highest precedence)
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from cint.config.environment import EnvironmentVariables
from cint.config.schema import LinterConfig
from cint.validation.errors import ConfigurationError


logger = logging.getLogger(__name__)

PROJECT_CONFIG_NAME = ".cint.yaml"


class ConfigurationManager:
    """Manages configuration loading, validation, and environment variable integration."""

    def __init__(self, project_dir: Optional[Path] = None):
        self.project_config_path = (project_dir or Path.cwd()) / PROJECT_CONFIG_NAME

    def load_configuration(self, cli_overrides: Optional[Dict[str, Any]] = None) -> LinterConfig:
        """
        Load configuration from all sources with proper precedence.

        Precedence order (highest to lowest):
        1. CLI arguments (cli_overrides, None values ignored)
        2. Environment variables
        3. Config file (CINT_CONFIG_FILE, else ./.cint.yaml)
        4. System defaults

        Raises:
            ConfigurationError: If a config file is unreadable or a value is invalid
        """
        config_dict: Dict[str, Any] = {}

        config_file = self._resolve_config_file()
        if config_file is not None:
            config_dict.update(self._load_yaml_file(config_file))

        config_dict.update(EnvironmentVariables.read_overrides())

        if cli_overrides:
            config_dict.update({k: v for k, v in cli_overrides.items() if v is not None})

        try:
            config = LinterConfig(**config_dict)
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(loc) for loc in first["loc"]) if first["loc"] else None
            raise ConfigurationError(f"Invalid configuration value for '{key}': {first['msg']}", key) from e

        logger.debug(f"Configuration loaded: {config.model_dump()}")
        return config

    def _resolve_config_file(self) -> Optional[Path]:
        explicit = os.environ.get(EnvironmentVariables.CONFIG_FILE)
        if explicit:
            return Path(explicit)
        if self.project_config_path.exists():
            return self.project_config_path
        return None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load and parse a YAML configuration file."""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: {file_path}") from e
        except yaml.YAMLError as e:
            line_info = ""
            mark = getattr(e, 'problem_mark', None)
            if mark is not None:
                line_info = f" (line {mark.line + 1}, column {mark.column + 1})"
            raise ConfigurationError(f"Invalid YAML in configuration file {file_path}{line_info}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigurationError(f"Configuration file {file_path} must contain a mapping")

        unknown = set(content) - set(LinterConfig.model_fields)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys in {file_path}: {', '.join(sorted(unknown))}",
                sorted(unknown)[0],
            )
        return content
