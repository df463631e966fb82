"""
Environment variable integration for the linter configuration.

Centralizes environment variable names and the config keys they set.
"""

import os
from typing import Dict, List


class EnvironmentVariables:
    """Centralized environment variable definitions and utilities."""

    CONFIG_FILE = "CINT_CONFIG_FILE"
    WORKERS = "CINT_WORKERS"
    LOG_LEVEL = "CINT_LOG_LEVEL"
    LOG_FILE = "CINT_LOG_FILE"
    REPORT = "CINT_REPORT"

    # Config keys populated from the environment
    KEY_MAP = {
        WORKERS: "workers",
        LOG_LEVEL: "log_level",
        LOG_FILE: "log_file",
        REPORT: "report_path",
    }

    @classmethod
    def get_all_variables(cls) -> List[str]:
        """Get list of all supported environment variables."""
        return [cls.CONFIG_FILE, cls.WORKERS, cls.LOG_LEVEL, cls.LOG_FILE, cls.REPORT]

    @classmethod
    def read_overrides(cls) -> Dict[str, str]:
        """Collect config values set in the environment."""
        return {
            key: os.environ[name]
            for name, key in cls.KEY_MAP.items()
            if os.environ.get(name)
        }
