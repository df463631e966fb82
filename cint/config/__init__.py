"""
Linter configuration: settings model, environment variables and the
layered configuration manager.
"""

from cint.config.schema import LinterConfig, LogLevel
from cint.config.manager import ConfigurationManager

__all__ = ["LinterConfig", "LogLevel", "ConfigurationManager"]
