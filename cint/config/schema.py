"""
Configuration schema for the linter.

Defines the runtime settings that can come from a project config file,
environment variables or CLI flags.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Supported logging levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LinterConfig(BaseModel):
    """Runtime settings for a linter run.

    Attributes:
        workers: Number of files validated concurrently
        log_level: Console logging level
        log_file: Optional log file path (rotated)
        report_path: Optional path for a JSON report
    """
    workers: int = Field(
        default=1,
        ge=1,
        le=64,
        description="Number of files validated concurrently"
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console logging level"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional log file path"
    )
    report_path: Optional[str] = Field(
        default=None,
        description="Optional path for a JSON report"
    )

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v
