"""
Validation Module for cint

Provides schema loading, document decoding, constraint validation and
diagnostic extraction for configuration files.
"""

from cint.validation.report import ValidationError, ValidationResult
from cint.validation.engine import ValidationEngine
from cint.validation.batch import BatchValidator, validate_files

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationEngine",
    "BatchValidator",
    "validate_files",
]
