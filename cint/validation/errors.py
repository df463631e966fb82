"""
Validation Error Hierarchy

Defines all custom exceptions used by the linter.
This provides clear, specific error types for different failure scenarios.

Error Categories:
- Schema Errors: schema unreadable, fails to compile, lacks the Config definition (global)
- File Errors: config file unreadable (local)
- Decode Errors: unsupported extension, malformed YAML/JSON (local)
- Constraint Violations: one or more schema violations in a document (local)
- Configuration Errors: invalid linter settings (CLI level)
"""

from typing import Iterable, Optional


class CintError(Exception):
    """Base exception for all linter errors."""
    pass


class SchemaLoadError(CintError):
    """The schema could not be turned into a usable contract.

    Any subclass pre-empts validation of every requested file.
    """
    pass


class SchemaReadError(SchemaLoadError):
    """Schema file could not be read from disk."""
    pass


class SchemaCompileError(SchemaLoadError):
    """Schema source is malformed or is not a valid schema.

    Attributes:
        filename: Name of the schema source being compiled
    """

    def __init__(self, message: str, filename: Optional[str] = None):
        super().__init__(message)
        self.filename = filename


class MissingDefinitionError(SchemaLoadError):
    """Schema does not define the expected top-level contract.

    This is a schema-authoring error, never a document error.
    """

    def __init__(self, name: str):
        super().__init__(f"schema does not define {name}")
        self.name = name


class FileReadError(CintError):
    """Config file could not be read."""
    pass


class DocumentDecodeError(CintError):
    """Config file bytes could not be decoded into a document.

    Attributes:
        file_path: Path of the document that failed to decode
    """

    def __init__(self, message: str, file_path: Optional[str] = None):
        super().__init__(message)
        self.file_path = file_path


class UnsupportedFormatError(DocumentDecodeError):
    """Config file extension has no decoder.

    Raised before any decoding is attempted.
    """

    def __init__(self, extension: str, supported: Iterable[str], file_path: Optional[str] = None):
        self.extension = extension
        self.supported = tuple(supported)
        super().__init__(
            f"unsupported file format: {extension or '(none)'} "
            f"(supported: {', '.join(self.supported)})",
            file_path,
        )


class ConstraintViolation(CintError):
    """A document failed concrete validation against a definition.

    Carries every independent violation found in one validation attempt.

    Attributes:
        violations: Ordered tuple of Violation records
    """

    def __init__(self, message: str, violations: Iterable = ()):
        super().__init__(message)
        self.violations = tuple(violations)


class ConfigurationError(CintError):
    """Linter configuration is invalid.

    Attributes:
        key: Configuration key that failed validation (if known)
    """

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key
