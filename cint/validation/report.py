"""
Validation Report Data Models

Defines ValidationError and ValidationResult dataclasses used across
the validation module for structured per-file reporting.
"""

import json
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class ValidationError:
    """A single diagnostic found while validating a file.

    Attributes:
        line: 1-based line number, 0 when no position could be attributed
        field: Dot-joined field path, empty for root-level or unknown
        problem: Human-readable description of the problem
    """
    line: int = 0
    field: str = ""
    problem: str = ""

    def __post_init__(self):
        if self.line < 0:
            object.__setattr__(self, "line", 0)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {"line": self.line, "field": self.field, "problem": self.problem}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one config file.

    Attributes:
        file_name: Path of the validated file, as requested
        errors: Diagnostics found, empty iff the file is valid
        duration_ms: How long validation took in milliseconds
    """
    file_name: str
    errors: Tuple[ValidationError, ...] = field(default_factory=tuple)
    duration_ms: int = 0

    def __post_init__(self):
        object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @classmethod
    def ok(cls, file_name: str, duration_ms: int = 0) -> "ValidationResult":
        return cls(file_name=file_name, errors=(), duration_ms=duration_ms)

    @classmethod
    def failure(cls, file_name: str, problem: str, duration_ms: int = 0) -> "ValidationResult":
        """Build an invalid result with one unattributed error."""
        return cls(
            file_name=file_name,
            errors=(ValidationError(line=0, field="", problem=problem),),
            duration_ms=duration_ms,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "file_name": self.file_name,
            "is_valid": self.is_valid,
            "errors": [e.to_dict() for e in self.errors],
            "duration_ms": self.duration_ms,
        }


def build_batch_report(results: List[ValidationResult]) -> dict:
    """Consolidate per-file results into one JSON-serializable report."""
    passed = sum(1 for r in results if r.is_valid)
    return {
        "total": len(results),
        "passed": passed,
        "failed": len(results) - passed,
        "results": [r.to_dict() for r in results],
    }


def results_to_json(results: List[ValidationResult], indent: int = 2) -> str:
    """Serialize a batch report to JSON string."""
    return json.dumps(build_batch_report(results), indent=indent)
