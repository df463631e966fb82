"""
Diagnostic Extractor

Translates an engine failure into an ordered, non-empty list of
ValidationError records: one per independent violation, each with the
best line number and field path that can be attributed to it.
"""

from typing import Iterable, List

from cint.validation.context import ROOT_SEGMENT, Violation, iter_violations
from cint.validation.report import ValidationError


def extract_validation_errors(err: BaseException) -> List[ValidationError]:
    """Extract structured diagnostics from a validation failure.

    Falls back to a single error carrying the raw message when the failure
    does not decompose into violations.
    """
    violations = list(iter_violations(err))
    if not violations:
        return [ValidationError(line=0, field="", problem=str(err))]

    return [extract_single_error(v) for v in violations]


def extract_single_error(violation: Violation) -> ValidationError:
    return ValidationError(
        line=extract_line_number(violation),
        field=format_path(violation.path),
        problem=violation.message,
    )


def extract_line_number(violation: Violation) -> int:
    """Return the first positive line among the violation's positions, else 0."""
    for position in violation.positions:
        if position.line > 0:
            return position.line
    return 0


def format_path(path: Iterable[str]) -> str:
    """Join the meaningful segments of an engine path with dots.

    Index segments and the synthetic root are dropped, and residual quotes
    are trimmed. An empty result means the root of the document.
    """
    parts = []
    for segment in path:
        if not is_valid_path_element(segment):
            continue
        parts.append(segment.strip('"'))
    return ".".join(parts)


def is_valid_path_element(segment: str) -> bool:
    return segment != "" and not segment.startswith("[") and segment != ROOT_SEGMENT
