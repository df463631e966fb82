"""
Plain-Text Formatter

Renders validation results for console output and derives the process
exit status.
"""

from typing import List

from cint.validation.report import ValidationError, ValidationResult


EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def format_results(results: List[ValidationResult]) -> str:
    """Format validation results into a human-readable string."""
    return "".join(format_result(r) for r in results)


def format_result(result: ValidationResult) -> str:
    if result.is_valid:
        return f"{result.file_name}: ok\n"

    lines = [f"FAIL: {result.file_name}\n"]
    for err in result.errors:
        lines.append(f"  {format_error(err)}\n")
    return "".join(lines)


def format_error(err: ValidationError) -> str:
    """Format one error with the most specific location available."""
    if err.line > 0 and err.field:
        return f'line {err.line}, field "{err.field}": {err.problem}'
    if err.line > 0:
        return f"line {err.line}: {err.problem}"
    if err.field:
        return f'field "{err.field}": {err.problem}'
    return err.problem


def determine_exit_code(results: List[ValidationResult]) -> int:
    """Exit code 0 iff every result is valid."""
    if any(not r.is_valid for r in results):
        return EXIT_FAILURE
    return EXIT_SUCCESS
