"""
Validation Engine

Validates one config file against a compiled schema: reads it, decodes it
by extension, unifies it with the Config definition and demands full
concreteness. Every per-file failure is returned as a ValidationResult.
"""

import logging
import time
from pathlib import Path
from typing import List, Optional

from cint.validation.context import (
    DEFINITION_NAME,
    CompiledSchema,
    ConstraintContext,
    DecodedDocument,
)
from cint.validation.decoders import decode_document
from cint.validation.diagnostics import extract_validation_errors
from cint.validation.errors import (
    ConstraintViolation,
    DocumentDecodeError,
    FileReadError,
    MissingDefinitionError,
)
from cint.validation.report import ValidationError, ValidationResult


logger = logging.getLogger(__name__)


class ValidationEngine:
    """Validates documents against the Config definition of a schema.

    Args:
        context: Engine handle shared by every call in a run.
    """

    def __init__(self, context: Optional[ConstraintContext] = None):
        self.context = context or ConstraintContext()

    def validate(self, schema: CompiledSchema, document: DecodedDocument) -> List[ValidationError]:
        """Validate a decoded document.

        Returns:
            List of ValidationError (empty if valid).

        Raises:
            MissingDefinitionError: If the schema lacks the Config definition.
        """
        definition = self.context.lookup(schema, DEFINITION_NAME)
        unified = self.context.unify(definition, document)
        try:
            self.context.validate_concrete(unified)
        except ConstraintViolation as e:
            return extract_validation_errors(e)
        return []

    def validate_file(self, schema: CompiledSchema, file_path: str) -> ValidationResult:
        """Validate a single config file.

        Args:
            schema: Compiled schema shared across the run.
            file_path: Path to a .yaml, .yml or .json file.

        Returns:
            ValidationResult with all errors found.
        """
        start = time.time()

        try:
            document = self._load_document(file_path)
            errors = self.validate(schema, document)
        except (FileReadError, DocumentDecodeError, MissingDefinitionError) as e:
            return ValidationResult.failure(file_path, str(e), self._elapsed_ms(start))

        elapsed_ms = self._elapsed_ms(start)
        logger.debug(f"Validated {file_path} in {elapsed_ms}ms: {len(errors)} error(s)")
        if not errors:
            return ValidationResult.ok(file_path, elapsed_ms)
        return ValidationResult(file_name=file_path, errors=tuple(errors), duration_ms=elapsed_ms)

    def _load_document(self, file_path: str) -> DecodedDocument:
        """Read and decode a config file.

        Raises:
            FileReadError: If the file cannot be read.
            DocumentDecodeError: If the format is unsupported or malformed.
        """
        try:
            data = Path(file_path).read_bytes()
        except OSError as e:
            raise FileReadError(f"failed to read file: {e}") from e

        return decode_document(self.context, file_path, data)

    @staticmethod
    def _elapsed_ms(start: float) -> int:
        return int((time.time() - start) * 1000)
