"""
Batch Validator

Compiles the schema once and validates every requested config file
independently, returning one ValidationResult per file in input order.
A schema that cannot be loaded fails every file without reading any.
"""

import concurrent.futures
import logging
import time
from typing import List, Optional, Sequence

from cint.validation.context import CompiledSchema, ConstraintContext
from cint.validation.engine import ValidationEngine
from cint.validation.errors import SchemaLoadError
from cint.validation.report import ValidationResult
from cint.validation.schema_loader import load_schema, schema_error_message


logger = logging.getLogger(__name__)


class BatchValidator:
    """Validates many config files against one schema.

    Args:
        workers: Number of files validated concurrently (1 = sequential).
        context: Engine handle; a fresh one is created when omitted.
    """

    def __init__(self, workers: int = 1, context: Optional[ConstraintContext] = None):
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.workers = workers
        self.context = context or ConstraintContext()
        self.engine = ValidationEngine(self.context)

    def validate_files(self, schema_path: str, config_paths: Sequence[str]) -> List[ValidationResult]:
        """Validate config files against a schema.

        Args:
            schema_path: Path to the schema file.
            config_paths: Config file paths, in the order results are wanted.

        Returns:
            List of ValidationResult, one per config path, same order.
        """
        start = time.time()
        config_paths = list(config_paths)

        try:
            schema = load_schema(self.context, schema_path)
        except SchemaLoadError as e:
            logger.error(f"Schema {schema_path} could not be loaded: {e}")
            return schema_error_results(config_paths, e)

        if self.workers > 1 and len(config_paths) > 1:
            results = self._validate_concurrently(schema, config_paths)
        else:
            results = [self._validate_one(schema, path) for path in config_paths]

        failed = sum(1 for r in results if not r.is_valid)
        logger.info(
            f"Validated {len(results)} file(s) in {time.time() - start:.2f}s: "
            f"{len(results) - failed} passed, {failed} failed"
        )
        return results

    def _validate_concurrently(self, schema: CompiledSchema, config_paths: List[str]) -> List[ValidationResult]:
        logger.debug(f"Validating {len(config_paths)} files with {self.workers} workers")
        results: List[Optional[ValidationResult]] = [None] * len(config_paths)

        with concurrent.futures.ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = {
                executor.submit(self._validate_one, schema, path): index
                for index, path in enumerate(config_paths)
            }
            for future in concurrent.futures.as_completed(futures):
                results[futures[future]] = future.result()

        return results

    def _validate_one(self, schema: CompiledSchema, file_path: str) -> ValidationResult:
        """Validate one file, capturing anything unexpected as its result."""
        try:
            return self.engine.validate_file(schema, file_path)
        except Exception as e:
            logger.exception(f"Unexpected error validating {file_path}")
            return ValidationResult.failure(file_path, f"internal error: {e}")


def schema_error_results(config_paths: Sequence[str], err: Exception) -> List[ValidationResult]:
    """Build the uniform failure result every file gets when the schema fails."""
    message = schema_error_message(err)
    return [ValidationResult.failure(path, message) for path in config_paths]


def validate_files(
    schema_path: str,
    config_paths: Sequence[str],
    workers: int = 1,
) -> List[ValidationResult]:
    """Validate config files against a schema with a fresh engine context."""
    return BatchValidator(workers=workers).validate_files(schema_path, config_paths)
