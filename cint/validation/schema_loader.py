"""
Schema Loader

Reads and compiles the schema file once per run and checks that it
defines the top-level contract. Every failure here is global: no config
file can be evaluated without a schema.
"""

import logging
import time
from pathlib import Path

from cint.validation.context import DEFINITION_NAME, CompiledSchema, ConstraintContext
from cint.validation.errors import SchemaCompileError, SchemaReadError


logger = logging.getLogger(__name__)


def load_schema(context: ConstraintContext, schema_path: str) -> CompiledSchema:
    """Load a schema file and verify its Config definition.

    Args:
        context: Engine handle for this run.
        schema_path: Path to a YAML or JSON schema file.

    Returns:
        CompiledSchema ready to be shared across validations.

    Raises:
        SchemaReadError: If the file cannot be read.
        SchemaCompileError: If the source does not compile.
        MissingDefinitionError: If the schema lacks the Config definition.
    """
    start = time.time()
    try:
        source = Path(schema_path).read_bytes()
    except OSError as e:
        raise SchemaReadError(f"reading schema file: {e}") from e

    try:
        schema = context.compile_bytes(source, filename=str(schema_path))
    except SchemaCompileError as e:
        raise SchemaCompileError(f"compiling schema: {e}", e.filename) from e

    # Surface a missing contract once, before any file is read
    context.lookup(schema, DEFINITION_NAME)

    logger.debug(f"Loaded schema {schema_path} in {(time.time() - start) * 1000:.0f}ms")
    return schema


def schema_error_message(err: Exception) -> str:
    """Message carried by every result when the schema cannot be loaded."""
    return f"failed to load schema: {err}"


