"""
Constraint Context

Explicit handle around the constraint-evaluation engine (JSON Schema, via
the jsonschema library). One context is created per run and threaded
through every compile, decode, unify and validate call.

Capabilities:

- compile_bytes: schema source -> CompiledSchema
- lookup: CompiledSchema -> named SchemaDefinition
- unify: SchemaDefinition + DecodedDocument -> UnifiedValue
- validate_concrete: UnifiedValue -> None, or raises ConstraintViolation
"""

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Tuple

import yaml
from jsonschema import Draft202012Validator
from jsonschema import exceptions as jsonschema_exceptions
from jsonschema.validators import extend, validator_for

from cint.validation.errors import (
    ConstraintViolation,
    MissingDefinitionError,
    SchemaCompileError,
)
from cint.validation.source_map import (
    Position,
    SourceMap,
    build_source_map,
    lookup_nearest_position,
    lookup_position,
)


logger = logging.getLogger(__name__)

# Well-known top-level definition every config document must satisfy
DEFINITION_NAME = "Config"
ROOT_SEGMENT = f"#{DEFINITION_NAME}"

# Keywords that may hold named definitions, newest draft first
DEFINITION_CONTAINERS = ("$defs", "definitions")

_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$-]*$")


@dataclass(frozen=True)
class Violation:
    """One independent way a document fails its definition.

    Attributes:
        message: Rendered text of the violation
        path: Path segments from the synthetic root to the offending field
        positions: Source positions, document first, then schema
    """
    message: str
    path: Tuple[str, ...] = ()
    positions: Tuple[Position, ...] = ()


@dataclass(frozen=True)
class CompiledSchema:
    """Compiled, read-only schema shared by every validation in a run."""
    filename: str
    contents: Any
    source_map: SourceMap = field(default_factory=dict, repr=False)
    validator: Any = field(default=None, repr=False)


@dataclass(frozen=True)
class SchemaDefinition:
    """A named definition looked up inside a CompiledSchema."""
    schema: CompiledSchema
    name: str
    contents: Any
    location: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DecodedDocument:
    """Value tree decoded from one config file."""
    filename: str
    value: Any
    source_map: SourceMap = field(default_factory=dict, repr=False)


@dataclass(frozen=True)
class UnifiedValue:
    """A document bound to the definition it must satisfy."""
    definition: SchemaDefinition
    document: DecodedDocument
    validator: Any = field(repr=False)


def _required(validator, required, instance, schema):
    """Report each missing required property at its own path."""
    if not validator.is_type(instance, "object"):
        return
    for prop in required:
        if prop not in instance:
            yield jsonschema_exceptions.ValidationError(
                f"incomplete value: required property {prop!r} is missing",
                path=[prop],
            )


def render_segment(element) -> str:
    """Render a document path element as an engine path segment.

    List indices become "[N]"; keys that are not plain identifiers are quoted.
    """
    if isinstance(element, int):
        return f"[{element}]"
    element = str(element)
    if _IDENTIFIER.match(element):
        return element
    return json.dumps(element)


class ConstraintContext:
    """Handle to the JSON Schema engine for one linter run.

    Args:
        default_validator: Validator class used when a schema has no $schema.
        check_formats: Whether "format" keywords are asserted.
    """

    def __init__(self, default_validator=Draft202012Validator, check_formats: bool = True):
        self.default_validator = default_validator
        self.check_formats = check_formats

    def compile_bytes(self, source: bytes, filename: str = "<schema>") -> CompiledSchema:
        """Compile schema source text.

        YAML is accepted for any file name; names ending in .json are
        parsed as strict JSON.

        Raises:
            SchemaCompileError: If the source is malformed or not a valid schema.
        """
        try:
            text = source.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise SchemaCompileError(f"{filename}: {e}", filename) from e

        try:
            if filename.lower().endswith(".json"):
                contents = json.loads(text)
            else:
                contents = yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SchemaCompileError(f"{filename}: {e}", filename) from e

        if not isinstance(contents, dict):
            raise SchemaCompileError(f"{filename}: schema root must be a mapping", filename)

        base = validator_for(contents, default=self.default_validator)
        try:
            base.check_schema(contents)
        except jsonschema_exceptions.SchemaError as e:
            where = "/".join(str(p) for p in e.absolute_path)
            detail = f"{e.message} (at /{where})" if where else e.message
            raise SchemaCompileError(f"{filename}: {detail}", filename) from e

        cls = self._validator_class(base)
        format_checker = cls.FORMAT_CHECKER if self.check_formats else None
        validator = cls(contents, format_checker=format_checker)

        logger.debug(f"Compiled schema {filename} with {base.__name__}")
        return CompiledSchema(
            filename=filename,
            contents=contents,
            source_map=build_source_map(text),
            validator=validator,
        )

    def _validator_class(self, base):
        if "required" not in base.VALIDATORS:
            # draft 3 spells "required" as a property flag
            return base
        return extend(base, {"required": _required})

    def lookup(self, schema: CompiledSchema, name: str = DEFINITION_NAME) -> SchemaDefinition:
        """Find a named definition at the top level of a schema.

        Raises:
            MissingDefinitionError: If no definition container holds the name.
        """
        for container in DEFINITION_CONTAINERS:
            definitions = schema.contents.get(container)
            if isinstance(definitions, dict) and name in definitions:
                return SchemaDefinition(
                    schema=schema,
                    name=name,
                    contents=definitions[name],
                    location=(container, name),
                )
        raise MissingDefinitionError(f"#{name}")

    def build_document(self, filename: str, value: Any, source_map: Optional[SourceMap] = None) -> DecodedDocument:
        return DecodedDocument(filename=filename, value=value, source_map=source_map or {})

    def unify(self, definition: SchemaDefinition, document: DecodedDocument) -> UnifiedValue:
        """Bind a document to a definition.

        The validator is evolved onto the definition but keeps the root
        resolver, so references elsewhere in the schema still resolve.
        The document itself is never altered.
        """
        validator = definition.schema.validator.evolve(schema=definition.contents)
        return UnifiedValue(definition=definition, document=document, validator=validator)

    def validate_concrete(self, unified: UnifiedValue) -> None:
        """Validate a unified value, collecting every violation.

        Raises:
            ConstraintViolation: If any constraint is not satisfied.
        """
        errors = list(unified.validator.iter_errors(unified.document.value))
        if not errors:
            return

        violations = tuple(self._to_violation(unified, e) for e in errors)
        first = violations[0]
        message = f"{'.'.join(first.path)}: {first.message}"
        if len(violations) > 1:
            message += f" (and {len(violations) - 1} more errors)"
        raise ConstraintViolation(message, violations)

    def _to_violation(self, unified: UnifiedValue, error) -> Violation:
        definition = unified.definition
        document = unified.document
        doc_path = list(error.absolute_path)

        positions: List[Position] = []
        doc_position = lookup_position(document.filename, document.source_map, doc_path)
        if doc_position is not None:
            positions.append(doc_position)

        # Keywords reached through a reference have no node of their own
        schema_position = lookup_nearest_position(
            definition.schema.filename,
            definition.schema.source_map,
            list(definition.location) + list(error.absolute_schema_path),
        )
        if schema_position is not None:
            positions.append(schema_position)

        return Violation(
            message=error.message,
            path=(f"#{definition.name}",) + tuple(render_segment(p) for p in doc_path),
            positions=tuple(positions),
        )


def iter_violations(err: BaseException) -> Iterable[Violation]:
    """Yield the violations carried by an engine failure, if any."""
    if isinstance(err, ConstraintViolation):
        yield from err.violations
