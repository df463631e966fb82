"""
Centralized Help Text Constants

This module provides all CLI help text constants for the linter command
and its options, plus the exit codes the command can return.
"""

# Exit codes for different outcomes
class ExitCodes:
    SUCCESS = 0
    FAILURE = 1


# Command help text
VALIDATE_HELP = (
    "cint - Configuration linter powered by JSON Schema.\n\n"
    "Validates YAML/JSON config files against the Config definition "
    "($defs/Config) of a schema file."
)

VALIDATE_EPILOG = """\b
Examples:
  # Validate a single file
  cint --schema=app.schema.yaml --config=service.yaml

\b
  # Validate multiple files
  cint --schema=app.schema.yaml --config=service-a.yaml --config=service-b.json
"""

# Option help texts
SCHEMA_HELP = "Path to the schema file, YAML or JSON (required)"

CONFIG_HELP = (
    "Path to a config file to validate (.yaml, .yml, .json). "
    "Can be specified multiple times."
)

WORKERS_HELP = (
    "Number of files validated concurrently. "
    "Overrides CINT_WORKERS and the config file (default: 1)."
)

REPORT_HELP = "Also write a JSON report of all results to this path"

LOG_LEVEL_HELP = "Logging level for diagnostics on stderr (default: WARNING)"

LOG_FILE_HELP = "Also write logs to this file (rotated)"

# Error messages
MISSING_SCHEMA_ERROR = "--schema is required"
MISSING_CONFIG_ERROR = "at least one --config is required"
USAGE_HINT = "Run 'cint --help' for usage"
