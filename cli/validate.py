"""
Validate Command Module

Validates config files against the Config definition of a schema and
prints one line (or block) per file. Exits 0 only when every file is valid.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

import click

from cint import __version__
from cint.config.manager import ConfigurationManager
from cint.utils.logging_config import configure_logging
from cint.validation.batch import BatchValidator
from cint.validation.errors import ConfigurationError
from cint.validation.formatter import determine_exit_code, format_results
from cint.validation.report import results_to_json

from .help_texts import (
    CONFIG_HELP,
    MISSING_CONFIG_ERROR,
    MISSING_SCHEMA_ERROR,
    SCHEMA_HELP,
    USAGE_HINT,
    VALIDATE_EPILOG,
    VALIDATE_HELP,
    ExitCodes,
)
from .shared_options import (
    log_file_option,
    log_level_option,
    report_option,
    workers_option,
)


logger = logging.getLogger(__name__)


@click.command(name="cint", help=VALIDATE_HELP, epilog=VALIDATE_EPILOG)
@click.version_option(
    version=__version__,
    prog_name="cint",
    message="%(prog)s version %(version)s",
)
@click.option(
    "--schema", "-s",
    "schema_path",
    type=click.Path(dir_okay=False),
    default=None,
    help=SCHEMA_HELP,
)
@click.option(
    "--config", "-c",
    "config_paths",
    type=click.Path(dir_okay=False),
    multiple=True,
    help=CONFIG_HELP,
)
@workers_option()
@report_option()
@log_level_option()
@log_file_option()
@click.pass_context
def validate(
    ctx: click.Context,
    schema_path: Optional[str],
    config_paths: Tuple[str, ...],
    workers: Optional[int],
    report_path: Optional[str],
    log_level: Optional[str],
    log_file: Optional[str],
):
    """Validate config files against a schema."""
    if not schema_path or not config_paths:
        click.echo(f"Error: {MISSING_SCHEMA_ERROR if not schema_path else MISSING_CONFIG_ERROR}", err=True)
        click.echo(USAGE_HINT, err=True)
        ctx.exit(ExitCodes.FAILURE)

    try:
        config = ConfigurationManager().load_configuration({
            "workers": workers,
            "report_path": report_path,
            "log_level": log_level,
            "log_file": log_file,
        })
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(ExitCodes.FAILURE)

    configure_logging(level=config.log_level.value, log_file=config.log_file)
    logger.debug(f"Validating {len(config_paths)} file(s) against {schema_path}")

    results = BatchValidator(workers=config.workers).validate_files(schema_path, config_paths)
    click.echo(format_results(results), nl=False)

    exit_code = determine_exit_code(results)

    if config.report_path:
        try:
            _write_report(config.report_path, results_to_json(results))
        except OSError as e:
            click.echo(f"Error: cannot write report {config.report_path}: {e}", err=True)
            exit_code = ExitCodes.FAILURE
        else:
            click.echo(f"Report saved: {config.report_path}", err=True)

    ctx.exit(exit_code)


def _write_report(path: str, report: str):
    """Write a JSON report to disk."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    Path(path).write_text(report, encoding="utf-8")
