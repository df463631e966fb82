"""
Shared CLI Option Decorators

This module provides reusable Click decorators for the ambient options
(logging, concurrency, reports), keeping the command definition short.
"""

import click

from .help_texts import LOG_FILE_HELP, LOG_LEVEL_HELP, REPORT_HELP, WORKERS_HELP


def workers_option(help=None):
    """Decorator for the concurrency option."""
    def decorator(f):
        return click.option(
            '--workers', '-w',
            type=int,
            default=None,
            help=help or WORKERS_HELP
        )(f)
    return decorator


def report_option(help=None):
    """Decorator for JSON report output."""
    def decorator(f):
        return click.option(
            '--report', '-r',
            'report_path',
            type=click.Path(dir_okay=False),
            default=None,
            help=help or REPORT_HELP
        )(f)
    return decorator


def log_level_option(help=None):
    """Decorator for logging level options."""
    def decorator(f):
        return click.option(
            '--log-level',
            default=None,
            type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
            help=help or LOG_LEVEL_HELP
        )(f)
    return decorator


def log_file_option(help=None):
    """Decorator for log file output."""
    def decorator(f):
        return click.option(
            '--log-file',
            type=click.Path(dir_okay=False),
            default=None,
            help=help or LOG_FILE_HELP
        )(f)
    return decorator
