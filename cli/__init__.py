"""
CLI Package for cint

The linter is a single Click command implemented in validate.py. The
cli() function serves as the console script entry point for setup.py and
maps every argument error to the linter's failure exit code.
"""

import os
import sys

import click
from dotenv import load_dotenv

# Load environment variables from .env files
# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')

from .help_texts import ExitCodes
from .validate import validate

main = validate


# Entry point for setup.py console script
def cli():
    """Console script entry point.

    This function is called when the cint command is executed
    from the command line after installation via pip.
    """
    try:
        exit_code = main.main(standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(ExitCodes.FAILURE)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(ExitCodes.FAILURE)
    sys.exit(exit_code or ExitCodes.SUCCESS)
