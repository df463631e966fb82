"""
CLI Module Main Entry Point

This module allows the CLI package to be executed directly with:
    python -m cli
"""

from . import cli

if __name__ == '__main__':
    cli()
