"""
Pytest configuration and fixtures for test isolation.
"""
import textwrap
from pathlib import Path

import pytest

from cint.config.environment import EnvironmentVariables
from cint.utils.logging_config import logging_config


@pytest.fixture(autouse=True)
def isolate_tests(tmp_path, monkeypatch):
    """
    Automatically isolate each test by:
    1. Running from a temporary working directory (no stray .cint.yaml)
    2. Cleaning up linter environment variables
    3. Removing log handlers installed by the CLI
    """
    monkeypatch.chdir(tmp_path)
    for name in EnvironmentVariables.get_all_variables():
        monkeypatch.delenv(name, raising=False)

    yield

    logging_config.reset()


@pytest.fixture
def write_file(tmp_path):
    """Write a (dedented) text file under tmp_path and return its path."""
    def _write(name: str, content: str) -> str:
        path = Path(tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def service_schema(write_file):
    """Schema with name pattern, replicas range and environment enum."""
    return write_file("schema.yaml", """
        $defs:
          Config:
            type: object
            required: [name]
            properties:
              name:
                type: string
                pattern: "^[a-z][a-z0-9-]*$"
              replicas:
                type: integer
                minimum: 1
                maximum: 10
              environment:
                enum: [development, staging, production]
    """)
