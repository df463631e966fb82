"""
setup.py

Packaging metadata and CLI entry point for cint.

Version: 0.1.0. Validates YAML/JSON config files against the Config
definition of a JSON Schema, for use as a CI/CD gate.
"""
from setuptools import setup, find_packages

setup(
    name="cint",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click",
        "pydantic>=2.0",
        "PyYAML",
        "jsonschema>=4.18",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "cint=cli:cli",
        ],
    },
    python_requires=">=3.8",
)
