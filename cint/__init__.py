"""
cint - Configuration linter

Validates YAML/JSON configuration documents against a JSON Schema
contract and reports per-file diagnostics for CI/CD gating.
"""

__version__ = "0.1.0"
