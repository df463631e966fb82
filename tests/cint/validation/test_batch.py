"""
Tests for cint.validation.batch

Covers the end-to-end scenarios: valid documents, missing required fields,
range/pattern/enum violations, multiple simultaneous violations, schema
load failures, unreadable and unsupported files, and concurrent batches.
"""

import json

import pytest

from cint.validation import batch as batch_module
from cint.validation.batch import BatchValidator, validate_files
from cint.validation.engine import ValidationEngine


REPLICAS_SCHEMA = """
    $defs:
      Config:
        type: object
        required: [name]
        properties:
          name: {type: string}
          replicas:
            type: integer
            minimum: 1
            maximum: 10
"""


def _all_problems(results):
    return "; ".join(
        f"field={e.field} problem={e.problem}" for r in results for e in r.errors
    )


class TestScenarios:
    @pytest.mark.parametrize("name,content", [
        ("config.yaml", 'name: "my-service"\nreplicas: 3\n'),
        ("config.json", '{\n\t"name": "my-service",\n\t"replicas": 3\n}\n'),
    ])
    def test_valid_document(self, write_file, name, content):
        schema = write_file("schema.yaml", REPLICAS_SCHEMA)
        config = write_file(name, content)

        results = validate_files(schema, [config])

        assert len(results) == 1
        assert results[0].is_valid
        assert results[0].errors == ()
        assert results[0].file_name == config

    @pytest.mark.parametrize("name,content", [
        ("config.yaml", 'name: "my-service"\n'),
        ("config.json", '{"name": "my-service"}'),
    ])
    def test_missing_required_field(self, write_file, name, content):
        schema = write_file("schema.yaml", """
            $defs:
              Config:
                type: object
                required: [name, version]
                properties:
                  name: {type: string}
                  version: {type: string}
        """)
        config = write_file(name, content)

        results = validate_files(schema, [config])

        assert not results[0].is_valid
        assert len(results[0].errors) == 1
        error = results[0].errors[0]
        assert error.field == "version"
        assert "version" in error.problem
        assert "incomplete" in error.problem

    @pytest.mark.parametrize("name,content", [
        ("config.yaml", "name: svc\nreplicas: 0\n"),
        ("config.json", '{"name": "svc",\n "replicas": 0}'),
    ])
    def test_value_out_of_range(self, write_file, name, content):
        schema = write_file("schema.yaml", REPLICAS_SCHEMA)
        config = write_file(name, content)

        results = validate_files(schema, [config])

        assert not results[0].is_valid
        assert len(results[0].errors) == 1
        error = results[0].errors[0]
        assert error.field == "replicas"
        assert "minimum" in error.problem
        assert error.line == 2

    @pytest.mark.parametrize("name,content", [
        ("config.yaml", 'name: "MyService"\n'),
        ("config.json", '{"name": "MyService"}'),
    ])
    def test_pattern_mismatch(self, write_file, service_schema, name, content):
        config = write_file(name, content)

        results = validate_files(service_schema, [config])

        assert not results[0].is_valid
        assert results[0].errors[0].field == "name"
        assert "does not match" in results[0].errors[0].problem

    @pytest.mark.parametrize("name,content", [
        ("config.yaml", 'name: svc\nenvironment: "dev"\n'),
        ("config.json", '{"name": "svc", "environment": "dev"}'),
    ])
    def test_enum_constraint(self, write_file, service_schema, name, content):
        config = write_file(name, content)

        results = validate_files(service_schema, [config])

        assert not results[0].is_valid
        assert results[0].errors[0].field == "environment"
        assert "is not one of" in results[0].errors[0].problem

    @pytest.mark.parametrize("name,content", [
        ("config.yaml", 'name: "BadName"\nreplicas: 100\nenvironment: "testing"\n'),
        ("config.json", '{\n  "name": "BadName",\n  "replicas": 100,\n  "environment": "testing"\n}\n'),
    ])
    def test_multiple_errors(self, write_file, service_schema, name, content):
        config = write_file(name, content)

        results = validate_files(service_schema, [config])

        errors = results[0].errors
        assert len(errors) == 3
        assert sorted(e.field for e in errors) == ["environment", "name", "replicas"]
        assert all(e.line > 0 for e in errors)

    def test_nested_structure(self, write_file):
        schema = write_file("schema.json", json.dumps({
            "$defs": {
                "Config": {
                    "type": "object",
                    "required": ["metadata"],
                    "properties": {
                        "metadata": {
                            "type": "object",
                            "required": ["name"],
                            "properties": {
                                "name": {"type": "string"},
                                "labels": {
                                    "type": "object",
                                    "additionalProperties": {"type": "string"},
                                },
                            },
                        },
                    },
                },
            },
        }, indent=2))
        config = write_file("config.yaml", """
            metadata:
              name: test
              labels:
                app: web
        """)

        results = validate_files(schema, [config])

        assert results[0].is_valid

    def test_list_items_report_field_without_index(self, write_file):
        schema = write_file("schema.yaml", """
            $defs:
              Config:
                type: object
                properties:
                  servers:
                    type: array
                    items:
                      type: object
                      properties:
                        port: {type: integer, maximum: 65535}
        """)
        config = write_file("config.yaml", """
            servers:
              - port: 80
              - port: 99999
        """)

        results = validate_files(schema, [config])

        error = results[0].errors[0]
        assert error.field == "servers.port"
        assert error.line == 3

    def test_multiple_files_mixed_formats(self, write_file, service_schema):
        paths = [
            write_file("config1.yaml", 'name: "valid-name"'),
            write_file("config2.json", '{"name": "another-valid"}'),
            write_file("config3.yml", 'name: "yet-another"'),
        ]

        results = validate_files(service_schema, paths)

        assert [r.file_name for r in results] == paths
        assert all(r.is_valid for r in results)


class TestSchemaFailures:
    @pytest.mark.parametrize("schema_text", [
        "$defs: {Config: {invalid syntax",
        '{"$defs": {"Config": {"type": "nonsense"}}}',
        "- not\n- a mapping\n",
    ])
    def test_invalid_schema_fails_every_file(self, write_file, schema_text):
        schema = write_file("schema.yaml", schema_text)
        paths = [
            write_file("config.yaml", "name: test"),
            write_file("config.json", '{"name": "test"}'),
        ]

        results = validate_files(schema, paths)

        assert len(results) == 2
        for result in results:
            assert not result.is_valid
            assert len(result.errors) == 1
            error = result.errors[0]
            assert error.problem.startswith("failed to load schema: compiling schema:")
            assert error.line == 0
            assert error.field == ""

    def test_missing_definition_fails_every_file(self, write_file):
        schema = write_file("schema.yaml", "$defs:\n  Other: {type: object}\n")
        config = write_file("config.yaml", "name: test")

        results = validate_files(schema, [config])

        assert results[0].errors[0].problem == "failed to load schema: schema does not define #Config"

    def test_unreadable_schema_reads_no_file(self, tmp_path, write_file, monkeypatch):
        calls = []
        monkeypatch.setattr(
            ValidationEngine, "validate_file",
            lambda self, schema, path: calls.append(path),
        )
        paths = [write_file("a.yaml", "name: a"), str(tmp_path / "missing.json")]

        results = validate_files(str(tmp_path / "nope.yaml"), paths)

        assert calls == []
        assert [r.file_name for r in results] == paths
        for result in results:
            assert not result.is_valid
            assert len(result.errors) == 1
            assert "failed to load schema" in result.errors[0].problem
            assert "reading schema file" in result.errors[0].problem

    def test_schema_compiled_once(self, write_file, service_schema, monkeypatch):
        loads = []
        original = batch_module.load_schema

        def counting_load(context, path):
            loads.append(path)
            return original(context, path)

        monkeypatch.setattr(batch_module, "load_schema", counting_load)
        paths = [write_file(f"c{i}.yaml", "name: ok") for i in range(3)]

        validate_files(service_schema, paths)

        assert loads == [service_schema]


class TestFileFailures:
    @pytest.mark.parametrize("filename", ["nonexistent.yaml", "nonexistent.json"])
    def test_nonexistent_file(self, tmp_path, service_schema, filename):
        results = validate_files(service_schema, [str(tmp_path / filename)])

        assert not results[0].is_valid
        assert results[0].errors[0].problem.startswith("failed to read file")

    @pytest.mark.parametrize("filename,content,ext", [
        ("config.toml", 'name = "test"', ".toml"),
        ("config.ini", "name=test", ".ini"),
        ("config.xml", "<name>test</name>", ".xml"),
    ])
    def test_unsupported_format(self, write_file, service_schema, filename, content, ext):
        config = write_file(filename, content)

        results = validate_files(service_schema, [config])

        problem = results[0].errors[0].problem
        assert "unsupported file format" in problem
        assert ext in problem

    def test_malformed_document_is_local(self, write_file, service_schema):
        bad = write_file("bad.json", "{invalid json")
        good = write_file("good.yaml", "name: fine")

        results = validate_files(service_schema, [bad, good])

        assert results[0].errors[0].problem.startswith("failed to parse JSON")
        assert results[1].is_valid

    def test_unexpected_error_is_captured(self, write_file, service_schema, monkeypatch):
        original = ValidationEngine.validate_file
        boom = write_file("boom.yaml", "name: boom")

        def flaky(self, schema, path):
            if path == boom:
                raise RuntimeError("kaboom")
            return original(self, schema, path)

        monkeypatch.setattr(ValidationEngine, "validate_file", flaky)
        ok = write_file("ok.yaml", "name: ok")

        results = validate_files(service_schema, [boom, ok])

        assert results[0].errors[0].problem == "internal error: kaboom"
        assert results[1].is_valid

    def test_alias_heavy_document_validates(self, write_file, service_schema):
        levels = ["a0: &a0 [x, x, x, x, x, x, x, x, x, x]"]
        for level in range(1, 7):
            levels.append(f"a{level}: &a{level} [" + ", ".join([f"*a{level - 1}"] * 10) + "]")
        config = write_file("aliases.yaml", "name: svc\n" + "\n".join(levels) + "\n")

        results = validate_files(service_schema, [config])

        assert results[0].is_valid

    def test_self_referencing_alias_is_not_an_internal_error(self, write_file, service_schema):
        config = write_file("loop.yaml", "name: svc\nloop: &l [*l]\n")

        results = validate_files(service_schema, [config])

        assert results[0].is_valid


class TestConcurrency:
    def test_workers_preserve_input_order(self, write_file, service_schema):
        paths = []
        for i in range(12):
            if i % 3 == 0:
                paths.append(write_file(f"c{i}.yaml", "name: Invalid"))
            else:
                paths.append(write_file(f"c{i}.json", json.dumps({"name": f"svc-{i}"})))

        results = BatchValidator(workers=4).validate_files(service_schema, paths)

        assert [r.file_name for r in results] == paths
        assert [r.is_valid for r in results] == [i % 3 != 0 for i in range(12)]

    def test_workers_match_sequential(self, write_file, service_schema):
        paths = [
            write_file("a.yaml", "name: BadName\nreplicas: 100\n"),
            write_file("b.json", '{"replicas": 2}'),
            write_file("c.toml", "x = 1"),
        ]

        sequential = BatchValidator(workers=1).validate_files(service_schema, paths)
        concurrent = BatchValidator(workers=3).validate_files(service_schema, paths)

        assert [r.errors for r in sequential] == [r.errors for r in concurrent]

    def test_invalid_worker_count(self):
        with pytest.raises(ValueError):
            BatchValidator(workers=0)
