"""Unit tests for declarative parameter schemas."""

import io
import logging

import pytest
from claparse.core.common.exceptions import (
    ConfigurationError,
    InvalidValueError,
    MissingRequiredParameterError,
)
from claparse.core.config.parser_config import ParserConfig
from claparse.core.config.schema_loader import load_parser, load_parser_from_yaml

SCHEMA_YAML = """\
description: Copy files
help: true
parameters:
  - name: src
    description: Source file
    min_values: 1
    max_values: 1
    required: true
  - name: dst
    min_values: 1
    max_values: 3
  - name: mode
    values: [fast, safe]
    max_values: 1
"""


@pytest.fixture
def schema() -> dict:
    return {
        "parameters": [
            {"name": "src", "min_values": 1, "max_values": 1, "required": True},
            {"name": "mode", "values": ["fast", "safe"], "max_values": 1},
        ]
    }


class TestLoadParser:
    def test_registers_parameters(self, schema):
        parser = load_parser(schema)

        assert sorted(p.name for p in parser.list_parameters()) == ["mode", "src"]
        assert parser.get_parameter("mode").fixed_values == {"fast", "safe"}
        assert parser.parse("-src a -mode fast").to_dict() == {
            "src": ["a"],
            "mode": ["fast"],
        }

    def test_parser_enforces_schema(self, schema):
        parser = load_parser(schema)

        with pytest.raises(MissingRequiredParameterError):
            parser.parse("-mode fast")
        with pytest.raises(InvalidValueError):
            parser.parse("-src a -mode slow")

    def test_config_section_sets_default_affixes(self, schema):
        schema["config"] = {"default_prefix": "--"}

        parser = load_parser(schema)

        assert parser.get_parameter("src").marker == "--src"

    def test_explicit_affix_overrides_config(self):
        parser = load_parser(
            {
                "config": {"default_prefix": "--"},
                "parameters": [{"name": "x", "prefix": "+"}],
            }
        )
        assert parser.get_parameter("x").marker == "+x"

    def test_explicit_config_wins(self, schema):
        schema["config"] = {"default_prefix": "--"}

        parser = load_parser(schema, config=ParserConfig(default_prefix="/"))

        assert parser.get_parameter("src").marker == "/src"

    def test_help_section(self, schema):
        schema["help"] = {"name": "h", "prefix": "--", "description": "Usage"}
        out = io.StringIO()

        parser = load_parser(schema, out=out)
        parser.parse_and_run(["--h", "-src", "a"])

        assert out.getvalue().splitlines()[2] == "Usage"

    def test_last_duplicate_declaration_wins(self, caplog):
        with caplog.at_level(logging.WARNING, logger="claparse"):
            parser = load_parser(
                {
                    "parameters": [
                        {"name": "x"},
                        {"name": "x", "min_values": 1, "max_values": 1},
                    ]
                }
            )

        assert parser.get_parameter("x").max_values == 1
        assert "declared more than once" in caplog.text

    @pytest.mark.parametrize(
        "data, message",
        [
            (["not", "a", "mapping"], "must be a mapping"),
            ({"unexpected": True}, "Unknown key"),
            ({"parameters": {"name": "x"}}, "must be a list"),
            ({"parameters": ["x"]}, "parameters\\[0\\] must be a mapping"),
            ({"parameters": [{"name": "x", "bogus": 1}]}, "Unknown key"),
            ({"config": ["x"]}, "config section"),
            ({"help": {"colour": "red"}}, "Unknown key"),
        ],
    )
    def test_malformed_schema(self, data, message):
        with pytest.raises(ConfigurationError, match=message):
            load_parser(data)

    def test_invalid_parameter_definition(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_parser(
                {"parameters": [{"name": "x", "min_values": 2, "max_values": 1}]}
            )

        assert exc_info.value.parameter == "x"
        assert exc_info.value.details["errors"]

    def test_numeric_values_match_tokens(self):
        parser = load_parser(
            {"parameters": [{"name": "n", "values": [1, 2], "max_values": 1}]}
        )

        assert parser.get_parameter("n").fixed_values == {"1", "2"}
        assert parser.parse("-n 1").values_for("n") == ["1"]


class TestLoadParserFromYaml:
    def test_loads_yaml_schema(self, tmp_path):
        path = tmp_path / "copy.yaml"
        path.write_text(SCHEMA_YAML, encoding="utf-8")
        out = io.StringIO()

        parser = load_parser_from_yaml(path, out=out)
        result = parser.parse_and_run('-src "a b" -dst x y -help')

        assert result.values_for("src") == ["a b"]
        assert result.values_for("dst") == ["x", "y"]
        lines = out.getvalue().splitlines()
        assert lines[2] == "Copy files"
        assert '-src value{1}   "Source file"   <<required>>' in lines

    def test_yaml_numbers_are_accepted_as_values(self, tmp_path):
        path = tmp_path / "level.yaml"
        path.write_text(
            "parameters:\n  - name: level\n    values: [1, 2, 3]\n    max_values: 1\n",
            encoding="utf-8",
        )

        parser = load_parser_from_yaml(path)

        assert parser.parse(["-level", "3"]).values_for("level") == ["3"]

    def test_rejects_other_formats(self, tmp_path):
        path = tmp_path / "schema.txt"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Unsupported"):
            load_parser_from_yaml(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("parameters: [\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_parser_from_yaml(path)
