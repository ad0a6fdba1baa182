from __future__ import annotations

import io

import pytest
from claparse.core.domain.parameter import ParameterSpec
from claparse.core.services.command_line_parser import CommandLineParser


@pytest.fixture
def parser() -> CommandLineParser:
    """An empty parser with default configuration."""
    return CommandLineParser()


@pytest.fixture
def warnings_seen() -> list[str]:
    return []


@pytest.fixture
def copy_parser(warnings_seen: list[str]) -> CommandLineParser:
    """A parser shaped like a small file copy tool.

    -v            flag
    -src value    exactly one value, required
    -dst value    one to three values
    -mode [fast|safe]{0-1}
    """
    parser = CommandLineParser(warning_sink=warnings_seen.append)
    parser.add_parameter(ParameterSpec(name="v", description="Verbose output"))
    parser.add_parameter(
        ParameterSpec(name="src", min_values=1, max_values=1, required=True)
    )
    parser.add_parameter(ParameterSpec(name="dst", min_values=1, max_values=3))
    parser.add_parameter(
        ParameterSpec(name="mode", max_values=1, fixed_values={"fast", "safe"})
    )
    return parser


@pytest.fixture
def help_output() -> io.StringIO:
    return io.StringIO()
