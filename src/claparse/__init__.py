"""claparse: declarative command line argument parsing."""

from claparse.constants import LIBNAME, LICENSE, UNBOUNDED, VERSION
from claparse.core.common.exceptions import (
    CLAParseError,
    ConfigurationError,
    DuplicateParameterError,
    InsufficientValuesError,
    InvalidValueError,
    MissingRequiredParameterError,
    ParameterCountError,
    ParameterDefinitionError,
    ParameterTokenError,
    ParameterValueError,
    ParseError,
    UnknownParameterError,
)
from claparse.core.config.parser_config import ParserConfig
from claparse.core.config.schema_loader import load_parser, load_parser_from_yaml
from claparse.core.domain.parameter import ParameterSpec
from claparse.core.domain.parsed_result import ParsedResult
from claparse.core.services.command_line_parser import CommandLineParser
from claparse.core.services.tokenizer import Tokenizer, tokenize

__version__ = VERSION

__all__ = [
    "CLAParseError",
    "CommandLineParser",
    "ConfigurationError",
    "DuplicateParameterError",
    "InsufficientValuesError",
    "InvalidValueError",
    "LIBNAME",
    "LICENSE",
    "MissingRequiredParameterError",
    "ParameterCountError",
    "ParameterDefinitionError",
    "ParameterSpec",
    "ParameterTokenError",
    "ParameterValueError",
    "ParseError",
    "ParsedResult",
    "ParserConfig",
    "Tokenizer",
    "UNBOUNDED",
    "UnknownParameterError",
    "VERSION",
    "load_parser",
    "load_parser_from_yaml",
    "tokenize",
]
