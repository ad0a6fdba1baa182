# Configuration package

from claparse.core.config.parser_config import LogLevel, ParserConfig
from claparse.core.config.schema_loader import load_parser, load_parser_from_yaml

__all__ = [
    "LogLevel",
    "ParserConfig",
    "load_parser",
    "load_parser_from_yaml",
]
