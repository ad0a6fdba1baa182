# Services package

from .command_line_parser import CommandLineParser
from .help_action import HelpAction, render_help
from .parameter_registry import ParameterRegistry
from .tokenizer import Tokenizer, tokenize

__all__ = [
    "CommandLineParser",
    "HelpAction",
    "ParameterRegistry",
    "Tokenizer",
    "render_help",
    "tokenize",
]
