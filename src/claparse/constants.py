import sys
from enum import Enum

LIBNAME: str = "claparse (Command Line Args)"
VERSION: str = "1.0.0"
LICENSE: str = "GPLv3"

DEFAULT_PREFIX: str = "-"
DEFAULT_SUFFIX: str = ""
DEFAULT_HELP_NAME: str = "help"
DEFAULT_HELP_DESCRIPTION: str = "Help about this command"

# Upper bound for parameters that accept any number of values.
UNBOUNDED: int = sys.maxsize

# Help runs before every other action in the same parse call.
HELP_ORDER_KEY: int = -sys.maxsize - 1

ENV_PREFIX: str = "CLAPARSE_"


class SchemaKey(str, Enum):
    """Keys accepted by a declarative parameter schema."""

    NAME = "name"
    DESCRIPTION = "description"
    PREFIX = "prefix"
    SUFFIX = "suffix"
    MIN_VALUES = "min_values"
    MAX_VALUES = "max_values"
    VALUES = "values"
    REQUIRED = "required"
    ORDER_KEY = "order_key"
