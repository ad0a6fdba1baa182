# Domain package

from .parameter import ParameterAction, ParameterSpec
from .parsed_result import ParsedResult

__all__ = [
    "ParameterAction",
    "ParameterSpec",
    "ParsedResult",
]
