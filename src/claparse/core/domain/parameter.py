"""
Parameter Domain Model

This module defines the declaration of a single command line parameter:
its marker, how many values it takes, which values it accepts and what
runs once it has been parsed.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from pydantic import ConfigDict, Field, field_validator, model_validator

from claparse.constants import (
    DEFAULT_PREFIX,
    DEFAULT_SUFFIX,
    HELP_ORDER_KEY,
    UNBOUNDED,
)
from claparse.core.interfaces.model_bases import DomainModel
from claparse.marker_affix import validate_affix, validate_parameter_name

# Called as action(spec, values) after a successful parse
ParameterAction = Callable[["ParameterSpec", list[str]], Any]


class ParameterSpec(DomainModel):
    """Definition of one recognized command line parameter.

    The token that marks the parameter on the command line is
    ``prefix + name + suffix``. When ``fixed_values`` is non-empty only
    those values are accepted, and the effective cardinality can never
    exceed the size of that vocabulary.

    Example:
        ```python
        mode = ParameterSpec(
            name="mode",
            description="Copy strategy",
            min_values=1,
            max_values=1,
            fixed_values={"fast", "safe"},
        )
        mode.marker  # "-mode"
        ```
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    description: str = ""
    prefix: str = DEFAULT_PREFIX
    suffix: str = DEFAULT_SUFFIX
    min_values: int = Field(default=0, ge=0)
    max_values: int = Field(default=0, ge=0)
    fixed_values: set[str] = Field(default_factory=set)
    required: bool = False
    action: Callable[..., Any] | None = None
    # HELP_ORDER_KEY is the floor so help always runs first
    order_key: int = Field(default=0, ge=HELP_ORDER_KEY)

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        error = validate_parameter_name(value)
        if error:
            raise ValueError(error)
        return value

    @field_validator("prefix", "suffix")
    @classmethod
    def _check_affix(cls, value: str) -> str:
        error = validate_affix(value)
        if error:
            raise ValueError(error)
        return value

    @field_validator("fixed_values", mode="before")
    @classmethod
    def _coerce_fixed_values(cls, value: Any) -> Any:
        if value is None:
            return set()
        if isinstance(value, str):
            return {value}
        if isinstance(value, Iterable):
            return {str(item) for item in value}
        return value

    @model_validator(mode="after")
    def _check_cardinality(self) -> ParameterSpec:
        error = self.cardinality_error()
        if error:
            raise ValueError(error)
        return self

    # Derived properties --------------------------------------------------

    @property
    def marker(self) -> str:
        """Complete token for this parameter, e.g. ``-help`` or ``--all``."""
        return f"{self.prefix}{self.name}{self.suffix}"

    @property
    def has_fixed_values(self) -> bool:
        return bool(self.fixed_values)

    @property
    def fixed_value_count(self) -> int:
        return len(self.fixed_values)

    @property
    def effective_min_values(self) -> int:
        """Declared minimum, capped by the fixed vocabulary size."""
        if not self.fixed_values:
            return self.min_values
        return min(len(self.fixed_values), self.min_values)

    @property
    def effective_max_values(self) -> int:
        """Declared maximum, capped by the fixed vocabulary size."""
        if not self.fixed_values:
            return self.max_values
        return min(len(self.fixed_values), self.max_values)

    @property
    def is_flag(self) -> bool:
        return self.effective_max_values == 0

    # Fixed values --------------------------------------------------------

    def add_fixed_value(self, value: str) -> ParameterSpec:
        self.fixed_values.add(value)
        return self

    def accepts(self, value: str) -> bool:
        """Check whether ``value`` is acceptable for this parameter."""
        return not self.fixed_values or value in self.fixed_values

    # Validation ----------------------------------------------------------

    def cardinality_error(self) -> str | None:
        """Return a message when the declared counts are inconsistent."""
        if self.min_values < 0 or self.max_values < 0:
            return "value counts cannot be negative"
        if self.min_values > self.max_values:
            return (
                f"min_values ({self.min_values}) exceeds "
                f"max_values ({self.max_values})"
            )
        return None

    # Rendering -----------------------------------------------------------

    def cardinality_label(self) -> str:
        """Render the cardinality as ``{n}``, ``{min-max}`` or ``{min-inf}``."""
        low, high = self.effective_min_values, self.effective_max_values
        if high == 0:
            return ""
        if low == high:
            return f"{{{low}}}"
        upper = "inf" if high >= UNBOUNDED else str(high)
        return f"{{{low}-{upper}}}"

    def __str__(self) -> str:
        if self.fixed_values:
            values = " [" + "|".join(sorted(self.fixed_values)) + "]"
        else:
            values = " value" if self.effective_max_values > 0 else ""
        description = f'   "{self.description}"' if self.description else ""
        required = "   <<required>>" if self.required else ""
        return f"{self.marker}{values}{self.cardinality_label()}{description}{required}"
