"""
Parsed Result Domain Model

This module defines the accumulator filled by the parser: a mapping from
parameter name to the values collected for it, in token order.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from claparse.core.interfaces.model_bases import InternalDTO


@dataclass
class ParsedResult(InternalDTO):
    """
    Values collected for every parameter matched during one parse call.

    A name mapped to an empty list means the parameter was given without
    values; a missing name means the parameter was not given at all.
    """

    values: dict[str, list[str]] = field(default_factory=dict)

    def add_value(self, name: str, value: str | None = None) -> ParsedResult:
        """Add a value to a parameter. ``None`` only records the parameter."""
        values = self.values.setdefault(name, [])
        if value is not None:
            values.append(value)
        return self

    def names(self) -> list[str]:
        return list(self.values)

    def values_for(self, name: str) -> list[str] | None:
        """Return a copy of the values for ``name`` or None if it was not given."""
        values = self.values.get(name)
        return list(values) if values is not None else None

    def count(self, name: str) -> int:
        return len(self.values.get(name, ()))

    def contains(self, name: str) -> bool:
        return name in self.values

    def to_dict(self) -> dict[str, list[str]]:
        return {name: list(values) for name, values in self.values.items()}

    def __contains__(self, name: object) -> bool:
        return name in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __str__(self) -> str:
        params = [
            f"{name} [{', '.join(values)}]" for name, values in self.values.items()
        ]
        return "[Parsed input: " + ",".join(params) + "]"
