from __future__ import annotations

import logging

from claparse.core.domain.parameter import ParameterSpec
from claparse.core.interfaces.parameter_registry_interface import IParameterRegistry

logger = logging.getLogger(__name__)


class ParameterRegistry(IParameterRegistry):
    """Registry of parameter definitions.

    Not thread-safe: register everything before parsing, and do not mutate
    the registry while a parse call on it is in progress.
    """

    def __init__(self) -> None:
        self._parameters: dict[str, ParameterSpec] = {}

    def register(self, spec: ParameterSpec) -> ParameterSpec | None:
        """Register a parameter, replacing any previous one with the same name.

        Args:
            spec: The parameter to register

        Returns:
            The parameter that was replaced, or None
        """
        previous = self._parameters.get(spec.name)
        self._parameters[spec.name] = spec
        if previous is not None:
            logger.debug(f"Replaced parameter: {spec.name}")
        else:
            logger.debug(f"Registered parameter: {spec.name} ({spec.marker})")
        return previous

    def unregister(self, name: str) -> ParameterSpec | None:
        removed = self._parameters.pop(name, None)
        if removed is not None:
            logger.debug(f"Unregistered parameter: {name}")
        return removed

    def get(self, name: str) -> ParameterSpec | None:
        return self._parameters.get(name)

    def get_all(self) -> list[ParameterSpec]:
        """Get all registered parameters.

        Returns:
            A new list; callers may sort or filter it freely
        """
        return list(self._parameters.values())

    def find_by_marker(self, token: str) -> ParameterSpec | None:
        # Markers are derived from mutable fields, so they are not indexed
        for spec in self._parameters.values():
            if spec.marker == token:
                return spec
        return None

    def required_names(self) -> list[str]:
        return [name for name, spec in self._parameters.items() if spec.required]

    def __contains__(self, name: object) -> bool:
        return name in self._parameters

    def __len__(self) -> int:
        return len(self._parameters)
