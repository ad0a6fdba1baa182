"""Interface for parameter registries."""

from __future__ import annotations

from abc import ABC, abstractmethod

from claparse.core.domain.parameter import ParameterSpec


class IParameterRegistry(ABC):
    """Stores parameter definitions keyed by name."""

    @abstractmethod
    def register(self, spec: ParameterSpec) -> ParameterSpec | None:
        """Register a parameter, replacing any parameter with the same name.

        Returns:
            The replaced parameter, if there was one
        """

    @abstractmethod
    def unregister(self, name: str) -> ParameterSpec | None:
        """Remove a parameter by name and return it."""

    @abstractmethod
    def get(self, name: str) -> ParameterSpec | None:
        pass

    @abstractmethod
    def get_all(self) -> list[ParameterSpec]:
        pass

    @abstractmethod
    def find_by_marker(self, token: str) -> ParameterSpec | None:
        """Return the parameter whose marker equals ``token``."""
