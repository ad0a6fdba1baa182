"""Interface for command line parsing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from claparse.core.domain.parsed_result import ParsedResult


class ICommandLineParser(ABC):
    """Interface for parsing command line tokens against registered parameters."""

    @abstractmethod
    def parse(self, tokens: Sequence[str] | str) -> ParsedResult:
        """Validate tokens and collect the values of every parameter.

        Args:
            tokens: Token sequence, or a single string to tokenize first

        Returns:
            The values collected per parameter name
        """

    @abstractmethod
    def run(self, result: ParsedResult) -> None:
        """Invoke the actions of the parameters present in ``result``."""

    @abstractmethod
    def parse_and_run(self, tokens: Sequence[str] | str) -> ParsedResult:
        pass
