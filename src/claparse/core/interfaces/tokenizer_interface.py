from __future__ import annotations

from typing import Protocol


class ITokenizer(Protocol):
    """Splits a raw command line string into tokens.

    Implementations should be pure and side-effect free.
    """

    def tokenize(self, text: str | None) -> list[str]:
        """Split ``text`` into an ordered list of tokens.

        Args:
            text: Raw command line (may be None or empty)

        Returns:
            The tokens in input order. Returns an empty list when there is
            nothing to split.
        """
        ...
