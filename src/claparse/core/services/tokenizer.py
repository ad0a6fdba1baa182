from __future__ import annotations

import re

from claparse.core.interfaces.tokenizer_interface import ITokenizer

# A double-quoted run (no escapes) or a run of non-whitespace characters
TOKEN_PATTERN = re.compile(r'"(?P<quoted>[^"]*)"|(?P<plain>\S+)')


class Tokenizer(ITokenizer):
    """Split a command line string into tokens.

    - ``"two words"`` becomes a single token with the quotes stripped
    - Everything else is split on whitespace
    - An unbalanced quote stays part of a plain token
    """

    def __init__(self, pattern: re.Pattern[str] = TOKEN_PATTERN) -> None:
        self.pattern = pattern

    def tokenize(self, text: str | None) -> list[str]:
        if not text:
            return []

        tokens: list[str] = []
        for match in self.pattern.finditer(text):
            quoted = match.group("quoted")
            tokens.append(quoted if quoted is not None else match.group("plain"))
        return tokens


_default_tokenizer = Tokenizer()


def tokenize(text: str | None) -> list[str]:
    """Split ``text`` with the default tokenizer."""
    return _default_tokenizer.tokenize(text)
