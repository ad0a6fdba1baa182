from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TextIO

from claparse.core.domain.parameter import ParameterSpec

logger = logging.getLogger(__name__)

RULE_WIDTH = 50
LEGEND = 'parameter [values{cardinality}]   "description"'


def render_help(description: str | None, parameters: Sequence[ParameterSpec]) -> str:
    """Render the help listing for ``parameters``.

    Parameters are listed case-insensitively by name.
    """
    lines = [
        "=" * RULE_WIDTH,
        "Help:",
        description or "",
        LEGEND,
        "_" * RULE_WIDTH,
    ]
    lines.extend(str(spec) for spec in sorted(parameters, key=lambda p: p.name.lower()))
    lines.append("=" * RULE_WIDTH)
    return "\n".join(lines) + "\n"


class HelpAction:
    """Parameter action that writes the help listing to an output stream."""

    def __init__(
        self,
        out: TextIO,
        description: str | None,
        parameters: Callable[[], Sequence[ParameterSpec]],
    ) -> None:
        self.out = out
        self.description = description
        self.parameters = parameters

    def __call__(self, spec: ParameterSpec, values: list[str]) -> None:
        logger.debug(f"Rendering help for {spec.marker}")
        self.out.write(render_help(self.description, self.parameters()))
        self.out.flush()
