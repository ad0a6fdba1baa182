"""
Command line parser.

Parameters are registered up front; ``parse`` then walks the token sequence
once, front to back, matching markers and collecting the values that follow
each of them.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TextIO

from claparse.constants import DEFAULT_HELP_DESCRIPTION, HELP_ORDER_KEY
from claparse.core.common.exceptions import (
    DuplicateParameterError,
    InsufficientValuesError,
    InvalidValueError,
    MissingRequiredParameterError,
    ParameterDefinitionError,
    UnknownParameterError,
)
from claparse.core.config.parser_config import ParserConfig
from claparse.core.domain.parameter import ParameterAction, ParameterSpec
from claparse.core.domain.parsed_result import ParsedResult
from claparse.core.interfaces.command_line_parser_interface import ICommandLineParser
from claparse.core.interfaces.parameter_registry_interface import IParameterRegistry
from claparse.core.interfaces.tokenizer_interface import ITokenizer
from claparse.core.services.help_action import HelpAction
from claparse.core.services.parameter_registry import ParameterRegistry
from claparse.core.services.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class CommandLineParser(ICommandLineParser):
    """Parse command line tokens against a set of registered parameters.

    Example:
        ```python
        parser = CommandLineParser()
        parser.add_parameter(ParameterSpec(name="v", description="Verbose"))
        parser.add_parameter(
            ParameterSpec(name="out", min_values=1, max_values=1, required=True)
        )
        result = parser.parse("-v -out result.txt")
        result.values_for("out")  # ["result.txt"]
        ```

    A parser is meant to be configured once and then used from a single
    thread; registering parameters during a parse call is not supported.
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        registry: IParameterRegistry | None = None,
        tokenizer: ITokenizer | None = None,
        warning_sink: Callable[[str], Any] | None = None,
    ) -> None:
        self.config = config or ParserConfig()
        self.registry = registry if registry is not None else ParameterRegistry()
        self.tokenizer = tokenizer or Tokenizer()
        self.warning_sink = warning_sink

    # Registration --------------------------------------------------------

    def add_parameter(self, spec: ParameterSpec) -> CommandLineParser:
        """Register a parameter, replacing any parameter with the same name.

        Raises:
            ParameterDefinitionError: If the parameter's counts are inconsistent
                and ``validate_on_register`` is enabled
        """
        if self.config.validate_on_register:
            error = spec.cardinality_error()
            if error:
                raise ParameterDefinitionError(
                    f'Invalid parameter "{spec.name}": {error}', parameter=spec.name
                )
        self.registry.register(spec)
        return self

    def add_parameters(self, specs: Iterable[ParameterSpec]) -> CommandLineParser:
        for spec in specs:
            self.add_parameter(spec)
        return self

    def flag(
        self,
        name: str,
        description: str = "",
        *,
        min_values: int = 0,
        max_values: int = 0,
        values: Iterable[str] | None = None,
        required: bool = False,
        action: ParameterAction | None = None,
        order_key: int = 0,
    ) -> ParameterSpec:
        """Create a parameter with the configured default affixes and register it."""
        spec = ParameterSpec(
            name=name,
            description=description,
            prefix=self.config.default_prefix,
            suffix=self.config.default_suffix,
            min_values=min_values,
            max_values=max_values,
            fixed_values=set(values or ()),
            required=required,
            action=action,
            order_key=order_key,
        )
        self.add_parameter(spec)
        return spec

    def remove_parameter(self, name: str) -> ParameterSpec | None:
        return self.registry.unregister(name)

    def get_parameter(self, name: str) -> ParameterSpec | None:
        return self.registry.get(name)

    def list_parameters(self) -> list[ParameterSpec]:
        return self.registry.get_all()

    def find_parameter(self, token: str) -> ParameterSpec | None:
        """Return the parameter whose marker is exactly ``token``."""
        return self.registry.find_by_marker(token)

    def add_default_help_parameter(
        self,
        out: TextIO | None = None,
        description: str | None = None,
        name: str | None = None,
        prefix: str | None = None,
    ) -> ParameterSpec:
        """Register a help flag that lists every parameter on ``out``.

        The help action runs before any other action in the same call.

        Args:
            out: Output stream, standard output by default
            description: Text shown at the top of the listing
            name: Parameter name (typically help, h or ?)
            prefix: Parameter prefix

        Returns:
            The registered help parameter
        """
        action = HelpAction(out or sys.stdout, description, self.list_parameters)
        help_spec = ParameterSpec(
            name=name or self.config.help_name,
            prefix=self.config.help_prefix if prefix is None else prefix,
            suffix="",
            description=DEFAULT_HELP_DESCRIPTION,
            action=action,
            order_key=HELP_ORDER_KEY,
        )
        self.add_parameter(help_spec)
        return help_spec

    # Parsing -------------------------------------------------------------

    def tokenize(self, text: str | None) -> list[str]:
        return self.tokenizer.tokenize(text)

    def parse(self, tokens: Sequence[str] | str) -> ParsedResult:
        """Validate ``tokens`` and collect the values of every parameter.

        Args:
            tokens: Token sequence, or a single string to tokenize first

        Returns:
            The values collected per parameter name

        Raises:
            UnknownParameterError: A marker was expected but the token matches none
            DuplicateParameterError: A parameter appears twice
            InsufficientValuesError: Too few tokens left for a parameter's minimum
            InvalidValueError: A value is outside a parameter's fixed values
            MissingRequiredParameterError: A required parameter is absent
        """
        if isinstance(tokens, str):
            tokens = self.tokenize(tokens)

        result = ParsedResult()
        index = 0
        length = len(tokens)

        while index < length:
            token = tokens[index]
            index += 1

            spec = self.find_parameter(token)
            if spec is None:
                logger.debug(f"Rejecting unknown token {token!r} at {index - 1}")
                raise UnknownParameterError(token)

            if result.contains(spec.name):
                raise DuplicateParameterError(spec.name)
            result.add_value(spec.name)

            max_values = spec.effective_max_values
            if max_values == 0:
                continue

            min_values = spec.effective_min_values
            if length - index < min_values:
                raise InsufficientValuesError(spec.name, min_values)

            # Mandatory values are taken as-is, even if they look like markers
            for value in tokens[index : index + min_values]:
                self._check_value(spec, value)
                self._warn_if_marker(spec, value)
                result.add_value(spec.name, value)
            index += min_values

            # Optional values stop at the next marker
            while (
                index < length
                and result.count(spec.name) < max_values
                and self.find_parameter(tokens[index]) is None
            ):
                value = tokens[index]
                index += 1
                self._check_value(spec, value)
                result.add_value(spec.name, value)

        for name in self.registry.required_names():
            if not result.contains(name):
                raise MissingRequiredParameterError(name)

        logger.debug(f"Parsed {length} token(s): {result}")
        return result

    def _check_value(self, spec: ParameterSpec, value: str) -> None:
        if not spec.accepts(value):
            raise InvalidValueError(spec.name, value)

    def _warn_if_marker(self, spec: ParameterSpec, value: str) -> None:
        if not self.config.warn_on_marker_collision:
            return
        other = self.find_parameter(value)
        if other is None:
            return
        message = (
            f'Value "{value}" for parameter "{spec.name}" equals '
            f'parameter "{other.name}". Maybe an error?'
        )
        logger.warning(message)
        if self.warning_sink is not None:
            self.warning_sink(message)

    # Actions -------------------------------------------------------------

    def run(self, result: ParsedResult) -> None:
        """Invoke the actions of the parameters present in ``result``.

        Actions run in ascending ``order_key``; ties keep match order.
        Exceptions raised by an action propagate unchanged.
        """
        pending: list[ParameterSpec] = []
        for name in result.names():
            spec = self.get_parameter(name)
            if spec is not None and spec.action is not None:
                pending.append(spec)

        for spec in sorted(pending, key=lambda s: s.order_key):
            logger.debug(f"Running action for {spec.name} (order {spec.order_key})")
            spec.action(spec, result.values_for(spec.name) or [])  # type: ignore[misc]

    def parse_and_run(self, tokens: Sequence[str] | str) -> ParsedResult:
        """Parse ``tokens`` and run the matched parameters' actions."""
        result = self.parse(tokens)
        self.run(result)
        return result
