"""
Declarative parameter schemas.

Builds a parser from a mapping, usually read from a YAML document:

```yaml
description: Copy files
help: true
parameters:
  - name: src
    min_values: 1
    max_values: 1
    required: true
  - name: mode
    values: [fast, safe]
    max_values: 1
```
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TextIO

from pydantic import ValidationError

from claparse.constants import SchemaKey
from claparse.core.common.exceptions import ConfigurationError
from claparse.core.config.parser_config import ParserConfig
from claparse.core.domain.parameter import ParameterSpec
from claparse.core.services.command_line_parser import CommandLineParser

logger = logging.getLogger(__name__)

_ALLOWED_TOP_KEYS = {"description", "help", "config", "parameters"}
_ALLOWED_HELP_KEYS = {"name", "prefix", "description"}
_ALLOWED_PARAMETER_KEYS = {key.value for key in SchemaKey}


def _check_keys(data: Mapping[str, Any], allowed: set[str], where: str) -> None:
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ConfigurationError(
            f"Unknown key(s) in {where}: {', '.join(unknown)}",
            details={"unknown": unknown, "allowed": sorted(allowed)},
        )


def _build_parameter(
    entry: Any, position: int, config: ParserConfig
) -> ParameterSpec:
    where = f"parameters[{position}]"
    if not isinstance(entry, Mapping):
        raise ConfigurationError(f"{where} must be a mapping")
    _check_keys(entry, _ALLOWED_PARAMETER_KEYS, where)

    fields: dict[str, Any] = {
        "prefix": config.default_prefix,
        "suffix": config.default_suffix,
    }
    for key, value in entry.items():
        if key == SchemaKey.VALUES.value:
            fields["fixed_values"] = value
        else:
            fields[key] = value

    try:
        return ParameterSpec(**fields)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid parameter definition in {where}",
            details={"errors": exc.errors(include_url=False)},
            parameter=entry.get(SchemaKey.NAME.value),
        ) from exc


def load_parser(
    data: Mapping[str, Any],
    *,
    config: ParserConfig | None = None,
    out: TextIO | None = None,
) -> CommandLineParser:
    """Build a parser from a declarative schema.

    Args:
        data: Schema mapping (see module docstring)
        config: Parser configuration; overrides the schema's ``config`` section
        out: Output stream for the help listing

    Returns:
        A parser with every declared parameter registered

    Raises:
        ConfigurationError: If the schema is malformed
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError("Parameter schema must be a mapping")
    _check_keys(data, _ALLOWED_TOP_KEYS, "schema")

    if config is None:
        raw_config = data.get("config") or {}
        if not isinstance(raw_config, Mapping):
            raise ConfigurationError("config section must be a mapping")
        config = ParserConfig.from_dict(raw_config)

    parser = CommandLineParser(config=config)

    entries = data.get("parameters") or []
    if not isinstance(entries, list):
        raise ConfigurationError("parameters section must be a list")

    seen: set[str] = set()
    for position, entry in enumerate(entries):
        spec = _build_parameter(entry, position, config)
        if spec.name in seen:
            logger.warning(
                f"Parameter {spec.name!r} declared more than once; "
                "the last declaration wins"
            )
        seen.add(spec.name)
        parser.add_parameter(spec)

    help_section = data.get("help", False)
    if help_section:
        help_options: Mapping[str, Any] = (
            help_section if isinstance(help_section, Mapping) else {}
        )
        _check_keys(help_options, _ALLOWED_HELP_KEYS, "help")
        parser.add_default_help_parameter(
            out,
            description=help_options.get("description", data.get("description")),
            name=help_options.get("name"),
            prefix=help_options.get("prefix"),
        )

    logger.debug(f"Loaded parser with {len(parser.list_parameters())} parameter(s)")
    return parser


def load_parser_from_yaml(
    path: str | Path,
    *,
    config: ParserConfig | None = None,
    out: TextIO | None = None,
) -> CommandLineParser:
    """Build a parser from a YAML schema file."""
    import yaml

    p = Path(path)
    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigurationError(
            f"Unsupported schema file format: {p.suffix}. Use YAML (.yaml/.yml)."
        )
    try:
        with p.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.error(f"Error loading schema file {p}: {exc!s}")
        raise ConfigurationError(f"Cannot read schema file: {p}", path=str(p)) from exc

    return load_parser(data, config=config, out=out)
