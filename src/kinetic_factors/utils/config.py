"""Configuration sources for kinetic factors.

A factor reads its parameters by name from a configuration source. The
source is either a plain mapping of names to values, a mapping holding such
a block under ``params``, or a :class:`FactorConfig` parsed from YAML.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from numbers import Real
from pathlib import Path
from typing import Any, Union, cast

import yaml
from pydantic import BaseModel, Field

from kinetic_factors.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class FactorConfig(BaseModel):
    """One kinetic factor definition."""

    kinetic: str = Field(..., description="Registered factor key (e.g., 'haldane')")
    solute: str | None = Field(None, description="Solute the factor depends on")
    params: dict[str, Any] = Field(
        default_factory=dict,
        description="Named kinetic parameters (e.g., {'Ks': 2.0, 'Ki': 50.0})",
    )


class LoggingConfig(BaseModel):
    """Configuration for package logging, passed to ``setup_logging``."""

    level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="text", description="Log format ('text' or 'json')")
    log_file: str | None = Field(None, description="Log file path")
    module_levels: dict[str, str] = Field(
        default_factory=dict,
        description="Per-module log levels",
    )


class KineticsConfig(BaseModel):
    """Top-level configuration file."""

    factors: list[FactorConfig] = Field(default_factory=list)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


ParameterSource = Union[FactorConfig, Mapping[str, Any]]


def _param_block(config: ParameterSource) -> Mapping[str, Any]:
    if isinstance(config, FactorConfig):
        return config.params
    if isinstance(config, Mapping):
        nested = config.get("params")
        if isinstance(nested, Mapping):
            return nested
        return config
    raise ConfigurationError(
        f"Unsupported configuration source: {type(config).__name__}"
    )


def get_param(config: ParameterSource, name: str) -> float:
    """Fetch one named parameter as a float.

    Numeric strings are accepted since protocol files often carry values as
    text.

    Args:
        config: Configuration source.
        name: Parameter name (e.g. 'Ks').

    Returns:
        Parameter value.

    Raises:
        ConfigurationError: If the parameter is absent or not numeric.
    """
    block = _param_block(config)
    if name not in block:
        raise ConfigurationError(f"Missing required parameter: {name}")

    value = block[name]
    if isinstance(value, bool) or value is None:
        raise ConfigurationError(f"Parameter '{name}' is not numeric: {value!r}")
    if isinstance(value, Real):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as exc:
            raise ConfigurationError(
                f"Parameter '{name}' is not numeric: {value!r}"
            ) from exc
    raise ConfigurationError(f"Parameter '{name}' is not numeric: {value!r}")


def _interpolate_env_vars(text: str) -> str:
    """Replace ${VAR:default} patterns with environment variable values."""

    def _replace(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(3)
        value = os.environ.get(var_name)
        if value is not None:
            return value
        if default is not None:
            return cast(str, default)
        return match.group(0)

    return re.sub(r"\$\{(\w+)(:([^}]*))?\}", _replace, text)


def load_config(path: str | Path) -> KineticsConfig:
    """Load factor definitions from a YAML file.

    Supports ``${VAR}`` and ``${VAR:default}`` syntax for environment
    variable substitution.

    Args:
        path: Path to YAML config file.

    Returns:
        Parsed configuration object.

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    try:
        data = yaml.safe_load(_interpolate_env_vars(path.read_text()))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc

    try:
        config = KineticsConfig(**(data or {}))
    except Exception as exc:
        raise ConfigurationError(f"Invalid config structure: {exc}") from exc

    logger.info(f"Loaded {len(config.factors)} factor definitions from {path}")
    return config


__all__ = [
    "FactorConfig",
    "KineticsConfig",
    "LoggingConfig",
    "ParameterSource",
    "get_param",
    "load_config",
]
