"""
graphcalc configuration models.

Parses graphcalc.toml and provides typed configuration for the compiler
and the CLI:

    [formula]
    max_length = 512

    [host]
    template = "float func(float x, float y) { return float($expr); }"

    [logging]
    level = "WARNING"

Missing files and missing sections fall back to defaults.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from pydantic import BaseModel, Field, ValidationError, field_validator

from graphcalc.core.errors import ConfigError
from graphcalc.core.expression_lang.compiler import DEFAULT_TEMPLATE, check_template

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "graphcalc.toml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class FormulaConfig(BaseModel):
    """Limits applied to formulas before compiling."""

    # Size of the formula input field in the original tool.
    max_length: int = Field(default=512, ge=0, description="0 disables the cap")


class HostConfig(BaseModel):
    """How generated expressions are embedded in the host program."""

    template: str = DEFAULT_TEMPLATE

    @field_validator("template")
    @classmethod
    def validate_template(cls, v: str) -> str:
        """The only placeholder must be $expr."""
        check_template(v)
        return v


class LoggingConfig(BaseModel):
    """Log level for the CLI."""

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(_LOG_LEVELS)}, got: {v}")
        return level


class GraphCalcConfig(BaseModel):
    """Complete graphcalc configuration."""

    formula: FormulaConfig = Field(default_factory=FormulaConfig)
    host: HostConfig = Field(default_factory=HostConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(toml_path: Path) -> GraphCalcConfig:
    """
    Load configuration from graphcalc.toml.

    Args:
        toml_path: Path to graphcalc.toml file

    Returns:
        GraphCalcConfig with parsed values or defaults

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values
    """
    if not toml_path.exists():
        logger.debug("No config at %s, using defaults", toml_path)
        return GraphCalcConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {toml_path}: {e}") from e

    config_dict = {
        section: data[section] for section in ("formula", "host", "logging") if section in data
    }

    try:
        return GraphCalcConfig.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {toml_path}: {e}") from e


def find_config(start: Path) -> Path:
    """Return graphcalc.toml in ``start`` or the nearest parent that has one.

    Falls back to ``start / graphcalc.toml`` (which may not exist).
    """
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return start / CONFIG_FILENAME
