from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import BaseModel, ConfigDict, Field

from graphql2jsonschema import log


class ConversionOptions(BaseModel):
    """Options of a GraphQL introspection to JSON Schema conversion."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    ignore_internals: bool = Field(True, alias="ignoreInternals")


def coerce_options(options: ConversionOptions | Mapping[str, Any] | None) -> ConversionOptions:
    """Return ``options`` as a ConversionOptions, applying defaults for missing keys."""
    if options is None:
        return ConversionOptions()
    if isinstance(options, ConversionOptions):
        return options
    return ConversionOptions.model_validate(dict(options))


def load_conversion_options(config_path: Path | None) -> ConversionOptions:
    """
    Load and validate conversion options from a YAML file.

    Args:
        config_path: Path to the YAML configuration file, or None to use defaults.

    Returns:
        A validated ConversionOptions.

    Raises:
        OSError: If the file cannot be read.
        yaml.YAMLError: If the file is not valid YAML.
        TypeError: If the YAML root is not a mapping.
        ValidationError: If validation against ConversionOptions fails.
    """
    if config_path is None:
        log.debug("No conversion config provided")
        return ConversionOptions()

    raw: Any
    with config_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    log.debug("Loaded conversion config from %s", config_path)

    # Treat empty file or explicit YAML null as "defaults"
    if raw is None or raw == {}:
        return ConversionOptions()

    if not isinstance(raw, dict):
        raise TypeError(f"Conversion config root must be a mapping (YAML object), got {type(raw).__name__}")

    return ConversionOptions.model_validate(cast(dict[str, Any], raw))
