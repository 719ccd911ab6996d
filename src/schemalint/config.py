"""
YAML configuration and catalog loading.

Configuration files declare the exception lists for each rule:

    version: "1.0"
    exceptions:
      boolean_naming:
        resources:
          azurerm_netapp_volume: [protocols_enabled]

Catalog files describe data sources and resources with flat field
declarations:

    resources:
      example_thing:
        name: { type: string, default: default }
        settings:
          type: list
          elem:
            api_key: { type: string, sensitive: true }
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from schemalint.exceptions_registry import ExceptionRegistry
from schemalint.models.catalog import Catalog

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SCHEMALINT_CONFIG"


class LintConfig(BaseModel):
    """
    Root schema for schemalint configuration files.

    Attributes:
        version: Schema version
        exceptions: Exception sets by rule name and catalog partition
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: str = Field(default="1.0", description="Schema version")
    exceptions: ExceptionRegistry = Field(
        default_factory=ExceptionRegistry,
        description="Per-entry exceptions by rule name and partition",
    )


def _read_yaml(path: Path, what: str) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"{what} file not found: {path}")

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    # An empty document loads as None
    return data or {}


def load_config(path: Optional[str | Path] = None) -> LintConfig:
    """
    Load a configuration file.

    Args:
        path: Path to YAML file. Falls back to the SCHEMALINT_CONFIG
            environment variable; with neither set, an empty config is returned.

    Returns:
        LintConfig instance

    Raises:
        FileNotFoundError: If file doesn't exist
        yaml.YAMLError: If YAML parsing fails
        ValidationError: If schema validation fails
    """
    if path is None:
        env_path = os.getenv(CONFIG_ENV_VAR)
        if not env_path:
            logger.debug(f"No config path given and {CONFIG_ENV_VAR} not set, using empty config")
            return LintConfig()
        path = env_path

    path = Path(path)
    config = LintConfig.model_validate(_read_yaml(path, "Config"))
    logger.info(f"Loaded config from {path} (exceptions for rules: {config.exceptions.rule_names()})")
    return config


def load_catalog(path: str | Path) -> Catalog:
    """
    Load a catalog from a YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Catalog instance

    Raises:
        FileNotFoundError: If file doesn't exist
        yaml.YAMLError: If YAML parsing fails
        ValidationError: If schema validation fails
    """
    path = Path(path)
    catalog = Catalog.model_validate(_read_yaml(path, "Catalog"))
    logger.info(
        f"Loaded catalog from {path}: {len(catalog.data_sources)} data sources, {len(catalog.resources)} resources"
    )
    return catalog


__all__ = [
    "CONFIG_ENV_VAR",
    "LintConfig",
    "load_config",
    "load_catalog",
]
