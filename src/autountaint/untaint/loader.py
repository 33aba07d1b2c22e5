"""YAML loader for untaint configuration.

Configurations are loaded and validated here; resolution happens in
resolver.py. Example document:

    strict: false
    skip_columns: [secret_notes]
    untaint_columns:
      printable: [name, title]
    match_columns:
      - pattern: '^count_.+$'
        category: integer
    untaint_types:
      enum: printable
    match_types:
      - pattern: 'int$'
        category: integer
    types:            # extends the standard type table
      money: printable
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from autountaint.core.config import get_settings
from autountaint.core.logging import get_logger
from autountaint.untaint.defaults import TypeMap
from autountaint.untaint.errors import UntaintConfigLoadError
from autountaint.untaint.models import UntaintConfig

logger = get_logger(__name__)

DEFAULT_CONFIG_NAME = "untaint/default.yaml"


def load_untaint_config(config_path: Path | str) -> UntaintConfig:
    """Load an untaint configuration from a YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated UntaintConfig

    Raises:
        UntaintConfigLoadError: If file not found, invalid YAML, or validation fails
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise UntaintConfigLoadError(config_path, "configuration file not found")

    try:
        with open(config_path, encoding="utf-8") as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise UntaintConfigLoadError(config_path, f"invalid YAML: {e}") from e
    except OSError as e:
        raise UntaintConfigLoadError(config_path, f"cannot read file: {e}") from e

    if not raw_config:
        logger.warning("untaint_config_empty", path=str(config_path))
        return UntaintConfig()

    if not isinstance(raw_config, dict):
        raise UntaintConfigLoadError(config_path, "top level must be a mapping")

    try:
        config = UntaintConfig.model_validate(_parse_untaint_config(config_path, raw_config))
    except ValidationError as e:
        raise UntaintConfigLoadError(config_path, f"validation error: {e}") from e

    logger.info(
        "untaint_config_loaded",
        path=str(config_path),
        match_columns=len(config.match_columns),
        match_types=len(config.match_types),
    )
    return config


def _parse_untaint_config(config_path: Path, raw_config: dict[str, Any]) -> dict[str, Any]:
    """Map raw YAML keys onto UntaintConfig fields.

    The ``types`` key extends the standard type table into a fresh TypeMap
    so loading a file never touches the shared default table.
    """
    data = dict(raw_config)
    types = data.pop("types", None)
    if types is not None:
        if not isinstance(types, dict):
            raise UntaintConfigLoadError(config_path, "'types' must be a mapping")
        data["type_map"] = TypeMap({str(k): str(v) for k, v in types.items()})
    return data


def load_default_untaint_config() -> UntaintConfig:
    """Load the default untaint configuration.

    Looks for untaint/default.yaml under the configured config directory.

    Returns:
        Default UntaintConfig, or an empty one if no file is found
    """
    config_path = get_settings().config_path / DEFAULT_CONFIG_NAME
    if config_path.exists():
        return load_untaint_config(config_path)

    logger.warning("untaint_config_default_missing", path=str(config_path))
    return UntaintConfig()
