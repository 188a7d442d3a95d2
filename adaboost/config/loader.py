# adaboost/config/loader.py
"""YAML loading and saving of boosting configuration.

A configuration file holds either a ``boosting:`` section or a flat
mapping with the ``BoostingConfig`` fields::

    boosting:
      num_iterations: 200
      error_ratio_threshold: 0.45
"""

from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .boosting_config import BoostingConfig
from ..utils.logger import get_logger
from ..utils.exceptions import (
    ConfigurationError,
    FileOperationError,
    handle_and_reraise,
    create_error_context
)

logger = get_logger(__name__)

SECTION_NAME = 'boosting'


def load_yaml(file_path: Union[str, Path], encoding: str = 'utf-8') -> Dict[str, Any]:
    """Load a YAML file that must contain a mapping.

    Raises:
        ConfigurationError: If file cannot be found or parsed
    """
    file_path = Path(file_path)

    try:
        with open(file_path, 'r', encoding=encoding) as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Configuration file not found: {file_path}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error parsing YAML file {file_path}: {e}")

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration file must contain a dictionary, got {type(config)}")

    logger.debug(f"Loaded configuration from {file_path}")
    return config


def load_config(
    file_path: Union[str, Path],
    apply_environment: bool = False
) -> BoostingConfig:
    """Load a ``BoostingConfig`` from a YAML file.

    Args:
        file_path: Path to YAML file
        apply_environment: Whether ``ADABOOST_*`` variables override the file

    Returns:
        Validated boosting configuration

    Raises:
        ConfigurationError: If loading or validation fails
    """
    raw = load_yaml(file_path)
    section = raw.get(SECTION_NAME, raw)

    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Section '{SECTION_NAME}' must be a mapping, got {type(section)}",
            context=create_error_context(file_path=str(file_path))
        )

    config = BoostingConfig.from_dict(section)
    if apply_environment:
        config = config.update_from_env()

    logger.info(f"Boosting configuration loaded from {file_path}: {config.to_dict()}")
    return config


def save_config(config: BoostingConfig, file_path: Union[str, Path], encoding: str = 'utf-8') -> None:
    """Save a ``BoostingConfig`` under a ``boosting:`` section.

    Raises:
        FileOperationError: If the file cannot be written
    """
    file_path = Path(file_path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w', encoding=encoding) as f:
            yaml.safe_dump({SECTION_NAME: config.to_dict()}, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        handle_and_reraise(
            e, FileOperationError,
            f"Error saving configuration to {file_path}",
            error_code="CONFIG_SAVE_FAILED",
            context=create_error_context(file_path=str(file_path))
        )

    logger.info(f"Configuration saved to {file_path}")
