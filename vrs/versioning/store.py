"""Load and persist the vrs.yml version document of a project."""

import logging
from pathlib import Path
from typing import Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from vrs.constants import CONFIG_FILE_NAME
from vrs.io.files import read_text, write_text
from vrs.model import VersionConfig

from .exceptions import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigReadError,
    ConfigWriteError,
)

logger = logging.getLogger(__name__)


def config_path(base_dir: Union[str, Path]) -> Path:
    """Path of the version file inside ``base_dir``."""
    return Path(base_dir) / CONFIG_FILE_NAME


def load_config(base_dir: Union[str, Path]) -> VersionConfig:
    """
    Read the version document from ``base_dir``.

    Args:
        base_dir: Directory holding vrs.yml

    Returns:
        The parsed VersionConfig

    Raises:
        ConfigNotFoundError: If there is no vrs.yml in base_dir
        ConfigReadError: If the file exists but cannot be read
        ConfigParseError: If the file is not a valid version document
    """
    path = config_path(base_dir)
    try:
        exists = path.exists()
    except OSError as e:
        raise ConfigReadError(path, str(e)) from e
    if not exists:
        raise ConfigNotFoundError(Path(base_dir))

    try:
        content = read_text(path)
    except OSError as e:
        raise ConfigReadError(path, str(e)) from e

    try:
        config = VersionConfig.from_yaml(content)
    except yaml.YAMLError as e:
        raise ConfigParseError(path, f"YAML format error: {e}") from e
    except PydanticValidationError as e:
        raise ConfigParseError(path, str(e)) from e
    except ValueError as e:
        raise ConfigParseError(path, str(e)) from e

    logger.debug(f"Loaded {path} at version {config.version}")
    return config


def save_config(base_dir: Union[str, Path], config: VersionConfig) -> Path:
    """
    Write the whole version document to ``base_dir``, replacing any previous one.

    Returns:
        Path of the written file

    Raises:
        ConfigWriteError: If the file cannot be written
    """
    path = config_path(base_dir)
    try:
        write_text(path, config.to_yaml())
    except OSError as e:
        raise ConfigWriteError(path, str(e)) from e

    logger.debug(f"Wrote {path} at version {config.version}")
    return path
