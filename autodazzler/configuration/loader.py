"""Read configuration files from disk."""

from __future__ import annotations

import json
import logging
from pathlib import PurePath
from typing import Any

import yaml

from ..host.interfaces import Dialogs, FileSystem

logger = logging.getLogger(__name__)

LOADER_ERROR_TITLE = "[Autodazzler] Configuration Error"


class ConfigurationError(Exception):
    """Raised when a configuration file cannot be parsed."""


def parse_configuration_text(text: str, suffix: str = ".json") -> Any:
    """Parse configuration content according to its file suffix.

    Args:
        text: Raw file content
        suffix: File suffix; ``.yaml``/``.yml`` select YAML, anything else JSON

    Returns:
        The parsed tree, unvalidated
    """
    try:
        if suffix.lower() in {".yaml", ".yml"}:
            return yaml.safe_load(text) or {}
        parsed = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(str(exc)) from exc
    return {} if parsed is None else parsed


def load_configuration_file(path: str, files: FileSystem, dialogs: Dialogs) -> Any | None:
    """Load the configuration file at ``path``.

    Errors are shown to the user through the host dialogs.

    Args:
        path: Path to the configuration file
        files: Filesystem to read from
        dialogs: Dialogs used to report errors

    Returns:
        The raw configuration tree, or None when it could not be loaded
    """
    if not files.exists(path):
        logger.error(f"Configuration not found: {path}")
        dialogs.critical(
            "The provided configuration doesn't exist.", LOADER_ERROR_TITLE
        )
        return None

    try:
        text = files.read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error(f"Could not read configuration {path}: {exc}")
        dialogs.critical(
            "Could not read the provided configuration", LOADER_ERROR_TITLE
        )
        return None

    try:
        configuration = parse_configuration_text(text, PurePath(path).suffix)
    except ConfigurationError as exc:
        logger.error(f"Could not parse configuration {path}: {exc}")
        dialogs.critical(str(exc), LOADER_ERROR_TITLE)
        return None

    logger.debug(f"Loaded configuration from {path}")
    return configuration
