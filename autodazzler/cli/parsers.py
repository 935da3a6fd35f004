"""CLI argument parsers and validators."""

from __future__ import annotations

import logging
import re

import typer

logger = logging.getLogger(__name__)

CONFIG_PATH_KEY = "autodazzlerConfigPath"

_ARGUMENT_PATTERN = re.compile(r"^([a-zA-Z]+)=(.*)$")
_QUOTED_PATTERN = re.compile(r"^(?:\"(.*)\"|'(.*)')$")


def parse_script_args(values: list[str]) -> dict[str, str] | None:
    """Parse host script arguments in format KEY=VALUE.

    Keys contain letters only; values may be wrapped in single or double
    quotes, which are stripped.

    Args:
        values: Raw arguments

    Returns:
        Parsed pairs, or None when no argument was given
    """
    if not values:
        return None

    parsed: dict[str, str] = {}
    for value in values:
        match = _ARGUMENT_PATTERN.match(value)
        if match is None:
            raise typer.BadParameter(f"Argument: {value} is malformed.")

        key, raw_value = match.groups()
        quoted = _QUOTED_PATTERN.match(raw_value)
        if quoted is not None:
            raw_value = quoted.group(1) if quoted.group(1) is not None else quoted.group(2)

        if key != CONFIG_PATH_KEY:
            logger.debug(f"Ignoring unknown argument: {key}")
        parsed[key] = raw_value

    return parsed
