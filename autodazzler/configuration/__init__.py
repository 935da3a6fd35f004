"""Configuration loading and validation."""

from .loader import ConfigurationError, load_configuration_file
from .validation import is_configuration_valid, validate_configuration

__all__ = [
    "ConfigurationError",
    "is_configuration_valid",
    "load_configuration_file",
    "validate_configuration",
]
