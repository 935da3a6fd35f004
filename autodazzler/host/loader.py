"""Resolve host integrations given as ``MODULE:ATTR``."""

from __future__ import annotations

import importlib
import logging
from typing import Callable

from .interfaces import Host

logger = logging.getLogger(__name__)


class HostLoadError(Exception):
    """Raised when a host factory cannot be resolved or built."""


def resolve_host_factory(spec: str) -> Callable[[], Host]:
    """Import the factory named by ``spec``.

    Args:
        spec: ``package.module:attribute``

    Returns:
        The factory callable
    """
    module_name, sep, attribute = spec.partition(":")
    if not sep or not module_name or not attribute:
        raise HostLoadError(f"Must be MODULE:ATTR, got: {spec!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise HostLoadError(f"Could not import host module {module_name!r}: {exc}") from exc

    factory = module
    for part in attribute.split("."):
        try:
            factory = getattr(factory, part)
        except AttributeError as exc:
            raise HostLoadError(
                f"Host module {module_name!r} has no attribute {attribute!r}"
            ) from exc

    if not callable(factory):
        raise HostLoadError(f"Host factory {spec!r} is not callable")

    return factory


def load_host(spec: str) -> Host:
    """Build the host described by ``spec``."""
    logger.debug(f"Loading host from {spec}")
    host = resolve_host_factory(spec)()
    if not isinstance(host, Host):
        raise HostLoadError(
            f"Host factory {spec!r} returned {type(host).__name__}, expected Host"
        )
    return host
