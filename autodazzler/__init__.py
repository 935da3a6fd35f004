"""Autodazzler - Configuration-driven batch renderer for 3D host applications.

Loads a scene/render configuration, validates it, then drives the host's
scene, viewport and render services to export every requested image.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
