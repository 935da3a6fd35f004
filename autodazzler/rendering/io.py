"""Render output file checks."""

from __future__ import annotations

import logging

from ..core.context import StepContext
from ..host.interfaces import Dialogs, FileSystem
from ..reporting import show_or_log_error

logger = logging.getLogger(__name__)


def can_write_render_file(
    render_path: str,
    overwrite: bool,
    files: FileSystem,
    context: StepContext,
    dialogs: Dialogs,
) -> bool:
    """Check that a render may be saved to ``render_path``.

    Args:
        render_path: Destination of the render
        overwrite: Whether the scene allows replacing existing files
        files: Filesystem to query
        context: Current step, used to report errors
        dialogs: Dialogs used to report errors

    Returns:
        True when the path is free, or holds a file that may be replaced
    """
    if not files.exists(render_path):
        return True

    if not overwrite:
        message = (
            f"The render would be saved at '{render_path}', but there is already "
            "a file there. To allow overwriting files, set `overwrite` to `true`."
        )
        show_or_log_error(message, context, dialogs)
        return False

    if files.is_dir(render_path):
        message = (
            "Autodazzler will not overwrite a directory, aborting the current render."
        )
        show_or_log_error(message, context, dialogs)
        return False

    return True


def clear_render_target(render_path: str, files: FileSystem) -> bool:
    """Remove an existing file at ``render_path`` before it is rendered again.

    Returns:
        False when a previous render is still in the way
    """
    if not files.exists(render_path) or files.is_dir(render_path):
        return True
    logger.debug(f"Removing previous render at {render_path}")
    return files.remove(render_path)
