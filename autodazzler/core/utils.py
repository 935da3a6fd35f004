"""Duration formatting and render path helpers."""

from __future__ import annotations

import logging

from ..host.interfaces import FileSystem

logger = logging.getLogger(__name__)

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE


def format_duration(milliseconds: int) -> str:
    """Turn a duration into a readable ``HH hours MM minutes SS seconds`` string.

    Leading units equal to zero are omitted, so are zero seconds once a
    larger unit is shown.

    Args:
        milliseconds: Elapsed time in milliseconds

    Returns:
        The duration, e.g. ``"01 minutes 25 seconds"``
    """
    hours, remainder = divmod(int(milliseconds), _MS_PER_HOUR)
    minutes, remainder = divmod(remainder, _MS_PER_MINUTE)
    seconds = remainder // _MS_PER_SECOND

    parts: list[str] = []
    if hours > 0:
        parts.append(f"{hours:02d} hours")
    if hours > 0 or minutes > 0:
        parts.append(f"{minutes:02d} minutes")
    if seconds > 0:
        parts.append(f"{seconds:02d} seconds")

    return " ".join(parts) or "0 seconds"


def full_render_path(
    render_directory_path: str | None,
    render_filename: str | None,
    files: FileSystem,
) -> str:
    """Build the path a render is saved to.

    Falls back to a unique file in the host's temporary directory when either
    part is missing.

    Args:
        render_directory_path: Directory of the scene's renders
        render_filename: File name of the render
        files: Filesystem used for the temporary fallback

    Returns:
        ``render_directory_path + "/" + render_filename``, or the fallback path
    """
    if render_directory_path is None or render_filename is None:
        render_path = f"{files.temp_path()}/{files.create_uuid()}.png"
        logger.debug(
            "Either 'renderDirectoryPath' or 'renderFilename' is undefined, "
            f"returning temporary path: '{render_path}'."
        )
        return render_path

    return f"{render_directory_path}/{render_filename}"
