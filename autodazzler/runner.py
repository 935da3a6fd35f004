"""Top-level run: load, validate, check every scene, then render."""

from __future__ import annotations

import logging
import time

from .configuration import load_configuration_file, validate_configuration
from .core.context import TaskResult
from .core.utils import format_duration
from .host.interfaces import Host
from .notification import play_success_sound
from .reporting import MESSAGE_TITLE
from .rendering.engine import render_scenes
from .settings import Settings

logger = logging.getLogger(__name__)


def _close_host(host: Host) -> None:
    host.scene.clear()
    host.application.close()


def run_autodazzler(
    host: Host,
    settings: Settings,
    *,
    configuration_path: str | None,
    interactive: bool,
) -> TaskResult | None:
    """Run a whole batch.

    A test pass checks every scene for missing nodes, cameras and presets;
    the renders only start when it completes cleanly.

    Args:
        host: Host services
        settings: Runtime settings
        configuration_path: Configuration file; the user is asked when None
        interactive: Whether the path was provided by the user

    Returns:
        The result of the render pass, the failing test pass result, or None
        when the run never started
    """
    if configuration_path is None:
        configuration_path = host.dialogs.ask_for_configuration_path()
        interactive = True

    if not configuration_path:
        logger.info("No configuration provided, nothing to do")
        return None

    raw_configuration = load_configuration_file(
        configuration_path, host.files, host.dialogs
    )
    if raw_configuration is None:
        return None

    configuration = validate_configuration(raw_configuration, host.files, host.dialogs)
    if configuration is None:
        return None
    configuration = configuration.with_defaults(interactive)

    host.application.status_line(
        "[Autodazzler] Checking all specified scenes for missing nodes."
    )
    analysis = render_scenes(configuration, host, test_mode=True, settings=settings)
    if analysis is not TaskResult.COMPLETED:
        logger.warning(f"Test pass ended with {analysis.name}, nothing was rendered")
        return analysis

    host.application.status_line("[Autodazzler] All good, rendering…")
    start = time.monotonic()
    result = render_scenes(configuration, host, test_mode=False, settings=settings)
    elapsed = format_duration(int((time.monotonic() - start) * 1000))

    should_quit = configuration.quit_automatically and not configuration.interactive

    if result is TaskResult.FAILED_SILENTLY:
        if should_quit:
            # Errors have already been logged.
            _close_host(host)
        else:
            host.dialogs.information(
                "Some errors were encountered during the renders, "
                "open the log for more information.",
                MESSAGE_TITLE,
            )
    elif result is TaskResult.COMPLETED:
        message = f"All renders successfully completed in:\n{elapsed}."
        play_success_sound(settings)
        if should_quit:
            # Let the sound play before the host goes away.
            time.sleep(settings.quit_delay_ms / 1000)
            _close_host(host)
            logger.info(f"[Autodazzler] {message}")
        else:
            host.dialogs.information(message, MESSAGE_TITLE)

    return result
