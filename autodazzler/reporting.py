"""Surface configuration and render errors to the user or the log."""

from __future__ import annotations

import logging

from .core.context import StepContext
from .host.interfaces import Dialogs

logger = logging.getLogger(__name__)

CONFIGURATION_ERROR_TITLE = "Autodazzler Configuration Error"
RENDER_ERROR_TITLE = "Autodazzler Render Error"
MESSAGE_TITLE = "[Autodazzler]"


def show_configuration_error(
    message: str, context: StepContext | None, dialogs: Dialogs
) -> None:
    """Pop a modal up explaining a configuration error.

    Args:
        message: Error description
        context: Scene/render the error belongs to, if any
        dialogs: Dialogs used to display the error
    """
    error_message = context.describe(message) if context else message
    logger.error(error_message)
    dialogs.critical(error_message, CONFIGURATION_ERROR_TITLE)


def show_or_log_error(
    message: str, context: StepContext | None, dialogs: Dialogs
) -> None:
    """Show the error in a modal when the step warrants it, log it otherwise.

    Steps that abort on error or run interactively warn the user; other
    steps only write to the log.

    Args:
        message: Error description
        context: Scene/render the error belongs to, if any
        dialogs: Dialogs used to display the error
    """
    if context is None:
        error_message, warn_user = message, True
    else:
        error_message, warn_user = context.describe(message), context.should_warn_user

    if warn_user:
        logger.error(error_message)
        dialogs.critical(error_message, RENDER_ERROR_TITLE)
    else:
        logger.warning(f"[Autodazzler] {error_message}")
