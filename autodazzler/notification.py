"""Audible cue played when every render completed."""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path

from .settings import Settings

logger = logging.getLogger(__name__)

MACOS_DEFAULT_SOUND = Path("/System/Library/Sounds/Glass.aiff")
WINDOWS_DEFAULT_ALIAS = "SystemAsterisk"


def _play_macos(sound: Path | None) -> None:
    subprocess.run(
        ["afplay", str(sound or MACOS_DEFAULT_SOUND)],
        check=True,
        capture_output=True,
    )


def _play_windows(sound: Path | None) -> None:
    import winsound

    if sound is None:
        winsound.PlaySound(WINDOWS_DEFAULT_ALIAS, winsound.SND_ALIAS)
    else:
        winsound.PlaySound(str(sound), winsound.SND_FILENAME)


def play_success_sound(settings: Settings) -> None:
    """Play the success sound on macOS and Windows; other platforms are skipped."""
    if sys.platform == "darwin":
        player = _play_macos
    elif sys.platform == "win32":
        player = _play_windows
    else:
        logger.debug("[Autodazzler] Unknown platform, ignoring…")
        return

    try:
        player(settings.success_sound)
    except (OSError, RuntimeError, subprocess.CalledProcessError) as exc:
        logger.warning(f"Could not play the success sound: {exc}")
