"""Host capabilities backed by the local machine."""

from __future__ import annotations

import logging
import os
import tempfile
import uuid
from pathlib import Path

logger = logging.getLogger(__name__)


class LocalFileSystem:
    """File and directory queries against the local filesystem."""

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def is_dir(self, path: str) -> bool:
        return Path(path).is_dir()

    def remove(self, path: str) -> bool:
        try:
            os.remove(path)
        except OSError as exc:
            logger.warning(f"Could not remove {path}: {exc}")
            return False
        return True

    def read_text(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")

    def temp_path(self) -> str:
        return tempfile.gettempdir()

    def create_uuid(self) -> str:
        return str(uuid.uuid4())


class ConsoleApplication:
    """Application shell for runs driven from a terminal."""

    def status_line(self, message: str) -> None:
        logger.info(message)

    def close(self) -> None:
        # The process ends once the command returns.
        logger.debug("Application closed")
