from __future__ import annotations

import json
from pathlib import Path

import pytest

from autodazzler.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch):
    for name in (
        "AUTODAZZLER_HOST",
        "AUTODAZZLER_ABORT_PROMPT_TIMEOUT_S",
        "AUTODAZZLER_COUNTDOWN_INTERVAL_MS",
        "AUTODAZZLER_QUIT_DELAY_MS",
        "AUTODAZZLER_SUCCESS_SOUND",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(abort_prompt_timeout_s=0.0, countdown_interval_ms=10, quit_delay_ms=0)


@pytest.fixture
def scene_files(tmp_path: Path) -> dict[str, str]:
    """A scene file, a render directory and a preset on disk."""
    scene = tmp_path / "scene.duf"
    scene.write_text("{}")
    renders = tmp_path / "renders"
    renders.mkdir()
    preset = tmp_path / "pose.duf"
    preset.write_text("{}")
    return {"scene": str(scene), "renders": str(renders), "preset": str(preset)}


@pytest.fixture
def write_config(tmp_path: Path):
    def _write(payload: object, name: str = "config.json") -> str:
        path = tmp_path / name
        path.write_text(json.dumps(payload))
        return str(path)

    return _write
