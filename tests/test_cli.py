from __future__ import annotations

import importlib
import json

import pytest
from typer.testing import CliRunner

from autodazzler import runner
from autodazzler.cli import app
from fakes import FakeFileSystem, FakeRenderManager, build_host

cli_app = importlib.import_module("autodazzler.cli.app")

CONFIG_PATH = "/configs/batch.json"


@pytest.fixture
def cli() -> CliRunner:
    return CliRunner()


@pytest.fixture
def files() -> FakeFileSystem:
    configuration = {
        "scenes": [
            {
                "scenePath": "/scenes/a.duf",
                "renderDirectoryPath": "/renders",
                "renderConfigurations": [
                    {"cameraName": "Camera 1", "renderFilename": "front.png"}
                ],
            }
        ]
    }
    return FakeFileSystem(
        files={CONFIG_PATH: json.dumps(configuration), "/scenes/a.duf": "{}"},
        directories={"/renders"},
    )


@pytest.fixture
def loaded_specs(monkeypatch) -> list[str]:
    """Specs passed to the patched ``load_host``."""
    monkeypatch.setattr(runner, "play_success_sound", lambda settings: None)
    return []


def _install_host(monkeypatch, host, specs: list[str]) -> None:
    def _load_host(spec: str):
        specs.append(spec)
        return host

    monkeypatch.setattr(cli_app, "load_host", _load_host)


def _scene(scene_files: dict[str, str]) -> dict[str, object]:
    return {
        "scenePath": scene_files["scene"],
        "renderDirectoryPath": scene_files["renders"],
        "renderConfigurations": [{"cameraName": "Camera 1", "renderFilename": "front.png"}],
    }


def test_validate_valid_configuration(cli, scene_files, write_config) -> None:
    path = write_config({"scenes": [_scene(scene_files)]})

    result = cli.invoke(app, ["validate", path])

    assert result.exit_code == 0, result.output
    assert "1 scene(s), 1 render(s), valid." in result.output


def test_validate_yaml_configuration(cli, scene_files, tmp_path) -> None:
    path = tmp_path / "batch.yml"
    path.write_text(
        f"scenes:\n"
        f"  - scenePath: {scene_files['scene']}\n"
        f"    renderDirectoryPath: {scene_files['renders']}\n"
        f"    renderConfigurations:\n"
        f"      - cameraName: Camera 1\n"
        f"        renderFilename: front.png\n"
        f"      - cameraName: Camera 2\n"
        f"        renderFilename: side.png\n"
    )

    result = cli.invoke(app, ["validate", str(path)])

    assert result.exit_code == 0, result.output
    assert "1 scene(s), 2 render(s), valid." in result.output


def test_validate_invalid_configuration(cli, write_config) -> None:
    path = write_config({"scenes": []})

    result = cli.invoke(app, ["validate", path])

    assert result.exit_code == 1
    assert "The configuration file did not contain any definitions." in result.output


def test_validate_missing_file(cli, tmp_path) -> None:
    result = cli.invoke(app, ["validate", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "The provided configuration doesn't exist." in result.output


def test_render_rejects_malformed_arguments(cli, files, loaded_specs, monkeypatch) -> None:
    _install_host(monkeypatch, build_host(files=files), loaded_specs)

    result = cli.invoke(app, ["render", "bad", "--host", "fake:host"])

    assert result.exit_code == 2
    assert "is malformed" in result.output
    assert loaded_specs == []


def test_render_requires_a_host(cli) -> None:
    result = cli.invoke(app, ["render", f"autodazzlerConfigPath={CONFIG_PATH}"])

    assert result.exit_code == 2
    assert "No host configured" in result.output


def test_render_reports_unloadable_host(cli) -> None:
    result = cli.invoke(
        app, ["render", f"autodazzlerConfigPath={CONFIG_PATH}", "--host", "nohost"]
    )

    assert result.exit_code == 2
    assert "MODULE:ATTR" in result.output


def test_render_runs_the_batch(cli, files, loaded_specs, monkeypatch) -> None:
    host = build_host(files=files)
    _install_host(monkeypatch, host, loaded_specs)

    result = cli.invoke(
        app,
        ["render", f"autodazzlerConfigPath={CONFIG_PATH}", "--host", "fake:host"],
    )

    assert result.exit_code == 0, result.output
    assert loaded_specs == ["fake:host"]
    assert host.renderer.rendered == ["/renders/front.png"]


def test_render_uses_host_from_environment(cli, files, loaded_specs, monkeypatch) -> None:
    _install_host(monkeypatch, build_host(files=files), loaded_specs)
    monkeypatch.setenv("AUTODAZZLER_HOST", "env:host")

    result = cli.invoke(app, ["render", f"autodazzlerConfigPath={CONFIG_PATH}"])

    assert result.exit_code == 0, result.output
    assert loaded_specs == ["env:host"]


def test_render_exits_with_error_on_failed_renders(
    cli, files, loaded_specs, monkeypatch
) -> None:
    renderer = FakeRenderManager(files, failing={"/renders/front.png"})
    _install_host(monkeypatch, build_host(files=files, renderer=renderer), loaded_specs)

    result = cli.invoke(
        app,
        ["render", f"autodazzlerConfigPath={CONFIG_PATH}", "--host", "fake:host"],
    )

    assert result.exit_code == 1
    assert renderer.attempts == ["/renders/front.png"]
