"""Configuration validation, run before anything is loaded into the host."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from pydantic import ValidationError

from ..core.context import StepContext
from ..core.models import AutodazzlerConfiguration, RenderConfiguration, SceneConfiguration
from ..core.utils import full_render_path
from ..host.interfaces import Dialogs, FileSystem
from ..reporting import show_configuration_error

logger = logging.getLogger(__name__)

_STRING_FIELDS = {"scenePath", "renderDirectoryPath", "cameraName", "renderFilename"}


def _describe_error(
    error: Any, location: Sequence[Any], in_render: bool = False
) -> str:
    """Turn a pydantic error into a single user-facing sentence."""
    error_type = error["type"]
    location = tuple(location)

    if error_type == "value_error":
        return str(error["ctx"]["error"])

    if location[:1] == ("visibilities",) and len(location) >= 2:
        node_name = location[1]
        if len(location) >= 3 and location[2] == "visible" and error_type == "missing":
            return (
                f"Visibility configuration value at key `{node_name}` "
                "must contain a `visible` property."
            )
        if len(location) == 2:
            return f"Visibility configuration value at key `{node_name}` must be an Object."

    if location == ("visibilities",):
        return "`visibilities` must be an Object."

    if location[:1] == ("presets",):
        if len(location) == 1:
            return "`presets` must be an Array."
        return (
            f"Preset at index {location[1]} must be a file path "
            "or a single node name mapped to a file path."
        )

    if location == ("renderConfigurations",) and error_type != "missing":
        return "`renderConfigurations` doesn't contain valid definitions."

    if not location:
        if in_render:
            return "Render configuration must be an Object."
        return "Scene configuration must be an Object."

    key = location[-1]
    if error_type == "missing":
        return f"`{key}` is not defined."
    if key in _STRING_FIELDS:
        return f"`{key}` is not a valid string."

    dotted = ".".join(str(part) for part in location)
    return f"`{dotted}` is invalid: {error['msg']}"


def _parse_scene(
    raw_scene: Any, scene_index: int, dialogs: Dialogs
) -> SceneConfiguration | None:
    try:
        return SceneConfiguration.model_validate(raw_scene)
    except ValidationError as exc:
        error = exc.errors()[0]
        location = tuple(error["loc"])
        render_index = None
        if (
            len(location) >= 2
            and location[0] == "renderConfigurations"
            and isinstance(location[1], int)
        ):
            render_index = location[1]
            location = location[2:]

        context = StepContext(scene_index, render_index)
        message = _describe_error(error, location, in_render=render_index is not None)
        show_configuration_error(message, context, dialogs)
        return None


def _is_scene_on_disk(
    scene: SceneConfiguration, context: StepContext, files: FileSystem, dialogs: Dialogs
) -> bool:
    if not files.exists(scene.scene_path):
        show_configuration_error(
            f"Scene does not exist at '{scene.scene_path}'.", context, dialogs
        )
        return False

    directory = scene.render_directory_path
    if not (files.exists(directory) and files.is_dir(directory)):
        show_configuration_error(
            f"The render directory '{directory}' does not exist.", context, dialogs
        )
        return False

    return True


def _preset_paths(render: RenderConfiguration) -> list[str]:
    paths: list[str] = []
    for preset in render.presets or []:
        if isinstance(preset, str):
            paths.append(preset)
        else:
            paths.extend(preset.values())
    return paths


def _is_render_valid(
    render: RenderConfiguration,
    scene: SceneConfiguration,
    context: StepContext,
    files: FileSystem,
    dialogs: Dialogs,
) -> bool:
    if not scene.overwrite:
        render_path = full_render_path(
            scene.render_directory_path, render.render_filename, files
        )
        if files.exists(render_path):
            message = (
                f"The render would be saved at '{render_path}', but there is "
                "already a file there. To allow overwriting files, set "
                "`overwrite` to `true`."
            )
            show_configuration_error(message, context, dialogs)
            return False

    for preset_path in _preset_paths(render):
        if not files.exists(preset_path):
            show_configuration_error(
                f"The preset '{preset_path}' does not exist.", context, dialogs
            )
            return False

    return True


def validate_configuration(
    raw: Any, files: FileSystem, dialogs: Dialogs
) -> AutodazzlerConfiguration | None:
    """Check the configuration structure and every path it references.

    Validation stops at the first violation, which is reported through the
    host dialogs together with the offending scene/render index.

    Args:
        raw: Configuration tree as loaded from disk
        files: Filesystem the referenced paths are checked against
        dialogs: Dialogs used to report the first violation

    Returns:
        The parsed configuration, or None when it is invalid
    """
    raw_scenes = raw.get("scenes") if isinstance(raw, dict) else None
    if not isinstance(raw_scenes, list) or not raw_scenes:
        if isinstance(raw, list):
            logger.debug("Configuration is a bare array, expected an object with `scenes`")
        show_configuration_error(
            "The configuration file did not contain any definitions.", None, dialogs
        )
        return None

    scenes: list[SceneConfiguration] = []
    for scene_index, raw_scene in enumerate(raw_scenes):
        scene = _parse_scene(raw_scene, scene_index, dialogs)
        if scene is None:
            return None

        if not _is_scene_on_disk(scene, StepContext(scene_index), files, dialogs):
            return None

        for render_index, render in enumerate(scene.render_configurations):
            context = StepContext(scene_index, render_index)
            if not _is_render_valid(render, scene, context, files, dialogs):
                return None

        scenes.append(scene)

    try:
        configuration = AutodazzlerConfiguration.model_validate({**raw, "scenes": scenes})
    except ValidationError as exc:
        error = exc.errors()[0]
        show_configuration_error(_describe_error(error, error["loc"]), None, dialogs)
        return None

    logger.debug(f"Configuration is valid: {len(scenes)} scene(s)")
    return configuration


def is_configuration_valid(raw: Any, files: FileSystem, dialogs: Dialogs) -> bool:
    return validate_configuration(raw, files, dialogs) is not None
