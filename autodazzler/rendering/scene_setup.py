"""Prepare the host scene before a render: scene file, presets, visibilities."""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from ..core.context import StepContext
from ..core.models import PresetSpecification, VisibilityConfiguration
from ..host.interfaces import ContentManager, Dialogs, Host, SceneGraph, Viewport3D
from ..reporting import show_or_log_error

logger = logging.getLogger(__name__)


def retrieve_3d_viewport(host: Host, context: StepContext) -> Viewport3D | None:
    """Return the 3D viewport of the active viewport, or None if unavailable."""
    if host.viewports is None:
        show_or_log_error("Couldn't load the Viewport Manager.", context, host.dialogs)
        return None

    viewport = host.viewports.get_active_viewport()
    if viewport is None:
        show_or_log_error("Couldn't load the default viewport.", context, host.dialogs)
        return None

    viewport_3d = viewport.get_3d_viewport()
    if viewport_3d is None:
        show_or_log_error("Couldn't load the default 3D viewport.", context, host.dialogs)
        return None

    return viewport_3d


def load_scene(host: Host, scene_path: str, context: StepContext) -> bool:
    """Open ``scene_path`` as the host's working document."""
    logger.debug(f"Loading scene {scene_path}")
    if not host.content.open_native_file(scene_path, False):
        show_or_log_error(f"Could not load scene at: {scene_path}", context, host.dialogs)
        return False
    return True


def _apply_preset(
    content: ContentManager, preset_path: str, context: StepContext, dialogs: Dialogs
) -> bool:
    if not content.open_file(preset_path, True):
        message = f"The presets named '{preset_path}' could not be loaded."
        show_or_log_error(message, context, dialogs)
        return False
    return True


def _apply_preset_to_node(
    scene: SceneGraph,
    content: ContentManager,
    node_name: str,
    preset_path: str,
    context: StepContext,
    dialogs: Dialogs,
) -> bool:
    scene.select_all_nodes(False)

    node = scene.find_node_by_label(node_name)
    if node is None:
        message = f"The node named '{node_name}' could not be found in the scene."
        show_or_log_error(message, context, dialogs)
        return False

    node.select(True)
    return _apply_preset(content, preset_path, context, dialogs)


def apply_presets(
    scene: SceneGraph,
    content: ContentManager,
    presets: Sequence[PresetSpecification],
    context: StepContext,
    dialogs: Dialogs,
) -> bool:
    """Apply every preset, in order.

    A bare path is applied with every node selected; a ``{node: path}`` entry is
    applied to that node only. A failing entry does not stop the next ones.

    Returns:
        True when every preset was applied
    """
    errors = 0
    for preset in presets:
        if isinstance(preset, str):
            scene.select_all_nodes(True)
            applied = _apply_preset(content, preset, context, dialogs)
        else:
            ((node_name, preset_path),) = preset.items()
            applied = _apply_preset_to_node(
                scene, content, node_name, preset_path, context, dialogs
            )
        if not applied:
            errors += 1

    return errors == 0


def _show_node(
    scene: SceneGraph,
    node_name: str,
    visibility: VisibilityConfiguration,
    context: StepContext,
    dialogs: Dialogs,
) -> bool:
    node = scene.find_node_by_label(node_name)
    if node is None:
        message = f"The node named '{node_name}' could not be found in the scene."
        show_or_log_error(message, context, dialogs)
        return False

    node.set_visible(visibility.visible)

    if visibility.recursive:
        for child in node.children():
            child.set_visible(visibility.visible)

    return True


def apply_visibilities(
    scene: SceneGraph,
    visibilities: Mapping[str, VisibilityConfiguration],
    context: StepContext,
    dialogs: Dialogs,
) -> bool:
    """Show or hide nodes by label; ``recursive`` reaches direct children only.

    Returns:
        True when every node was found
    """
    errors = 0
    for node_name, visibility in visibilities.items():
        if not _show_node(scene, node_name, visibility, context, dialogs):
            errors += 1

    return errors == 0
