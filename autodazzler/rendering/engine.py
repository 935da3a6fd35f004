"""Render orchestration: scenes, render jobs and error escalation."""

from __future__ import annotations

import logging
import time

from ..core.context import ConfirmationResult, StepContext, TaskResult
from ..core.models import AutodazzlerConfiguration, RenderConfiguration, SceneConfiguration
from ..core.utils import format_duration, full_render_path
from ..host.interfaces import Host, Viewport3D
from ..reporting import show_or_log_error
from ..settings import Settings
from .io import can_write_render_file, clear_render_target
from .scene_setup import apply_presets, apply_visibilities, load_scene, retrieve_3d_viewport

logger = logging.getLogger(__name__)

ABORT_PROMPT = (
    "Autodazzler could not complete the render. If you manually canceled the "
    "render and wish to cancel all subsequent renders, press the button below. "
    "Otherwise, this dialog will close in {seconds} seconds, and the renders "
    "will carry on."
)


def _step_context(
    scene: SceneConfiguration, scene_index: int, render_index: int | None = None
) -> StepContext:
    return StepContext(
        scene_index=scene_index,
        render_index=render_index,
        abort_on_error=scene.abort_on_error,
        interactive=True if scene.interactive is None else scene.interactive,
    )


def render_with_configuration(
    scene: SceneConfiguration,
    render: RenderConfiguration,
    context: StepContext,
    viewport: Viewport3D,
    host: Host,
    *,
    test_mode: bool,
) -> TaskResult:
    """Set the scene up for one render job and, outside test mode, render it.

    Args:
        scene: Scene the render belongs to
        render: Render job to perform
        context: Current step
        viewport: 3D viewport whose camera is used
        host: Host services
        test_mode: Stop once the output path has been checked

    Returns:
        ``NOT_STARTED`` when the setup failed, ``FAILED`` when the render
        could not be written or failed, ``COMPLETED`` otherwise
    """
    start = time.monotonic()

    if render.presets is not None and not apply_presets(
        host.scene, host.content, render.presets, context, host.dialogs
    ):
        return TaskResult.NOT_STARTED

    if render.visibilities is not None and not apply_visibilities(
        host.scene, render.visibilities, context, host.dialogs
    ):
        return TaskResult.NOT_STARTED

    host.scene.update()

    if render.camera_name:
        camera = host.scene.find_camera_by_label(render.camera_name)
        if camera is None:
            message = f"The camera named '{render.camera_name}' wasn't found in the scene."
            show_or_log_error(message, context, host.dialogs)
            return TaskResult.NOT_STARTED
        viewport.set_camera(camera)

    target_path = full_render_path(
        scene.render_directory_path, render.render_filename, host.files
    )

    if not can_write_render_file(
        target_path, scene.overwrite, host.files, context, host.dialogs
    ):
        return TaskResult.FAILED

    if test_mode:
        return TaskResult.COMPLETED

    options = host.renderer.get_render_options()
    options.image_filename = target_path
    options.direct_to_file = True

    if scene.overwrite and not clear_render_target(target_path, host.files):
        message = f"Could not remove the previous render at '{target_path}'."
        show_or_log_error(message, context, host.dialogs)
        return TaskResult.FAILED

    if not host.renderer.do_render(options):
        message = "The render was either canceled or encountered an error."
        if scene.abort_on_error:
            show_or_log_error(f"{message} Autodazzler will stop.", context, host.dialogs)
        else:
            logger.warning(f"[Autodazzler] {context.describe(message)}")
        return TaskResult.FAILED

    elapsed = format_duration(int((time.monotonic() - start) * 1000))
    logger.info(
        f"[Autodazzler] Render {context.readable_message()} completed in: {elapsed}."
    )
    return TaskResult.COMPLETED


def _should_abort_all(host: Host, settings: Settings) -> bool:
    answer = host.dialogs.ask_to_abort(
        ABORT_PROMPT, settings.abort_prompt_timeout_s, settings.countdown_interval_ms
    )
    return answer is ConfirmationResult.ABORT


def render_scenes(
    configuration: AutodazzlerConfiguration,
    host: Host,
    *,
    test_mode: bool,
    settings: Settings,
) -> TaskResult:
    """Perform every render of every scene, in order.

    Failures stop the batch when the scene aborts on error. Otherwise they
    are counted, and every failed render asks the user whether to stop all
    remaining renders. The prompt carries on by itself once it times out.

    Args:
        configuration: Validated configuration
        host: Host services
        test_mode: Check every step without rendering
        settings: Runtime settings

    Returns:
        ``COMPLETED`` without errors, ``FAILED_SILENTLY`` with recoverable
        errors, or the result that stopped the batch early
    """
    errors = 0
    mode = "test" if test_mode else "render"
    logger.info(f"Processing {len(configuration.scenes)} scene(s) in {mode} mode")

    for scene_index, scene in enumerate(configuration.scenes):
        scene_context = _step_context(scene, scene_index)

        if not load_scene(host, scene.scene_path, scene_context):
            errors += 1
            if scene.abort_on_error:
                return TaskResult.NOT_STARTED
            continue

        viewport = retrieve_3d_viewport(host, scene_context)
        if viewport is None:
            errors += 1
            if scene.abort_on_error:
                return TaskResult.NOT_STARTED
            continue

        for render_index, render in enumerate(scene.render_configurations):
            context = _step_context(scene, scene_index, render_index)
            result = render_with_configuration(
                scene, render, context, viewport, host, test_mode=test_mode
            )

            if result is TaskResult.NOT_STARTED:
                errors += 1
                if scene.abort_on_error:
                    return TaskResult.NOT_STARTED
            elif result is TaskResult.FAILED:
                errors += 1
                if scene.abort_on_error:
                    return TaskResult.FAILED
                if _should_abort_all(host, settings):
                    logger.info("[Autodazzler] Remaining renders cancelled by the user")
                    return TaskResult.ABORTED

    logger.debug(f"Finished {mode} pass with {errors} error(s)")
    return TaskResult.FAILED_SILENTLY if errors > 0 else TaskResult.COMPLETED
