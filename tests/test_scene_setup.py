from __future__ import annotations

import logging

from autodazzler.core.context import StepContext
from autodazzler.core.models import VisibilityConfiguration
from autodazzler.rendering.scene_setup import (
    apply_presets,
    apply_visibilities,
    load_scene,
    retrieve_3d_viewport,
)
from fakes import (
    FakeContentManager,
    FakeDialogs,
    FakeNode,
    FakeSceneGraph,
    FakeViewport,
    FakeViewport3D,
    FakeViewportManager,
    build_host,
)

QUIET = StepContext(0, 0, abort_on_error=False, interactive=False)


def _figure() -> FakeSceneGraph:
    return FakeSceneGraph(
        nodes=[
            FakeNode("Genesis 8 Female"),
            FakeNode(
                "Hat",
                child_nodes=[FakeNode("Feather", child_nodes=[FakeNode("Tip")])],
            ),
        ]
    )


def test_global_preset_is_applied_to_every_node() -> None:
    scene = _figure()
    content = FakeContentManager(scene)

    assert apply_presets(scene, content, ["/presets/light.duf"], QUIET, FakeDialogs())

    assert scene.select_all_calls == [True]
    assert content.applied_presets == [("/presets/light.duf", ["Genesis 8 Female", "Hat"])]


def test_node_preset_is_applied_to_that_node_only() -> None:
    scene = _figure()
    content = FakeContentManager(scene)

    assert apply_presets(
        scene, content, [{"Genesis 8 Female": "/presets/pose.duf"}], QUIET, FakeDialogs()
    )

    assert scene.select_all_calls == [False]
    assert content.applied_presets == [("/presets/pose.duf", ["Genesis 8 Female"])]


def test_failing_presets_do_not_stop_the_next_ones(caplog) -> None:
    scene = _figure()
    content = FakeContentManager(scene, failing={"/presets/broken.duf"})
    presets = [
        {"Unknown": "/presets/pose.duf"},
        "/presets/broken.duf",
        {"Hat": "/presets/hat.duf"},
    ]

    with caplog.at_level(logging.WARNING):
        assert not apply_presets(scene, content, presets, QUIET, FakeDialogs())

    assert [path for path, _ in content.applied_presets] == ["/presets/hat.duf"]
    messages = [record.getMessage() for record in caplog.records]
    assert any("The node named 'Unknown' could not be found" in m for m in messages)
    assert any("'/presets/broken.duf' could not be loaded" in m for m in messages)


def test_visibility_recursion_reaches_direct_children_only() -> None:
    scene = _figure()

    assert apply_visibilities(
        scene,
        {"Hat": VisibilityConfiguration(visible=False, recursive=True)},
        QUIET,
        FakeDialogs(),
    )

    hat = scene.nodes["Hat"]
    feather = hat.child_nodes[0]
    assert hat.visible is False
    assert feather.visible is False
    assert feather.child_nodes[0].visible is True


def test_visibility_without_recursion_leaves_children() -> None:
    scene = _figure()

    apply_visibilities(
        scene, {"Hat": VisibilityConfiguration(visible=False)}, QUIET, FakeDialogs()
    )

    assert scene.nodes["Hat"].visible is False
    assert scene.nodes["Hat"].child_nodes[0].visible is True


def test_missing_node_is_shown_to_interactive_users() -> None:
    scene = _figure()
    dialogs = FakeDialogs()
    context = StepContext(2, 1, abort_on_error=False, interactive=True)

    assert not apply_visibilities(
        scene,
        {
            "Ghost": VisibilityConfiguration(visible=True),
            "Hat": VisibilityConfiguration(visible=False),
        },
        context,
        dialogs,
    )

    assert scene.nodes["Hat"].visible is False
    assert dialogs.critical_messages == [
        (
            "The node named 'Ghost' could not be found in the scene. (Scene 2, Render 1)",
            "Autodazzler Render Error",
        )
    ]


def test_load_scene_reports_failure() -> None:
    scene = FakeSceneGraph()
    dialogs = FakeDialogs()
    host = build_host(
        scene=scene,
        content=FakeContentManager(scene, failing={"/scenes/a.duf"}),
        dialogs=dialogs,
    )

    assert not load_scene(host, "/scenes/a.duf", StepContext(0))
    assert dialogs.critical_messages[0][0] == "Could not load scene at: /scenes/a.duf (Scene 0)"
    assert load_scene(host, "/scenes/b.duf", StepContext(1))


def test_retrieve_3d_viewport() -> None:
    viewport_3d = FakeViewport3D()
    host = build_host(viewports=FakeViewportManager(FakeViewport(viewport_3d)))

    assert retrieve_3d_viewport(host, StepContext(0)) is viewport_3d


def test_retrieve_3d_viewport_reports_each_missing_level() -> None:
    cases = [
        (build_host(no_viewport_manager=True), "Couldn't load the Viewport Manager."),
        (build_host(viewports=FakeViewportManager(None)), "Couldn't load the default viewport."),
        (
            build_host(viewports=FakeViewportManager(FakeViewport(None))),
            "Couldn't load the default 3D viewport.",
        ),
    ]
    for host, expected in cases:
        assert retrieve_3d_viewport(host, StepContext(0)) is None
        assert host.dialogs.critical_messages[0][0] == f"{expected} (Scene 0)"
