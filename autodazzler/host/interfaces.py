"""Capabilities Autodazzler needs from the host application.

Each protocol covers one collaborator of the host runtime. A host integration
implements them and bundles the instances in a :class:`Host`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from ..core.context import ConfirmationResult


class FileSystem(Protocol):
    def exists(self, path: str) -> bool: ...

    def is_dir(self, path: str) -> bool: ...

    def remove(self, path: str) -> bool: ...

    def read_text(self, path: str) -> str: ...

    def temp_path(self) -> str: ...

    def create_uuid(self) -> str: ...


class Node(Protocol):
    label: str

    def set_visible(self, visible: bool) -> None: ...

    def select(self, selected: bool) -> None: ...

    def children(self) -> Sequence[Node]:
        """Direct children only."""
        ...


class Camera(Protocol):
    label: str


class SceneGraph(Protocol):
    def find_node_by_label(self, label: str) -> Node | None: ...

    def find_camera_by_label(self, label: str) -> Camera | None: ...

    def select_all_nodes(self, selected: bool) -> None: ...

    def update(self) -> None: ...

    def clear(self) -> None: ...


class ContentManager(Protocol):
    def open_native_file(self, path: str, merge: bool) -> bool:
        """Open a scene file as the working document."""
        ...

    def open_file(self, path: str, merge: bool) -> bool:
        """Open a preset file onto the current selection."""
        ...


class Viewport3D(Protocol):
    def set_camera(self, camera: Camera) -> None: ...


class Viewport(Protocol):
    def get_3d_viewport(self) -> Viewport3D | None: ...


class ViewportManager(Protocol):
    def get_active_viewport(self) -> Viewport | None: ...


@dataclass
class RenderOptions:
    """Render settings owned by the host's render manager."""

    image_filename: str | None = None
    direct_to_file: bool = False


class RenderManager(Protocol):
    def get_render_options(self) -> RenderOptions: ...

    def do_render(self, options: RenderOptions) -> bool:
        """Render synchronously; False when the render failed or was cancelled."""
        ...


class Dialogs(Protocol):
    def critical(self, message: str, title: str) -> None: ...

    def information(self, message: str, title: str) -> None: ...

    def ask_to_abort(
        self, message: str, timeout_s: float, interval_ms: int
    ) -> ConfirmationResult: ...

    def ask_for_configuration_path(self) -> str | None: ...


class Application(Protocol):
    def status_line(self, message: str) -> None: ...

    def close(self) -> None: ...


@dataclass(frozen=True)
class Host:
    """Every host capability an Autodazzler run is given."""

    files: FileSystem
    scene: SceneGraph
    content: ContentManager
    viewports: ViewportManager | None
    renderer: RenderManager
    dialogs: Dialogs
    application: Application
