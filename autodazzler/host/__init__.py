"""Host capability interfaces and the implementations shipped with Autodazzler."""

from .interfaces import (
    Application,
    Camera,
    ContentManager,
    Dialogs,
    FileSystem,
    Host,
    Node,
    RenderManager,
    RenderOptions,
    SceneGraph,
    Viewport,
    Viewport3D,
    ViewportManager,
)

__all__ = [
    "Application",
    "Camera",
    "ContentManager",
    "Dialogs",
    "FileSystem",
    "Host",
    "Node",
    "RenderManager",
    "RenderOptions",
    "SceneGraph",
    "Viewport",
    "Viewport3D",
    "ViewportManager",
]
