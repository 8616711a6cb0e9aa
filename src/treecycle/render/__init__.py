"""Frame rendering."""

from treecycle.render.scene import HELP_TEXT, SceneRenderer

__all__ = ["HELP_TEXT", "SceneRenderer"]
