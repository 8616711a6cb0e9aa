"""Animation engine - state machine, camera and frame loop."""

from treecycle.engine.animation import AnimationEngine
from treecycle.engine.camera import Camera
from treecycle.engine.loop import AnimationLoop

__all__ = ["AnimationEngine", "AnimationLoop", "Camera"]
