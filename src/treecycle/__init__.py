"""treecycle - looping procedural animation of a tree's life cycle."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("treecycle")
except PackageNotFoundError:
    __version__ = "unknown"
