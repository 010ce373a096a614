"""Grid-based raycasting renderer with textured walls, keyboard movement and supporting utilities."""

__version__ = "0.1.0"

__all__ = [
    "arena",
    "chars",
    "game",
    "lines",
    "memory",
    "output",
    "raycast",
    "render",
    "strings",
]