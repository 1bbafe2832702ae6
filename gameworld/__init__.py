"""2D sprites and health bars with motion, animation and collision tests, 3D vector and rotation helpers, and OBJ/MTL mesh loading."""

__version__ = "0.1.0"

__all__ = [
    "color",
    "healthbar",
    "materials",
    "objfile",
    "rotation",
    "sprite",
    "vector",
]