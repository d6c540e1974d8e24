# core/ray.py
from pixelcast.core.vector import Vector3

class Ray:
    """
    A half-line from origin along direction. Rays built by the camera carry a
    unit direction; intersection code does not rely on it.
    """
    def __init__(self, origin: Vector3, direction: Vector3):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
