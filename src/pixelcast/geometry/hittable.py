# geometry/hittable.py
from enum import Enum
from typing import Optional
from pixelcast.core.vector import Vector3

class ShapeKind(Enum):
    SPHERE = "sphere"
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    TRIANGLE = "triangle"

class HitResult:
    """
    Outcome of a ray-shape test. point is None when hit is False.
    Read-only, so the shared NO_HIT can be handed out freely.
    """
    __slots__ = ("_hit", "_point")

    def __init__(self, hit: bool, point: Optional[Vector3] = None):
        self._hit = hit
        self._point = point

    @property
    def hit(self) -> bool:
        return self._hit

    @property
    def point(self) -> Optional[Vector3]:
        return self._point

    def __bool__(self) -> bool:
        return self.hit

    def __repr__(self) -> str:
        return f"HitResult({self.hit}, {self.point!r})"

# Value to represent absence of an intersection
NO_HIT = HitResult(False)

# Flat shapes always face the camera.
FLAT_NORMAL = Vector3(0, 0, -1)
