# geometry/circle.py
from pixelcast.core.vector import Vector3
from pixelcast.core.ray import Ray
from pixelcast.geometry.hittable import HitResult, NO_HIT, ShapeKind
from pixelcast.geometry.rectangle import intersect_box

class Circle:
    """
    A flat disc lying in the plane z = center.z.
    """
    kind = ShapeKind.CIRCLE

    def __init__(self, center: Vector3, radius: float, color: Vector3):
        self.center = center
        self.radius = float(radius)
        self.color = color

    def get_position(self) -> Vector3:
        return self.center

    def get_color(self) -> Vector3:
        return self.color

    def __repr__(self) -> str:
        return f"Circle({self.center!r}, {self.radius}, {self.color!r})"


def intersect_circle(circle: Circle, ray: Ray) -> HitResult:
    # Bounding square first, then the radial check in the plane.
    side = 2 * circle.radius
    candidate = intersect_box(ray, circle.center, side, side)
    if not candidate.hit:
        return NO_HIT
    if (candidate.point.xy() - circle.center.xy()).length() > circle.radius:
        return NO_HIT
    return candidate
