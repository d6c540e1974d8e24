# geometry/rectangle.py
from typing import Optional
from pixelcast.core.vector import Vector3
from pixelcast.core.ray import Ray
from pixelcast.core.utils import direction_difference
from pixelcast.geometry.hittable import FLAT_NORMAL, HitResult, NO_HIT, ShapeKind

class Rectangle:
    """
    An axis-aligned rectangle lying in the plane z = center.z.
    """
    kind = ShapeKind.RECTANGLE

    def __init__(self, center: Vector3, width: float, height: float, color: Vector3):
        self.center = center
        self.width = float(width)
        self.height = float(height)
        self.color = color

    def get_position(self) -> Vector3:
        return self.center

    def get_color(self) -> Vector3:
        return self.color

    def __repr__(self) -> str:
        return f"Rectangle({self.center!r}, {self.width}, {self.height}, {self.color!r})"


def point_at_z(ray: Ray, z: float) -> Optional[Vector3]:
    """
    Returns where the ray crosses the plane at depth z, or None when the ray
    runs parallel to the plane or the plane is behind the ray origin.
    """
    if ray.direction.z == 0:
        return None
    t = (z - ray.origin.z) / ray.direction.z
    if t < 0:
        return None
    return ray.at(t)


def in_bounds(point: Vector3, center: Vector3, width: float, height: float) -> bool:
    """Inclusive on every edge."""
    half_w = width / 2
    half_h = height / 2
    return (center.x - half_w <= point.x <= center.x + half_w and
            center.y - half_h <= point.y <= center.y + half_h)


def intersect_box(ray: Ray, center: Vector3, width: float, height: float) -> HitResult:
    if width <= 0 or height <= 0:
        return NO_HIT
    point = point_at_z(ray, center.z)
    if point is None or not in_bounds(point, center, width, height):
        return NO_HIT
    return HitResult(True, point)


def intersect_rectangle(rect: Rectangle, ray: Ray) -> HitResult:
    return intersect_box(ray, rect.center, rect.width, rect.height)


def flat_brightness(shape, light_direction: Vector3, hit_point: Vector3) -> float:
    """Brightness of any camera-facing flat shape."""
    return (1 - direction_difference(light_direction, FLAT_NORMAL)) ** 2
