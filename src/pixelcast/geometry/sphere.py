# geometry/sphere.py
import math
from pixelcast.core.vector import Vector3
from pixelcast.core.ray import Ray
from pixelcast.core.utils import closest_point_on_line, direction_difference, distance, is_ahead_of_ray
from pixelcast.geometry.hittable import HitResult, NO_HIT, ShapeKind

class Sphere:
    """
    Represents a sphere defined by its center, radius, and colour.
    """
    kind = ShapeKind.SPHERE

    def __init__(self, center: Vector3, radius: float, color: Vector3):
        self.center = center
        self.radius = float(radius)
        self.color = color

    def get_position(self) -> Vector3:
        return self.center

    def get_color(self) -> Vector3:
        return self.color

    def contains(self, point: Vector3) -> bool:
        """Points on the surface count as inside."""
        return distance(self.center, point) <= self.radius

    def normal_at(self, point: Vector3) -> Vector3:
        return (point - self.center).normalize()

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, {self.color!r})"


def intersect_sphere(sphere: Sphere, ray: Ray) -> HitResult:
    """
    Returns the first point where the ray enters the sphere.

    A ray starting inside (or on) the sphere is treated as a miss, as is a
    sphere lying behind the ray origin.
    """
    if sphere.radius <= 0 or sphere.contains(ray.origin):
        return NO_HIT

    n = ray.direction.normalize()
    closest = closest_point_on_line(ray, sphere.center)
    d = distance(sphere.center, closest)
    if d > sphere.radius:
        return NO_HIT

    if not is_ahead_of_ray(ray, closest):
        return NO_HIT

    # half-chord from the closest point back to the entry point
    x = math.sqrt(max(0.0, sphere.radius * sphere.radius - d * d))
    t = (sphere.center - ray.origin).dot(n) - x
    return HitResult(True, ray.origin + n * t)


def sphere_brightness(sphere: Sphere, light_direction: Vector3, hit_point: Vector3) -> float:
    normal = sphere.normal_at(hit_point)
    return (1 - direction_difference(light_direction, normal)) ** 2
