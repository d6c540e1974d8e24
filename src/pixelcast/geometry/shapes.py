# geometry/shapes.py
"""
The closed set of shape variants and per-kind dispatch for the two
operations every shape supports: intersection and brightness.
"""
from typing import Callable, Dict, Union
from pixelcast.core.vector import Vector3
from pixelcast.core.ray import Ray
from pixelcast.geometry.hittable import HitResult, ShapeKind
from pixelcast.geometry.sphere import Sphere, intersect_sphere, sphere_brightness
from pixelcast.geometry.rectangle import Rectangle, intersect_rectangle, flat_brightness
from pixelcast.geometry.circle import Circle, intersect_circle
from pixelcast.geometry.triangle import Triangle, intersect_triangle

Shape = Union[Sphere, Rectangle, Circle, Triangle]

INTERSECTORS: Dict[ShapeKind, Callable[[Shape, Ray], HitResult]] = {
    ShapeKind.SPHERE: intersect_sphere,
    ShapeKind.RECTANGLE: intersect_rectangle,
    ShapeKind.CIRCLE: intersect_circle,
    ShapeKind.TRIANGLE: intersect_triangle,
}

BRIGHTNESS: Dict[ShapeKind, Callable[[Shape, Vector3, Vector3], float]] = {
    ShapeKind.SPHERE: sphere_brightness,
    ShapeKind.RECTANGLE: flat_brightness,
    ShapeKind.CIRCLE: flat_brightness,
    ShapeKind.TRIANGLE: flat_brightness,
}


def intersect(shape: Shape, ray: Ray) -> HitResult:
    """Does the ray, extended forward, touch the shape, and where."""
    return INTERSECTORS[shape.kind](shape, ray)


def brightness(shape: Shape, light_direction: Vector3, hit_point: Vector3) -> float:
    """Brightness modifier in [0, 1] for the shape lit from light_direction."""
    return BRIGHTNESS[shape.kind](shape, light_direction, hit_point)
