# renderer/raytracer.py
from typing import Optional, Tuple
from pixelcast.core.vector import Vector3
from pixelcast.core.ray import Ray
from pixelcast.core.utils import distance
from pixelcast.geometry.scene import Scene
from pixelcast.geometry.shapes import Shape, intersect

BLACK = Vector3(0, 0, 0)

def nearest_hit(ray: Ray, scene: Scene) -> Optional[Tuple[Shape, Vector3]]:
    """
    Tests the ray against every shape and keeps the hit closest to the ray
    origin. On equal distances the shape added first wins.
    """
    closest = None
    closest_so_far = float("inf")
    for shape in scene.shapes:
        result = intersect(shape, ray)
        if not result.hit:
            continue
        d = distance(result.point, ray.origin)
        if d < closest_so_far:
            closest_so_far = d
            closest = (shape, result.point)
    return closest

def trace_ray(ray: Ray, scene: Scene) -> Vector3:
    """Colour seen along the ray; black when nothing is hit."""
    found = nearest_hit(ray, scene)
    if found is None:
        return BLACK
    shape, point = found
    return shape.get_color() * scene.shading_modifier(shape, point)


class RayTracer:
    """
    Holds a reference to the scene being rendered. The scene is shared, not
    copied, and is never modified while tracing.
    """
    def __init__(self, scene: Scene):
        self.scene = scene

    def trace_ray(self, ray: Ray) -> Vector3:
        return trace_ray(ray, self.scene)
