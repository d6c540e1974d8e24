# core/utils.py
from pixelcast.core.vector import Vector3
from pixelcast.core.ray import Ray

# Largest direction difference for a point to count as lying ahead of a ray.
AHEAD_TOLERANCE = 0.001

def normalize(v: Vector3) -> Vector3:
    return v.normalize()

def dot(a: Vector3, b: Vector3) -> float:
    return a.dot(b)

def length(v: Vector3) -> float:
    return v.length()

def distance(a: Vector3, b: Vector3) -> float:
    return length(a - b)

def direction_difference(u: Vector3, v: Vector3) -> float:
    """
    Half the distance between the unit vectors of u and v.
    0 for parallel directions, 1 for opposite ones.
    """
    return (u.normalize() - v.normalize()).length() / 2

def closest_point_on_line(ray: Ray, query: Vector3) -> Vector3:
    """
    Returns the point on the ray's (infinite) line closest to query:
    a + ((P - a) . n) n
    """
    n = normalize(ray.direction)
    return ray.origin + n * dot(query - ray.origin, n)

def is_ahead_of_ray(ray: Ray, query: Vector3) -> bool:
    """
    True when query lies in front of the ray origin, along its direction.
    The origin itself is not ahead.
    """
    return direction_difference(ray.direction, query - ray.origin) <= AHEAD_TOLERANCE
