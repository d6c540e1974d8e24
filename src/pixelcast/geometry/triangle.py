# geometry/triangle.py
from pixelcast.core.vector import Vector2, Vector3
from pixelcast.core.ray import Ray
from pixelcast.geometry.hittable import HitResult, NO_HIT, ShapeKind
from pixelcast.geometry.rectangle import point_at_z

# Relative slack allowed between the whole area and the sum of the three
# sub-triangle areas.
TRIANGLE_AREA_TOLERANCE = 1e-9

class Triangle:
    """
    A flat triangle with vertices a, b, c lying in the plane z = plane_z.
    """
    kind = ShapeKind.TRIANGLE

    def __init__(self, plane_z: float, a: Vector2, b: Vector2, c: Vector2, color: Vector3):
        self.plane_z = float(plane_z)
        self.a = a
        self.b = b
        self.c = c
        self.color = color

    def get_position(self) -> Vector3:
        """The centroid, at the triangle's depth."""
        centroid = (self.a + self.b + self.c) / 3
        return Vector3(centroid.x, centroid.y, self.plane_z)

    def get_color(self) -> Vector3:
        return self.color

    def area(self) -> float:
        return triangle_area(self.a, self.b, self.c)

    def __repr__(self) -> str:
        return f"Triangle({self.plane_z}, {self.a!r}, {self.b!r}, {self.c!r}, {self.color!r})"


def triangle_area(p1: Vector2, p2: Vector2, p3: Vector2) -> float:
    return abs(p1.x * (p2.y - p3.y) + p2.x * (p3.y - p1.y) + p3.x * (p1.y - p2.y)) / 2


def contains_point(triangle: Triangle, p: Vector2) -> bool:
    """
    Area test: P lies inside ABC when the areas of PBC, PAC and PAB add up
    to the area of ABC.
    """
    whole = triangle.area()
    if whole == 0:
        return False
    parts = (triangle_area(p, triangle.b, triangle.c) +
             triangle_area(p, triangle.a, triangle.c) +
             triangle_area(p, triangle.a, triangle.b))
    return abs(parts - whole) <= TRIANGLE_AREA_TOLERANCE * max(1.0, whole)


def intersect_triangle(triangle: Triangle, ray: Ray) -> HitResult:
    point = point_at_z(ray, triangle.plane_z)
    if point is None or not contains_point(triangle, point.xy()):
        return NO_HIT
    return HitResult(True, point)
