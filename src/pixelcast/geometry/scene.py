# geometry/scene.py
from typing import Iterator, List
from pixelcast.core.vector import Vector2, Vector3
from pixelcast.geometry.shapes import Shape, brightness
from pixelcast.geometry.sphere import Sphere
from pixelcast.geometry.rectangle import Rectangle
from pixelcast.geometry.circle import Circle
from pixelcast.geometry.triangle import Triangle

class Scene:
    """
    An ordered list of shapes lit by a single directional light.

    The light direction is stored as given; shading normalizes it. Shape
    parameters are not validated, so a negative radius simply yields a shape
    no ray can hit.
    """
    def __init__(self, light_direction: Vector3):
        self.light_direction = light_direction
        self.shapes: List[Shape] = []

    def add(self, shape: Shape) -> Shape:
        self.shapes.append(shape)
        return shape

    def add_sphere(self, center: Vector3, radius: float, color: Vector3) -> Sphere:
        return self.add(Sphere(center, radius, color))

    def add_rectangle(self, center: Vector3, width: float, height: float, color: Vector3) -> Rectangle:
        return self.add(Rectangle(center, width, height, color))

    def add_circle(self, center: Vector3, radius: float, color: Vector3) -> Circle:
        return self.add(Circle(center, radius, color))

    def add_triangle(self, plane_z: float, a: Vector2, b: Vector2, c: Vector2, color: Vector3) -> Triangle:
        return self.add(Triangle(plane_z, a, b, c, color))

    def shading_modifier(self, shape: Shape, hit_point: Vector3) -> float:
        return brightness(shape, self.light_direction, hit_point)

    def describe(self) -> List[str]:
        lines = [f"Light direction: {self.light_direction}"]
        lines.extend(f"  {i}: {shape!r}" for i, shape in enumerate(self.shapes))
        return lines

    def __len__(self) -> int:
        return len(self.shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.shapes)
