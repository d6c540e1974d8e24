from pixelcast.geometry.hittable import HitResult, NO_HIT, ShapeKind
from pixelcast.geometry.sphere import Sphere
from pixelcast.geometry.rectangle import Rectangle
from pixelcast.geometry.circle import Circle
from pixelcast.geometry.triangle import Triangle
from pixelcast.geometry.shapes import Shape, intersect, brightness
from pixelcast.geometry.scene import Scene

__all__ = [
    "HitResult", "NO_HIT", "ShapeKind",
    "Sphere", "Rectangle", "Circle", "Triangle",
    "Shape", "intersect", "brightness", "Scene",
]
