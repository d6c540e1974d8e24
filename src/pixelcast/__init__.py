"""pixelcast: a per-pixel ray caster for spheres, rectangles, triangles and circles."""

__version__ = "0.1.0"
