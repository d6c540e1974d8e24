# scenes/presets.py
from pixelcast.core.vector import Vector2, Vector3
from pixelcast.geometry.scene import Scene

class ColorPresets:
    RED = Vector3(1, 0, 0)
    GREEN = Vector3(0, 1, 0)
    BLUE = Vector3(0, 0, 1)
    YELLOW = Vector3(1, 1, 0)
    WHITE = Vector3(1, 1, 1)


def spheres_scene() -> Scene:
    """Three overlapping spheres lit from the upper left."""
    scene = Scene(Vector3(1, -1, -1))
    scene.add_sphere(Vector3(100, 100, 20), 20, ColorPresets.RED)
    scene.add_sphere(Vector3(300, 300, 30), 30, ColorPresets.BLUE)
    scene.add_sphere(Vector3(220, 220, 200), 160, ColorPresets.GREEN)
    return scene


def shapes_scene() -> Scene:
    """One of each primitive."""
    scene = Scene(Vector3(1, -1, -1))
    scene.add_sphere(Vector3(160, 160, 80), 70, ColorPresets.RED)
    scene.add_rectangle(Vector3(460, 150, 50), 180, 120, ColorPresets.BLUE)
    scene.add_circle(Vector3(170, 360, 40), 80, ColorPresets.YELLOW)
    scene.add_triangle(60, Vector2(380, 430), Vector2(600, 430), Vector2(490, 260), ColorPresets.GREEN)
    return scene


def single_sphere_scene() -> Scene:
    """A red sphere in the middle of a 640x480 window, lit from the camera."""
    scene = Scene(Vector3(0, 0, -1))
    scene.add_sphere(Vector3(320, 240, 100), 50, ColorPresets.RED)
    return scene


SCENE_PRESETS = {
    "spheres": spheres_scene,
    "shapes": shapes_scene,
    "single": single_sphere_scene,
}
