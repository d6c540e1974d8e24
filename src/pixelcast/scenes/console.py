# scenes/console.py
"""
Interactive scene setup: asks for a light direction, then for shapes one at
a time from a numbered menu until the user picks "Render".
"""
from typing import Callable, List
from pixelcast.core.vector import Vector2, Vector3
from pixelcast.geometry.scene import Scene

MENU = {
    1: "Sphere",
    2: "Rectangle",
    3: "Triangle",
    4: "Circle",
    0: "Render",
}

def _read_numbers(read: Callable[[str], str], write: Callable[[str], None],
                  prompt: str, count: int, cast=int) -> List:
    """Keeps asking until the answer holds exactly `count` numbers."""
    while True:
        answer = read(prompt)
        parts = answer.replace(",", " ").split()
        if len(parts) != count:
            write(f"Please enter {count} number(s).")
            continue
        try:
            return [cast(p) for p in parts]
        except ValueError:
            write(f"Could not read '{answer.strip()}' as number(s).")

def _read_color(read, write) -> Vector3:
    r, g, b = _read_numbers(read, write, "Colour (R G B, 0-255): ", 3)
    return Vector3(*(min(255, max(0, c)) / 255 for c in (r, g, b)))

def _read_position(read, write) -> Vector3:
    return Vector3(*_read_numbers(read, write, "Position (X Y Z): ", 3))

def _add_sphere(scene: Scene, read, write) -> None:
    center = _read_position(read, write)
    (radius,) = _read_numbers(read, write, "Radius: ", 1)
    scene.add_sphere(center, radius, _read_color(read, write))

def _add_rectangle(scene: Scene, read, write) -> None:
    center = _read_position(read, write)
    (width,) = _read_numbers(read, write, "Width: ", 1)
    (height,) = _read_numbers(read, write, "Height: ", 1)
    scene.add_rectangle(center, width, height, _read_color(read, write))

def _add_triangle(scene: Scene, read, write) -> None:
    (plane_z,) = _read_numbers(read, write, "Plane Z: ", 1)
    vertices = [Vector2(*_read_numbers(read, write, f"Vertex {name} (X Y): ", 2)) for name in "ABC"]
    scene.add_triangle(plane_z, *vertices, _read_color(read, write))

def _add_circle(scene: Scene, read, write) -> None:
    center = _read_position(read, write)
    (radius,) = _read_numbers(read, write, "Radius: ", 1)
    scene.add_circle(center, radius, _read_color(read, write))

BUILDERS = {
    1: _add_sphere,
    2: _add_rectangle,
    3: _add_triangle,
    4: _add_circle,
}

def prompt_scene(read: Callable[[str], str] = input, write: Callable[[str], None] = print) -> Scene:
    """
    Builds a scene from console answers. Running out of input ends the
    session with whatever has been entered so far.
    """
    try:
        light = _read_numbers(read, write, "Light direction (X Y Z): ", 3, cast=float)
    except EOFError:
        write("No input, using a light facing the camera.")
        return Scene(Vector3(0, 0, -1))
    scene = Scene(Vector3(*light))

    while True:
        write("Add a shape:")
        for number, name in MENU.items():
            write(f"  {number}. {name}")
        try:
            (choice,) = _read_numbers(read, write, "Choice: ", 1)
            if choice == 0:
                break
            builder = BUILDERS.get(choice)
            if builder is None:
                write(f"Unknown option {choice}.")
                continue
            builder(scene, read, write)
            write(f"Added {MENU[choice].lower()} ({len(scene)} shape(s) so far).")
        except EOFError:
            break
    return scene
