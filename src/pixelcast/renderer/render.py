# renderer/render.py
from pixelcast.core.vector import Vector3
from pixelcast.camera.camera import Camera
from pixelcast.renderer.raytracer import RayTracer, BLACK

# Columns between two progress lines.
PROGRESS_INTERVAL = 64

def render(camera: Camera, tracer: RayTracer, window, background: Vector3 = BLACK,
           verbose: bool = False):
    """
    Traces one ray per pixel of the camera's window and draws the result.
    The window must already be initialised. Its events are polled once per
    column; a close request stops the render, leaving later columns as
    background. Returns the window's pixel array.
    """
    width, height = camera.window_size
    window.set_background(background)
    for x in range(width):
        if not window.poll_events():
            if verbose:
                print(f"Render cancelled at column {x + 1}/{width}")
            break
        if verbose and x % PROGRESS_INTERVAL == 0:
            print(f"rendering column {x + 1}/{width}...")
        for y in range(height):
            ray = camera.get_ray((x, y))
            window.draw_pixel((x, y), tracer.trace_ray(ray))
    return window.pixels
