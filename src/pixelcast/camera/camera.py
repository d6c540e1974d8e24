# camera/camera.py
from typing import Optional, Tuple
from pixelcast.core.vector import Vector2, Vector3
from pixelcast.core.ray import Ray

# Depth of the plane every pixel ray is aimed at.
DEFAULT_Z_FAR = 20.0
# Depth of the plane every pixel ray starts from.
CAMERA_Z = -1.0

class Camera:
    """
    Maps window pixels onto rays through a viewport of a (possibly) different
    size. Rays start on the plane z = -1 at the pixel itself and pass through
    the pixel's viewport position on the plane z = z_far, so the
    viewport/window ratio and z_far together set the field of view.
    """
    def __init__(self, window_size: Tuple[int, int], viewport_size: Optional[Tuple[int, int]] = None,
                 z_far: float = DEFAULT_Z_FAR):
        if viewport_size is None:
            viewport_size = window_size
        self.window_size = (int(window_size[0]), int(window_size[1]))
        self.viewport_size = (int(viewport_size[0]), int(viewport_size[1]))
        self.z_far = float(z_far)

        window_w, window_h = self.window_size
        view_w, view_h = self.viewport_size
        self.scale = Vector2(view_w / window_w, view_h / window_h)
        self.offset = Vector2((view_w - window_w) / 2, (view_h - window_h) / 2)

    def get_ray(self, pixel: Tuple[int, int]) -> Ray:
        px, py = pixel
        origin = Vector3(px, py, CAMERA_Z)
        lead = Vector3(px * self.scale.x - self.offset.x,
                       py * self.scale.y - self.offset.y,
                       self.z_far)
        return Ray(origin, (lead - origin).normalize())
