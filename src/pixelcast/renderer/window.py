# renderer/window.py
"""
Framebuffer collaborators. Both keep the frame in a (width, height, 3)
float32 array, indexed [x, y, channel] like pygame's surfarray.
"""
from typing import Optional, Tuple
import numpy as np
import pygame
from PIL import Image

class FrameBuffer:
    """
    Shared pixel storage. Subclasses decide how the frame is presented.
    """
    def __init__(self):
        self.size: Optional[Tuple[int, int]] = None
        self.pixels: Optional[np.ndarray] = None
        # Set once the user asks for the window to go away.
        self.closed = False

    def init(self, size: Tuple[int, int]) -> bool:
        width, height = int(size[0]), int(size[1])
        if width <= 0 or height <= 0:
            return False
        self.size = (width, height)
        self.pixels = np.zeros((width, height, 3), dtype=np.float32)
        return True

    def set_background(self, color) -> None:
        self.pixels[:, :] = tuple(color)

    def draw_pixel(self, position: Tuple[int, int], color) -> None:
        x, y = position
        # Out-of-bounds pixels are dropped.
        if 0 <= x < self.size[0] and 0 <= y < self.size[1]:
            self.pixels[x, y] = tuple(color)

    def to_uint8(self) -> np.ndarray:
        return (np.clip(self.pixels, 0.0, 1.0) * 255).round().astype(np.uint8)

    def save(self, path: str) -> None:
        # PIL wants rows first: [y, x, channel]
        Image.fromarray(self.to_uint8().transpose(1, 0, 2), "RGB").save(path)

    def poll_events(self) -> bool:
        """Returns False once a close has been requested."""
        return not self.closed

    def close(self) -> None:
        self.closed = True

    def show_and_hold(self) -> int:
        raise NotImplementedError("show_and_hold() must be implemented by subclasses.")


class ImageWindow(FrameBuffer):
    """
    Off-screen framebuffer: presenting the frame writes it to an image file.
    """
    def __init__(self, output_path: str):
        super().__init__()
        if not output_path:
            raise ValueError("ImageWindow needs an output path")
        self.output_path = output_path

    def show_and_hold(self) -> int:
        self.save(self.output_path)
        return 0


class PygameWindow(FrameBuffer):
    """
    On-screen framebuffer backed by a pygame display. show_and_hold() blocks
    until the window is closed or Escape is pressed; close() releases the
    display.
    """
    def __init__(self, caption: str = "pixelcast", output_path: Optional[str] = None):
        super().__init__()
        self.caption = caption
        self.output_path = output_path
        self.screen = None

    def init(self, size: Tuple[int, int]) -> bool:
        if not super().init(size):
            return False
        try:
            pygame.init()
            self.screen = pygame.display.set_mode(self.size)
            pygame.display.set_caption(self.caption)
        except pygame.error as e:
            print(f"Could not open display: {e}")
            pygame.quit()
            return False
        return True

    def poll_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.closed = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.closed = True
        return not self.closed

    def close(self) -> None:
        super().close()
        pygame.quit()

    def show_and_hold(self) -> int:
        if self.output_path:
            self.save(self.output_path)
        frame_surface = pygame.surfarray.make_surface(self.to_uint8())
        self.screen.blit(frame_surface, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        while self.poll_events():
            clock.tick(30)
        return 0
