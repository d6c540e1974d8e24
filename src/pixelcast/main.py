# main.py
import argparse
import sys
import time
from pixelcast.core.vector import Vector3
from pixelcast.camera.camera import Camera
from pixelcast.config import load_settings
from pixelcast.geometry.scene import Scene
from pixelcast.renderer.raytracer import RayTracer
from pixelcast.renderer.render import render
from pixelcast.renderer.window import ImageWindow, PygameWindow
from pixelcast.scenes.console import prompt_scene
from pixelcast.scenes.presets import SCENE_PRESETS

# Where a headless render goes when no --output is given.
DEFAULT_OUTPUT = "render.png"

class Application:
    def __init__(self, settings: dict, window=None):
        self.settings = settings
        self.verbose = settings["verbose"]
        self.window_size = (settings["width"], settings["height"])
        self.output_path = settings["output"]
        if self.output_path is None and settings["headless"]:
            self.output_path = DEFAULT_OUTPUT

        # Built in run(), once the window has accepted the size.
        self.camera = None

        if window is None:
            window = self.create_window()
        self.window = window

        self.scene = self.create_scene()
        self.tracer = RayTracer(self.scene)

    def log(self, message: str) -> None:
        if self.verbose:
            print(message)

    def create_window(self):
        if self.settings["headless"]:
            return ImageWindow(self.output_path)
        return PygameWindow(output_path=self.output_path)

    def create_camera(self) -> Camera:
        return Camera(
            self.window_size,
            (self.settings["viewport_width"], self.settings["viewport_height"]),
            z_far=self.settings["z_far"],
        )

    def create_scene(self) -> Scene:
        self.log("\n=== Creating Scene ===")
        if self.settings["interactive"]:
            scene = prompt_scene()
        else:
            scene = SCENE_PRESETS[self.settings["scene"]]()
            self.log(f"Using preset scene '{self.settings['scene']}'")
        for line in scene.describe():
            self.log(line)
        return scene

    def run(self) -> int:
        """Renders one frame and returns the process exit code."""
        if not self.window.init(self.window_size):
            print(f"Could not initialise a {self.window_size[0]}x{self.window_size[1]} window")
            return 1

        try:
            self.camera = self.create_camera()
            self.log("\n=== Rendering ===")
            self.log(f"Window: {self.window_size[0]}x{self.window_size[1]}")
            self.log(f"Viewport: {self.camera.viewport_size[0]}x{self.camera.viewport_size[1]}, z_far: {self.camera.z_far}")
            self.log(f"Shapes: {len(self.scene)}")

            start = time.perf_counter()
            render(self.camera, self.tracer, self.window,
                   background=Vector3(*self.settings["background"]), verbose=self.verbose)
            if self.window.closed:
                self.log("Window closed before the render finished")
                return 0
            self.log(f"Rendered in {time.perf_counter() - start:.2f}s")

            if self.output_path:
                self.log(f"Saving frame to {self.output_path}")
            return self.window.show_and_hold()
        finally:
            self.log("Cleaning up...")
            self.window.close()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Per-pixel ray caster for simple shapes")
    parser.add_argument('--width', type=int, default=None, help='Window width in pixels')
    parser.add_argument('--height', type=int, default=None, help='Window height in pixels')
    parser.add_argument('--viewport-width', type=int, default=None, help='Viewport width (defaults to window width)')
    parser.add_argument('--viewport-height', type=int, default=None, help='Viewport height (defaults to window height)')
    parser.add_argument('--z-far', type=float, default=None, help='Depth every pixel ray is aimed at')
    parser.add_argument('--scene', choices=sorted(SCENE_PRESETS), default=None, help='Preset scene to render')
    parser.add_argument('--interactive', action='store_true', help='Build the scene from console prompts')
    parser.add_argument('--output', type=str, default=None, help='Save the rendered frame as an image')
    parser.add_argument('--headless', action='store_true', help='Render to --output without opening a window')
    parser.add_argument('--quiet', action='store_true', help='Only print errors')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = load_settings(
        width=args.width,
        height=args.height,
        viewport_width=args.viewport_width,
        viewport_height=args.viewport_height,
        z_far=args.z_far,
        scene=args.scene,
        interactive=args.interactive or None,
        output=args.output,
        headless=args.headless or None,
        verbose=False if args.quiet else None,
    )
    app = Application(settings)
    try:
        return app.run()
    except KeyboardInterrupt:
        print("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
