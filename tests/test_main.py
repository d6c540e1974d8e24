import pytest

from pixelcast.config import load_settings
from pixelcast.main import DEFAULT_OUTPUT, Application, main, parse_args
from pixelcast.renderer.window import FrameBuffer, ImageWindow, PygameWindow


class FailingWindow(FrameBuffer):
    def init(self, size):
        return False

    def show_and_hold(self):
        raise AssertionError("nothing should be shown")


class ClosingWindow(FrameBuffer):
    """Reports a close request after a few columns have been polled."""
    def __init__(self, polls_before_close):
        super().__init__()
        self.polls_left = polls_before_close
        self.close_calls = 0

    def poll_events(self):
        if self.polls_left == 0:
            self.closed = True
        else:
            self.polls_left -= 1
        return not self.closed

    def close(self):
        self.close_calls += 1
        super().close()

    def show_and_hold(self):
        raise AssertionError("a closed window should not be shown")


def test_parse_args_defaults_leave_settings_untouched():
    args = parse_args([])
    assert args.width is None
    assert args.scene is None
    assert not args.headless


def test_parse_args_rejects_unknown_scene():
    with pytest.raises(SystemExit):
        parse_args(["--scene", "teapot"])


def test_failed_window_init_exits_non_zero(capsys):
    settings = load_settings(width=8, height=8, verbose=False)
    app = Application(settings, window=FailingWindow())
    assert app.run() == 1
    assert "Could not initialise" in capsys.readouterr().out
    assert app.camera is None


@pytest.mark.parametrize("size_args", [["--width", "0"], ["--height", "0"], ["--width", "-5"]])
def test_empty_window_size_exits_non_zero(tmp_path, size_args):
    out = tmp_path / "empty.png"
    code = main(["--headless", "--output", str(out), "--quiet"] + size_args)
    assert code == 1
    assert not out.exists()


def test_headless_run_writes_image(tmp_path):
    out = tmp_path / "spheres.png"
    code = main(["--headless", "--output", str(out), "--width", "32", "--height", "24",
                 "--scene", "spheres", "--quiet"])
    assert code == 0
    assert out.exists()


def test_headless_without_output_reports_default_path(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    code = main(["--headless", "--width", "16", "--height", "12"])
    assert code == 0
    assert f"Saving frame to {DEFAULT_OUTPUT}" in capsys.readouterr().out
    assert (tmp_path / DEFAULT_OUTPUT).exists()


def test_application_uses_camera_settings(tmp_path):
    settings = load_settings(width=20, height=10, viewport_width=40, viewport_height=30,
                             z_far=1.0, scene="single", verbose=False)
    window = ImageWindow(str(tmp_path / "x.png"))
    app = Application(settings, window=window)
    assert app.tracer.scene is app.scene
    assert app.run() == 0
    assert app.camera.viewport_size == (40, 30)
    assert app.camera.z_far == 1.0
    assert window.closed


def test_window_closed_mid_render_skips_the_hold():
    settings = load_settings(width=10, height=4, scene="single", verbose=False)
    window = ClosingWindow(polls_before_close=3)
    app = Application(settings, window=window)
    assert app.run() == 0
    assert window.close_calls == 1


def test_interrupted_render_releases_the_display(monkeypatch):
    import pygame
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    settings = load_settings(width=8, height=8, scene="single", verbose=False)
    app = Application(settings, window=PygameWindow())

    def interrupt(ray):
        raise KeyboardInterrupt
    monkeypatch.setattr(app.tracer, "trace_ray", interrupt)

    try:
        with pytest.raises(KeyboardInterrupt):
            app.run()
        assert not pygame.get_init()
    finally:
        pygame.quit()


def test_main_turns_interrupt_into_exit_code(monkeypatch, tmp_path):
    def interrupt(self):
        raise KeyboardInterrupt
    monkeypatch.setattr(Application, "run", interrupt)
    assert main(["--headless", "--output", str(tmp_path / "x.png"), "--quiet"]) == 130
