# config.py
DEFAULT_SETTINGS = {
    "width": 640,
    "height": 480,
    # None means "same as the window"
    "viewport_width": None,
    "viewport_height": None,
    "z_far": 20.0,
    "background": (0.0, 0.0, 0.0),
    "scene": "spheres",
    "interactive": False,
    "output": None,
    "headless": False,
    "verbose": True,
}

def load_settings(**overrides) -> dict:
    """
    Returns a copy of the defaults with the given overrides applied.
    Overrides set to None keep the default; unknown keys raise KeyError.
    """
    settings = dict(DEFAULT_SETTINGS)
    for key, value in overrides.items():
        if key not in settings:
            raise KeyError(f"Unknown setting: {key}")
        if value is not None:
            settings[key] = value
    if settings["viewport_width"] is None:
        settings["viewport_width"] = settings["width"]
    if settings["viewport_height"] is None:
        settings["viewport_height"] = settings["height"]
    return settings
