# stats_colors.py
import gi
import random

gi.require_version("Gdk", "4.0")
from gi.repository import Gdk

def make_rgba(red, green, blue, alpha=1.0):
    rgba = Gdk.RGBA()
    rgba.red, rgba.green, rgba.blue, rgba.alpha = red, green, blue, alpha
    return rgba

def parse_color(text):
    """
    Parses a color string the way the config files write them ("rgba(...)",
    "#rrggbb", color names, ...) into a Gdk.RGBA. Raises ValueError when GDK
    cannot parse it.
    """
    if not isinstance(text, str):
        raise ValueError(f"Color must be a string, got {type(text).__name__}")
    rgba = Gdk.RGBA()
    if not rgba.parse(text):
        raise ValueError(f"Invalid color: {text!r}")
    return rgba

def random_opaque_color(rng=None):
    rng = rng or random
    return make_rgba(rng.random(), rng.random(), rng.random(), 1.0)

class ColorTable:
    """
    Positional color assignment for chart segments. Indices past the end of
    the configured colors get a random opaque color, generated once per index
    and then reused so segments keep their color from frame to frame.
    """
    def __init__(self, colors, rng=None):
        self._colors = tuple(colors)
        self._rng = rng or random.Random()
        self._fallbacks = {}

    def __len__(self):
        return len(self._colors)

    def __iter__(self):
        return iter(self._colors)

    def color_for(self, index):
        if 0 <= index < len(self._colors):
            return self._colors[index]
        if index not in self._fallbacks:
            self._fallbacks[index] = random_opaque_color(self._rng)
        return self._fallbacks[index]
