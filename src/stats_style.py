# stats_style.py
from collections import namedtuple

from config_model import ConfigOption, populate_defaults_from_model
from stats_colors import ColorTable, parse_color
from stats_renderer import ANIMATION_POLICIES

MAX_COLORS = 10

DEFAULT_COLORS = [
    "rgba(255,87,34,1)", "rgba(255,193,7,1)", "rgba(0,188,212,1)", "rgba(76,175,80,1)",
    "rgba(156,39,176,1)", "rgba(33,150,243,1)", "rgba(233,30,99,1)", "rgba(121,85,72,1)",
    "rgba(96,125,139,1)", "rgba(205,220,57,1)",
]

StatsStyle = namedtuple("StatsStyle", [
    "line_width", "font_size", "colors", "not_filled_color", "text_color",
    "animation_policy", "animation_duration",
])

class ConfigurationError(ValueError):
    """Raised when the chart configuration cannot produce a usable style."""

def get_stats_config_model():
    model = {}
    model["Ring"] = [
        ConfigOption("stats_line_width", "spinner", "Line Width (px):", 5, 1, 50, 0.5, 1),
        ConfigOption("stats_not_filled_color", "color", "Not Filled Color:", "rgba(136,136,136,1)"),
    ]
    colors = [ConfigOption("stats_color_count", "spinner", "Number of Colors:", 4, 1, MAX_COLORS, 1, 0)]
    for i in range(1, MAX_COLORS + 1):
        colors.append(ConfigOption(f"stats_color{i}", "color", f"Color {i}:", DEFAULT_COLORS[i - 1]))
    model["Segment Colors"] = colors
    model["Label"] = [
        ConfigOption("stats_font_size", "spinner", "Font Size (px):", 40, 6, 200, 1, 0),
        ConfigOption("stats_text_color", "color", "Text Color:", "rgba(0,0,0,1)"),
    ]
    model["Animation"] = [
        ConfigOption("stats_animation_type", "dropdown", "Animation:", "rotation",
                     options_dict={"Rotation": "rotation", "Sequential": "sequential", "Bidirectional": "bidirectional"}),
        ConfigOption("stats_animation_duration", "spinner", "Animation Duration (ms):", 2000, 0, 10000, 100, 0,
                     tooltip="How long the segments take to reveal after new data arrives."),
    ]
    return model

def parse_animation_policy(value):
    """Accepts a policy name ("rotation") or its numeric code ("0")."""
    text = str(value).strip().lower()
    if text in ANIMATION_POLICIES:
        return ANIMATION_POLICIES[text]
    if text.isdigit() and int(text) in ANIMATION_POLICIES.values():
        return int(text)
    raise ConfigurationError(f"Unknown animation type: {value!r}")

def _number(config, key):
    try:
        return float(config[key])
    except (KeyError, ValueError, TypeError):
        raise ConfigurationError(f"Option '{key}' must be a number, got {config.get(key)!r}") from None

def _color(config, key):
    value = config.get(key)
    if value is None or not str(value).strip():
        raise ConfigurationError(f"Missing color '{key}'")
    try:
        return parse_color(str(value))
    except ValueError as e:
        raise ConfigurationError(f"Option '{key}': {e}") from None

def build_style(config, rng=None):
    """
    Turns the string-valued displayer config into an immutable StatsStyle.
    Missing keys fall back to the model defaults. A broken color table or
    animation type raises ConfigurationError, since nothing sensible can be
    drawn without them.
    """
    values = dict(config)
    populate_defaults_from_model(values, get_stats_config_model())

    color_count = int(_number(values, "stats_color_count"))
    if not 1 <= color_count <= MAX_COLORS:
        raise ConfigurationError(f"stats_color_count must be between 1 and {MAX_COLORS}, got {color_count}")
    colors = ColorTable([_color(values, f"stats_color{i}") for i in range(1, color_count + 1)], rng=rng)

    return StatsStyle(
        line_width=_number(values, "stats_line_width"),
        font_size=_number(values, "stats_font_size"),
        colors=colors,
        not_filled_color=_color(values, "stats_not_filled_color"),
        text_color=_color(values, "stats_text_color"),
        animation_policy=parse_animation_policy(values["stats_animation_type"]),
        animation_duration=max(0.0, _number(values, "stats_animation_duration")),
    )
