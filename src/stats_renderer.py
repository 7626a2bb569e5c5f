# stats_renderer.py
import math
from collections import namedtuple

from stats_colors import ColorTable, parse_color

ROTATION = 0
SEQUENTIAL = 1
BIDIRECTIONAL = 2

ANIMATION_POLICIES = {"rotation": ROTATION, "sequential": SEQUENTIAL, "bidirectional": BIDIRECTIONAL}

START_ANGLE = -90.0
NOT_FILLED_COLOR = parse_color("rgba(136,136,136,1)")
TEXT_COLOR = parse_color("rgba(0,0,0,1)")
DEFAULT_FONT_SIZE = 40.0

ChartSpec = namedtuple("ChartSpec", ["total", "values"])

# Draw operations, in surface coordinates. Angles are degrees, clockwise from 3 o'clock.
CircleOp = namedtuple("CircleOp", ["cx", "cy", "radius", "color"])
ArcOp = namedtuple("ArcOp", ["start_angle", "sweep_angle", "color"])
PointOp = namedtuple("PointOp", ["x", "y", "color"])
TextOp = namedtuple("TextOp", ["text", "x", "y", "color"])

def _fraction(value, total):
    if total <= 0 or not math.isfinite(total):
        return 0.0
    return value / total

def format_label(spec):
    """The target percentage for the whole data set, e.g. "58.57%"."""
    return f"{_fraction(sum(spec.values), spec.total) * 100:.2f}%"

def layout_segments(spec, colors):
    """
    Lays the segments out around the ring starting at 12 o'clock.
    Returns a list of (base_start, sweep, fraction, color) tuples.
    """
    segments = []
    start_from = START_ANGLE
    for index, value in enumerate(spec.values):
        fraction = _fraction(value, spec.total)
        sweep = 360.0 * fraction
        segments.append((start_from, sweep, fraction, colors.color_for(index)))
        start_from += sweep
    return segments

def _rotation_arcs(segments, progress):
    return [ArcOp(start + progress * 360.0, sweep * progress, color)
            for start, sweep, _, color in segments]

def _bidirectional_arcs(segments, progress):
    return [ArcOp(start + (sweep - sweep * progress) / 2, sweep * progress, color)
            for start, sweep, _, color in segments]

def _sequential_arcs(segments, progress):
    arcs = []
    remaining = progress
    for start, sweep, fraction, color in segments:
        if remaining < 0:
            break
        scale = remaining / fraction if remaining < fraction else 1.0
        arcs.append(ArcOp(start, sweep * scale, color))
        remaining -= fraction
    return arcs

def render(spec, geometry, policy, progress, colors,
           not_filled_color=NOT_FILLED_COLOR, text_color=TEXT_COLOR, font_size=DEFAULT_FONT_SIZE):
    """
    Builds the ordered list of draw operations for one frame: the not-filled
    background ring, the percentage label, the segment arcs for the given
    animation policy and progress, and the start-marker dot when the policy
    shows it. An empty data list renders nothing.

    `colors` must be a long-lived ColorTable so fallback colors stay the
    same from frame to frame.
    """
    if not spec.values:
        return []
    if not isinstance(colors, ColorTable):
        raise TypeError(f"colors must be a ColorTable, got {type(colors).__name__}")

    center = geometry.center
    plan = [
        CircleOp(center.x, center.y, geometry.radius, not_filled_color),
        TextOp(format_label(spec), center.x, center.y + font_size / 4, text_color),
    ]

    segments = layout_segments(spec, colors)
    if policy == ROTATION:
        arcs = _rotation_arcs(segments, progress)
        show_marker = progress >= 1.0
    elif policy == SEQUENTIAL:
        arcs = _sequential_arcs(segments, progress)
        show_marker = bool(arcs)
    elif policy == BIDIRECTIONAL:
        arcs = _bidirectional_arcs(segments, progress)
        show_marker = progress >= 1.0
    else:
        raise ValueError(f"Unknown animation policy: {policy!r}")

    plan.extend(arcs)
    if show_marker:
        plan.append(PointOp(center.x, center.y - geometry.radius, colors.color_for(0)))
    return plan
