# cairo_painter.py
import gi
import math
import cairo

from stats_renderer import ArcOp, CircleOp, PointOp, TextOp

gi.require_version("Pango", "1.0")
gi.require_version("PangoCairo", "1.0")
from gi.repository import Pango, PangoCairo

def _set_color(ctx, color):
    ctx.set_source_rgba(color.red, color.green, color.blue, color.alpha)

def _paint_circle(ctx, op, style):
    ctx.new_path()
    ctx.set_line_width(style.line_width)
    _set_color(ctx, op.color)
    ctx.arc(op.cx, op.cy, op.radius, 0, 2 * math.pi)
    ctx.stroke()

def _paint_arc(ctx, op, style, geometry):
    if op.sweep_angle == 0 or not math.isfinite(op.sweep_angle):
        return
    start = math.radians(op.start_angle)
    end = math.radians(op.start_angle + op.sweep_angle)
    cx, cy = geometry.center

    ctx.new_path()
    ctx.set_line_width(style.line_width)
    ctx.set_line_cap(cairo.LINE_CAP_ROUND)
    ctx.set_line_join(cairo.LINE_JOIN_ROUND)
    _set_color(ctx, op.color)
    if op.sweep_angle > 0:
        ctx.arc(cx, cy, geometry.radius, start, end)
    else:
        ctx.arc_negative(cx, cy, geometry.radius, start, end)
    ctx.stroke()

def _paint_point(ctx, op, style):
    ctx.new_path()
    _set_color(ctx, op.color)
    ctx.arc(op.x, op.y, style.line_width / 2, 0, 2 * math.pi)
    ctx.fill()

def _paint_text(ctx, op, style):
    layout = PangoCairo.create_layout(ctx)
    font = Pango.FontDescription.from_string("Sans")
    font.set_absolute_size(style.font_size * Pango.SCALE)
    layout.set_font_description(font)
    layout.set_text(op.text, -1)
    _, log = layout.get_pixel_extents()
    baseline = layout.get_baseline() / Pango.SCALE
    # The anchor is the baseline, centered horizontally
    _set_color(ctx, op.color)
    ctx.move_to(op.x - log.width / 2, op.y - baseline)
    PangoCairo.show_layout(ctx, layout)

def paint_plan(ctx, plan, style, geometry):
    """
    Executes a render plan on a cairo context. Arcs are stroked on the ring
    described by `geometry`; zero-length sweeps are skipped since a round cap
    would otherwise leave a dot behind.
    """
    if geometry.radius <= 0:
        return
    ctx.save()
    for op in plan:
        if isinstance(op, ArcOp):
            _paint_arc(ctx, op, style, geometry)
        elif isinstance(op, CircleOp):
            _paint_circle(ctx, op, style)
        elif isinstance(op, PointOp):
            _paint_point(ctx, op, style)
        elif isinstance(op, TextOp):
            _paint_text(ctx, op, style)
    ctx.restore()
