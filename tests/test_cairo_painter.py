import pytest

cairo = pytest.importorskip("cairo")
gi = pytest.importorskip("gi")

try:
    gi.require_foreign("cairo")
except ImportError:
    pytest.skip("PyGObject built without cairo support", allow_module_level=True)

from cairo_painter import paint_plan
from stats_geometry import resolve
from stats_renderer import BIDIRECTIONAL, ROTATION, ArcOp, ChartSpec, TextOp, render
from stats_style import build_style

SIZE = 200


def pixel(surface, x, y):
    """Returns (r, g, b, a) bytes of an ARGB32 surface pixel."""
    surface.flush()
    data = surface.get_data()
    offset = y * surface.get_stride() + x * 4
    b, g, r, a = data[offset:offset + 4]
    return r, g, b, a


def paint(plan, style, geometry):
    surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, SIZE, SIZE)
    ctx = cairo.Context(surface)
    paint_plan(ctx, plan, style, geometry)
    return surface


@pytest.fixture
def style():
    return build_style({
        "stats_line_width": "10",
        "stats_color_count": "1",
        "stats_color1": "rgba(255,0,0,1)",
        "stats_not_filled_color": "rgba(0,0,255,1)",
        "stats_text_color": "rgba(0,255,0,1)",
    })


@pytest.fixture
def geometry(style):
    return resolve(SIZE, SIZE, style.line_width)


def test_full_ring_is_painted_in_segment_color(style, geometry):
    plan = render(ChartSpec(1.0, (1.0,)), geometry, ROTATION, 1.0, style.colors,
                  not_filled_color=style.not_filled_color, text_color=style.text_color,
                  font_size=style.font_size)
    surface = paint(plan, style, geometry)
    # Right-hand side of the ring, radius 90 from (100, 100)
    assert pixel(surface, 190, 100) == (255, 0, 0, 255)


def test_background_ring_shows_before_reveal(style, geometry):
    plan = render(ChartSpec(1.0, (1.0,)), geometry, BIDIRECTIONAL, 0.0, style.colors,
                  not_filled_color=style.not_filled_color, text_color=style.text_color,
                  font_size=style.font_size)
    surface = paint(plan, style, geometry)
    assert pixel(surface, 190, 100) == (0, 0, 255, 255)
    assert pixel(surface, 100, 10) == (0, 0, 255, 255)


def test_zero_sweep_arcs_leave_no_dot(style, geometry):
    surface = paint([ArcOp(-90.0, 0.0, style.colors.color_for(0))], style, geometry)
    assert pixel(surface, 100, 10) == (0, 0, 0, 0)


def test_negative_radius_paints_nothing(style):
    geometry = resolve(10, 10, style.line_width)
    surface = paint([ArcOp(-90.0, 90.0, style.colors.color_for(0))], style, geometry)
    assert pixel(surface, 5, 5) == (0, 0, 0, 0)


def test_label_is_drawn_around_its_anchor(style, geometry):
    text_color = style.text_color
    surface = paint([TextOp("50.00%", 100, 110, text_color)], style, geometry)
    inked = [pixel(surface, x, y) for y in range(70, 115) for x in range(40, 161)]
    assert any(a > 0 for _, _, _, a in inked)
    assert all(r == 0 and b == 0 for r, _, b, a in inked if a > 0)
    # Left and right of the anchor carry ink, so the text is centered on x
    assert any(pixel(surface, x, y)[3] for y in range(70, 115) for x in range(40, 100))
    assert any(pixel(surface, x, y)[3] for y in range(70, 115) for x in range(101, 161))
    # Nothing below the descender line
    assert all(pixel(surface, x, 130)[3] == 0 for x in range(0, SIZE))
