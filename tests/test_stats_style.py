import pytest

pytest.importorskip("gi")

from stats_colors import parse_color
from stats_renderer import BIDIRECTIONAL, ROTATION, SEQUENTIAL
from stats_style import ConfigurationError, build_style, get_stats_config_model, parse_animation_policy


def channels(color):
    return (color.red, color.green, color.blue, color.alpha)


def test_defaults_build_a_usable_style():
    style = build_style({})
    assert style.line_width == 5.0
    assert style.font_size == 40.0
    assert len(style.colors) == 4
    assert channels(style.not_filled_color) == pytest.approx((136 / 255, 136 / 255, 136 / 255, 1.0))
    assert channels(style.text_color) == (0.0, 0.0, 0.0, 1.0)
    assert style.animation_policy == ROTATION
    assert style.animation_duration == 2000.0


def test_config_values_override_defaults():
    style = build_style({
        "stats_line_width": "8",
        "stats_color_count": "2",
        "stats_color1": "#112233",
        "stats_color2": "rgba(10,20,30,1)",
        "stats_animation_type": "sequential",
    })
    assert style.line_width == 8.0
    assert [channels(c) for c in style.colors] == [
        pytest.approx(channels(parse_color("#112233"))),
        pytest.approx(channels(parse_color("rgba(10,20,30,1)"))),
    ]
    assert style.animation_policy == SEQUENTIAL


def test_build_style_does_not_modify_config():
    config = {"stats_line_width": "3"}
    build_style(config)
    assert config == {"stats_line_width": "3"}


@pytest.mark.parametrize("value, expected", [
    ("rotation", ROTATION), ("Sequential", SEQUENTIAL), ("BIDIRECTIONAL", BIDIRECTIONAL),
    ("0", ROTATION), ("1", SEQUENTIAL), ("2", BIDIRECTIONAL), (2, BIDIRECTIONAL),
])
def test_animation_policy_accepts_names_and_codes(value, expected):
    assert parse_animation_policy(value) == expected


@pytest.mark.parametrize("value", ["spin", "3", "-1", ""])
def test_unknown_animation_type_fails_fast(value):
    with pytest.raises(ConfigurationError):
        build_style({"stats_animation_type": value})


@pytest.mark.parametrize("config", [
    {"stats_color1": ""},
    {"stats_color2": "not-a-color"},
    {"stats_color_count": "0"},
    {"stats_color_count": "11"},
    {"stats_color_count": "many"},
    {"stats_not_filled_color": "#12"},
])
def test_broken_color_table_fails_fast(config):
    with pytest.raises(ConfigurationError):
        build_style(config)


def test_non_numeric_size_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        build_style({"stats_font_size": "big"})


def test_configuration_error_is_a_value_error():
    assert issubclass(ConfigurationError, ValueError)


def test_model_keys_share_the_stats_prefix():
    keys = [opt.key for section in get_stats_config_model().values() for opt in section]
    assert keys
    assert all(key.startswith("stats_") for key in keys)


@pytest.mark.parametrize("text, expected", [
    ("red", (1.0, 0.0, 0.0, 1.0)),
    ("hsl(0,100%,50%)", (1.0, 0.0, 0.0, 1.0)),
    ("rgba(100%,0%,0%,1)", (1.0, 0.0, 0.0, 1.0)),
    ("transparent", (0.0, 0.0, 0.0, 0.0)),
])
def test_any_gdk_color_notation_is_accepted(text, expected):
    style = build_style({"stats_color_count": "1", "stats_color1": text})
    assert channels(style.colors.color_for(0)) == pytest.approx(expected)
