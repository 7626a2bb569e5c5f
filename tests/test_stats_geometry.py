import pytest

from stats_geometry import Point, Rect, resolve


def test_radius_and_center_for_landscape_surface():
    geometry = resolve(400, 300, 5)
    assert geometry.radius == 145
    assert geometry.center == Point(200, 150)


def test_bounding_box_is_square_around_center():
    geometry = resolve(400, 300, 5)
    assert geometry.bounding_box == Rect(55, 5, 345, 295)


def test_portrait_surface_uses_smaller_side():
    geometry = resolve(200, 500, 10)
    assert geometry.radius == 90
    assert geometry.center == Point(100, 250)


def test_degenerate_radius_is_passed_through():
    geometry = resolve(0, 0, 5)
    assert geometry.radius == pytest.approx(-5)
