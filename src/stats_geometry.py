# stats_geometry.py
from collections import namedtuple

Point = namedtuple("Point", ["x", "y"])
Rect = namedtuple("Rect", ["left", "top", "right", "bottom"])
Geometry = namedtuple("Geometry", ["center", "radius", "bounding_box"])

def resolve(width, height, stroke_width):
    """
    Computes the ring placement for a drawing surface. The stroke is inset by
    its full width so the ring never clips at the surface edges. A zero or
    negative radius is returned as is; callers skip drawing for empty surfaces.
    """
    radius = min(width, height) / 2 - stroke_width
    center = Point(width / 2, height / 2)
    bounding_box = Rect(center.x - radius, center.y - radius,
                        center.x + radius, center.y + radius)
    return Geometry(center, radius, bounding_box)
