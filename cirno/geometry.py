"""
# Region Geometry

Rectangle intersection, shared by validation, voltage resolution, and cursor lookups.
"""

from .data import Region, Vector2


def edges(region: Region):
    """Inclusive (left, right, top, bottom) edges of a non-degenerate `region`."""
    if region.degenerate:
        raise ValueError(f"Degenerate region {region}")
    left = region.position.x
    top = region.position.y
    return left, left + region.size.x - 1, top, top + region.size.y - 1


def overlapping(a: Region, b: Region) -> bool:
    """Boolean indication of whether regions `a` and `b` share any cell."""
    a_left, a_right, a_top, a_bottom = edges(a)
    b_left, b_right, b_top, b_bottom = edges(b)
    return (
        a_left <= b_right
        and a_right >= b_left
        and a_top <= b_bottom
        and a_bottom >= b_top
    )


def overlapping_point(region: Region, point: Vector2) -> bool:
    """Boolean indication of whether `region` covers `point`."""
    return overlapping(region, Region(position=point, size=Vector2(1, 1)))
