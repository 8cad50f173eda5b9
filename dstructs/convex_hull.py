"""Convex hull of integer points by Graham scan."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from functools import cmp_to_key
from typing import NamedTuple, Optional


class Point(NamedTuple):
    """A point with integer coordinates."""

    x: int
    y: int


SAMPLE_POINTS = [
    Point(0, 3), Point(1, 1), Point(2, 2), Point(4, 4),
    Point(0, 0), Point(1, 2), Point(3, 1), Point(3, 3),
]


def orientation(a: Point, b: Point, c: Point) -> int:
    """Return 1 if a→b→c turns counter-clockwise, -1 if clockwise, 0 if collinear."""
    cross = (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)
    return (cross > 0) - (cross < 0)


def is_clockwise(a: Point, b: Point, c: Point, include_collinear: bool = False) -> bool:
    """True if a→b→c turns clockwise, or is collinear and that is allowed."""
    o = orientation(a, b, c)
    return o < 0 or (include_collinear and o == 0)


def is_collinear(a: Point, b: Point, c: Point) -> bool:
    return orientation(a, b, c) == 0


def _squared_distance(a: Point, b: Point) -> int:
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2


def convex_hull(points: Iterable[Sequence[int]], include_collinear: bool = False) -> list[Point]:
    """Return the hull in clockwise order, starting from the lowest, leftmost point."""
    pts = [p if isinstance(p, Point) else Point(*p) for p in points]
    if not pts:
        raise ValueError("convex hull of an empty point set")
    p0 = min(pts, key=lambda p: (p.y, p.x))

    def by_angle(a: Point, b: Point) -> int:
        o = orientation(p0, a, b)
        if o == 0:
            da, db = _squared_distance(p0, a), _squared_distance(p0, b)
            return (da > db) - (da < db)
        return -1 if o < 0 else 1

    pts.sort(key=cmp_to_key(by_angle))

    if include_collinear:
        # Points on the closing ray must be visited from farthest to nearest.
        i = len(pts) - 1
        while i >= 0 and is_collinear(p0, pts[i], pts[-1]):
            i -= 1
        pts[i + 1:] = reversed(pts[i + 1:])

    hull: list[Point] = []
    for point in pts:
        while len(hull) > 1 and not is_clockwise(hull[-2], hull[-1], point, include_collinear):
            hull.pop()
        hull.append(point)

    if not include_collinear and len(hull) == 2 and hull[0] == hull[1]:
        hull.pop()
    return hull


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Print the convex hull of a sample point set.")
    parser.add_argument(
        "--include-collinear",
        action="store_true",
        help="keep points lying on hull edges",
    )
    args = parser.parse_args(argv)
    for point in convex_hull(SAMPLE_POINTS, args.include_collinear):
        print(f"({point.x}, {point.y})")
    return 0