"""Planar geometry over (latitude, longitude) vertex lists.

Polygons are implicitly closed: the last vertex connects back to the first,
so stored zones never need a repeated closing vertex.
"""
import math
from typing import Sequence

Point = Sequence[float]

KM_PER_DEGREE = 111


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Even-odd ray casting.

    The point must use the same axis order as the vertices. A point exactly on
    an edge gets a deterministic but unspecified answer.
    """
    n = len(polygon)
    if n < 3:
        return False
    x, y = point[0], point[1]
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i][0], polygon[i][1]
        xj, yj = polygon[j][0], polygon[j][1]
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def polygon_area(polygon: Sequence[Point], reference_latitude: float) -> float:
    """Approximate area in km² (flat-earth, city scale only)."""
    n = len(polygon)
    if n < 3:
        return 0.0
    acc = 0.0
    for i in range(n):
        j = (i + 1) % n
        acc += polygon[i][0] * polygon[j][1]
        acc -= polygon[j][0] * polygon[i][1]
    area_deg2 = abs(acc) / 2
    km2 = area_deg2 * KM_PER_DEGREE * KM_PER_DEGREE * math.cos(math.radians(reference_latitude))
    return round(km2, 2)


def polygon_centroid_latitude(polygon: Sequence[Point]) -> float:
    if not polygon:
        return 0.0
    return sum(p[0] for p in polygon) / len(polygon)
