from .types import Rect


def intersection(a: Rect, b: Rect) -> Rect:
    """Overlap of two boxes; zero-sized Rect when they are disjoint."""
    ix1, iy1 = max(a.x, b.x), max(a.y, b.y)
    ix2, iy2 = min(a.x2, b.x2), min(a.y2, b.y2)
    iw, ih = max(0, ix2 - ix1), max(0, iy2 - iy1)
    return Rect(ix1, iy1, iw, ih)


def overlap_ratio(a: Rect, b: Rect) -> float:
    """
    Intersection area over the smaller of the two areas.

    Degenerate boxes (area 0) never overlap anything: the ratio is 0.0.
    """
    min_area = min(a.area, b.area)
    if min_area <= 0:
        return 0.0
    return float(intersection(a, b).area) / float(min_area)
