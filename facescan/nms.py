from typing import Any, List, Sequence, Union
from .config import OVERLAP_THRESH
from .geometry import overlap_ratio
from .types import Rect

RectLike = Union[Rect, Sequence[Any]]


def _as_rect(r: RectLike) -> Rect:
    rect = r if isinstance(r, Rect) else Rect.from_xywh(r)
    return rect.clamped()


def suppress_overlaps(cands: Sequence[RectLike], overlap_thresh: float = OVERLAP_THRESH) -> List[Rect]:
    """
    Greedy first-wins suppression of redundant detections.

    Candidates are visited in the order given (detector order, never
    re-sorted). A candidate is dropped as soon as its overlap ratio with
    any already kept box is strictly greater than ``overlap_thresh``.
    The first box of an overlapping cluster is the one that survives, even
    when later boxes overlap each other more than they overlap it; this
    is an approximation of clustering NMS, not a bug.

    Boxes with negative width/height are clamped to zero first, and
    zero-area boxes are always kept.

    Raises ValueError when overlap_thresh is not strictly between 0 and 1.
    """
    if not 0.0 < overlap_thresh < 1.0:
        raise ValueError(f"overlap_thresh must be in (0, 1), got {overlap_thresh}")
    if len(cands) == 0:
        return []

    keep: List[Rect] = []
    for c in map(_as_rect, cands):
        if all(overlap_ratio(c, k) <= overlap_thresh for k in keep):
            keep.append(c)
    return keep
