import logging
import os
from typing import List, Optional
import cv2
import numpy as np

from .config import CASCADE_FILE, DETECT_PARAMS, OVERLAP_THRESH
from .nms import suppress_overlaps
from .preprocess import min_face_size, to_detector_gray
from .types import Rect

logger = logging.getLogger(__name__)


def load_cascade(path: Optional[str] = None) -> cv2.CascadeClassifier:
    """Load a Haar cascade; defaults to the frontal-face model bundled with OpenCV."""
    cascade_path = path or os.path.join(cv2.data.haarcascades, CASCADE_FILE)
    if not os.path.isfile(cascade_path):
        raise FileNotFoundError(f"Haar cascade not found: {cascade_path}")

    cascade = cv2.CascadeClassifier()
    try:
        ok = cascade.load(cascade_path)
    except cv2.error as e:
        raise RuntimeError(f"Error loading face cascade from: {cascade_path}") from e
    if not ok:
        raise RuntimeError(f"Error loading face cascade from: {cascade_path}")
    logger.debug("Loaded cascade %s", cascade_path)
    return cascade


def detect_candidates(image_bgr: np.ndarray, cascade: cv2.CascadeClassifier) -> List[Rect]:
    """Raw detector output in detector order, before suppression."""
    if image_bgr is None or image_bgr.size == 0:
        raise ValueError("Cannot detect faces in an empty image")

    gray = to_detector_gray(image_bgr)
    faces = cascade.detectMultiScale(
        gray,
        scaleFactor=DETECT_PARAMS["scale_factor"],
        minNeighbors=DETECT_PARAMS["min_neighbors"],
        flags=cv2.CASCADE_SCALE_IMAGE,
        minSize=min_face_size(image_bgr),
    )
    return [Rect.from_xywh(f) for f in faces]


def detect_faces(
        image_bgr: np.ndarray,
        cascade: cv2.CascadeClassifier,
        overlap_thresh: float = OVERLAP_THRESH,
    ) -> List[Rect]:
    candidates = detect_candidates(image_bgr, cascade)
    faces = suppress_overlaps(candidates, overlap_thresh=overlap_thresh)
    logger.debug("%d candidates, %d after suppression", len(candidates), len(faces))
    return faces
