from typing import Tuple
import cv2
import numpy as np
from .config import DETECT_PARAMS, FILTER_PARAMS


def to_detector_gray(img: np.ndarray) -> np.ndarray:
    gray = img if img.ndim == 2 else cv2.cvtColor(img, cv2.COLOR_BGR2GRAY)

    k = FILTER_PARAMS["gaussian_ksize"]
    gray = cv2.GaussianBlur(gray, (k, k), 0)
    gray = cv2.equalizeHist(gray)
    # Keep edges while removing the remaining noise
    return cv2.bilateralFilter(
        gray,
        d=FILTER_PARAMS["bilateral_d"],
        sigmaColor=FILTER_PARAMS["bilateral_sigma_color"],
        sigmaSpace=FILTER_PARAMS["bilateral_sigma_space"],
    )


def min_face_size(img: np.ndarray) -> Tuple[int, int]:
    h, w = img.shape[:2]
    side = max(DETECT_PARAMS["min_size_floor"], min(h, w) // DETECT_PARAMS["min_size_divisor"])
    return side, side


def resize_max_height(img: np.ndarray, max_height: int) -> np.ndarray:
    h, w = img.shape[:2]
    scale = max_height / float(h)
    if scale >= 1.0:
        return img
    return cv2.resize(img, (int(w * scale), max_height), interpolation=cv2.INTER_AREA)
