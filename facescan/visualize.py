import logging
from typing import Sequence, Tuple
import matplotlib.pyplot as plt
import numpy as np
import cv2

from .config import BOX_COLOR, BOX_THICKNESS, DISPLAY_MAX_HEIGHT, WINDOW_NAME
from .preprocess import resize_max_height
from .types import Rect

logger = logging.getLogger(__name__)


def draw_faces(
    image_bgr: np.ndarray,
    faces: Sequence[Rect],
    color: Tuple[int, int, int] = BOX_COLOR,
    thickness: int = BOX_THICKNESS,
) -> np.ndarray:
    vis = image_bgr.copy()
    for f in faces:
        cv2.rectangle(vis, (f.x, f.y), (f.x2, f.y2), color, thickness)
    return vis


def show_image(image_bgr: np.ndarray, window: str = WINDOW_NAME, max_height: int = DISPLAY_MAX_HEIGHT) -> int:
    """Show the image and block until a key is pressed. Returns the key code."""
    cv2.imshow(window, resize_max_height(image_bgr, max_height))
    logger.info("Press any key to continue to the next image...")
    return cv2.waitKey(0)


def plot_faces(image_bgr: np.ndarray, faces: Sequence[Rect], title: str) -> None:
    vis = draw_faces(image_bgr, faces, color=(0, 255, 0))
    for i, f in enumerate(faces):
        cv2.putText(
            vis,
            f"#{i}",
            (f.x, max(0, f.y - 6)),
            cv2.FONT_HERSHEY_SIMPLEX,
            0.5,
            (0, 255, 0),
            1,
            cv2.LINE_AA,
        )

    vis_rgb = cv2.cvtColor(vis, cv2.COLOR_BGR2RGB)
    plt.figure(figsize=(14, 10))
    plt.imshow(vis_rgb)
    plt.title(f"{title} (count={len(faces)})")
    plt.axis("off")
    plt.show()
