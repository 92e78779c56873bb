import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional, Union
import cv2

from .config import IMAGE_EXTENSIONS, OVERLAP_THRESH
from .detect import detect_candidates
from .nms import suppress_overlaps
from .types import ImageResult
from .visualize import draw_faces, plot_faces, show_image

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def is_image_file(path: PathLike) -> bool:
    return Path(path).suffix.lower() in IMAGE_EXTENSIONS


def iter_image_files(root: PathLike) -> Iterator[Path]:
    """Yield image files under root, recursively, in a stable order."""
    def _raise(err: OSError) -> None:
        raise err

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames.sort()
        for name in sorted(filenames):
            p = Path(dirpath) / name
            if p.is_file() and is_image_file(p):
                yield p


def process_image(
        path: PathLike,
        cascade: cv2.CascadeClassifier,
        save_dir: Optional[PathLike] = None,
        show: bool = False,
        overlap_thresh: float = OVERLAP_THRESH,
        debug: bool = False,
    ) -> Optional[ImageResult]:
    """
    Detect, annotate and save/show one image.

    Returns None when the file cannot be decoded. Images without faces are
    neither saved nor shown.
    """
    path = Path(path)
    logger.info("Processing image: %s", path)

    img = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if img is None:
        logger.error("Could not open or find the image: %s", path)
        return None

    candidates = detect_candidates(img, cascade)
    faces = suppress_overlaps(candidates, overlap_thresh=overlap_thresh)
    result = ImageResult(path=path, faces=faces)

    if debug:
        plot_faces(img, candidates, title=f"{path.name}: before suppression")
        plot_faces(img, faces, title=f"{path.name}: after suppression")

    if not faces:
        logger.info("No faces detected.")
        return result

    logger.info("Faces detected: %d", len(faces))
    for f in faces:
        logger.info("Face at: x=%d, y=%d, width=%d, height=%d", f.x, f.y, f.width, f.height)

    vis = draw_faces(img, faces)

    if save_dir is not None:
        out_dir = Path(save_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        save_path = out_dir / path.name
        try:
            ok = cv2.imwrite(str(save_path), vis)
        except cv2.error as e:
            # no writer for this extension in the installed OpenCV build
            logger.debug("imwrite raised: %s", e)
            ok = False
        if ok:
            result.saved_to = save_path
            logger.info("Saved processed image to: %s", save_path)
        else:
            logger.error("Failed to save the image to: %s", save_path)
    elif show:
        show_image(vis)

    return result


def process_directory(
        root: PathLike,
        cascade: cv2.CascadeClassifier,
        save_dir: Optional[PathLike] = None,
        show: bool = False,
        overlap_thresh: float = OVERLAP_THRESH,
        debug: bool = False,
    ) -> List[ImageResult]:
    results: List[ImageResult] = []
    try:
        for p in iter_image_files(root):
            res = process_image(
                p, cascade,
                save_dir=save_dir,
                show=show,
                overlap_thresh=overlap_thresh,
                debug=debug,
            )
            if res is not None:
                results.append(res)
    except (OSError, cv2.error) as e:
        logger.error("Error processing directory: %s", e)
    return results
