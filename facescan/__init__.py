"""Top-level package interface for facescan.

Expose the main API: face detection, overlap suppression and the
directory pipeline.
"""
from .types import Rect, ImageResult
from .nms import suppress_overlaps
from .detect import detect_faces, load_cascade
from .core import process_directory, process_image

__all__ = [
    "Rect",
    "ImageResult",
    "suppress_overlaps",
    "detect_faces",
    "load_cascade",
    "process_directory",
    "process_image",
]
