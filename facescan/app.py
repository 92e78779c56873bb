from typing import Any, Dict, Optional
import cv2
import numpy as np
from fastapi import FastAPI, File, UploadFile, Query, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ORIGINS, IMAGE_EXTENSIONS, OVERLAP_THRESH
from .detect import detect_faces, load_cascade

app = FastAPI(title="Face Scan API", version="1.0.0")
app.add_middleware(CORSMiddleware, allow_origins=list(CORS_ORIGINS), allow_methods=["POST"])

SUPPORTED_FORMATS = ", ".join(ext.lstrip(".").upper() for ext in IMAGE_EXTENSIONS)

_cascade: Optional[cv2.CascadeClassifier] = None


def get_cascade() -> cv2.CascadeClassifier:
    global _cascade
    if _cascade is None:
        _cascade = load_cascade()
    return _cascade


def read_image(upload: UploadFile) -> np.ndarray:
    """Decode an uploaded file into a BGR image, or fail with HTTP 400."""
    buf = np.frombuffer(upload.file.read(), dtype=np.uint8)
    if buf.size == 0:
        raise HTTPException(status_code=400, detail="Empty file.")
    img = cv2.imdecode(buf, cv2.IMREAD_COLOR)
    if img is None:
        raise HTTPException(
            status_code=400,
            detail=f"Could not decode {upload.filename or 'upload'}. Supported formats: {SUPPORTED_FORMATS}.",
        )
    return img


@app.post("/detect")
def detect(
    file: UploadFile = File(...),
    overlap_thresh: float = Query(OVERLAP_THRESH, gt=0.0, lt=1.0, description="Overlap ratio above which a box is dropped"),
) -> Dict[str, Any]:
    img = read_image(file)
    faces = detect_faces(img, get_cascade(), overlap_thresh=overlap_thresh)
    return {"faces": [f.as_dict() for f in faces], "count": len(faces)}
