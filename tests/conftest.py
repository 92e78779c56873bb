import cv2
import numpy as np
import pytest


class FakeCascade:
    """Stands in for cv2.CascadeClassifier; returns fixed boxes in a fixed order."""

    def __init__(self, boxes):
        self.boxes = np.array(boxes, dtype=np.int32).reshape(-1, 4)
        self.calls = []

    def detectMultiScale(self, image, **kwargs):
        self.calls.append((image.shape, kwargs))
        if len(self.boxes) == 0:
            return ()
        return self.boxes


@pytest.fixture
def blank_image():
    return np.zeros((480, 640, 3), dtype=np.uint8)


@pytest.fixture
def image_tree(tmp_path, blank_image):
    root = tmp_path / "images"
    (root / "sub").mkdir(parents=True)
    cv2.imwrite(str(root / "a.jpg"), blank_image)
    cv2.imwrite(str(root / "sub" / "b.PNG"), blank_image)
    (root / "notes.txt").write_text("not an image")
    (root / "broken.jpg").write_bytes(b"definitely not a jpeg")
    return root


@pytest.fixture
def fake_cascade():
    return FakeCascade([[0, 0, 100, 100], [10, 10, 100, 100], [500, 300, 50, 50]])
