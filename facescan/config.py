from typing import Tuple

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".bmp", ".gif", ".tiff")

CASCADE_FILE = "haarcascade_frontalface_default.xml"

# detectMultiScale parameters
DETECT_PARAMS = {
    "scale_factor": 1.1,
    "min_neighbors": 10,
    "min_size_floor": 60,      # px
    "min_size_divisor": 10,    # min side of the image / divisor
}

# gray -> gaussian -> equalize -> bilateral
FILTER_PARAMS = {
    "gaussian_ksize": 5,
    "bilateral_d": 9,
    "bilateral_sigma_color": 75,
    "bilateral_sigma_space": 75,
}

OVERLAP_THRESH = 0.3

BOX_COLOR: Tuple[int, int, int] = (255, 0, 0)  # BGR
BOX_THICKNESS = 2

WINDOW_NAME = "Detected Faces"
DISPLAY_MAX_HEIGHT = 900

# HTTP API
CORS_ORIGINS = ("*",)
