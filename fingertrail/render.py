import logging
import os

import numpy as np
import cv2

logger = logging.getLogger(__name__)

BEZIER_STEPS = 16


def sample_bezier(p1, cp1, cp2, p2, steps: int = BEZIER_STEPS):
    """
    Evaluates a cubic Bezier at steps+1 evenly spaced t values.
    returns: float32 array (steps+1, 2), first row p1, last row p2
    """
    t = np.linspace(0.0, 1.0, steps + 1, dtype=np.float32)[:, None]
    ctrl = np.array([p.as_tuple() for p in (p1, cp1, cp2, p2)], dtype=np.float32)
    u = 1.0 - t
    return (u ** 3) * ctrl[0] + 3 * (u ** 2) * t * ctrl[1] + 3 * u * (t ** 2) * ctrl[2] + (t ** 3) * ctrl[3]


class Canvas:
    """
    BGR drawing surface the trails and overlay render onto.
    """
    def __init__(self, width: int, height: int, background=(254, 254, 254)):
        self.width = width
        self.height = height
        self.background = background
        self.img = np.full((height, width, 3), background, dtype=np.uint8)

    def clear(self, frame_bgr=None):
        if frame_bgr is None:
            self.img[:] = self.background
        else:
            self.img = cv2.resize(frame_bgr, (self.width, self.height), interpolation=cv2.INTER_AREA)

    def line(self, p1, p2, color, width: int):
        a = (int(round(p1.x)), int(round(p1.y)))
        b = (int(round(p2.x)), int(round(p2.y)))
        cv2.line(self.img, a, b, color, width, cv2.LINE_AA)

    def bezier(self, p1, cp1, cp2, p2, color, width: int):
        pts = np.round(sample_bezier(p1, cp1, cp2, p2)).astype(np.int32)
        cv2.polylines(self.img, [pts.reshape(-1, 1, 2)], False, color, width, cv2.LINE_AA)

    def image_centered(self, overlay):
        """
        overlay: BGR or BGRA uint8 image. Alpha is blended; parts outside the canvas are cut off.
        """
        oh, ow = overlay.shape[:2]
        x0 = self.width // 2 - ow // 2
        y0 = self.height // 2 - oh // 2

        # clip to canvas
        cx0, cy0 = max(0, x0), max(0, y0)
        cx1, cy1 = min(self.width, x0 + ow), min(self.height, y0 + oh)
        if cx1 <= cx0 or cy1 <= cy0:
            return

        src = overlay[cy0 - y0:cy1 - y0, cx0 - x0:cx1 - x0]
        dst = self.img[cy0:cy1, cx0:cx1]

        if src.ndim == 2:
            src = cv2.cvtColor(src, cv2.COLOR_GRAY2BGR)

        if src.shape[2] == 4:
            alpha = src[:, :, 3:4].astype(np.float32) / 255.0
            blended = src[:, :, :3].astype(np.float32) * alpha + dst.astype(np.float32) * (1.0 - alpha)
            dst[:] = blended.astype(np.uint8)
        else:
            dst[:] = src


def load_overlay(path: str):
    """
    returns: image as stored (alpha kept) or None if missing/unreadable
    """
    if not os.path.exists(path):
        logger.warning(f"Overlay image not found: {path}")
        return None
    img = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if img is None:
        logger.warning(f"Could not decode overlay image: {path}")
        return None
    logger.info(f"Loaded overlay {path} ({img.shape[1]}x{img.shape[0]})")
    return img
