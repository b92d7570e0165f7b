import logging

import cv2
import mediapipe as mp
from mediapipe.tasks import python as mp_python
from mediapipe.tasks.python import vision as mp_vision

from .detection import HandDetection, Keypoint

logger = logging.getLogger(__name__)


def create_landmarker(model_path: str, num_hands: int = 2):
    base_options = mp_python.BaseOptions(model_asset_path=model_path)
    options = mp_vision.HandLandmarkerOptions(
        base_options=base_options,
        running_mode=mp_vision.RunningMode.VIDEO,
        num_hands=num_hands,
        min_hand_detection_confidence=0.5,
        min_hand_presence_confidence=0.5,
        min_tracking_confidence=0.5,
    )
    landmarker = mp_vision.HandLandmarker.create_from_options(options)
    logger.info(f"Created hand landmarker from {model_path} (num_hands={num_hands})")
    return landmarker


def _to_mp_image(frame_bgr):
    rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
    return mp.Image(image_format=mp.ImageFormat.SRGB, data=rgb)


def warmup(cap: cv2.VideoCapture, landmarker, clock_ms, n_grab: int = 10, n_warm: int = 5):
    """
    Drains the camera buffer and runs a few throwaway detections.
    clock_ms: callable returning the session timestamp in ms
    """
    for _ in range(n_grab):
        cap.grab()
    for _ in range(n_warm):
        ok, f = cap.read()
        if not ok:
            break
        f = cv2.flip(f, 1)
        try:
            landmarker.detect_for_video(_to_mp_image(f), int(clock_ms()))
        except Exception as e:
            logger.debug(f"Warmup detection failed: {e}")


def to_detections(result, frame_w: int, frame_h: int):
    """
    HandLandmarkerResult -> list[HandDetection] with keypoints in pixels.
    Confidence and label come from the top handedness category.
    """
    if result is None or not result.hand_landmarks:
        return []

    detections = []
    for lm, cats in zip(result.hand_landmarks, result.handedness):
        if not cats:
            continue
        top = cats[0]
        keypoints = [Keypoint(p.x * frame_w, p.y * frame_h) for p in lm]
        detections.append(HandDetection(
            confidence=float(top.score),
            handedness=top.category_name,
            keypoints=keypoints,
        ))
    return detections


class HandSource:
    """
    Runs the landmarker on mirrored frames and keeps the most recent result,
    re-detecting every detect_every_n frames.
    """
    def __init__(self, landmarker, detect_every_n: int = 1):
        self.landmarker = landmarker
        self.detect_every_n = max(1, detect_every_n)
        self.last_result = None
        self._last_ts = -1

    def detect(self, frame_bgr, ts_ms: int, frame_idx: int):
        h, w = frame_bgr.shape[:2]
        if frame_idx % self.detect_every_n == 0 or self.last_result is None:
            # VIDEO mode rejects non-increasing timestamps
            ts_ms = max(ts_ms, self._last_ts + 1)
            self.last_result = self.landmarker.detect_for_video(_to_mp_image(frame_bgr), ts_ms)
            self._last_ts = ts_ms
        return to_detections(self.last_result, w, h)

    def close(self):
        self.landmarker.close()
