import logging
import time

import cv2

from .config import CFG
from .orchestrator import FrameOrchestrator
from .render import Canvas, load_overlay
from .trail import FingerTrail
from .tracker import create_landmarker, warmup, HandSource

logger = logging.getLogger(__name__)


def build_orchestrator(cfg, overlay=None) -> FrameOrchestrator:
    left = FingerTrail(cfg.trail_max_length, cfg.left_color, cfg.debounce_ms, cfg.idle_ms,
                       stroke_width=cfg.stroke_width)
    right = FingerTrail(cfg.trail_max_length, cfg.right_color, cfg.debounce_ms, cfg.idle_ms,
                        stroke_width=cfg.stroke_width)
    return FrameOrchestrator(
        left, right,
        overlay=overlay,
        min_confidence=cfg.min_confidence,
        easter_egg_threshold=cfg.easter_egg_threshold,
        strict_handedness=cfg.strict_handedness,
    )


def run_app(cfg=CFG):
    cap = cv2.VideoCapture(cfg.cam_index)
    if not cap.isOpened():
        raise RuntimeError("Could not open webcam.")

    cap.set(cv2.CAP_PROP_FRAME_WIDTH, cfg.cam_width)
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, cfg.cam_height)
    cap.set(cv2.CAP_PROP_BUFFERSIZE, cfg.cam_buffer_size)

    overlay = load_overlay(cfg.overlay_path)
    orchestrator = build_orchestrator(cfg, overlay)
    canvas = Canvas(cfg.cam_width, cfg.cam_height, cfg.background)

    session_t0 = time.monotonic()

    def now_ms():
        return (time.monotonic() - session_t0) * 1000.0

    landmarker = create_landmarker(cfg.model_task_path, cfg.num_hands)
    source = HandSource(landmarker, cfg.detect_every_n)
    warmup(cap, landmarker, now_ms)

    show_video = cfg.show_video
    frame_idx = 0

    print("Controls: SPACE=toggle camera preview, ESC=quit")

    try:
        while True:
            ok, frame = cap.read()
            if not ok:
                logger.warning("Camera read failed, stopping")
                break
            frame = cv2.flip(frame, 1)
            frame = cv2.resize(frame, (canvas.width, canvas.height), interpolation=cv2.INTER_AREA)

            now = now_ms()
            detections = source.detect(frame, int(now), frame_idx)

            canvas.clear(frame if show_video else None)
            orchestrator.process_frame(detections, now, frame_idx, canvas)
            frame_idx += 1

            cv2.imshow(cfg.window_main, canvas.img)

            key = cv2.waitKey(1) & 0xFF
            if key == 27:  # ESC
                break
            if key == 32:  # SPACE
                show_video = not show_video
    finally:
        source.close()
        cap.release()
        try:
            cv2.destroyWindow(cfg.window_main)
        except Exception:
            pass
        cv2.destroyAllWindows()
