import logging

from .detection import INDEX_TIP
from .geometry import Point, dist

logger = logging.getLogger(__name__)


class FrameOrchestrator:
    """
    Routes each frame's detections to the left/right trails, renders both,
    and draws the easter-egg overlay when the two fingertips meet.
    """
    def __init__(self, left, right, overlay=None, min_confidence: float = 0.1,
                 easter_egg_threshold: float = 100.0, strict_handedness: bool = False):
        self.left = left
        self.right = right
        self.overlay = overlay
        self.min_confidence = min_confidence
        self.easter_egg_threshold = easter_egg_threshold
        self.strict_handedness = strict_handedness

    def trail_for(self, handedness: str):
        """
        "Left" -> left trail. Anything else goes to the right trail unless
        strict_handedness is set, in which case only "Right" does.
        """
        if handedness == "Left":
            return self.left
        if self.strict_handedness and handedness != "Right":
            return None
        return self.right

    def dispatch(self, detections, now: float):
        for det in detections:
            if det.confidence < self.min_confidence:
                logger.debug(f"Low confidence detection skipped: {det.confidence:.2f}")
                continue

            trail = self.trail_for(det.handedness)
            if trail is None:
                logger.debug(f"Unknown handedness skipped: {det.handedness!r}")
                continue

            tip = det.keypoints[INDEX_TIP]
            trail.update(Point(tip.x, tip.y), now)

    def fingertips_close(self) -> bool:
        if self.left.current is None or self.right.current is None:
            return False
        return dist(self.left.current, self.right.current) < self.easter_egg_threshold

    def process_frame(self, detections, now: float, frame_index: int, canvas) -> bool:
        """
        returns: True if the easter egg triggered this frame
                 (the overlay is only drawn when one was loaded)
        """
        self.dispatch(detections, now)

        # render both even without an update so idle decay keeps running
        self.left.render(canvas, now, frame_index)
        self.right.render(canvas, now, frame_index)

        if not self.fingertips_close():
            return False
        if self.overlay is not None:
            canvas.image_centered(self.overlay)
        return True
