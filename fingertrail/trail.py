from collections import deque

from .geometry import Point, lerp

DECAY_EVERY_N_FRAMES = 5


def bezier_segments(points):
    """
    Catmull-Rom -> cubic Bezier conversion.
    points: sequence of Point (len >= 2)
    returns: list[(p1, cp1, cp2, p2)], one per consecutive pair
    """
    n = len(points)
    segments = []
    for i in range(n - 1):
        p1 = points[i]
        p2 = points[i + 1]
        # neighbours clamp at both ends
        p0 = points[i - 1] if i > 0 else p1
        p3 = points[i + 2] if i + 2 < n else p2

        cp1 = p1 + (p2 - p0) / 6
        cp2 = p2 - (p3 - p1) / 6
        segments.append((p1, cp1, cp2, p2))
    return segments


class FingerTrail:
    """
    - Smooths one fingertip's raw positions (EMA) and records a bounded history
    - History is sampled at most once per debounce_ms
    - After idle_ms without a new sample, render() drops the oldest point
      every DECAY_EVERY_N_FRAMES rendered frames
    """
    def __init__(self, max_length: int, color, debounce_ms: float, idle_ms: float,
                 smoothing_factor: float = 0.3, stroke_width: int = 4):
        if max_length <= 0:
            raise ValueError(f"max_length must be positive, got {max_length}")
        self.max_length = max_length
        self.color = color
        self.debounce_ms = debounce_ms
        self.idle_ms = idle_ms
        self.smoothing_factor = smoothing_factor
        self.stroke_width = stroke_width

        self.history = deque()
        self.current = None
        self.last_recorded_time = None

    def update(self, raw: Point, now: float):
        if self.current is None:
            self.current = raw.copy()
        else:
            self.current.x = lerp(self.current.x, raw.x, self.smoothing_factor)
            self.current.y = lerp(self.current.y, raw.y, self.smoothing_factor)

        if self.last_recorded_time is None or now - self.last_recorded_time >= self.debounce_ms:
            self.history.append(self.current.copy())
            self.last_recorded_time = now
            while len(self.history) > self.max_length:
                self.history.popleft()

    def is_idle(self, now: float) -> bool:
        if self.last_recorded_time is None:
            return False
        return now - self.last_recorded_time > self.idle_ms

    def render(self, canvas, now: float, frame_index: int):
        """
        Decays while idle, then draws onto canvas.
        canvas needs line(p1, p2, color, width) and bezier(p1, cp1, cp2, p2, color, width).
        """
        if self.history and self.is_idle(now) and frame_index % DECAY_EVERY_N_FRAMES == 0:
            self.history.popleft()

        if len(self.history) < 2:
            return

        if len(self.history) == 2:
            canvas.line(self.history[0], self.history[1], self.color, self.stroke_width)
            return

        for p1, cp1, cp2, p2 in bezier_segments(list(self.history)):
            canvas.bezier(p1, cp1, cp2, p2, self.color, self.stroke_width)
