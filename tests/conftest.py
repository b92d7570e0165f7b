"""Shared fixtures for fingertrail tests."""
import pytest

from fingertrail.detection import HandDetection, Keypoint, INDEX_TIP


class RecordingCanvas:
    """Drawing surface that records calls instead of drawing."""

    def __init__(self):
        self.calls = []

    def line(self, p1, p2, color, width):
        self.calls.append(("line", (p1, p2), color, width))

    def bezier(self, p1, cp1, cp2, p2, color, width):
        self.calls.append(("bezier", (p1, cp1, cp2, p2), color, width))

    def image_centered(self, overlay):
        self.calls.append(("image", overlay))

    def kinds(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def canvas():
    return RecordingCanvas()


def make_hand(x, y, handedness="Left", confidence=0.9):
    """21-keypoint hand with the index tip at (x, y)."""
    keypoints = [Keypoint(0.0, 0.0) for _ in range(21)]
    keypoints[INDEX_TIP] = Keypoint(x, y)
    return HandDetection(confidence=confidence, handedness=handedness, keypoints=keypoints)


@pytest.fixture
def hand():
    return make_hand
