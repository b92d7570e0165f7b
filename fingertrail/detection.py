from dataclasses import dataclass, field
from typing import List

# MediaPipe hand landmark indices
TIP_IDS = {"thumb": 4, "index": 8, "middle": 12, "ring": 16, "pinky": 20}
INDEX_TIP = TIP_IDS["index"]


@dataclass(frozen=True)
class Keypoint:
    x: float
    y: float


@dataclass(frozen=True)
class HandDetection:
    """One hand in one frame. keypoints are in canvas pixels."""
    confidence: float
    handedness: str
    keypoints: List[Keypoint] = field(default_factory=list)
