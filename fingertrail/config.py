from dataclasses import dataclass

@dataclass(frozen=True)
class Config:
    # Paths
    model_task_path: str = "hand_landmarker.task"
    overlay_path: str = "assets/easterEgg.png"

    # Camera
    cam_index: int = 0
    cam_width: int = 640
    cam_height: int = 480
    cam_buffer_size: int = 1  # ignored by some backends

    # Detection
    num_hands: int = 2
    detect_every_n: int = 1
    min_confidence: float = 0.1
    strict_handedness: bool = False

    # Trail
    trail_max_length: int = 100
    debounce_ms: float = 100.0
    idle_ms: float = 3000.0
    stroke_width: int = 4
    left_color: tuple = (0, 255, 0)   # BGR
    right_color: tuple = (255, 0, 0)

    # Easter egg
    easter_egg_threshold: float = 100.0

    # UI
    background: tuple = (254, 254, 254)
    show_video: bool = False
    window_main: str = "FingerTrail (SPACE/ESC)"


CFG = Config()
