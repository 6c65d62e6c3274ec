import numpy as np

from detectors.detector_base import HandDetector

# Static wrist position reported by the stub model
STUB_X = np.float32(1.245)
STUB_Y = np.float32(1.4567)


class HandCoordinateDetector(HandDetector):
    """
    Stub hand detector for a named gesture model.

    `detect()` always succeeds. Coordinates are fixed float32 values and are
    available even before the first `detect()` call.

    Args:
        model:        name of the hand model, used in log lines.
        detected:     initial detection flag, updated on every `detect()`.
        gesture_type: gesture family the model recognises.
    """

    def __init__(self, model: str = "ModelXYZ", detected: bool = False, gesture_type: str = "Gesture"):
        self.model        = model
        self.detected     = detected
        self.gesture_type = gesture_type

    def detect(self) -> bool:
        self._say(f"{self.model} is detecting a hand.")
        self.detected = True
        return True

    def coordinates_x(self) -> np.float32:
        return STUB_X

    def coordinates_y(self) -> np.float32:
        return STUB_Y
