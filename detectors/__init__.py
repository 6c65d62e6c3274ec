from detectors.detector_base import Detector, HandDetector
from detectors.body          import BodyDetector
from detectors.motion        import MotionDetector
from detectors.hands         import HandCoordinateDetector
from detectors.combined      import CombinedDetector

__all__ = [
    "Detector",
    "HandDetector",
    "BodyDetector",
    "MotionDetector",
    "HandCoordinateDetector",
    "CombinedDetector",
]
