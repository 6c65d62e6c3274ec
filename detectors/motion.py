from detectors.detector_base import Detector


class MotionDetector(Detector):
    """Stub motion detector. Always reports motion."""

    def detect(self) -> bool:
        self._say("Motion detected.")
        return True
