from detectors.detector_base import Detector


class BodyDetector(Detector):
    """Stub body detector. Always reports a body in frame."""

    def detect(self) -> bool:
        self._say("Body detected.")
        return True
