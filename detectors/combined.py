from detectors.detector_base import Detector
from state.schema import CombineMode


class CombinedDetector(Detector):
    """
    Runs every member detector on each pass and merges their answers.

    All members are always evaluated (no short-circuit) so each one sees
    every frame, the same way the frame loop runs every detector before
    merging outputs.

    mode:
        all: detected only when every member detected
        any: detected when at least one member detected
    """

    def __init__(self, detectors: list[Detector], mode: CombineMode = CombineMode.ALL):
        if not detectors:
            raise ValueError("CombinedDetector needs at least one detector")
        self.detectors = list(detectors)
        self.mode = CombineMode(mode)

    def detect(self) -> bool:
        self._say("Combined detection logic.")
        results = [d.detect() for d in self.detectors]
        if self.mode == CombineMode.ANY:
            return any(results)
        return all(results)

    def release(self) -> None:
        for d in self.detectors:
            d.release()
