from abc import ABC, abstractmethod

import numpy as np

from state.schema import HandDetectionCoordinates


class Detector(ABC):
    """
    Base class for all detectors.
    Each detector answers a single question about the current frame:
    was its target seen or not. The detection loop combines the answers.
    """

    verbose: bool = True

    @abstractmethod
    def detect(self) -> bool:
        """
        Return True if the target was detected.
        Must not block indefinitely. May raise camera.errors.DetectionError
        when no reading could be taken.
        """
        ...

    def release(self) -> None:
        """Optional cleanup hook."""
        pass

    def _say(self, message: str) -> None:
        if self.verbose:
            print(f"[{type(self).__name__}] {message}")


class HandDetector(Detector):
    """Detector that also reports where the hand is."""

    @abstractmethod
    def coordinates_x(self) -> np.float32:
        ...

    @abstractmethod
    def coordinates_y(self) -> np.float32:
        ...

    def coordinates(self) -> HandDetectionCoordinates:
        return HandDetectionCoordinates(x=self.coordinates_x(), y=self.coordinates_y())
