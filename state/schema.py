from dataclasses import dataclass
from enum import Enum

import numpy as np


class TaskState(str, Enum):
    IDLE      = "idle"
    RUNNING   = "running"
    COMPLETED = "completed"   # terminal
    CANCELLED = "cancelled"   # terminal


class CombineMode(str, Enum):
    ALL = "all"
    ANY = "any"


@dataclass(frozen=True)
class HandDetectionCoordinates:
    """Immutable snapshot of one hand position reading."""
    x: np.float32
    y: np.float32


class DetectionResult:
    """Completion record owned by a single DetectionTask."""

    def __init__(self, completed: bool = False, timestamp: float | None = None):
        self.completed = completed
        self.timestamp = timestamp   # time.time() at publish, None while pending

    def __repr__(self):
        return f"DetectionResult(completed={self.completed}, timestamp={self.timestamp})"
