"""Shared pytest configuration and fixtures for the camera core tests."""

import sys
import threading
from pathlib import Path

import pytest

# Ensure the project root is in the path for imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from camera.activation import DeviceActivation, DevicePower  # noqa: E402
from camera.errors import StartupFailure  # noqa: E402
from detectors.detector_base import Detector  # noqa: E402

# Upper bound for any blocking call in tests, so a regression fails instead of hanging
WAIT_TIMEOUT = 5.0


class GatedDetector(Detector):
    """Reports nothing until `release_detection()` is called."""

    verbose = False

    def __init__(self):
        self.gate = threading.Event()
        self.calls = 0

    def detect(self) -> bool:
        self.calls += 1
        return self.gate.is_set()

    def release_detection(self) -> None:
        self.gate.set()


class SlowPower:
    """Power switch that counts invocations and lingers inside the lock."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = 0
        self._count_lock = threading.Lock()

    def __call__(self) -> None:
        with self._count_lock:
            self.calls += 1
        threading.Event().wait(0.01)
        if self.fail:
            raise StartupFailure("injected")


@pytest.fixture
def gated_detector():
    return GatedDetector()


@pytest.fixture
def failing_activation():
    """Gate whose first power-on attempt fails, like the default device."""
    return DeviceActivation(DevicePower(fault_injection=True, failures=1))


@pytest.fixture
def working_activation():
    return DeviceActivation(DevicePower(fault_injection=False))


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT
