"""
Process-wide device activation gate.

Any number of sessions may ask for the device to be switched on, from any
thread. Only the first request ever reaches the power switch; everybody
else sees the outcome of that attempt:

    succeeded -> activate_once() is a no-op
    failed    -> activate_once() re-raises the recorded StartupFailure

Recovery is caller-driven through retry(), which performs exactly one more
guarded attempt.
"""

import threading
from typing import Callable, Optional

from camera.errors import StartupFailure


class DevicePower:
    """
    Stand-in for the physical power switch.

    While `failures` attempts remain, switching on reports a fault. This is
    deliberate fault injection so callers have to handle startup failure.
    """

    def __init__(self, fault_injection: bool = True, failures: int = 1):
        self.fault_injection = fault_injection
        self.failures_remaining = max(0, failures) if fault_injection else 0
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1
        print("[DevicePower] Camera is ON.")
        if self.failures_remaining > 0:
            self.failures_remaining -= 1
            raise StartupFailure("Camera error: Some error occurred.")


class DeviceActivation:
    """Shared `{activated}` state guarded by a single lock."""

    def __init__(self, power_on: Optional[Callable[[], None]] = None):
        self._lock = threading.Lock()
        self._power_on = power_on if power_on is not None else DevicePower()
        self._activated = False
        self._failure: Optional[StartupFailure] = None
        self.attempts = 0

    @property
    def activated(self) -> bool:
        return self._activated

    @property
    def last_failure(self) -> Optional[StartupFailure]:
        return self._failure

    def activate_once(self) -> None:
        """
        Switch the device on unless some earlier call already tried.
        Raises StartupFailure if the (single) attempt failed.
        """
        with self._lock:
            if self._activated:
                return
            if self._failure is not None:
                raise StartupFailure(self._failure.message)
            self._attempt_locked()

    def retry(self) -> None:
        """Discard a recorded failure and try the power switch once more."""
        with self._lock:
            if self._activated:
                return
            self._failure = None
            self._attempt_locked()

    def _attempt_locked(self) -> None:
        self.attempts += 1
        try:
            self._power_on()
        except StartupFailure as exc:
            self._failure = exc
            print(f"[DeviceActivation] Startup failed: {exc.message}")
            raise
        self._activated = True
        print("[DeviceActivation] Device activated.")


_shared_activation: Optional[DeviceActivation] = None
_shared_lock = threading.Lock()


def get_device_activation() -> DeviceActivation:
    """Return the process-wide gate, creating it on first use."""
    global _shared_activation
    if _shared_activation is None:
        with _shared_lock:
            if _shared_activation is None:
                _shared_activation = DeviceActivation()
    return _shared_activation
