import threading
import time
from typing import Optional

from camera.errors import DetectionError, InvalidState
from detectors.detector_base import Detector
from state.schema import DetectionResult, TaskState


class DetectionTask:
    """
    Background capture/detection loop with a one-shot completion signal.

    State machine:
        IDLE -> RUNNING -> COMPLETED   (detector reported True)
        IDLE/RUNNING -> CANCELLED      (cancel() before completion)

    The state, the DetectionResult and the wake-up all live behind one
    Condition. Waiters loop on the predicate and every transition into a
    terminal state uses notify_all(), so any number of waiters are released.
    """

    def __init__(self, detector: Detector, poll_interval: float = 0.05, name: str = "detection"):
        self.detector      = detector
        self.poll_interval = poll_interval
        self.name          = name

        self._cond   = threading.Condition()
        self._state  = TaskState.IDLE
        self._result = DetectionResult()
        self._cancel_requested = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def state(self) -> TaskState:
        with self._cond:
            return self._state

    @property
    def result(self) -> DetectionResult:
        with self._cond:
            return DetectionResult(self._result.completed, self._result.timestamp)

    def start(self) -> None:
        with self._cond:
            if self._state != TaskState.IDLE:
                raise InvalidState(f"Detection task '{self.name}' cannot start from state {self._state.value}")
            self._state = TaskState.RUNNING
            self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()

    def wait_for_completion(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the task reaches a terminal state.

        Returns True once detection completed, False if the task was
        cancelled first (or the timeout ran out).
        """
        with self._cond:
            self._cond.wait_for(self._is_terminal, timeout=timeout)
            return self._result.completed

    def cancel(self) -> None:
        self._cancel_requested.set()
        with self._cond:
            if self._is_terminal():
                return
            self._state = TaskState.CANCELLED
            self._cond.notify_all()
        print(f"[DetectionTask] '{self.name}' cancelled.")

    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _is_terminal(self) -> bool:
        return self._state in (TaskState.COMPLETED, TaskState.CANCELLED)

    def _run(self) -> None:
        try:
            self._loop()
        finally:
            # Waiters are released however the loop ends; no-op after completion
            self.cancel()

    def _loop(self) -> None:
        while not self._cancel_requested.is_set():
            print("[DetectionTask] Capturing image or video frame...")
            try:
                detected = self.detector.detect()
            except DetectionError as exc:
                print(f"[DetectionTask] Detection failed: {exc.message}")
                return

            if detected:
                self._publish()
                return

            self._cancel_requested.wait(self.poll_interval)

    def _publish(self) -> None:
        with self._cond:
            # A late result after cancel() is dropped
            if self._state != TaskState.RUNNING:
                return
            self._result.completed = True
            self._result.timestamp = time.time()
            self._state = TaskState.COMPLETED
            self._cond.notify_all()
        print("[DetectionTask] Combined detection result: Detected.")
