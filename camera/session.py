import itertools
import threading
from typing import Callable, Optional

from camera.activation import DeviceActivation, get_device_activation
from camera.detection_task import DetectionTask
from camera.errors import InvalidState, StartupFailure
from camera.video_task import DEFAULT_FRAME_RATE, VideoConfig, VideoTask
from detectors import BodyDetector, CombinedDetector, Detector, HandCoordinateDetector, MotionDetector

_session_ids = itertools.count(1)


def default_detector() -> Detector:
    return CombinedDetector([BodyDetector(), MotionDetector(), HandCoordinateDetector()])


class CameraSession:
    """
    Public handle for one logical camera.

    Construction asks the shared activation gate to switch the device on.
    A startup failure at that point is logged and otherwise ignored: the
    session is always created and its detection loop is always started.
    An explicit turn_on() goes through the same gate but raises.

    Owns exactly one current DetectionTask and at most one VideoTask.
    """

    def __init__(
        self,
        detector: Optional[Detector] = None,
        activation: Optional[DeviceActivation] = None,
        video_stream: Optional[Callable] = None,
        default_frame_rate: int = DEFAULT_FRAME_RATE,
        poll_interval: float = 0.05,
    ):
        self.id = next(_session_ids)
        self.detector           = detector if detector is not None else default_detector()
        self.activation         = activation if activation is not None else get_device_activation()
        self.video_stream       = video_stream
        self.default_frame_rate = default_frame_rate
        self.poll_interval      = poll_interval

        self._lock = threading.Lock()
        self._detection_task: Optional[DetectionTask] = None
        self._video_task: Optional[VideoTask] = None

        self._activate_quietly()
        self._spawn_detection()

    # ── Activation ───────────────────────────────────────────────────────────

    def _activate_quietly(self) -> None:
        try:
            self._activate()
        except StartupFailure as exc:
            print(f"[CameraSession {self.id}] Startup failure ignored: {exc.message}")

    def _activate(self) -> None:
        self.activation.activate_once()

    def turn_on(self) -> None:
        """Restart detection and re-check activation. Raises StartupFailure."""
        print(f"[CameraSession {self.id}] Turning on.")
        self._spawn_detection()
        self._activate()

    def turn_off(self) -> None:
        with self._lock:
            task = self._detection_task
        print(f"[CameraSession {self.id}] Camera is OFF.")
        if task is not None:
            task.cancel()

    # ── Detection ────────────────────────────────────────────────────────────

    def _spawn_detection(self) -> DetectionTask:
        task = DetectionTask(
            self.detector, poll_interval=self.poll_interval, name=f"detection-{self.id}"
        )
        # The published task is always already started
        with self._lock:
            previous, self._detection_task = self._detection_task, task
            if previous is not None:
                previous.cancel()
            task.start()
        return task

    @property
    def detection_task(self) -> Optional[DetectionTask]:
        with self._lock:
            return self._detection_task

    def wait_for_detection(self, timeout: Optional[float] = None) -> bool:
        """Block until the current detection task completes (True) or is cancelled (False)."""
        return self.detection_task.wait_for_completion(timeout)

    # ── Video ────────────────────────────────────────────────────────────────

    def start_video(self, width: int, height: int, frame_rate: Optional[int] = None) -> None:
        if frame_rate is None:
            config = VideoConfig.from_values((width, height), self.default_frame_rate)
            print(f"[CameraSession {self.id}] Capturing video with parameters x={width}, y={height}")
        else:
            config = VideoConfig.from_values((width, height, frame_rate))
            print(f"[CameraSession {self.id}] Capturing video with parameters x={width}, y={height}, z={frame_rate}")

        with self._lock:
            if self._video_task is not None and self._video_task.is_alive():
                raise InvalidState(f"Session {self.id} already has a running video stream")
            task = VideoTask(self.video_stream, name=f"video-{self.id}")
            self._video_task = task
        task.start(config)

    @property
    def video_task(self) -> Optional[VideoTask]:
        with self._lock:
            return self._video_task

    def is_video_alive(self) -> bool:
        task = self.video_task
        return task is not None and task.is_alive()

    def join_video(self, interrupt: Optional[threading.Event] = None) -> None:
        """Wait for the video stream to finish. Raises InterruptedWait."""
        task = self.video_task
        if task is None:
            raise InvalidState(f"Session {self.id} has no video stream to join")
        task.join(interrupt)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.turn_off()
