import threading
from dataclasses import dataclass
from typing import Callable, Optional

from camera.errors import InterruptedWait, InvalidState

DEFAULT_FRAME_RATE = 30

# How often a blocked join() looks at its interrupt event
JOIN_POLL_SECONDS = 0.05


@dataclass(frozen=True)
class VideoConfig:
    width: int
    height: int
    frame_rate: int = DEFAULT_FRAME_RATE

    def __post_init__(self):
        for field in ("width", "height", "frame_rate"):
            if getattr(self, field) <= 0:
                raise ValueError(f"VideoConfig.{field} must be positive, got {getattr(self, field)}")

    @classmethod
    def from_values(cls, values: tuple, default_frame_rate: int = DEFAULT_FRAME_RATE) -> "VideoConfig":
        """Accepts (width, height) or (width, height, frame_rate)."""
        if len(values) == 2:
            width, height = values
            return cls(int(width), int(height), default_frame_rate)
        if len(values) == 3:
            width, height, frame_rate = values
            return cls(int(width), int(height), int(frame_rate))
        raise ValueError(f"Expected (width, height[, frame_rate]), got {values!r}")


def idle_stream(config: VideoConfig, cancelled: threading.Event) -> None:
    """Placeholder stream: no frames are encoded, returns immediately."""
    return None


class VideoTask:
    """
    Independent video capture stream running on its own thread.

    `stream(config, cancelled)` is the unit of work. It should return when
    `cancelled` is set; the default one returns straight away, so callers
    must not assume the task stays alive for any length of time.
    """

    def __init__(self, stream: Optional[Callable[[VideoConfig, threading.Event], None]] = None, name: str = "video"):
        self.stream = stream if stream is not None else idle_stream
        self.name   = name
        self.config: Optional[VideoConfig] = None

        self._lock      = threading.Lock()
        self._cancelled = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self, config: VideoConfig) -> None:
        with self._lock:
            if self._thread is not None:
                raise InvalidState(f"Video task '{self.name}' already started")
            self.config  = config
            self._thread = threading.Thread(
                target=self.stream, args=(config, self._cancelled), name=self.name, daemon=True
            )
        self._thread.start()

    def is_alive(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive()

    def cancel(self) -> None:
        self._cancelled.set()

    def join(self, interrupt: Optional[threading.Event] = None) -> None:
        """
        Block until the stream has finished. Returns at once if it was never
        started or already finished.

        Raises InterruptedWait if `interrupt` gets set, or the caller receives
        KeyboardInterrupt, while still waiting.
        """
        thread = self._thread
        if thread is None:
            return
        try:
            while thread.is_alive():
                if interrupt is not None and interrupt.is_set():
                    raise InterruptedWait(f"Join on video task '{self.name}' was interrupted")
                thread.join(JOIN_POLL_SECONDS)
        except KeyboardInterrupt as exc:
            raise InterruptedWait(f"Join on video task '{self.name}' was interrupted") from exc
