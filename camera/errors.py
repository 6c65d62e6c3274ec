class CameraError(Exception):
    """Base class for every failure raised by the camera core."""

    kind = "CameraError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __repr__(self):
        return f"{type(self).__name__}(kind={self.kind!r}, message={self.message!r})"


class StartupFailure(CameraError):
    """The device power-on side effect reported a failure."""
    kind = "StartupFailure"


class InvalidState(CameraError):
    """An operation was invoked on a task in an incompatible lifecycle state."""
    kind = "InvalidState"


class InterruptedWait(CameraError):
    """A blocking wait was interrupted before the awaited work finished."""
    kind = "InterruptedWait"


class DetectionError(CameraError):
    """A detector could not produce a reading."""
    kind = "DetectionError"
