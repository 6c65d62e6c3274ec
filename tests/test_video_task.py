import threading

import pytest

from camera.errors import InterruptedWait, InvalidState
from camera.video_task import DEFAULT_FRAME_RATE, VideoConfig, VideoTask
from conftest import WAIT_TIMEOUT


def held_stream(release: threading.Event):
    """Stream that runs until `release` or cancellation."""
    def stream(config, cancelled):
        while not (release.is_set() or cancelled.is_set()):
            cancelled.wait(0.005)
    return stream


def test_config_accepts_two_or_three_values():
    assert VideoConfig.from_values((1280, 720)) == VideoConfig(1280, 720, DEFAULT_FRAME_RATE)
    assert VideoConfig.from_values((1280, 720), default_frame_rate=25).frame_rate == 25
    assert VideoConfig.from_values((1920, 1080, 60)) == VideoConfig(1920, 1080, 60)


@pytest.mark.parametrize("values", [(1920,), (1, 2, 3, 4), (0, 720), (1280, -1), (1280, 720, 0)])
def test_config_rejects_bad_values(values):
    with pytest.raises(ValueError):
        VideoConfig.from_values(values)


def test_not_alive_before_start():
    task = VideoTask()
    assert task.is_alive() is False
    task.join()


def test_default_stream_finishes_and_join_returns():
    task = VideoTask()
    task.start(VideoConfig(1920, 1080, 30))
    task.join()
    assert task.is_alive() is False
    assert task.config == VideoConfig(1920, 1080, 30)


def test_join_after_finish_does_not_hang():
    task = VideoTask()
    task.start(VideoConfig(640, 480))
    threading.Event().wait(0.05)
    assert task.is_alive() is False

    done = threading.Event()
    joiner = threading.Thread(target=lambda: (task.join(), done.set()), daemon=True)
    joiner.start()
    assert done.wait(WAIT_TIMEOUT)


def test_alive_while_streaming_then_joined():
    release = threading.Event()
    task = VideoTask(held_stream(release))
    task.start(VideoConfig(1280, 720))

    assert task.is_alive() is True
    release.set()
    task.join()
    assert task.is_alive() is False


def test_cancel_stops_stream():
    task = VideoTask(held_stream(threading.Event()))
    task.start(VideoConfig(1280, 720))
    task.cancel()
    task.join()
    assert task.is_alive() is False


def test_interrupted_join_is_surfaced():
    release = threading.Event()
    task = VideoTask(held_stream(release))
    task.start(VideoConfig(1280, 720))

    interrupt = threading.Event()
    interrupt.set()
    with pytest.raises(InterruptedWait) as info:
        task.join(interrupt)
    assert info.value.kind == "InterruptedWait"
    assert task.is_alive() is True

    release.set()
    task.join()


def test_keyboard_interrupt_during_join_becomes_interrupted_wait(monkeypatch):
    release = threading.Event()
    task = VideoTask(held_stream(release))
    task.start(VideoConfig(1280, 720))

    def interrupted_join(self, timeout=None):
        raise KeyboardInterrupt

    monkeypatch.setattr(threading.Thread, "join", interrupted_join)
    with pytest.raises(InterruptedWait):
        task.join()
    monkeypatch.undo()

    release.set()
    task.join()


def test_second_start_raises_invalid_state():
    task = VideoTask()
    task.start(VideoConfig(1280, 720))
    with pytest.raises(InvalidState):
        task.start(VideoConfig(1280, 720))
    task.join()
