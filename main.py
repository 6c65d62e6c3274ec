"""
cam-sentry: demo entry point

Opens two camera sessions on the shared device, starts a video stream on
each, waits for detection, exercises the explicit turn-on fault path and
finally joins the streams.

Usage:
    python main.py
    python main.py --config path/to/config.yaml
"""

import argparse
import yaml

from camera.errors    import CameraError, StartupFailure
from camera.factory   import create_activation, create_session
from detectors        import HandCoordinateDetector


def load_config(path: str = "config.yaml") -> dict:
    with open(path) as f:
        return yaml.safe_load(f) or {}


def main():
    parser = argparse.ArgumentParser(description="cam-sentry: camera session demo")
    parser.add_argument("--config", default="config.yaml", help="Path to config YAML")
    args = parser.parse_args()

    config    = load_config(args.config)
    video_cfg = config.get("camera", {}).get("video", {})
    hand_cfg  = config.get("detection", {}).get("hand", {})

    # ── Build components ────────────────────────────────────────────────────
    activation = create_activation(config)
    camera1 = create_session(config, activation=activation)
    camera2 = create_session(config, activation=activation)

    print("\n[main] Starting. Press Ctrl+C to quit.\n")

    try:
        camera1.start_video(
            video_cfg.get("width", 1920),
            video_cfg.get("height", 1080),
            video_cfg.get("frame_rate", 30),
        )
        camera1.wait_for_detection()
        print(f"[main] camera 1 is alive? {camera1.is_video_alive()}")
        camera1.turn_off()

        try:
            camera2.turn_on()
        except StartupFailure as e:
            print(f"[main] StartupFailure caught: {e.message}")

        camera2.start_video(1280, 720)
        camera2.wait_for_detection()
        print(f"[main] camera 2 is alive? {camera2.is_video_alive()}")
        camera2.turn_off()

        hand = HandCoordinateDetector(
            model=hand_cfg.get("model", "ModelXYZ"),
            detected=True,
            gesture_type=hand_cfg.get("gesture_type", "Gesture"),
        )
        hand.detect()
        print(f"[main] Coordinates X: {hand.coordinates_x()}")
        print(f"[main] Coordinates Y: {hand.coordinates_y()}")

        camera1.join_video()
        camera2.join_video()

        print(f"[main] camera 1 is alive? {camera1.is_video_alive()}")
        print(f"[main] camera 2 is alive? {camera2.is_video_alive()}")

    except CameraError as e:
        print(f"[main] {e.kind}: {e.message}")

    except KeyboardInterrupt:
        print("\n[main] Interrupted, shutting down.")

    finally:
        for cam in (camera1, camera2):
            cam.turn_off()
            cam.detector.release()
        print("[main] Done.")


if __name__ == "__main__":
    main()
