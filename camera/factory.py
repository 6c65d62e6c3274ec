from camera.activation import DeviceActivation, DevicePower
from camera.session import CameraSession
from camera.video_task import DEFAULT_FRAME_RATE
from detectors import BodyDetector, CombinedDetector, Detector, HandCoordinateDetector, MotionDetector


def create_activation(config: dict) -> DeviceActivation:
    """Build an activation gate whose power switch follows config."""
    act_cfg = config.get("camera", {}).get("activation", {})
    return DeviceActivation(
        DevicePower(
            fault_injection=act_cfg.get("fault_injection", True),
            failures=act_cfg.get("failures", 1),
        )
    )


def create_detector(config: dict) -> Detector:
    """
    Factory function that returns the combined detector described by config.
    """
    det_cfg   = config.get("detection", {})
    hand_cfg  = det_cfg.get("hand", {})
    verbose   = config.get("debug", {}).get("print_detections", True)
    names     = det_cfg.get("detectors", ["body", "motion", "hand"])

    members = []
    for name in names:
        name = name.lower()
        if name == "body":
            members.append(BodyDetector())
        elif name == "motion":
            members.append(MotionDetector())
        elif name == "hand":
            members.append(HandCoordinateDetector(
                model=hand_cfg.get("model", "ModelXYZ"),
                gesture_type=hand_cfg.get("gesture_type", "Gesture"),
            ))
        else:
            raise ValueError(f"Unknown detector: '{name}'. Valid options: body, motion, hand")

    combined = CombinedDetector(members, mode=det_cfg.get("combine", "all"))
    for d in [combined, *members]:
        d.verbose = verbose
    return combined


def create_session(config: dict, activation: DeviceActivation | None = None) -> CameraSession:
    """
    Build a CameraSession from config. Pass `activation` to share one gate
    between sessions; otherwise the process-wide gate is used.
    """
    video_cfg = config.get("camera", {}).get("video", {})
    det_cfg   = config.get("detection", {})
    return CameraSession(
        detector=create_detector(config),
        activation=activation,
        default_frame_rate=video_cfg.get("frame_rate", DEFAULT_FRAME_RATE),
        poll_interval=det_cfg.get("poll_interval", 0.05),
    )
