from .device import CaptureDevice, CaptureError, OpenCVCaptureDevice
from .snapshot import save_snapshot, snapshot_file_name

__all__ = ["CaptureDevice", "CaptureError", "OpenCVCaptureDevice", "save_snapshot", "snapshot_file_name"]
