"""
Live camera preview.
"""
from typing import Optional

import cv2
import numpy as np
from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QImage, QPixmap
from PySide6.QtWidgets import QLabel, QSizePolicy
from loguru import logger

from ...capture import CaptureDevice, CaptureError


class CameraView(QLabel):
    """
    Polls a CaptureDevice on a timer and shows the latest frame.

    ``latest_frame`` is a copy of the last BGR frame shown, which is what a
    snapshot saves.
    """
    frameAvailabilityChanged = Signal(bool)

    def __init__(self, device: Optional[CaptureDevice], interval_ms: int = 33, parent=None):
        super().__init__(parent)
        self.device = device
        self.setAlignment(Qt.AlignCenter)
        self.setMinimumSize(320, 240)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setStyleSheet("background-color: #1e1e1e;")

        self._latest_frame: Optional[np.ndarray] = None
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self.poll)

        self.set_placeholder("No camera")

    @property
    def latest_frame(self) -> Optional[np.ndarray]:
        return self._latest_frame

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    def set_placeholder(self, text: str):
        self.clear()
        self.setText(text)

    def start(self) -> bool:
        """Open the device and begin polling; False when there is no camera."""
        if self.device is None:
            return False
        try:
            self.device.open()
        except CaptureError as e:
            logger.warning(f"Camera unavailable: {e}")
            self.set_placeholder(str(e))
            return False
        self.set_placeholder("Starting camera...")
        self._timer.start()
        return True

    def stop(self):
        self._timer.stop()
        if self.device is not None:
            self.device.close()
        self._set_frame(None)
        self.set_placeholder("Camera stopped")

    def poll(self):
        frame = self.device.read_frame() if self.device is not None else None
        self._set_frame(frame)
        if frame is not None:
            self.setPixmap(self._to_pixmap(frame))

    def _set_frame(self, frame: Optional[np.ndarray]):
        had_frame = self._latest_frame is not None
        self._latest_frame = None if frame is None else frame.copy()
        if had_frame != (frame is not None):
            self.frameAvailabilityChanged.emit(frame is not None)

    def _to_pixmap(self, frame: np.ndarray) -> QPixmap:
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        h, w, ch = rgb.shape
        image = QImage(rgb.data, w, h, ch * w, QImage.Format_RGB888)
        pixmap = QPixmap.fromImage(image)
        if self.size().isEmpty():
            return pixmap
        return pixmap.scaled(self.size(), Qt.KeepAspectRatio, Qt.SmoothTransformation)
