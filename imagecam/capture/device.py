"""
Camera access.

The shell only needs "open device N, give me the latest frame, release it";
OpenCV provides that for webcams on every platform.
"""
from abc import ABC, abstractmethod
from typing import Optional

import cv2
import numpy as np
from loguru import logger


class CaptureError(Exception):
    """Camera or snapshot failure, shown to the user as-is."""
    title = "Camera Error"


class CaptureDevice(ABC):
    """Source of BGR frames (``numpy`` arrays of shape (h, w, 3))."""

    @property
    @abstractmethod
    def is_open(self) -> bool:
        pass

    @abstractmethod
    def open(self) -> None:
        """Start the device; raises CaptureError if it cannot be opened."""
        pass

    @abstractmethod
    def read_frame(self) -> Optional[np.ndarray]:
        """Latest frame, or None if the device has nothing to give."""
        pass

    @abstractmethod
    def close(self) -> None:
        pass


class OpenCVCaptureDevice(CaptureDevice):
    def __init__(self, index: int = 0):
        self.index = index
        self._cap: Optional[cv2.VideoCapture] = None

    @property
    def is_open(self) -> bool:
        return self._cap is not None and self._cap.isOpened()

    def open(self) -> None:
        if self.is_open:
            return
        cap = cv2.VideoCapture(self.index)
        if not cap.isOpened():
            cap.release()
            raise CaptureError(f"No camera available at index {self.index}.")
        self._cap = cap
        logger.info(f"Camera {self.index} opened")

    def read_frame(self) -> Optional[np.ndarray]:
        if not self.is_open:
            return None
        ok, frame = self._cap.read()
        if not ok:
            return None
        return frame

    def close(self) -> None:
        if self._cap is not None:
            self._cap.release()
            self._cap = None
            logger.info(f"Camera {self.index} released")
